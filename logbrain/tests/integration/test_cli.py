"""
Integration tests for the command line interface
"""

import pytest
from click.testing import CliRunner
from logbrain.__main__ import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def log_file(tmp_path, user_logs):
    path = tmp_path / "user.log"
    path.write_text("\n".join(user_logs) + "\n", encoding="utf-8")
    return path


class TestParseCommand:
    """Test the parse command"""

    def test_parse_prints_templates(self, runner, log_file):
        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-p', r'\d+', '-w', '0.5'])

        assert result.exit_code == 0, result.output
        assert "Processing 4 log entries" in result.output
        assert "User <*> login" in result.output
        assert "System failure disk" in result.output
        assert "3 templates in 1 length groups" in result.output

    def test_parse_lists_line_ids(self, runner, log_file):
        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-p', r'\d+', '--limit', '1'])

        assert result.exit_code == 0, result.output
        assert "lines: 0, ..." in result.output

    def test_parse_with_config(self, runner, log_file, settings_file):
        config = settings_file('{"patterns": ["\\\\d+"], "wildcard": "<VAR>"}')

        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-c', str(config)])

        assert result.exit_code == 0, result.output
        assert "User <VAR> login" in result.output

    def test_missing_input_file(self, runner, tmp_path):
        result = runner.invoke(cli, ['parse', '-i', str(tmp_path / "nope.log")])

        assert result.exit_code == 1
        assert "Input file not found" in result.output

    def test_invalid_pattern(self, runner, log_file):
        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-p', '(bad'])

        assert result.exit_code == 1
        assert "Invalid masking pattern" in result.output
        assert "(bad" in result.output
        assert "Processing" not in result.output

    def test_weight_out_of_range(self, runner, log_file):
        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-w', '2'])

        assert result.exit_code == 1
        assert "weight must be between 0 and 1" in result.output

    def test_non_list_patterns_in_config(self, runner, log_file, settings_file):
        config = settings_file('{"patterns": null}')

        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-c', str(config)])

        assert result.exit_code == 1
        assert "patterns must be a list of strings" in result.output

    def test_bad_config(self, runner, log_file, settings_file):
        config = settings_file('{"unknown": 1}')

        result = runner.invoke(cli, ['parse', '-i', str(log_file), '-c', str(config)])

        assert result.exit_code == 1
        assert "Unknown settings" in result.output


class TestVectorizeCommand:
    """Test the vectorize command"""

    def test_vectorize_prints_counts(self, runner, log_file):
        result = runner.invoke(cli, ['vectorize', '-i', str(log_file), '-p', r'\d+'])

        assert result.exit_code == 0, result.output
        assert "Length 3" in result.output
        assert "User" in result.output
        assert "failure" in result.output


def test_version(runner):
    result = runner.invoke(cli, ['--version'])

    assert result.exit_code == 0
    assert "1.0.0" in result.output
