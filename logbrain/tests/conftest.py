"""
Pytest configuration and shared fixtures for LogBrain tests
"""

import pytest
from typing import List


@pytest.fixture
def block_patterns() -> List[str]:
    """Block id, IPv4, bare number - compound patterns first"""
    return [
        r'blk_\d+',
        r'\d+\.\d+\.\d+\.\d+',
        r'\d+',
    ]


@pytest.fixture
def block_logs() -> List[str]:
    return [
        "blk_101 info: Block 101 received from 10.0.0.1",
        "blk_102 info: Block 102 received from 10.0.0.2",
        "blk_103 warn: Connection refused",
    ]


@pytest.fixture
def user_logs() -> List[str]:
    return [
        "User 100 login",
        "User 101 login",
        "System failure disk",
        "Other 102 logout",
    ]


@pytest.fixture
def mixed_logs() -> List[str]:
    """A larger, HDFS-flavoured sample with several shapes"""
    logs = []
    for i in range(20):
        logs.append(f"081109 2035{i:02d} {100 + i} INFO dfs.DataNode: Receiving block blk_{9000 + i} src: /10.250.19.{i}:54106")
        logs.append(f"081109 2036{i:02d} {200 + i} INFO dfs.FSNamesystem: BLOCK* NameSystem.allocateBlock: /user/root/part-{i:05d}")
        if i % 4 == 0:
            logs.append(f"081109 2037{i:02d} {300 + i} WARN dfs.DataNode: Got exception while serving blk_{9000 + i} to /10.250.19.{i}")
    logs.append("")
    logs.append("   ")
    return logs


@pytest.fixture
def settings_file(tmp_path):
    """Write a settings JSON file and return its path"""
    def _write(content: str):
        path = tmp_path / "settings.json"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
