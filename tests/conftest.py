"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

DIR_LOG_CONTENT = b"log line 01\n"  # 12 bytes
SCRIPT_CONTENT = b"#!/bin/sh\necho ok\n"  # 18 bytes


@pytest.fixture
def testdata(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Create the sample tree and chdir next to it.

    Layout (root returned as the relative path "testdata"):
        testdata/dir.log          12 bytes
        testdata/dir2/script.sh   18 bytes
    """
    root = tmp_path / "testdata"
    (root / "dir2").mkdir(parents=True)
    (root / "dir.log").write_bytes(DIR_LOG_CONTENT)
    (root / "dir2" / "script.sh").write_bytes(SCRIPT_CONTENT)
    monkeypatch.chdir(tmp_path)
    return "testdata"


@pytest.fixture
def make_files(tmp_path: Path) -> Callable[[dict[str, int]], Path]:
    """Return a factory creating a flat directory of dummy files.

    The factory takes a mapping of extension to file count and creates
    ``file<n><ext>`` for each, all containing b"dummy".
    """
    counter = 0

    def _make(files: dict[str, int]) -> Path:
        nonlocal counter
        counter += 1
        directory = tmp_path / f"walktest{counter}"
        directory.mkdir()
        for ext, n in files.items():
            for j in range(1, n + 1):
                (directory / f"file{j}{ext}").write_bytes(b"dummy")
        return directory

    return _make


@pytest.fixture
def isolated_config(tmp_path: Path) -> Iterator[Path]:
    """Point XDG config and state directories at a temporary location.

    Returns:
        The XDG_CONFIG_HOME directory.
    """
    config_home = tmp_path / "xdg-config"
    state_home = tmp_path / "xdg-state"
    with patch.dict(
        os.environ,
        {"XDG_CONFIG_HOME": str(config_home), "XDG_STATE_HOME": str(state_home)},
    ):
        yield config_home
