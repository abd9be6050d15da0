"""Shared fixtures for the plugin tests."""

from pathlib import Path

import pytest
import structlog

from vela_openssh.filesystem import BasePathFileSystem


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a CLI test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def empty_fs(tmp_path: Path) -> BasePathFileSystem:
    """Filesystem rooted in tmp_path with nothing installed."""
    return BasePathFileSystem(tmp_path)


@pytest.fixture
def mock_fs(empty_fs: BasePathFileSystem) -> BasePathFileSystem:
    """Filesystem with scp, ssh and sshpass installed in /usr/bin."""
    empty_fs.touch("/usr/bin/scp", "/usr/bin/ssh", "/usr/bin/sshpass")
    return empty_fs
