"""Filesystem handles used by the plugin configurations.

The plugins only need a handful of file operations: checking that a binary
exists, creating a temporary file, restricting its permissions and removing
it again. Routing those through a small handle lets tests point a plugin at
a scratch directory instead of the real root filesystem.

Classes:
    - FileSystem: Abstract filesystem handle
    - OsFileSystem: The real OS filesystem
    - BasePathFileSystem: Every logical path mapped below a root directory
"""

import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO


class FileSystem(ABC):
    """Minimal filesystem interface consumed by the plugins."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""
        ...

    @abstractmethod
    def create_temp(self, directory: str, prefix: str) -> tuple[str, BinaryIO]:
        """Create a uniquely named file in ``directory``.

        Args:
            directory: Directory to place the file in.
            prefix: Fixed name prefix, a random suffix is appended.

        Returns:
            Tuple of the file's path and an open binary write handle.
        """
        ...

    @abstractmethod
    def chmod(self, path: str, mode: int) -> None:
        """Set the permission bits of ``path``."""
        ...

    @abstractmethod
    def remove(self, path: str) -> None:
        """Delete ``path``."""
        ...

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Return the full contents of ``path``."""
        ...

    @abstractmethod
    def mode(self, path: str) -> int:
        """Return the permission bits of ``path``."""
        ...


class OsFileSystem(FileSystem):
    """The real OS filesystem."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def create_temp(self, directory: str, prefix: str) -> tuple[str, BinaryIO]:
        fd, name = tempfile.mkstemp(prefix=prefix, dir=directory)
        return name, os.fdopen(fd, "wb")

    def chmod(self, path: str, mode: int) -> None:
        os.chmod(path, mode)

    def remove(self, path: str) -> None:
        os.remove(path)

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def mode(self, path: str) -> int:
        return os.stat(path).st_mode & 0o777


class BasePathFileSystem(FileSystem):
    """Filesystem rooted at a base directory.

    Logical paths such as ``/usr/bin/scp`` or ``./scp`` resolve below
    ``root``, while every path handed back to callers stays logical. A
    plugin pointed at this handle therefore produces the same arguments it
    would on the real filesystem.

    Example:
        fs = BasePathFileSystem(tmp_path)
        fs.touch("/usr/bin/scp")
        fs.exists("/usr/bin/scp")  # True, backed by tmp_path/usr/bin/scp
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def real_path(self, path: str) -> Path:
        """Translate a logical path into its location below the root."""
        relative = os.path.normpath(path).lstrip(os.sep)
        if relative == os.curdir:
            return self.root
        return self.root / relative

    def touch(self, *paths: str) -> None:
        """Create empty files at the given logical paths."""
        for path in paths:
            real = self.real_path(path)
            real.parent.mkdir(parents=True, exist_ok=True)
            real.touch()

    def exists(self, path: str) -> bool:
        return self.real_path(path).exists()

    def create_temp(self, directory: str, prefix: str) -> tuple[str, BinaryIO]:
        real_dir = self.real_path(directory)
        real_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=prefix, dir=real_dir)
        logical = os.path.join(directory, os.path.basename(name))
        return logical, os.fdopen(fd, "wb")

    def chmod(self, path: str, mode: int) -> None:
        os.chmod(self.real_path(path), mode)

    def remove(self, path: str) -> None:
        os.remove(self.real_path(path))

    def read_bytes(self, path: str) -> bytes:
        return self.real_path(path).read_bytes()

    def mode(self, path: str) -> int:
        return self.real_path(path).stat().st_mode & 0o777
