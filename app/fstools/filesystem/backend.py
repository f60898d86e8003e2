"""Filesystem capability set consumed by the scanner and operators.

The scanner never touches the OS directly: it asks a backend whether a
path exists, whether it is a directory, which entries a directory holds,
and for a readable stream over a file's bytes.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import BinaryIO


class FilesystemBackend(ABC):
    """Abstract base class for filesystem capability providers.

    Example:
        >>> backend = LocalBackend()
        >>> if backend.is_dir("/tmp"):
        ...     for name in backend.list_entries("/tmp"):
        ...         print(name)
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if the path exists (dead symlinks count as existing)."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if the path is a directory (following symlinks)."""

    @abstractmethod
    def list_entries(self, path: str) -> Iterator[str]:
        """Yield the entry names of a directory in listing order.

        Raises:
            OSError: If the directory cannot be opened.
        """

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """Open a file for binary reading.

        Raises:
            OSError: If the file cannot be opened.
        """

    def is_file(self, path: str) -> bool:
        """Return True if the path exists and is not a directory."""
        return self.exists(path) and not self.is_dir(path)


class LocalBackend(FilesystemBackend):
    """Backend delegating to the local operating system."""

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_entries(self, path: str) -> Iterator[str]:
        # Listed eagerly so the directory handle is closed before callers recurse
        with os.scandir(path) as it:
            names = [entry.name for entry in it]
        yield from names

    def open_read(self, path: str) -> BinaryIO:
        return open(path, "rb")
