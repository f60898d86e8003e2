"""File operations with normalized paths and localized failures.

Each operation cleans its path arguments, checks its preconditions,
delegates to the operating system, and re-raises any OSError as an
UnderlyingIOFailure carrying a translated message.
"""

import errno
import logging
import os
import shutil
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import BinaryIO

from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import DestinationExists, SourceNotFound, UnderlyingIOFailure

logger = logging.getLogger(__name__)

# Chunk size for streamed content comparison
_COMPARE_CHUNK_SIZE = 64 * 1024


class FileOperator:
    """Copies, moves, deletes, writes, reads and compares files.

    Args:
        context: Shared normalizer, translator and backend.
    """

    def __init__(self, context: FilesystemContext | None = None) -> None:
        self._context = context or FilesystemContext()

    def exists(self, path: str) -> bool:
        """Check whether a file (or any entry) exists at the path."""
        return self._context.backend.exists(self._context.clean(path))

    def copy(self, src: str, dest: str, force: bool = True) -> bool:
        """Copy a file, creating the destination folder if needed.

        Without ``force``, an existing destination is only overwritten
        when the source was modified more recently.

        Args:
            src: Source file path.
            dest: Destination file path.
            force: Overwrite the destination regardless of modification times.

        Returns:
            True on success.

        Raises:
            SourceNotFound: If the source file does not exist.
            UnderlyingIOFailure: If the copy fails.
        """
        src = self._context.clean(src)
        dest = self._context.clean(dest)

        if not self._context.backend.is_file(src):
            raise self._context.error(SourceNotFound, "FILE_CANNOT_FIND_SOURCE", path=src)

        try:
            Path(dest).parent.mkdir(parents=True, exist_ok=True)

            if not force and self._is_up_to_date(src, dest):
                logger.debug("Skipping copy, %s is not older than %s", dest, src)
                return True

            shutil.copy2(src, dest)
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_COPYING_FILE", path=src, detail=str(e)
            ) from e

        logger.debug("Copied %s to %s", src, dest)
        return True

    def move(self, src: str, dest: str, overwrite: bool = False) -> bool:
        """Move (rename) a file.

        Args:
            src: Source file path.
            dest: Destination file path.
            overwrite: Replace an existing destination.

        Returns:
            True on success.

        Raises:
            SourceNotFound: If the source does not exist.
            DestinationExists: If the destination exists and overwrite is False.
            UnderlyingIOFailure: If the rename fails.
        """
        src = self._context.clean(src)
        dest = self._context.clean(dest)

        if not self.exists(src):
            raise self._context.error(SourceNotFound, "FILE_CANNOT_FIND_SOURCE", path=src)

        if self.exists(dest) and not overwrite:
            raise self._context.error(DestinationExists, "FILE_ALREADY_EXISTS", path=dest)

        try:
            try:
                os.replace(src, dest)
            except OSError as e:
                if e.errno != errno.EXDEV:
                    raise
                # Different filesystems: fall back to copy and remove
                shutil.move(src, dest)
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_RENAMING_FILE", path=src, detail=str(e)
            ) from e

        logger.debug("Moved %s to %s", src, dest)
        return True

    def delete(self, path: str) -> bool:
        """Delete a file, symlink or directory tree.

        A path that does not exist is left alone.

        Returns:
            True on success.

        Raises:
            UnderlyingIOFailure: If the removal fails.
        """
        path = self._context.clean(path)
        target = Path(path)

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                return True
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_DELETING_FILE", path=path, detail=str(e)
            ) from e

        logger.debug("Deleted %s", path)
        return True

    def write(self, path: str, data: str | bytes, encoding: str = "utf-8") -> bool:
        """Write contents to a file atomically.

        Parent folders are created as needed. The data is written to a
        temporary file in the same folder and renamed over the target,
        which keeps the permission bits of the file it replaces.

        Returns:
            True on success.

        Raises:
            UnderlyingIOFailure: If the file cannot be written.
        """
        path = self._context.clean(path)
        target = Path(path)
        payload = data.encode(encoding) if isinstance(data, str) else data

        tmp_path: Path | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile(
                mode="wb",
                dir=target.parent,
                delete=False,
                suffix=".tmp",
            ) as f:
                tmp_path = Path(f.name)
                f.write(payload)
            os.chmod(tmp_path, self._target_mode(path))
            os.replace(str(tmp_path), path)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_WRITING_FILE", path=path, detail=str(e)
            ) from e

        return True

    def read(self, path: str, encoding: str = "utf-8") -> str:
        """Read a text file.

        Returns:
            File contents, or "" if the file does not exist.

        Raises:
            UnderlyingIOFailure: If an existing file cannot be read or decoded.
        """
        content = self.read_bytes(path)
        try:
            return content.decode(encoding)
        except UnicodeDecodeError as e:
            path = self._context.clean(path)
            raise self._context.error(
                UnderlyingIOFailure, "UNABLE_TO_READ_FILE", path=path, detail=str(e)
            ) from e

    def read_bytes(self, path: str) -> bytes:
        """Read a binary file.

        Returns:
            File contents, or b"" if the file does not exist.

        Raises:
            UnderlyingIOFailure: If an existing file cannot be read.
        """
        path = self._context.clean(path)
        backend = self._context.backend

        if not backend.exists(path):
            return b""

        try:
            with backend.open_read(path) as f:
                return f.read()
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "UNABLE_TO_READ_FILE", path=path, detail=str(e)
            ) from e

    def same(self, path1: str, path2: str) -> bool:
        """Check whether two files have exactly the same contents.

        Files that cannot be opened, are of different kinds, or differ
        in size are never the same.
        """
        path1 = self._context.clean(path1)
        path2 = self._context.clean(path2)
        backend = self._context.backend

        if backend.is_dir(path1) != backend.is_dir(path2):
            return False

        try:
            with backend.open_read(path1) as f1, backend.open_read(path2) as f2:
                if self._stream_size(f1) != self._stream_size(f2):
                    return False
                while True:
                    chunk1 = f1.read(_COMPARE_CHUNK_SIZE)
                    chunk2 = f2.read(_COMPARE_CHUNK_SIZE)
                    if chunk1 != chunk2:
                        return False
                    if not chunk1:
                        return True
        except OSError as e:
            logger.debug("Cannot compare %s and %s: %s", path1, path2, e)
            return False

    @staticmethod
    def _stream_size(stream: BinaryIO) -> int:
        """Return a seekable stream's size, leaving it rewound."""
        size = stream.seek(0, os.SEEK_END)
        stream.seek(0)
        return size

    @staticmethod
    def _target_mode(path: str) -> int:
        """Return the permission bits a rewritten file should keep.

        An existing file keeps its own bits; a new one gets the mode
        open() would give it under the current umask.
        """
        try:
            return stat.S_IMODE(os.stat(path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    @staticmethod
    def _is_up_to_date(src: str, dest: str) -> bool:
        """Return True if dest is a file at least as recent as src."""
        if not os.path.isfile(dest):
            return False
        return os.path.getmtime(src) <= os.path.getmtime(dest)
