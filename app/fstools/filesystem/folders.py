"""Folder operations with normalized paths and localized failures.

Provides mirroring, creation, deletion and renaming of folders, plus
shortcuts onto the directory scanner for listing their contents.
"""

import logging
import os
import shutil
from pathlib import Path

from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import (
    DestinationExists,
    PreconditionViolation,
    SourceNotFound,
    UnderlyingIOFailure,
)
from fstools.filesystem.models import (
    DEFAULT_EXCLUDE,
    DEFAULT_FILE_EXCLUDE_PATTERNS,
    DEFAULT_FOLDER_EXCLUDE_PATTERNS,
    ScanFilter,
)
from fstools.filesystem.scanner import DirectoryScanner

logger = logging.getLogger(__name__)


class FolderOperator:
    """Creates, mirrors, moves, deletes and lists folders.

    Args:
        context: Shared normalizer, translator and backend.
    """

    def __init__(self, context: FilesystemContext | None = None) -> None:
        self._context = context or FilesystemContext()
        self._scanner = DirectoryScanner(self._context)

    def exists(self, path: str) -> bool:
        """Check whether anything exists at the path."""
        return self._context.backend.exists(self._context.clean(path))

    def create(self, path: str = "", mode: int = 0o777) -> bool:
        """Create a folder and any missing parents.

        Returns:
            True on success, including when the folder already exists.

        Raises:
            UnderlyingIOFailure: If the folder cannot be created.
        """
        path = self._context.clean(path)

        try:
            Path(path).mkdir(mode=mode, parents=True, exist_ok=True)
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_CREATING_FOLDER", path=path, detail=str(e)
            ) from e

        return True

    def copy(self, src: str, dest: str, force: bool = False, delete: bool = False) -> bool:
        """Mirror a folder into another.

        Files are copied when missing at the destination, when the source
        copy is newer, or always with ``force``.

        Args:
            src: Source folder path.
            dest: Destination folder path.
            force: Overwrite destination files regardless of modification times.
            delete: Remove destination entries that are absent from the source.

        Returns:
            True on success.

        Raises:
            SourceNotFound: If the source folder does not exist.
            PreconditionViolation: If one folder contains the other or both are the same.
            UnderlyingIOFailure: If mirroring fails.
        """
        src = self._context.clean(src)
        dest = self._context.clean(dest)

        if not self._context.backend.is_dir(src):
            raise self._context.error(SourceNotFound, "FAILED_FINDING_SOURCE_FOLDER", path=src)

        if self._overlaps(src, dest):
            raise self._context.error(PreconditionViolation, "FOLDER_LOOP", path=dest)

        try:
            if delete and os.path.isdir(dest):
                self._remove_extraneous(src, dest)
            self._mirror(src, dest, force)
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure,
                "FAILED_COPYING_FOLDER",
                path=getattr(e, "filename", None) or src,
                detail=str(e),
            ) from e

        logger.debug("Mirrored %s to %s", src, dest)
        return True

    def delete(self, path: str) -> bool:
        """Delete a folder and everything in it.

        Returns:
            True on success, including when nothing exists at the path.

        Raises:
            PreconditionViolation: If the path is empty, a filesystem root,
                or the configured root path.
            UnderlyingIOFailure: If the removal fails.
        """
        path = self._context.clean(path)

        if self._is_base_folder(path):
            raise self._context.error(PreconditionViolation, "FOLDER_CANNOT_DELETE_ROOT", path=path)

        if not self._context.backend.exists(path):
            return True

        try:
            target = Path(path)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            else:
                target.unlink()
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_DELETING_FOLDER", path=path, detail=str(e)
            ) from e

        logger.debug("Deleted folder %s", path)
        return True

    def move(self, src: str, dest: str, overwrite: bool = False) -> bool:
        """Move (rename) a folder.

        Args:
            src: Source folder path.
            dest: Destination folder path.
            overwrite: Remove an existing destination first.

        Returns:
            True on success.

        Raises:
            SourceNotFound: If the source does not exist.
            PreconditionViolation: If one folder contains the other or both are the same.
            DestinationExists: If the destination exists and overwrite is False.
            UnderlyingIOFailure: If the rename fails.
        """
        src = self._context.clean(src)
        dest = self._context.clean(dest)

        if not self.exists(src):
            raise self._context.error(SourceNotFound, "FAILED_FINDING_SOURCE_FOLDER", path=src)

        if self._overlaps(src, dest):
            raise self._context.error(PreconditionViolation, "FOLDER_LOOP", path=dest)

        if self.exists(dest) and not overwrite:
            raise self._context.error(DestinationExists, "FOLDER_ALREADY_EXISTS", path=dest)

        try:
            if self.exists(dest):
                self.delete(dest)
            shutil.move(src, dest)
        except OSError as e:
            raise self._context.error(
                UnderlyingIOFailure, "FAILED_RENAMING_FOLDER", path=src, detail=str(e)
            ) from e

        logger.debug("Moved folder %s to %s", src, dest)
        return True

    def files(
        self,
        path: str,
        pattern: str = ".",
        recurse: bool | int = False,
        full: bool = False,
        exclude: tuple[str, ...] = DEFAULT_EXCLUDE,
        exclude_patterns: tuple[str, ...] = DEFAULT_FILE_EXCLUDE_PATTERNS,
        natural_sort: bool = True,
    ) -> list[str]:
        """List the files in a folder.

        Raises:
            NotADirectory: If the path is not an existing directory.
        """
        scan_filter = ScanFilter.for_files(
            pattern=pattern,
            recurse=recurse,
            full_path=full,
            exclude=tuple(exclude),
            exclude_patterns=tuple(exclude_patterns),
            natural_sort=natural_sort,
        )
        return self._scanner.list_files(path, scan_filter)

    def folders(
        self,
        path: str,
        pattern: str = ".",
        recurse: bool | int = False,
        full: bool = False,
        exclude: tuple[str, ...] = DEFAULT_EXCLUDE,
        exclude_patterns: tuple[str, ...] = DEFAULT_FOLDER_EXCLUDE_PATTERNS,
        natural_sort: bool = False,
    ) -> list[str]:
        """List the folders in a folder.

        Raises:
            NotADirectory: If the path is not an existing directory.
        """
        scan_filter = ScanFilter.for_folders(
            pattern=pattern,
            recurse=recurse,
            full_path=full,
            exclude=tuple(exclude),
            exclude_patterns=tuple(exclude_patterns),
            natural_sort=natural_sort,
        )
        return self._scanner.list_folders(path, scan_filter)

    def _is_base_folder(self, path: str) -> bool:
        """Return True for paths that must never be deleted."""
        if not path.strip():
            return True
        if Path(path).parent == Path(path):
            return True
        root = self._context.normalizer.root_path
        return bool(root) and Path(path) == Path(self._context.clean(root))

    @staticmethod
    def _overlaps(src: str, dest: str) -> bool:
        """Return True if the paths are the same folder or one contains the other."""
        source = Path(src).resolve()
        target = Path(dest).resolve()
        return source == target or source in target.parents or target in source.parents

    @staticmethod
    def _mirror(src: str, dest: str, force: bool) -> None:
        """Copy the src tree over dest, skipping up-to-date files."""
        os.makedirs(dest, exist_ok=True)
        for dirpath, dirnames, filenames in os.walk(src):
            relative = os.path.relpath(dirpath, src)
            target_dir = dest if relative == "." else os.path.join(dest, relative)

            for name in dirnames:
                source = os.path.join(dirpath, name)
                target = os.path.join(target_dir, name)
                if os.path.islink(source):
                    if not os.path.lexists(target):
                        os.symlink(os.readlink(source), target)
                else:
                    os.makedirs(target, exist_ok=True)

            for name in filenames:
                source = os.path.join(dirpath, name)
                target = os.path.join(target_dir, name)
                if force or not os.path.exists(target) or (
                    os.path.getmtime(source) > os.path.getmtime(target)
                ):
                    shutil.copy2(source, target)

    @staticmethod
    def _remove_extraneous(src: str, dest: str) -> None:
        """Remove entries of dest that have no counterpart in src."""
        for dirpath, dirnames, filenames in os.walk(dest, topdown=False):
            relative = os.path.relpath(dirpath, dest)
            source_dir = src if relative == "." else os.path.join(src, relative)

            for name in filenames:
                if not os.path.lexists(os.path.join(source_dir, name)):
                    os.unlink(os.path.join(dirpath, name))

            for name in dirnames:
                target = os.path.join(dirpath, name)
                if os.path.lexists(os.path.join(source_dir, name)):
                    continue
                if os.path.islink(target):
                    os.unlink(target)
                else:
                    shutil.rmtree(target)
