"""Recursive directory scanner with name filtering.

Lists the files or folders below a root directory, applying an
inclusion pattern, an exact-name exclusion list and exclusion regular
expressions, optionally recursing to a bounded depth. Results are
sorted naturally or lexicographically.
"""

import logging
import re

from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.errors import NotADirectory
from fstools.filesystem.models import ScanFilter, TargetKind
from fstools.filesystem.sorting import sort_entries

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


class DirectoryScanner:
    """Enumerates directory entries below a root.

    Unreadable directories met during the walk contribute no entries
    instead of aborting the scan, so a result does not prove that every
    subtree was read.

    Args:
        context: Shared normalizer, translator and backend.
            Defaults to a context over the local filesystem.
    """

    def __init__(self, context: FilesystemContext | None = None) -> None:
        self._context = context or FilesystemContext()

    def list_files(self, root: str, scan_filter: ScanFilter | None = None) -> list[str]:
        """List files below a root directory.

        Args:
            root: Directory to scan.
            scan_filter: Filter configuration. Defaults to ScanFilter.for_files().

        Returns:
            Sorted list of bare names or full paths.

        Raises:
            NotADirectory: If the root is not an existing directory.
        """
        scan_filter = scan_filter or ScanFilter.for_files()
        return self.scan(root, scan_filter.with_target(TargetKind.FILES))

    def list_folders(self, root: str, scan_filter: ScanFilter | None = None) -> list[str]:
        """List folders below a root directory.

        Args:
            root: Directory to scan.
            scan_filter: Filter configuration. Defaults to ScanFilter.for_folders().

        Returns:
            Sorted list of bare names or full paths.

        Raises:
            NotADirectory: If the root is not an existing directory.
        """
        scan_filter = scan_filter or ScanFilter.for_folders()
        return self.scan(root, scan_filter.with_target(TargetKind.FOLDERS))

    def scan(self, root: str, scan_filter: ScanFilter) -> list[str]:
        """Collect entries of the filter's target kind below a root.

        Raises:
            NotADirectory: If the root is not an existing directory.
        """
        path = self._context.clean(root)

        if not self._context.backend.is_dir(path):
            raise self._context.error(NotADirectory, "FOLDER_PATH_IS_NOT_A_FOLDER", path=path)

        results: list[str] = []
        self._scan_directory(
            path,
            scan_filter,
            include=re.compile(scan_filter.pattern),
            exclude=scan_filter.exclude_regex,
            depth=scan_filter.max_depth,
            results=results,
        )

        logger.debug("Scanned %s: %d %s found", path, len(results), scan_filter.target.value)
        return sort_entries(results, natural=scan_filter.natural_sort)

    def _scan_directory(
        self,
        directory: str,
        scan_filter: ScanFilter,
        *,
        include: re.Pattern[str],
        exclude: re.Pattern[str] | None,
        depth: int | None,
        results: list[str],
    ) -> None:
        """Append matching entries of one directory, recursing into subfolders.

        Args:
            directory: Cleaned directory path.
            scan_filter: Filter configuration.
            include: Compiled inclusion pattern.
            exclude: Compiled exclusion alternation, or None.
            depth: Levels left to descend (None means unlimited).
            results: Accumulator shared across the whole walk.
        """
        backend = self._context.backend
        normalizer = self._context.normalizer
        find_files = scan_filter.target == TargetKind.FILES

        try:
            names = list(backend.list_entries(directory))
        except OSError as e:
            logger.debug("Cannot read directory %s: %s", directory, e)
            return

        for name in names:
            if name in _PSEUDO_ENTRIES or name in scan_filter.exclude:
                continue
            if exclude is not None and exclude.search(name):
                continue

            full_path = normalizer.join(directory, name)
            is_dir = backend.is_dir(full_path)

            if (is_dir != find_files) and include.search(name):
                results.append(full_path if scan_filter.full_path else name)

            if is_dir and (depth is None or depth > 0):
                self._scan_directory(
                    full_path,
                    scan_filter,
                    include=include,
                    exclude=exclude,
                    depth=None if depth is None else depth - 1,
                    results=results,
                )
