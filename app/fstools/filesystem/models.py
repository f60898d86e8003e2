"""Filesystem domain models for directory scanning.

This module defines the filter configuration consumed by the
directory scanner, together with the default exclusion lists.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

# Entry names never reported by a scan (version control and OS metadata)
DEFAULT_EXCLUDE: tuple[str, ...] = (".svn", "CVS", ".DS_Store", "__MACOSX", "Thumbs.db")

# Hidden entries and editor backups
DEFAULT_FILE_EXCLUDE_PATTERNS: tuple[str, ...] = (r"^\..*", r".*~")

# Hidden folders
DEFAULT_FOLDER_EXCLUDE_PATTERNS: tuple[str, ...] = (r"^\..*",)


class TargetKind(str, Enum):
    """Kind of directory entry a scan collects.

    Attributes:
        FILES: Collect non-directory entries.
        FOLDERS: Collect directories.
    """

    FILES = "files"
    FOLDERS = "folders"


@dataclass(frozen=True, slots=True)
class ScanFilter:
    """Filter configuration for a single directory scan.

    Attributes:
        pattern: Regular expression searched in each bare entry name.
        recurse: False for the root only, True for unlimited recursion,
            or a positive int for the number of levels below the root.
        full_path: Report full paths instead of bare names.
        exclude: Entry names skipped by exact match, with their subtrees.
        exclude_patterns: Regular expressions skipping matching entry names
            (and their subtrees). Joined into a single alternation.
        natural_sort: Order digit runs by value ("file2" before "file10")
            instead of plain lexicographic order.
        target: Whether files or folders are collected.
    """

    pattern: str = "."
    recurse: bool | int = False
    full_path: bool = False
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    exclude_patterns: tuple[str, ...] = DEFAULT_FILE_EXCLUDE_PATTERNS
    natural_sort: bool = True
    target: TargetKind = TargetKind.FILES

    def __post_init__(self) -> None:
        """Validate filter data after initialization."""
        if not isinstance(self.recurse, bool) and self.recurse < 0:
            msg = f"Recursion depth cannot be negative, got {self.recurse}"
            raise ValueError(msg)
        for expression in (self.pattern, *self.exclude_patterns):
            try:
                re.compile(expression)
            except re.error as e:
                msg = f"Invalid regular expression {expression!r}: {e}"
                raise ValueError(msg) from e
        # Patterns valid alone can still break once joined, e.g. inline global flags
        try:
            _ = self.exclude_regex
        except re.error as e:
            msg = f"Invalid regular expression {self._joined_exclusions()!r}: {e}"
            raise ValueError(msg) from e

    @classmethod
    def for_files(cls, **kwargs: object) -> "ScanFilter":
        """Create a filter collecting files, with the file defaults."""
        return cls(**kwargs, target=TargetKind.FILES)  # type: ignore[arg-type]

    @classmethod
    def for_folders(cls, **kwargs: object) -> "ScanFilter":
        """Create a filter collecting folders, with the folder defaults.

        Folders exclude hidden entries only and sort lexicographically
        unless told otherwise.
        """
        kwargs.setdefault("exclude_patterns", DEFAULT_FOLDER_EXCLUDE_PATTERNS)
        kwargs.setdefault("natural_sort", False)
        return cls(**kwargs, target=TargetKind.FOLDERS)  # type: ignore[arg-type]

    def with_target(self, target: TargetKind) -> "ScanFilter":
        """Return a copy of this filter collecting the given kind."""
        if self.target == target:
            return self
        return replace(self, target=target)

    @property
    def max_depth(self) -> int | None:
        """Levels below the root to descend into (None means unlimited)."""
        if self.recurse is True:
            return None
        if self.recurse is False:
            return 0
        return int(self.recurse)

    @property
    def exclude_regex(self) -> re.Pattern[str] | None:
        """Compiled alternation of all exclusion patterns, or None."""
        if not self.exclude_patterns:
            return None
        return re.compile(self._joined_exclusions())

    def _joined_exclusions(self) -> str:
        return "(" + "|".join(self.exclude_patterns) + ")"
