"""Path normalization.

Canonicalizes path strings: trims whitespace, substitutes the configured
root path for empty input, collapses separator runs and preserves the
leading pair of a Windows UNC path.
"""

import logging
import os
import re

logger = logging.getLogger(__name__)

# Any run of forward or back slashes
_SEPARATOR_RUN = re.compile(r"[/\\]+")

_UNC_PREFIX = "\\\\"


class PathNormalizer:
    """Cleans raw path input into a single canonical form.

    Args:
        root_path: Path returned when cleaning empty input.
        separator: Canonical separator (defaults to the platform's).
    """

    def __init__(self, root_path: str = "", separator: str = os.sep) -> None:
        self._root_path = root_path
        self._separator = separator

    @property
    def root_path(self) -> str:
        """Path substituted for empty input."""
        return self._root_path

    @property
    def separator(self) -> str:
        """Default canonical separator."""
        return self._separator

    def set_root_path(self, path: str) -> None:
        """Set the path returned when cleaning empty input."""
        self._root_path = path

    def clean(self, path: object, separator: str | None = None) -> str:
        """Strip redundant separators and convert them to one canonical form.

        Args:
            path: Path to clean. Strings and os.PathLike objects are accepted;
                anything else yields an empty string.
            separator: Target separator (defaults to the normalizer's).

        Returns:
            The cleaned path. Empty input yields the configured root path.
        """
        ds = separator or self._separator

        if isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            logger.debug("Cannot clean non-string path of type %s", type(path).__name__)
            return ""

        path = path.strip()

        if not path:
            return self._root_path

        if ds == "\\" and path.startswith(_UNC_PREFIX):
            return "\\" + _SEPARATOR_RUN.sub(lambda _: "\\", path)

        return _SEPARATOR_RUN.sub(lambda _: ds, path)

    def join(self, directory: str, name: str, separator: str | None = None) -> str:
        """Join an entry name onto an already cleaned directory path."""
        ds = separator or self._separator
        base = directory.rstrip("/\\")
        if not base and directory:
            # Filesystem root: "/" + name, not "//" + name
            return ds + name
        return base + ds + name
