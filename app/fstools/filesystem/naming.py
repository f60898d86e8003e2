"""File name helpers.

Pure string functions for splitting names, extensions and directory
parts, and for turning arbitrary input into a safe file name.
"""

import re

_LAST_EXTENSION = re.compile(r"\.[^.]*$")

# Applied in order: dot runs, disallowed characters, a leading dot
_UNSAFE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\.){2,}"),
    re.compile(r"[^A-Za-z0-9._\- ]"),
    re.compile(r"^\."),
)
_SPACE_OR_UNDERSCORE = re.compile(r"[ _]")
_DASH_RUN = re.compile(r"-+")


def get_ext(file: str) -> str:
    """Return the extension after the last dot, or "" when there is none."""
    dot = file.rfind(".")
    if dot == -1:
        return ""
    return file[dot + 1 :]


def strip_ext(file: str) -> str:
    """Strip the last extension off a file name."""
    return _LAST_EXTENSION.sub("", file)


def get_name(file: str) -> str:
    """Return the last path component, accepting either separator."""
    file = file.replace("\\", "/")
    return file.rsplit("/", 1)[-1]


def get_path(file: str) -> str:
    """Return everything before the last "/" ("" for a bare name)."""
    parts = file.split("/")
    return "/".join(parts[:-1])


def get_stripped_name(file: str) -> str:
    """Return the name without its directory or last extension."""
    return strip_ext(get_name(file))


def make_safe(file: str) -> str:
    """Make a bare file name safe to use.

    Trailing dots are dropped, unsafe characters become spaces, and
    spaces and underscores are then folded into single dashes.
    """
    clean = file.rstrip(".")
    for pattern in _UNSAFE_PATTERNS:
        clean = pattern.sub(" ", clean)
    clean = _SPACE_OR_UNDERSCORE.sub("-", clean)
    return _DASH_RUN.sub("-", clean)
