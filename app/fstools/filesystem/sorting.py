"""Ordering of scan results.

Natural ordering compares runs of digits by numeric value, so
``img2.png`` sorts before ``img10.png``; lexicographic ordering
compares characters, so ``img10.png`` sorts before ``img2.png``.
"""

import re

_DIGIT_RUN = re.compile(r"(\d+)")


def natural_key(value: str) -> tuple[tuple[str | int, ...], str]:
    """Build a sort key comparing embedded numbers by value.

    Splitting on a capturing group alternates text and digit chunks,
    always starting with text, so chunks at the same index share a type.
    The raw value breaks ties such as ``"01"`` and ``"1"``.
    """
    chunks = _DIGIT_RUN.split(value)
    parts: list[str | int] = [int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks)]
    return tuple(parts), value


def sort_entries(entries: list[str], natural: bool = True) -> list[str]:
    """Return entries in natural or lexicographic order."""
    if natural:
        return sorted(entries, key=natural_key)
    return sorted(entries)
