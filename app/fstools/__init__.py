"""fstools - Filesystem utilities with normalized paths and filtered scanning."""

__version__ = "0.1.0"
