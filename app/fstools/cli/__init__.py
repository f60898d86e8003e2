"""CLI package for fstools.

This package contains the Typer application and all subcommands.
"""

from fstools.cli.main import app

__all__ = ["app"]
