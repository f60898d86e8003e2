"""File comparison commands."""

from typing import Annotated

import typer
from rich.markup import escape

from fstools.cli.types import load_filesystem_context
from fstools.filesystem.files import FileOperator
from fstools.utils.formatting import print_error, print_success, print_warning

app = typer.Typer(
    help="Inspect files.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def compare(
    first: Annotated[str, typer.Argument(help="First file.")],
    second: Annotated[str, typer.Argument(help="Second file.")],
) -> None:
    """Compare two files byte for byte. Exits with 1 when they differ."""
    operator = FileOperator(load_filesystem_context())

    for path in (first, second):
        if not operator.exists(path):
            print_error(f"File not found: {escape(path)}")
            raise typer.Exit(code=2)

    if operator.same(first, second):
        print_success("Files are identical.")
        return

    print_warning("Files differ.")
    raise typer.Exit(code=1)
