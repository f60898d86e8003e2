"""Console styles for fstools output.

Scan listings color entries by kind and messages by severity. Each style
is a Rich style definition such as ``"bold #0e8ac8"``. The bundled
``styles.toml`` provides the defaults; entries in the user's
``styles.toml`` replace them one by one, and an invalid entry is
skipped with a warning instead of discarding the whole file.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from fstools.core.paths import get_styles_path

logger = logging.getLogger(__name__)


class ConsoleStyles(BaseModel):
    """Named Rich styles rendered by the CLI.

    Attributes:
        folder: Folder entries in scan listings.
        file: File entries in scan listings.
        header: Table headers.
        border: Table borders.
        muted: Row numbers, empty values and footers.
        info: Informational messages.
        success: Success messages.
        warning: Warning prefix.
        error: Error prefix.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    folder: str = "bold #0e8ac8"
    file: str = "#c1ff62"
    header: str = "bold #69B9A1"
    border: str = "#29526d"
    muted: str = "#b2bec3"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "bold #f53263"

    @field_validator("*")
    @classmethod
    def validate_style(cls, value: str) -> str:
        """Reject definitions Rich cannot parse."""
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            raise ValueError(str(e)) from e
        return value

    def to_theme(self) -> Theme:
        """Build the Rich theme registering every style by name."""
        return Theme(self.model_dump())


def _read_styles(source: Traversable | Path) -> dict[str, str]:
    """Return the string entries of a file's ``[styles]`` table.

    A missing or unreadable file contributes nothing.
    """
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring style file %s: %s", source, e)
        return {}

    table = data.get("styles", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring style file %s: [styles] is not a table", source)
        return {}
    return {name: value for name, value in table.items() if isinstance(value, str)}


def load_styles(user_path: Path | None = None) -> ConsoleStyles:
    """Load the bundled styles with the user's overrides applied.

    Args:
        user_path: Override file. Defaults to ``styles.toml`` in the config directory.
    """
    accepted = _read_styles(resources.files("fstools.data").joinpath("styles.toml"))
    styles = ConsoleStyles(**accepted)

    for name, value in _read_styles(user_path or get_styles_path()).items():
        try:
            styles = ConsoleStyles(**{**accepted, name: value})
        except ValidationError as e:
            logger.warning("Ignoring style %r: %s", name, e.errors()[0]["msg"])
            continue
        accepted[name] = value

    return styles


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Return the Rich theme for the loaded styles (cached)."""
    return load_styles().to_theme()
