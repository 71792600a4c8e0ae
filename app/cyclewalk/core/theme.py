"""Terminal styles for cyclewalk output.

Every piece of CLI output is styled by role (``cycle``, ``symlink``,
``directory``, ...). Each role maps to a Rich style definition such as
``"bold #d44ebc"`` or ``"italic dim"``.

Defaults ship in ``cyclewalk/data/theme.toml``. A ``[styles]`` table in
``~/.config/cyclewalk/theme.toml`` may redefine any role. User entries
are checked one at a time: an unknown role or an unparseable style is
logged and skipped, and the bundled value stays in effect.
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

from cyclewalk.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


class ThemeFileError(Exception):
    """Raised when a theme file exists but cannot be used."""


class WalkStyles(BaseModel):
    """Rich style definition for each output role."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Tables
    header: str = "bold #69B9A1"
    border: str = "#29526d"
    muted: str = "#b2bec3"

    # Walk entries
    file: str = "#ffffff"
    directory: str = "#0e8ac8"
    symlink: str = "#c1ff62"
    cycle: str = "bold #d44ebc"

    # Messages
    success: str = "#03b971"
    info: str = "#0ec1c8"
    warning: str = "#f5b332"
    error: str = "bold #f53263"

    @field_validator("*")
    @classmethod
    def validate_style(cls, value: str) -> str:
        """Reject definitions Rich cannot parse."""
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            raise ValueError(str(e)) from None
        return value

    def to_rich(self) -> Theme:
        return Theme(self.model_dump())


def get_bundled_theme_path() -> Traversable:
    return resources.files("cyclewalk.data").joinpath("theme.toml")


def read_theme_file(path: Path | Traversable) -> dict[str, object]:
    """Read the ``[styles]`` table of a theme file.

    Args:
        path: Theme file to read.

    Returns:
        Mapping of role name to raw value; empty if the file does not exist.

    Raises:
        ThemeFileError: If the file cannot be read or parsed, or if
            ``styles`` is not a table.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ThemeFileError(f"Cannot read theme file {path}: {e}") from e

    styles = data.get("styles", {})
    if not isinstance(styles, dict):
        raise ThemeFileError(f"Invalid theme file {path}: 'styles' must be a table")
    return styles


def load_styles(user_path: Path | None = None) -> WalkStyles:
    """Build the effective styles from the bundled and user theme files.

    Args:
        user_path: User theme file. Defaults to ~/.config/cyclewalk/theme.toml.

    Returns:
        Bundled styles with every valid user override applied.
    """
    base = WalkStyles.model_validate(read_theme_file(get_bundled_theme_path()))

    path = user_path or get_user_theme_path()
    try:
        overrides = read_theme_file(path)
    except ThemeFileError as e:
        logger.warning("%s; using bundled styles", e)
        return base

    accepted: dict[str, str] = {}
    for role, value in overrides.items():
        if role not in WalkStyles.model_fields:
            logger.warning("Ignoring unknown style %r in %s", role, path)
            continue
        try:
            WalkStyles.model_validate({role: value})
        except ValidationError as e:
            logger.warning("Ignoring style %r in %s: %s", role, path, e.errors()[0]["msg"])
            continue
        accepted[role] = str(value)

    if accepted:
        logger.debug("Applied %d style override(s) from %s", len(accepted), path)
    return base.model_copy(update=accepted)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process.

    Call ``get_theme.cache_clear()`` to pick up edited theme files.
    """
    return load_styles().to_rich()
