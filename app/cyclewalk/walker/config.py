"""Walker configuration and settings.

This module provides the configuration model and I/O functions for the
cycle-detecting walker.

Configuration is stored in ~/.config/cyclewalk/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cyclewalk.core.paths import get_config_path
from cyclewalk.walker.classifier import DEFAULT_MAX_HOPS


class WalkerConfig(BaseModel):
    """Configuration for the cycle-detecting walker.

    Attributes:
        max_hops: Maximum symlinks followed while resolving one path.
        follow_symlinks: Follow links to directories (and check them for cycles).
        include_files: Record regular files as visits.
        exclude: Glob patterns matched against entry names; matches are skipped.
    """

    model_config = ConfigDict(extra="forbid")

    max_hops: Annotated[
        int,
        Field(ge=1, le=255, description="Symlink hop limit per path (1-255)"),
    ] = DEFAULT_MAX_HOPS
    follow_symlinks: Annotated[
        bool,
        Field(description="Follow symlinks to directories"),
    ] = True
    include_files: Annotated[
        bool,
        Field(description="Record regular files as visits"),
    ] = True
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Entry name glob patterns to skip"),
    ]

    @field_validator("exclude")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty exclude patterns."""
        for pattern in v:
            if not pattern.strip():
                msg = "Exclude patterns cannot be empty"
                raise ValueError(msg)
        return v


class WalkerConfigError(Exception):
    """Base exception for walker configuration errors."""


class WalkerConfigParseError(WalkerConfigError):
    """Raised when the config file cannot be parsed."""


def load_walker_config(path: Path | None = None) -> WalkerConfig:
    """Load walker configuration from a TOML file.

    A missing file yields the default configuration.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated WalkerConfig object.

    Raises:
        WalkerConfigParseError: If the TOML syntax is invalid.
        WalkerConfigError: If the file cannot be read or the content
            doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        return WalkerConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise WalkerConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise WalkerConfigError(f"Failed to read walker config: {e}") from e

    try:
        return WalkerConfig.model_validate(data.get("walker", {}))
    except (ValueError, ValidationError) as e:
        raise WalkerConfigError(f"Invalid walker config content: {e}") from e


def save_walker_config(config: WalkerConfig, path: Path | None = None) -> Path:
    """Save walker configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The WalkerConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        WalkerConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump({"walker": config.model_dump()}, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise WalkerConfigError(f"Failed to write walker config: {e}") from e

    return config_path
