"""
Shell configuration for exprcalc.

Configuration is loaded from the [repl] table of a TOML file and can be
overridden from the command line:

    [repl]
    prompt = "calc> "
    precision = 10
    show_tree = false
    history = true
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from exprcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)


class ReplConfig(BaseModel):
    """Settings for the interactive shell and result formatting."""

    prompt: str = "> "
    precision: int | None = Field(
        default=None,
        ge=1,
        le=17,
        description="Significant digits for results; None prints the shortest exact repr",
    )
    show_tree: bool = Field(default=False, description="Print the parsed tree before the result")
    history: bool = Field(default=True, description="Enable readline line editing and history")

    model_config = ConfigDict(extra="forbid")

    def with_overrides(self, **overrides: Any) -> ReplConfig:
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **updates})


def load_repl_config(toml_path: Path | None) -> ReplConfig:
    """
    Load shell configuration from a TOML file.

    Args:
        toml_path: Path to the TOML file, or None for defaults

    Returns:
        ReplConfig with values from the [repl] table or defaults

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    if toml_path is None or not toml_path.exists():
        return ReplConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"cannot read {toml_path}: {e}") from e

    section = data.get("repl", {})
    if not isinstance(section, dict):
        raise ConfigError(f"{toml_path}: [repl] must be a table")

    try:
        config = ReplConfig.model_validate(section)
    except PydanticValidationError as e:
        raise ConfigError(f"{toml_path}: invalid [repl] settings: {e}") from e

    logger.debug("loaded %s from %s", config, toml_path)
    return config
