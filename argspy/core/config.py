"""Configuration management for ArgsPy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator

from argspy.utils.constants import Constants


class ParserConfig(BaseModel):
    """Settings of a parser instance."""

    console_width: int = Field(
        Constants.DEFAULT_CONSOLE_WIDTH,
        ge=Constants.MIN_CONSOLE_WIDTH,
        description="Width of the help box in columns",
    )
    suggestion_threshold: float = Field(
        Constants.DEFAULT_SUGGESTION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for a 'did you mean' suggestion",
    )
    help_title: str = Field(Constants.DEFAULT_HELP_TITLE, min_length=1)
    verbose: bool = False
    debug: bool = False

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if len(self.help_title) > self.console_width - 2:
            raise ValueError(
                f"help_title ({len(self.help_title)} chars) must be shorter than "
                f"console_width ({self.console_width}) - 2"
            )
        return self

    model_config = {
        "frozen": True,
    }


def load_config(overrides: Mapping[str, Any] | None = None) -> ParserConfig:
    """Build a validated ParserConfig from a mapping of overrides.

    Missing keys keep their defaults.

    Raises:
        ValueError: If a value fails validation
    """
    try:
        return ParserConfig.model_validate(dict(overrides or {}))
    except ValidationError as e:
        logger.error(f"✗ Parser configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
