"""Application configuration read from the environment."""
import os
from typing import Dict, Literal

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "POCKET_CALCULATOR_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    """Window and logging settings of the desktop calculator."""

    model_config = ConfigDict(frozen=True)

    window_title: str = Field(default="Calculator", min_length=1, description="Title of the main window")
    width: int = Field(default=360, ge=240, le=2000, description="Window width in pixels")
    height: int = Field(default=600, ge=320, le=3000, description="Window height in pixels")
    display_font_size: int = Field(default=48, ge=8, le=200, description="Point size of the display text")
    button_font_size: int = Field(default=24, ge=8, le=120, description="Point size of the button titles")
    log_level: LogLevel = Field(default="WARNING", description="Level of the application logger")

    @property
    def geometry(self) -> str:
        return f"{self.width}x{self.height}"


def load_config() -> AppConfig:
    """
    Build the configuration from ``POCKET_CALCULATOR_*`` environment variables.

    Unset variables keep their defaults, e.g. ``POCKET_CALCULATOR_WIDTH=400``.

    :return: Validated configuration
    :rtype: AppConfig
    :raises pydantic.ValidationError: If a variable holds an invalid value
    """
    values: Dict[str, str] = {}
    for name in AppConfig.model_fields:
        raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw.strip().upper() if name == "log_level" else raw
    return AppConfig(**values)
