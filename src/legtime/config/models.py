"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, legtime.toml only contains
overrides. A host embedding the widget for Vienna needs no file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- legtime.toml sections ---


class WidgetConfig(BaseModel):
    """[widget] section."""

    model_config = {"frozen": True}

    timezone: str = "Europe/Vienna"
    language: str = "EN"

    @field_validator("language")
    @classmethod
    def _upper_language(cls, value: str) -> str:
        return value.strip().upper()


class ScheduleConfig(BaseModel):
    """[schedule] section."""

    model_config = {"frozen": True}

    buffer_minutes: int = Field(default=60, ge=0)


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    short_date_pattern: str = "dd. MMM"
    full_date_pattern: str = "dd. MMM yyyy"


class LegtimeConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    widget: WidgetConfig = Field(default_factory=WidgetConfig)
    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
