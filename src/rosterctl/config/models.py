"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rosterctl.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from rosterctl.domain.ids import IdStrategy
from rosterctl.domain.player import validate_name

# --- rosterctl.toml sections ---


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    confirm_exit: bool = True
    pause: bool = True
    clear_screen: bool = True


class SeedPlayer(BaseModel):
    """One ``[[store.seed]]`` entry loaded into the roster at startup."""

    model_config = {"frozen": True}

    name: str
    level: int = 0
    banned: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return validate_name(value)


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    id_strategy: IdStrategy = IdStrategy.COUNTER
    seed: list[SeedPlayer] = Field(default_factory=list)


class PrinterConfig(BaseModel):
    """[printer] section."""

    model_config = {"frozen": True}

    title: str = "Players"
    width: int = Field(default=80, ge=40)
