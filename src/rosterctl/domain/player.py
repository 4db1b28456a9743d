"""Player entity.

A player's name and level are fixed at construction. The ``banned`` flag is
the only mutable state and is toggled by the store through :meth:`Player.ban`
and :meth:`Player.unban`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def validate_name(value: str) -> str:
    """Strip *value*, rejecting names that are blank."""
    value = value.strip()
    if not value:
        msg = "Player name must not be blank"
        raise ValueError(msg)
    return value


class Player(BaseModel):
    """A roster entry. The identifier is the key under which a store holds it."""

    model_config = {"validate_assignment": True}

    name: str = Field(frozen=True)
    level: int = Field(default=0, frozen=True)
    banned: bool = False

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return validate_name(value)

    def ban(self) -> None:
        self.banned = True

    def unban(self) -> None:
        self.banned = False
