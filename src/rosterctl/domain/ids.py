"""Identifier allocation strategies.

Two strategies, one per process:
- Counter: sequential integers starting at 1. Small numbers suited to a
  table column; the counter never goes backwards, so removed ids are not
  handed out again.
- Token: random 32-character hex tokens from :func:`uuid.uuid4`.

INVARIANT: an allocator never returns the same id twice.
"""

from __future__ import annotations

import re
import uuid
from enum import StrEnum
from typing import Protocol

PlayerId = int | str

TOKEN_PATTERN = re.compile(r"^[0-9a-f]{32}$")


class IdStrategy(StrEnum):
    """Configured identifier scheme."""

    COUNTER = "counter"
    TOKEN = "token"


class IdAllocator(Protocol):
    """Anything that can hand out fresh player ids."""

    strategy: IdStrategy

    def allocate_id(self) -> PlayerId: ...

    def parse_id(self, raw: str) -> PlayerId:
        """Convert operator input to an id, raising ``ValueError`` if malformed."""
        ...


class SequentialIdAllocator:
    """Monotonic integer ids: 1, 2, 3, ..."""

    strategy = IdStrategy.COUNTER

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            msg = f"Counter must start at 1 or above, got {start}"
            raise ValueError(msg)
        self._next = start

    def allocate_id(self) -> int:
        value = self._next
        self._next += 1
        return value

    def parse_id(self, raw: str) -> int:
        return int(raw.strip())


class TokenIdAllocator:
    """Random hex tokens; collisions are left to the store to re-draw."""

    strategy = IdStrategy.TOKEN

    def allocate_id(self) -> str:
        return uuid.uuid4().hex

    def parse_id(self, raw: str) -> str:
        token = raw.strip().lower()
        if TOKEN_PATTERN.match(token) is None:
            msg = f"{raw!r} is not a 32-character hex token"
            raise ValueError(msg)
        return token


def create_allocator(strategy: IdStrategy | str) -> IdAllocator:
    """Build the allocator for *strategy*.

    Raises:
        ValueError: If *strategy* is not a known scheme.
    """
    strategy = IdStrategy(strategy)
    if strategy is IdStrategy.TOKEN:
        return TokenIdAllocator()
    return SequentialIdAllocator()
