"""Shared pytest fixtures and test helpers for rosterctl tests."""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from rosterctl.domain.ids import IdAllocator, PlayerId
from rosterctl.services.roster import RosterService
from rosterctl.services.store import PlayerStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> PlayerStore:
    """Empty store with sequential ids."""
    return PlayerStore()


@pytest.fixture
def roster(store: PlayerStore) -> RosterService:
    return RosterService(store)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir with no config or env overrides in play.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("ROSTERCTL_CONFIG", "ROSTERCTL_VERBOSE", "ROSTERCTL_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class FakePrompter:
    """Scripted stand-in for :class:`rosterctl.shell.prompts.Prompter`.

    Answers are handed out in order to every ``read_*`` call.
    """

    def __init__(self, *answers: Any, confirm: bool = True) -> None:
        self.answers = deque(answers)
        self.confirm_answer = confirm
        self.prompts: list[str] = []
        self.confirmations = 0
        self.acknowledged = 0
        self.cleared = 0

    def _next(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self.answers.popleft()

    def read_text(self, prompt: str) -> str:
        return self._next(prompt)

    def read_integer(self, prompt: str) -> int:
        return self._next(prompt)

    def read_boolean(self, prompt: str, true_value: int = 1, false_value: int = 0) -> bool:
        return self._next(prompt)

    def read_player_id(self, prompt: str, allocator: IdAllocator) -> PlayerId:
        return self._next(prompt)

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        self.confirmations += 1
        return self.confirm_answer

    def acknowledge(self, prompt: str) -> None:
        self.acknowledged += 1

    def clear(self) -> None:
        self.cleared += 1


def add_player(store: PlayerStore, name: str, level: int = 1, banned: bool = False) -> PlayerId:
    """Add a player directly to *store* and return its id."""
    from rosterctl.domain.player import Player

    assert store.add_player(Player(name=name, level=level, banned=banned))
    assert store.last_id is not None
    return store.last_id
