"""Menu commands.

A Command is a description plus a tagged :class:`CommandKind`. Executing it
dispatches on the kind to a handler that reads what it needs from the input
collaborator and calls the roster service. Commands hold explicit references
to the service and the prompter instead of closing over them.

Invalid construction raises :class:`ShellConfigurationError`; that is a wiring
bug, never a runtime condition.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel

from rosterctl.services.result import ServiceResult

if TYPE_CHECKING:
    from rosterctl.domain.ids import PlayerId
    from rosterctl.services.roster import RosterService
    from rosterctl.shell.prompts import InputCollaborator

logger = logging.getLogger(__name__)


class ShellConfigurationError(ValueError):
    """A command or shell was wired up incorrectly."""


class CommandKind(StrEnum):
    """The operation a command performs."""

    EXIT = "exit"
    ADD = "add"
    REMOVE = "remove"
    BAN = "ban"
    UNBAN = "unban"
    LIST = "list"


class ExitRequest(BaseModel):
    """Terminal outcome: the run loop stops and the process exits with *code*."""

    model_config = {"frozen": True}

    code: int = 0


CommandOutcome = ServiceResult | ExitRequest


class Command:
    """A named, zero-argument unit of work bound to one menu entry.

    Args:
        description: Menu text. Must not be blank.
        kind: Operation to run on :meth:`execute`.
        roster: Service the operation acts on.
        prompter: Source of operator input.
        confirm_exit: Ask before an ``EXIT`` command terminates.
    """

    def __init__(
        self,
        description: str,
        kind: CommandKind | None,
        roster: RosterService | None,
        prompter: InputCollaborator | None,
        *,
        confirm_exit: bool = True,
    ) -> None:
        if not isinstance(description, str) or not description.strip():
            msg = "Command description must not be blank"
            raise ShellConfigurationError(msg)
        if not isinstance(kind, CommandKind):
            msg = f"Command {description!r} has no valid action: {kind!r}"
            raise ShellConfigurationError(msg)
        if roster is None or prompter is None:
            msg = f"Command {description!r} is missing its roster or prompter"
            raise ShellConfigurationError(msg)

        self._description = description.strip()
        self._kind = kind
        self._roster = roster
        self._prompter = prompter
        self._confirm_exit = confirm_exit

    def __repr__(self) -> str:
        return f"Command({self._description!r}, {self._kind.value})"

    @property
    def kind(self) -> CommandKind:
        return self._kind

    def describe(self) -> str:
        return self._description

    def execute(self) -> CommandOutcome:
        """Run the command and return its outcome unexamined."""
        logger.debug("Executing command %s", self._kind.value)
        handler = _HANDLERS[self._kind]
        return handler(self)

    # ── Handlers ──────────────────────────────────────────────────────

    def _run_exit(self) -> CommandOutcome:
        if self._confirm_exit and not self._prompter.confirm("Exit the application?"):
            return ServiceResult(ok=True, op="exit", data={"cancelled": True})
        return ExitRequest(code=0)

    def _run_add(self) -> CommandOutcome:
        name = self._prompter.read_text("Player name")
        banned = self._prompter.read_boolean("Is the player banned?")
        level = self._prompter.read_integer("Player level")
        return self._roster.add_player(name, level=level, banned=banned)

    def _run_remove(self) -> CommandOutcome:
        return self._roster.remove_player(self._read_id())

    def _run_ban(self) -> CommandOutcome:
        return self._roster.ban(self._read_id())

    def _run_unban(self) -> CommandOutcome:
        return self._roster.unban(self._read_id())

    def _run_list(self) -> CommandOutcome:
        return self._roster.list_players()

    def _read_id(self) -> PlayerId:
        return self._prompter.read_player_id("Player id", self._roster.store.allocator)


_HANDLERS: dict[CommandKind, Callable[[Command], CommandOutcome]] = {
    CommandKind.EXIT: Command._run_exit,
    CommandKind.ADD: Command._run_add,
    CommandKind.REMOVE: Command._run_remove,
    CommandKind.BAN: Command._run_ban,
    CommandKind.UNBAN: Command._run_unban,
    CommandKind.LIST: Command._run_list,
}
