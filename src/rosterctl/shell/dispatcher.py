"""Shell: resolves menu indices to commands."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from rosterctl.services.result import ServiceResult
from rosterctl.shell.command import Command, ShellConfigurationError

if TYPE_CHECKING:
    from rosterctl.shell.command import CommandOutcome

logger = logging.getLogger(__name__)


class Shell:
    """Fixed mapping from menu index to :class:`Command`.

    The shell keeps no state between calls. An unknown index is reported
    as a failed ``dispatch`` result and touches nothing.
    """

    def __init__(self, commands: Mapping[int, Command] | None) -> None:
        if not commands:
            msg = "Shell needs at least one command"
            raise ShellConfigurationError(msg)
        for index, command in commands.items():
            if not isinstance(command, Command):
                msg = f"Menu entry {index} is not a Command: {command!r}"
                raise ShellConfigurationError(msg)
        self._commands: dict[int, Command] = dict(commands)

    @property
    def commands(self) -> Mapping[int, Command]:
        return MappingProxyType(self._commands)

    def execute_by_index(self, index: int) -> CommandOutcome:
        command = self._commands.get(index)
        if command is None:
            logger.debug("No command at index %s", index)
            return ServiceResult.failure(
                "dispatch", "COMMAND_NOT_FOUND", f"Command #{index} not found", index=index
            )
        return command.execute()

    def describe_all(self) -> list[tuple[int, str]]:
        """``(index, description)`` pairs in ascending index order."""
        return [(index, self._commands[index].describe()) for index in sorted(self._commands)]
