"""Application: the interactive run loop.

Each step renders the menu, reads a command number, dispatches it, shows
the outcome, waits for acknowledgement, and clears the screen. The loop
stops only when a command returns :class:`ExitRequest`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from rosterctl.output.formatters import OutputSettings, format_result
from rosterctl.output.renderers import render_menu
from rosterctl.shell.command import ExitRequest

if TYPE_CHECKING:
    from rosterctl.services.result import ServiceResult
    from rosterctl.shell.command import CommandOutcome
    from rosterctl.shell.dispatcher import Shell
    from rosterctl.shell.prompts import InputCollaborator

logger = logging.getLogger(__name__)


class Application:
    """Drives a :class:`Shell` from console input."""

    def __init__(
        self,
        shell: Shell,
        prompter: InputCollaborator,
        *,
        output: OutputSettings | None = None,
    ) -> None:
        self.shell = shell
        self.prompter = prompter
        self.output = output or OutputSettings()

    def run(self) -> int:
        """Loop until a command asks to exit; return its exit code."""
        logger.debug("Shell started with %d commands", len(self.shell.commands))
        while True:
            outcome = self.step()
            if isinstance(outcome, ExitRequest):
                logger.debug("Exit requested with code %d", outcome.code)
                return outcome.code

    def step(self) -> CommandOutcome:
        """Run one menu cycle."""
        click.echo(render_menu(self.shell.describe_all(), width=self.output.width))
        click.echo()
        index = self.prompter.read_integer("Enter command number")
        click.echo()

        outcome = self.shell.execute_by_index(index)
        if isinstance(outcome, ExitRequest):
            return outcome

        self.emit(outcome)
        click.echo()
        self.prompter.acknowledge("Press any key to continue...")
        self.prompter.clear()
        return outcome

    def emit(self, result: ServiceResult) -> None:
        """Show a result: successes on stdout, failures on stderr.

        Failures are reported and the loop carries on.
        """
        text = format_result(result, settings=self.output)
        if result.ok:
            click.echo(text)
        else:
            click.echo(text, err=True)
