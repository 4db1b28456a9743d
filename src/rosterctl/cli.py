"""rosterctl entry point: global flags, wiring, and the interactive loop."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl import __version__
from rosterctl.config.settings import RosterSettings
from rosterctl.domain.ids import IdStrategy

if TYPE_CHECKING:
    from rosterctl.shell.application import Application


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="rosterctl")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--json", "json_output", is_flag=True, help="Show results as JSON.")
@click.option(
    "--no-confirm",
    is_flag=True,
    help="Exit without asking for confirmation.",
)
@click.option(
    "--id-strategy",
    type=click.Choice([s.value for s in IdStrategy], case_sensitive=False),
    default=None,
    help="How new players are numbered.",
)
def cli(
    config_path: str | None,
    verbose: bool,
    log_json: bool,
    json_output: bool,
    no_confirm: bool,
    id_strategy: str | None,
) -> None:
    """rosterctl: manage a player roster from a numbered menu."""
    # Unset flags are left out so env vars and the config file still apply.
    flags = {"verbose": verbose, "log_json": log_json, "json_output": json_output}
    settings = RosterSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    if no_confirm or id_strategy:
        settings = _override_sections(settings, no_confirm=no_confirm, id_strategy=id_strategy)

    from rosterctl.config.logging import configure_logging

    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    app = build_application(settings)
    raise SystemExit(app.run())


def _override_sections(
    settings: RosterSettings, *, no_confirm: bool, id_strategy: str | None
) -> RosterSettings:
    shell = settings.shell
    store = settings.store
    if no_confirm:
        shell = shell.model_copy(update={"confirm_exit": False})
    if id_strategy:
        store = store.model_copy(update={"id_strategy": IdStrategy(id_strategy.lower())})
    return settings.model_copy(update={"shell": shell, "store": store})


def build_application(settings: RosterSettings) -> Application:
    """Wire store, commands, shell, and run loop from *settings*."""
    from rosterctl.output.formatters import OutputSettings
    from rosterctl.services.roster import RosterService
    from rosterctl.shell.application import Application
    from rosterctl.shell.factory import create_shell, create_store
    from rosterctl.shell.prompts import Prompter

    prompter = Prompter(pause=settings.shell.pause, clear_screen=settings.shell.clear_screen)
    roster = RosterService(create_store(settings.store))
    shell = create_shell(roster, prompter, confirm_exit=settings.shell.confirm_exit)
    output = OutputSettings(
        json_output=settings.json_output,
        title=settings.printer.title,
        width=settings.printer.width,
    )
    return Application(shell, prompter, output=output)
