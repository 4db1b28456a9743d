"""Startup wiring: store, roster service, commands, and shell.

Menu layout::

    0  Exit
    1  Add player
    2  Remove player
    3  Ban player
    4  Unban player
    5  List players
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterctl.domain.ids import create_allocator
from rosterctl.domain.player import Player
from rosterctl.services.roster import RosterService
from rosterctl.services.store import PlayerStore
from rosterctl.shell.command import Command, CommandKind
from rosterctl.shell.dispatcher import Shell

if TYPE_CHECKING:
    from rosterctl.config.models import StoreConfig
    from rosterctl.shell.prompts import InputCollaborator

MENU: dict[int, tuple[CommandKind, str]] = {
    1: (CommandKind.ADD, "Add a new player"),
    2: (CommandKind.REMOVE, "Remove a player"),
    3: (CommandKind.BAN, "Ban a player"),
    4: (CommandKind.UNBAN, "Unban a player"),
    5: (CommandKind.LIST, "List all players"),
    0: (CommandKind.EXIT, "Exit"),
}


def create_store(config: StoreConfig) -> PlayerStore:
    """Empty store, or one seeded from ``[[store.seed]]``."""
    seed = [Player(name=p.name, level=p.level, banned=p.banned) for p in config.seed]
    return PlayerStore(create_allocator(config.id_strategy), players=seed)


def create_shell(
    roster: RosterService,
    prompter: InputCollaborator,
    *,
    confirm_exit: bool = True,
) -> Shell:
    commands = {
        index: Command(description, kind, roster, prompter, confirm_exit=confirm_exit)
        for index, (kind, description) in MENU.items()
    }
    return Shell(commands)
