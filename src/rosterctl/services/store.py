"""In-memory player store.

The store owns every Player and is the only code that mutates one.
Absence is not exceptional: operations on an unknown id return ``False``
and leave the store untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

from rosterctl.domain.ids import PlayerId, SequentialIdAllocator
from rosterctl.domain.player import Player

if TYPE_CHECKING:
    from rosterctl.domain.ids import IdAllocator

logger = logging.getLogger(__name__)


class RosterEntry(NamedTuple):
    """One row of a roster listing."""

    id: PlayerId
    player: Player


def _order_key(player_id: PlayerId) -> tuple[bool, PlayerId]:
    # Integers sort numerically, tokens lexicographically, integers first.
    return (isinstance(player_id, str), player_id)


class PlayerStore:
    """Keyed collection of players with pluggable id allocation.

    Usage::

        store = PlayerStore()
        store.add_player(Player(name="Anna", level=3))
        store.ban(1)
    """

    def __init__(
        self,
        allocator: IdAllocator | None = None,
        players: Iterable[Player] | None = None,
    ) -> None:
        self._allocator: IdAllocator = allocator or SequentialIdAllocator()
        self._players: dict[PlayerId, Player] = {}
        self._last_id: PlayerId | None = None

        for player in players or ():
            if not isinstance(player, Player):
                msg = f"Initial roster entries must be Player instances, got {type(player).__name__}"
                raise TypeError(msg)
            self.add_player(player)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    @property
    def allocator(self) -> IdAllocator:
        return self._allocator

    @property
    def last_id(self) -> PlayerId | None:
        """Id handed to the most recently added player."""
        return self._last_id

    def add_player(self, player: Player | None) -> bool:
        """Insert *player* under a freshly allocated id."""
        if not isinstance(player, Player):
            logger.debug("Rejected add: %r is not a Player", player)
            return False

        player_id = self._allocator.allocate_id()
        while player_id in self._players:
            logger.debug("Allocated id %s already present, drawing again", player_id)
            player_id = self._allocator.allocate_id()

        self._players[player_id] = player.model_copy()
        self._last_id = player_id
        logger.debug("Added player %s as %s", player.name, player_id)
        return True

    def remove_player(self, player_id: PlayerId) -> bool:
        if player_id not in self._players:
            return False
        del self._players[player_id]
        logger.debug("Removed player %s", player_id)
        return True

    def ban(self, player_id: PlayerId) -> bool:
        player = self._players.get(player_id)
        if player is None:
            return False
        player.ban()
        logger.debug("Banned player %s", player_id)
        return True

    def unban(self, player_id: PlayerId) -> bool:
        player = self._players.get(player_id)
        if player is None:
            return False
        player.unban()
        logger.debug("Unbanned player %s", player_id)
        return True

    def get(self, player_id: PlayerId) -> Player | None:
        """Return a copy of the player stored under *player_id*, if any."""
        player = self._players.get(player_id)
        return player.model_copy() if player is not None else None

    def list_players(self) -> list[RosterEntry]:
        """Snapshot of the roster in ascending id order.

        Players in the snapshot are copies; mutating them does not touch
        the store.
        """
        return [
            RosterEntry(player_id, self._players[player_id].model_copy())
            for player_id in sorted(self._players, key=_order_key)
        ]
