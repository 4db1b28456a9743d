"""RosterService: wraps the store's boolean answers in ServiceResults.

The store reports success as ``True``/``False``; this layer decides what the
operator is told about it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from rosterctl.domain.player import Player
from rosterctl.services.result import ServiceResult

if TYPE_CHECKING:
    from rosterctl.domain.ids import PlayerId
    from rosterctl.services.store import PlayerStore

logger = logging.getLogger(__name__)


class RosterService:
    """Operator-facing roster operations over a :class:`PlayerStore`."""

    def __init__(self, store: PlayerStore) -> None:
        self._store = store

    @property
    def store(self) -> PlayerStore:
        return self._store

    def add_player(self, name: str, *, level: int, banned: bool = False) -> ServiceResult:
        op = "add_player"
        try:
            player = Player(name=name, level=level, banned=banned)
        except ValidationError as exc:
            logger.debug("Invalid player data: %s", exc)
            return ServiceResult.failure(op, "INVALID_PLAYER", f"Invalid player: {name!r}")

        if not self._store.add_player(player):
            return ServiceResult.failure(op, "INVALID_PLAYER", f"Invalid player: {name!r}")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": self._store.last_id,
                "name": player.name,
                "level": player.level,
                "banned": player.banned,
            },
        )

    def remove_player(self, player_id: PlayerId) -> ServiceResult:
        if not self._store.remove_player(player_id):
            return _not_found("remove_player", player_id)
        return ServiceResult(ok=True, op="remove_player", data={"id": player_id})

    def ban(self, player_id: PlayerId) -> ServiceResult:
        if not self._store.ban(player_id):
            return _not_found("ban_player", player_id)
        return ServiceResult(ok=True, op="ban_player", data={"id": player_id, "banned": True})

    def unban(self, player_id: PlayerId) -> ServiceResult:
        if not self._store.unban(player_id):
            return _not_found("unban_player", player_id)
        return ServiceResult(ok=True, op="unban_player", data={"id": player_id, "banned": False})

    def list_players(self) -> ServiceResult:
        items = [
            {
                "id": entry.id,
                "name": entry.player.name,
                "level": entry.player.level,
                "banned": entry.player.banned,
            }
            for entry in self._store.list_players()
        ]
        return ServiceResult(ok=True, op="list_players", data={"items": items, "count": len(items)})


def _not_found(op: str, player_id: PlayerId) -> ServiceResult:
    return ServiceResult.failure(
        op, "NOT_FOUND", f"No player with id {player_id}", player_id=player_id
    )
