"""Tests for the in-memory PlayerStore."""

from __future__ import annotations

import pytest

from rosterctl.domain.ids import SequentialIdAllocator, TokenIdAllocator
from rosterctl.domain.player import Player
from rosterctl.services.store import PlayerStore
from tests.conftest import add_player


class _CollidingAllocator:
    """Returns each id in *ids* in turn, to force a collision."""

    strategy = "token"

    def __init__(self, *ids: str) -> None:
        self._ids = list(ids)

    def allocate_id(self) -> str:
        return self._ids.pop(0)

    def parse_id(self, raw: str) -> str:
        return raw


class TestAddPlayer:
    def test_add_to_empty_store(self, store: PlayerStore) -> None:
        assert store.add_player(Player(name="Anna", level=3, banned=False)) is True
        assert len(store) == 1
        [entry] = store.list_players()
        assert entry.player.name == "Anna"
        assert entry.player.level == 3
        assert entry.player.banned is False

    def test_ids_are_distinct(self, store: PlayerStore) -> None:
        ids = [add_player(store, f"p{i}") for i in range(20)]
        assert len(set(ids)) == 20

    def test_none_is_rejected(self, store: PlayerStore) -> None:
        assert store.add_player(None) is False
        assert len(store) == 0
        assert store.last_id is None

    def test_non_player_is_rejected(self, store: PlayerStore) -> None:
        assert store.add_player({"name": "Anna"}) is False  # type: ignore[arg-type]
        assert len(store) == 0

    def test_ids_not_reused_after_removal(self, store: PlayerStore) -> None:
        first = add_player(store, "Anna")
        assert store.remove_player(first)
        second = add_player(store, "Bob")
        assert second != first
        assert second == 2

    def test_collision_draws_again(self) -> None:
        store = PlayerStore(_CollidingAllocator("aa", "aa", "bb"))  # type: ignore[arg-type]
        add_player(store, "Anna")
        second = add_player(store, "Bob")
        assert second == "bb"
        assert len(store) == 2

    def test_same_player_added_twice_is_independent(self, store: PlayerStore) -> None:
        anna = Player(name="Anna", level=3)
        assert store.add_player(anna)
        assert store.add_player(anna)
        assert store.ban(1)
        by_id = {entry.id: entry.player.banned for entry in store.list_players()}
        assert by_id == {1: True, 2: False}

    def test_caller_cannot_mutate_after_add(self, store: PlayerStore) -> None:
        anna = Player(name="Anna", level=3)
        store.add_player(anna)
        anna.ban()
        assert store.get(1).banned is False  # type: ignore[union-attr]

    def test_seeded_players_are_copied(self) -> None:
        anna = Player(name="Anna")
        store = PlayerStore(players=[anna, anna])
        anna.ban()
        store.ban(2)
        by_id = {entry.id: entry.player.banned for entry in store.list_players()}
        assert by_id == {1: False, 2: True}

    def test_last_id_tracks_latest_add(self, store: PlayerStore) -> None:
        add_player(store, "Anna")
        add_player(store, "Bob")
        assert store.last_id == 2


class TestRemovePlayer:
    def test_remove_then_remove_again(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna")
        assert player_id == 1
        assert store.remove_player(1) is True
        assert len(store) == 0
        assert store.remove_player(1) is False
        assert len(store) == 0

    def test_remove_absent_leaves_store_unchanged(self, store: PlayerStore) -> None:
        add_player(store, "Anna")
        add_player(store, "Bob")
        before = store.list_players()
        assert store.remove_player(99) is False
        assert store.list_players() == before


class TestBanUnban:
    def test_ban_marks_only_target(self, store: PlayerStore) -> None:
        first = add_player(store, "Anna")
        second = add_player(store, "Bob")
        assert first != second
        assert store.ban(first) is True
        by_id = {entry.id: entry.player for entry in store.list_players()}
        assert by_id[first].banned is True
        assert by_id[second].banned is False

    def test_ban_is_idempotent(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna")
        assert store.ban(player_id) is True
        once = store.list_players()
        assert store.ban(player_id) is True
        assert store.list_players() == once

    def test_ban_then_unban_restores_flag(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna")
        before = store.get(player_id)
        store.ban(player_id)
        store.unban(player_id)
        assert store.get(player_id) == before

    def test_unban_clears_seeded_ban(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna", banned=True)
        assert store.unban(player_id) is True
        assert store.get(player_id).banned is False  # type: ignore[union-attr]

    def test_unban_is_idempotent(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna")
        assert store.unban(player_id) is True
        assert store.get(player_id).banned is False  # type: ignore[union-attr]

    def test_absent_id(self, store: PlayerStore) -> None:
        add_player(store, "Anna")
        before = store.list_players()
        assert store.ban(7) is False
        assert store.unban(7) is False
        assert store.list_players() == before


class TestListPlayers:
    def test_empty(self, store: PlayerStore) -> None:
        assert store.list_players() == []

    def test_numeric_order(self, store: PlayerStore) -> None:
        for i in range(12):
            add_player(store, f"p{i}")
        store.remove_player(3)
        ids = [entry.id for entry in store.list_players()]
        assert ids == sorted(ids)
        assert 3 not in ids
        assert len(ids) == 11

    def test_token_order_is_stable(self) -> None:
        store = PlayerStore(TokenIdAllocator())
        for name in ("Anna", "Bob", "Cleo"):
            add_player(store, name)
        first = [entry.id for entry in store.list_players()]
        assert first == sorted(first)
        assert [entry.id for entry in store.list_players()] == first

    def test_snapshot_is_detached(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna")
        [entry] = store.list_players()
        entry.player.ban()
        assert store.get(player_id).banned is False  # type: ignore[union-attr]


class TestSeededStore:
    def test_initial_players_get_sequential_ids(self) -> None:
        store = PlayerStore(
            SequentialIdAllocator(),
            players=[Player(name="Anna"), Player(name="Bob", banned=True)],
        )
        entries = store.list_players()
        assert [e.id for e in entries] == [1, 2]
        assert entries[1].player.banned is True
        assert add_player(store, "Cleo") == 3

    def test_invalid_seed_entry_raises(self) -> None:
        with pytest.raises(TypeError, match="Player instances"):
            PlayerStore(players=[Player(name="Anna"), None])  # type: ignore[list-item]

    def test_contains_and_get(self, store: PlayerStore) -> None:
        player_id = add_player(store, "Anna", level=5)
        assert player_id in store
        assert 42 not in store
        assert store.get(player_id) == Player(name="Anna", level=5)
        assert store.get(42) is None
