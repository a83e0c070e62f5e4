"""Tests for the roster and game session models."""

from __future__ import annotations

import pytest

from dungeon_core.core.exceptions import EntityAliasingError, InvalidGameStateError
from dungeon_core.models.entities import create_healing_potion, create_orc, create_player, create_troll
from dungeon_core.models.game_state import Roster


@pytest.fixture
def roster() -> Roster:
    return Roster(
        [
            create_player(1, 1),
            create_orc(2, 2),
            create_healing_potion(2, 2),
            create_troll(4, 4),
        ]
    )


class TestRoster:
    """Tests for Roster."""

    def test_player_is_index_zero(self, roster: Roster) -> None:
        assert roster.player is roster[0]
        assert roster.player.name == "player"

    def test_empty_roster_has_no_player(self) -> None:
        with pytest.raises(InvalidGameStateError):
            _ = Roster().player

    def test_pair_returns_distinct_entities(self, roster: Roster) -> None:
        attacker, defender = roster.pair(1, 0)
        assert attacker is roster[1]
        assert defender is roster[0]

    def test_pair_same_index_raises(self, roster: Roster) -> None:
        """Requesting the same slot twice fails loudly."""
        with pytest.raises(EntityAliasingError) as exc_info:
            roster.pair(2, 2)
        assert exc_info.value.details["index"] == 2

    def test_pair_out_of_range(self, roster: Roster) -> None:
        with pytest.raises(InvalidGameStateError):
            roster.pair(0, 10)

    def test_pop_keeps_order(self, roster: Roster) -> None:
        potion = roster.pop(2)

        assert potion.name == "healing potion"
        assert [e.name for e in roster] == ["player", "orc", "troll"]

    def test_player_cannot_be_removed(self, roster: Roster) -> None:
        with pytest.raises(InvalidGameStateError):
            roster.pop(0)

    def test_indices_at(self, roster: Roster) -> None:
        assert roster.indices_at(2, 2) == [1, 2]
        assert roster.indices_at(9, 9) == []

    def test_blocking_at_skips_items(self, roster: Roster) -> None:
        assert roster.blocking_at(2, 2) == 1
        roster[1].blocks = False
        assert roster.blocking_at(2, 2) is None

    def test_index_of(self, roster: Roster) -> None:
        troll = roster[3]
        assert roster.index_of(troll) == 3
        with pytest.raises(InvalidGameStateError):
            roster.index_of(create_orc(0, 0))

    def test_append_returns_index(self, roster: Roster) -> None:
        assert roster.append(create_orc(5, 5)) == 4
        assert len(roster) == 5


class TestGameSession:
    """Tests for GameSession."""

    def test_defaults(self, session) -> None:
        assert session.player is session.roster[0]
        assert session.inventory == []
        assert len(session.messages) == 0
        assert session.inventory_capacity == 26
        assert session.session_id

    def test_visibility_delegates_to_fov(self, make_session, blind_fov) -> None:
        session = make_session(fov=blind_fov)
        assert not session.is_visible(5, 5)

        blind_fov.visible.add((5, 5))
        assert session.is_visible(5, 5)
