"""Tests for the item and inventory engine."""

from __future__ import annotations

import pytest

from dungeon_core.core.constants import GREEN, LIGHT_BLUE, LIGHT_GREEN, LIGHT_VIOLET, RED
from dungeon_core.core.exceptions import InvalidGameStateError
from dungeon_core.engine.items import pick_up, use_item
from dungeon_core.models.components import BasicAI, ConfusedAI
from dungeon_core.models.entities import (
    Entity,
    create_confusion_scroll,
    create_healing_potion,
    create_lightning_scroll,
    create_orc,
    create_troll,
)
from dungeon_core.models.enums import UseResult


class TestPickUp:
    """Tests for pick_up."""

    def test_moves_item_into_inventory(self, make_session) -> None:
        session = make_session(create_healing_potion(5, 5), create_orc(9, 9))

        assert pick_up(session, 1) is True

        assert [e.name for e in session.inventory] == ["healing potion"]
        assert [e.name for e in session.roster] == ["player", "orc"]
        assert [(m.text, m.color) for m in session.messages] == [("You picked up a healing potion!", GREEN)]

    def test_full_inventory(self, make_session) -> None:
        """At 26 items the pickup fails and nothing moves."""
        session = make_session(create_healing_potion(5, 5))
        session.inventory.extend(create_healing_potion(0, 0) for _ in range(26))

        assert pick_up(session, 1) is False

        assert len(session.inventory) == 26
        assert len(session.roster) == 2
        assert [(m.text, m.color) for m in session.messages] == [
            ("Your inventory is full, cannot pick up healing potion.", RED)
        ]

    def test_not_an_item(self, make_session) -> None:
        session = make_session(create_orc(5, 6))
        with pytest.raises(InvalidGameStateError):
            pick_up(session, 1)


class TestHeal:
    """Tests for the healing potion."""

    def test_full_health_cancels(self, make_session) -> None:
        session = make_session()
        session.inventory.append(create_healing_potion(0, 0))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert len(session.inventory) == 1
        assert [(m.text, m.color) for m in session.messages] == [("You are already at full health.", RED)]

    def test_heals_and_consumes(self, make_session) -> None:
        session = make_session()
        session.player.fighter.hp = 20
        session.inventory.extend([create_healing_potion(0, 0), create_lightning_scroll(0, 0)])

        assert use_item(session, 0) is UseResult.USED_UP

        assert session.player.fighter.hp == 24
        assert [e.name for e in session.inventory] == ["scroll of lightning bolt"]
        assert [(m.text, m.color) for m in session.messages] == [("Your wounds start to feel better!", LIGHT_VIOLET)]

    def test_heal_clamps_to_max(self, make_session) -> None:
        session = make_session()
        session.player.fighter.hp = 29
        session.inventory.append(create_healing_potion(0, 0))

        use_item(session, 0)

        assert session.player.fighter.hp == 30


class TestLightning:
    """Tests for the scroll of lightning bolt."""

    def test_strikes_closest_and_kills(self, make_session) -> None:
        session = make_session(create_troll(8, 5), create_orc(7, 5))
        session.inventory.append(create_lightning_scroll(0, 0))

        assert use_item(session, 0) is UseResult.USED_UP

        orc = session.roster[2]
        assert orc.name == "remains of orc"
        assert session.roster[1].fighter.hp == 16
        assert [(m.text, m.color) for m in session.messages][0] == (
            "A lightning bolt strikes the orc with a loud thunder! The damage is 40 hit points.",
            LIGHT_BLUE,
        )
        assert session.messages.recent(1)[0].text == "orc is dead!"
        assert session.inventory == []

    def test_ignores_defense(self, make_session, settings) -> None:
        settings.items.lightning_damage = 5
        troll = create_troll(6, 5)
        session = make_session(troll)
        session.inventory.append(create_lightning_scroll(0, 0))

        use_item(session, 0)

        assert troll.fighter.hp == 11

    def test_no_target_cancels(self, make_session) -> None:
        session = make_session(create_orc(15, 15))
        session.inventory.append(create_lightning_scroll(0, 0))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert len(session.inventory) == 1
        assert [(m.text, m.color) for m in session.messages] == [("No enemy is close enough to strike.", RED)]

    def test_diagonal_just_out_of_range_cancels(self, make_session) -> None:
        orc = create_orc(10, 6)
        session = make_session(orc)
        session.inventory.append(create_lightning_scroll(0, 0))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert orc.alive
        assert orc.fighter.hp == 10
        assert len(session.inventory) == 1


class TestConfuse:
    """Tests for the scroll of confusion."""

    def test_wraps_target_ai(self, make_session) -> None:
        orc = create_orc(9, 9)
        session = make_session(orc)
        session.inventory.append(create_confusion_scroll(0, 0))

        assert use_item(session, 0) is UseResult.USED_UP

        assert orc.ai == ConfusedAI(previous=BasicAI(), turns_remaining=10)
        assert [(m.text, m.color) for m in session.messages] == [
            ("The eyes of the orc look vacant, as he starts to stumble around!", LIGHT_GREEN)
        ]

    def test_out_of_range_cancels(self, make_session) -> None:
        session = make_session(create_orc(15, 5))
        session.inventory.append(create_confusion_scroll(0, 0))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert session.roster[1].ai == BasicAI()
        assert [m.text for m in session.messages] == ["No enemy is close enough to confuse."]

    def test_diagonal_just_out_of_range_cancels(self, make_session) -> None:
        orc = create_orc(13, 6)
        session = make_session(orc)
        session.inventory.append(create_confusion_scroll(0, 0))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert orc.ai == BasicAI()
        assert len(session.inventory) == 1

    def test_second_scroll_nests(self, make_session) -> None:
        orc = create_orc(7, 7)
        session = make_session(orc)
        session.inventory.extend([create_confusion_scroll(0, 0), create_confusion_scroll(0, 0)])

        use_item(session, 0)
        use_item(session, 0)

        assert orc.ai.depth == 2


class TestUseItem:
    """Tests for use_item dispatch."""

    def test_unusable_entity(self, make_session) -> None:
        session = make_session()
        session.inventory.append(Entity(x=0, y=0, glyph="?", color=(1, 2, 3), name="rock"))

        assert use_item(session, 0) is UseResult.CANCELLED

        assert len(session.inventory) == 1
        assert [m.text for m in session.messages] == ["The rock cannot be used."]

    def test_empty_slot(self, session) -> None:
        with pytest.raises(InvalidGameStateError):
            use_item(session, 0)
