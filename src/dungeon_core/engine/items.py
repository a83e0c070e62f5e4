"""Item and inventory engine.

Picking an item up moves it from the roster into the session inventory.
Using an item dispatches on its kind to exactly one effect; an effect
either happens (the item is used up) or is cancelled with an explanatory
message (the item stays).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dungeon_core.core.constants import (
    GREEN,
    LIGHT_BLUE,
    LIGHT_GREEN,
    LIGHT_VIOLET,
    RED,
    WHITE,
)
from dungeon_core.core.exceptions import InvalidGameStateError
from dungeon_core.core.logging import get_logger
from dungeon_core.engine.combat import find_closest_target, take_damage
from dungeon_core.models.components import ConfusedAI
from dungeon_core.models.enums import ItemKind, UseResult


if TYPE_CHECKING:
    from dungeon_core.models.game_state import GameSession

logger = get_logger(__name__)


# =============================================================================
# Pickup
# =============================================================================


def pick_up(session: GameSession, index: int) -> bool:
    """Move the item at roster ``index`` into the inventory.

    Returns:
        False when the inventory is full and the item stays on the floor.

    Raises:
        InvalidGameStateError: If the entity is not an item.
    """
    entity = session.roster[index]
    if entity.item is None:
        raise InvalidGameStateError(
            f"{entity.name} cannot be picked up",
            details={"index": index},
        )

    if len(session.inventory) >= session.inventory_capacity:
        session.messages.add(f"Your inventory is full, cannot pick up {entity.name}.", RED)
        return False

    item = session.roster.pop(index)
    session.inventory.append(item)
    session.messages.add(f"You picked up a {item.name}!", GREEN)
    logger.debug("Item picked up", item=item.name, inventory_size=len(session.inventory))
    return True


# =============================================================================
# Effects
# =============================================================================


def cast_heal(session: GameSession) -> UseResult:
    fighter = session.player.fighter
    if fighter is None:
        return UseResult.CANCELLED

    if fighter.is_full_health:
        session.messages.add("You are already at full health.", RED)
        return UseResult.CANCELLED

    session.messages.add("Your wounds start to feel better!", LIGHT_VIOLET)
    fighter.heal(session.settings.items.heal_amount)
    return UseResult.USED_UP


def cast_lightning(session: GameSession) -> UseResult:
    """Strike the closest visible monster, ignoring its defense."""
    items = session.settings.items
    target_index = find_closest_target(session, items.lightning_range)
    if target_index is None:
        session.messages.add("No enemy is close enough to strike.", RED)
        return UseResult.CANCELLED

    target = session.roster[target_index]
    session.messages.add(
        f"A lightning bolt strikes the {target.name} with a loud thunder! "
        f"The damage is {items.lightning_damage} hit points.",
        LIGHT_BLUE,
    )
    session.messages.extend(take_damage(target, items.lightning_damage))
    return UseResult.USED_UP


def cast_confuse(session: GameSession) -> UseResult:
    """Wrap the closest visible monster's AI in a confusion state."""
    items = session.settings.items
    target_index = find_closest_target(session, items.confuse_range)
    if target_index is None:
        session.messages.add("No enemy is close enough to confuse.", RED)
        return UseResult.CANCELLED

    target = session.roster[target_index]
    if target.ai is None:
        return UseResult.CANCELLED
    target.ai = ConfusedAI.wrapping(target.ai, items.confuse_num_turns)
    session.messages.add(
        f"The eyes of the {target.name} look vacant, as he starts to stumble around!",
        LIGHT_GREEN,
    )
    return UseResult.USED_UP


ITEM_EFFECTS: dict[ItemKind, Callable[["GameSession"], UseResult]] = {
    ItemKind.HEAL: cast_heal,
    ItemKind.LIGHTNING: cast_lightning,
    ItemKind.CONFUSE: cast_confuse,
}


# =============================================================================
# Use
# =============================================================================


def use_item(session: GameSession, inventory_index: int) -> UseResult:
    """Use the inventory item at ``inventory_index``.

    The item is removed only when the effect reports USED_UP.

    Raises:
        InvalidGameStateError: If the index is not in the inventory.
    """
    if not 0 <= inventory_index < len(session.inventory):
        raise InvalidGameStateError(
            f"Inventory slot {inventory_index} is empty",
            details={"inventory_size": len(session.inventory)},
        )

    entity = session.inventory[inventory_index]
    if entity.item is None:
        session.messages.add(f"The {entity.name} cannot be used.", WHITE)
        return UseResult.CANCELLED

    result = ITEM_EFFECTS[entity.item.kind](session)
    if result is UseResult.USED_UP:
        session.inventory.pop(inventory_index)
    logger.info("Item used", item=entity.name, result=result.value)
    return result


__all__ = [
    "ITEM_EFFECTS",
    "pick_up",
    "use_item",
    "cast_heal",
    "cast_lightning",
    "cast_confuse",
]
