"""Combat and damage resolution.

Attacks subtract the defender's defense from the attacker's power. Damage
and the death transition are a single step: when ``take_damage`` returns,
a dead entity has already been turned into a corpse or remains.

Message lists are returned to the caller, which appends them to the
session log in order.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dungeon_core.core.constants import (
    CORPSE_GLYPH,
    DARK_RED,
    ORANGE,
    PLAYER_INDEX,
    RED,
    WHITE,
)
from dungeon_core.core.exceptions import InvalidGameStateError
from dungeon_core.core.logging import get_logger
from dungeon_core.models.enums import DeathVariant
from dungeon_core.models.messages import Message


if TYPE_CHECKING:
    from dungeon_core.models.entities import Entity
    from dungeon_core.models.game_state import GameSession

logger = get_logger(__name__)


# =============================================================================
# Death Transitions
# =============================================================================


def player_death(player: Entity) -> list[Message]:
    """Turn the player into a corpse; it stays in the roster with its stats."""
    player.glyph = CORPSE_GLYPH
    player.color = DARK_RED
    logger.info("Player died", name=player.name)
    return [Message(text="You died!", color=RED)]


def monster_death(monster: Entity) -> list[Message]:
    """Turn a monster into inert, non-blocking remains."""
    message = Message(text=f"{monster.name} is dead!", color=ORANGE)
    logger.info("Monster died", name=monster.name, position=monster.position)
    monster.glyph = CORPSE_GLYPH
    monster.color = DARK_RED
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.name = f"remains of {monster.name}"
    return [message]


DEATH_HANDLERS: dict[DeathVariant, Callable[["Entity"], list[Message]]] = {
    DeathVariant.PLAYER: player_death,
    DeathVariant.MONSTER: monster_death,
}


# =============================================================================
# Damage & Attacks
# =============================================================================


def take_damage(target: Entity, amount: int) -> list[Message]:
    """Apply damage and run the death transition if hp drops to 0 or below.

    Non-positive amounts change nothing. An entity that is already dead
    does not die a second time.

    Args:
        target: Entity receiving the damage.
        amount: Hit points to subtract.

    Returns:
        Messages produced by the death transition, if any.
    """
    fighter = target.fighter
    if fighter is None:
        return []

    if amount > 0:
        fighter.hp -= amount

    if fighter.hp <= 0 and target.alive:
        target.alive = False
        return DEATH_HANDLERS[fighter.on_death](target)
    return []


def resolve_attack(attacker: Entity, defender: Entity) -> list[Message]:
    """Resolve one melee attack.

    Args:
        attacker: The attacking entity.
        defender: The defending entity; must be a different entity.

    Returns:
        The attack message, followed by any death message.

    Raises:
        InvalidGameStateError: If either side has no Fighter component.
    """
    if attacker.fighter is None or defender.fighter is None:
        raise InvalidGameStateError(
            "Both sides of an attack need a fighter component",
            details={"attacker": attacker.name, "defender": defender.name},
        )

    damage = attacker.fighter.power - defender.fighter.defense
    if damage <= 0:
        return [Message(text=f"{attacker.name} attacks {defender.name} but it has no effect!", color=WHITE)]

    logger.debug("Attack hit", attacker=attacker.name, defender=defender.name, damage=damage)
    messages = [Message(text=f"{attacker.name} attacks {defender.name} for {damage} hit points.", color=WHITE)]
    messages.extend(take_damage(defender, damage))
    return messages


# =============================================================================
# Targeting
# =============================================================================


def find_closest_target(session: GameSession, max_range: int) -> int | None:
    """Closest visible monster within range of the player.

    Only entities with both a Fighter and an AI qualify, and only within
    ``max_range``. On equal distance the first in roster order wins.

    Returns:
        Roster index of the target, or None.
    """
    player = session.player
    closest: int | None = None
    closest_distance = float("inf")

    for index, entity in enumerate(session.roster):
        if index == PLAYER_INDEX or entity.fighter is None or entity.ai is None:
            continue
        if not session.is_visible(entity.x, entity.y):
            continue
        distance = player.distance_to(entity)
        if distance <= max_range and distance < closest_distance:
            closest = index
            closest_distance = distance

    return closest


__all__ = [
    "DEATH_HANDLERS",
    "player_death",
    "monster_death",
    "take_damage",
    "resolve_attack",
    "find_closest_target",
]
