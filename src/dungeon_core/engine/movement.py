"""Movement primitives shared by the player, the AI and level population."""

from __future__ import annotations

import math
from collections.abc import Iterable

from dungeon_core.models.entities import Entity
from dungeon_core.models.game_state import Roster
from dungeon_core.models.map import GameMap


def is_blocked(x: int, y: int, game_map: GameMap, entities: Iterable[Entity]) -> bool:
    """True when the cell is a wall (or off-map) or holds a blocking entity."""
    if game_map.is_wall(x, y):
        return True
    return any(entity.blocks and entity.x == x and entity.y == y for entity in entities)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer with ties going away from zero.

    Unlike ``round()``, 0.5 maps to 1 and -0.5 maps to -1.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def move_by(index: int, dx: int, dy: int, game_map: GameMap, roster: Roster) -> bool:
    """Step an entity by ``(dx, dy)`` unless the destination is blocked.

    Returns:
        Whether the entity moved.
    """
    entity = roster[index]
    x, y = entity.x + dx, entity.y + dy
    if is_blocked(x, y, game_map, roster):
        return False
    entity.place(x, y)
    return True


def move_towards(index: int, target_x: int, target_y: int, game_map: GameMap, roster: Roster) -> bool:
    """Take one step along the normalized vector toward a target cell.

    The unit vector is rounded half away from zero, so diagonal steps are
    taken when the target lies within roughly 22.5 degrees of a diagonal.
    """
    entity = roster[index]
    dx = target_x - entity.x
    dy = target_y - entity.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return False
    step_x = round_half_away_from_zero(dx / distance)
    step_y = round_half_away_from_zero(dy / distance)
    return move_by(index, step_x, step_y, game_map, roster)


__all__ = [
    "is_blocked",
    "round_half_away_from_zero",
    "move_by",
    "move_towards",
]
