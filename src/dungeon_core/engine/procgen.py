"""Procedural level generation.

Rooms are placed by rejection sampling: each attempt draws a random room
and keeps it only if it overlaps no room kept so far. Every kept room is
carved, populated, and joined to the previous kept room with an L-shaped
corridor. All randomness comes from the ``rng`` argument, so a seed
reproduces a level exactly.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from dungeon_core.core.exceptions import LevelGenerationError
from dungeon_core.core.logging import get_logger
from dungeon_core.engine.movement import is_blocked
from dungeon_core.models.entities import (
    Entity,
    create_confusion_scroll,
    create_healing_potion,
    create_lightning_scroll,
    create_orc,
    create_troll,
)
from dungeon_core.models.map import GameMap, Rect

logger = get_logger(__name__)


ORC_CHANCE = 0.8
"""Draws below this spawn an orc, the rest a troll."""

HEALING_POTION_CHANCE = 0.7
LIGHTNING_SCROLL_CHANCE = 0.1
"""Cumulative item thresholds; the remainder is a scroll of confusion."""


@dataclass
class GeneratedLevel:
    """Result of level generation.

    Attributes:
        game_map: Carved tile grid.
        rooms: Accepted rooms in placement order.
        entities: Monsters and items, in placement order (no player).
        player_start: Center of the first accepted room.
    """

    game_map: GameMap
    rooms: list[Rect] = field(default_factory=list)
    entities: list[Entity] = field(default_factory=list)
    player_start: tuple[int, int] = (0, 0)


# =============================================================================
# Population
# =============================================================================


def _random_interior_cell(room: Rect, rng: random.Random) -> tuple[int, int]:
    return rng.randint(room.x1 + 1, room.x2 - 1), rng.randint(room.y1 + 1, room.y2 - 1)


def place_monsters(
    room: Rect,
    game_map: GameMap,
    entities: list[Entity],
    rng: random.Random,
    max_monsters: int,
) -> int:
    """Spawn up to ``max_monsters`` monsters inside a room.

    Returns:
        Number of monsters actually placed; draws landing on a blocked
        cell are skipped.
    """
    placed = 0
    for _ in range(rng.randint(0, max_monsters)):
        x, y = _random_interior_cell(room, rng)
        if is_blocked(x, y, game_map, entities):
            continue
        monster = create_orc(x, y) if rng.random() < ORC_CHANCE else create_troll(x, y)
        entities.append(monster)
        placed += 1
    return placed


def place_items(
    room: Rect,
    game_map: GameMap,
    entities: list[Entity],
    rng: random.Random,
    max_items: int,
) -> int:
    """Scatter up to ``max_items`` items inside a room."""
    placed = 0
    for _ in range(rng.randint(0, max_items)):
        x, y = _random_interior_cell(room, rng)
        if is_blocked(x, y, game_map, entities):
            continue
        dice = rng.random()
        if dice < HEALING_POTION_CHANCE:
            item = create_healing_potion(x, y)
        elif dice < HEALING_POTION_CHANCE + LIGHTNING_SCROLL_CHANCE:
            item = create_lightning_scroll(x, y)
        else:
            item = create_confusion_scroll(x, y)
        entities.append(item)
        placed += 1
    return placed


# =============================================================================
# Generation
# =============================================================================


def connect_rooms(game_map: GameMap, previous: Rect, new: Rect, rng: random.Random) -> None:
    """Carve an L-shaped corridor between two room centers.

    A coin flip picks horizontal-then-vertical or vertical-then-horizontal.
    """
    prev_x, prev_y = previous.center()
    new_x, new_y = new.center()
    if rng.random() < 0.5:
        game_map.carve_horizontal_tunnel(prev_x, new_x, prev_y)
        game_map.carve_vertical_tunnel(prev_y, new_y, new_x)
    else:
        game_map.carve_vertical_tunnel(prev_y, new_y, prev_x)
        game_map.carve_horizontal_tunnel(prev_x, new_x, new_y)


def generate_level(
    width: int,
    height: int,
    *,
    max_rooms: int,
    room_min_size: int,
    room_max_size: int,
    max_room_monsters: int,
    max_room_items: int,
    rng: random.Random,
) -> GeneratedLevel:
    """Generate a connected level of rooms and corridors.

    Args:
        width: Map width in cells.
        height: Map height in cells.
        max_rooms: Number of placement attempts; rejections count.
        room_min_size: Smallest room side.
        room_max_size: Largest room side.
        max_room_monsters: Upper bound of monsters per room.
        max_room_items: Upper bound of items per room.
        rng: Random source for every draw.

    Returns:
        The carved map, accepted rooms, spawned entities and player start.

    Raises:
        LevelGenerationError: If the sizes cannot fit the map or no room
            was accepted.
    """
    if room_min_size > room_max_size:
        raise LevelGenerationError(
            "room_min_size exceeds room_max_size",
            details={"room_min_size": room_min_size, "room_max_size": room_max_size},
        )
    if room_max_size >= min(width, height):
        raise LevelGenerationError(
            "Largest room does not fit inside the map",
            details={"room_max_size": room_max_size, "width": width, "height": height},
        )

    level = GeneratedLevel(game_map=GameMap(width, height))

    for attempt in range(max_rooms):
        w = rng.randint(room_min_size, room_max_size)
        h = rng.randint(room_min_size, room_max_size)
        x = rng.randrange(0, width - w)
        y = rng.randrange(0, height - h)
        new_room = Rect.from_size(x, y, w, h)

        if any(new_room.intersects(other) for other in level.rooms):
            logger.debug("Room rejected", attempt=attempt, x=x, y=y, w=w, h=h)
            continue

        level.game_map.carve_room(new_room)
        place_monsters(new_room, level.game_map, level.entities, rng, max_room_monsters)
        place_items(new_room, level.game_map, level.entities, rng, max_room_items)

        if level.rooms:
            connect_rooms(level.game_map, level.rooms[-1], new_room, rng)
        else:
            level.player_start = new_room.center()

        level.rooms.append(new_room)
        logger.debug("Room accepted", attempt=attempt, index=len(level.rooms) - 1, x=x, y=y, w=w, h=h)

    if not level.rooms:
        raise LevelGenerationError(
            "No room could be placed",
            details={"max_rooms": max_rooms},
        )

    logger.info(
        "Level generated",
        width=width,
        height=height,
        rooms=len(level.rooms),
        entities=len(level.entities),
        floor_cells=level.game_map.floor_count(),
    )
    return level


__all__ = [
    "ORC_CHANCE",
    "HEALING_POTION_CHANCE",
    "LIGHTNING_SCROLL_CHANCE",
    "GeneratedLevel",
    "place_monsters",
    "place_items",
    "connect_rooms",
    "generate_level",
]
