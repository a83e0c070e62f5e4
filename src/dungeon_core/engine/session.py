"""Session factory: generate a level and put the player in it."""

from __future__ import annotations

import random

from dungeon_core.core.config import Settings, get_settings
from dungeon_core.core.constants import RED, WELCOME_MESSAGE
from dungeon_core.core.logging import bind_context, get_logger
from dungeon_core.engine.interfaces import FieldOfView
from dungeon_core.engine.procgen import generate_level
from dungeon_core.models.entities import create_player
from dungeon_core.models.game_state import GameSession, Roster
from dungeon_core.models.messages import MessageLog

logger = get_logger(__name__)


def new_session(
    fov: FieldOfView,
    settings: Settings | None = None,
    *,
    seed: int | None = None,
) -> GameSession:
    """Create a fresh session on a newly generated level.

    Args:
        fov: Visibility collaborator for this session.
        settings: Settings to use; defaults to the cached application settings.
        seed: RNG seed; falls back to ``settings.dungeon.seed``, then to
            an unseeded RNG.

    Returns:
        A session with the player at index 0 in the first room's center
        and the welcome line in the message log.

    Raises:
        LevelGenerationError: If no room could be placed.
    """
    settings = settings or get_settings()
    dungeon = settings.dungeon
    rng = random.Random(seed if seed is not None else dungeon.seed)

    level = generate_level(
        dungeon.map_width,
        dungeon.map_height,
        max_rooms=dungeon.max_rooms,
        room_min_size=dungeon.room_min_size,
        room_max_size=dungeon.room_max_size,
        max_room_monsters=dungeon.max_room_monsters,
        max_room_items=dungeon.max_room_items,
        rng=rng,
    )

    player = create_player(*level.player_start)
    session = GameSession(
        game_map=level.game_map,
        roster=Roster([player, *level.entities]),
        fov=fov,
        rng=rng,
        settings=settings,
        messages=MessageLog(settings.messages.max_messages),
        rooms=level.rooms,
    )
    session.messages.add(WELCOME_MESSAGE, RED)

    bind_context(session_id=session.session_id)
    logger.info(
        "Session created",
        rooms=len(level.rooms),
        entities=len(session.roster),
        player_start=level.player_start,
    )
    return session


__all__ = ["new_session"]
