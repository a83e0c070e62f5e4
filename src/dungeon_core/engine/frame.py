"""Read-side frame snapshot handed to the display collaborator.

Building a frame is also the point where visible cells become explored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from dungeon_core.core.constants import (
    COLOR_DARK_GROUND,
    COLOR_DARK_WALL,
    COLOR_LIGHT_GROUND,
    COLOR_LIGHT_WALL,
    Color,
)
from dungeon_core.models.messages import Message


if TYPE_CHECKING:
    from dungeon_core.models.game_state import GameSession


@dataclass(frozen=True)
class Sprite:
    """One entity as the renderer sees it."""

    x: int
    y: int
    glyph: str
    color: Color
    name: str
    blocks: bool
    visible: bool


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    """Everything needed to draw one frame.

    Attributes:
        width: Map width.
        height: Map height.
        blocked: Wall plane, shape ``(width, height)``.
        explored: Explored plane, after this frame's update.
        visible: Currently visible plane.
        background: RGB background per cell, shape ``(width, height, 3)``;
            unexplored cells are black.
        sprites: Entities, non-blocking ones first so blockers draw on top.
        messages: The recent message window, oldest first.
        hp: Player's current hit points.
        max_hp: Player's maximum hit points.
        names_under_cursor: Space-joined names of visible entities at the
            cursor cell.
    """

    width: int
    height: int
    blocked: NDArray[np.bool_]
    explored: NDArray[np.bool_]
    visible: NDArray[np.bool_]
    background: NDArray[np.uint8]
    sprites: tuple[Sprite, ...]
    messages: tuple[Message, ...]
    hp: int
    max_hp: int
    names_under_cursor: str = ""

    @property
    def visible_sprites(self) -> tuple[Sprite, ...]:
        return tuple(sprite for sprite in self.sprites if sprite.visible)


def visibility_mask(session: GameSession) -> NDArray[np.bool_]:
    """Query the FOV collaborator for every cell."""
    game_map = session.game_map
    return np.array(
        [[session.fov.is_visible(x, y) for y in range(game_map.height)] for x in range(game_map.width)],
        dtype=np.bool_,
    )


def names_at(session: GameSession, x: int, y: int) -> str:
    """Names of the visible entities on ``(x, y)``, joined with spaces."""
    if not session.game_map.in_bounds(x, y) or not session.is_visible(x, y):
        return ""
    return " ".join(entity.name for entity in session.roster if entity.position == (x, y))


def build_frame(session: GameSession, cursor: tuple[int, int] | None = None) -> FrameSnapshot:
    """Snapshot the session for rendering and mark visible cells explored."""
    game_map = session.game_map
    visible = visibility_mask(session)
    game_map.mark_explored(visible)

    walls = game_map.blocked
    remembered = game_map.explored & ~visible
    background = np.zeros((*game_map.shape, 3), dtype=np.uint8)
    background[remembered & walls] = COLOR_DARK_WALL
    background[remembered & ~walls] = COLOR_DARK_GROUND
    background[visible & walls] = COLOR_LIGHT_WALL
    background[visible & ~walls] = COLOR_LIGHT_GROUND

    sprites = tuple(
        Sprite(
            x=entity.x,
            y=entity.y,
            glyph=entity.glyph,
            color=entity.color,
            name=entity.name,
            blocks=entity.blocks,
            visible=game_map.in_bounds(entity.x, entity.y) and bool(visible[entity.x, entity.y]),
        )
        for entity in sorted(session.roster, key=lambda entity: entity.blocks)
    )

    fighter = session.player.fighter
    return FrameSnapshot(
        width=game_map.width,
        height=game_map.height,
        blocked=walls.copy(),
        explored=game_map.explored.copy(),
        visible=visible,
        background=background,
        sprites=sprites,
        messages=tuple(session.messages.recent(session.settings.messages.panel_height)),
        hp=fighter.hp if fighter is not None else 0,
        max_hp=fighter.max_hp if fighter is not None else 0,
        names_under_cursor=names_at(session, *cursor) if cursor is not None else "",
    )


__all__ = [
    "Sprite",
    "FrameSnapshot",
    "visibility_mask",
    "names_at",
    "build_frame",
]
