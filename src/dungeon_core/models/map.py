"""Tile grid and room geometry.

The map is a fixed-size grid of wall/floor tiles stored as numpy boolean
planes (one per tile field), indexed ``[x, y]``. Individual cells can be
read back as immutable :class:`Tile` records.
"""

from __future__ import annotations

from typing import Self

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Tile
# =============================================================================


class Tile(BaseModel):
    """A single map cell.

    Walls block both movement and sight; floors block neither.
    ``explored`` only ever goes from False to True.
    """

    model_config = ConfigDict(frozen=True)

    blocked: bool = Field(description="Blocks movement")
    block_sight: bool = Field(description="Blocks line of sight")
    explored: bool = Field(default=False, description="Has ever been seen")

    @classmethod
    def wall(cls) -> Self:
        return cls(blocked=True, block_sight=True)

    @classmethod
    def floor(cls) -> Self:
        return cls(blocked=False, block_sight=False)


# =============================================================================
# Rect
# =============================================================================


class Rect(BaseModel):
    """Axis-aligned room rectangle.

    The walls sit on ``x1``/``x2`` and ``y1``/``y2``; carving a room only
    floors the cells strictly between them. Built with ``from_size``, the
    span is half-open: ``x2 = x1 + w`` and ``y2 = y1 + h`` are exclusive.
    """

    model_config = ConfigDict(frozen=True)

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Self:
        """Build a rectangle from its top-left corner and size."""
        return cls(x1=x, y1=y, x2=x + w, y2=y + h)

    def center(self) -> tuple[int, int]:
        """Integer midpoint of the rectangle."""
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect) -> bool:
        """True when the closed rectangles overlap.

        Edges count as overlapping, so two accepted rooms never share a
        wall and always keep a gap for corridors.
        """
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> tuple[slice, slice]:
        """Slices selecting the carvable interior of the room."""
        return slice(self.x1 + 1, self.x2), slice(self.y1 + 1, self.y2)

    def contains_interior(self, x: int, y: int) -> bool:
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


# =============================================================================
# Game Map
# =============================================================================


class GameMap:
    """Fixed-size grid of wall/floor tiles.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        blocked: Movement-blocking plane, shape ``(width, height)``.
        block_sight: Sight-blocking plane, shape ``(width, height)``.
        explored: Ever-seen plane, shape ``(width, height)``.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-wall map.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        self._width = width
        self._height = height
        self.blocked: NDArray[np.bool_] = np.ones((width, height), dtype=np.bool_)
        self.block_sight: NDArray[np.bool_] = np.ones((width, height), dtype=np.bool_)
        self.explored: NDArray[np.bool_] = np.zeros((width, height), dtype=np.bool_)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether ``(x, y)`` lies inside the map."""
        return 0 <= x < self._width and 0 <= y < self._height

    def tile(self, x: int, y: int) -> Tile:
        """Read one cell as an immutable Tile.

        Raises:
            IndexError: If the cell is outside the map.
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self._width}x{self._height} map")
        return Tile(
            blocked=bool(self.blocked[x, y]),
            block_sight=bool(self.block_sight[x, y]),
            explored=bool(self.explored[x, y]),
        )

    def __getitem__(self, position: tuple[int, int]) -> Tile:
        x, y = position
        return self.tile(x, y)

    def is_wall(self, x: int, y: int) -> bool:
        """Movement check used by the engine; off-map cells count as walls."""
        if not self.in_bounds(x, y):
            return True
        return bool(self.blocked[x, y])

    # =========================================================================
    # Carving
    # =========================================================================

    def carve(self, x: int, y: int) -> None:
        """Turn one cell into floor."""
        self.blocked[x, y] = False
        self.block_sight[x, y] = False

    def carve_room(self, room: Rect) -> None:
        """Turn the interior of a room into floor."""
        xs, ys = room.interior()
        self.blocked[xs, ys] = False
        self.block_sight[xs, ys] = False

    def carve_horizontal_tunnel(self, x1: int, x2: int, y: int) -> None:
        """Floor every cell from x1 to x2 (inclusive, any order) on row y."""
        xs = slice(min(x1, x2), max(x1, x2) + 1)
        self.blocked[xs, y] = False
        self.block_sight[xs, y] = False

    def carve_vertical_tunnel(self, y1: int, y2: int, x: int) -> None:
        """Floor every cell from y1 to y2 (inclusive, any order) on column x."""
        ys = slice(min(y1, y2), max(y1, y2) + 1)
        self.blocked[x, ys] = False
        self.block_sight[x, ys] = False

    # =========================================================================
    # Exploration
    # =========================================================================

    def mark_explored(self, visible: NDArray[np.bool_]) -> None:
        """Mark every visible cell explored; never clears a flag."""
        self.explored |= visible

    def floor_count(self) -> int:
        return int(np.count_nonzero(~self.blocked))


__all__ = [
    "Tile",
    "Rect",
    "GameMap",
]
