"""Enumeration types for the dungeon simulation core.

All enums are StrEnums so that they serialize to readable values in logs
and snapshots.
"""

from __future__ import annotations

from enum import StrEnum


class DeathVariant(StrEnum):
    """Which terminal mutation runs when a fighter drops to 0 hp."""

    PLAYER = "player"
    """Corpse glyph, stays in the roster, keeps its fighter stats."""

    MONSTER = "monster"
    """Becomes inert, non-blocking remains."""


class ItemKind(StrEnum):
    """Usable item variants, each bound to one effect."""

    HEAL = "heal"
    LIGHTNING = "lightning"
    CONFUSE = "confuse"


class UseResult(StrEnum):
    """Outcome of using an item."""

    USED_UP = "used_up"
    """The effect happened; the item is consumed."""

    CANCELLED = "cancelled"
    """Nothing happened; the item stays in the inventory."""


__all__ = [
    "DeathVariant",
    "ItemKind",
    "UseResult",
]
