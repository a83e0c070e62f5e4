"""Application-wide constants for the dungeon simulation core.

This module defines constants used throughout the core, including the
color palette handed to the renderer, entity glyphs, and roster
conventions.
"""

from __future__ import annotations

import string
from typing import NamedTuple


class Color(NamedTuple):
    """An RGB color as exposed to the rendering collaborator."""

    r: int
    g: int
    b: int


# =============================================================================
# Roster & Inventory
# =============================================================================

PLAYER_INDEX = 0
"""Roster index reserved for the player."""

INVENTORY_LETTERS = string.ascii_lowercase
"""Selection letters for menu options; also bounds the inventory size."""

# =============================================================================
# Glyphs
# =============================================================================

PLAYER_GLYPH = "@"
CORPSE_GLYPH = "%"
ORC_GLYPH = "o"
TROLL_GLYPH = "T"
POTION_GLYPH = "!"
SCROLL_GLYPH = "#"

# =============================================================================
# Palette
# =============================================================================

WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
DARK_RED = Color(191, 0, 0)
ORANGE = Color(255, 127, 0)
YELLOW = Color(255, 255, 0)
LIGHT_YELLOW = Color(255, 255, 63)
GREEN = Color(0, 255, 0)
LIGHT_GREEN = Color(63, 255, 63)
DESATURATED_GREEN = Color(63, 127, 63)
DARKER_GREEN = Color(0, 127, 0)
LIGHT_BLUE = Color(63, 63, 255)
VIOLET = Color(127, 0, 255)
LIGHT_VIOLET = Color(159, 63, 255)

COLOR_DARK_WALL = Color(0, 0, 100)
COLOR_LIGHT_WALL = Color(130, 110, 50)
COLOR_DARK_GROUND = Color(50, 50, 150)
COLOR_LIGHT_GROUND = Color(200, 180, 50)

# =============================================================================
# Messages
# =============================================================================

WELCOME_MESSAGE = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings."
"""First line of every session's message log."""

INVENTORY_PROMPT = "Press the key next to an item to use it, or any other to cancel."
EMPTY_INVENTORY_LABEL = "Inventory is empty."


__all__ = [
    "Color",
    # Roster
    "PLAYER_INDEX",
    "INVENTORY_LETTERS",
    # Glyphs
    "PLAYER_GLYPH",
    "CORPSE_GLYPH",
    "ORC_GLYPH",
    "TROLL_GLYPH",
    "POTION_GLYPH",
    "SCROLL_GLYPH",
    # Palette
    "WHITE",
    "RED",
    "DARK_RED",
    "ORANGE",
    "YELLOW",
    "LIGHT_YELLOW",
    "GREEN",
    "LIGHT_GREEN",
    "DESATURATED_GREEN",
    "DARKER_GREEN",
    "LIGHT_BLUE",
    "VIOLET",
    "LIGHT_VIOLET",
    "COLOR_DARK_WALL",
    "COLOR_LIGHT_WALL",
    "COLOR_DARK_GROUND",
    "COLOR_LIGHT_GROUND",
    # Messages
    "WELCOME_MESSAGE",
    "INVENTORY_PROMPT",
    "EMPTY_INVENTORY_LABEL",
]
