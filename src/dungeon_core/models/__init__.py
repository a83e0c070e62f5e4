"""Pydantic data model for the dungeon simulation core.

Submodules:
    enums: Enumeration types (DeathVariant, ItemKind, UseResult)
    map: Tile grid and room geometry (Tile, Rect, GameMap)
    components: Entity components (Fighter, AI states, ItemComponent)
    entities: The Entity model and its factories
    messages: The in-game message log
    game_state: Roster and GameSession

Example:
    >>> from dungeon_core.models import BasicAI, ConfusedAI, create_orc
    >>> orc = create_orc(5, 5)
    >>> orc.ai = ConfusedAI.wrapping(orc.ai, 10)
    >>> orc.ai.depth
    1
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from dungeon_core.models.enums import DeathVariant, ItemKind, UseResult

# =============================================================================
# Map
# =============================================================================
from dungeon_core.models.map import GameMap, Rect, Tile

# =============================================================================
# Components
# =============================================================================
from dungeon_core.models.components import (
    AIState,
    BasicAI,
    Component,
    ConfusedAI,
    Fighter,
    ItemComponent,
)

# =============================================================================
# Entities
# =============================================================================
from dungeon_core.models.entities import (
    Entity,
    create_confusion_scroll,
    create_healing_potion,
    create_item,
    create_lightning_scroll,
    create_monster,
    create_orc,
    create_player,
    create_troll,
)

# =============================================================================
# Messages & Game State
# =============================================================================
from dungeon_core.models.messages import Message, MessageLog
from dungeon_core.models.game_state import GameSession, Roster


__all__ = [
    # Enumerations
    "DeathVariant",
    "ItemKind",
    "UseResult",
    # Map
    "Tile",
    "Rect",
    "GameMap",
    # Components
    "Component",
    "Fighter",
    "BasicAI",
    "ConfusedAI",
    "AIState",
    "ItemComponent",
    # Entities
    "Entity",
    "create_player",
    "create_monster",
    "create_orc",
    "create_troll",
    "create_item",
    "create_healing_potion",
    "create_lightning_scroll",
    "create_confusion_scroll",
    # Messages & Game State
    "Message",
    "MessageLog",
    "Roster",
    "GameSession",
]
