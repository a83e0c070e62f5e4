"""Dungeon Core - turn-based dungeon-crawler simulation.

Owns the entity roster, combat resolution, AI behavior, item effects and
procedural level generation. Rendering, input polling and field-of-view
computation are collaborators plugged in through small protocols.

Example:
    >>> from dungeon_core import GameLoop, InputAction, new_session
    >>>
    >>> session = new_session(fov, seed=7)
    >>> loop = GameLoop(session, menu=menu, display=display)
    >>> loop.run(read_input)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic map, component and entity models; roster and session.
    engine: Level generation, combat, AI, items and the turn loop.
"""

from __future__ import annotations

# Core
from dungeon_core.core.config import Settings, get_settings
from dungeon_core.core.exceptions import DungeonCoreError
from dungeon_core.core.logging import configure_logging, get_logger

# Models
from dungeon_core.models import (
    BasicAI,
    ConfusedAI,
    Entity,
    Fighter,
    GameMap,
    GameSession,
    ItemKind,
    Rect,
    Roster,
    UseResult,
)

# Engine
from dungeon_core.engine import (
    FrameSnapshot,
    GameLoop,
    InputAction,
    PlayerAction,
    TurnResult,
    generate_level,
    new_session,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "DungeonCoreError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "GameMap",
    "Rect",
    "Entity",
    "Fighter",
    "BasicAI",
    "ConfusedAI",
    "ItemKind",
    "UseResult",
    "Roster",
    "GameSession",
    # Engine
    "generate_level",
    "new_session",
    "GameLoop",
    "InputAction",
    "PlayerAction",
    "TurnResult",
    "FrameSnapshot",
]
