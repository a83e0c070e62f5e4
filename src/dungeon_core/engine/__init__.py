"""Game engine module for the dungeon simulation core.

This module provides the rules that turn one player input into the next
game state: level generation, movement, combat, AI, items and the turn
loop.

Submodules:
    procgen: Rooms, corridors and room population
    movement: Blocking checks and step primitives
    combat: Attacks, damage, death and ranged targeting
    ai: Basic and confused AI behaviors
    items: Pickup, use and item effects
    frame: Read-side snapshot for rendering
    interfaces: Protocols for FOV, display and menu collaborators
    session: Session factory
    loop: Turn orchestrator with the AI sweep

Example:
    >>> from dungeon_core.engine import GameLoop, InputAction, new_session
    >>>
    >>> session = new_session(fov, seed=42)
    >>> loop = GameLoop(session, menu=menu)
    >>> result = loop.process_turn(InputAction.move(1, 0))
    >>> result.status
    <PlayerAction.TOOK_TURN: 'took_turn'>
"""

from __future__ import annotations

# =============================================================================
# Level Generation
# =============================================================================
from dungeon_core.engine.procgen import (
    GeneratedLevel,
    connect_rooms,
    generate_level,
    place_items,
    place_monsters,
)

# =============================================================================
# Movement, Combat, AI & Items
# =============================================================================
from dungeon_core.engine.movement import (
    is_blocked,
    move_by,
    move_towards,
    round_half_away_from_zero,
)
from dungeon_core.engine.combat import (
    find_closest_target,
    monster_death,
    player_death,
    resolve_attack,
    take_damage,
)
from dungeon_core.engine.ai import act_basic, act_confused, take_turn
from dungeon_core.engine.items import (
    cast_confuse,
    cast_heal,
    cast_lightning,
    pick_up,
    use_item,
)

# =============================================================================
# Collaborators, Frames & Loop
# =============================================================================
from dungeon_core.engine.interfaces import ChoiceMenu, Display, FieldOfView, InputSource
from dungeon_core.engine.frame import FrameSnapshot, Sprite, build_frame, names_at
from dungeon_core.engine.session import new_session
from dungeon_core.engine.loop import (
    GameLoop,
    InputAction,
    InputKind,
    PlayerAction,
    TurnResult,
)


__all__ = [
    # Level Generation
    "GeneratedLevel",
    "generate_level",
    "place_monsters",
    "place_items",
    "connect_rooms",
    # Movement
    "is_blocked",
    "move_by",
    "move_towards",
    "round_half_away_from_zero",
    # Combat
    "resolve_attack",
    "take_damage",
    "player_death",
    "monster_death",
    "find_closest_target",
    # AI
    "take_turn",
    "act_basic",
    "act_confused",
    # Items
    "pick_up",
    "use_item",
    "cast_heal",
    "cast_lightning",
    "cast_confuse",
    # Collaborators
    "FieldOfView",
    "Display",
    "ChoiceMenu",
    "InputSource",
    # Frames
    "Sprite",
    "FrameSnapshot",
    "build_frame",
    "names_at",
    # Session & Loop
    "new_session",
    "GameLoop",
    "InputAction",
    "InputKind",
    "PlayerAction",
    "TurnResult",
]
