"""AI behavior machine.

Each AI state kind has an act function that performs one turn for the
entity and returns the state the entity should hold afterwards.
``take_turn`` installs that returned state.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from dungeon_core.core.constants import PLAYER_INDEX, RED
from dungeon_core.core.exceptions import InvalidGameStateError
from dungeon_core.core.logging import get_logger
from dungeon_core.engine.combat import resolve_attack
from dungeon_core.engine.movement import move_by, move_towards
from dungeon_core.models.components import AIState, BasicAI, ConfusedAI


if TYPE_CHECKING:
    from dungeon_core.models.game_state import GameSession

logger = get_logger(__name__)


def act_basic(session: GameSession, index: int, state: BasicAI) -> AIState:
    """Chase the player while visible; attack when adjacent."""
    monster = session.roster[index]
    if not session.is_visible(monster.x, monster.y):
        return state

    player = session.player
    if monster.distance_to(player) >= 2.0:
        move_towards(index, player.x, player.y, session.game_map, session.roster)
    elif player.alive and player.fighter is not None and player.fighter.hp > 0:
        attacker, defender = session.roster.pair(index, PLAYER_INDEX)
        session.messages.extend(resolve_attack(attacker, defender))
    return state


def act_confused(session: GameSession, index: int, state: ConfusedAI) -> AIState:
    """Random step while turns remain, then hand back the wrapped state."""
    monster = session.roster[index]
    if state.turns_remaining >= 0:
        dx = session.rng.randint(-1, 1)
        dy = session.rng.randint(-1, 1)
        move_by(index, dx, dy, session.game_map, session.roster)
        return state.tick()

    session.messages.add(f"The {monster.name} is no longer confused!", RED)
    logger.debug("Confusion ended", name=monster.name, restored=state.previous.kind)
    return state.previous


AI_HANDLERS: dict[str, Callable[["GameSession", int, Any], AIState]] = {
    "basic": act_basic,
    "confused": act_confused,
}


def take_turn(session: GameSession, index: int) -> None:
    """Run one AI turn for the entity at ``index`` and install its next state.

    Raises:
        InvalidGameStateError: If the entity has no AI component.
    """
    entity = session.roster[index]
    state = entity.ai
    if state is None:
        raise InvalidGameStateError(
            f"{entity.name} has no AI to act with",
            details={"index": index},
        )
    entity.ai = AI_HANDLERS[state.kind](session, index, state)


__all__ = [
    "AI_HANDLERS",
    "act_basic",
    "act_confused",
    "take_turn",
]
