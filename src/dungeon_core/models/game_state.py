"""Game state models for the dungeon simulation core.

This module defines the entity roster and the session bundle that the
engine mutates turn by turn.

Models:
    Roster: Ordered arena owning every active entity; index 0 is the player.
    GameSession: Map, roster, inventory, message log, FOV collaborator and
        the seeded RNG of one play session.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import uuid4

from dungeon_core.core.config import Settings
from dungeon_core.core.constants import PLAYER_INDEX
from dungeon_core.core.exceptions import EntityAliasingError, InvalidGameStateError
from dungeon_core.models.entities import Entity
from dungeon_core.models.map import GameMap, Rect
from dungeon_core.models.messages import MessageLog


if TYPE_CHECKING:
    from dungeon_core.engine.interfaces import FieldOfView


# =============================================================================
# Roster
# =============================================================================


class Roster:
    """Ordered collection owning all entities on the current level.

    Entities are addressed by integer index. Index 0 is always the player
    and is never removed. Removing any other entity shifts the indices of
    the entities after it.
    """

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: list[Entity] = list(entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> Entity:
        return self._entities[index]

    @property
    def player(self) -> Entity:
        if not self._entities:
            raise InvalidGameStateError("Roster has no player", current_state="empty_roster")
        return self._entities[PLAYER_INDEX]

    def append(self, entity: Entity) -> int:
        """Add an entity and return its index."""
        self._entities.append(entity)
        return len(self._entities) - 1

    def pop(self, index: int) -> Entity:
        """Remove and return the entity at ``index``, keeping the order of the rest.

        Raises:
            InvalidGameStateError: If ``index`` is the player slot or not in
                the roster.
        """
        self._check_index(index)
        if index == PLAYER_INDEX:
            raise InvalidGameStateError(
                "The player cannot be removed from the roster",
                details={"index": index},
            )
        return self._entities.pop(index)

    def pair(self, first: int, second: int) -> tuple[Entity, Entity]:
        """Two distinct entities for a pairwise mutation (attacker, defender).

        Raises:
            EntityAliasingError: If both indices name the same slot.
            InvalidGameStateError: If either index is not in the roster.
        """
        if first == second:
            raise EntityAliasingError(
                "Cannot take two mutable views of the same entity",
                index=first,
            )
        self._check_index(first)
        self._check_index(second)
        return self._entities[first], self._entities[second]

    def index_of(self, entity: Entity) -> int:
        """Roster index of an entity, by identity."""
        for index, candidate in enumerate(self._entities):
            if candidate is entity:
                return index
        raise InvalidGameStateError(
            f"{entity.name} is not in the roster",
            current_state="detached_entity",
        )

    def indices_at(self, x: int, y: int) -> list[int]:
        """Indices of every entity standing on ``(x, y)``, in roster order."""
        return [i for i, entity in enumerate(self._entities) if entity.x == x and entity.y == y]

    def blocking_at(self, x: int, y: int) -> int | None:
        """Index of the first blocking entity on ``(x, y)``, if any."""
        for index in self.indices_at(x, y):
            if self._entities[index].blocks:
                return index
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entities):
            raise InvalidGameStateError(
                f"Roster index {index} out of range",
                details={"index": index, "size": len(self._entities)},
            )


# =============================================================================
# Game Session
# =============================================================================


@dataclass
class GameSession:
    """Everything one play session mutates.

    Attributes:
        game_map: The level's tile grid.
        roster: All entities on the level; index 0 is the player.
        fov: Visibility collaborator queried by AI and targeting.
        rng: Seeded random source used for generation and AI.
        settings: Tunables for item effects, inventory and the log.
        inventory: Picked-up items, in pickup order.
        messages: The in-game message log.
        rooms: Accepted rooms of the generated level.
        session_id: Identifier bound into the logging context.
    """

    game_map: GameMap
    roster: Roster
    fov: FieldOfView
    rng: random.Random
    settings: Settings
    inventory: list[Entity] = field(default_factory=list)
    messages: MessageLog = field(default_factory=MessageLog)
    rooms: list[Rect] = field(default_factory=list)
    session_id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def player(self) -> Entity:
        return self.roster.player

    @property
    def inventory_capacity(self) -> int:
        return self.settings.items.inventory_capacity

    def is_visible(self, x: int, y: int) -> bool:
        return self.fov.is_visible(x, y)


__all__ = [
    "Roster",
    "GameSession",
]
