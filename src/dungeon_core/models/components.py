"""ECS components attached to entities.

Components are data containers. An entity's role (player, monster, item
on the floor) is defined only by which components it carries:

- Fighter: can attack, take damage and die.
- AI: acts on its own after every player turn.
- Item: can be picked up and used from the inventory.

The AI state is a closed tagged union. ``ConfusedAI`` owns the state it
replaced and hands it back when the confusion wears off, so nesting is a
plain tree of values with no shared references.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dungeon_core.models.enums import DeathVariant, ItemKind


# =============================================================================
# Base Component
# =============================================================================


class Component(BaseModel):
    """Base class for all ECS components.

    Components can be mutated by the engine; every assignment is validated
    so invariants hold between turns.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )


# =============================================================================
# Fighter
# =============================================================================


class Fighter(Component):
    """Combat stats and death behavior.

    ``hp`` never exceeds ``max_hp``. It may drop below zero when lethal
    damage lands; the death transition runs in the same step.
    """

    max_hp: int = Field(ge=1, description="Maximum hit points")
    hp: int = Field(description="Current hit points")
    defense: int = Field(default=0, ge=0, description="Subtracted from incoming attack power")
    power: int = Field(default=0, ge=0, description="Attack power")
    on_death: DeathVariant = Field(description="Terminal mutation to run on death")

    @classmethod
    def at_full_health(cls, max_hp: int, *, defense: int, power: int, on_death: DeathVariant) -> "Fighter":
        return cls(max_hp=max_hp, hp=max_hp, defense=defense, power=power, on_death=on_death)

    @model_validator(mode="after")
    def hp_within_max(self) -> "Fighter":
        if self.hp > self.max_hp:
            raise ValueError(f"hp ({self.hp}) cannot exceed max_hp ({self.max_hp})")
        return self

    @property
    def is_full_health(self) -> bool:
        return self.hp >= self.max_hp

    def heal(self, amount: int) -> int:
        """Restore hit points, clamped to max_hp.

        Returns:
            Hit points actually restored.
        """
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before


# =============================================================================
# AI States
# =============================================================================


class BasicAI(BaseModel):
    """Chase the player while visible and attack when adjacent."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["basic"] = "basic"

    @property
    def depth(self) -> int:
        return 0


class ConfusedAI(BaseModel):
    """Stumble around randomly, then restore the wrapped state.

    The wrapper keeps acting while ``turns_remaining >= 0``; the act that
    finds it negative unwraps ``previous``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["confused"] = "confused"
    previous: AIState = Field(description="State restored when confusion ends")
    turns_remaining: int = Field(description="Random-walk turns left")

    @classmethod
    def wrapping(cls, previous: AIState, turns: int) -> "ConfusedAI":
        """Wrap an existing AI state for a number of turns."""
        return cls(previous=previous, turns_remaining=turns)

    @property
    def depth(self) -> int:
        """Number of confusion layers, this one included."""
        return 1 + self.previous.depth

    def tick(self) -> "ConfusedAI":
        """Same wrapper with one turn fewer."""
        return self.model_copy(update={"turns_remaining": self.turns_remaining - 1})


AIState = Annotated[BasicAI | ConfusedAI, Field(discriminator="kind")]
"""Closed set of AI behaviors, discriminated by ``kind``."""

ConfusedAI.model_rebuild()


# =============================================================================
# Item
# =============================================================================


class ItemComponent(Component):
    """Marks an entity as usable from the inventory."""

    kind: ItemKind = Field(description="Effect triggered on use")


__all__ = [
    "Component",
    "Fighter",
    "BasicAI",
    "ConfusedAI",
    "AIState",
    "ItemComponent",
]
