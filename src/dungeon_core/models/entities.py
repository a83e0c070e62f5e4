"""Entity model and factories.

Every object in the dungeon (the player, monsters, items lying on the
floor, corpses) is one :class:`Entity`. What it can do depends on the
optional components it carries.

Example:
    >>> orc = create_orc(3, 4)
    >>> orc.fighter.hp
    10
    >>> orc.distance(3, 7)
    3.0
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from dungeon_core.core.constants import (
    DARKER_GREEN,
    DESATURATED_GREEN,
    LIGHT_YELLOW,
    ORC_GLYPH,
    PLAYER_GLYPH,
    POTION_GLYPH,
    SCROLL_GLYPH,
    TROLL_GLYPH,
    VIOLET,
    WHITE,
    Color,
)
from dungeon_core.models.components import AIState, BasicAI, Fighter, ItemComponent
from dungeon_core.models.enums import DeathVariant, ItemKind


# =============================================================================
# Entity
# =============================================================================


class Entity(BaseModel):
    """A positioned object in the dungeon.

    Attributes:
        x: Column on the map.
        y: Row on the map.
        glyph: Single character drawn by the renderer.
        color: Foreground color.
        name: Display name used in messages.
        blocks: Whether the entity blocks movement into its cell.
        alive: Cleared by the death transition.
        fighter: Combat stats, if the entity can fight.
        ai: Behavior state, if the entity acts on its own.
        item: Item component, if the entity can be picked up and used.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    x: int = Field(description="Column on the map")
    y: int = Field(description="Row on the map")
    glyph: str = Field(min_length=1, max_length=1, description="Display character")
    color: Color = Field(description="Foreground color")
    name: str = Field(min_length=1, description="Display name")
    blocks: bool = Field(default=False, description="Blocks movement")
    alive: bool = Field(default=False, description="Still in play as an actor")

    fighter: Fighter | None = Field(default=None, description="Combat component")
    ai: AIState | None = Field(default=None, description="Behavior state")
    item: ItemComponent | None = Field(default=None, description="Usable item component")

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def place(self, x: int, y: int) -> None:
        """Teleport the entity; no collision checks."""
        self.x = x
        self.y = y

    def distance(self, x: int, y: int) -> float:
        """Euclidean distance to a cell."""
        return math.hypot(x - self.x, y - self.y)

    def distance_to(self, other: Entity) -> float:
        """Euclidean distance to another entity."""
        return self.distance(other.x, other.y)

    def __str__(self) -> str:
        return f"{self.name} ({self.glyph}) at {self.position}"


# =============================================================================
# Factory Functions
# =============================================================================


def create_player(x: int = 0, y: int = 0) -> Entity:
    """Create the player: 30 hp, defense 2, power 5."""
    return Entity(
        x=x,
        y=y,
        glyph=PLAYER_GLYPH,
        color=WHITE,
        name="player",
        blocks=True,
        alive=True,
        fighter=Fighter.at_full_health(30, defense=2, power=5, on_death=DeathVariant.PLAYER),
    )


def create_monster(
    x: int,
    y: int,
    *,
    name: str,
    glyph: str,
    color: Color,
    hp: int,
    defense: int,
    power: int,
) -> Entity:
    """Create a hostile, blocking monster with basic AI."""
    return Entity(
        x=x,
        y=y,
        glyph=glyph,
        color=color,
        name=name,
        blocks=True,
        alive=True,
        fighter=Fighter.at_full_health(hp, defense=defense, power=power, on_death=DeathVariant.MONSTER),
        ai=BasicAI(),
    )


def create_orc(x: int, y: int) -> Entity:
    return create_monster(
        x, y, name="orc", glyph=ORC_GLYPH, color=DESATURATED_GREEN, hp=10, defense=0, power=3
    )


def create_troll(x: int, y: int) -> Entity:
    return create_monster(
        x, y, name="troll", glyph=TROLL_GLYPH, color=DARKER_GREEN, hp=16, defense=1, power=4
    )


def create_item(x: int, y: int, *, name: str, glyph: str, color: Color, kind: ItemKind) -> Entity:
    """Create a non-blocking item lying on the floor."""
    return Entity(
        x=x,
        y=y,
        glyph=glyph,
        color=color,
        name=name,
        blocks=False,
        item=ItemComponent(kind=kind),
    )


def create_healing_potion(x: int, y: int) -> Entity:
    return create_item(x, y, name="healing potion", glyph=POTION_GLYPH, color=VIOLET, kind=ItemKind.HEAL)


def create_lightning_scroll(x: int, y: int) -> Entity:
    return create_item(
        x, y, name="scroll of lightning bolt", glyph=SCROLL_GLYPH, color=LIGHT_YELLOW, kind=ItemKind.LIGHTNING
    )


def create_confusion_scroll(x: int, y: int) -> Entity:
    return create_item(
        x, y, name="scroll of confusion", glyph=SCROLL_GLYPH, color=LIGHT_YELLOW, kind=ItemKind.CONFUSE
    )


__all__ = [
    "Entity",
    "create_player",
    "create_monster",
    "create_orc",
    "create_troll",
    "create_item",
    "create_healing_potion",
    "create_lightning_scroll",
    "create_confusion_scroll",
]
