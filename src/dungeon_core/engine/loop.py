"""Game loop for turn-based play.

This module implements the turn orchestrator: it resolves one player
action per input event and, only when that action consumed a turn, lets
every AI-controlled entity act once in roster order.

The GameLoop is the central coordinator for:
- Mapping input actions onto world effects
- Gating the AI sweep on whether the player took a turn
- Driving the frame cycle (FOV recompute, present, read input)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dungeon_core.core.constants import (
    EMPTY_INVENTORY_LABEL,
    INVENTORY_LETTERS,
    INVENTORY_PROMPT,
    PLAYER_INDEX,
)
from dungeon_core.core.exceptions import ValidationError
from dungeon_core.core.logging import get_logger
from dungeon_core.engine.ai import take_turn
from dungeon_core.engine.combat import resolve_attack
from dungeon_core.engine.frame import FrameSnapshot, build_frame
from dungeon_core.engine.items import pick_up, use_item
from dungeon_core.engine.movement import move_by
from dungeon_core.models.enums import UseResult
from dungeon_core.models.messages import Message


if TYPE_CHECKING:
    from dungeon_core.engine.interfaces import ChoiceMenu, Display, InputSource
    from dungeon_core.models.game_state import GameSession

logger = get_logger(__name__)


# =============================================================================
# Input Actions
# =============================================================================


class InputKind(StrEnum):
    """Kinds of resolved player input."""

    MOVE = "move"
    PICK_UP = "pick_up"
    OPEN_INVENTORY = "open_inventory"
    USE_ITEM = "use_item"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    EXIT = "exit"


class InputAction(BaseModel):
    """One resolved input event.

    ``dx``/``dy`` are only meaningful for MOVE and ``index`` only for
    USE_ITEM. Malformed actions raise ``ValidationError`` on construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: InputKind
    dx: int = Field(default=0, description="Horizontal step for MOVE")
    dy: int = Field(default=0, description="Vertical step for MOVE")
    index: int | None = Field(default=None, description="Inventory slot for USE_ITEM")

    @model_validator(mode="after")
    def check_payload(self) -> Self:
        if self.kind is InputKind.MOVE:
            if self.dx not in (-1, 0, 1) or self.dy not in (-1, 0, 1):
                raise ValidationError(
                    "Move steps must be -1, 0 or 1",
                    field_name="dx/dy",
                    invalid_value=(self.dx, self.dy),
                )
            if self.dx == 0 and self.dy == 0:
                raise ValidationError("A move needs a direction", field_name="dx/dy", invalid_value=(0, 0))
        elif self.dx or self.dy:
            raise ValidationError(
                f"{self.kind} does not take a direction",
                field_name="dx/dy",
                invalid_value=(self.dx, self.dy),
            )

        if self.kind is InputKind.USE_ITEM:
            if self.index is None or self.index < 0:
                raise ValidationError("USE_ITEM needs a non-negative index", field_name="index", invalid_value=self.index)
        elif self.index is not None:
            raise ValidationError(f"{self.kind} does not take an index", field_name="index", invalid_value=self.index)
        return self

    @classmethod
    def move(cls, dx: int, dy: int) -> Self:
        return cls(kind=InputKind.MOVE, dx=dx, dy=dy)

    @classmethod
    def pick_up(cls) -> Self:
        return cls(kind=InputKind.PICK_UP)

    @classmethod
    def open_inventory(cls) -> Self:
        return cls(kind=InputKind.OPEN_INVENTORY)

    @classmethod
    def use_item(cls, index: int) -> Self:
        return cls(kind=InputKind.USE_ITEM, index=index)

    @classmethod
    def toggle_fullscreen(cls) -> Self:
        return cls(kind=InputKind.TOGGLE_FULLSCREEN)

    @classmethod
    def exit(cls) -> Self:
        return cls(kind=InputKind.EXIT)


# =============================================================================
# Turn Status
# =============================================================================


class PlayerAction(StrEnum):
    """Outcome of one player input."""

    TOOK_TURN = "took_turn"
    """The action changed the world; the AI sweep runs."""

    DID_NOT_TAKE_TURN = "did_not_take_turn"
    """Nothing happened in the world; no AI turn."""

    EXIT = "exit"
    """Stop the loop."""


@dataclass
class TurnResult:
    """Result of processing one input.

    Attributes:
        status: What the player's action amounted to.
        ai_turns: Number of AI entities that acted.
        messages: Messages appended to the log during this turn.
        player_alive: Whether the player is alive afterwards.
    """

    status: PlayerAction
    ai_turns: int = 0
    messages: list[Message] = field(default_factory=list)
    player_alive: bool = True


# =============================================================================
# Game Loop
# =============================================================================


class GameLoop:
    """Turn orchestrator for one game session.

    Attributes:
        session: The session being played.
        turn_count: Number of inputs that took a turn.
    """

    def __init__(
        self,
        session: GameSession,
        *,
        menu: ChoiceMenu | None = None,
        display: Display | None = None,
    ) -> None:
        """Initialize the game loop.

        Args:
            session: Session to drive.
            menu: Collaborator for the inventory menu.
            display: Collaborator that presents frames.
        """
        self._session = session
        self._menu = menu
        self._display = display
        self._turn_count = 0
        self._previous_player_position: tuple[int, int] | None = None

        logger.info(
            "GameLoop initialized",
            entities=len(session.roster),
            has_menu=menu is not None,
            has_display=display is not None,
        )

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def turn_count(self) -> int:
        return self._turn_count

    # =========================================================================
    # Player Actions
    # =========================================================================

    def handle_player_action(self, action: InputAction) -> PlayerAction:
        """Apply one input to the world.

        Args:
            action: The resolved input.

        Returns:
            Whether the action took a turn, or EXIT.
        """
        if action.kind is InputKind.EXIT:
            return PlayerAction.EXIT

        if action.kind is InputKind.TOGGLE_FULLSCREEN:
            if self._display is not None:
                self._display.toggle_fullscreen()
            return PlayerAction.DID_NOT_TAKE_TURN

        if not self._session.player.alive:
            return PlayerAction.DID_NOT_TAKE_TURN

        if action.kind is InputKind.MOVE:
            return self._move_or_attack(action.dx, action.dy)
        if action.kind is InputKind.PICK_UP:
            return self._pick_up()
        if action.kind is InputKind.OPEN_INVENTORY:
            return self._open_inventory()
        if action.kind is InputKind.USE_ITEM:
            return self._use_item(action.index)

        return PlayerAction.DID_NOT_TAKE_TURN

    def _move_or_attack(self, dx: int, dy: int) -> PlayerAction:
        session = self._session
        player = session.player
        x, y = player.x + dx, player.y + dy

        target = next(
            (
                index
                for index in session.roster.indices_at(x, y)
                if index != PLAYER_INDEX and session.roster[index].fighter is not None
            ),
            None,
        )
        if target is not None:
            attacker, defender = session.roster.pair(PLAYER_INDEX, target)
            session.messages.extend(resolve_attack(attacker, defender))
            return PlayerAction.TOOK_TURN

        if move_by(PLAYER_INDEX, dx, dy, session.game_map, session.roster):
            return PlayerAction.TOOK_TURN
        return PlayerAction.DID_NOT_TAKE_TURN

    def _pick_up(self) -> PlayerAction:
        session = self._session
        player = session.player
        for index in session.roster.indices_at(player.x, player.y):
            if index != PLAYER_INDEX and session.roster[index].item is not None:
                if pick_up(session, index):
                    return PlayerAction.TOOK_TURN
                return PlayerAction.DID_NOT_TAKE_TURN
        return PlayerAction.DID_NOT_TAKE_TURN

    def _open_inventory(self) -> PlayerAction:
        if self._menu is None:
            return PlayerAction.DID_NOT_TAKE_TURN

        inventory = self._session.inventory
        if inventory:
            options = [item.name for item in inventory]
        else:
            options = [EMPTY_INVENTORY_LABEL]

        if len(options) > len(INVENTORY_LETTERS):
            raise ValidationError(
                "Cannot have a menu with more than 26 options",
                field_name="options",
                invalid_value=len(options),
            )

        choice = self._menu.present_choices(INVENTORY_PROMPT, options)
        if choice is None or not inventory:
            return PlayerAction.DID_NOT_TAKE_TURN
        return self._use_item(choice)

    def _use_item(self, index: int | None) -> PlayerAction:
        if index is None or not 0 <= index < len(self._session.inventory):
            return PlayerAction.DID_NOT_TAKE_TURN
        if use_item(self._session, index) is UseResult.USED_UP:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DID_NOT_TAKE_TURN

    # =========================================================================
    # Turn Processing
    # =========================================================================

    def run_ai_sweep(self) -> int:
        """Let every AI entity act once, in ascending roster order.

        Returns:
            Number of entities that acted.
        """
        roster = self._session.roster
        acted = 0
        for index in range(len(roster)):
            if index == PLAYER_INDEX or roster[index].ai is None:
                continue
            take_turn(self._session, index)
            acted += 1
        return acted

    def process_turn(self, action: InputAction) -> TurnResult:
        """Resolve one input and, if it took a turn, run the AI sweep.

        Args:
            action: The resolved input.

        Returns:
            TurnResult describing what happened.
        """
        messages = self._session.messages
        before = messages.total_added

        status = self.handle_player_action(action)
        ai_turns = 0
        if status is PlayerAction.TOOK_TURN:
            ai_turns = self.run_ai_sweep()
            self._turn_count += 1

        result = TurnResult(
            status=status,
            ai_turns=ai_turns,
            messages=messages.since(before),
            player_alive=self._session.player.alive,
        )
        logger.debug(
            "Turn processed",
            action=action.kind.value,
            status=status.value,
            ai_turns=ai_turns,
            messages=len(result.messages),
        )
        return result

    def frame(self, cursor: tuple[int, int] | None = None) -> FrameSnapshot:
        """Recompute FOV if the player moved, then snapshot the session."""
        session = self._session
        position = session.player.position
        if position != self._previous_player_position:
            session.fov.recompute(position[0], position[1], session.game_map)
            self._previous_player_position = position
        return build_frame(session, cursor)

    def run(
        self,
        input_source: InputSource,
        *,
        cursor_source: Callable[[], tuple[int, int] | None] | None = None,
    ) -> int:
        """Drive the frame cycle until an EXIT action.

        Each iteration presents a frame, reads one input and processes it.

        Args:
            input_source: Zero-argument callable returning the next action.
            cursor_source: Optional callable returning the cursor cell.

        Returns:
            Number of turns taken.
        """
        logger.info("Game loop started")
        while True:
            cursor = cursor_source() if cursor_source is not None else None
            snapshot = self.frame(cursor)
            if self._display is not None:
                self._display.present(snapshot)

            result = self.process_turn(input_source())
            if result.status is PlayerAction.EXIT:
                break

        logger.info("Game loop stopped", turns=self._turn_count)
        return self._turn_count


__all__ = [
    "InputKind",
    "InputAction",
    "PlayerAction",
    "TurnResult",
    "GameLoop",
]
