"""Protocols for the collaborators the engine drives but does not own.

Field-of-view computation, frame presentation, menus and input polling
live outside the core. The engine only depends on these structural
interfaces, so any object with matching methods can be plugged in.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from dungeon_core.engine.frame import FrameSnapshot
    from dungeon_core.engine.loop import InputAction
    from dungeon_core.models.map import GameMap


@runtime_checkable
class FieldOfView(Protocol):
    """Visibility oracle for the current player position."""

    def is_visible(self, x: int, y: int) -> bool:
        """Whether the cell is visible after the last recompute."""
        ...

    def recompute(self, x: int, y: int, game_map: GameMap) -> None:
        """Recompute visibility from ``(x, y)``.

        Called by the loop only when the player's position changed.
        """
        ...


@runtime_checkable
class Display(Protocol):
    """Presents frames to the player."""

    def present(self, frame: FrameSnapshot) -> None:
        ...

    def toggle_fullscreen(self) -> None:
        ...


@runtime_checkable
class ChoiceMenu(Protocol):
    """Presents labeled choices and returns the selected one.

    Implementations must raise ``ValidationError`` when offered more
    choices than there are selection letters (26).
    """

    def present_choices(self, prompt: str, options: Sequence[str]) -> int | None:
        """Return the selected option index, or None when dismissed."""
        ...


InputSource = Callable[[], "InputAction"]
"""Zero-argument callable returning the next resolved player action."""


__all__ = [
    "FieldOfView",
    "Display",
    "ChoiceMenu",
    "InputSource",
]
