"""Exception hierarchy for the dungeon simulation core.

Every error the core raises derives from DungeonCoreError and carries a
``details`` dict with structured context for logs.

Expected in-game refusals (inventory full, no target in range, a move into
a wall) are NOT exceptions: they are reported through the message log and
a cancelled or no-turn outcome. The exceptions below signal caller bugs or
invalid configuration and are never swallowed by the core.

Example:
    >>> from dungeon_core.core.exceptions import EntityAliasingError
    >>> raise EntityAliasingError("Cannot borrow the same entity twice", index=3)
"""

from __future__ import annotations

from typing import Any


def _with_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Merge the non-empty keyword context into a copy of ``details``."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class DungeonCoreError(Exception):
    """Root of the core's exceptions.

    Attributes:
        message: Human-readable description.
        details: Structured context; rendered as ``key=value`` pairs in ``str()``.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(str(self))

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{rendered}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Engine errors
# =============================================================================


class GameEngineError(DungeonCoreError):
    """A turn, combat or item operation was called in a way that cannot succeed."""


class InvalidGameStateError(GameEngineError):
    """The session does not satisfy what an operation requires.

    For example acting with an entity index that is not in the roster, or
    attacking with an entity that has no Fighter.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_with_context(details, current_state=current_state, expected_states=expected_states),
        )


class EntityAliasingError(InvalidGameStateError):
    """The same roster slot was requested as both sides of a pair.

    Attacker and defender are mutated together and must be distinct.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, index=index))


class LevelGenerationError(GameEngineError):
    """The generator parameters cannot produce a playable level.

    Raised when a room cannot fit in the map or no room was placed, which
    would leave the player without a start cell.
    """


# =============================================================================
# Configuration and input errors
# =============================================================================


class ConfigurationError(DungeonCoreError):
    """Settings failed to load or hold an impossible combination."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, config_key=config_key))


class ValidationError(DungeonCoreError):
    """Data handed to the core is malformed.

    Covers input actions with a bad payload and menus offered more choices
    than there are selection letters.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_with_context(details, field_name=field_name, invalid_value=invalid_value),
        )


__all__ = [
    "DungeonCoreError",
    "GameEngineError",
    "InvalidGameStateError",
    "EntityAliasingError",
    "LevelGenerationError",
    "ConfigurationError",
    "ValidationError",
]
