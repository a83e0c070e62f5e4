"""Pytest configuration and shared fixtures.

This module provides common fixtures and collaborator doubles for all
tests in the dungeon core test suite.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import pytest

from dungeon_core.core.config import Settings
from dungeon_core.models import GameMap, GameSession, Rect, Roster, create_player


if TYPE_CHECKING:
    from collections.abc import Generator

    from dungeon_core.engine.frame import FrameSnapshot


# =============================================================================
# Collaborator Doubles
# =============================================================================


class StaticFieldOfView:
    """FOV double: either everything is visible or a fixed set of cells."""

    def __init__(self, visible: set[tuple[int, int]] | None = None, *, everything: bool = False) -> None:
        self.visible = visible or set()
        self.everything = everything
        self.recompute_calls: list[tuple[int, int]] = []

    def is_visible(self, x: int, y: int) -> bool:
        return self.everything or (x, y) in self.visible

    def recompute(self, x: int, y: int, game_map: GameMap) -> None:
        self.recompute_calls.append((x, y))


class ScriptedMenu:
    """Menu double returning pre-programmed choices in order."""

    def __init__(self, choices: Sequence[int | None] = ()) -> None:
        self.choices = list(choices)
        self.calls: list[tuple[str, list[str]]] = []

    def present_choices(self, prompt: str, options: Sequence[str]) -> int | None:
        self.calls.append((prompt, list(options)))
        return self.choices.pop(0) if self.choices else None


class RecordingDisplay:
    """Display double that keeps every presented frame."""

    def __init__(self) -> None:
        self.frames: list[FrameSnapshot] = []
        self.fullscreen_toggles = 0

    def present(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    def toggle_fullscreen(self) -> None:
        self.fullscreen_toggles += 1


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dungeon_core.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DUNGEON_CORE_DEBUG": "true",
        "DUNGEON_CORE_LOG_LEVEL": "DEBUG",
        "DUNGEON_CORE_DUNGEON_SEED": "1234",
        "DUNGEON_CORE_ITEMS_HEAL_AMOUNT": "7",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the process environment cache."""
    return Settings()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def fov() -> StaticFieldOfView:
    """FOV where every cell is visible."""
    return StaticFieldOfView(everything=True)


@pytest.fixture
def blind_fov() -> StaticFieldOfView:
    """FOV where no cell is visible."""
    return StaticFieldOfView()


@pytest.fixture
def menu() -> ScriptedMenu:
    return ScriptedMenu()


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def make_session(settings: Settings, rng: random.Random) -> Callable[..., GameSession]:
    """Factory for hand-built sessions on an open-floor map.

    The map is all floor except a one-cell wall border. The player stands
    at ``player_at``; extra entities are appended in the given order.
    """

    def _make(
        *entities,
        fov=None,
        player_at: tuple[int, int] = (5, 5),
        width: int = 20,
        height: int = 20,
        session_settings: Settings | None = None,
    ) -> GameSession:
        game_map = GameMap(width, height)
        game_map.carve_room(Rect.from_size(0, 0, width - 1, height - 1))
        roster = Roster([create_player(*player_at), *entities])
        return GameSession(
            game_map=game_map,
            roster=roster,
            fov=fov if fov is not None else StaticFieldOfView(everything=True),
            rng=rng,
            settings=session_settings or settings,
        )

    return _make


@pytest.fixture
def session(make_session: Callable[..., GameSession]) -> GameSession:
    """Open-floor session with only the player, everything visible."""
    return make_session()
