"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DungeonCoreError: Base exception for all core errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Invalid data handed to the core.
        GameEngineError, InvalidGameStateError, EntityAliasingError,
        LevelGenerationError: Engine invariant violations.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dungeon_core.core.config import (
    DungeonSettings,
    ItemSettings,
    MessageLogSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dungeon_core.core.exceptions import (
    ConfigurationError,
    DungeonCoreError,
    EntityAliasingError,
    GameEngineError,
    InvalidGameStateError,
    LevelGenerationError,
    ValidationError,
)
from dungeon_core.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "DungeonCoreError",
    # Configuration exceptions
    "ConfigurationError",
    "ValidationError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "EntityAliasingError",
    "LevelGenerationError",
    # Configuration
    "Settings",
    "DungeonSettings",
    "ItemSettings",
    "MessageLogSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
