"""Configuration management for the dungeon simulation core.

Settings are pydantic-settings models read from DUNGEON_CORE_* environment
variables and an optional .env file. Each tuning group (level generation,
items, message log) has its own prefix and is nested under Settings.

Example:
    >>> from dungeon_core.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.dungeon.map_width
    80

Environment Variables:
    DUNGEON_CORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DUNGEON_CORE_JSON_LOGS: Emit JSON log lines instead of console output
    DUNGEON_CORE_DUNGEON_SEED: Fixed seed for reproducible levels
    DUNGEON_CORE_DUNGEON_MAX_ROOMS: Room placement attempts per level
    DUNGEON_CORE_ITEMS_HEAL_AMOUNT: Hit points restored by a healing potion
    DUNGEON_CORE_MESSAGES_MAX_MESSAGES: Optional cap on stored log messages
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dungeon_core.core.constants import INVENTORY_LETTERS
from dungeon_core.core.exceptions import ConfigurationError


class DungeonSettings(BaseSettings):
    """Configuration for level generation.

    Attributes:
        map_width: Map width in cells.
        map_height: Map height in cells.
        room_min_size: Smallest room side (walls included).
        room_max_size: Largest room side (walls included).
        max_rooms: Room placement attempts; rejected rooms still count.
        max_room_monsters: Upper bound of monsters placed per room.
        max_room_items: Upper bound of items placed per room.
        seed: Optional RNG seed for reproducible levels.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CORE_DUNGEON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    map_width: int = Field(default=80, ge=4, le=1000, description="Map width in cells")
    map_height: int = Field(default=43, ge=4, le=1000, description="Map height in cells")
    room_min_size: int = Field(default=6, ge=3, description="Smallest room side")
    room_max_size: int = Field(default=10, ge=3, description="Largest room side")
    max_rooms: int = Field(default=30, ge=1, le=10_000, description="Room placement attempts")
    max_room_monsters: int = Field(default=3, ge=0, description="Max monsters per room")
    max_room_items: int = Field(default=2, ge=0, description="Max items per room")
    seed: int | None = Field(default=None, description="RNG seed for reproducible levels")

    @model_validator(mode="after")
    def validate_room_sizes(self) -> "DungeonSettings":
        """Ensure room sizes are ordered and the largest room fits the map.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the room size range is inverted or too large.
        """
        if self.room_min_size > self.room_max_size:
            raise ConfigurationError(
                f"room_min_size ({self.room_min_size}) must not exceed "
                f"room_max_size ({self.room_max_size})",
                config_key="room_min_size",
            )
        if self.room_max_size >= min(self.map_width, self.map_height):
            raise ConfigurationError(
                f"room_max_size ({self.room_max_size}) must be smaller than both "
                f"map dimensions ({self.map_width}x{self.map_height})",
                config_key="room_max_size",
            )
        return self


class ItemSettings(BaseSettings):
    """Configuration for item effects and the inventory.

    Attributes:
        heal_amount: Hit points restored by a healing potion.
        lightning_damage: Damage dealt by a lightning bolt (ignores defense).
        lightning_range: Maximum distance to a lightning target.
        confuse_range: Maximum distance to a confusion target.
        confuse_num_turns: Turns a confused monster wanders before recovering.
        inventory_capacity: Items the player can carry.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CORE_ITEMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    heal_amount: int = Field(default=4, ge=1, description="HP restored by a potion")
    lightning_damage: int = Field(default=40, ge=1, description="Lightning bolt damage")
    lightning_range: int = Field(default=5, ge=1, description="Lightning bolt range")
    confuse_range: int = Field(default=8, ge=1, description="Confusion scroll range")
    confuse_num_turns: int = Field(default=10, ge=0, description="Confusion duration")
    inventory_capacity: int = Field(
        default=len(INVENTORY_LETTERS),
        ge=1,
        le=len(INVENTORY_LETTERS),
        description="Inventory slots (one per selection letter)",
    )


class MessageLogSettings(BaseSettings):
    """Configuration for the in-game message log.

    Attributes:
        panel_height: Number of recent messages exposed to the renderer.
        max_messages: Optional cap on stored messages; None keeps everything.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CORE_MESSAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    panel_height: int = Field(default=6, ge=1, le=100, description="Visible message lines")
    max_messages: int | None = Field(default=None, ge=1, description="Stored message cap")

    @model_validator(mode="after")
    def validate_capacity(self) -> "MessageLogSettings":
        """Ensure a storage cap never hides part of the visible panel.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If max_messages < panel_height.
        """
        if self.max_messages is not None and self.max_messages < self.panel_height:
            raise ConfigurationError(
                f"max_messages ({self.max_messages}) must be at least "
                f"panel_height ({self.panel_height})",
                config_key="max_messages",
            )
        return self


class Settings(BaseSettings):
    """Top-level settings: logging switches plus the nested tuning groups.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        dungeon: Level generation settings.
        items: Item and inventory settings.
        messages: Message log settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DUNGEON_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Dungeon Core", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    dungeon: DungeonSettings = Field(default_factory=DungeonSettings)
    items: ItemSettings = Field(default_factory=ItemSettings)
    messages: MessageLogSettings = Field(default_factory=MessageLogSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once and return the cached instance.

    Returns:
        The process-wide Settings.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"cause": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = [
    "DungeonSettings",
    "ItemSettings",
    "MessageLogSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
