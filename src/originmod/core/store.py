"""One-time config initialization and read access.

Lifecycle:
    UNINITIALIZED --initialize()--> READY

There is no way back. ``initialize()`` never raises for storage problems:
a missing directory, unreadable or malformed file, or failed write all end
with the compiled-in defaults being served and a warning logged. Misuse
(reading before initialization, initializing twice) raises immediately.
"""

from __future__ import annotations

import logging
import threading

from .config_model import ConfigFormatError, ModConfig
from .ports import ConfigStorage

logger = logging.getLogger(__name__)


class ConfigStoreError(RuntimeError):
    """Programming error in how the config store is used."""


class ConfigNotInitializedError(ConfigStoreError):
    pass


class ConfigAlreadyInitializedError(ConfigStoreError):
    pass


class ConfigStore:
    """Holds the single ModConfig snapshot for the process lifetime."""

    def __init__(self, storage: ConfigStorage):
        self._storage = storage
        self._config: ModConfig | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    def initialize(self) -> ModConfig:
        """Load or create the config and publish it.

        Raises:
            ConfigAlreadyInitializedError: if called more than once
        """
        with self._lock:
            if self._config is not None:
                raise ConfigAlreadyInitializedError("Config already initialized")
            self._config = self._load_or_create()
            return self._config

    def get(self) -> ModConfig:
        config = self._config
        if config is None:
            raise ConfigNotInitializedError("Config not initialized")
        return config

    def _load_or_create(self) -> ModConfig:
        try:
            self._storage.ensure_dir()
        except OSError as e:
            logger.warning("Failed to create config directory: %s", e)
            return ModConfig.default()

        if self._file_exists():
            try:
                config = ModConfig.from_json(self._storage.read_text())
            except (OSError, UnicodeDecodeError, ConfigFormatError) as e:
                logger.warning("Failed to load config, using default: %s", e)
            else:
                logger.info("Loaded config from %s", self._storage.describe())
                return config

        default_config = ModConfig.default()
        try:
            self._storage.write_text(default_config.to_json())
        except OSError as e:
            logger.warning("Failed to save default config: %s", e)
        else:
            logger.info("Created default config at %s", self._storage.describe())
        return default_config

    def _file_exists(self) -> bool:
        try:
            return self._storage.exists()
        except OSError as e:
            logger.warning("Failed to check for config file, treating as absent: %s", e)
            return False
