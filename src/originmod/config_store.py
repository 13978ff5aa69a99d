"""Process-wide mod config.

Call ``init_config()`` once at startup, then read settings anywhere through
the accessors below. Reading before ``init_config()`` raises
``ConfigNotInitializedError``.
"""

from __future__ import annotations

from .adapters.config_file import FileConfigStorage
from .config import settings
from .core.config_model import ModConfig, RppOverride
from .core.store import ConfigStore

_store = ConfigStore(FileConfigStorage(settings.CONFIG_DIR, settings.CONFIG_FILE))


def init_config() -> ModConfig:
    return _store.initialize()


def get_config() -> ModConfig:
    return _store.get()


def is_no_hurt_cam_enabled() -> bool:
    return get_config().no_hurt_cam


def is_no_fog_enabled() -> bool:
    return get_config().no_fog


def is_particles_disabler_enabled() -> bool:
    return get_config().particles_disabler


def is_java_clouds_enabled() -> bool:
    return get_config().java_clouds


def is_java_cubemap_enabled() -> bool:
    return get_config().java_cubemap


def is_classic_skins_enabled() -> bool:
    return get_config().classic_skins


def get_custom_rpp() -> tuple[RppOverride, ...]:
    return get_config().custom_rpp


def find_rpp_override(apk: str) -> str | None:
    """Return the resource pack path overriding ``apk``, first match wins."""
    for override in get_config().custom_rpp:
        if override.apk == apk:
            return override.rp
    return None
