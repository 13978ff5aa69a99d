"""Core configuration model (structured view of config.json)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class ConfigFormatError(ValueError):
    """Raised when config data is not valid JSON or does not match the schema."""


# Attribute name -> persisted JSON key. The JSON keys must stay stable so
# existing config files keep loading.
_FLAG_KEYS: dict[str, str] = {
    "no_hurt_cam": "Nohurtcam",
    "no_fog": "Nofog",
    "particles_disabler": "particles_disabler",
    "java_clouds": "java_clouds",
    "java_cubemap": "java_cubemap",
    "classic_skins": "classic_skins",
}
_RPP_KEY = "custom_rpp"


def _require(data: dict, key: str, kind: type, where: str) -> Any:
    if key not in data:
        raise ConfigFormatError(f"missing field `{key}` in {where}")
    value = data[key]
    # bool is an int subclass, so 1/0 must not pass for a flag and vice versa
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ConfigFormatError(
            f"invalid type for `{key}` in {where}: expected {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class RppOverride:
    """Resource pack override: replace resource ``apk`` with pack path ``rp``."""

    apk: str
    rp: str

    @classmethod
    def from_dict(cls, data: Any) -> "RppOverride":
        if not isinstance(data, dict):
            raise ConfigFormatError(
                f"invalid type for `{_RPP_KEY}` entry: expected object, got {type(data).__name__}"
            )
        return cls(
            apk=_require(data, "apk", str, _RPP_KEY),
            rp=_require(data, "rp", str, _RPP_KEY),
        )

    def to_dict(self) -> dict[str, str]:
        return {"apk": self.apk, "rp": self.rp}


@dataclass(frozen=True)
class ModConfig:
    no_hurt_cam: bool = True
    no_fog: bool = False
    particles_disabler: bool = False
    java_clouds: bool = False
    java_cubemap: bool = False
    classic_skins: bool = False
    custom_rpp: tuple[RppOverride, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls) -> "ModConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Any) -> "ModConfig":
        """Build a config from a decoded JSON object.

        Every field is required. Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise ConfigFormatError(
                f"expected a JSON object at top level, got {type(data).__name__}"
            )
        flags = {attr: _require(data, key, bool, "config") for attr, key in _FLAG_KEYS.items()}
        entries = _require(data, _RPP_KEY, list, "config")
        return cls(custom_rpp=tuple(RppOverride.from_dict(entry) for entry in entries), **flags)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {key: getattr(self, attr) for attr, key in _FLAG_KEYS.items()}
        data[_RPP_KEY] = [override.to_dict() for override in self.custom_rpp]
        return data

    @classmethod
    def from_json(cls, text: str) -> "ModConfig":
        # JSONDecodeError is a ValueError, as are oversized int literals
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as e:
            raise ConfigFormatError(f"malformed JSON: {e}") from e
        return cls.from_dict(data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
