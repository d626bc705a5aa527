"""
Clock configuration: defaults, coercion and YAML loading
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .colors import COLOR_MODES, PALETTES, RGB, parse_color

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """The configuration file could not be read or parsed."""


@dataclass
class ClockConfig:
    """Cosmetic settings of a floating clock.

    Bad values never fail: they are clamped or replaced with the defaults
    and a warning is logged.
    """

    fg: RGB = (0x88, 0xff, 0x66)
    shadow_fg: RGB = (0x00, 0x33, 0x00)
    winblend: int = 0
    shadow_winblend: int = 10
    border: str = "none"
    padding: int = 1
    scale: int = 1
    use_shadow: bool = True
    interval: int = 1000          # milliseconds
    min_cols: int = 20
    min_rows: int = 6
    color_mode: str = "palette"
    palette: str = "gruvbox"
    gradient_from: RGB = (0xfb, 0x49, 0x34)
    gradient_to: RGB = (0x83, 0xa5, 0x98)
    time_format: str = "%H:%M:%S"
    twelve_hour: bool = False

    @property
    def gradient(self) -> Tuple[RGB, RGB]:
        return self.gradient_from, self.gradient_to

    @property
    def effective_time_format(self) -> str:
        if self.twelve_hour:
            return self.time_format.replace("%H", "%I")
        return self.time_format

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ClockConfig":
        """Build a config from user values, ignoring unknown keys"""
        return cls().merged(data or {})

    def merged(self, data: Dict[str, Any]) -> "ClockConfig":
        """Copy of this config with user values applied on top"""
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Unknown clock setting %r ignored", key)
                continue
            if value is None:
                continue
            default = getattr(self, key)
            coerced = _COERCE[key](value, default, key)
            changes[key] = coerced
        return replace(self, **changes)


def _color(value, default, key):
    try:
        return parse_color(value)
    except ValueError:
        logger.warning("Invalid color %r for %s, keeping %r", value, key, default)
        return default


def _int_at_least(minimum):
    def coerce(value, default, key):
        try:
            number = int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid number %r for %s, keeping %r", value, key, default)
            return default
        if number < minimum:
            logger.warning("%s=%d below %d, clamped", key, number, minimum)
            return minimum
        return number
    return coerce


def _blend(value, default, key):
    number = _int_at_least(0)(value, default, key)
    return min(100, number)


def _bool(value, default, key):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _choice(choices):
    def coerce(value, default, key):
        if value in choices:
            return value
        logger.warning("Invalid %s %r, expected one of %s", key, value, ", ".join(choices))
        return default
    return coerce


def _text(value, default, key):
    return str(value)


_COERCE = {
    'fg': _color,
    'shadow_fg': _color,
    'winblend': _blend,
    'shadow_winblend': _blend,
    'border': _text,
    'padding': _int_at_least(0),
    'scale': _int_at_least(1),
    'use_shadow': _bool,
    'interval': _int_at_least(10),
    'min_cols': _int_at_least(1),
    'min_rows': _int_at_least(1),
    'color_mode': _choice(COLOR_MODES),
    'palette': _choice(tuple(PALETTES)),
    'gradient_from': _color,
    'gradient_to': _color,
    'time_format': _text,
    'twelve_hour': _bool,
}


def load_config(path) -> ClockConfig:
    """Load a YAML config file; the clock settings may sit under a `clock` key"""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return ClockConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    if isinstance(data.get("clock"), dict):
        data = data["clock"]
    return ClockConfig.from_dict(data)
