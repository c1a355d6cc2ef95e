"""Configuration loader for the system info LCD."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml

OUTPUT_EMULATOR = "emulator"
OUTPUT_HARDWARE = "hardware"
OUTPUTS = (OUTPUT_EMULATOR, OUTPUT_HARDWARE)


@dataclass(frozen=True)
class SensorConfig:
    """OS data sources sampled every refresh."""

    interface: str
    thermal_path: str


@dataclass(frozen=True)
class DisplayPins:
    """BCM GPIO pins wired to the PCD8544 module."""

    sclk: int
    din: int
    dc: int
    cs: int
    rst: int
    light: int


@dataclass(frozen=True)
class DisplayConfig:
    """Display configuration for rendering and hardware."""

    width: int
    height: int
    contrast: int
    output: str
    frame_path: str
    splash_seconds: float
    pins: DisplayPins


@dataclass(frozen=True)
class RefreshConfig:
    """Refresh loop timing."""

    interval_seconds: float


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    sensors: SensorConfig
    display: DisplayConfig
    refresh: RefreshConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(mapping: dict[str, Any], key: str) -> dict[str, Any]:
    section = _require_key(mapping, key, key)
    if not isinstance(section, dict):
        raise ValueError(f"'{key}' config must be a mapping")
    return section


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    sensors_section = _require_section(data, "sensors")
    display_section = _require_section(data, "display")
    refresh_section = _require_section(data, "refresh")
    logging_section = _require_section(data, "logging")
    pins_section = _require_section(display_section, "pins")

    sensors = SensorConfig(
        interface=os.environ.get("PISYSINFO_INTERFACE")
        or _require_key(sensors_section, "interface", "sensors"),
        thermal_path=_require_key(sensors_section, "thermal_path", "sensors"),
    )

    pins = DisplayPins(
        sclk=int(_require_key(pins_section, "sclk", "display.pins")),
        din=int(_require_key(pins_section, "din", "display.pins")),
        dc=int(_require_key(pins_section, "dc", "display.pins")),
        cs=int(_require_key(pins_section, "cs", "display.pins")),
        rst=int(_require_key(pins_section, "rst", "display.pins")),
        light=int(_require_key(pins_section, "light", "display.pins")),
    )

    output = _require_key(display_section, "output", "display")
    if output not in OUTPUTS:
        raise ValueError(f"display.output must be one of {OUTPUTS}, got {output!r}")

    contrast = int(_require_key(display_section, "contrast", "display"))
    if not 0 <= contrast <= 127:
        raise ValueError(f"display.contrast must be between 0 and 127, got {contrast}")

    display = DisplayConfig(
        width=int(_require_key(display_section, "width", "display")),
        height=int(_require_key(display_section, "height", "display")),
        contrast=contrast,
        output=output,
        frame_path=_require_key(display_section, "frame_path", "display"),
        splash_seconds=float(display_section.get("splash_seconds", 2.0)),
        pins=pins,
    )

    interval = float(_require_key(refresh_section, "interval_seconds", "refresh"))
    if interval <= 0:
        raise ValueError(f"refresh.interval_seconds must be positive, got {interval}")
    refresh = RefreshConfig(interval_seconds=interval)

    logging = LoggingConfig(
        level=os.environ.get("PISYSINFO_LOG_LEVEL")
        or _require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(sensors=sensors, display=display, refresh=refresh, log=logging)


__all__ = [
    "AppConfig",
    "DisplayConfig",
    "DisplayPins",
    "LoggingConfig",
    "OUTPUT_EMULATOR",
    "OUTPUT_HARDWARE",
    "RefreshConfig",
    "SensorConfig",
    "load_config",
]
