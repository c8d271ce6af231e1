"""Loading, validating and saving the application configuration."""

from __future__ import annotations

import argparse
import os
import sys
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

import tomli_w
from dotenv import load_dotenv

PROVIDER_WEATHER_API = "WeatherAPI"
PROVIDER_OPEN_METEO = "OpenMeteo"
PROVIDER_IP_GEO = "IPGeolocation"

_TOML_KEYS = (
    "weather_provider",
    "location",
    "location_mode",
    "units",
    "time_format",
    "use_colors",
    "compact",
    "show_city_name",
    "refresh_interval",
)

KEYBOARD_HELP = (
    "  [U] - Toggle temperature units",
    "  [T] - Toggle time format",
    "  [S] - Toggle speed units",
    "  [R] - Refresh data",
    "  [Q] - Quit",
)


@dataclass
class Config:
    """User settings; the API key comes from the environment, never the file."""

    weather_provider: str = ""
    location: str = ""
    location_mode: str = ""
    units: str = ""
    time_format: str = ""
    use_colors: bool = False
    compact: bool = False
    show_city_name: bool = False
    refresh_interval: int = 0
    weather_api_key: str = ""

    def to_toml_dict(self) -> dict:
        return {key: getattr(self, key) for key in _TOML_KEYS}


@dataclass
class Flags:
    """Command-line overrides; empty or zero values mean "not given"."""

    location: str = ""
    location_mode: str = ""
    units: str = ""
    time_format: str = ""
    compact: bool = False
    help: bool = False
    refresh_interval: int = 0


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def default_config() -> Config:
    return Config(
        weather_provider=PROVIDER_WEATHER_API,
        location="New York",
        location_mode="ip",
        units="metric",
        time_format="24",
        use_colors=True,
        compact=False,
        show_city_name=True,
        refresh_interval=5,
    )


def get_config_path() -> str:
    """Return the config file path for this platform, or "" if unknown."""
    try:
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return str(Path(appdata) / "wms" / "wms.toml")
            _warn("Failed to get config directory: APPDATA is not set")
            return str(Path.home() / "wms" / "wms.toml")
        return str(Path.home() / ".config" / "wms" / "wms.toml")
    except RuntimeError as exc:
        _warn(f"Failed to get home directory: {exc}")
        return ""


def validate_config(config: Config) -> None:
    """Replace invalid values in place with defaults, warning on stderr."""
    if config.weather_provider not in (PROVIDER_WEATHER_API, PROVIDER_OPEN_METEO):
        _warn("Warning: Invalid weather provider in config. Using 'WeatherAPI' as default.")
        config.weather_provider = PROVIDER_WEATHER_API
    if config.location_mode not in ("ip", "manual"):
        _warn("Warning: Invalid location mode in config. Using 'ip' as default.")
        config.location_mode = "ip"
    if config.units not in ("metric", "imperial"):
        _warn("Warning: Invalid units in config. Using 'metric' as default.")
        config.units = "metric"
    if config.time_format not in ("12", "24"):
        _warn("Warning: Invalid time format in config. Using '24' as default.")
        config.time_format = "24"
    if not 1 <= config.refresh_interval <= 60:
        _warn("Warning: Invalid refresh interval in config. Using 5 minutes as default.")
        config.refresh_interval = 5
    if config.weather_provider == PROVIDER_WEATHER_API and not config.weather_api_key:
        _warn("Warning: 'weather_api_key' is required for WeatherAPI provider.")


def load_env() -> None:
    """Load a .env file from the working directory if there is one."""
    load_dotenv(Path.cwd() / ".env")


def _config_from_toml(data: dict) -> Config:
    config = Config()
    types = {f.name: f.type for f in fields(Config)}
    for key in _TOML_KEYS:
        if key not in data:
            continue
        value = data[key]
        expected = types[key]
        ok = {
            "str": isinstance(value, str),
            "bool": isinstance(value, bool),
            "int": isinstance(value, int) and not isinstance(value, bool),
        }[expected]
        if not ok:
            raise ValueError(f"field {key!r} has the wrong type")
        setattr(config, key, value)
    return config


def read_config() -> Config:
    """Read the config file, creating a default one when missing."""
    load_env()
    config_path = get_config_path()
    if not config_path:
        return default_config()
    path = Path(config_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _warn(f"Failed to create config directory: {exc}")
        return default_config()

    if not path.exists():
        config = default_config()
        try:
            path.write_text(tomli_w.dumps(config.to_toml_dict()), encoding="utf-8")
        except OSError as exc:
            _warn(f"Failed to create config file: {exc}")
            return config
        print(f"Config created at {config_path}")
        return config

    try:
        raw = path.read_bytes()
    except OSError as exc:
        _warn(f"Failed to read config file: {exc}")
        return default_config()
    try:
        config = _config_from_toml(tomllib.loads(raw.decode("utf-8")))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, ValueError) as exc:
        _warn(f"Failed to parse config file, using defaults. {exc}")
        return default_config()

    config.weather_api_key = os.environ.get("WEATHER_API_KEY", "")
    validate_config(config)
    return config


def _usage(parser: argparse.ArgumentParser) -> str:
    lines = [
        f"Usage: {parser.prog} [options]",
        "",
        "Weather Management System (WMS) - A comprehensive weather dashboard",
        "",
        "Options:",
        "  -location string       Location to get weather for",
        "  -location-mode string  Location mode (ip, manual)",
        "  -units string          Units (metric, imperial)",
        "  -time string           Time format (12, 24)",
        "  -compact               Compact display mode",
        "  -help                  Show help",
        "  -refresh int           Refresh interval in minutes",
        "",
        f"Config file is located at: {get_config_path()}",
        "",
        "Keyboard shortcuts:",
        *KEYBOARD_HELP,
    ]
    return "\n".join(lines)


def parse_flags(argv: list[str] | None = None) -> Flags:
    """Parse command-line flags; -help prints usage and exits with status 0."""
    parser = argparse.ArgumentParser(prog="wms", add_help=False)
    parser.add_argument("-location", "--location", default="")
    parser.add_argument("-location-mode", "--location-mode", dest="location_mode", default="")
    parser.add_argument("-units", "--units", default="")
    parser.add_argument("-time", "--time", dest="time_format", default="")
    parser.add_argument("-compact", "--compact", action="store_true")
    parser.add_argument("-help", "--help", "-h", dest="help", action="store_true")
    parser.add_argument("-refresh", "--refresh", dest="refresh_interval", type=int, default=0)
    ns = parser.parse_args(argv)
    flags = Flags(
        location=ns.location,
        location_mode=ns.location_mode,
        units=ns.units,
        time_format=ns.time_format,
        compact=ns.compact,
        help=ns.help,
        refresh_interval=ns.refresh_interval,
    )
    if flags.help:
        print(_usage(parser), file=sys.stderr)
        raise SystemExit(0)
    return flags


def apply_flags(config: Config, flags: Flags) -> None:
    """Override config values in place with the flags that were given."""
    if flags.location:
        config.location = flags.location
    if flags.location_mode:
        config.location_mode = flags.location_mode
        validate_config(config)
    if flags.units:
        config.units = flags.units
        validate_config(config)
    if flags.time_format:
        config.time_format = flags.time_format
        validate_config(config)
    if flags.compact:
        config.compact = True
    if flags.refresh_interval > 0:
        config.refresh_interval = flags.refresh_interval
        validate_config(config)


def write_config(config: Config) -> None:
    """Save the config to its TOML file; raises OSError on failure."""
    config_path = get_config_path()
    if not config_path:
        raise OSError("could not determine config path")
    try:
        Path(config_path).write_text(tomli_w.dumps(config.to_toml_dict()), encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to create config file: {exc}") from exc