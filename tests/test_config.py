import tomllib
from pathlib import Path

import pytest

from wms.config import (
    Config,
    Flags,
    apply_flags,
    default_config,
    get_config_path,
    parse_flags,
    read_config,
    validate_config,
    write_config,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    return tmp_path


def test_defaults():
    cfg = default_config()
    assert cfg.weather_provider == "WeatherAPI"
    assert cfg.location == "New York"
    assert cfg.units == "metric"
    assert cfg.refresh_interval == 5


def test_validate_replaces_invalid_values():
    cfg = Config(weather_provider="x", location_mode="y", units="kelvin",
                 time_format="13", refresh_interval=99, weather_api_key="placeholder")
    validate_config(cfg)
    assert (cfg.weather_provider, cfg.location_mode, cfg.units, cfg.time_format,
            cfg.refresh_interval) == ("WeatherAPI", "ip", "metric", "24", 5)


def test_validate_keeps_valid_values():
    cfg = default_config()
    cfg.weather_provider = "OpenMeteo"
    cfg.units = "imperial"
    validate_config(cfg)
    assert cfg.weather_provider == "OpenMeteo"
    assert cfg.units == "imperial"


def test_parse_and_apply_flags():
    flags = parse_flags(["-location", "Paris", "-units", "imperial", "-refresh", "10", "-compact"])
    cfg = default_config()
    apply_flags(cfg, flags)
    assert cfg.location == "Paris"
    assert cfg.units == "imperial"
    assert cfg.refresh_interval == 10
    assert cfg.compact is True


def test_apply_invalid_flag_falls_back():
    cfg = default_config()
    apply_flags(cfg, Flags(time_format="99"))
    assert cfg.time_format == "24"


def test_help_exits_zero():
    with pytest.raises(SystemExit) as info:
        parse_flags(["-help"])
    assert info.value.code == 0


def test_read_creates_default_file(home):
    cfg = read_config()
    assert cfg == default_config()
    assert Path(get_config_path()).exists()


def test_write_then_read_round_trip(home, monkeypatch):
    read_config()
    cfg = default_config()
    cfg.location = "Oslo"
    cfg.units = "imperial"
    write_config(cfg)
    data = tomllib.loads(Path(get_config_path()).read_text(encoding="utf-8"))
    assert "weather_api_key" not in data
    monkeypatch.setenv("WEATHER_API_KEY", "placeholder")
    loaded = read_config()
    assert loaded.location == "Oslo"
    assert loaded.units == "imperial"
    assert loaded.weather_api_key == "placeholder"


def test_bad_file_gives_defaults(home):
    read_config()
    Path(get_config_path()).write_text("units = = 3", encoding="utf-8")
    assert read_config() == default_config()