# wms

A Python library for fetching current weather and drawing it in a terminal.
It reads and validates a TOML configuration, finds your location from your
public IP address, fetches current conditions from WeatherAPI or Open-Meteo,
and renders them next to an ASCII-art weather icon.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Configuration (`wms.config`)

`read_config()` loads a `.env` file from the working directory, then reads
`~/.config/wms/wms.toml` (on Windows, `wms\wms.toml` under `%APPDATA%`). If
the file does not exist it is created with the defaults and the defaults are
returned:

```toml
weather_provider = "WeatherAPI"
location = "New York"
location_mode = "ip"
units = "metric"
time_format = "24"
use_colors = true
compact = false
show_city_name = true
refresh_interval = 5
```

When the file exists, the WeatherAPI key is taken from the `WEATHER_API_KEY`
environment variable and the result is checked by `validate_config()`, which
replaces invalid values with their defaults and prints a warning on stderr:

- `weather_provider`: `WeatherAPI` or `OpenMeteo`
- `location_mode`: `ip` or `manual`
- `units`: `metric` or `imperial`
- `time_format`: `12` or `24`
- `refresh_interval`: 1 to 60 minutes

A file that cannot be parsed, or whose values have the wrong type, gives the
defaults.

`parse_flags(argv)` reads command-line overrides (`-location`, `-location-mode`,
`-units`, `-time`, `-compact`, `-refresh`, each also accepted with two dashes);
`-help` prints usage on stderr and raises `SystemExit(0)`. `apply_flags(config,
flags)` applies the flags that were given, and `write_config(config)` saves the
configuration, raising `OSError` if it cannot.

```python
from wms.config import apply_flags, parse_flags, read_config

config = read_config()
apply_flags(config, parse_flags(["--location", "Oslo", "--units", "imperial"]))
```

## Weather (`wms.weather`)

```python
from wms.weather.models import create_weather_provider
from wms.weather.display import render_weather_compact

provider = create_weather_provider(config.weather_provider, config.weather_api_key)
weather = provider.fetch_weather(config.location)
print(render_weather_compact(weather, config))
```

- `create_weather_provider(name, api_key)` returns a `WeatherAPIProvider` or an
  `OpenMeteoProvider` (the name is case-insensitive). WeatherAPI needs a key.
- `fetch_weather(location)` returns a `Weather` with a `location` (`Place`) and
  `current` (`Conditions`). Open-Meteo first geocodes the name; it supplies no
  feels-like temperature (the air temperature is used), and UV, pressure,
  cloud cover and visibility are zero.
- Every failure is raised as `WeatherError`.
- `celsius_to_fahrenheit`, `kmh_to_mph`, `degree_to_direction` and
  `weather_code_to_condition` are the conversions the providers use.

`wms.weather.location.detect_location_from_ip()` asks a public IP geolocation
service and returns `"City, Region"`, `"City"` or the country, raising
`LocationError` when nothing can be determined.

`wms.weather.display.format_weather_display(weather, cfg)` formats each reading
as text in the configured units; `render_weather_compact(weather, cfg)` draws
the icon and the main readings side by side.

## Terminal rendering (`wms.ui`)

- `wms.ui.style`: an immutable `Style` (colour, bold, italic, padding, margin,
  size, alignment, border) with `render()`, plus `join_horizontal`,
  `join_vertical`, `visible_width` and `text_height` that measure text in
  terminal cells and ignore ANSI colour codes.
- `wms.ui.theme`: the colour palette, shared styles and the layout helpers
  `get_adaptive_width`, `get_adaptive_height` and `get_responsive_layout`.
- `wms.ui.icons`: seven-line weather icons in colour or monochrome;
  `get_weather_icon(condition, is_day, use_colors)` picks one for a condition.

## What this package does not do

There is no `wms` command and no interactive dashboard: no tabs, key bindings,
settings screen or automatic refresh. There are no moon phase or sunrise and
sunset panels. The package provides the configuration, data fetching and
rendering pieces; putting them on screen is left to the caller.