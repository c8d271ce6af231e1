"""Formatting weather data for the terminal dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from wms.config import Config
from wms.ui.icons import WeatherIcon, get_weather_icon
from wms.ui.style import LEFT, TOP, Style, join_horizontal, join_vertical
from wms.ui.theme import TEXT_PRIMARY, WEATHER_COLOR
from wms.weather.models import Weather

_ICON_WIDTH = 13

_WIND_ARROWS: dict[str, str] = {"N": "↑", "E": "→", "S": "↓", "W": "←"}
for _arrow, _directions in {
    "↗": ("NNE", "NE", "ENE"),
    "↘": ("ESE", "SE", "SSE"),
    "↙": ("SSW", "SW", "WSW"),
    "↖": ("WNW", "NW", "NNW"),
}.items():
    for _direction in _directions:
        _WIND_ARROWS[_direction] = _arrow


@dataclass
class WeatherDisplay:
    """Weather values already formatted as text, ready to be shown."""

    icon: WeatherIcon
    location: str
    condition: str
    temperature: str
    feels_like: str
    wind: str
    humidity: str
    uv: str
    pressure: str
    visibility: str
    precipitation: str


def wind_direction_symbol(direction: str) -> str:
    """Turn a compass point such as "SSW" into an arrow; unknown gives a dot."""
    return _WIND_ARROWS.get(direction, "•")


def format_weather_display(weather: Weather, cfg: Config) -> WeatherDisplay:
    """Format every field of the weather for display under this configuration."""
    cur = weather.current
    place = weather.location
    icon = get_weather_icon(cur.condition, cur.is_day == 1, cfg.use_colors)

    location = ""
    if cfg.show_city_name:
        location = place.name
        if place.region and place.region != place.name:
            location += f", {place.region}"
        if place.country:
            location += f", {place.country}"

    if cfg.units == "imperial":
        temp, feels, temp_unit = cur.temp_f, cur.feelslike_f, "°F"
        speed, speed_unit = cur.wind_mph, "mph"
    else:
        temp, feels, temp_unit = cur.temp_c, cur.feelslike_c, "°C"
        speed, speed_unit = cur.wind_kph, "km/h"

    return WeatherDisplay(
        icon=icon,
        location=location,
        condition=cur.condition,
        temperature=f"{temp:.1f}{temp_unit}",
        feels_like=f"{feels:.1f}{temp_unit}",
        wind=f"{speed:.1f} {speed_unit} {wind_direction_symbol(cur.wind_dir)}",
        humidity=f"{cur.humidity}%",
        uv=f"{cur.uv:.1f}",
        pressure=f"{cur.pressure_mb:.1f} mb",
        visibility=f"{cur.visibility:.1f} km",
        precipitation=f"{cur.precip_mm:.1f} mm",
    )


def render_weather_compact(weather: Weather, cfg: Config) -> str:
    """Render an icon on the left and the main readings on the right."""
    display = format_weather_display(weather, cfg)
    label = Style(foreground=WEATHER_COLOR)
    value = Style(foreground=TEXT_PRIMARY)

    # Cloud cover stands in for the chance of precipitation.
    precip_text = f"{weather.current.precip_mm:.1f} mm | {int(weather.current.cloud)}%"

    text_lines = [
        "",
        label.render("Weather") + "  " + value.render(display.condition),
        label.render("Temp") + "     " + value.render(display.temperature),
        label.render("Wind") + "     " + value.render(display.wind),
        label.render("Humidity") + " " + value.render(display.humidity),
        label.render("Precip") + "   " + value.render(precip_text),
        "",
    ]
    icon_lines = list(display.icon.lines)

    rows = max(len(icon_lines), len(text_lines))
    icon_lines += [" " * _ICON_WIDTH] * (rows - len(icon_lines))
    text_lines += [""] * (rows - len(text_lines))

    icon_block = join_vertical(LEFT, *icon_lines)
    text_block = join_vertical(LEFT, *text_lines)
    return Style().render(join_horizontal(TOP, icon_block, "    ", text_block))