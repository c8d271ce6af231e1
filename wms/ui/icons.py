"""ASCII-art weather icons, in colour or monochrome."""

from __future__ import annotations

from dataclasses import dataclass, field

from wms.ui.style import Style

_SUN = "#FCD34D"
_CLOUD = "#9CA3AF"
_DARK_CLOUD = "#6B7280"
_RAIN = "#60A5FA"
_SNOW = "#F3F4F6"
_THUNDER = "#FBBF24"
_MOON = "#E5E7EB"
_FOG = "#D1D5DB"

_BLANK = ((None, "             "),)

# Each icon is seven lines; each line is a run of (colour, text) segments.
_ICONS: dict[str, tuple[tuple[tuple[str | None, str], ...], ...]] = {
    "Unknown": (
        _BLANK,
        ((None, "    .-.      "),),
        ((None, "     __)     "),),
        ((None, "    (        "),),
        ((None, "     `-'     "),),
        ((None, "      •      "),),
        _BLANK,
    ),
    "Sunny": (
        _BLANK,
        ((_SUN, "    \\   /    "),),
        ((_SUN, "     .-.     "),),
        ((_SUN, "  ― (   ) ―  "),),
        ((_SUN, "     `-'     "),),
        ((_SUN, "    /   \\    "),),
        _BLANK,
    ),
    "Clear": (
        _BLANK,
        ((_MOON, "      .-.    "),),
        ((_MOON, "   .-(   )   "),),
        ((_MOON, "  (       )  "),),
        ((_MOON, "   `-(   )-' "),),
        ((_MOON, "      `-'    "),),
        _BLANK,
    ),
    "PartlyCloudy": (
        _BLANK,
        ((_SUN, "   \\  /"), (None, "      ")),
        ((_SUN, ' _ /""'), (_CLOUD, ".-.    ")),
        ((_SUN, "   \\_"), (_CLOUD, "(   ).  ")),
        ((_SUN, "   /"), (_CLOUD, "(___(__) ")),
        _BLANK,
        _BLANK,
    ),
    "PartlyCloudyNight": (
        _BLANK,
        ((_MOON, "   )  (      "),),
        ((_MOON, " .-(  )"), (_CLOUD, ".-.   ")),
        ((_MOON, "(  (    )"), (_CLOUD, ".  )")),
        ((_CLOUD, " `-(____)-'  "),),
        _BLANK,
        _BLANK,
    ),
    "Cloudy": (
        _BLANK,
        _BLANK,
        ((_CLOUD, "     .--.    "),),
        ((_CLOUD, "  .-(    ).  "),),
        ((_CLOUD, " (___.__)__) "),),
        _BLANK,
        _BLANK,
    ),
    "LightRain": (
        _BLANK,
        ((_SUN, ' _`/""'), (_CLOUD, ".-.    ")),
        ((_SUN, "  ,\\_"), (_CLOUD, "(   ).  ")),
        ((_SUN, "   /"), (_CLOUD, "(___(__) ")),
        ((_RAIN, "     ' ' ' ' "),),
        ((_RAIN, "    ' ' ' '  "),),
        _BLANK,
    ),
    "HeavyRain": (
        _BLANK,
        ((_SUN, ' _`/""'), (_DARK_CLOUD, ".-.    ")),
        ((_SUN, "  ,\\_"), (_DARK_CLOUD, "(   ).  ")),
        ((_SUN, "   /"), (_DARK_CLOUD, "(___(__) ")),
        ((_RAIN, "   ‚'‚'‚'‚'  "),),
        ((_RAIN, "   ‚'‚'‚'‚'  "),),
        _BLANK,
    ),
    "LightSnow": (
        _BLANK,
        ((_CLOUD, "     .-.     "),),
        ((_CLOUD, "    (   ).   "),),
        ((_CLOUD, "   (___(__)  "),),
        ((_SNOW, "    *  *  *  "),),
        ((_SNOW, "   *  *  *   "),),
        _BLANK,
    ),
    "HeavySnow": (
        _BLANK,
        ((_DARK_CLOUD, "     .-.     "),),
        ((_DARK_CLOUD, "    (   ).   "),),
        ((_DARK_CLOUD, "   (___(__)  "),),
        ((_SNOW, "   * * * *   "),),
        ((_SNOW, "  * * * *    "),),
        _BLANK,
    ),
    "Thunderstorm": (
        _BLANK,
        ((_DARK_CLOUD, "     .-.     "),),
        ((_DARK_CLOUD, "    (   ).   "),),
        ((_DARK_CLOUD, "   (___(__)  "),),
        ((_THUNDER, "    ⚡"), (_RAIN, '""'), (_THUNDER, "⚡"), (_RAIN, '"" ')),
        ((_RAIN, "  ‚'‚'‚'‚'   "),),
        _BLANK,
    ),
    "Fog": (
        _BLANK,
        _BLANK,
        ((_FOG, " _ - _ - _ - "),),
        ((_FOG, "  _ - _ - _  "),),
        ((_FOG, " _ - _ - _ - "),),
        _BLANK,
        _BLANK,
    ),
    "Sleet": (
        _BLANK,
        ((_CLOUD, "     .-.     "),),
        ((_CLOUD, "    (   ).   "),),
        ((_CLOUD, "   (___(__)  "),),
        ((_RAIN, "    ‚ "), (_SNOW, "* "), (_RAIN, "‚ "), (_SNOW, "*  ")),
        ((_SNOW, "   * "), (_RAIN, "‚ "), (_SNOW, "* "), (_RAIN, "‚   ")),
        _BLANK,
    ),
    "IcePellets": (
        _BLANK,
        ((_CLOUD, "     .-.     "),),
        ((_CLOUD, "    (   ).   "),),
        ((_CLOUD, "   (___(__)  "),),
        ((_SNOW, "    ° ° ° °  "),),
        ((_SNOW, "   ° ° ° °   "),),
        _BLANK,
    ),
}

_CONDITION_ICONS: dict[str, str] = {}
for _icon, _conditions in {
    "Cloudy": ("Cloudy", "Overcast"),
    "Fog": ("Mist", "Fog"),
    "LightRain": (
        "Patchy rain possible", "Light rain", "Moderate rain at times",
        "Moderate rain", "Light drizzle", "Patchy light drizzle",
    ),
    "HeavyRain": (
        "Heavy rain at times", "Heavy rain", "Moderate or heavy rain shower",
        "Torrential rain shower",
    ),
    "LightSnow": (
        "Patchy snow possible", "Light snow", "Patchy light snow", "Light snow showers",
    ),
    "HeavySnow": (
        "Moderate snow", "Heavy snow", "Patchy heavy snow",
        "Moderate or heavy snow showers", "Blizzard",
    ),
    "Thunderstorm": (
        "Thundery outbreaks possible", "Patchy light rain with thunder",
        "Moderate or heavy rain with thunder",
    ),
    "Sleet": ("Patchy sleet possible", "Light sleet", "Moderate or heavy sleet"),
    "IcePellets": (
        "Ice pellets", "Light showers of ice pellets",
        "Moderate or heavy showers of ice pellets",
    ),
}.items():
    for _condition in _conditions:
        _CONDITION_ICONS[_condition] = _icon


@dataclass
class WeatherIcon:
    """The lines of an icon and whether they carry colour."""

    lines: list[str] = field(default_factory=list)
    use_colors: bool = False


def map_condition_to_icon(condition: str, is_day: bool) -> str:
    """Map a weather condition text to an icon name."""
    if condition in ("Sunny", "Clear"):
        return "Sunny" if is_day else "Clear"
    if condition in ("Partly cloudy", "Partly Cloudy"):
        return "PartlyCloudy" if is_day else "PartlyCloudyNight"
    return _CONDITION_ICONS.get(condition, "Unknown")


def _render_segment(color: str | None, text: str, use_colors: bool) -> str:
    if use_colors and color:
        return Style(foreground=color).render(text)
    return text


def get_icon(name: str, use_colors: bool) -> list[str]:
    """Return the lines of the named icon; unknown names give the Unknown icon."""
    icon = _ICONS.get(name, _ICONS["Unknown"])
    return [
        "".join(_render_segment(color, text, use_colors) for color, text in line)
        for line in icon
    ]


def get_weather_icon(condition: str, is_day: bool, use_colors: bool) -> WeatherIcon:
    """Pick the icon for a condition at this time of day."""
    name = map_condition_to_icon(condition, is_day)
    return WeatherIcon(lines=get_icon(name, use_colors), use_colors=use_colors)