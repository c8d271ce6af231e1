"""Weather data, the providers that fetch it and the conversions they need."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote_plus

import requests

from wms.config import PROVIDER_OPEN_METEO, PROVIDER_WEATHER_API

TIMEOUT = 10

WEATHER_API_URL = "http://api.weatherapi.com/v1/current.json"
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

_OPEN_METEO_CURRENT = (
    "temperature_2m,weather_code,precipitation,relative_humidity_2m,"
    "wind_speed_10m,wind_direction_10m,is_day"
)

_DIRECTIONS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

_WEATHER_CODES: dict[int, str] = {}
for _condition, _codes in {
    "Clear": (0,),
    "Partly cloudy": (1, 2, 3),
    "Fog": (45, 48),
    "Light rain": (51, 53, 55, 56, 57),
    "Moderate rain": (61, 63, 65),
    "Heavy rain": (66, 67, 80, 81, 82),
    "Light snow": (71, 73, 75),
    "Heavy snow": (77, 85, 86),
    "Thunderstorm": (95, 96, 99),
}.items():
    for _code in _codes:
        _WEATHER_CODES[_code] = _condition


class WeatherError(Exception):
    """Weather data could not be fetched or understood."""


@dataclass
class Place:
    name: str = ""
    region: str = ""
    country: str = ""
    lat: float = 0.0
    lon: float = 0.0
    local_time: str = ""


@dataclass
class Conditions:
    temp_c: float = 0.0
    temp_f: float = 0.0
    is_day: int = 0
    condition: str = ""
    wind_mph: float = 0.0
    wind_kph: float = 0.0
    wind_dir: str = ""
    humidity: int = 0
    feelslike_c: float = 0.0
    feelslike_f: float = 0.0
    uv: float = 0.0
    precip_mm: float = 0.0
    pressure_mb: float = 0.0
    cloud: int = 0
    visibility: float = 0.0


@dataclass
class Weather:
    """Weather at one place, in the same shape whichever provider supplied it."""

    location: Place = field(default_factory=Place)
    current: Conditions = field(default_factory=Conditions)


@dataclass
class GeoResult:
    id: int = 0
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    country: str = ""
    admin1: str = ""


def _object(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise WeatherError(f"failed to parse JSON: {what} is not an object")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise WeatherError(f"failed to parse JSON: field {key!r} is not a string")
    return value


def _int(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise WeatherError(f"failed to parse JSON: field {key!r} is not an integer")
    return value


def _float(obj: Mapping[str, Any], key: str) -> float:
    value = obj.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WeatherError(f"failed to parse JSON: field {key!r} is not a number")
    return float(value)


def _json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise WeatherError(f"failed to parse JSON: {exc}") from exc


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * 0.621371


def degree_to_direction(degree: int) -> str:
    """Turn a bearing in degrees into one of the sixteen compass points."""
    steps = int((degree + 11.25) / 22.5)
    if steps < 0:
        raise ValueError(f"wind direction out of range: {degree}")
    return _DIRECTIONS[steps % 16]


def weather_code_to_condition(code: int) -> str:
    """Turn an Open-Meteo weather code into a condition text."""
    return _WEATHER_CODES.get(code, "Unknown")


def weather_from_weatherapi(payload: Any) -> Weather:
    """Build a Weather from a WeatherAPI current-conditions response."""
    root = _object(payload, "response")
    loc = _object(root.get("location"), "location")
    cur = _object(root.get("current"), "current")
    cond = _object(cur.get("condition"), "condition")
    return Weather(
        location=Place(
            name=_str(loc, "name"),
            region=_str(loc, "region"),
            country=_str(loc, "country"),
            lat=_float(loc, "lat"),
            lon=_float(loc, "lon"),
            local_time=_str(loc, "localtime"),
        ),
        current=Conditions(
            temp_c=_float(cur, "temp_c"),
            temp_f=_float(cur, "temp_f"),
            is_day=_int(cur, "is_day"),
            condition=_str(cond, "text"),
            wind_mph=_float(cur, "wind_mph"),
            wind_kph=_float(cur, "wind_kph"),
            wind_dir=_str(cur, "wind_dir"),
            humidity=_int(cur, "humidity"),
            feelslike_c=_float(cur, "feelslike_c"),
            feelslike_f=_float(cur, "feelslike_f"),
            uv=_float(cur, "uv"),
            precip_mm=_float(cur, "precip_mm"),
            pressure_mb=_float(cur, "pressure_mb"),
            cloud=_int(cur, "cloud"),
            visibility=_float(cur, "vis_km"),
        ),
    )


def weather_from_open_meteo(payload: Any, geo: GeoResult) -> Weather:
    """Build a Weather from an Open-Meteo forecast response and its geocoding."""
    root = _object(payload, "response")
    cur = _object(root.get("current"), "current")
    temp = _float(cur, "temperature_2m")
    wind = _float(cur, "wind_speed_10m")
    return Weather(
        location=Place(
            name=geo.name,
            region=geo.admin1,
            country=geo.country,
            lat=geo.latitude,
            lon=geo.longitude,
            local_time=_str(cur, "time"),
        ),
        current=Conditions(
            temp_c=temp,
            temp_f=celsius_to_fahrenheit(temp),
            is_day=_int(cur, "is_day"),
            condition=weather_code_to_condition(_int(cur, "weather_code")),
            wind_mph=kmh_to_mph(wind),
            wind_kph=wind,
            wind_dir=degree_to_direction(_int(cur, "wind_direction_10m")),
            humidity=_int(cur, "relative_humidity_2m"),
            # Feels-like, UV, pressure, cloud and visibility are not provided.
            feelslike_c=temp,
            feelslike_f=celsius_to_fahrenheit(temp),
            precip_mm=_float(cur, "precipitation"),
        ),
    )


def _geo_result(item: Any) -> GeoResult:
    obj = _object(item, "result")
    return GeoResult(
        id=_int(obj, "id"),
        name=_str(obj, "name"),
        latitude=_float(obj, "latitude"),
        longitude=_float(obj, "longitude"),
        country=_str(obj, "country"),
        admin1=_str(obj, "admin1"),
    )


class WeatherProvider(ABC):
    """A source of current weather for a named location."""

    name: str = ""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()

    @abstractmethod
    def fetch_weather(self, location: str) -> Weather:
        """Fetch the current weather at location; raises WeatherError."""


class WeatherAPIProvider(WeatherProvider):
    name = PROVIDER_WEATHER_API

    def __init__(self, api_key: str, session: requests.Session | None = None) -> None:
        super().__init__(session)
        self.api_key = api_key

    def fetch_weather(self, location: str) -> Weather:
        url = f"{WEATHER_API_URL}?key={self.api_key}&q={quote_plus(location)}&aqi=no"
        try:
            response = self.session.get(url, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise WeatherError(f"failed to send request: {exc}") from exc
        with response:
            if response.status_code == 401:
                raise WeatherError("invalid API key - please check your configuration")
            if response.status_code == 404:
                raise WeatherError(
                    f"location '{location}' not found - please check the spelling"
                )
            if response.status_code != 200:
                raise WeatherError(f"API returned status code {response.status_code}")
            payload = _json(response)
        return weather_from_weatherapi(payload)


class OpenMeteoProvider(WeatherProvider):
    name = PROVIDER_OPEN_METEO

    def first_geo_result(self, location: str) -> GeoResult:
        """Look up the coordinates of location; raises WeatherError."""
        url = f"{OPEN_METEO_GEOCODING_URL}?name={quote_plus(location)}&count=1"
        try:
            response = self.session.get(url, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise WeatherError(str(exc)) from exc
        with response:
            payload = _json(response)
        results = _object(payload, "response").get("results") or []
        if not isinstance(results, list):
            raise WeatherError("failed to parse JSON: results is not a list")
        if not results:
            raise WeatherError(f"no results found for location: {location}")
        return _geo_result(results[0])

    def fetch_weather(self, location: str) -> Weather:
        try:
            geo = self.first_geo_result(location)
        except WeatherError as exc:
            raise WeatherError(f"geocoding failed: {exc}") from exc
        url = (
            f"{OPEN_METEO_FORECAST_URL}?latitude={geo.latitude:f}&longitude={geo.longitude:f}"
            f"&current={_OPEN_METEO_CURRENT}&wind_speed_unit=kmh&temperature_unit=celsius"
        )
        try:
            response = self.session.get(url, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise WeatherError(f"failed to fetch weather data: {exc}") from exc
        with response:
            payload = _json(response)
        return weather_from_open_meteo(payload, geo)


def create_weather_provider(provider_name: str, api_key: str) -> WeatherProvider:
    """Make the provider with this name (case-insensitive)."""
    key = provider_name.lower()
    if key == PROVIDER_WEATHER_API.lower():
        if not api_key:
            raise WeatherError("API key is required for WeatherAPI provider")
        return WeatherAPIProvider(api_key)
    if key == PROVIDER_OPEN_METEO.lower():
        return OpenMeteoProvider()
    raise WeatherError(f"unsupported weather provider: {provider_name}")