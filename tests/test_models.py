import pytest
import requests
import responses

from wms.weather.models import (
    GeoResult,
    OpenMeteoProvider,
    WeatherAPIProvider,
    WeatherError,
    celsius_to_fahrenheit,
    create_weather_provider,
    degree_to_direction,
    kmh_to_mph,
    weather_code_to_condition,
    weather_from_open_meteo,
    weather_from_weatherapi,
)

WEATHERAPI_PAYLOAD = {
    "location": {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "lat": 51.52,
        "lon": -0.11,
        "localtime": "2024-05-01 12:00",
    },
    "current": {
        "temp_c": 14.0,
        "temp_f": 57.2,
        "is_day": 1,
        "condition": {"text": "Partly cloudy", "icon": "//cdn/116.png", "code": 1003},
        "wind_mph": 8.1,
        "wind_kph": 13.0,
        "wind_dir": "WSW",
        "humidity": 67,
        "feelslike_c": 12.5,
        "feelslike_f": 54.5,
        "uv": 4.0,
        "precip_mm": 0.1,
        "pressure_mb": 1012.0,
        "cloud": 50,
        "vis_km": 10.0,
    },
}

GEO = GeoResult(id=1, name="Berlin", latitude=52.52, longitude=13.41,
                country="Germany", admin1="Land Berlin")

OPEN_METEO_PAYLOAD = {
    "latitude": 52.52,
    "longitude": 13.41,
    "current": {
        "time": "2024-05-01T12:00",
        "interval": 900,
        "temperature_2m": 20.0,
        "weather_code": 61,
        "precipitation": 0.4,
        "relative_humidity_2m": 55,
        "wind_speed_10m": 10.0,
        "wind_direction_10m": 90,
        "is_day": 1,
    },
}


def test_weatherapi_payload_is_mapped():
    weather = weather_from_weatherapi(WEATHERAPI_PAYLOAD)
    assert weather.location.name == "London"
    assert weather.location.region == "City of London, Greater London"
    assert weather.location.local_time == "2024-05-01 12:00"
    assert weather.current.condition == "Partly cloudy"
    assert weather.current.humidity == 67
    assert weather.current.cloud == 50
    assert weather.current.visibility == 10.0
    assert weather.current.wind_dir == "WSW"


def test_weatherapi_missing_fields_are_zero():
    weather = weather_from_weatherapi({"location": {"name": "X"}})
    assert weather.location.name == "X"
    assert weather.current.temp_c == 0.0
    assert weather.current.condition == ""
    assert weather.current.humidity == 0


def test_weatherapi_wrong_type_raises():
    with pytest.raises(WeatherError):
        weather_from_weatherapi({"current": {"humidity": "lots"}})


def test_open_meteo_payload_is_mapped():
    weather = weather_from_open_meteo(OPEN_METEO_PAYLOAD, GEO)
    assert weather.location.name == "Berlin"
    assert weather.location.region == "Land Berlin"
    assert weather.location.local_time == "2024-05-01T12:00"
    assert weather.current.condition == "Moderate rain"
    assert weather.current.wind_dir == "E"
    assert weather.current.temp_f == celsius_to_fahrenheit(weather.current.temp_c)
    assert weather.current.feelslike_c == weather.current.temp_c
    assert weather.current.wind_mph == kmh_to_mph(weather.current.wind_kph)
    assert weather.current.pressure_mb == 0.0
    assert weather.current.humidity == 55


def test_conversions():
    assert celsius_to_fahrenheit(0) == 32
    assert celsius_to_fahrenheit(-40) == -40
    assert kmh_to_mph(1.0) == pytest.approx(0.621371)
    assert kmh_to_mph(0.0) == 0.0


@pytest.mark.parametrize(
    "degree, direction",
    [(0, "N"), (90, "E"), (180, "S"), (270, "W"), (359, "N"), (45, "NE")],
)
def test_degree_to_direction(degree, direction):
    assert degree_to_direction(degree) == direction


@pytest.mark.parametrize(
    "code, condition",
    [(0, "Clear"), (2, "Partly cloudy"), (48, "Fog"), (57, "Light rain"),
     (65, "Moderate rain"), (82, "Heavy rain"), (77, "Heavy snow"),
     (99, "Thunderstorm"), (4, "Unknown")],
)
def test_weather_code_to_condition(code, condition):
    assert weather_code_to_condition(code) == condition


def test_weatherapi_fetch_success():
    provider = WeatherAPIProvider("placeholder", requests.Session())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://api.weatherapi.com/v1/current.json",
                 json=WEATHERAPI_PAYLOAD)
        weather = provider.fetch_weather("New York")
        url = rsps.calls[0].request.url
    assert "q=New+York" in url
    assert "aqi=no" in url
    assert weather.location.name == "London"


@pytest.mark.parametrize(
    "status, fragment",
    [(401, "invalid API key"), (404, "location 'Nowhere' not found"),
     (500, "API returned status code 500")],
)
def test_weatherapi_fetch_errors(status, fragment):
    provider = WeatherAPIProvider("placeholder", requests.Session())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://api.weatherapi.com/v1/current.json",
                 status=status, json={})
        with pytest.raises(WeatherError, match=fragment):
            provider.fetch_weather("Nowhere")


def test_weatherapi_invalid_json():
    provider = WeatherAPIProvider("placeholder", requests.Session())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://api.weatherapi.com/v1/current.json",
                 body="not json")
        with pytest.raises(WeatherError, match="failed to parse JSON"):
            provider.fetch_weather("London")


def test_open_meteo_fetch_success():
    provider = OpenMeteoProvider(requests.Session())
    geo_payload = {"results": [{"id": 1, "name": "Berlin", "latitude": 52.52,
                                "longitude": 13.41, "country": "Germany",
                                "admin1": "Land Berlin"}]}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://geocoding-api.open-meteo.com/v1/search",
                 json=geo_payload)
        rsps.add(responses.GET, "https://api.open-meteo.com/v1/forecast",
                 json=OPEN_METEO_PAYLOAD)
        weather = provider.fetch_weather("Berlin")
        forecast_url = rsps.calls[1].request.url
    assert "latitude=52.520000" in forecast_url
    assert weather.location.country == "Germany"
    assert weather.current.condition == "Moderate rain"


def test_open_meteo_no_results():
    provider = OpenMeteoProvider(requests.Session())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://geocoding-api.open-meteo.com/v1/search",
                 json={})
        with pytest.raises(WeatherError, match="geocoding failed: no results found"):
            provider.fetch_weather("Atlantis")


def test_first_geo_result():
    provider = OpenMeteoProvider(requests.Session())
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://geocoding-api.open-meteo.com/v1/search",
                 json={"results": [{"name": "Paris", "latitude": 48.85,
                                    "longitude": 2.35, "country": "France"}]})
        geo = provider.first_geo_result("Paris")
        url = rsps.calls[0].request.url
    assert geo.name == "Paris"
    assert geo.latitude == 48.85
    assert "count=1" in url


def test_create_weather_provider():
    provider = create_weather_provider("weatherapi", "placeholder")
    assert isinstance(provider, WeatherAPIProvider)
    assert provider.api_key == "placeholder"
    assert provider.name == "WeatherAPI"
    meteo = create_weather_provider("OPENMETEO", "")
    assert meteo.name == "OpenMeteo"


def test_create_weather_provider_errors():
    with pytest.raises(WeatherError, match="API key is required"):
        create_weather_provider("WeatherAPI", "")
    with pytest.raises(WeatherError, match="unsupported weather provider: Foo"):
        create_weather_provider("Foo", "placeholder")