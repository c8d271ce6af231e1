"""Guessing the user's location from their public IP address."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

IP_API_URL = "http://ip-api.com/json/"
TIMEOUT = 10


class LocationError(Exception):
    """The location could not be determined."""


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise LocationError(f"failed to parse location response: field {key!r} is not a string")
    return value


def parse_ip_location(payload: Any) -> str:
    """Turn a geolocation response into "City, Region", "City" or "Country"."""
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise LocationError("failed to parse location response: expected an object")
    city = _text(payload, "city")
    region = _text(payload, "region")
    country = _text(payload, "country")
    if city:
        if region and region != city:
            return f"{city}, {region}"
        return city
    if country:
        return country
    raise LocationError("no location information available")


def detect_location_from_ip(session: requests.Session | None = None) -> str:
    """Ask the IP geolocation service where this machine is."""
    client = session if session is not None else requests
    try:
        response = client.get(IP_API_URL, timeout=TIMEOUT)
    except requests.RequestException as exc:
        raise LocationError(f"failed to get location from IP: {exc}") from exc
    with response:
        if response.status_code != 200:
            raise LocationError(
                f"IP geolocation service returned status {response.status_code}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise LocationError(f"failed to parse location response: {exc}") from exc
    return parse_ip_location(payload)