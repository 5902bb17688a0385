"""Weather tools — hourly temperature forecast via the Open-Meteo forecast API."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ...config import settings
from ..errors import HandlerFault
from ..registry import register_tool, ToolResult, ToolParam
from .dates import parse_date
from . import upstream

logger = logging.getLogger(__name__)

# WMO weather interpretation codes returned as hourly weather_code
_WMO_CODE_TO_CONDITION: Dict[int, str] = {
    0: "Clear",
    1: "Mainly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing Rime Fog",
    51: "Light Drizzle",
    53: "Moderate Drizzle",
    55: "Dense Drizzle",
    56: "Freezing Drizzle",
    57: "Heavy Freezing Drizzle",
    61: "Slight Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    66: "Freezing Rain",
    67: "Heavy Freezing Rain",
    71: "Slight Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Slight Showers",
    81: "Moderate Showers",
    82: "Violent Showers",
    85: "Slight Snow Showers",
    86: "Heavy Snow Showers",
    95: "Thunderstorms",
    96: "Thunderstorms with Hail",
    99: "Heavy Thunderstorms with Hail",
}

_LATITUDE = ToolParam(
    "latitude", type="number", description="Latitude coordinate (-90 to 90)", minimum=-90, maximum=90,
)
_LONGITUDE = ToolParam(
    "longitude", type="number", description="Longitude coordinate (-180 to 180)", minimum=-180, maximum=180,
)


@dataclass
class HourlyPoint:
    time: str
    temperature: Optional[float]
    weather_code: Optional[int]
    unit: str

    @property
    def condition(self) -> str:
        return _WMO_CODE_TO_CONDITION.get(self.weather_code, "Unknown")

    def render(self) -> str:
        return (
            f"- {self.time}: {_fmt_number(self.temperature)}{self.unit} "
            f"(weatherCode: {_fmt_number(self.weather_code)}, {self.condition})"
        )


def _fmt_number(value: Any) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


async def _fetch_hourly(latitude: float, longitude: float, start_date: str = "", end_date: str = "") -> Dict[str, Any]:
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "hourly": "temperature_2m,weather_code",
        "temperature_unit": settings.temperature_unit,
    }
    if start_date:
        params["start_date"] = start_date
    if end_date:
        params["end_date"] = end_date

    async with upstream.client() as client:
        resp = await client.get(settings.forecast_url, params=params)
    if resp.is_error:
        raise HandlerFault(f"Weather API request failed: {resp.status_code} {resp.reason_phrase}")
    try:
        return resp.json()
    except ValueError:
        raise HandlerFault("Malformed forecast response: body is not JSON") from None


def parse_hourly(data: Dict[str, Any]) -> List[HourlyPoint]:
    """Turn the forecast payload into hourly points, validating its shape."""
    try:
        hourly = data["hourly"]
        times = hourly["time"]
        temps = hourly["temperature_2m"]
        codes = hourly["weather_code"]
    except (KeyError, TypeError):
        raise HandlerFault("Malformed forecast response: missing hourly series") from None
    if not (len(times) == len(temps) == len(codes)):
        raise HandlerFault("Malformed forecast response: hourly series lengths differ")

    unit = (data.get("hourly_units") or {}).get("temperature_2m", "")
    return [HourlyPoint(t, temp, code, unit) for t, temp, code in zip(times, temps, codes)]


def slice_from_now(points: List[HourlyPoint], hours: int, now: Optional[datetime] = None) -> List[HourlyPoint]:
    """Points from the current hour onward, at most `hours` of them.

    Series times are UTC ("2025-07-10T13:00"). If every point is in the past
    the slice starts at the beginning of the series.
    """
    now = now or datetime.now(timezone.utc)
    current_hour = now.strftime("%Y-%m-%dT%H")
    start = next((i for i, p in enumerate(points) if p.time >= current_hour), 0)
    return points[start:start + hours]


def _header(latitude: float, longitude: float) -> str:
    return f"Weather Forecast for coordinates ({_fmt_number(latitude)}, {_fmt_number(longitude)}):\n\n"


@register_tool(
    "get_weather_forecast",
    description="Get hourly temperature forecast for a given location using longitude and latitude coordinates",
    params=[_LATITUDE, _LONGITUDE],
    action="fetching weather forecast",
    subject="({latitude}, {longitude})",
)
async def get_weather_forecast(latitude: float, longitude: float, context=None, **kwargs) -> ToolResult:
    data = await _fetch_hourly(latitude, longitude)
    forecast = slice_from_now(parse_hourly(data), settings.forecast_hours)
    if not forecast:
        raise HandlerFault("Forecast response contained no hourly data")

    text = (
        _header(latitude, longitude)
        + f"Next {len(forecast)} Hours Temperature Forecast:\n"
        + "\n".join(p.render() for p in forecast)
    )
    return ToolResult.text(text)


@register_tool(
    "get_weather_forecast_for_date_range",
    description=(
        "Get hourly temperature forecast for a specific location and date range "
        "using latitude and longitude coordinates"
    ),
    params=[
        _LATITUDE,
        _LONGITUDE,
        ToolParam("start_date", description="Start date to get the weather forecast for (YYYY-MM-DD)"),
        ToolParam("end_date", description="End date to get the weather forecast for (YYYY-MM-DD)"),
    ],
    action="fetching weather forecast",
    subject="({latitude}, {longitude}) {start_date}..{end_date}",
)
async def get_weather_forecast_for_date_range(
    latitude: float, longitude: float, start_date: str, end_date: str, context=None, **kwargs
) -> ToolResult:
    start = parse_date(start_date, "start_date")
    end = parse_date(end_date, "end_date")
    if end < start:
        raise HandlerFault(f"end_date {end.isoformat()} is before start_date {start.isoformat()}")

    data = await _fetch_hourly(latitude, longitude, start.isoformat(), end.isoformat())
    # The whole requested range is returned, not just the next day.
    forecast = parse_hourly(data)
    if not forecast:
        raise HandlerFault("Forecast response contained no hourly data")

    text = (
        _header(latitude, longitude)
        + f"Hourly Temperature Forecast from {start.isoformat()} to {end.isoformat()} ({len(forecast)} hours):\n"
        + "\n".join(p.render() for p in forecast)
    )
    return ToolResult.text(text)
