"""Geocoding tool — city name to coordinates via the Open-Meteo geocoding API."""
import json
import logging
from typing import Any, Dict

from ...config import settings
from ..errors import HandlerFault
from ..registry import register_tool, ToolResult, ToolParam
from . import upstream

logger = logging.getLogger(__name__)


async def _search(address: str) -> Dict[str, Any]:
    params = {"name": address, "count": 1}
    if settings.geocoding_api_key:
        params["apikey"] = settings.geocoding_api_key
    async with upstream.client() as client:
        resp = await client.get(settings.geocoding_url, params=params)
    # Status only: the request URL carries the API key
    if resp.is_error:
        raise HandlerFault(f"HTTP error! status: {resp.status_code}")
    try:
        return resp.json()
    except ValueError:
        raise HandlerFault("Malformed geocoding response: body is not JSON") from None


@register_tool(
    "get_coordinates",
    description=(
        "Get the latitude and longitude for a given city name. Provide only the city, "
        "without including the state, province, or country. Example: If the full address "
        "is 'San Francisco, CA', use 'San Francisco' as the input."
    ),
    params=[
        ToolParam("address", description="The city name to get coordinates for"),
    ],
    action="geocoding address",
    subject="{address}",
)
async def get_coordinates(address: str, context=None, **kwargs) -> ToolResult:
    if context is not None:
        logger.debug(f"[{context.request_id}] geocode headers: {dict(context.masked_headers())}")
        if context.user_agent:
            logger.info(f"[{context.request_id}] geocode request from: {context.user_agent}")
        if context.authorization:
            logger.info(f"[{context.request_id}] authorization header present")

    data = await _search(address)
    results = data.get("results") or []
    if not results:
        raise HandlerFault(f"No geocoding results found for address: {address}")

    first = results[0]
    try:
        coordinates = {"latitude": first["latitude"], "longitude": first["longitude"]}
    except (KeyError, TypeError):
        raise HandlerFault("Malformed geocoding response: missing latitude/longitude") from None

    logger.info(f"Geocoded {address!r} -> {coordinates}")
    return ToolResult.text(json.dumps(coordinates, indent=2))
