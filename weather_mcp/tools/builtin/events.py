"""Events tool — list upcoming events from a static mock dataset."""
import json
import logging
from typing import Dict, List

from ..registry import register_tool, ToolResult, ToolParam
from .dates import parse_date

logger = logging.getLogger(__name__)

MAX_EVENTS = 50

# Deterministic mock data; dates are ISO (YYYY-MM-DD)
MOCK_EVENTS: List[Dict[str, str]] = [
    {"id": "evt-001", "name": "Golden Gate Jazz Night", "city": "San Francisco", "category": "music",
     "date": "2026-11-06", "venue": "SFJAZZ Center"},
    {"id": "evt-002", "name": "Bay Area Food Truck Rally", "city": "San Francisco", "category": "food",
     "date": "2026-11-14", "venue": "Fort Mason"},
    {"id": "evt-003", "name": "Warriors vs. Lakers", "city": "San Francisco", "category": "sports",
     "date": "2026-12-02", "venue": "Chase Center"},
    {"id": "evt-004", "name": "Brooklyn Indie Showcase", "city": "New York", "category": "music",
     "date": "2026-10-30", "venue": "Brooklyn Steel"},
    {"id": "evt-005", "name": "Village Halloween Parade", "city": "New York", "category": "festival",
     "date": "2026-10-31", "venue": "Sixth Avenue"},
    {"id": "evt-006", "name": "NYC Marathon", "city": "New York", "category": "sports",
     "date": "2026-11-01", "venue": "Five Boroughs"},
    {"id": "evt-007", "name": "Modern Art After Dark", "city": "New York", "category": "art",
     "date": "2026-11-20", "venue": "MoMA"},
    {"id": "evt-008", "name": "Austin City Limits Late Show", "city": "Austin", "category": "music",
     "date": "2026-11-08", "venue": "Moody Theater"},
    {"id": "evt-009", "name": "Texas BBQ Festival", "city": "Austin", "category": "food",
     "date": "2026-11-21", "venue": "Zilker Park"},
    {"id": "evt-010", "name": "Seattle Tech Meetup", "city": "Seattle", "category": "tech",
     "date": "2026-11-04", "venue": "Amazon Spheres"},
    {"id": "evt-011", "name": "Pike Place Holiday Market", "city": "Seattle", "category": "festival",
     "date": "2026-12-12", "venue": "Pike Place Market"},
    {"id": "evt-012", "name": "Maui Whale Festival", "city": "Maui", "category": "festival",
     "date": "2027-02-13", "venue": "Kalama Park"},
]


@register_tool(
    "list_events",
    description="List upcoming events, optionally filtered by city, category and date range",
    params=[
        ToolParam("city", description="city name, e.g. 'Austin'", required=False, default=""),
        ToolParam("category", description="event category (music, food, sports, art, festival, tech)",
                  required=False, default=""),
        ToolParam("start_date", description="earliest event date (YYYY-MM-DD)", required=False, default=""),
        ToolParam("end_date", description="latest event date (YYYY-MM-DD)", required=False, default=""),
        ToolParam("limit", type="integer", description="maximum number of events to return",
                  required=False, default=10, minimum=1, maximum=MAX_EVENTS),
    ],
    action="listing events",
)
async def list_events(
    city: str = "", category: str = "", start_date: str = "", end_date: str = "",
    limit: int = 10, context=None, **kwargs
) -> ToolResult:
    start = parse_date(start_date, "start_date") if start_date else None
    end = parse_date(end_date, "end_date") if end_date else None

    matches = []
    for event in MOCK_EVENTS:
        if city and event["city"].lower() != city.strip().lower():
            continue
        if category and event["category"].lower() != category.strip().lower():
            continue
        event_date = parse_date(event["date"])
        if start and event_date < start:
            continue
        if end and event_date > end:
            continue
        matches.append(event)

    matches.sort(key=lambda e: (e["date"], e["id"]))
    matches = matches[:limit]
    logger.info(f"list_events city={city!r} category={category!r} -> {len(matches)} events")

    return ToolResult.text(json.dumps({"count": len(matches), "events": matches}, indent=2))
