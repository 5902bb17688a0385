"""Date argument parsing shared by the builtin tools."""
from datetime import date, datetime, timezone

from ..errors import HandlerFault


def parse_date(value: str, field: str = "date") -> date:
    """Parse an ISO date or datetime string to a calendar date.

    Aware datetimes are converted to UTC first, so "2025-07-10T23:00:00-05:00"
    becomes 2025-07-11.
    """
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise HandlerFault(f"Invalid {field}: {value!r} (expected YYYY-MM-DD)") from None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()
