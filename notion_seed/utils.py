from datetime import datetime, timezone
from typing import Union


def parse_timestamp(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 timestamp or date from the Notion API into an aware datetime (UTC if no offset)."""
    if isinstance(value, datetime):
        dt = value
    else:
        # fromisoformat() only accepts the 'Z' suffix from Python 3.11 on
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        dt = datetime.fromisoformat(text)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso_string(value: Union[str, datetime]) -> str:
    """Render a timestamp as UTC ISO-8601 with millisecond precision, e.g. 2021-05-13T00:00:00.000Z."""
    dt = parse_timestamp(value).astimezone(timezone.utc)
    return dt.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
