import re
from datetime import datetime, timezone
from urllib.parse import quote, urlparse

# Visible ASCII plus space and tab; anything else cannot go into an HTTP header.
_HEADER_VALUE = re.compile(r"[\x20-\x7e\t]*")


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_cursor(value: datetime) -> str:
    """Render a pagination cursor the way the API expects it.

    Examples:
        2024-01-01 12:30:05.123456+02:00 -> 2024-01-01T10:30:05.123Z
        2024-01-01 00:00:00 (naive)      -> 2024-01-01T00:00:00.000Z
    """
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_utc(value: str | None) -> datetime | None:
    raw = (value or "").strip()
    if not raw:
        return None
    return as_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))


def path_segment(value: object) -> str:
    """Percent-encode one URL path segment (``/`` included)."""
    return quote(str(value), safe="")


def is_valid_header_value(value: str) -> bool:
    return _HEADER_VALUE.fullmatch(value) is not None


def is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
