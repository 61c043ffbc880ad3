"""General utility functions."""
import random
from datetime import datetime, timezone

from app.core.constants import LECTURE_CODE_MIN, LECTURE_CODE_MAX
from app.core.exceptions import InvalidArgumentError


def make_lecture_code() -> int:
    """Draw a uniformly random 6-digit lecture code."""
    return random.randint(LECTURE_CODE_MIN, LECTURE_CODE_MAX)


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC timezone."""
    if dt.tzinfo is None:
        # Assume UTC if no timezone
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_ms(dt: datetime) -> int:
    return int(to_utc(dt).timestamp() * 1000)


def parse_iso_to_ms(value: str, field: str = "start_time") -> int:
    """
    Parse an ISO-8601 timestamp into epoch milliseconds.

    A trailing "Z" is accepted as UTC and naive timestamps are taken as UTC.

    Raises:
        InvalidArgumentError: If the value is not a valid ISO-8601 string
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Invalid {field}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidArgumentError(f"Invalid {field}")

    return to_epoch_ms(parsed)


def coerce_timestamp_ms(value, field: str = "start_time") -> int:
    """Accept either an ISO-8601 string or an epoch-millisecond integer."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid {field}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return parse_iso_to_ms(value, field)
    raise InvalidArgumentError(f"Invalid {field}")
