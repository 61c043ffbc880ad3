"""Entity identifiers.

Ids are 12 random-ish bytes rendered as 24 lowercase hex characters. The
first four bytes hold the creation time in seconds, so ids generated later
sort after earlier ones at second granularity.
"""
import re
import secrets
import time
from typing import Optional

from app.core.constants import ID_HEX_LENGTH
from app.core.exceptions import InvalidArgumentError

_ID_PATTERN = re.compile(rf"^[0-9a-fA-F]{{{ID_HEX_LENGTH}}}$")


def new_id() -> str:
    """Generate a new entity id."""
    timestamp = int(time.time()) & 0xFFFFFFFF
    return f"{timestamp:08x}{secrets.token_hex((ID_HEX_LENGTH - 8) // 2)}"


def is_valid_id(value) -> bool:
    return isinstance(value, str) and bool(_ID_PATTERN.match(value.strip()))


def parse_id(value, field: str = "id") -> str:
    """
    Validate an externally supplied id and return its canonical form.

    Raises:
        InvalidArgumentError: If the value is not a 24-character hex string
    """
    if not is_valid_id(value):
        raise InvalidArgumentError(f"Invalid {field}")
    return value.strip().lower()


def parse_optional_id(value: Optional[str], field: str = "id") -> Optional[str]:
    """Like parse_id, but blank or missing values become None."""
    if value is None or not str(value).strip():
        return None
    return parse_id(value, field)
