"""Small string and time helpers shared by the services."""

import re
from datetime import datetime, timezone

_NEWLINES = re.compile(r"[\n\r\f]")


def clean_name(value: str) -> str:
    """
    Strip newlines and tabs from a name and trim surrounding whitespace.

    Applied to template names and backend type keys before they are stored.
    """
    value = _NEWLINES.sub("", value)
    value = value.replace("\t", "")
    return value.strip()


def now_utc() -> datetime:
    """Return the current time as a naive UTC datetime (as stored in the DB)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
