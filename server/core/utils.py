# server/core/utils.py

import re
import secrets
from datetime import date, datetime


# Canonical date text, e.g. "Sun Jan 01 2023"
DATE_FORMAT = "%a %b %d %Y"

INPUT_DATE_FORMATS = (
    DATE_FORMAT,
    "%a %b %d %Y %H:%M:%S",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

MAX_LIMIT = 2 ** 63 - 1

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


# -------------------------------
# Identifiers
# -------------------------------

def new_object_id() -> str:
    return secrets.token_hex(12)


def is_object_id(value) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))


# -------------------------------
# Dates
# -------------------------------

def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def today_string() -> str:
    return format_date(date.today())


def to_date_string(value: str) -> str:
    """
    Renders a caller-supplied date as canonical date text.
    Accepts ISO dates and datetimes, canonical text, and the common written
    shapes in INPUT_DATE_FORMATS. Raises ValueError for anything else.
    """
    text = str(value).strip()
    try:
        return format_date(date.fromisoformat(text))
    except ValueError:
        pass
    try:
        return format_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in INPUT_DATE_FORMATS:
        try:
            return format_date(datetime.strptime(text, fmt))
        except ValueError:
            continue
    raise ValueError(f"Invalid date string: {value!r}")


# -------------------------------
# Numbers
# -------------------------------

def parse_limit(value) -> int:
    """
    Parses the leading integer of a query value; 0 means unlimited.
    Values beyond the store's 64-bit integer range are clamped.
    """
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return 0
    return min(abs(int(match.group(1))), MAX_LIMIT)


def as_number(value):
    if value is None:
        return None
    if float(value).is_integer():
        return int(value)
    return value
