"""Conversion between FRED wire tokens and Python values."""

import math
import re
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from zoneinfo import ZoneInfo

from fred_graph.exceptions import ParseError
from fred_graph.models.enums import Frequency


# St. Louis Fed publishes on US Central time; "today" defaults follow it
FRED_TIMEZONE = ZoneInfo("America/Chicago")

# Widest period the API accepts
EARLIEST_DATE = date(1776, 7, 4)
LATEST_DATE = date(9999, 12, 31)

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DATETIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})([+-])(\d{2})$"
)
# Plain decimal or exponent notation; rejects nan, inf and digit separators
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_FREQUENCIES: dict[str, Frequency] = {
    f.value: f for f in Frequency if f is not Frequency.NONE
}


def fred_today() -> date:
    """Current calendar date in America/Chicago."""
    return datetime.now(FRED_TIMEZONE).date()


def to_fred_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_fred_date(token: str) -> date:
    """Parse a strict YYYY-MM-DD token."""
    match = _DATE_RE.match(token.strip()) if token is not None else None
    if not match:
        raise ParseError(f"Invalid FRED date: {token!r}")
    try:
        return date(*(int(part) for part in match.groups()))
    except ValueError as e:
        raise ParseError(f"Invalid FRED date: {token!r}") from e


def parse_fred_datetime(token: str) -> datetime:
    """
    Parse a 'YYYY-MM-DD HH:mm:ss±HH' token, e.g. '2012-04-13 08:53:00-05'.

    The trailing offset is whole hours; the result is timezone-aware with that
    fixed offset and no conversion to local time.
    """
    match = _DATETIME_RE.match(token.strip()) if token is not None else None
    if not match:
        raise ParseError(f"Invalid FRED date-time: {token!r}")
    year, month, day, hour, minute, second, sign, offset = match.groups()
    hours = int(offset) if sign == "+" else -int(offset)
    try:
        return datetime(
            int(year),
            int(month),
            int(day),
            int(hour),
            int(minute),
            int(second),
            tzinfo=timezone(timedelta(hours=hours)),
        )
    except ValueError as e:
        raise ParseError(f"Invalid FRED date-time: {token!r}") from e


def parse_int(token: str, name: str = "value") -> int:
    try:
        return int(token.strip())
    except (AttributeError, ValueError) as e:
        raise ParseError(f"Invalid integer for {name}: {token!r}") from e


def parse_bool(token: str, name: str = "value") -> bool:
    normalized = (token or "").strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ParseError(f"Invalid boolean for {name}: {token!r}")


def parse_value(token: str | None) -> float | None:
    """Observation value; missing markers such as '.' become None."""
    if token is None:
        return None
    token = token.strip()
    if not _NUMBER_RE.match(token):
        return None
    value = float(token)
    return value if math.isfinite(value) else None


def parse_frequency(token: str | None) -> Frequency:
    """Decode a short frequency code; unknown codes map to Frequency.NONE."""
    if not token:
        return Frequency.NONE
    return _FREQUENCIES.get(token.strip().lower(), Frequency.NONE)


def to_wire(value: object) -> str:
    """Render a request parameter value in its literal wire form."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return to_fred_date(value.date())
    if isinstance(value, date):
        return to_fred_date(value)
    return str(value)
