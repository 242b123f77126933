from __future__ import annotations

import re
from datetime import datetime, timezone


# Same grammar as the JS `ms` package used for JWT expiry strings:
# "2h", "1.5h", "10 minutes", "2 hours", "1y", "500ms".
_DURATION_RE = re.compile(
    r"^\s*(\d*\.?\d+)\s*"
    r"(milliseconds?|msecs?|ms|seconds?|secs?|s|minutes?|mins?|m|hours?|hrs?|h|days?|d|weeks?|w|years?|yrs?|y)?\s*$",
    re.IGNORECASE,
)

_SECOND = 1.0
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_YEAR = 365.25 * _DAY


def _unit_seconds(unit: str) -> float:
    u = unit.lower()
    if u in ("ms", "msec", "msecs", "millisecond", "milliseconds"):
        return _SECOND / 1000
    if u in ("", "s", "sec", "secs", "second", "seconds"):
        return _SECOND
    if u in ("m", "min", "mins", "minute", "minutes"):
        return _MINUTE
    if u in ("h", "hr", "hrs", "hour", "hours"):
        return _HOUR
    if u in ("d", "day", "days"):
        return _DAY
    if u in ("w", "week", "weeks"):
        return _WEEK
    return _YEAR


def utcnow_iso() -> str:
    """Current UTC time as ISO-8601 string with Z."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def parse_duration_seconds(value: str) -> int:
    """Parse a duration string into whole seconds (rounded).

    Bare numbers are seconds. Raises ValueError for anything unrecognised.
    """
    m = _DURATION_RE.match(value or "")
    if m is None:
        raise ValueError(f"invalid_duration: {value!r}")
    amount, unit = m.groups()
    # Half-up; amounts are never negative.
    return int(float(amount) * _unit_seconds(unit or "") + 0.5)
