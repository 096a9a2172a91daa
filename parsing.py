from __future__ import annotations
import logging
import re
import pandas as pd
from typing import Literal, Optional

LOGGER = logging.getLogger(__name__)

# Sheet exports look like "8/1/2025 10:20:00 AM"
_SHEET_DATETIME = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2}):(\d{2})\s+(AM|PM)$", flags=re.I
)

Fallback = Literal["now", "nat"]


def _to_24h(hour: int, meridiem: str) -> int:
    meridiem = meridiem.upper()
    if meridiem == "PM" and hour != 12:
        return hour + 12
    if meridiem == "AM" and hour == 12:
        return 0
    return hour


def _parse_sheet_datetime(text: str) -> Optional[pd.Timestamp]:
    m = _SHEET_DATETIME.match(text)
    if not m:
        return None
    month, day, year, hour, minute, second, meridiem = m.groups()
    try:
        return pd.Timestamp(
            year=int(year), month=int(month), day=int(day),
            hour=_to_24h(int(hour), meridiem), minute=int(minute), second=int(second),
        )
    except ValueError:
        return None


def _parse_generic(text: str) -> Optional[pd.Timestamp]:
    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def parse_timestamp(text: Optional[str], fallback: Fallback = "now") -> pd.Timestamp:
    """
    Turn a sheet timestamp into a tz-naive Timestamp.
    - Prefer the M/D/YYYY h:mm:ss AM|PM export format
    - Fall back to pandas' generic parser
    - Empty or unparsable text gives the current time (fallback="now")
      or NaT (fallback="nat"); it never raises
    """
    if fallback not in ("now", "nat"):
        raise ValueError(f"Unknown fallback {fallback!r}; expected 'now' or 'nat'")

    s = "" if text is None else str(text).strip()
    if s:
        ts = _parse_sheet_datetime(s)
        if ts is None:
            ts = _parse_generic(s)
        if ts is not None:
            return ts
        LOGGER.debug("Could not parse timestamp %r", s)

    return pd.Timestamp.now() if fallback == "now" else pd.NaT
