from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from dateutil import parser as dtparse

TODAY_KEYWORDS = ("hoje", "today")
TOMORROW_KEYWORDS = ("amanhã", "amanha", "tomorrow")

# dd/mm/yyyy first, then the relaxed d/m/yyyy
DATE_PATTERNS = (
    re.compile(r"^(\d{2})/(\d{2})/(\d{4})$"),
    re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$"),
)


def parse_booking_date(text: str, reference_date: date) -> date | None:
    """Parse the date a client typed. Returns None when nothing usable is found.

    Past dates are returned as-is; rejecting them is up to the caller.
    """
    normalized = text.lower().strip()

    if any(keyword in normalized for keyword in TODAY_KEYWORDS):
        return reference_date

    if any(keyword in normalized for keyword in TOMORROW_KEYWORDS):
        return reference_date + timedelta(days=1)

    for pattern in DATE_PATTERNS:
        match = pattern.match(normalized)
        if match:
            day, month, year = (int(part) for part in match.groups())
            try:
                return date(year, month, day)
            except ValueError:
                continue

    try:
        return datetime.fromisoformat(normalized).date()
    except ValueError:
        pass

    return _parse_free_form(normalized)


def is_past_date(value: date, reference_date: date) -> bool:
    return value < reference_date


def parse_booking_time(text: str) -> str | None:
    """Normalize "14h30", "1430" or "14:30" into "14:30". Returns None if invalid."""
    time_str = re.sub(r"[hH]", ":", text)
    time_str = re.sub(r"\s", "", time_str)

    if len(time_str) == 4 and ":" not in time_str:
        time_str = f"{time_str[:2]}:{time_str[2:]}"

    parts = time_str.split(":")
    if len(parts) != 2:
        return None

    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None

    return f"{hours:02d}:{minutes:02d}"


# Distinct in every field, so a component missing from the text shows up as a mismatch.
_SENTINEL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_free_form(text: str) -> date | None:
    """Last resort for written dates such as "25 Dec 2024" or "December 25, 2024".

    Day, month and year must all come from the text; partial dates are refused.
    """
    # year-first input ("2024/06/10") is read as y/m/d, everything else as d/m/y
    dayfirst = not re.match(r"\d{4}", text)
    try:
        first, second = (dtparse.parse(text, dayfirst=dayfirst, default=d) for d in _SENTINEL_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()
