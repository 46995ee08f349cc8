from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterable

from app.domain.entities.catalog import Service

PT_BR_MONTHS = {
    1: "janeiro",
    2: "fevereiro",
    3: "março",
    4: "abril",
    5: "maio",
    6: "junho",
    7: "julho",
    8: "agosto",
    9: "setembro",
    10: "outubro",
    11: "novembro",
    12: "dezembro",
}


def format_day_month(value: date) -> str:
    return f"{value.day:02d} de {PT_BR_MONTHS[value.month]}"


def format_full_date(value: date) -> str:
    return f"{format_day_month(value)} de {value.year}"


def format_price(amount: float) -> str:
    return f"R$ {amount:.2f}"


def compute_end_time(start_time: str, duration_minutes: int) -> str:
    """Add minutes to an HH:MM start, rolling over hours (and midnight)."""
    hours, minutes = (int(part) for part in start_time.split(":"))
    start = datetime.combine(date.today(), time(hour=hours, minute=minutes))
    end = start + timedelta(minutes=duration_minutes)
    return end.strftime("%H:%M")


def totals_for(services: Iterable[Service]) -> tuple[float, int]:
    """Return (total_price, total_duration_minutes) for the selected services."""
    selected = list(services)
    total_price = sum(s.price for s in selected)
    total_duration = sum(s.duration_minutes for s in selected)
    return total_price, total_duration
