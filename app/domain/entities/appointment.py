from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AppointmentRequest:
    barbershop_id: str
    barber_id: str
    client_id: str
    service_ids: tuple[str, ...]
    date: date
    start_time: str
    end_time: str
    duration_minutes: int
    total_price: float
    status: str = "scheduled"
    payment_status: str = "pending"


@dataclass(frozen=True)
class AppointmentResult:
    success: bool
    appointment_id: str | None = None
    error: str | None = None
