from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class InboundMessage:
    chat_id: str
    barbershop_id: str
    client_id: str
    client_name: str
    text: str


@dataclass(frozen=True)
class AppointmentMetadata:
    date: date
    time: str
    service_ids: tuple[str, ...]
    barber_id: str | None = None


@dataclass(frozen=True)
class Reply:
    content: str
    type: str = "text"  # "text", "appointment_confirmed"
    appointment_data: AppointmentMetadata | None = None


@dataclass(frozen=True)
class OutboundMessage:
    chat_id: str
    sender_id: str
    sender_role: str
    sender_name: str
    content: str
    type: str = "text"
    appointment_data: AppointmentMetadata | None = None
