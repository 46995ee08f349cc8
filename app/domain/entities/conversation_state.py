from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class ConversationStatus(str, Enum):
    IDLE = "idle"
    AWAITING_SERVICE = "awaiting_service"
    AWAITING_DATE = "awaiting_date"
    AWAITING_TIME = "awaiting_time"
    AWAITING_BARBER = "awaiting_barber"
    CONFIRMING = "confirming"


@dataclass(frozen=True)
class AppointmentDraft:
    service_ids: tuple[str, ...] = ()
    date: date | None = None
    time: str | None = None  # HH:MM, 24h
    barber_id: str | None = None


@dataclass(frozen=True)
class ConversationContext:
    chat_id: str
    barbershop_id: str
    client_id: str
    client_name: str
    status: ConversationStatus = ConversationStatus.IDLE
    draft: AppointmentDraft = field(default_factory=AppointmentDraft)
