from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Intent(str, Enum):
    GREETING = "greeting"
    BOOKING = "booking_intent"
    CANCELLATION = "cancellation_intent"
    NONE = "none"


@dataclass(frozen=True)
class IntentClassification:
    intent: Intent
    normalized_text: str
