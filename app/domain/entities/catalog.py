from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    price: float
    duration_minutes: int
    is_active: bool = True
    description: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class Barber:
    id: str
    name: str
    is_active: bool = True
    specialties: tuple[str, ...] = ()
