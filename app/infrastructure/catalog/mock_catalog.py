from __future__ import annotations

from app.application.ports.service_catalog import BarberDirectoryPort, ServiceCatalogPort
from app.domain.entities.catalog import Barber, Service
from app.infrastructure.catalog.demo_data import DEMO_BARBERS, DEMO_SERVICES


class InMemoryCatalog(ServiceCatalogPort, BarberDirectoryPort):
    def __init__(
        self,
        services: dict[str, list[Service]] | None = None,
        barbers: dict[str, list[Barber]] | None = None,
    ) -> None:
        self._services = DEMO_SERVICES if services is None else services
        self._barbers = DEMO_BARBERS if barbers is None else barbers

    def list_active_services(self, barbershop_id: str) -> list[Service]:
        services = self._services.get(barbershop_id, [])
        return sorted((s for s in services if s.is_active), key=lambda s: s.name)

    def list_active_barbers(self, barbershop_id: str) -> list[Barber]:
        barbers = self._barbers.get(barbershop_id, [])
        return sorted((b for b in barbers if b.is_active), key=lambda b: b.name)
