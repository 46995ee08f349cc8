from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.catalog import Barber, Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_active_services(self, barbershop_id: str) -> list[Service]:
        """List the shop's active services in display order."""
        raise NotImplementedError


class BarberDirectoryPort(ABC):
    @abstractmethod
    def list_active_barbers(self, barbershop_id: str) -> list[Barber]:
        """List the shop's active barbers in display order."""
        raise NotImplementedError
