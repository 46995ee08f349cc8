from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.appointment import AppointmentRequest, AppointmentResult


class AppointmentRepositoryPort(ABC):
    @abstractmethod
    def create_appointment(self, request: AppointmentRequest) -> AppointmentResult:
        """Persist a new appointment. Raises AppointmentPersistenceError on storage failure."""
        raise NotImplementedError
