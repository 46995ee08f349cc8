from __future__ import annotations

import logging

from app.application.ports.appointments import AppointmentRepositoryPort
from app.domain.entities.appointment import AppointmentRequest, AppointmentResult


class InMemoryAppointmentRepository(AppointmentRepositoryPort):
    def __init__(self) -> None:
        self.appointments: dict[str, AppointmentRequest] = {}
        self._logger = logging.getLogger(__name__)

    def create_appointment(self, request: AppointmentRequest) -> AppointmentResult:
        appointment_id = f"mock_appointment_{len(self.appointments) + 1}"
        self.appointments[appointment_id] = request
        self._logger.info(
            "Mock appointment created",
            extra={
                "appointment_id": appointment_id,
                "barbershop_id": request.barbershop_id,
                "date": request.date.isoformat(),
                "start_time": request.start_time,
                "end_time": request.end_time,
            },
        )
        return AppointmentResult(success=True, appointment_id=appointment_id)
