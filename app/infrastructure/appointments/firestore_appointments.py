from __future__ import annotations

import logging
from datetime import datetime, time
from zoneinfo import ZoneInfo

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore

from app.application.exceptions import AppointmentPersistenceError
from app.application.ports.appointments import AppointmentRepositoryPort
from app.domain.entities.appointment import AppointmentRequest, AppointmentResult


class FirestoreAppointmentRepository(AppointmentRepositoryPort):
    """Writes to barbershops/{id}/appointments.

    The appointment day is stored as a timestamp at midnight in the shop's time zone.
    """

    def __init__(self, db: firestore.Client, timezone: ZoneInfo) -> None:
        self._db = db
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def create_appointment(self, request: AppointmentRequest) -> AppointmentResult:
        data = {
            "barbershopId": request.barbershop_id,
            "barberId": request.barber_id,
            "clientId": request.client_id,
            "serviceIds": list(request.service_ids),
            "date": datetime.combine(request.date, time.min, tzinfo=self._timezone),
            "startTime": request.start_time,
            "endTime": request.end_time,
            "duration": request.duration_minutes,
            "totalPrice": float(request.total_price),
            "status": request.status,
            "paymentStatus": request.payment_status,
            "createdAt": firestore.SERVER_TIMESTAMP,
            "updatedAt": firestore.SERVER_TIMESTAMP,
        }
        appointments = self._db.collection("barbershops").document(request.barbershop_id).collection("appointments")
        try:
            _, doc_ref = appointments.add(data)
        except GoogleAPIError as e:
            self._logger.error(
                "Error creating appointment",
                extra={"barbershop_id": request.barbershop_id, "error": str(e)},
            )
            raise AppointmentPersistenceError("Could not store appointment") from e

        self._logger.info(
            "Appointment stored",
            extra={"barbershop_id": request.barbershop_id, "appointment_id": doc_ref.id},
        )
        return AppointmentResult(success=True, appointment_id=doc_ref.id)
