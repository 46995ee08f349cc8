from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.exceptions import CatalogError, CollaboratorError
from app.application.ports.appointments import AppointmentRepositoryPort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.utils import replies
from app.application.utils.formatting import compute_end_time, totals_for
from app.domain.entities.appointment import AppointmentRequest
from app.domain.entities.conversation_state import ConversationContext
from app.domain.entities.message import AppointmentMetadata, Reply


@dataclass(frozen=True)
class CommitResult:
    success: bool
    reply: Reply
    appointment_id: str | None = None


class ConfirmBookingUseCase:
    """Turn a confirmed draft into a persisted appointment.

    Prices and durations are recomputed from the live catalog, so edits made
    while the client was chatting are honoured. Failures are never retried.
    """

    def __init__(self, catalog: ServiceCatalogPort, appointments: AppointmentRepositoryPort) -> None:
        self._catalog = catalog
        self._appointments = appointments
        self._logger = logging.getLogger(__name__)

    def execute(self, context: ConversationContext) -> CommitResult:
        draft = context.draft
        try:
            services = self._catalog.list_active_services(context.barbershop_id)
            selected = [s for s in services if s.id in draft.service_ids]
            if len(selected) != len(draft.service_ids):
                raise CatalogError("Selected services are no longer offered")
            total_price, total_duration = totals_for(selected)

            request = AppointmentRequest(
                barbershop_id=context.barbershop_id,
                barber_id=draft.barber_id,
                client_id=context.client_id,
                service_ids=draft.service_ids,
                date=draft.date,
                start_time=draft.time,
                end_time=compute_end_time(draft.time, total_duration),
                duration_minutes=total_duration,
                total_price=total_price,
            )
            result = self._appointments.create_appointment(request)
        except CollaboratorError as e:
            self._logger.error("Error creating appointment", extra={"chat_id": context.chat_id, "error": str(e)})
            return CommitResult(success=False, reply=Reply(content=replies.BOOKING_FAILED))

        if not result.success:
            self._logger.error(
                "Appointment rejected",
                extra={"chat_id": context.chat_id, "error": result.error},
            )
            return CommitResult(success=False, reply=Reply(content=replies.BOOKING_FAILED))

        self._logger.info(
            "Appointment created",
            extra={"chat_id": context.chat_id, "appointment_id": result.appointment_id},
        )
        return CommitResult(
            success=True,
            appointment_id=result.appointment_id,
            reply=Reply(
                content=replies.BOOKING_CONFIRMED,
                type="appointment_confirmed",
                appointment_data=AppointmentMetadata(
                    date=draft.date,
                    time=draft.time,
                    service_ids=draft.service_ids,
                    barber_id=draft.barber_id,
                ),
            ),
        )
