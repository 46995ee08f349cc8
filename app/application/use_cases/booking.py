from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from app.application.exceptions import CatalogError
from app.application.ports.service_catalog import BarberDirectoryPort, ServiceCatalogPort
from app.application.use_cases.confirm_booking import ConfirmBookingUseCase
from app.application.utils import replies
from app.application.utils.date_parser import is_past_date, parse_booking_date, parse_booking_time
from app.application.utils.formatting import compute_end_time, totals_for
from app.application.utils.message_rules import is_affirmative, is_negative
from app.application.utils.state_helpers import advance, pick_entry, restart_booking
from app.domain.entities.conversation_state import ConversationContext, ConversationStatus
from app.domain.entities.message import Reply


@dataclass(frozen=True)
class BookingResult:
    action: str
    context: ConversationContext | None  # None discards the conversation
    replies: tuple[Reply, ...]


class BookingStateMachine:
    """Service -> date -> time -> barber -> confirmation, one message at a time.

    Every step takes the current context and the raw message and returns the
    next context plus the replies to send; nothing here talks to the chat.
    Catalog lookup failures leave the context untouched.
    """

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        barbers: BarberDirectoryPort,
        confirm_booking: ConfirmBookingUseCase,
        timezone: ZoneInfo,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._catalog = catalog
        self._barbers = barbers
        self._confirm_booking = confirm_booking
        self._timezone = timezone
        self._today = today or (lambda: datetime.now(self._timezone).date())
        self._logger = logging.getLogger(__name__)

    def start(self, context: ConversationContext) -> BookingResult:
        try:
            services = self._catalog.list_active_services(context.barbershop_id)
        except CatalogError as e:
            return self._lookup_failed(context, e, replies.GENERIC_ERROR_LATER)

        if not services:
            return _result("no_services", context, replies.NO_SERVICES)

        return _result("ask_service", restart_booking(context), replies.build_service_menu(services))

    def step(self, context: ConversationContext, message_text: str) -> BookingResult:
        """Feed a message that carries no recognised intent to the current step."""
        handlers = {
            ConversationStatus.AWAITING_SERVICE: self.select_service,
            ConversationStatus.AWAITING_DATE: self.select_date,
            ConversationStatus.AWAITING_TIME: self.select_time,
            ConversationStatus.AWAITING_BARBER: self.select_barber,
            ConversationStatus.CONFIRMING: self.confirm,
        }
        handler = handlers.get(context.status)
        if handler is None:
            return _result("unknown", context, replies.UNKNOWN)
        return handler(context, message_text)

    def select_service(self, context: ConversationContext, message_text: str) -> BookingResult:
        try:
            services = self._catalog.list_active_services(context.barbershop_id)
        except CatalogError as e:
            return self._lookup_failed(context, e)

        service = pick_entry(services, message_text, lambda s: s.name)
        if service is None:
            return _result("ask_service", context, replies.SERVICE_NOT_FOUND)

        updated = advance(context, ConversationStatus.AWAITING_DATE, service_ids=(service.id,))
        return _result("ask_date", updated, replies.ASK_DATE)

    def select_date(self, context: ConversationContext, message_text: str) -> BookingResult:
        today = self._today()
        parsed_date = parse_booking_date(message_text, today)
        if parsed_date is None:
            return _result("ask_date", context, replies.INVALID_DATE)

        if is_past_date(parsed_date, today):
            return _result("ask_date", context, replies.PAST_DATE)

        updated = advance(context, ConversationStatus.AWAITING_TIME, date=parsed_date)
        return _result("ask_time", updated, replies.build_date_chosen(parsed_date))

    def select_time(self, context: ConversationContext, message_text: str) -> BookingResult:
        time_str = parse_booking_time(message_text)
        if time_str is None:
            return _result("ask_time", context, replies.INVALID_TIME)

        try:
            barbers = self._barbers.list_active_barbers(context.barbershop_id)
        except CatalogError as e:
            return self._lookup_failed(context, e)

        if not barbers:
            self._logger.info("No active barbers, discarding booking", extra={"chat_id": context.chat_id})
            return _result("no_barbers", None, replies.NO_BARBERS)

        if len(barbers) == 1:
            updated = advance(
                context, ConversationStatus.CONFIRMING, time=time_str, barber_id=barbers[0].id
            )
            return self._show_confirmation(context, updated)

        updated = advance(context, ConversationStatus.AWAITING_BARBER, time=time_str)
        return _result("ask_barber", updated, replies.build_barber_menu(time_str, barbers))

    def select_barber(self, context: ConversationContext, message_text: str) -> BookingResult:
        try:
            barbers = self._barbers.list_active_barbers(context.barbershop_id)
        except CatalogError as e:
            return self._lookup_failed(context, e)

        barber = pick_entry(barbers, message_text, lambda b: b.name)
        if barber is None:
            return _result("ask_barber", context, replies.BARBER_NOT_FOUND)

        updated = advance(context, ConversationStatus.CONFIRMING, barber_id=barber.id)
        return self._show_confirmation(context, updated)

    def confirm(self, context: ConversationContext, message_text: str) -> BookingResult:
        if is_affirmative(message_text):
            commit = self._confirm_booking.execute(context)
            return BookingResult(
                action="booked" if commit.success else "booking_failed",
                context=None,
                replies=(commit.reply,),
            )

        if is_negative(message_text):
            return _result("cancelled", None, replies.BOOKING_CANCELLED)

        return _result("confirm", context, replies.CONFIRM_PROMPT)

    def render_summary(self, context: ConversationContext) -> str:
        """Build the confirmation summary from fresh service and barber lookups.

        Raises CatalogError when a chosen service has been deactivated meanwhile.
        """
        draft = context.draft
        services = self._catalog.list_active_services(context.barbershop_id)
        barbers = self._barbers.list_active_barbers(context.barbershop_id)

        selected = [s for s in services if s.id in draft.service_ids]
        if len(selected) != len(draft.service_ids):
            raise CatalogError("Selected services are no longer offered")
        barber = next((b for b in barbers if b.id == draft.barber_id), None)
        total_price, total_duration = totals_for(selected)

        return replies.build_summary(
            services=selected,
            barber=barber,
            booking_date=draft.date,
            start_time=draft.time,
            end_time=compute_end_time(draft.time, total_duration),
            total_price=total_price,
        )

    def _show_confirmation(self, previous: ConversationContext, updated: ConversationContext) -> BookingResult:
        try:
            summary = self.render_summary(updated)
        except CatalogError as e:
            return self._lookup_failed(previous, e)
        return _result("confirm", updated, summary)

    def _lookup_failed(
        self, context: ConversationContext, error: Exception, text: str = replies.GENERIC_ERROR
    ) -> BookingResult:
        self._logger.error(
            "Catalog lookup failed",
            extra={"chat_id": context.chat_id, "status": context.status.value, "error": str(error)},
        )
        return _result("error", context, text)


def _result(action: str, context: ConversationContext | None, text: str) -> BookingResult:
    return BookingResult(action=action, context=context, replies=(Reply(content=text),))
