from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from app.application.use_cases.booking import BookingStateMachine
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.confirm_booking import ConfirmBookingUseCase
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.infrastructure.messaging.mock_platform import MockMessagePlatform
from app.infrastructure.store.memory_store import MemoryConversationStore
from fakes import BARBA, CARLOS, MARCOS, NAVALHADO, PIGMENTACAO, TODAY, FakeAppointments, FakeCatalog


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog(services=[BARBA, NAVALHADO, PIGMENTACAO], barbers=[CARLOS, MARCOS])


@pytest.fixture
def appointments() -> FakeAppointments:
    return FakeAppointments()


@pytest.fixture
def platform() -> MockMessagePlatform:
    return MockMessagePlatform()


@pytest.fixture
def store() -> MemoryConversationStore:
    return MemoryConversationStore()


@pytest.fixture
def confirm_booking(catalog: FakeCatalog, appointments: FakeAppointments) -> ConfirmBookingUseCase:
    return ConfirmBookingUseCase(catalog=catalog, appointments=appointments)


@pytest.fixture
def machine(catalog: FakeCatalog, confirm_booking: ConfirmBookingUseCase) -> BookingStateMachine:
    return BookingStateMachine(
        catalog=catalog,
        barbers=catalog,
        confirm_booking=confirm_booking,
        timezone=ZoneInfo("America/Sao_Paulo"),
        today=lambda: TODAY,
    )


@pytest.fixture
def use_case(
    store: MemoryConversationStore,
    machine: BookingStateMachine,
    platform: MockMessagePlatform,
) -> HandleIncomingMessageUseCase:
    return HandleIncomingMessageUseCase(
        store=store,
        classify_intent=ClassifyIntentUseCase(),
        booking=machine,
        send_reply=SendReplyUseCase(platform=platform, sender_id="ai", sender_name="Assistente"),
    )
