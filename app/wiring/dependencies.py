from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from google.cloud import firestore

from app.core.config import settings
from app.application.ports.appointments import AppointmentRepositoryPort
from app.application.ports.message_platform import MessagePlatformPort
from app.application.use_cases.booking import BookingStateMachine
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.confirm_booking import ConfirmBookingUseCase
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.infrastructure.appointments.firestore_appointments import FirestoreAppointmentRepository
from app.infrastructure.appointments.mock_appointments import InMemoryAppointmentRepository
from app.infrastructure.catalog.firestore_catalog import FirestoreCatalog
from app.infrastructure.catalog.mock_catalog import InMemoryCatalog
from app.infrastructure.firestore.firestore_client import create_firestore_client
from app.infrastructure.messaging.firestore_platform import FirestoreMessagePlatform
from app.infrastructure.messaging.mock_platform import MockMessagePlatform
from app.infrastructure.store.memory_store import MemoryConversationStore


_conversation_store: MemoryConversationStore | None = None


def _use_firestore() -> bool:
    return settings.DATA_PROVIDER.lower() == "firestore"


def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.BUSINESS_TIMEZONE)


def get_conversation_store() -> MemoryConversationStore:
    global _conversation_store
    if _conversation_store is None:
        _conversation_store = MemoryConversationStore(
            idle_timeout_seconds=settings.CONVERSATION_IDLE_TIMEOUT_MINUTES * 60,
        )
    return _conversation_store


@lru_cache
def get_firestore_client() -> firestore.Client:
    return create_firestore_client(
        project_id=settings.FIRESTORE_PROJECT_ID,
        database=settings.FIRESTORE_DATABASE,
    )


@lru_cache
def get_catalog() -> InMemoryCatalog | FirestoreCatalog:
    if _use_firestore():
        return FirestoreCatalog(db=get_firestore_client())
    return InMemoryCatalog()


@lru_cache
def get_appointment_repository() -> AppointmentRepositoryPort:
    if _use_firestore():
        return FirestoreAppointmentRepository(db=get_firestore_client(), timezone=get_timezone())
    return InMemoryAppointmentRepository()


@lru_cache
def get_message_platform() -> MessagePlatformPort:
    logger = logging.getLogger(__name__)
    logger.info("DATA_PROVIDER=%s ENV=%s", settings.DATA_PROVIDER, settings.ENV)

    if not _use_firestore():
        if settings.ENV.lower() not in {"dev", "local", "test"}:
            raise ValueError("DATA_PROVIDER=firestore is required outside dev/local.")
        logger.info("Using MockMessagePlatform (DATA_PROVIDER=memory)")
        return MockMessagePlatform()

    logger.info("Using FirestoreMessagePlatform")
    return FirestoreMessagePlatform(db=get_firestore_client(), timezone=get_timezone())


def get_booking_state_machine() -> BookingStateMachine:
    catalog = get_catalog()
    return BookingStateMachine(
        catalog=catalog,
        barbers=catalog,
        confirm_booking=ConfirmBookingUseCase(catalog=catalog, appointments=get_appointment_repository()),
        timezone=get_timezone(),
    )


def get_handle_incoming_message_use_case() -> HandleIncomingMessageUseCase:
    return HandleIncomingMessageUseCase(
        store=get_conversation_store(),
        classify_intent=ClassifyIntentUseCase(),
        booking=get_booking_state_machine(),
        send_reply=SendReplyUseCase(
            platform=get_message_platform(),
            sender_id=settings.ASSISTANT_SENDER_ID,
            sender_name=settings.ASSISTANT_NAME,
        ),
    )


def get_container() -> dict[str, object]:
    return {
        "use_case": get_handle_incoming_message_use_case(),
        "store": get_conversation_store(),
        "platform": get_message_platform(),
    }
