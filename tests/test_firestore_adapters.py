"""
Tests for the Firestore adapters against an in-memory stand-in for the client.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest
from google.api_core.exceptions import PermissionDenied, ServiceUnavailable
from google.cloud import firestore

from app.application.exceptions import AppointmentPersistenceError, CatalogError, MessageDeliveryError
from app.domain.entities.appointment import AppointmentRequest
from app.domain.entities.message import AppointmentMetadata, OutboundMessage
from app.infrastructure.appointments.firestore_appointments import FirestoreAppointmentRepository
from app.infrastructure.catalog.firestore_catalog import FirestoreCatalog
from app.infrastructure.firestore.firestore_client import create_firestore_client
from app.infrastructure.messaging.firestore_platform import FirestoreMessagePlatform

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


class _Snapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    def to_dict(self):
        return dict(self._data)


class _Query:
    def __init__(self, db, path, filters=(), order=None):
        self._db = db
        self._path = path
        self._filters = filters
        self._order = order

    def where(self, filter):
        self._db.queries.append((self._path, filter.field_path, filter.op_string, filter.value))
        return _Query(self._db, self._path, self._filters + (filter,), self._order)

    def order_by(self, field_path):
        return _Query(self._db, self._path, self._filters, field_path)

    def stream(self):
        if self._db.error is not None:
            raise self._db.error
        docs = self._db.docs.get(self._path, {})
        rows = [
            (doc_id, data)
            for doc_id, data in docs.items()
            if all(data.get(f.field_path) == f.value for f in self._filters)
        ]
        if self._order:
            rows.sort(key=lambda row: row[1].get(self._order))
        return iter([_Snapshot(doc_id, data) for doc_id, data in rows])


class _Collection(_Query):
    def document(self, doc_id):
        return _Document(self._db, f"{self._path}/{doc_id}")

    def add(self, data):
        if self._db.error is not None:
            raise self._db.error
        docs = self._db.docs.setdefault(self._path, {})
        doc_id = f"doc_{len(docs) + 1}"
        docs[doc_id] = data
        return datetime(2024, 6, 10), _Document(self._db, f"{self._path}/{doc_id}")


class _Document:
    def __init__(self, db, path):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def collection(self, name):
        return _Collection(self._db, f"{self.path}/{name}")

    def update(self, data):
        if self._db.error is not None:
            raise self._db.error
        self._db.updates.append((self.path, data))


class FakeFirestore:
    """Just enough of firestore.Client for the adapters."""

    def __init__(self):
        self.docs: dict[str, dict[str, dict]] = {}
        self.queries: list[tuple] = []
        self.updates: list[tuple] = []
        self.error: Exception | None = None

    def collection(self, name):
        return _Collection(self, name)


def _request(**overrides) -> AppointmentRequest:
    values = dict(
        barbershop_id="shop_1",
        barber_id="b1",
        client_id="c1",
        service_ids=("s1", "s2"),
        date=date(2024, 6, 10),
        start_time="14:45",
        end_time="16:00",
        duration_minutes=75,
        total_price=100,
    )
    values.update(overrides)
    return AppointmentRequest(**values)


def _message(**overrides) -> OutboundMessage:
    values = dict(
        chat_id="chat_1",
        sender_id="ai",
        sender_role="ai",
        sender_name="Assistente",
        content="Oi",
    )
    values.update(overrides)
    return OutboundMessage(**values)


def test_list_active_services_maps_documents():
    db = FakeFirestore()
    db.docs["barbershops/shop_1/services"] = {
        "s2": {"name": "Navalhado", "price": 62.5, "duration": 45, "isActive": True, "category": "cabelo"},
        "s1": {"name": "Barba", "price": 40, "duration": 30, "isActive": True},
        "s3": {"name": "Pigmentação", "price": 50, "duration": 40, "isActive": False},
    }

    services = FirestoreCatalog(db).list_active_services("shop_1")

    assert [s.id for s in services] == ["s1", "s2"]
    assert services[0].price == 40.0
    assert isinstance(services[0].price, float)
    assert services[1].duration_minutes == 45
    assert services[1].category == "cabelo"
    assert db.queries == [("barbershops/shop_1/services", "isActive", "==", True)]


def test_list_active_barbers_maps_documents():
    db = FakeFirestore()
    db.docs["barbershops/shop_1/barbers"] = {
        "b1": {"name": "Carlos", "isActive": True, "specialties": ["degradê"]},
    }

    barbers = FirestoreCatalog(db).list_active_barbers("shop_1")

    assert barbers[0].id == "b1"
    assert barbers[0].name == "Carlos"
    assert barbers[0].specialties == ("degradê",)


def test_catalog_api_error_becomes_catalog_error():
    db = FakeFirestore()
    db.error = ServiceUnavailable("try later")

    with pytest.raises(CatalogError):
        FirestoreCatalog(db).list_active_services("shop_1")


def test_create_appointment_writes_document():
    db = FakeFirestore()

    result = FirestoreAppointmentRepository(db, timezone=SAO_PAULO).create_appointment(_request())

    assert result.success
    assert result.appointment_id == "doc_1"
    stored = db.docs["barbershops/shop_1/appointments"]["doc_1"]
    assert stored["serviceIds"] == ["s1", "s2"]
    assert stored["date"] == datetime(2024, 6, 10, tzinfo=SAO_PAULO)
    assert stored["date"].utcoffset().total_seconds() == -3 * 3600
    assert stored["duration"] == 75
    assert stored["totalPrice"] == 100.0
    assert isinstance(stored["totalPrice"], float)
    assert stored["status"] == "scheduled"
    assert stored["paymentStatus"] == "pending"
    assert stored["createdAt"] is firestore.SERVER_TIMESTAMP
    assert stored["updatedAt"] is firestore.SERVER_TIMESTAMP


def test_create_appointment_api_error_raises():
    db = FakeFirestore()
    db.error = PermissionDenied("no")

    with pytest.raises(AppointmentPersistenceError):
        FirestoreAppointmentRepository(db, timezone=SAO_PAULO).create_appointment(_request())


def test_send_message_adds_message_and_updates_chat():
    db = FakeFirestore()
    message = _message(
        content="✅ Agendamento confirmado com sucesso!",
        type="appointment_confirmed",
        appointment_data=AppointmentMetadata(date=date(2024, 6, 10), time="14:30", service_ids=("s1",), barber_id="b1"),
    )

    message_id = FirestoreMessagePlatform(db, timezone=SAO_PAULO).send_message(message)

    assert message_id == "doc_1"
    stored = db.docs["chats/chat_1/messages"]["doc_1"]
    assert stored["senderRole"] == "ai"
    assert stored["senderName"] == "Assistente"
    assert stored["type"] == "appointment_confirmed"
    assert stored["read"] is False
    assert stored["createdAt"] is firestore.SERVER_TIMESTAMP
    assert stored["appointmentData"] == {
        "date": datetime(2024, 6, 10, tzinfo=SAO_PAULO),
        "time": "14:30",
        "serviceIds": ["s1"],
        "barberId": "b1",
    }

    path, update = db.updates[0]
    assert path == "chats/chat_1"
    assert update["lastMessage"] == message.content
    assert update["lastMessageAt"] is firestore.SERVER_TIMESTAMP
    assert update["updatedAt"] is firestore.SERVER_TIMESTAMP


def test_plain_message_has_no_appointment_data():
    db = FakeFirestore()

    FirestoreMessagePlatform(db, timezone=SAO_PAULO).send_message(_message())

    assert "appointmentData" not in db.docs["chats/chat_1/messages"]["doc_1"]


def test_send_message_api_error_raises_delivery_error():
    db = FakeFirestore()
    db.error = ServiceUnavailable("down")

    with pytest.raises(MessageDeliveryError):
        FirestoreMessagePlatform(db, timezone=SAO_PAULO).send_message(_message())


def test_client_requires_project_id():
    with pytest.raises(ValueError):
        create_firestore_client(project_id="")
