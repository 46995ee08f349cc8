from __future__ import annotations

import logging
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from app.application.exceptions import CatalogError
from app.application.ports.service_catalog import BarberDirectoryPort, ServiceCatalogPort
from app.domain.entities.catalog import Barber, Service


class FirestoreCatalog(ServiceCatalogPort, BarberDirectoryPort):
    """Reads barbershops/{id}/services and barbershops/{id}/barbers."""

    def __init__(self, db: firestore.Client) -> None:
        self._db = db
        self._logger = logging.getLogger(__name__)

    def list_active_services(self, barbershop_id: str) -> list[Service]:
        return [_to_service(doc_id, data) for doc_id, data in self._query(barbershop_id, "services")]

    def list_active_barbers(self, barbershop_id: str) -> list[Barber]:
        return [_to_barber(doc_id, data) for doc_id, data in self._query(barbershop_id, "barbers")]

    def _query(self, barbershop_id: str, collection_id: str) -> list[tuple[str, dict[str, Any]]]:
        query = (
            self._db.collection("barbershops")
            .document(barbershop_id)
            .collection(collection_id)
            .where(filter=FieldFilter("isActive", "==", True))
            .order_by("name")
        )
        try:
            return [(doc.id, doc.to_dict() or {}) for doc in query.stream()]
        except GoogleAPIError as e:
            self._logger.error(
                "Error listing catalog",
                extra={"barbershop_id": barbershop_id, "collection": collection_id, "error": str(e)},
            )
            raise CatalogError(f"Could not list {collection_id} for barbershop {barbershop_id}") from e


def _to_service(doc_id: str, data: dict[str, Any]) -> Service:
    return Service(
        id=doc_id,
        name=str(data.get("name") or ""),
        price=float(data.get("price") or 0),
        duration_minutes=int(data.get("duration") or 0),
        is_active=bool(data.get("isActive", True)),
        description=data.get("description"),
        category=data.get("category"),
    )


def _to_barber(doc_id: str, data: dict[str, Any]) -> Barber:
    return Barber(
        id=doc_id,
        name=str(data.get("name") or ""),
        is_active=bool(data.get("isActive", True)),
        specialties=tuple(data.get("specialties") or ()),
    )
