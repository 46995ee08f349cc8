from __future__ import annotations

import logging

from google.cloud import firestore


def create_firestore_client(project_id: str | None, database: str = "(default)") -> firestore.Client:
    """Firestore client using Application Default Credentials.

    FIRESTORE_EMULATOR_HOST, when set, is picked up by the library itself.
    """
    if not project_id:
        raise ValueError("FIRESTORE_PROJECT_ID is required for the Firestore adapters")
    logging.getLogger(__name__).info(
        "Firestore client created", extra={"project_id": project_id, "database": database}
    )
    return firestore.Client(project=project_id, database=database)
