from __future__ import annotations

import logging
from datetime import datetime, time
from zoneinfo import ZoneInfo

from google.api_core.exceptions import GoogleAPIError
from google.cloud import firestore

from app.application.exceptions import MessageDeliveryError
from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import OutboundMessage


class FirestoreMessagePlatform(MessagePlatformPort):
    """Appends to chats/{chatId}/messages and bumps the chat's last-message fields.

    Clients subscribed to the chat pick the message up in real time.
    """

    def __init__(self, db: firestore.Client, timezone: ZoneInfo) -> None:
        self._db = db
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def send_message(self, message: OutboundMessage) -> str:
        data = {
            "chatId": message.chat_id,
            "senderId": message.sender_id,
            "senderRole": message.sender_role,
            "senderName": message.sender_name,
            "content": message.content,
            "type": message.type,
            "read": False,
            "createdAt": firestore.SERVER_TIMESTAMP,
        }
        if message.appointment_data is not None:
            appointment = message.appointment_data
            data["appointmentData"] = {
                "date": datetime.combine(appointment.date, time.min, tzinfo=self._timezone),
                "time": appointment.time,
                "serviceIds": list(appointment.service_ids),
                "barberId": appointment.barber_id,
            }

        chat_ref = self._db.collection("chats").document(message.chat_id)
        try:
            _, message_ref = chat_ref.collection("messages").add(data)
            chat_ref.update(
                {
                    "lastMessage": message.content,
                    "lastMessageAt": firestore.SERVER_TIMESTAMP,
                    "updatedAt": firestore.SERVER_TIMESTAMP,
                }
            )
        except GoogleAPIError as e:
            self._logger.error(
                "Chat message send failed",
                extra={"chat_id": message.chat_id, "text_length": len(message.content), "error": str(e)},
            )
            raise MessageDeliveryError(f"Could not deliver message to chat {message.chat_id}") from e

        return message_ref.id
