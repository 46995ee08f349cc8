from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import OutboundMessage, Reply

ASSISTANT_ROLE = "ai"


class SendReplyUseCase:
    def __init__(self, platform: MessagePlatformPort, sender_id: str, sender_name: str) -> None:
        self._platform = platform
        self._sender_id = sender_id
        self._sender_name = sender_name
        self._logger = logging.getLogger(__name__)

    def execute(self, chat_id: str, reply: Reply) -> str:
        """Send one assistant reply. Returns the platform message id; delivery errors propagate."""
        message = OutboundMessage(
            chat_id=chat_id,
            sender_id=self._sender_id,
            sender_role=ASSISTANT_ROLE,
            sender_name=self._sender_name,
            content=reply.content,
            type=reply.type,
            appointment_data=reply.appointment_data,
        )
        message_id = self._platform.send_message(message)
        self._logger.info("Reply sent", extra={"chat_id": chat_id, "message_type": reply.type})
        return message_id
