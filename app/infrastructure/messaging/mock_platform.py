from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort
from app.domain.entities.message import OutboundMessage


class MockMessagePlatform(MessagePlatformPort):
    def __init__(self) -> None:
        self.sent: list[OutboundMessage] = []
        self._logger = logging.getLogger(__name__)

    def send_message(self, message: OutboundMessage) -> str:
        self.sent.append(message)
        message_id = f"mock_message_{len(self.sent)}"
        self._logger.info(
            "Mock send to chat",
            extra={"chat_id": message.chat_id, "message_id": message_id, "text": message.content},
        )
        return message_id
