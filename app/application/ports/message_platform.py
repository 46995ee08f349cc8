from abc import ABC, abstractmethod

from app.domain.entities.message import OutboundMessage


class MessagePlatformPort(ABC):
    @abstractmethod
    def send_message(self, message: OutboundMessage) -> str:
        """Deliver a chat message. Returns the new message id."""
        raise NotImplementedError
