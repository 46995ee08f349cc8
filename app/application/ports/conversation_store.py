from abc import ABC, abstractmethod

from app.domain.entities.conversation_state import ConversationContext


class ConversationStorePort(ABC):
    @abstractmethod
    def get(self, chat_id: str, now_ts: float | None = None) -> ConversationContext | None:
        """Return the live context for a chat, or None if absent or expired."""
        raise NotImplementedError

    @abstractmethod
    def set(self, context: ConversationContext, now_ts: float | None = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, chat_id: str) -> bool:
        """Discard the context for a chat. Returns True if one existed."""
        raise NotImplementedError

    @abstractmethod
    def purge_expired(self, now_ts: float | None = None) -> int:
        """Evict contexts idle longer than the store timeout. Returns the number evicted."""
        raise NotImplementedError
