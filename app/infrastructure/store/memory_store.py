from __future__ import annotations

import logging
import threading
import time

from app.application.ports.conversation_store import ConversationStorePort
from app.domain.entities.conversation_state import ConversationContext


class MemoryConversationStore(ConversationStorePort):
    """Process-local conversation contexts keyed by chat id.

    Contexts untouched for longer than ``idle_timeout_seconds`` are treated as
    abandoned: they are dropped when read and by ``purge_expired``.
    """

    def __init__(self, idle_timeout_seconds: float = 30 * 60) -> None:
        self._contexts: dict[str, ConversationContext] = {}
        self._touched_at: dict[str, float] = {}
        self._idle_timeout_seconds = idle_timeout_seconds
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get(self, chat_id: str, now_ts: float | None = None) -> ConversationContext | None:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            context = self._contexts.get(chat_id)
            if context is None:
                return None
            if self._is_expired(chat_id, now_ts):
                self._evict(chat_id)
                self._logger.info("Conversation expired", extra={"chat_id": chat_id, "reason": "idle_timeout"})
                return None
            return context

    def set(self, context: ConversationContext, now_ts: float | None = None) -> None:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            self._contexts[context.chat_id] = context
            self._touched_at[context.chat_id] = now_ts

    def delete(self, chat_id: str) -> bool:
        with self._lock:
            existed = chat_id in self._contexts
            self._evict(chat_id)
            return existed

    def purge_expired(self, now_ts: float | None = None) -> int:
        now_ts = time.time() if now_ts is None else now_ts
        with self._lock:
            expired = [chat_id for chat_id in self._contexts if self._is_expired(chat_id, now_ts)]
            for chat_id in expired:
                self._evict(chat_id)
        if expired:
            self._logger.info("Purged idle conversations", extra={"count": len(expired), "reason": "idle_timeout"})
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._contexts)

    def _is_expired(self, chat_id: str, now_ts: float) -> bool:
        touched = self._touched_at.get(chat_id)
        if touched is None:
            return False
        return now_ts - touched > self._idle_timeout_seconds

    def _evict(self, chat_id: str) -> None:
        self._contexts.pop(chat_id, None)
        self._touched_at.pop(chat_id, None)
