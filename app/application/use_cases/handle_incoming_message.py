from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from app.application.ports.conversation_store import ConversationStorePort
from app.application.use_cases.booking import BookingResult, BookingStateMachine
from app.application.use_cases.classify_intent import ClassifyIntentUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.application.utils import replies
from app.application.utils.state_helpers import new_context
from app.domain.entities.conversation_state import ConversationContext
from app.domain.entities.intent import Intent
from app.domain.entities.message import InboundMessage, Reply


@dataclass(frozen=True)
class ChatTurnResult:
    chat_id: str
    intent: Intent
    action: str
    status: str | None  # None once the conversation was discarded
    replies: tuple[Reply, ...]
    message_ids: tuple[str, ...]


class HandleIncomingMessageUseCase:
    def __init__(
        self,
        store: ConversationStorePort,
        classify_intent: ClassifyIntentUseCase,
        booking: BookingStateMachine,
        send_reply: SendReplyUseCase,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._classify_intent = classify_intent
        self._booking = booking
        self._send_reply = send_reply
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def handle(self, message: InboundMessage) -> ChatTurnResult:
        now_ts = self._clock()
        # evicts every idle chat, not just this one
        self._store.purge_expired(now_ts=now_ts)

        context = self._store.get(message.chat_id, now_ts=now_ts)
        if context is None:
            context = new_context(
                chat_id=message.chat_id,
                barbershop_id=message.barbershop_id,
                client_id=message.client_id,
                client_name=message.client_name,
            )
            self._store.set(context, now_ts=now_ts)

        classification = self._classify_intent.execute(message.text)
        result = self._route(context, classification.intent, message.text)

        if result.context is None:
            self._store.delete(message.chat_id)
        else:
            self._store.set(result.context, now_ts=now_ts)

        self._logger.info(
            "Chat turn processed",
            extra={
                "chat_id": message.chat_id,
                "intent": classification.intent.value,
                "action": result.action,
                "status": result.context.status.value if result.context else None,
            },
        )

        message_ids = tuple(self._send_reply.execute(message.chat_id, reply) for reply in result.replies)

        return ChatTurnResult(
            chat_id=message.chat_id,
            intent=classification.intent,
            action=result.action,
            status=result.context.status.value if result.context else None,
            replies=result.replies,
            message_ids=message_ids,
        )

    def clear(self, chat_id: str) -> bool:
        return self._store.delete(chat_id)

    def _route(self, context: ConversationContext, intent: Intent, text: str) -> BookingResult:
        if intent is Intent.GREETING:
            return _reply("greeting", context, replies.build_greeting(context.client_name))

        if intent is Intent.BOOKING:
            return self._booking.start(context)

        if intent is Intent.CANCELLATION:
            return _reply("cancellation_info", context, replies.CANCELLATION_INFO)

        return self._booking.step(context, text)


def _reply(action: str, context: ConversationContext, text: str) -> BookingResult:
    return BookingResult(action=action, context=context, replies=(Reply(content=text),))
