from __future__ import annotations

from dataclasses import replace
from typing import Callable, Sequence, TypeVar

from app.application.utils.message_rules import parse_leading_int
from app.domain.entities.conversation_state import (
    AppointmentDraft,
    ConversationContext,
    ConversationStatus,
)

T = TypeVar("T")


def new_context(chat_id: str, barbershop_id: str, client_id: str, client_name: str) -> ConversationContext:
    return ConversationContext(
        chat_id=chat_id,
        barbershop_id=barbershop_id,
        client_id=client_id,
        client_name=client_name,
    )


def restart_booking(context: ConversationContext) -> ConversationContext:
    """Drop any partial draft and wait for a service choice."""
    return replace(context, status=ConversationStatus.AWAITING_SERVICE, draft=AppointmentDraft())


def advance(context: ConversationContext, status: ConversationStatus, **draft_changes) -> ConversationContext:
    """Move to the next status, updating only the given draft fields."""
    return replace(context, status=status, draft=replace(context.draft, **draft_changes))


def pick_entry(entries: Sequence[T], text: str, name_of: Callable[[T], str]) -> T | None:
    """Resolve a menu choice: 1-based index first, then case-insensitive name substring."""
    number = parse_leading_int(text)
    if number is not None and 1 <= number <= len(entries):
        return entries[number - 1]

    needle = text.lower().strip()
    if not needle:
        return None
    for entry in entries:
        if needle in name_of(entry).lower():
            return entry
    return None
