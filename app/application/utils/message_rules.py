from __future__ import annotations

import re

from app.domain.entities.intent import Intent

# Evaluated in order; the first rule with a keyword contained in the message wins.
INTENT_RULES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (
        Intent.GREETING,
        ("oi", "olá", "ola", "bom dia", "boa tarde", "boa noite", "hi", "hello", "e aí"),
    ),
    (
        Intent.BOOKING,
        ("agendar", "marcar", "horário", "horario", "agendamento", "corte", "serviço", "servico", "quero"),
    ),
    (
        Intent.CANCELLATION,
        ("cancelar", "desmarcar", "remover agendamento"),
    ),
)

AFFIRMATIVE_KEYWORDS = ("sim", "confirmar", "ok")
NEGATIVE_KEYWORDS = ("não", "nao", "cancelar")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_text(text: str) -> str:
    return text.lower()


def match_intent(text: str) -> Intent:
    normalized = normalize_text(text)
    for intent, keywords in INTENT_RULES:
        if any(keyword in normalized for keyword in keywords):
            return intent
    return Intent.NONE


def is_affirmative(text: str) -> bool:
    normalized = normalize_text(text)
    return any(keyword in normalized for keyword in AFFIRMATIVE_KEYWORDS)


def is_negative(text: str) -> bool:
    normalized = normalize_text(text)
    return any(keyword in normalized for keyword in NEGATIVE_KEYWORDS)


def parse_leading_int(text: str) -> int | None:
    """Read the integer at the start of the message ("2", "2 - barba"), or None."""
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))
