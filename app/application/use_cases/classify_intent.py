from __future__ import annotations

from app.application.utils.message_rules import match_intent, normalize_text
from app.domain.entities.intent import IntentClassification


class ClassifyIntentUseCase:
    def execute(self, text: str) -> IntentClassification:
        return IntentClassification(intent=match_intent(text), normalized_text=normalize_text(text))
