from typing import Iterable, Optional

from ai_services.lexicon import CRISIS_INDICATORS, CRISIS_PHRASES

SAFETY_MESSAGE = (
    "I'm concerned about what you're sharing. If you're in immediate danger, please call 988 or 911, "
    "or text HOME to 741741 to reach the Crisis Text Line. Your safety is the top priority. "
    "Would it be helpful to talk about some immediate coping strategies or resources available to you right now?"
)

CRISIS_RESPONSE_LINES = [
    "I notice you mentioned something concerning. Your wellbeing is important, and I want to make sure you're safe.",
    "I'm showing you some resources that might help. These are trained professionals who can provide better support than I can.",
    "Please consider reaching out to one of these services - they're available 24/7 and are trained to help with exactly what you're going through.",
    "You're not alone in this, and support is available.",
]


def detect_crisis_phrases(text: str, phrases: Iterable[str] = CRISIS_PHRASES) -> Optional[str]:
    """Return the first crisis phrase found in the text, case-insensitively"""
    if not text:
        return None

    lower_text = text.lower()
    for phrase in phrases:
        if phrase in lower_text:
            return phrase

    return None


def contains_crisis_indicators(text: str, indicators: Iterable[str] = CRISIS_INDICATORS) -> bool:
    """Check the narrower indicator list that puts a session into crisis"""
    lower_text = (text or "").lower()
    return any(indicator in lower_text for indicator in indicators)


def get_crisis_response(phrase: Optional[str]) -> str:
    """Paragraph shown in front of the reply when a crisis phrase was typed"""
    if not phrase:
        return ""

    return " ".join(CRISIS_RESPONSE_LINES)
