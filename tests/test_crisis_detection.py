import pytest

from ai_services.crisis_detection import (
    SAFETY_MESSAGE, contains_crisis_indicators, detect_crisis_phrases, get_crisis_response
)


@pytest.mark.parametrize("text", [
    "I want to end my life.",
    "i WANT to END my LIFE",
    "...end my life!!!",
])
def test_phrase_match_ignores_case_and_punctuation(text):
    assert detect_crisis_phrases(text) == "end my life"


def test_no_phrase_in_ordinary_text():
    assert detect_crisis_phrases("I had a calm walk in the park") is None
    assert detect_crisis_phrases("") is None


def test_indicators_are_narrower_than_phrases():
    assert detect_crisis_phrases("I feel hopeless") == "hopeless"
    assert not contains_crisis_indicators("I feel hopeless")
    assert contains_crisis_indicators("Thinking about Suicide")


def test_crisis_response_only_for_a_phrase():
    assert get_crisis_response(None) == ""
    assert "You're not alone" in get_crisis_response("hopeless")


def test_safety_message_lists_emergency_numbers():
    assert "988" in SAFETY_MESSAGE
    assert "741741" in SAFETY_MESSAGE
