import random

import pytest

from ai_services.resource_library import COPING_STRATEGIES, CRISIS_CONTACT_RESOURCES
from ai_services.resource_selector import ResourceSelector, format_resource_for_message
from database.models import (
    EmotionCategory, Resource, ResourceType, SessionPhase, SessionState
)


@pytest.fixture
def selector(config):
    return ResourceSelector(config, random.Random(11))


@pytest.mark.parametrize("turn", [0, 1, 2, 3, 4, 5, 7, 8, 9, 10, 11, 13, 17])
def test_no_resource_off_schedule(selector, turn):
    assert selector.select_resource(SessionState(), turn) is None


@pytest.mark.parametrize("turn", [6, 12, 18, 60])
def test_resource_on_every_sixth_turn(selector, turn):
    assert selector.select_resource(SessionState(), turn) is not None


def test_crisis_state_always_gets_crisis_contact(selector):
    state = SessionState(phase=SessionPhase.CRISIS)

    for turn in (6, 12, 18, 24):
        resource = selector.select_resource(state, turn)
        assert resource.type == ResourceType.CRISIS
        assert resource.source in [item["contact"] for item in CRISIS_CONTACT_RESOURCES]


def test_crisis_state_off_schedule_gets_nothing(selector):
    assert selector.select_resource(SessionState(phase=SessionPhase.CRISIS), 5) is None


def test_seeded_selection_is_reproducible(config):
    state = SessionState(dominant_emotions=[EmotionCategory.ANXIETY])
    first = [ResourceSelector(config, random.Random(5)).select_resource(state, turn) for turn in (6, 12, 18)]
    second = [ResourceSelector(config, random.Random(5)).select_resource(state, turn) for turn in (6, 12, 18)]

    assert first == second


def test_grief_bias_uses_grief_strategies(config):
    state = SessionState(dominant_emotions=[EmotionCategory.GRIEF])
    selector = ResourceSelector(config, random.Random(0))
    grief_titles = {item["title"] for item in COPING_STRATEGIES["grief"]}

    resources = [selector.select_resource(state, 6) for _ in range(50)]

    assert any(resource.title in grief_titles for resource in resources)


def test_coping_strategy_without_table_uses_neutral(selector):
    resource = selector.generate_coping_strategy(EmotionCategory.JOY)
    neutral_titles = {item["title"] for item in COPING_STRATEGIES["neutral"]}

    assert resource.title in neutral_titles


def test_format_resources():
    quote = Resource(type=ResourceType.QUOTE, content="Keep going.", source="Someone")
    assert format_resource_for_message(quote) == '"Keep going." - Someone'

    breathing = Resource(type=ResourceType.BREATHING, content="Breathe in.", title="Box Breathing")
    assert format_resource_for_message(breathing).startswith("Breathing Exercise - Box Breathing")

    crisis = Resource(type=ResourceType.CRISIS, content="Support", title="Line", url="https://x", source="Call 988")
    text = format_resource_for_message(crisis)
    assert "Website: https://x" in text
    assert "Contact: Call 988" in text

    assert format_resource_for_message(None) == ''
