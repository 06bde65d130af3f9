from datetime import datetime, timedelta

import pytest

from ai_services.emotion_tracker import (
    calculate_emotion_averages, filter_emotion_history, format_mood_summary
)
from database.models import EmotionEntry, TimeRange

NOW = datetime(2024, 6, 30, 12, 0)


@pytest.fixture
def history():
    return [
        EmotionEntry(timestamp=NOW - timedelta(days=2), emotions={"joy": 0.4, "anxiety": 0.0}),
        EmotionEntry(timestamp=NOW - timedelta(days=40), emotions={"anxiety": 0.6}),
        EmotionEntry(timestamp=NOW - timedelta(days=10), emotions={"joy": 0.8, "anxiety": 0.2}),
    ]


def test_time_range_windows(history):
    assert len(filter_emotion_history(history, TimeRange.WEEK, NOW)) == 1
    assert len(filter_emotion_history(history, TimeRange.MONTH, NOW)) == 2
    assert len(filter_emotion_history(history, TimeRange.ALL, NOW)) == 3


def test_entries_sorted_oldest_first(history):
    entries = filter_emotion_history(history, TimeRange.ALL, NOW)

    assert [entry.timestamp for entry in entries] == sorted(entry.timestamp for entry in history)


def test_averages_skip_zero_values(history):
    averages = calculate_emotion_averages(history)

    assert averages["joy"] == pytest.approx(0.6)
    assert averages["anxiety"] == pytest.approx(0.4)
    assert calculate_emotion_averages([]) == {}


def test_summary_for_empty_period(history):
    text = format_mood_summary(history[1:2], TimeRange.WEEK, NOW)

    assert text.startswith("No emotion data recorded")


def test_summary_lists_strongest_first(history):
    text = format_mood_summary(history, TimeRange.MONTH, NOW)

    assert text.splitlines()[0] == "Mood summary for the past month (2 entries)"
    assert text.splitlines()[1] == "- Joy: 60%"
