from datetime import datetime, timedelta
from typing import Dict, List, Optional

from database.models import EmotionEntry, TimeRange

TIME_RANGE_WINDOWS = {
    TimeRange.WEEK: timedelta(days=7),
    TimeRange.MONTH: timedelta(days=30),
}


def filter_emotion_history(history: List[EmotionEntry], time_range: TimeRange = TimeRange.WEEK,
                           now: Optional[datetime] = None) -> List[EmotionEntry]:
    """Entries inside the time window, oldest first"""
    now = now or datetime.now()
    window = TIME_RANGE_WINDOWS.get(time_range)

    if window is None:
        selected = list(history)
    else:
        selected = [entry for entry in history if now - entry.timestamp < window]

    return sorted(selected, key=lambda entry: entry.timestamp)


def calculate_emotion_averages(history: List[EmotionEntry]) -> Dict[str, float]:
    """Per-emotion mean, counting only entries where the emotion was present"""
    sums: Dict[str, float] = {}
    counts: Dict[str, int] = {}

    for entry in history:
        for emotion, value in entry.emotions.items():
            if value > 0:
                sums[emotion] = sums.get(emotion, 0.0) + value
                counts[emotion] = counts.get(emotion, 0) + 1

    return {emotion: sums[emotion] / counts[emotion] for emotion in sums}


def format_mood_summary(history: List[EmotionEntry], time_range: TimeRange = TimeRange.WEEK,
                        now: Optional[datetime] = None) -> str:
    entries = filter_emotion_history(history, time_range, now)
    if not entries:
        return "No emotion data recorded for this period yet. Keep journaling and your mood history will show up here."

    averages = calculate_emotion_averages(entries)
    label = {
        TimeRange.WEEK: "the past week",
        TimeRange.MONTH: "the past month",
        TimeRange.ALL: "all time",
    }[time_range]

    lines = [f"Mood summary for {label} ({len(entries)} entries)"]
    if not averages:
        lines.append("No strong emotions detected.")
    for emotion, value in sorted(averages.items(), key=lambda item: item[1], reverse=True):
        lines.append(f"- {emotion.capitalize()}: {round(value * 100)}%")

    return "\n".join(lines)
