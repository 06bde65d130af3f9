import random
from typing import Optional

from ai_services.resource_library import (
    BREATHING_EXERCISES, COPING_STRATEGIES, CRISIS_CONTACT_RESOURCES,
    MENTAL_HEALTH_RESOURCES, MINDFULNESS_PRACTICES, QUOTES
)
from config import Config
from database.models import EmotionCategory, Resource, ResourceType, SessionState

# Chance of taking the emotion-specific branch on a qualifying turn
EMOTION_BIAS = 0.6

RESOURCE_TYPES = [
    ResourceType.QUOTE,
    ResourceType.BREATHING,
    ResourceType.MINDFULNESS,
    ResourceType.COPING,
    ResourceType.RESOURCE,
]


class ResourceSelector:
    """Picks an occasional resource card for the conversation.

    All randomness comes from ``rng`` so a seeded selector is reproducible.
    """

    def __init__(self, config: Config, rng: Optional[random.Random] = None):
        self.warmup_turns = config.resource_warmup_turns
        self.interval = config.resource_interval
        self.rng = rng or random.Random(config.random_seed)

    def select_resource(self, session_state: SessionState, turn_count: int) -> Optional[Resource]:
        """Return a resource on qualifying turns, None otherwise"""

        # Only start offering resources after a few messages
        if turn_count < self.warmup_turns:
            return None

        if turn_count % self.interval != 0:
            return None

        if session_state.crisis_detected:
            return self.generate_crisis_resource()

        dominant_emotion = session_state.dominant_emotion
        random_factor = self.rng.random()

        if random_factor < EMOTION_BIAS:
            if dominant_emotion == EmotionCategory.ANXIETY:
                return self.generate_breathing_exercise() if self.rng.random() < 0.5 else self.generate_mindfulness_practice()
            if dominant_emotion == EmotionCategory.DEPRESSION:
                return self.generate_coping_strategy(EmotionCategory.DEPRESSION) if self.rng.random() < 0.5 else self.generate_quote()
            if dominant_emotion == EmotionCategory.ANGER:
                return self.generate_breathing_exercise() if self.rng.random() < 0.5 else self.generate_coping_strategy(EmotionCategory.ANGER)
            if dominant_emotion == EmotionCategory.GRIEF:
                return self.generate_coping_strategy(EmotionCategory.GRIEF)

        resource_type = self.rng.choice(RESOURCE_TYPES)

        if resource_type == ResourceType.BREATHING:
            return self.generate_breathing_exercise()
        elif resource_type == ResourceType.MINDFULNESS:
            return self.generate_mindfulness_practice()
        elif resource_type == ResourceType.COPING:
            return self.generate_coping_strategy(dominant_emotion)
        elif resource_type == ResourceType.RESOURCE:
            return self.generate_mental_health_resource()
        return self.generate_quote()

    def generate_quote(self) -> Resource:
        quote = self.rng.choice(QUOTES)
        return Resource(type=ResourceType.QUOTE, content=quote["content"], source=quote["source"])

    def generate_breathing_exercise(self) -> Resource:
        exercise = self.rng.choice(BREATHING_EXERCISES)
        return Resource(type=ResourceType.BREATHING, content=exercise["content"], title=exercise["title"])

    def generate_mindfulness_practice(self) -> Resource:
        practice = self.rng.choice(MINDFULNESS_PRACTICES)
        return Resource(type=ResourceType.MINDFULNESS, content=practice["content"], title=practice["title"])

    def generate_coping_strategy(self, emotion: Optional[EmotionCategory] = None) -> Resource:
        """Strategies for the emotion, falling back to the neutral set"""
        key = emotion.value if emotion else "neutral"
        strategies = COPING_STRATEGIES.get(key, COPING_STRATEGIES["neutral"])
        strategy = self.rng.choice(strategies)
        return Resource(type=ResourceType.COPING, content=strategy["content"], title=strategy["title"])

    def generate_mental_health_resource(self) -> Resource:
        resource = self.rng.choice(MENTAL_HEALTH_RESOURCES)
        return Resource(
            type=ResourceType.RESOURCE,
            content=resource["content"],
            title=resource["title"],
            url=resource["url"],
            source=resource.get("contact"),
        )

    def generate_crisis_resource(self) -> Resource:
        resource = self.rng.choice(CRISIS_CONTACT_RESOURCES)
        return Resource(
            type=ResourceType.CRISIS,
            content=resource["content"],
            title=resource["title"],
            url=resource["url"],
            source=resource["contact"],
        )


def format_resource_for_message(resource: Optional[Resource]) -> str:
    """Render a resource card as chat text"""
    if not resource:
        return ''

    if resource.type == ResourceType.QUOTE:
        return f'"{resource.content}" - {resource.source}'
    if resource.type == ResourceType.BREATHING:
        return f"Breathing Exercise - {resource.title}:\n{resource.content}"
    if resource.type == ResourceType.MINDFULNESS:
        return f"Mindfulness Practice - {resource.title}:\n{resource.content}"
    if resource.type == ResourceType.COPING:
        return f"Coping Strategy - {resource.title}:\n{resource.content}"

    lines = [f"Resource: {resource.title} - {resource.content}"]
    if resource.url:
        lines.append(f"Website: {resource.url}")
    if resource.source:
        lines.append(f"Contact: {resource.source}")
    return "\n".join(lines)
