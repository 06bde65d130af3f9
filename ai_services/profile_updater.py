from database.models import TextAnalysis, UserProfile
from ai_services.lexicon import NEGATIVE_EMOTIONS

SMOOTHING_WEIGHT = 0.3
INTEREST_SEED = 0.6
INTEREST_TARGET = 0.8
CONCERN_THRESHOLD = 0.5


class ProfileUpdater:
    """Folds each turn's analysis into the persistent user profile"""

    def __init__(self, weight: float = SMOOTHING_WEIGHT, negative_emotions=NEGATIVE_EMOTIONS):
        self.weight = weight
        self.negative_emotions = tuple(negative_emotions)

    def update_profile(self, current: UserProfile, analysis: TextAnalysis, text: str = "") -> UserProfile:
        """Return an updated copy of the profile, leaving ``current`` untouched"""

        profile = current.model_copy(deep=True)

        # Communication style
        style = profile.communication_style
        style.verbose = self._weighted_average(
            style.verbose, self._bucket(analysis.token_count, 100, 50)
        )
        style.emotional = self._weighted_average(
            style.emotional, self._bucket(analysis.sentiment.magnitude, 0.7, 0.3)
        )
        style.analytical = self._weighted_average(
            style.analytical, self._bucket(analysis.complexity, 0.7, 0.4)
        )

        # Interests based on topics
        for topic in analysis.topics:
            if not profile.interests.get(topic):
                profile.interests[topic] = INTEREST_SEED
            else:
                profile.interests[topic] = self._weighted_average(profile.interests[topic], INTEREST_TARGET)

        # Concerns based on strong negative emotions
        for emotion, intensity in analysis.emotions.items():
            if intensity > CONCERN_THRESHOLD and emotion in self.negative_emotions:
                intensity = self._clamp(intensity)
                if not profile.concerns.get(emotion):
                    profile.concerns[emotion] = intensity
                else:
                    profile.concerns[emotion] = self._weighted_average(profile.concerns[emotion], intensity)

        # Personality traits, two fixed nudges only
        traits = profile.personality_traits
        if analysis.sentiment.score > 0.5:
            traits.extraversion = self._weighted_average(traits.extraversion, 0.6)
            traits.agreeableness = self._weighted_average(traits.agreeableness, 0.6)

        if analysis.complexity > 0.6:
            traits.openness = self._weighted_average(traits.openness, 0.7)

        # Learning history
        for topic in analysis.topics:
            if topic not in profile.learning_history.topics_discussed:
                profile.learning_history.topics_discussed.append(topic)

        return profile

    def _bucket(self, metric: float, high: float, mid: float) -> float:
        if metric > high:
            return 0.8
        elif metric > mid:
            return 0.5
        return 0.2

    def _weighted_average(self, current: float, new: float) -> float:
        """Calculate weighted average and ensure it's within bounds"""
        result = current * (1 - self.weight) + new * self.weight
        return self._clamp(result)

    def _clamp(self, value: float) -> float:
        return max(0.0, min(1.0, value))

    def get_profile_summary(self, profile: UserProfile) -> str:
        """Generate a human-readable profile summary"""

        summary_parts = []
        traits = profile.personality_traits
        style = profile.communication_style

        if traits.openness > 0.6:
            summary_parts.append("open to new ideas and reflection")
        if traits.extraversion > 0.55:
            summary_parts.append("upbeat when sharing")

        if style.verbose > 0.6:
            summary_parts.append("writes in detail")
        elif style.verbose < 0.3:
            summary_parts.append("keeps entries brief")

        if style.emotional > 0.6:
            summary_parts.append("expresses feelings openly")
        if style.analytical > 0.6:
            summary_parts.append("tends to analyse situations")

        interests = sorted(profile.interests.items(), key=lambda item: item[1], reverse=True)
        if interests:
            summary_parts.append("often writes about " + ", ".join(topic for topic, _ in interests[:3]))

        if profile.concerns:
            summary_parts.append("has mentioned " + ", ".join(sorted(profile.concerns)))

        if summary_parts:
            return "Your journal shows: " + "; ".join(summary_parts)
        else:
            return "Your profile is still being developed"
