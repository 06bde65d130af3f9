import random
from typing import List, Optional

from ai_services.crisis_detection import contains_crisis_indicators
from ai_services.lexicon import DEFAULT_LEXICON, Lexicon
from ai_services.profile_updater import ProfileUpdater
from ai_services.text_analyzer import TextAnalyzer
from database.models import (
    EmotionCategory, SessionPhase, SessionState, TextAnalysis, TherapyApproach
)

# One keyword hit is enough to surface a category
EMOTION_CATEGORY_THRESHOLD = 0.2

RECENT_TOPICS_LIMIT = 3

EMOTION_TO_CATEGORY = [
    ('anxiety', EmotionCategory.ANXIETY),
    ('sadness', EmotionCategory.DEPRESSION),
    ('anger', EmotionCategory.ANGER),
    ('joy', EmotionCategory.JOY),
]

# First matching category wins
APPROACH_PRIORITY = [
    (EmotionCategory.ANXIETY, [TherapyApproach.CBT, TherapyApproach.MINDFULNESS]),
    (EmotionCategory.DEPRESSION, [TherapyApproach.CBT, TherapyApproach.SUPPORTIVE]),
    (EmotionCategory.GRIEF, [TherapyApproach.SUPPORTIVE, TherapyApproach.EXISTENTIAL]),
    (EmotionCategory.CONFUSION, [TherapyApproach.SOLUTION_FOCUSED, TherapyApproach.EXISTENTIAL]),
]
DEFAULT_APPROACH = [TherapyApproach.SUPPORTIVE, TherapyApproach.SOLUTION_FOCUSED]

QUESTION_TYPES = [
    'emotion-exploration',
    'thought-patterns',
    'coping-strategies',
    'values-exploration',
    'behavioral-patterns',
    'future-oriented',
    'meaning-making',
    'social-support',
    'self-compassion',
]

CRISIS_QUESTION = (
    "I'm concerned about what you're sharing. Would you be willing to reach out to a crisis helpline right now? "
    "The National Suicide Prevention Lifeline is available 24/7 at 988 or 1-800-273-8255. "
    "Would it be okay if we focused on keeping you safe right now?"
)


def create_initial_session_state() -> SessionState:
    """Fresh session with a neutral profile"""
    return SessionState()


class SessionTracker:
    """Advances the session state once per user turn.

    The machine has two phases, NORMAL and CRISIS. Every turn re-evaluates
    the crisis indicators, so a later calm turn returns to NORMAL.
    """

    def __init__(self, analyzer: Optional[TextAnalyzer] = None,
                 profile_updater: Optional[ProfileUpdater] = None,
                 lexicon: Lexicon = DEFAULT_LEXICON,
                 rng: Optional[random.Random] = None):
        self.lexicon = lexicon
        self.analyzer = analyzer or TextAnalyzer(lexicon)
        self.profile_updater = profile_updater or ProfileUpdater(negative_emotions=lexicon.negative_emotions)
        self.rng = rng or random.Random()

    def advance(self, state: SessionState, text: str) -> SessionState:
        """Transition ``state`` by one user turn and return the new state"""

        analysis = self.analyzer.analyze(text)
        profile = self.profile_updater.update_profile(state.user_profile, analysis, text)

        emotions = self.classify_emotions(analysis, text)
        is_crisis = contains_crisis_indicators(text, self.lexicon.crisis_indicators)

        return state.model_copy(deep=True, update={
            'session_depth': state.session_depth + 1,
            'phase': SessionPhase.CRISIS if is_crisis else SessionPhase.NORMAL,
            'dominant_emotions': emotions,
            'recent_topics': (list(analysis.topics) + list(state.recent_topics))[:RECENT_TOPICS_LIMIT],
            'approach_used': self.select_approach(emotions),
            'user_profile': profile,
            'last_analysis': analysis,
        })

    def classify_emotions(self, analysis: TextAnalysis, text: str) -> List[EmotionCategory]:
        """Reduce analyzer intensities and marker words to session categories"""
        emotions = analysis.emotions
        result = []

        for emotion, category in EMOTION_TO_CATEGORY:
            if emotions.get(emotion, 0.0) >= EMOTION_CATEGORY_THRESHOLD:
                result.append(category)

        lower_text = (text or "").lower()
        if any(marker in lower_text for marker in self.lexicon.grief_markers):
            result.append(EmotionCategory.GRIEF)

        if (emotions.get('surprise', 0.0) >= EMOTION_CATEGORY_THRESHOLD or
                any(marker in lower_text for marker in self.lexicon.confusion_markers)):
            result.append(EmotionCategory.CONFUSION)

        if not result:
            result.append(EmotionCategory.NEUTRAL)

        return result

    def select_approach(self, emotions: List[EmotionCategory]) -> List[TherapyApproach]:
        for category, approach in APPROACH_PRIORITY:
            if category in emotions:
                return list(approach)
        return list(DEFAULT_APPROACH)

    def next_question(self, state: SessionState):
        """Pick a journaling prompt and return it with the updated state.

        Does not count as a user turn, ``session_depth`` is unchanged.
        """
        if state.crisis_detected:
            return CRISIS_QUESTION, state

        available = [q for q in QUESTION_TYPES if q != state.last_question_type]
        question_type = self.rng.choice(available)
        topic = state.recent_topics[0] if state.recent_topics else None
        question = self._question_for(question_type, state.dominant_emotion, topic)

        updated = state.model_copy(deep=True, update={
            'last_question_type': question_type,
            'question_types': list(state.question_types) + [question_type],
        })
        return question, updated

    def _question_for(self, question_type: str, emotion: EmotionCategory, topic: Optional[str]) -> str:
        if question_type == 'emotion-exploration':
            return {
                EmotionCategory.ANXIETY: "When you notice this anxiety rising, where do you feel it in your body? What sensations are present?",
                EmotionCategory.DEPRESSION: "When these feelings of sadness come up, what thoughts typically accompany them?",
                EmotionCategory.ANGER: "Underneath this anger, are there other emotions present that might be harder to access?",
                EmotionCategory.GRIEF: "What aspects of this loss feel most difficult to process right now?",
                EmotionCategory.JOY: "What does this moment of joy teach you about what matters most to you?",
                EmotionCategory.CONFUSION: "When you sit with this uncertainty, what possibilities start to emerge?",
            }.get(emotion, "What emotions have been most present for you lately?")

        if question_type == 'thought-patterns':
            if topic == 'work':
                return "What expectations do you hold about your work that might be contributing to how you're feeling?"
            if topic in ('relationships', 'family'):
                return "Are there any recurring thoughts or assumptions about relationships that might be influencing your perspective?"
            return "Have you noticed any patterns in your thinking that seem to intensify difficult emotions?"

        if question_type == 'coping-strategies':
            if emotion == EmotionCategory.ANXIETY:
                return "When anxiety feels overwhelming, what strategies have you found most helpful for grounding yourself?"
            if emotion == EmotionCategory.DEPRESSION:
                return "On days when motivation is low, what small actions have helped you move forward?"
            return "What has helped you navigate similar situations or feelings in the past?"

        if question_type == 'values-exploration':
            if topic == 'work':
                return "What aspects of your work align with your personal values, and where do you feel disconnection?"
            if topic == 'relationships':
                return "In your relationships, what qualities do you value most?"
            return "What matters most to you in this situation? What core values are guiding you?"

        return {
            'behavioral-patterns': "How do these feelings typically influence your actions? What patterns have you noticed?",
            'future-oriented': "If you were to imagine this situation resolved in a way that feels right to you, what would that look like?",
            'meaning-making': "How has this experience shaped your understanding of yourself or your life?",
            'social-support': "Who in your life helps you feel understood and supported? How might they be able to support you now?",
            'self-compassion': "What would you say to a friend facing a similar situation? Could you offer yourself the same kindness?",
        }.get(question_type, "What feels most important for us to explore today?")
