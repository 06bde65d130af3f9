"""Keyword tables for the lexical analyzer and the session tracker.

Matching rules live in the code that consumes these tables; the tables
themselves can be swapped through ``Lexicon`` for tests or localization.
"""
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


POSITIVE_WORDS = [
    'good', 'great', 'happy', 'positive', 'excellent', 'wonderful', 'joy',
    'love', 'hope', 'excited', 'grateful', 'thankful', 'appreciate',
    'better', 'calm', 'peaceful', 'relaxed', 'confident', 'proud'
]

NEGATIVE_WORDS = [
    'bad', 'sad', 'angry', 'negative', 'terrible', 'horrible', 'awful',
    'hate', 'fear', 'worried', 'anxious', 'depressed', 'stressed',
    'worse', 'upset', 'frustrated', 'annoyed', 'disappointed', 'hurt'
]

INTENSIFIERS = [
    'very', 'extremely', 'incredibly', 'really', 'so', 'absolutely',
    'completely', 'totally', 'utterly', 'thoroughly'
]

# Matched as substrings, so "sadly" counts for "sad"
EMOTION_KEYWORDS = {
    'anxiety': ['anxious', 'nervous', 'worry', 'stress', 'overwhelm', 'panic', 'afraid', 'uneasy'],
    'sadness': ['sad', 'depressed', 'unhappy', 'miserable', 'heartbroken', 'down', 'blue', 'grief'],
    'anger': ['angry', 'mad', 'furious', 'irritated', 'annoyed', 'frustrated', 'enraged', 'hostile'],
    'fear': ['scared', 'afraid', 'terrified', 'frightened', 'fearful', 'panicked', 'alarmed'],
    'joy': ['happy', 'joyful', 'excited', 'delighted', 'pleased', 'glad', 'cheerful', 'content'],
    'surprise': ['surprised', 'shocked', 'amazed', 'astonished', 'stunned', 'unexpected'],
    'disgust': ['disgusted', 'revolted', 'repulsed', 'sickened', 'appalled', 'horrified'],
    'trust': ['trust', 'believe', 'confident', 'faith', 'assured', 'certain', 'reliance'],
}

TOPIC_KEYWORDS = {
    'work': ['work', 'job', 'career', 'boss', 'office', 'colleague', 'profession', 'employment'],
    'relationships': ['relationship', 'partner', 'marriage', 'dating', 'spouse', 'boyfriend', 'girlfriend'],
    'family': ['family', 'parent', 'child', 'mother', 'father', 'sister', 'brother', 'son', 'daughter'],
    'health': ['health', 'illness', 'disease', 'doctor', 'hospital', 'pain', 'symptom', 'diagnosis'],
    'mental health': ['anxiety', 'depression', 'therapy', 'counseling', 'mental', 'psychiatrist', 'psychologist'],
    'finance': ['money', 'finance', 'debt', 'budget', 'saving', 'expense', 'income', 'investment'],
    'education': ['school', 'college', 'university', 'degree', 'study', 'learn', 'education', 'student'],
    'housing': ['home', 'house', 'apartment', 'rent', 'mortgage', 'roommate', 'living situation'],
    'self-improvement': ['goal', 'improvement', 'growth', 'development', 'progress', 'better', 'skill'],
    'social life': ['friend', 'social', 'party', 'gathering', 'community', 'connection', 'loneliness'],
}

# Emotions that feed the profile's concerns map
NEGATIVE_EMOTIONS = ('anxiety', 'sadness', 'anger', 'fear', 'disgust')

GRIEF_MARKERS = ('grief', 'loss', 'miss', 'gone', 'died', 'death')

CONFUSION_MARKERS = ('confus', 'unsure')

# Wide list checked before a submission is processed
CRISIS_PHRASES = [
    # Suicide-related
    "kill myself", "end my life", "suicide", "suicidal", "don't want to live", "want to die",
    "better off dead", "take my own life", "ending it all", "no reason to live",

    # Self-harm
    "hurt myself", "self harm", "cutting myself", "harming myself", "injure myself",

    # Severe distress
    "can't take it anymore", "no way out", "unbearable pain", "hopeless",
    "no future", "giving up", "lost all hope",

    # Crisis
    "emergency", "crisis", "urgent help", "immediate danger",

    # Specific plans
    "overdose", "jump off", "hang myself", "pills", "gun",
]

# Narrow list that switches the session into the crisis phase
CRISIS_INDICATORS = [
    'suicide', 'kill myself', 'end my life', 'want to die',
    'harm myself', 'hurt myself', 'self-harm',
    'no reason to live', 'better off dead',
]


class Lexicon(BaseModel):
    """Bundle of keyword tables handed to the analyzer and tracker"""

    model_config = ConfigDict(frozen=True)

    positive_words: Tuple[str, ...] = Field(default=tuple(POSITIVE_WORDS))
    negative_words: Tuple[str, ...] = Field(default=tuple(NEGATIVE_WORDS))
    intensifiers: Tuple[str, ...] = Field(default=tuple(INTENSIFIERS))
    emotion_keywords: Dict[str, List[str]] = Field(default_factory=lambda: dict(EMOTION_KEYWORDS))
    topic_keywords: Dict[str, List[str]] = Field(default_factory=lambda: dict(TOPIC_KEYWORDS))
    negative_emotions: Tuple[str, ...] = NEGATIVE_EMOTIONS
    grief_markers: Tuple[str, ...] = GRIEF_MARKERS
    confusion_markers: Tuple[str, ...] = CONFUSION_MARKERS
    crisis_phrases: Tuple[str, ...] = Field(default=tuple(CRISIS_PHRASES))
    crisis_indicators: Tuple[str, ...] = Field(default=tuple(CRISIS_INDICATORS))


DEFAULT_LEXICON = Lexicon()
