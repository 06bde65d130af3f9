from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional, Dict
from enum import Enum


class SentimentLabel(str, Enum):
    """Sentiment label buckets"""
    VERY_NEGATIVE = "very_negative"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    VERY_POSITIVE = "very_positive"

class EntityType(str, Enum):
    """Entity types produced by the proper-noun heuristic"""
    PERSON = "PERSON"
    LOCATION = "LOCATION"
    ORGANIZATION = "ORGANIZATION"
    EVENT = "EVENT"
    DATE = "DATE"
    CONSUMER_GOOD = "CONSUMER_GOOD"
    OTHER = "OTHER"

class EmotionCategory(str, Enum):
    """Reduced emotion categories tracked by the session"""
    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    ANGER = "anger"
    GRIEF = "grief"
    JOY = "joy"
    CONFUSION = "confusion"
    NEUTRAL = "neutral"

class TherapyApproach(str, Enum):
    """Therapy approach tags"""
    CBT = "cbt"
    MINDFULNESS = "mindfulness"
    SUPPORTIVE = "supportive"
    SOLUTION_FOCUSED = "solution-focused"
    EXISTENTIAL = "existential"

class SessionPhase(str, Enum):
    """Tag of the session state machine"""
    NORMAL = "normal"
    CRISIS = "crisis"

class MessageRole(str, Enum):
    """Message role types"""
    USER = "user"
    ASSISTANT = "assistant"

class ResourceType(str, Enum):
    """Resource card types"""
    QUOTE = "quote"
    BREATHING = "breathing"
    MINDFULNESS = "mindfulness"
    COPING = "coping"
    RESOURCE = "resource"
    CRISIS = "crisis"

class TimeRange(str, Enum):
    """Mood history windows"""
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


# Text analysis

class Sentiment(BaseModel):
    score: float = Field(default=0.0, ge=-1.0, le=1.0)
    magnitude: float = Field(default=0.0, ge=0.0)
    label: SentimentLabel = SentimentLabel.NEUTRAL

class Entity(BaseModel):
    name: str
    type: EntityType = EntityType.PERSON
    salience: float = Field(default=0.5, ge=0.0, le=1.0)
    mentions: int = 1

class KeyPhrase(BaseModel):
    phrase: str
    score: float = Field(ge=0.0, le=1.0)

class TextAnalysis(BaseModel):
    """Per-turn result of the lexical analyzer"""
    sentiment: Sentiment = Field(default_factory=Sentiment)
    entities: List[Entity] = Field(default_factory=list)
    key_phrases: List[KeyPhrase] = Field(default_factory=list)
    token_count: int = Field(default=0, ge=0)
    complexity: float = Field(default=0.0, ge=0.0, le=1.0)
    topics: List[str] = Field(default_factory=list)
    emotions: Dict[str, float] = Field(default_factory=dict)


# User profile

class PersonalityTraits(BaseModel):
    """User personality traits model"""
    openness: float = Field(default=0.5, ge=0.0, le=1.0)
    conscientiousness: float = Field(default=0.5, ge=0.0, le=1.0)
    extraversion: float = Field(default=0.5, ge=0.0, le=1.0)
    agreeableness: float = Field(default=0.5, ge=0.0, le=1.0)
    neuroticism: float = Field(default=0.5, ge=0.0, le=1.0)

class CommunicationStyle(BaseModel):
    """Communication style axes"""
    verbose: float = Field(default=0.5, ge=0.0, le=1.0)
    emotional: float = Field(default=0.5, ge=0.0, le=1.0)
    analytical: float = Field(default=0.5, ge=0.0, le=1.0)
    concrete: float = Field(default=0.5, ge=0.0, le=1.0)
    abstract: float = Field(default=0.5, ge=0.0, le=1.0)

class LearningHistory(BaseModel):
    topics_discussed: List[str] = Field(default_factory=list)
    insights_gained: List[str] = Field(default_factory=list)
    techniques_learned: List[str] = Field(default_factory=list)

class UserProfile(BaseModel):
    """Long-lived profile folded from every analysed turn"""
    personality_traits: PersonalityTraits = Field(default_factory=PersonalityTraits)
    values: Dict[str, float] = Field(default_factory=dict)
    interests: Dict[str, float] = Field(default_factory=dict)
    concerns: Dict[str, float] = Field(default_factory=dict)
    communication_style: CommunicationStyle = Field(default_factory=CommunicationStyle)
    learning_history: LearningHistory = Field(default_factory=LearningHistory)


# Session

class SessionState(BaseModel):
    """Short-term conversational context, advanced once per user turn"""
    phase: SessionPhase = SessionPhase.NORMAL
    dominant_emotions: List[EmotionCategory] = Field(default_factory=lambda: [EmotionCategory.NEUTRAL])
    recent_topics: List[str] = Field(default_factory=list)
    approach_used: List[TherapyApproach] = Field(default_factory=lambda: [TherapyApproach.SUPPORTIVE])
    question_types: List[str] = Field(default_factory=list)
    session_depth: int = Field(default=0, ge=0)
    last_question_type: str = "opening"
    user_insights: List[str] = Field(default_factory=list)
    user_profile: UserProfile = Field(default_factory=UserProfile)
    last_analysis: Optional[TextAnalysis] = None

    @property
    def crisis_detected(self) -> bool:
        return self.phase == SessionPhase.CRISIS

    @property
    def dominant_emotion(self) -> EmotionCategory:
        return self.dominant_emotions[0] if self.dominant_emotions else EmotionCategory.NEUTRAL


# Conversation log

class AnalysisSnapshot(BaseModel):
    """Slice of the turn analysis kept alongside the user message"""
    emotions: Dict[str, float] = Field(default_factory=dict)
    topics: List[str] = Field(default_factory=list)
    sentiment_score: float = 0.0
    sentiment_label: SentimentLabel = SentimentLabel.NEUTRAL

    @classmethod
    def from_analysis(cls, analysis: TextAnalysis) -> "AnalysisSnapshot":
        return cls(
            emotions=dict(analysis.emotions),
            topics=list(analysis.topics),
            sentiment_score=analysis.sentiment.score,
            sentiment_label=analysis.sentiment.label,
        )

class Message(BaseModel):
    """Individual message model"""
    role: MessageRole
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)
    analysis: Optional[AnalysisSnapshot] = None

class EmotionEntry(BaseModel):
    """One point of the mood history"""
    timestamp: datetime = Field(default_factory=datetime.now)
    emotions: Dict[str, float] = Field(default_factory=dict)
    note: Optional[str] = None


# Resources

class Resource(BaseModel):
    """Display-only resource card"""
    type: ResourceType
    content: str
    title: Optional[str] = None
    source: Optional[str] = None
    url: Optional[str] = None

class GeoLocation(BaseModel):
    country: str
    country_code: str
    region: Optional[str] = None
    city: Optional[str] = None
    timezone: Optional[str] = None

class CrisisContact(BaseModel):
    name: str
    description: str
    website: str
    phone: Optional[str] = None
    sms: Optional[str] = None
    chat: Optional[str] = None
    email: Optional[str] = None
    hours: Optional[str] = None
    languages: List[str] = Field(default_factory=list)

class CrisisResources(BaseModel):
    country: str
    emergency_number: str
    resources: List[CrisisContact] = Field(default_factory=list)


# Turn result

class JournalReply(BaseModel):
    """What the chat surface needs to render one assistant turn"""
    text: str
    typing_delay: float = 1.0
    resource: Optional[Resource] = None
    crisis_phrase: Optional[str] = None
    analysis: Optional[AnalysisSnapshot] = None
    session_depth: int = 0
