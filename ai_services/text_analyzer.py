import random
import re
from typing import Dict, List, Optional

from ai_services.lexicon import DEFAULT_LEXICON, Lexicon
from database.models import (
    Entity, EntityType, KeyPhrase, Sentiment, SentimentLabel, TextAnalysis
)


WORD_PATTERN = re.compile(r'\b\w+\b')
PROPER_NOUN_PATTERN = re.compile(r'\b[A-Z][a-z]+\b')
SENTENCE_SPLIT_PATTERN = re.compile(r'[.!?]+')

EMOTION_STEP = 0.2
MAX_ENTITIES = 5
MAX_KEY_PHRASES = 3


class TextAnalyzer:
    """Keyword-table analysis of a single journal entry.

    Everything except key-phrase scoring is a pure function of the text.
    Key phrases draw their relevance from ``rng`` so tests can seed it.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, rng: Optional[random.Random] = None):
        self.lexicon = lexicon
        self.rng = rng or random.Random()

    def analyze(self, text: str) -> TextAnalysis:
        """Perform the full analysis of one entry"""
        text = text or ""
        words = text.split()

        return TextAnalysis(
            sentiment=self.analyze_sentiment(text),
            entities=self.extract_entities(text),
            key_phrases=self.extract_key_phrases(text),
            token_count=len(words),
            complexity=max(0.0, self.complexity_score(text)),
            topics=self.extract_topics(text),
            emotions=self.detect_emotions(text),
        )

    def analyze_sentiment(self, text: str) -> Sentiment:
        """Score sentiment from positive/negative word counts"""
        words = WORD_PATTERN.findall(text.lower())

        positive_count = sum(1 for word in words if word in self.lexicon.positive_words)
        negative_count = sum(1 for word in words if word in self.lexicon.negative_words)
        intensifier_count = sum(1 for word in words if word in self.lexicon.intensifiers)

        total_sentiment_words = positive_count + negative_count
        if total_sentiment_words == 0:
            score = 0.0
        else:
            score = (positive_count - negative_count) / total_sentiment_words

        if words:
            magnitude = (total_sentiment_words / len(words)) * (1 + intensifier_count / len(words))
        else:
            magnitude = 0.0

        return Sentiment(score=score, magnitude=magnitude, label=self._sentiment_label(score))

    def _sentiment_label(self, score: float) -> SentimentLabel:
        if score <= -0.6:
            return SentimentLabel.VERY_NEGATIVE
        elif score <= -0.2:
            return SentimentLabel.NEGATIVE
        elif score >= 0.6:
            return SentimentLabel.VERY_POSITIVE
        elif score >= 0.2:
            return SentimentLabel.POSITIVE
        return SentimentLabel.NEUTRAL

    def detect_emotions(self, text: str) -> Dict[str, float]:
        """Add 0.2 per keyword found anywhere in the text, capped at 1.0"""
        lower_text = text.lower()
        emotions = {}

        for emotion, keywords in self.lexicon.emotion_keywords.items():
            intensity = 0.0
            for keyword in keywords:
                if keyword in lower_text:
                    intensity += EMOTION_STEP
            emotions[emotion] = min(intensity, 1.0)

        return emotions

    def extract_topics(self, text: str) -> List[str]:
        """Return every topic with at least one keyword in the text"""
        lower_text = text.lower()

        return [
            topic for topic, keywords in self.lexicon.topic_keywords.items()
            if any(keyword in lower_text for keyword in keywords)
        ]

    def complexity_score(self, text: str) -> float:
        """Blend of word and sentence length, capped at 1 but not floored.

        Short words or short sentences give negative values; ``analyze``
        floors the stored score at 0.
        """
        words = text.split()
        if not words:
            return 0.0

        avg_word_length = sum(len(word) for word in words) / len(words)
        sentences = self._split_sentences(text)
        avg_sentence_length = len(words) / (len(sentences) or 1)

        complexity = ((avg_word_length - 3) / 3) * 0.5 + ((avg_sentence_length - 5) / 15) * 0.5
        return min(complexity, 1.0)

    def extract_entities(self, text: str) -> List[Entity]:
        """Treat capitalised words as PERSON entities, ranked by mentions"""
        entities: Dict[str, Entity] = {}

        for noun in PROPER_NOUN_PATTERN.findall(text):
            key = noun.lower()
            existing = entities.get(key)
            if existing:
                existing.mentions += 1
                existing.salience = min(existing.salience + 0.1, 1.0)
            else:
                entities[key] = Entity(name=noun, type=EntityType.PERSON, salience=0.5, mentions=1)

        ranked = sorted(entities.values(), key=lambda entity: entity.mentions, reverse=True)
        return ranked[:MAX_ENTITIES]

    def extract_key_phrases(self, text: str) -> List[KeyPhrase]:
        """Keep medium-length sentences with a random relevance score"""
        phrases = []

        for sentence in self._split_sentences(text):
            if 3 <= len(sentence.split()) <= 10:
                phrases.append(KeyPhrase(phrase=sentence, score=0.5 + self.rng.random() * 0.3))

        phrases.sort(key=lambda phrase: phrase.score, reverse=True)
        return phrases[:MAX_KEY_PHRASES]

    def _split_sentences(self, text: str) -> List[str]:
        return [s.strip() for s in SENTENCE_SPLIT_PATTERN.split(text) if s.strip()]
