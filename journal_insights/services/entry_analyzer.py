# single-entry analyzer — mood, intensity, topics and insights for one journal entry
# pure function of the entry text plus the injected lexicon scorer

import logging
import re
from collections import Counter
from typing import List

from journal_insights.models.insights import EntryAnalysis, Insight, InsightType, Mood
from journal_insights.services.lexicon import AnalysisFailed, LexiconScorer

logger = logging.getLogger(__name__)

# mood thresholds on the raw lexicon score
POSITIVE_THRESHOLD = 2
NEGATIVE_THRESHOLD = -2
INTENSITY_SCALE = 5

MAX_KEY_WORDS = 5
MAX_TRIGGERS = 3
MAX_TOP_WORDS = 5
MIN_TOPIC_WORD_LENGTH = 4

TOPIC_STOP_WORDS = frozenset([
    "this", "that", "then", "than", "with", "would", "could", "should", "have", "what",
])

STRONG_INTENSITY = 0.7
MODERATE_INTENSITY = 0.3
MEASURED_INTENSITY = 0.3
LONG_SENTENCE_WORDS = 20
SHORT_SENTENCE_WORDS = 10


def format_list(words: List[str]) -> str:
    """quote and join words: "a", "a" and "b", "a", "b", and "c" """
    if not words:
        return ""
    if len(words) == 1:
        return f'"{words[0]}"'
    if len(words) == 2:
        return f'"{words[0]}" and "{words[1]}"'
    head = ", ".join(f'"{w}"' for w in words[:-1])
    return f'{head}, and "{words[-1]}"'


def classify_mood(score: int) -> Mood:
    if score > POSITIVE_THRESHOLD:
        return Mood.POSITIVE
    if score < NEGATIVE_THRESHOLD:
        return Mood.NEGATIVE
    return Mood.NEUTRAL


def topic_tokens(text: str) -> List[str]:
    """lower-cased word tokens longer than three chars, minus filler words"""
    return [
        word for word in re.split(r"\W+", text.lower())
        if len(word) >= MIN_TOPIC_WORD_LENGTH and word not in TOPIC_STOP_WORDS
    ]


def top_words(tokens: List[str], limit: int = MAX_TOP_WORDS) -> List[str]:
    # counter keeps first-seen order and most_common sorts stably
    return [word for word, _ in Counter(tokens).most_common(limit)]


def _sentence_count(text: str) -> int:
    return len([s for s in re.split(r"[.!?]+", text) if s.strip()])


def _mood_description(mood: Mood, intensity: float) -> str:
    if intensity > STRONG_INTENSITY:
        degree = "strongly"
    elif intensity > MODERATE_INTENSITY:
        degree = "moderately"
    else:
        degree = "mildly"

    if mood == Mood.POSITIVE:
        return (
            f"You express yourself in a {degree} positive way. This suggests you're "
            "experiencing events or thoughts that bring you joy or satisfaction."
        )
    if mood == Mood.NEGATIVE:
        return (
            f"Your writing reflects a {degree} negative perspective. This may indicate "
            "challenges or concerns you're currently processing."
        )
    return (
        "Your writing has a balanced, neutral tone. This could reflect either mixed "
        "emotions or a thoughtful, measured approach to your experiences."
    )


def _topics_description(mood: Mood, words: List[str]) -> str:
    if mood == Mood.POSITIVE:
        tail = "These topics appear to bring positive energy to your writing."
    elif mood == Mood.NEGATIVE:
        tail = "Consider how these topics affect your emotional state."
    else:
        tail = "Your perspective on these topics appears balanced."
    return f"You focused on topics like {format_list(words)}. {tail}"


def _build_insights(
    mood: Mood,
    intensity: float,
    words: List[str],
    positive: List[str],
    negative: List[str],
    avg_sentence_length: float,
) -> List[Insight]:
    insights = [
        Insight(
            type=InsightType.MOOD,
            title=f"Your writing reflects a {mood.value.lower()} mood",
            description=_mood_description(mood, intensity),
        )
    ]

    if words:
        insights.append(Insight(
            type=InsightType.TOPICS,
            title="Main topics in your writing",
            description=_topics_description(mood, words),
        ))

    if negative and mood == Mood.NEGATIVE:
        insights.append(Insight(
            type=InsightType.TRIGGERS,
            title="Potential emotional triggers",
            description=(
                f"Words like {format_list(negative[:MAX_TRIGGERS])} suggest possible sources "
                "of concern. Recognizing these triggers is the first step toward addressing them."
            ),
        ))

    if positive:
        insights.append(Insight(
            type=InsightType.STRENGTHS,
            title="Positive elements in your writing",
            description=(
                f"Terms like {format_list(positive[:3])} highlight positive aspects that "
                "you might want to focus on more."
            ),
        ))

    if avg_sentence_length > LONG_SENTENCE_WORDS:
        insights.append(Insight(
            type=InsightType.STYLE,
            title="Writing style observation",
            description=(
                "You tend to write in longer, more complex sentences, which suggests "
                "detailed thinking about your experiences."
            ),
        ))
    elif avg_sentence_length < SHORT_SENTENCE_WORDS:
        insights.append(Insight(
            type=InsightType.STYLE,
            title="Writing style observation",
            description=(
                "Your writing style is concise and direct, focusing on key points rather "
                "than elaborate descriptions."
            ),
        ))

    if intensity > STRONG_INTENSITY:
        insights.append(Insight(
            type=InsightType.INTENSITY,
            title="Strong emotional expression",
            description=(
                "Your writing contains strong emotional language, suggesting these "
                "experiences have significant impact on you."
            ),
        ))
    elif intensity < MEASURED_INTENSITY:
        insights.append(Insight(
            type=InsightType.INTENSITY,
            title="Measured expression",
            description=(
                "You express yourself in a measured, moderate way, which may reflect "
                "careful consideration of your experiences."
            ),
        ))

    return insights


def analyze_entry(text: str, scorer: LexiconScorer) -> EntryAnalysis:
    """analyze one journal entry.
    blank text yields the Unknown analysis instead of an error.
    intensity is |score| / 5 and is not clamped, so it can exceed 1.
    raises AnalysisFailed if the scorer fails."""
    if not text or not text.strip():
        return EntryAnalysis(mood=Mood.UNKNOWN)

    try:
        result = scorer.score(text)
    except Exception as e:
        raise AnalysisFailed(f"Lexicon scoring failed: {e}") from e

    positive = list(result.positive_words)
    negative = list(result.negative_words)
    mood = classify_mood(result.score)
    intensity = abs(result.score) / INTENSITY_SCALE

    tokens = topic_tokens(text)
    words = top_words(tokens)
    avg_sentence_length = len(tokens) / (_sentence_count(text) or 1)

    logger.debug(f"Analyzed entry: score={result.score} mood={mood.value} tokens={len(tokens)}")

    return EntryAnalysis(
        mood=mood,
        score=result.score,
        intensity=intensity,
        key_words=(positive + negative)[:MAX_KEY_WORDS],
        possible_triggers=negative[:MAX_TRIGGERS],
        top_words=words,
        word_count=len(text.split()),
        insights=_build_insights(mood, intensity, words, positive, negative, avg_sentence_length),
        comparative=result.comparative,
        positive_words=positive,
        negative_words=negative,
    )
