# collection aggregator — distribution, trend series, word ranking and streaks
# across a user's journal entries

import logging
import math
import re
from collections import Counter
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence

from journal_insights.models.insights import Mood, MoodDistribution, TrendPoint, WordCount
from journal_insights.models.journal import JournalEntry
from journal_insights.services.entry_analyzer import analyze_entry
from journal_insights.services.lexicon import LexiconScorer

logger = logging.getLogger(__name__)

COMMON_WORDS_LIMIT = 10
MIN_COMMON_WORD_LENGTH = 4

COMMON_STOP_WORDS = frozenset([
    "the", "and", "a", "to", "of", "in", "that", "is", "was", "for",
    "with", "this", "on", "my", "it", "at", "be", "have", "had", "were",
    "are", "but", "not", "they", "from", "has", "by", "an", "as", "me",
    "their", "i", "am", "been", "being", "do", "does", "did",
    "doing", "very", "just", "should", "would", "could", "can",
])

_DISTRIBUTION_FIELDS = {
    Mood.POSITIVE: "positive",
    Mood.NEGATIVE: "negative",
    Mood.NEUTRAL: "neutral",
    Mood.UNKNOWN: "unknown",
}


def local_datetime(value: datetime) -> datetime:
    """aware datetimes are converted to local time, naive ones are already local"""
    if value.tzinfo is not None:
        return value.astimezone()
    return value


def local_date(value: datetime) -> date:
    return local_datetime(value).date()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def mood_distribution(entries: Sequence[JournalEntry], scorer: LexiconScorer) -> MoodDistribution:
    """count entries per mood. blank entries land in the Unknown bucket."""
    counts = Counter(analyze_entry(e.text, scorer).mood for e in entries)
    return MoodDistribution(**{
        name: counts.get(mood.value, 0) for mood, name in _DISTRIBUTION_FIELDS.items()
    })


def mood_trends(entries: Sequence[JournalEntry], scorer: LexiconScorer) -> List[TrendPoint]:
    """one trend point per entry, in input order"""
    points = []
    for entry in entries:
        analysis = analyze_entry(entry.text, scorer)
        points.append(TrendPoint(
            date=entry.created_at,
            mood=analysis.mood,
            score=analysis.score,
            intensity=analysis.intensity,
        ))
    return points


def common_words(entries: Sequence[JournalEntry], limit: int = COMMON_WORDS_LIMIT) -> List[WordCount]:
    """most frequent content words across all entries, ties in first-seen order"""
    counts: Counter = Counter()
    for entry in entries:
        cleaned = re.sub(r"[^\w\s]", "", (entry.text or "").lower())
        counts.update(
            word for word in cleaned.split()
            if len(word) >= MIN_COMMON_WORD_LENGTH and word not in COMMON_STOP_WORDS
        )
    return [WordCount(word=word, count=count) for word, count in counts.most_common(limit)]


def average_word_count(entries: Sequence[JournalEntry]) -> int:
    if not entries:
        return 0
    total = sum(len((e.text or "").split()) for e in entries)
    return round_half_up(total / len(entries))


def streak_days(entries: Sequence[JournalEntry], today: Optional[date] = None) -> int:
    """consecutive calendar days with an entry, ending today.
    expects entries newest first. the streak is 0 unless the newest entry is from today;
    same-day duplicates after the first entry end the walk."""
    if not entries:
        return 0

    today = today or datetime.now().date()
    current = local_date(entries[0].created_at)
    if current != today:
        return 0

    streak = 1
    for entry in entries[1:]:
        entry_day = local_date(entry.created_at)
        if entry_day != current - timedelta(days=1):
            break
        streak += 1
        current = entry_day

    logger.debug(f"Streak of {streak} days over {len(entries)} entries")
    return streak
