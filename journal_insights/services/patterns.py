# pattern insights — recurring topics, time-of-day and day-of-week moods,
# mood triggers and day-to-day mood transitions across journal entries

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from journal_insights.models.insights import Insight, InsightType, Mood
from journal_insights.models.journal import JournalEntry
from journal_insights.services.aggregator import local_datetime, round_half_up
from journal_insights.services.entry_analyzer import analyze_entry, format_list
from journal_insights.services.lexicon import LexiconScorer

logger = logging.getLogger(__name__)

MIN_PATTERN_ENTRIES = 2
MIN_TIME_OF_DAY_ENTRIES = 3
MIN_DAY_OF_WEEK_ENTRIES = 2
MIN_RECURRING_TOPICS = 2
MAX_RECURRING_TOPICS = 3
MAX_MOOD_TOPICS = 2
MIN_TRANSITIONS = 3
MIN_DIRECTIONAL_TRANSITIONS = 2
SECONDS_PER_DAY = 24 * 60 * 60

TIMES_OF_DAY = ["morning", "afternoon", "evening", "night"]
# sunday first, matching the 0=sunday day index
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
MOOD_ORDER = [Mood.POSITIVE.value, Mood.NEGATIVE.value, Mood.NEUTRAL.value, Mood.UNKNOWN.value]


@dataclass(frozen=True)
class BucketSummary:
    """dominant mood of a time bucket"""
    name: str
    dominant_mood: str
    percentage: int
    count: int


def time_of_day(hour: int) -> str:
    if 5 <= hour < 12:
        return "morning"
    if 12 <= hour < 17:
        return "afternoon"
    if 17 <= hour < 22:
        return "evening"
    return "night"


def day_of_week(weekday: int) -> int:
    """python monday=0 weekday to a sunday=0 index"""
    return (weekday + 1) % 7


def _dominant(counts: Dict[str, int]) -> str:
    """most frequent mood, Unknown only when no entry has readable text.
    max returns the first of equal counts, so dict order breaks ties."""
    readable = {mood: n for mood, n in counts.items() if n and mood != Mood.UNKNOWN.value}
    if not readable:
        return Mood.UNKNOWN.value
    return max(readable, key=readable.get)


def _summarize(name: str, moods: List[str]) -> Optional[BucketSummary]:
    if not moods:
        return None
    counts = Counter(moods)
    dominant = _dominant(counts)
    return BucketSummary(
        name=name,
        dominant_mood=dominant,
        percentage=round_half_up(counts[dominant] / len(moods) * 100),
        count=len(moods),
    )


def _busiest(buckets: List[BucketSummary]) -> Optional[BucketSummary]:
    if not buckets:
        return None
    return max(buckets, key=lambda b: b.count)


def _top(counts: Counter, limit: int) -> List[str]:
    return [word for word, _ in counts.most_common(limit)]


def _day_difference(first: JournalEntry, second: JournalEntry) -> int:
    seconds = (first.created_at - second.created_at).total_seconds()
    return round_half_up(seconds / SECONDS_PER_DAY)


def _dominant_mood_insight(mood_counts: Dict[str, int], total: int) -> Insight:
    dominant = _dominant(mood_counts)
    percentage = round_half_up(mood_counts[dominant] / total * 100)
    if dominant == Mood.UNKNOWN.value:
        return Insight(
            type=InsightType.PATTERN_MOOD,
            title="Your dominant mood is unclear",
            description=(
                f"{percentage}% of your journal entries are blank, so no mood could be "
                "identified. Writing a few sentences in each entry will help reveal your patterns."
            ),
        )
    if dominant == Mood.POSITIVE.value:
        tail = "This suggests you generally maintain a positive outlook."
    elif dominant == Mood.NEGATIVE.value:
        tail = "This might indicate ongoing challenges that deserve attention."
    else:
        tail = "This balanced perspective may reflect thoughtful processing of your experiences."
    return Insight(
        type=InsightType.PATTERN_MOOD,
        title=f"Your dominant mood is {dominant}",
        description=f"{percentage}% of your journal entries reflect a {dominant.lower()} mood. {tail}",
    )


def _transition_insight(transitions: List[Tuple[str, str]]) -> Optional[Insight]:
    if len(transitions) < MIN_TRANSITIONS:
        return None

    counts = Counter(transitions)
    pos_to_neg = counts[(Mood.POSITIVE.value, Mood.NEGATIVE.value)]
    neg_to_pos = counts[(Mood.NEGATIVE.value, Mood.POSITIVE.value)]

    if pos_to_neg > neg_to_pos and pos_to_neg >= MIN_DIRECTIONAL_TRANSITIONS:
        return Insight(
            type=InsightType.PATTERN_MOOD_SWINGS,
            title="Mood recovery pattern observed",
            description=(
                "Your mood tends to shift from positive to negative more often than the "
                "reverse. This may suggest sensitivity to setbacks."
            ),
        )
    if neg_to_pos > pos_to_neg and neg_to_pos >= MIN_DIRECTIONAL_TRANSITIONS:
        return Insight(
            type=InsightType.PATTERN_MOOD_SWINGS,
            title="Resilience pattern observed",
            description=(
                "You often bounce back from negative moods to positive ones. This suggests "
                "good emotional resilience."
            ),
        )
    return None


def generate_pattern_insights(entries: Sequence[JournalEntry], scorer: LexiconScorer) -> List[Insight]:
    """mine cross-entry patterns into an ordered list of insights.
    order: dominant mood, time of day, best day, worst day, recurring topics,
    positive topics, negative topics, mood swings. each is skipped when its
    condition is not met.

    transitions pair each entry with the next one in input order; with entries
    newest first the next entry is the earlier day and is the "from" mood."""
    if len(entries) < MIN_PATTERN_ENTRIES:
        return [Insight(
            type=InsightType.GENERAL,
            title="Not enough entries for pattern analysis",
            description="Write more journal entries to receive pattern insights.",
        )]

    analyses = [analyze_entry(e.text, scorer) for e in entries]

    mood_counts: Dict[str, int] = {mood: 0 for mood in MOOD_ORDER}
    time_moods: Dict[str, List[str]] = {name: [] for name in TIMES_OF_DAY}
    day_moods: List[List[str]] = [[] for _ in DAY_NAMES]
    topic_counts: Counter = Counter()
    mood_topics: Dict[str, Counter] = {mood: Counter() for mood in MOOD_ORDER}
    transitions: List[Tuple[str, str]] = []

    for index, (entry, analysis) in enumerate(zip(entries, analyses)):
        created = local_datetime(entry.created_at)
        mood = analysis.mood

        mood_counts[mood] += 1
        time_moods[time_of_day(created.hour)].append(mood)
        day_moods[day_of_week(created.weekday())].append(mood)
        topic_counts.update(analysis.top_words)
        mood_topics[mood].update(analysis.top_words)

        if index < len(entries) - 1:
            following = entries[index + 1]
            if abs(_day_difference(entry, following)) == 1:
                transitions.append((analyses[index + 1].mood, mood))

    insights = [_dominant_mood_insight(mood_counts, len(entries))]

    # time of day
    busiest_time = _busiest([
        s for s in (_summarize(name, time_moods[name]) for name in TIMES_OF_DAY) if s
    ])
    if busiest_time and busiest_time.count >= MIN_TIME_OF_DAY_ENTRIES:
        if busiest_time.dominant_mood == Mood.UNKNOWN.value:
            description = (
                f"You tend to write in the {busiest_time.name}, but these entries are blank "
                "so no mood could be identified."
            )
        else:
            description = (
                f"You tend to write in the {busiest_time.name} and your mood during this "
                f"time is usually {busiest_time.dominant_mood.lower()} "
                f"({busiest_time.percentage}% of entries)."
            )
        insights.append(Insight(
            type=InsightType.PATTERN_TIME,
            title=f"You journal most often in the {busiest_time.name}",
            description=description,
        ))

    # day of week
    days = [s for s in (_summarize(DAY_NAMES[i], day_moods[i]) for i in range(len(DAY_NAMES))) if s]
    best_day = _busiest([d for d in days if d.dominant_mood == Mood.POSITIVE.value])
    worst_day = _busiest([d for d in days if d.dominant_mood == Mood.NEGATIVE.value])

    if best_day and best_day.count >= MIN_DAY_OF_WEEK_ENTRIES:
        insights.append(Insight(
            type=InsightType.PATTERN_DAY,
            title=f"{best_day.name} seems to be your best day",
            description=f"Your journal entries on {best_day.name}s tend to be more positive than other days.",
        ))

    if worst_day and worst_day.count >= MIN_DAY_OF_WEEK_ENTRIES:
        insights.append(Insight(
            type=InsightType.PATTERN_DAY,
            title=f"{worst_day.name} appears to be more challenging",
            description=f"You tend to express more negative feelings in your journal entries on {worst_day.name}s.",
        ))

    # topics
    recurring = _top(topic_counts, MAX_RECURRING_TOPICS)
    if len(recurring) >= MIN_RECURRING_TOPICS:
        insights.append(Insight(
            type=InsightType.PATTERN_TOPICS,
            title="Recurring topics in your journal",
            description=(
                f"You frequently write about {format_list(recurring)}. These recurring themes "
                "may represent important aspects of your life."
            ),
        ))

    positive_topics = _top(mood_topics[Mood.POSITIVE.value], MAX_MOOD_TOPICS)
    if positive_topics:
        insights.append(Insight(
            type=InsightType.PATTERN_POSITIVE_TRIGGERS,
            title="Topics linked to positive moods",
            description=(
                f"When you write about {format_list(positive_topics)}, your entries tend to be "
                "more positive. These topics might boost your mood."
            ),
        ))

    negative_topics = _top(mood_topics[Mood.NEGATIVE.value], MAX_MOOD_TOPICS)
    if negative_topics:
        insights.append(Insight(
            type=InsightType.PATTERN_NEGATIVE_TRIGGERS,
            title="Topics linked to negative moods",
            description=(
                f"Writing about {format_list(negative_topics)} often appears in your more "
                "negative entries. Being aware of these triggers can help manage their impact."
            ),
        ))

    swing = _transition_insight(transitions)
    if swing:
        insights.append(swing)

    logger.debug(f"Generated {len(insights)} pattern insights from {len(entries)} entries")
    return insights
