# insights service — composes engine results into api responses
# pure: entries come in already fetched and filtered to one author

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from journal_insights.models.insights import (
    Insight,
    InsightType,
    InsightsSummaryResponse,
    JournalInsightsResponse,
    MoodTrendsResponse,
)
from journal_insights.models.journal import JournalEntry
from journal_insights.services.aggregator import (
    average_word_count,
    common_words,
    local_datetime,
    mood_distribution,
    mood_trends,
    streak_days,
)
from journal_insights.services.entry_analyzer import analyze_entry
from journal_insights.services.lexicon import LexiconScorer
from journal_insights.services.patterns import generate_pattern_insights
from journal_insights.services.trends import generate_trend_insights

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def format_entry_date(value: datetime) -> str:
    """short us-style date, e.g. 'Oct 9, 2026'"""
    local = local_datetime(value)
    return f"{MONTH_ABBREVIATIONS[local.month - 1]} {local.day}, {local.year}"


def build_entry_insights(entry: JournalEntry, scorer: LexiconScorer) -> JournalInsightsResponse:
    analysis = analyze_entry(entry.text, scorer)
    return JournalInsightsResponse(
        **analysis.model_dump(),
        journal_id=entry.id,
        date=entry.created_at,
    )


def build_summary(
    entries: Sequence[JournalEntry],
    scorer: LexiconScorer,
    today: Optional[date] = None,
) -> InsightsSummaryResponse:
    """summary across all of a user's entries, which must be newest first"""
    if not entries:
        return InsightsSummaryResponse(
            total_entries=0,
            message="No journal entries found",
            insights=[Insight(
                type=InsightType.EMPTY,
                title="Start your journaling journey",
                description="Write your first journal entry to receive personalized insights.",
            )],
        )

    latest = entries[0]
    latest_analysis = analyze_entry(latest.text, scorer)
    recent = Insight(
        type=InsightType.RECENT,
        title="From your most recent entry",
        description=(
            f"Your latest journal from {format_entry_date(latest.created_at)} shows a "
            f"{latest_analysis.mood.lower()} mood."
        ),
    )

    logger.info(f"Building insights summary over {len(entries)} entries")
    return InsightsSummaryResponse(
        total_entries=len(entries),
        mood_distribution=mood_distribution(entries, scorer),
        common_words=common_words(entries),
        average_word_count=average_word_count(entries),
        latest_mood=latest_analysis.mood,
        streak_days=streak_days(entries, today=today),
        insights=[recent, *generate_pattern_insights(entries, scorer)],
    )


def build_trend_report(
    entries: Sequence[JournalEntry],
    period_days: int,
    scorer: LexiconScorer,
) -> MoodTrendsResponse:
    """mood timeline for entries in the period, which must be oldest first"""
    if not entries:
        return MoodTrendsResponse(
            trends=[],
            period=period_days,
            message="No journal entries found for the selected period",
        )

    trends = mood_trends(entries, scorer)
    return MoodTrendsResponse(
        trends=trends,
        period=period_days,
        insights=generate_trend_insights(trends, period_days),
    )
