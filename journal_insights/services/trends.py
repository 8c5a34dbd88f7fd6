# trend insights — direction and volatility of a mood score series

import logging
from typing import List, Sequence

from journal_insights.models.insights import Insight, InsightType, TrendPoint

logger = logging.getLogger(__name__)

MIN_TREND_POINTS = 3
DIRECTION_THRESHOLD = 1
VOLATILE_THRESHOLD = 2
CONSISTENT_THRESHOLD = 0.5
MIN_CONSISTENT_POINTS = 6


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def score_shift(scores: Sequence[float]) -> float:
    """mean of the second half minus mean of the first half.
    odd lengths put the extra point in the second half."""
    middle = len(scores) // 2
    return _mean(scores[middle:]) - _mean(scores[:middle])


def volatility(scores: Sequence[float]) -> float:
    """mean absolute change between successive scores"""
    if len(scores) < 2:
        return 0.0
    changes = [abs(scores[i] - scores[i - 1]) for i in range(1, len(scores))]
    return sum(changes) / len(changes)


def generate_trend_insights(trends: Sequence[TrendPoint], period_days: int) -> List[Insight]:
    """classify a chronological trend series as improving, declining or stable,
    then flag strong fluctuation or unusual consistency"""
    if len(trends) < MIN_TREND_POINTS:
        return [Insight(
            type=InsightType.TREND_LIMITED,
            title="Limited trend data",
            description="Write more journal entries to see mood patterns over time.",
        )]

    scores = [t.score for t in trends]
    difference = score_shift(scores)
    insights = []

    if abs(difference) > DIRECTION_THRESHOLD:
        if difference > 0:
            insights.append(Insight(
                type=InsightType.TREND_DIRECTION,
                title="Your mood is improving",
                description=(
                    f"Over the past {period_days} days, your overall mood shows an upward "
                    "trend. Keep doing what you're doing!"
                ),
            ))
        else:
            insights.append(Insight(
                type=InsightType.TREND_DIRECTION,
                title="Your mood is declining",
                description=(
                    f"There's a downward trend in your mood over the past {period_days} days. "
                    "This might be a good time for self-care."
                ),
            ))
    else:
        insights.append(Insight(
            type=InsightType.TREND_STABLE,
            title="Your mood is relatively stable",
            description=f"Your mood has remained fairly consistent over the past {period_days} days.",
        ))

    spread = volatility(scores)
    if spread > VOLATILE_THRESHOLD:
        insights.append(Insight(
            type=InsightType.TREND_VOLATILITY,
            title="Your mood shows significant fluctuations",
            description=(
                "Your journal entries reveal notable mood swings. This emotional "
                "variability might be worth exploring."
            ),
        ))
    elif spread < CONSISTENT_THRESHOLD and len(trends) >= MIN_CONSISTENT_POINTS:
        insights.append(Insight(
            type=InsightType.TREND_CONSISTENCY,
            title="Your mood is very consistent",
            description="Your emotional state remains quite stable across your journal entries.",
        ))

    logger.debug(f"Trend shift={difference:.2f} volatility={spread:.2f} over {len(trends)} points")
    return insights
