# insights router — per-entry analysis, history summary, and mood trends
# users only ever see insights for their own journal entries

import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from bson import ObjectId
from bson.errors import InvalidId

from journal_insights.config import settings
from journal_insights.dependencies import get_current_user, get_scorer
from journal_insights.models.insights import (
    InsightsSummaryResponse,
    JournalInsightsResponse,
    MoodTrendsResponse,
)
from journal_insights.models.journal import JournalEntry
from journal_insights.services.db import Database, get_db
from journal_insights.services.insights_service import (
    build_entry_insights,
    build_summary,
    build_trend_report,
)
from journal_insights.services.lexicon import AnalysisFailed, LexiconScorer

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/insights", tags=["insights"])


def _doc_to_entry(doc: dict) -> JournalEntry:
    """convert a mongodb journals document to the engine's entry model"""
    return JournalEntry(
        id=str(doc["_id"]),
        authorId=str(doc.get("author_id", "")),
        text=doc.get("content") or "",
        createdAt=doc["created_at"],
    )


async def _find_entries(db: Database, query: dict, direction: int) -> list[JournalEntry]:
    cursor = db.journals.find(query).sort("created_at", direction)
    return [_doc_to_entry(doc) async for doc in cursor]


def _analysis_failed(e: AnalysisFailed, what: str) -> HTTPException:
    logger.error(f"Error getting {what}: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Error retrieving {what}",
    )


@router.get("/journal/{journal_id}", response_model=JournalInsightsResponse)
async def get_journal_insights(
    journal_id: str,
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    scorer: LexiconScorer = Depends(get_scorer),
):
    """analyze a single journal entry owned by the current user"""
    try:
        doc = await db.journals.find_one({"_id": ObjectId(journal_id), "author_id": current_user["id"]})
    except InvalidId:
        doc = None

    if not doc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal not found",
        )

    try:
        return build_entry_insights(_doc_to_entry(doc), scorer)
    except AnalysisFailed as e:
        raise _analysis_failed(e, "insights")


@router.get("/summary", response_model=InsightsSummaryResponse)
async def get_insights_summary(
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    scorer: LexiconScorer = Depends(get_scorer),
):
    """insights across all of the current user's entries"""
    entries = await _find_entries(db, {"author_id": current_user["id"]}, -1)
    logger.info(f"Summarizing {len(entries)} journal entries for user {current_user['id']}")

    try:
        return build_summary(entries, scorer)
    except AnalysisFailed as e:
        raise _analysis_failed(e, "insights summary")


@router.get("/trends", response_model=MoodTrendsResponse)
async def get_mood_trends(
    period: int = Query(settings.DEFAULT_TREND_PERIOD_DAYS, ge=1, le=settings.MAX_TREND_PERIOD_DAYS),
    current_user: dict = Depends(get_current_user),
    db: Database = Depends(get_db),
    scorer: LexiconScorer = Depends(get_scorer),
):
    """mood timeline and trend insights for the last `period` days"""
    start = datetime.now(timezone.utc) - timedelta(days=period)
    entries = await _find_entries(
        db, {"author_id": current_user["id"], "created_at": {"$gte": start}}, 1
    )

    try:
        return build_trend_report(entries, period, scorer)
    except AnalysisFailed as e:
        raise _analysis_failed(e, "mood trends")
