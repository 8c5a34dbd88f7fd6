# insight models — per-entry analysis, trend points, and summary schemas
# field aliases are the camelCase names the frontend consumes

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Mood(str, Enum):
    """mood classes in declaration order, which breaks ties"""
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    UNKNOWN = "Unknown"


class InsightType(str, Enum):
    """closed vocabulary of insight tags used for ui categorization"""
    # single entry
    MOOD = "mood"
    TOPICS = "topics"
    TRIGGERS = "triggers"
    STRENGTHS = "strengths"
    STYLE = "style"
    INTENSITY = "intensity"

    # cross-entry patterns
    GENERAL = "general"
    PATTERN_MOOD = "pattern_mood"
    PATTERN_TIME = "pattern_time"
    PATTERN_DAY = "pattern_day"
    PATTERN_TOPICS = "pattern_topics"
    PATTERN_POSITIVE_TRIGGERS = "pattern_positive_triggers"
    PATTERN_NEGATIVE_TRIGGERS = "pattern_negative_triggers"
    PATTERN_MOOD_SWINGS = "pattern_mood_swings"

    # trends
    TREND_LIMITED = "trend_limited"
    TREND_DIRECTION = "trend_direction"
    TREND_STABLE = "trend_stable"
    TREND_VOLATILITY = "trend_volatility"
    TREND_CONSISTENCY = "trend_consistency"

    # summary
    RECENT = "recent"
    EMPTY = "empty"


class Insight(BaseModel):
    """one narrative observation"""
    type: InsightType
    title: str
    description: str

    model_config = {"frozen": True, "use_enum_values": True}


class EntryAnalysis(BaseModel):
    """analysis of a single journal entry, a pure function of its text"""
    mood: Mood
    score: int = 0
    intensity: float = 0.0
    key_words: list[str] = Field(default_factory=list, alias="keyWords")
    possible_triggers: list[str] = Field(default_factory=list, alias="possibleTriggers")
    top_words: list[str] = Field(default_factory=list, alias="topWords")
    word_count: int = Field(0, alias="wordCount")
    insights: list[Insight] = Field(default_factory=list)

    # raw scorer signal
    comparative: float = 0.0
    positive_words: list[str] = Field(default_factory=list, alias="positiveWords")
    negative_words: list[str] = Field(default_factory=list, alias="negativeWords")

    model_config = {"populate_by_name": True, "frozen": True, "use_enum_values": True}


class TrendPoint(BaseModel):
    """one entry's position on the mood timeline"""
    date: datetime
    mood: Mood
    score: int
    intensity: float

    model_config = {"frozen": True, "use_enum_values": True}


class MoodDistribution(BaseModel):
    """entry counts per mood, counts sum to the number of entries"""
    positive: int = Field(0, alias="Positive")
    negative: int = Field(0, alias="Negative")
    neutral: int = Field(0, alias="Neutral")
    unknown: int = Field(0, alias="Unknown")

    model_config = {"populate_by_name": True}


class WordCount(BaseModel):
    word: str
    count: int


class JournalInsightsResponse(EntryAnalysis):
    """analysis of one stored journal entry"""
    journal_id: str = Field(..., alias="journalId")
    date: datetime


class InsightsSummaryResponse(BaseModel):
    """insights across a user's whole journal history"""
    total_entries: int = Field(0, alias="totalEntries")
    message: Optional[str] = None
    mood_distribution: Optional[MoodDistribution] = Field(None, alias="moodDistribution")
    common_words: list[WordCount] = Field(default_factory=list, alias="commonWords")
    average_word_count: int = Field(0, alias="averageWordCount")
    latest_mood: Optional[Mood] = Field(None, alias="latestMood")
    streak_days: int = Field(0, alias="streakDays")
    insights: list[Insight] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "use_enum_values": True}


class MoodTrendsResponse(BaseModel):
    """mood timeline for a recent period"""
    trends: list[TrendPoint] = Field(default_factory=list)
    period: int
    message: Optional[str] = None
    insights: list[Insight] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
