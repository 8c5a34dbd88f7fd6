# lexicon scorer — word-level sentiment signal for the insight engine
# production scorer sums integer valences from the vader word lexicon
# the engine only depends on the LexiconScorer protocol, so tests pass fakes

import logging
import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from vaderSentiment.vaderSentiment import NEGATE, SentimentIntensityAnalyzer

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"[a-z0-9']+")


def round_valence(value: float) -> int:
    """round a vader valence half away from zero, so -2.5 scores -3 and 0.5 scores 1"""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class AnalysisFailed(Exception):
    """raised when the lexicon scorer cannot score a text"""


@dataclass(frozen=True)
class LexiconResult:
    score: int
    comparative: float
    positive_words: List[str] = field(default_factory=list)
    negative_words: List[str] = field(default_factory=list)


class LexiconScorer(Protocol):
    def score(self, text: str) -> LexiconResult:
        ...


class VaderLexiconScorer:
    """afinn-style scorer over the vader lexicon.
    each matched word contributes its valence rounded half away from zero,
    sign-flipped when the previous token is a negation."""

    def __init__(self, lexicon: Optional[dict] = None):
        if lexicon is None:
            lexicon = SentimentIntensityAnalyzer().lexicon
        self._lexicon = lexicon
        self._negations = {w.replace("'", "") for w in NEGATE}

    def score(self, text: str) -> LexiconResult:
        tokens = TOKEN_PATTERN.findall((text or "").lower())
        total = 0
        positive: List[str] = []
        negative: List[str] = []

        for i, token in enumerate(tokens):
            valence = round_valence(self._lexicon.get(token, 0))
            if valence == 0:
                continue
            if i > 0 and tokens[i - 1].replace("'", "") in self._negations:
                valence = -valence
            total += valence
            if valence > 0:
                positive.append(token)
            else:
                negative.append(token)

        comparative = total / len(tokens) if tokens else 0.0
        return LexiconResult(
            score=total,
            comparative=comparative,
            positive_words=positive,
            negative_words=negative,
        )


# process-wide default, the lexicon is loaded once on first use
_default_scorer: Optional[VaderLexiconScorer] = None


def get_default_scorer() -> VaderLexiconScorer:
    """lazy-load the vader lexicon scorer (once)."""
    global _default_scorer
    if _default_scorer is None:
        logger.info("Loading vader sentiment lexicon")
        _default_scorer = VaderLexiconScorer()
    return _default_scorer


def reset_default_scorer():
    """reset the default scorer (for testing)."""
    global _default_scorer
    _default_scorer = None
