# shared fixtures for the insights test suite
# provides a fake lexicon scorer, entry factory, mock db, and httpx test clients

import re
from datetime import datetime, timezone, timedelta

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from journal_insights.main import app
from journal_insights.models.journal import JournalEntry
from journal_insights.services.db import get_db
from journal_insights.services.lexicon import LexiconResult
from journal_insights.dependencies import get_current_user, get_scorer


# test ids, fixed so tests importing tests.conftest see the same values
USER_OID = ObjectId("64b000000000000000000001")
OTHER_USER_OID = ObjectId("64b000000000000000000002")
USER_ID = str(USER_OID)
OTHER_USER_ID = str(OTHER_USER_OID)

USER_DOC = {
    "_id": USER_OID,
    "email": "alex.rivera@email.com",
    "name": "Alex Rivera",
}

OTHER_USER_DOC = {
    "_id": OTHER_USER_OID,
    "email": "jordan.kim@email.com",
    "name": "Jordan Kim",
}


# fake lexicon: integer valences so every score in the tests is exact

FAKE_LEXICON = {
    "happy": 3, "great": 3, "love": 3, "wonderful": 4, "good": 2,
    "calm": 2, "proud": 2, "grateful": 2,
    "sad": -2, "tired": -2, "stressed": -2, "lonely": -2, "anxious": -2,
    "worried": -2, "awful": -3, "angry": -3, "terrible": -3, "hate": -3,
}


class FakeScorer:
    """sums FAKE_LEXICON valences word by word"""

    def __init__(self, lexicon=None):
        self.lexicon = lexicon or FAKE_LEXICON
        self.calls = 0

    def score(self, text):
        self.calls += 1
        tokens = re.findall(r"[a-z']+", text.lower())
        positive, negative, total = [], [], 0
        for token in tokens:
            value = self.lexicon.get(token, 0)
            total += value
            if value > 0:
                positive.append(token)
            elif value < 0:
                negative.append(token)
        return LexiconResult(
            score=total,
            comparative=total / len(tokens) if tokens else 0.0,
            positive_words=positive,
            negative_words=negative,
        )


class FailingScorer:
    """a scorer whose lexicon backend is broken"""

    def score(self, text):
        raise RuntimeError("lexicon unavailable")


@pytest.fixture
def scorer():
    return FakeScorer()


@pytest.fixture
def failing_scorer():
    return FailingScorer()


@pytest.fixture
def make_entry():
    """factory for journal entries, naive datetimes are local time"""
    counter = {"n": 0}

    def _make(text, created_at, author_id=USER_ID):
        counter["n"] += 1
        return JournalEntry(
            id=f"entry_{counter['n']:03d}",
            authorId=author_id,
            text=text,
            createdAt=created_at,
        )

    return _make


# sample journal documents (as they'd appear from mongodb)

def _now():
    return datetime.now(timezone.utc)


def sample_journals():
    """journals for the test user, created relative to now, plus one for another user"""
    now = _now()
    return [
        {
            "_id": ObjectId("64c000000000000000000001"),
            "author_id": USER_ID,
            "content": "I feel happy and proud today. Work was great.",
            "created_at": now - timedelta(minutes=5),
        },
        {
            "_id": ObjectId("64c000000000000000000002"),
            "author_id": USER_ID,
            "content": "Work was awful and I am so stressed and tired.",
            "created_at": now - timedelta(days=1),
        },
        {
            "_id": ObjectId("64c000000000000000000003"),
            "author_id": USER_ID,
            "content": "A quiet walk in the garden after work.",
            "created_at": now - timedelta(days=2),
        },
        {
            "_id": ObjectId("64c000000000000000000004"),
            "author_id": USER_ID,
            "content": "Old entry about the garden and a wonderful holiday.",
            "created_at": now - timedelta(days=90),
        },
        {
            "_id": ObjectId("64c000000000000000000005"),
            "author_id": OTHER_USER_ID,
            "content": "Someone else's private thoughts about a terrible day.",
            "created_at": now - timedelta(days=1),
        },
    ]


# async cursor mock

class AsyncCursorMock:
    """mock for motor's async cursor, supports async for and sort"""

    def __init__(self, data=None):
        self._data = list(data or [])
        self._index = 0

    def sort(self, key, direction=1):
        self._data.sort(key=lambda d: d[key], reverse=direction == -1)
        return self

    def __aiter__(self):
        self._index = 0
        return self

    async def __anext__(self):
        if self._index >= len(self._data):
            raise StopAsyncIteration
        item = self._data[self._index]
        self._index += 1
        return item

    async def to_list(self, length=None):
        if length is not None:
            return self._data[:length]
        return self._data


class MockCollection:
    """mock for a motor collection with async methods"""

    def __init__(self, data=None):
        self._data = data or []

    def find(self, query=None, projection=None):
        results = self._data
        if query:
            results = [d for d in results if self._matches(d, query)]
        return AsyncCursorMock(results)

    async def find_one(self, query=None, projection=None):
        if not query:
            return self._data[0] if self._data else None
        for doc in self._data:
            if self._matches(doc, query):
                return doc
        return None

    def _matches(self, doc, query):
        """basic mongodb query matching for tests"""
        for key, value in query.items():
            doc_val = doc.get(key)
            if isinstance(value, dict):
                if "$gte" in value:
                    if doc_val is None or doc_val < value["$gte"]:
                        return False
            elif doc_val != value:
                return False
        return True


class MockDatabase:
    """mock database that mimics the Database class"""

    def __init__(self, journals=None):
        self.users = MockCollection([USER_DOC.copy(), OTHER_USER_DOC.copy()])
        self.journals = MockCollection(sample_journals() if journals is None else journals)

    async def connect(self):
        pass

    async def close(self):
        pass


@pytest.fixture
def mock_db():
    """create a fresh mock database for each test"""
    return MockDatabase()


def _user_dict():
    """return user dict as get_current_user would return"""
    doc = USER_DOC.copy()
    doc["id"] = USER_ID
    del doc["_id"]
    return doc


@pytest_asyncio.fixture
async def client(mock_db, scorer):
    """httpx async test client with real jwt auth against the mock db"""

    async def override_get_db():
        return mock_db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_scorer] = lambda: scorer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user_client(mock_db, scorer):
    """client authenticated as the test user"""

    async def override_get_db():
        return mock_db

    async def override_get_current_user():
        return _user_dict()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_current_user] = override_get_current_user
    app.dependency_overrides[get_scorer] = lambda: scorer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
