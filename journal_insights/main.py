# insights api — read-only fastapi service that analyzes a user's stored journal
# entries into mood, topic, pattern and trend insights

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from journal_insights.config import settings
from journal_insights.services.db import db
from journal_insights.routers import insights

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: connect to mongodb. shutdown: close connection."""
    logger.info("Starting journal insights api...")
    await db.connect()
    logger.info("Journal insights api ready")
    yield
    logger.info("Shutting down journal insights api...")
    await db.close()


app = FastAPI(
    title="Journal Insights API",
    description="Mood, topic, pattern and trend insights over a user's journal entries",
    version="0.1.0",
    lifespan=lifespan,
)

# cors, allow the frontend origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(insights.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "journal-insights-api"}
