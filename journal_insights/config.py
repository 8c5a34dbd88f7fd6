# insights api settings — mongo location, the shared jwt secret for verifying
# tokens issued elsewhere, the frontend origin, and the mood trend windows

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # mongodb
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "journal_insights")

    # jwt verification (tokens are issued by the auth service)
    JWT_SECRET: str = os.getenv("JWT_SECRET", "journal-insights-dev-secret-change-in-production")
    JWT_ALGORITHM: str = "HS256"

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # mood trend windows, in days
    DEFAULT_TREND_PERIOD_DAYS: int = 30
    MAX_TREND_PERIOD_DAYS: int = 365

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
