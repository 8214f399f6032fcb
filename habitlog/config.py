import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings:
    APP_TITLE: str = os.getenv("APP_TITLE", "Habit Tracker")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./db/habits.sqlite")
    AUTO_CREATE_SCHEMA: bool = os.getenv("AUTO_CREATE_SCHEMA", "1") == "1"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "").strip()
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "").strip()
    CORS_ORIGINS: list[str] = [
        item.strip()
        for item in os.getenv("CORS_ORIGINS", "*").split(",")
        if item.strip()
    ]


settings = Settings()
