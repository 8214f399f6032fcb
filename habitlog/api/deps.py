from datetime import date, datetime
from typing import Generator
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from habitlog.config import settings
from habitlog.db import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_today() -> date:
    if settings.APP_TIMEZONE:
        return datetime.now(ZoneInfo(settings.APP_TIMEZONE)).date()
    return date.today()
