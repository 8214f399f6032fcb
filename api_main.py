import logging

from fastapi import FastAPI
from sqlalchemy import text
from fastapi.middleware.cors import CORSMiddleware

from habitlog.api import router
from habitlog.config import settings
from habitlog.db import engine
from habitlog.logging_config import setup_logging
from habitlog.models import Base

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS if settings.CORS_ORIGINS else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/health/live")
def health_live() -> dict[str, str]:
    return {"status": "alive"}


@app.get("/health/ready")
def health_ready() -> dict[str, str]:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ready"}


@app.on_event("startup")
def on_startup() -> None:
    if settings.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)
        logger.info("Schema ensured on %s", engine.url.render_as_string(hide_password=True))
