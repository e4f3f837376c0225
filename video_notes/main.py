"""
Video Notes Dashboard — FastAPI Application.

This is the entry point for the application.
All routers are registered here, and the process-wide
resources are created on startup and released on shutdown.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from video_notes.config import get_settings
from video_notes.api.health import router as health_router
from video_notes.api.logs import router as logs_router
from video_notes.api.notes import router as notes_router
from video_notes.api.videos import router as videos_router
from video_notes.models.base import dispose_engine
from video_notes.services.youtube_client import YouTubeClient

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting %s (%s), YouTube API key %s",
        settings.APP_NAME,
        settings.ENVIRONMENT,
        "SET" if settings.YOUTUBE_API_KEY else "NOT SET",
    )
    app.state.youtube = YouTubeClient.from_settings(settings)
    try:
        yield
    finally:
        app.state.youtube.close()
        dispose_engine()
        logger.info("Shut down %s", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Look up YouTube videos and keep notes about them",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(videos_router)
app.include_router(notes_router)
app.include_router(logs_router)
