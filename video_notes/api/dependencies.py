"""
Shared FastAPI dependencies.

Process-wide resources (the database engine and the YouTube
HTTP client) are created once at startup. Routes receive them
through these functions, which tests override.
"""

from fastapi import BackgroundTasks, Depends, Request

from video_notes.config import get_settings
from video_notes.models.base import SessionLocal
from video_notes.services.event_log import EventLog, EventRecorder
from video_notes.services.youtube_client import YouTubeClient


def get_event_log() -> EventLog:
    settings = get_settings()
    return EventLog(SessionLocal, max_limit=settings.EVENT_LOG_QUERY_LIMIT)


def get_event_recorder(
    background_tasks: BackgroundTasks,
    event_log: EventLog = Depends(get_event_log),
) -> EventRecorder:
    """Event sink for one request; appends run after the response is sent."""
    return EventRecorder(event_log, background_tasks)


def get_youtube_client(request: Request) -> YouTubeClient:
    return request.app.state.youtube
