"""Business logic services."""

from video_notes.services.event_log import EventLog, EventRecorder
from video_notes.services.note_service import NoteService
from video_notes.services.video_service import VideoService
from video_notes.services.youtube_client import YouTubeClient

__all__ = [
    "EventLog",
    "EventRecorder",
    "NoteService",
    "VideoService",
    "YouTubeClient",
]
