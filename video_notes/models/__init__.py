"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from video_notes.models.base import Base
from video_notes.models.enums import EventAction
from video_notes.models.note import Note
from video_notes.models.event_log import EventLogEntry

__all__ = [
    "Base",
    "EventAction",
    "Note",
    "EventLogEntry",
]
