"""
Event log model.

Records every action a user takes against a video: viewing
it, reading its comments, and working with notes.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import String, DateTime, JSON, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from video_notes.models.base import Base, utcnow
from video_notes.models.enums import EventAction


class EventLogEntry(Base):
    """
    Immutable record of one action.

    Entries are append-only. There is no update or delete
    path anywhere in the application.
    """

    __tablename__ = "event_log"

    id: Mapped[int] = mapped_column(primary_key=True)
    action: Mapped[EventAction] = mapped_column(
        SAEnum(
            EventAction,
            name="event_action_enum",
            values_callable=lambda actions: [a.value for a in actions],
            native_enum=False,
            length=50,
        ),
        nullable=False,
    )
    video_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    details: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, index=True
    )

    def __repr__(self) -> str:
        return f"<EventLogEntry {self.action.value} video={self.video_id}>"
