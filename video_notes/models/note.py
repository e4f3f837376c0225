"""
Note model.

A user-authored annotation about one video. The video is an
external YouTube resource and is never validated to exist.
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, Text, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from video_notes.models.base import Base, utcnow


class Note(Base):
    """
    A note attached to a video identifier.

    created_at is set once. updated_at starts equal to
    created_at and is refreshed by every update. Both are
    stamped by the NoteService so that they share one clock
    reading on creation.
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    video_id: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Order as entered, duplicates allowed
    tags: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow
    )

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on title, content or any tag."""
        needle = term.casefold()
        return (
            needle in (self.title or "").casefold()
            or needle in (self.content or "").casefold()
            or any(needle in tag.casefold() for tag in self.tags or [])
        )

    def __repr__(self) -> str:
        return f"<Note {self.id} video={self.video_id} {self.title!r}>"
