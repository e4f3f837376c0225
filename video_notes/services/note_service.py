"""
Note service — create, update, delete and search notes.

Every successful operation reports exactly one event to the
recorder. The caller controls the transaction boundary and
decides when to commit or rollback; the recorder defers the
actual log write until the response has been sent.
"""

import uuid
from datetime import datetime
from typing import Callable, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from video_notes.exceptions import NoteNotFoundError
from video_notes.models.base import utcnow
from video_notes.models.note import Note
from video_notes.schemas.event_log import (
    EventDetails,
    NoteCreated,
    NoteDeleted,
    NotesViewed,
    NoteUpdated,
)
from video_notes.schemas.note import NoteCreate, NoteUpdate


class EventSink(Protocol):
    def record(self, video_id: str, details: EventDetails) -> None: ...


class NoteService:

    def __init__(
        self,
        db: Session,
        events: EventSink,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.events = events
        self.clock = clock

    def _get_note(self, note_id: uuid.UUID | str) -> Note:
        """Load a note or raise NoteNotFoundError. Malformed ids count as missing."""
        if not isinstance(note_id, uuid.UUID):
            try:
                note_id = uuid.UUID(str(note_id))
            except ValueError:
                raise NoteNotFoundError(note_id) from None

        note = self.db.get(Note, note_id)
        if not note:
            raise NoteNotFoundError(note_id)
        return note

    def create(self, request: NoteCreate) -> Note:
        """
        Persist a new note.

        created_at and updated_at come from a single clock
        reading so a fresh note always has them equal.
        """
        now = self.clock()
        note = Note(
            video_id=request.video_id,
            title=request.title,
            content=request.content,
            tags=list(request.tags),
            created_at=now,
            updated_at=now,
        )
        self.db.add(note)
        self.db.flush()

        self.events.record(note.video_id, NoteCreated(note_id=note.id))
        return note

    def update(self, note_id: uuid.UUID | str, request: NoteUpdate) -> Note:
        """
        Replace title, content and tags wholesale.

        Not a partial merge: omitted tags become an empty list.
        updated_at never moves backwards, even if the clock does.
        """
        note = self._get_note(note_id)

        note.title = request.title
        note.content = request.content
        note.tags = list(request.tags)
        note.updated_at = max(self.clock(), note.updated_at)
        self.db.flush()

        self.events.record(note.video_id, NoteUpdated(note_id=note.id))
        return note

    def delete(self, note_id: uuid.UUID | str) -> None:
        """Remove a note for good. There is no soft delete."""
        note = self._get_note(note_id)
        video_id, deleted_id = note.video_id, note.id

        self.db.delete(note)
        self.db.flush()

        self.events.record(video_id, NoteDeleted(note_id=deleted_id))

    def find(self, video_id: str, search: str | None = None) -> list[Note]:
        """
        Notes for a video, most recently created first.

        With a search term, keep only notes whose title, content
        or any tag contains it, ignoring case. The term is a plain
        substring, not a pattern. An empty term means no filter.
        """
        notes = self.db.execute(
            select(Note)
            .where(Note.video_id == video_id)
            .order_by(Note.created_at.desc())
        ).scalars().all()

        if search:
            notes = [note for note in notes if note.matches(search)]

        self.events.record(
            video_id,
            NotesViewed(search=search or None, result_count=len(notes)),
        )
        return list(notes)
