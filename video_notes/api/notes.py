"""
Note API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
commit/rollback, generic error messages) and delegates the rest
to NoteService.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from video_notes.api.dependencies import get_event_recorder
from video_notes.exceptions import NotFoundError
from video_notes.models.base import get_db
from video_notes.schemas.note import (
    MessageResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from video_notes.services.event_log import EventRecorder
from video_notes.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get("/{video_id}", response_model=list[NoteResponse])
def list_notes(
    video_id: str,
    search: str | None = None,
    db: Session = Depends(get_db),
    events: EventRecorder = Depends(get_event_recorder),
):
    """
    Notes for a video, newest first.

    With ?search=, only notes whose title, content or a tag
    contains the term (ignoring case) are returned.
    """
    service = NoteService(db, events)
    try:
        return service.find(video_id, search)
    except SQLAlchemyError:
        logger.exception("Failed to fetch notes for video %s", video_id)
        raise HTTPException(status_code=500, detail="Failed to fetch notes")


@router.post("", response_model=NoteResponse)
def create_note(
    request: NoteCreate,
    db: Session = Depends(get_db),
    events: EventRecorder = Depends(get_event_recorder),
):
    """Create a note for a video."""
    service = NoteService(db, events)
    try:
        note = service.create(request)
        db.commit()
        return note
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create note for video %s", request.video_id)
        raise HTTPException(status_code=500, detail="Failed to create note")


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: str,
    request: NoteUpdate,
    db: Session = Depends(get_db),
    events: EventRecorder = Depends(get_event_recorder),
):
    """Replace a note's title, content and tags."""
    service = NoteService(db, events)
    try:
        note = service.update(note_id, request)
        db.commit()
        return note
    except NotFoundError:
        db.rollback()
        raise HTTPException(status_code=404, detail="Note not found")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update note %s", note_id)
        raise HTTPException(status_code=500, detail="Failed to update note")


@router.delete("/{note_id}", response_model=MessageResponse)
def delete_note(
    note_id: str,
    db: Session = Depends(get_db),
    events: EventRecorder = Depends(get_event_recorder),
):
    """Delete a note permanently."""
    service = NoteService(db, events)
    try:
        service.delete(note_id)
        db.commit()
        return MessageResponse(message="Note deleted successfully")
    except NotFoundError:
        db.rollback()
        raise HTTPException(status_code=404, detail="Note not found")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete note %s", note_id)
        raise HTTPException(status_code=500, detail="Failed to delete note")
