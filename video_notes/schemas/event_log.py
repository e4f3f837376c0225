"""
Pydantic schemas for event log entries.

Each action has its own details payload. The payloads form a
union discriminated by the "action" field, so a details object
always says which action it belongs to and carries only the
fields that action defines.
"""

import uuid
from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from video_notes.models.enums import EventAction
from video_notes.schemas.note import CAMEL_CONFIG


class _EventDetails(BaseModel):
    model_config = CAMEL_CONFIG


class VideoViewed(_EventDetails):
    action: Literal["video_viewed"] = "video_viewed"


class CommentsViewed(_EventDetails):
    action: Literal["comments_viewed"] = "comments_viewed"
    thread_count: int = 0


class NotesViewed(_EventDetails):
    action: Literal["notes_viewed"] = "notes_viewed"
    search: str | None = None
    result_count: int = 0


class NoteCreated(_EventDetails):
    action: Literal["note_created"] = "note_created"
    note_id: uuid.UUID


class NoteUpdated(_EventDetails):
    action: Literal["note_updated"] = "note_updated"
    note_id: uuid.UUID


class NoteDeleted(_EventDetails):
    action: Literal["note_deleted"] = "note_deleted"
    note_id: uuid.UUID


class CommentAdded(_EventDetails):
    action: Literal["comment_added"] = "comment_added"
    comment_id: str
    simulated: bool = True


class CommentDeleted(_EventDetails):
    action: Literal["comment_deleted"] = "comment_deleted"
    comment_id: str
    simulated: bool = True


class VideoUpdated(_EventDetails):
    action: Literal["video_updated"] = "video_updated"
    title: str
    simulated: bool = True


EventDetails = Annotated[
    Union[
        VideoViewed,
        CommentsViewed,
        NotesViewed,
        NoteCreated,
        NoteUpdated,
        NoteDeleted,
        CommentAdded,
        CommentDeleted,
        VideoUpdated,
    ],
    Field(discriminator="action"),
]


class EventLogEntryResponse(BaseModel):
    id: int
    action: EventAction
    video_id: str
    details: dict[str, Any]
    timestamp: datetime

    model_config = {"from_attributes": True, **CAMEL_CONFIG}
