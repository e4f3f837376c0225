"""
Pydantic schemas for note operations.

Field names travel as camelCase on the wire (videoId,
createdAt) because that is what the dashboard sends and
reads. snake_case is accepted on input as well.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


# --- Request Schemas ---

class NoteCreate(BaseModel):
    """
    Request to create a note.

    Title and content are not checked for emptiness here.
    The dashboard enforces that before sending.
    """
    video_id: str = Field(min_length=1, max_length=64)
    title: str = Field(max_length=500)
    content: str
    tags: list[str] = Field(default_factory=list)

    model_config = CAMEL_CONFIG


class NoteUpdate(BaseModel):
    """Full replacement of a note's mutable fields."""
    title: str = Field(max_length=500)
    content: str
    tags: list[str] = Field(default_factory=list)

    model_config = CAMEL_CONFIG


# --- Response Schemas ---

class NoteResponse(BaseModel):
    # The dashboard keys notes by _id
    id: uuid.UUID = Field(serialization_alias="_id")
    video_id: str
    title: str
    content: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True, **CAMEL_CONFIG}


class MessageResponse(BaseModel):
    message: str
