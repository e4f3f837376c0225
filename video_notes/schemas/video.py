"""
Pydantic schemas for video and comment operations.

Reads pass the YouTube payload through untouched, so only the
demo-mode writes have schemas. Every demo-mode response says so
in demo_mode and notice; nothing is written to YouTube.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from video_notes.schemas.note import CAMEL_CONFIG

DEMO_NOTICE = "Demo mode: OAuth2 is required to change YouTube data, nothing was sent upstream"


# --- Request Schemas ---

class CommentCreate(BaseModel):
    text: str = Field(min_length=1, max_length=10000)


class VideoUpdate(BaseModel):
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=5000)


# --- Response Schemas ---

class _DemoResponse(BaseModel):
    demo_mode: bool = True
    notice: str = DEMO_NOTICE

    model_config = CAMEL_CONFIG


class SimulatedComment(_DemoResponse):
    id: str
    video_id: str
    text: str
    author_display_name: str
    published_at: datetime


class SimulatedCommentDeletion(_DemoResponse):
    message: str
    comment_id: str
    video_id: str


class SimulatedVideo(_DemoResponse):
    id: str
    title: str
    description: str
    updated_at: datetime
