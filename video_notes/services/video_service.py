"""
Video service — YouTube reads and demo-mode writes.

Reads are real: they go to the YouTube API on every call and
record one event when they succeed. Writes are simulated. They
build a plausible response, record an event marked simulated,
and never contact YouTube. The responses say demo mode openly
so the dashboard can show it.
"""

import uuid
from datetime import datetime
from typing import Any, Callable

from video_notes.models.base import utcnow
from video_notes.schemas.event_log import (
    CommentAdded,
    CommentDeleted,
    CommentsViewed,
    VideoUpdated,
    VideoViewed,
)
from video_notes.schemas.video import (
    CommentCreate,
    SimulatedComment,
    SimulatedCommentDeletion,
    SimulatedVideo,
    VideoUpdate,
)
from video_notes.services.note_service import EventSink
from video_notes.services.youtube_client import YouTubeClient

DEMO_AUTHOR = "Demo User"


class VideoService:

    def __init__(
        self,
        youtube: YouTubeClient,
        events: EventSink,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.youtube = youtube
        self.events = events
        self.clock = clock

    # --- Reads ---

    def get_video(self, video_id: str) -> dict[str, Any]:
        video = self.youtube.fetch_video(video_id)
        self.events.record(video_id, VideoViewed())
        return video

    def get_comments(self, video_id: str) -> dict[str, Any]:
        comments = self.youtube.fetch_comments(video_id)
        self.events.record(
            video_id,
            CommentsViewed(thread_count=len(comments.get("items") or [])),
        )
        return comments

    # --- Demo-mode writes ---

    def add_comment(
        self, video_id: str, request: CommentCreate
    ) -> SimulatedComment:
        comment = SimulatedComment(
            id=f"demo-{uuid.uuid4().hex}",
            video_id=video_id,
            text=request.text,
            author_display_name=DEMO_AUTHOR,
            published_at=self.clock(),
        )
        self.events.record(video_id, CommentAdded(comment_id=comment.id))
        return comment

    def delete_comment(
        self, video_id: str, comment_id: str
    ) -> SimulatedCommentDeletion:
        self.events.record(video_id, CommentDeleted(comment_id=comment_id))
        return SimulatedCommentDeletion(
            message="Comment deleted successfully",
            comment_id=comment_id,
            video_id=video_id,
        )

    def update_video(
        self, video_id: str, request: VideoUpdate
    ) -> SimulatedVideo:
        self.events.record(video_id, VideoUpdated(title=request.title))
        return SimulatedVideo(
            id=video_id,
            title=request.title,
            description=request.description,
            updated_at=self.clock(),
        )
