"""
Domain exceptions raised by the services.

The API layer maps these to HTTP status codes. Database
failures are not wrapped: they surface as SQLAlchemyError
and become a generic 500.
"""


class VideoNotesError(Exception):
    """Base class for errors raised by this application."""


class NotFoundError(VideoNotesError):
    """The requested note or video does not exist."""


class NoteNotFoundError(NotFoundError):

    def __init__(self, note_id):
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class VideoNotFoundError(NotFoundError):

    def __init__(self, video_id: str):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class ConfigurationError(VideoNotesError):
    """A required setting, such as the YouTube API key, is missing."""


class UpstreamError(VideoNotesError):
    """The YouTube API failed or returned something unusable."""


class UpstreamTimeoutError(UpstreamError):
    """The YouTube API did not answer in time. Safe to retry."""
