"""
Shared enumerations for database models.
"""

import enum


class EventAction(str, enum.Enum):
    """
    Actions recorded in the event log.

    Adding an action means adding a member here and a
    matching details payload in schemas/event_log.py.
    """
    VIDEO_VIEWED = "video_viewed"
    COMMENTS_VIEWED = "comments_viewed"
    NOTES_VIEWED = "notes_viewed"
    NOTE_CREATED = "note_created"
    NOTE_UPDATED = "note_updated"
    NOTE_DELETED = "note_deleted"
    COMMENT_ADDED = "comment_added"
    COMMENT_DELETED = "comment_deleted"
    VIDEO_UPDATED = "video_updated"
