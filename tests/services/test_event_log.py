"""
Tests for the EventLog and EventRecorder.

Appends are best-effort: a broken database or a bad payload
is logged and swallowed, never raised.
"""

import logging
import uuid

from fastapi import BackgroundTasks
from sqlalchemy.exc import OperationalError

from video_notes.models.enums import EventAction
from video_notes.schemas.event_log import (
    CommentAdded,
    NoteCreated,
    NotesViewed,
    VideoViewed,
)
from video_notes.services.event_log import EventLog, EventRecorder


def broken_session_factory():
    raise OperationalError("INSERT INTO event_log", {}, Exception("database is locked"))


class TestAppend:

    def test_append_then_query(self, event_log):
        note_id = uuid.uuid4()
        event_log.append("abc", NoteCreated(note_id=note_id))

        entries = event_log.query("abc")

        assert len(entries) == 1
        assert entries[0].action == EventAction.NOTE_CREATED
        assert entries[0].video_id == "abc"
        assert entries[0].details == {"noteId": str(note_id)}
        assert entries[0].timestamp is not None

    def test_details_do_not_repeat_action(self, event_log):
        event_log.append("abc", NotesViewed(search="demo", result_count=2))

        entry = event_log.query("abc")[0]
        assert entry.action == EventAction.NOTES_VIEWED
        assert entry.details == {"search": "demo", "resultCount": 2}

    def test_empty_details(self, event_log):
        event_log.append("abc", VideoViewed())
        assert event_log.query("abc")[0].details == {}

    def test_simulated_actions_are_marked(self, event_log):
        event_log.append("abc", CommentAdded(comment_id="demo-1"))

        details = event_log.query("abc")[0].details
        assert details == {"commentId": "demo-1", "simulated": True}

    def test_accepts_plain_dict_payload(self, event_log):
        event_log.append("abc", {"action": "video_updated", "title": "New"})

        entry = event_log.query("abc")[0]
        assert entry.action == EventAction.VIDEO_UPDATED
        assert entry.details["title"] == "New"

    def test_database_failure_is_swallowed_and_logged(self, caplog):
        broken = EventLog(broken_session_factory)

        with caplog.at_level(logging.ERROR, logger="video_notes.services.event_log"):
            broken.append("abc", VideoViewed())

        assert "Event log append failed" in caplog.text

    def test_invalid_payload_is_swallowed(self, event_log, caplog):
        with caplog.at_level(logging.ERROR):
            event_log.append("abc", {"action": "video_exploded"})

        assert event_log.query("abc") == []
        assert "Event log append failed" in caplog.text


class TestQuery:

    def test_newest_first(self, event_log):
        event_log.append("abc", VideoViewed())
        event_log.append("abc", NotesViewed())
        event_log.append("abc", NoteCreated(note_id=uuid.uuid4()))

        actions = [e.action for e in event_log.query("abc")]

        assert actions == [
            EventAction.NOTE_CREATED,
            EventAction.NOTES_VIEWED,
            EventAction.VIDEO_VIEWED,
        ]

    def test_only_entries_for_video(self, event_log):
        event_log.append("abc", VideoViewed())
        event_log.append("other", VideoViewed())

        assert [e.video_id for e in event_log.query("abc")] == ["abc"]

    def test_respects_limit(self, event_log):
        for _ in range(5):
            event_log.append("abc", VideoViewed())

        assert len(event_log.query("abc", limit=3)) == 3

    def test_default_limit_is_fifty(self, event_log):
        for i in range(55):
            event_log.append("abc", NotesViewed(result_count=i))

        entries = event_log.query("abc")

        assert len(entries) == 50
        # The five oldest are the ones left out
        assert entries[0].details["resultCount"] == 54
        assert entries[-1].details["resultCount"] == 5

    def test_limit_is_clamped_to_maximum(self, event_log):
        for _ in range(4):
            event_log.append("abc", VideoViewed())

        small = EventLog(event_log.session_factory, max_limit=2)
        assert len(small.query("abc", limit=100)) == 2
        assert len(small.query("abc", limit=0)) == 1


class TestEventRecorder:

    def test_without_background_tasks_appends_immediately(self, event_log):
        EventRecorder(event_log).record("abc", VideoViewed())

        assert len(event_log.query("abc")) == 1

    def test_with_background_tasks_defers_append(self, event_log):
        tasks = BackgroundTasks()
        recorder = EventRecorder(event_log, tasks)

        recorder.record("abc", VideoViewed())

        assert event_log.query("abc") == []
        assert len(tasks.tasks) == 1

        task = tasks.tasks[0]
        task.func(*task.args, **task.kwargs)
        assert len(event_log.query("abc")) == 1
