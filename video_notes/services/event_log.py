"""
Event log service — append-only record of user actions.

Appending is best-effort. A failed write is logged for the
operator and then dropped; it never reaches the request that
triggered it. The event log opens its own sessions, so a failed
append never touches the transaction of the note being saved.
"""

import logging
from typing import Callable

from fastapi import BackgroundTasks
from pydantic import BaseModel, TypeAdapter
from sqlalchemy import select
from sqlalchemy.orm import Session

from video_notes.models.enums import EventAction
from video_notes.models.event_log import EventLogEntry
from video_notes.models.base import utcnow
from video_notes.schemas.event_log import EventDetails

logger = logging.getLogger(__name__)

DEFAULT_QUERY_LIMIT = 50

_details_adapter = TypeAdapter(EventDetails)


class EventLog:
    """
    Writes and reads event log entries.

    There is no update or delete. Retention is left to the
    database operator; the application only ever appends.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        max_limit: int = DEFAULT_QUERY_LIMIT,
    ):
        self.session_factory = session_factory
        self.max_limit = max_limit

    def append(self, video_id: str, details: EventDetails) -> None:
        """
        Record one action. Never raises.

        Any failure, whether from the database or from a payload
        that does not serialize, is logged and swallowed.
        """
        try:
            if not isinstance(details, BaseModel):
                details = _details_adapter.validate_python(details)
            payload = details.model_dump(
                mode="json", by_alias=True, exclude={"action"}
            )
            entry = EventLogEntry(
                action=EventAction(details.action),
                video_id=video_id,
                details=payload,
                timestamp=utcnow(),
            )
            with self.session_factory() as session:
                session.add(entry)
                session.commit()
        except Exception:
            logger.exception(
                "Event log append failed action=%s video_id=%s",
                getattr(details, "action", None),
                video_id,
            )

    def query(
        self, video_id: str, limit: int = DEFAULT_QUERY_LIMIT
    ) -> list[EventLogEntry]:
        """
        Most recent entries for a video, newest first.

        The limit is clamped to [1, max_limit]. Entries with the
        same timestamp come back in reverse insertion order.
        """
        limit = max(1, min(limit, self.max_limit))
        with self.session_factory() as session:
            entries = session.execute(
                select(EventLogEntry)
                .where(EventLogEntry.video_id == video_id)
                .order_by(
                    EventLogEntry.timestamp.desc(),
                    EventLogEntry.id.desc(),
                )
                .limit(limit)
            ).scalars().all()
            return list(entries)


class EventRecorder:
    """
    The sink business services report their actions to.

    Given BackgroundTasks, each append is scheduled to run after
    the response has been sent, so logging never delays or fails
    the request. Without BackgroundTasks the append happens
    immediately, which is what tests and scripts want.
    """

    def __init__(
        self,
        event_log: EventLog,
        background_tasks: BackgroundTasks | None = None,
    ):
        self.event_log = event_log
        self.background_tasks = background_tasks

    def record(self, video_id: str, details: EventDetails) -> None:
        if self.background_tasks is None:
            self.event_log.append(video_id, details)
        else:
            self.background_tasks.add_task(
                self.event_log.append, video_id, details
            )
