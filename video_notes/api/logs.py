"""
Event log API endpoint.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from video_notes.api.dependencies import get_event_log
from video_notes.schemas.event_log import EventLogEntryResponse
from video_notes.services.event_log import EventLog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/logs", tags=["Event Log"])


@router.get("/{video_id}", response_model=list[EventLogEntryResponse])
def get_logs(
    video_id: str,
    limit: int | None = Query(None, ge=1),
    event_log: EventLog = Depends(get_event_log),
):
    """
    The most recent actions taken on a video, newest first.

    limit defaults to, and may not exceed, EVENT_LOG_QUERY_LIMIT.
    """
    if limit is None:
        limit = event_log.max_limit
    elif limit > event_log.max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit must be at most {event_log.max_limit}",
        )

    try:
        return event_log.query(video_id, limit)
    except SQLAlchemyError:
        logger.exception("Failed to fetch logs for video %s", video_id)
        raise HTTPException(status_code=500, detail="Failed to fetch logs")
