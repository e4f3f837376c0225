"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from video_notes.config import get_settings
from video_notes.models.base import get_db

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Return application health status.

    Reports database connectivity and whether a YouTube API
    key is configured. A missing key is not unhealthy: notes
    and logs keep working, only video reads fail.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "video-notes-dashboard",
        "database": db_status,
        "youtube_api": (
            "configured" if get_settings().YOUTUBE_API_KEY else "not_configured"
        ),
    }
