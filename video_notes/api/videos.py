"""
Video and comment API endpoints.

GET endpoints proxy the YouTube API. POST, PUT and DELETE are
demo mode: they return a synthesized result marked demoMode
and change nothing on YouTube.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from video_notes.api.dependencies import get_event_recorder, get_youtube_client
from video_notes.exceptions import (
    ConfigurationError,
    NotFoundError,
    UpstreamError,
    UpstreamTimeoutError,
)
from video_notes.schemas.video import (
    CommentCreate,
    SimulatedComment,
    SimulatedCommentDeletion,
    SimulatedVideo,
    VideoUpdate,
)
from video_notes.services.event_log import EventRecorder
from video_notes.services.video_service import VideoService
from video_notes.services.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Videos"])

TIMEOUT_DETAIL = "YouTube API timed out, please try again"


def get_video_service(
    youtube: YouTubeClient = Depends(get_youtube_client),
    events: EventRecorder = Depends(get_event_recorder),
) -> VideoService:
    return VideoService(youtube, events)


@router.get("/video/{video_id}", response_model=dict[str, Any])
def get_video(
    video_id: str,
    service: VideoService = Depends(get_video_service),
):
    """Snippet, statistics and status of a YouTube video."""
    try:
        return service.get_video(video_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Video not found")
    except ConfigurationError as e:
        logger.error("Cannot fetch video %s: %s", video_id, e)
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamTimeoutError:
        raise HTTPException(status_code=504, detail=TIMEOUT_DETAIL)
    except UpstreamError:
        raise HTTPException(status_code=500, detail="Failed to fetch video data")


@router.put("/video/{video_id}", response_model=SimulatedVideo)
def update_video(
    video_id: str,
    request: VideoUpdate,
    service: VideoService = Depends(get_video_service),
):
    """Demo mode: pretend to edit the video's title and description."""
    return service.update_video(video_id, request)


@router.get("/comments/{video_id}", response_model=dict[str, Any])
def get_comments(
    video_id: str,
    service: VideoService = Depends(get_video_service),
):
    """Top comment threads of a YouTube video."""
    try:
        return service.get_comments(video_id)
    except ConfigurationError as e:
        logger.error("Cannot fetch comments for %s: %s", video_id, e)
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamTimeoutError:
        raise HTTPException(status_code=504, detail=TIMEOUT_DETAIL)
    except UpstreamError:
        raise HTTPException(status_code=500, detail="Failed to fetch comments")


@router.post("/comments/{video_id}", response_model=SimulatedComment)
def add_comment(
    video_id: str,
    request: CommentCreate,
    service: VideoService = Depends(get_video_service),
):
    """Demo mode: pretend to post a top-level comment."""
    return service.add_comment(video_id, request)


@router.delete(
    "/comments/{video_id}/{comment_id}",
    response_model=SimulatedCommentDeletion,
)
def delete_comment(
    video_id: str,
    comment_id: str,
    service: VideoService = Depends(get_video_service),
):
    """Demo mode: pretend to delete a comment."""
    return service.delete_comment(video_id, comment_id)
