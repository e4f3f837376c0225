"""
YouTube Data API v3 client.

A read-through proxy: every call is a live round-trip with no
caching and no retries. The httpx.Client is created once at
startup with the request timeout already applied and closed on
shutdown.
"""

import logging
from typing import Any

import httpx

from video_notes.exceptions import (
    ConfigurationError,
    UpstreamError,
    UpstreamTimeoutError,
    VideoNotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"


class YouTubeClient:

    def __init__(
        self,
        api_key: str | None,
        http: httpx.Client,
        base_url: str = DEFAULT_BASE_URL,
        max_comments: int = 20,
    ):
        self.api_key = api_key
        self.http = http
        self.base_url = base_url.rstrip("/")
        self.max_comments = max_comments

    @classmethod
    def from_settings(cls, settings) -> "YouTubeClient":
        http = httpx.Client(timeout=settings.YOUTUBE_TIMEOUT_SECONDS)
        return cls(
            api_key=settings.YOUTUBE_API_KEY,
            http=http,
            base_url=settings.YOUTUBE_API_BASE_URL,
            max_comments=settings.YOUTUBE_MAX_COMMENTS,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def close(self) -> None:
        self.http.close()

    def _get(self, resource: str, params: dict[str, Any]) -> dict[str, Any]:
        if not self.api_key:
            raise ConfigurationError("YouTube API key not configured")

        url = f"{self.base_url}/{resource}"
        try:
            response = self.http.get(url, params={**params, "key": self.api_key})
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("YouTube %s request timed out: %s", resource, e)
            raise UpstreamTimeoutError(
                f"YouTube API timed out fetching {resource}"
            ) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "YouTube %s request failed with status %s",
                resource,
                e.response.status_code,
            )
            raise UpstreamError(
                f"YouTube API returned {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers a body that is not JSON
            logger.error("YouTube %s request failed: %s", resource, e)
            raise UpstreamError(f"YouTube API request failed: {e}") from e

        if not isinstance(data, dict):
            logger.error(
                "YouTube %s returned %s instead of an object",
                resource,
                type(data).__name__,
            )
            raise UpstreamError("YouTube API returned an unexpected payload")
        return data

    def fetch_video(self, video_id: str) -> dict[str, Any]:
        """
        Snippet, statistics and status for one video.

        Raises VideoNotFoundError when YouTube reports no items.
        """
        data = self._get("videos", {
            "part": "snippet,statistics,status",
            "id": video_id,
        })
        items = data.get("items") or []
        if not items:
            raise VideoNotFoundError(video_id)
        return items[0]

    def fetch_comments(self, video_id: str) -> dict[str, Any]:
        """Top comment threads with replies, as YouTube returns them."""
        return self._get("commentThreads", {
            "part": "snippet,replies",
            "videoId": video_id,
            "maxResults": self.max_comments,
        })
