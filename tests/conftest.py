"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database, and a fake YouTube API behind
httpx.MockTransport so tests never touch the network.
"""

from datetime import datetime, timedelta

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from video_notes.api.dependencies import get_event_log, get_youtube_client
from video_notes.main import app
from video_notes.models import Base
from video_notes.models.base import get_db
from video_notes.services.event_log import EventLog
from video_notes.services.youtube_client import YouTubeClient


# Use SQLite for tests — no external database needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

VIDEO_ID = "dQw4w9WgXcQ"


def make_video(video_id=VIDEO_ID, title="Never Gonna Give You Up"):
    return {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {"title": title, "channelTitle": "Rick Astley"},
        "statistics": {"viewCount": "1500000000", "likeCount": "17000000"},
        "status": {"privacyStatus": "public"},
    }


def make_thread(thread_id, text):
    return {
        "kind": "youtube#commentThread",
        "id": thread_id,
        "snippet": {
            "topLevelComment": {
                "id": thread_id,
                "snippet": {"textDisplay": text, "authorDisplayName": "viewer"},
            },
            "totalReplyCount": 0,
        },
    }


class FakeYouTube:
    """
    Stand-in for the YouTube Data API.

    Serves /videos and /commentThreads from in-memory dicts,
    remembers every request, and can be told to time out or
    answer with an error status.
    """

    def __init__(self):
        self.videos = {VIDEO_ID: make_video()}
        self.comments = {VIDEO_ID: [make_thread("c1", "great song")]}
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.timeout = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.timeout:
            raise httpx.ReadTimeout("timed out", request=request)
        if self.status_code != 200:
            return httpx.Response(
                self.status_code,
                json={"error": {"code": self.status_code, "message": "quota"}},
            )

        params = request.url.params
        if request.url.path.endswith("/videos"):
            video = self.videos.get(params["id"])
            return httpx.Response(200, json={
                "kind": "youtube#videoListResponse",
                "items": [video] if video else [],
            })
        if request.url.path.endswith("/commentThreads"):
            return httpx.Response(200, json={
                "kind": "youtube#commentThreadListResponse",
                "items": self.comments.get(params["videoId"], []),
            })
        return httpx.Response(404)

    def client(self, api_key="test-key") -> YouTubeClient:
        return YouTubeClient(
            api_key=api_key,
            http=httpx.Client(transport=httpx.MockTransport(self.handler)),
            base_url="https://youtube.test/v3",
        )


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, start=datetime(2024, 5, 1, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds=1):
        self.now += timedelta(seconds=seconds)


class RecordingSink:
    """Event sink that keeps (video_id, details) pairs in memory."""

    def __init__(self):
        self.events = []

    def record(self, video_id, details):
        self.events.append((video_id, details))

    @property
    def actions(self):
        return [details.action for _, details in self.events]


@pytest.fixture(autouse=True)
def setup_database():
    """
    Create all tables before each test, drop them after.

    autouse=True means every test gets this automatically.
    This ensures each test starts with a clean database.
    """
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def event_log():
    return EventLog(TestSessionLocal)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_youtube():
    return FakeYouTube()


@pytest.fixture
def youtube(fake_youtube):
    client = fake_youtube.client()
    yield client
    client.close()


@pytest.fixture
def client(db_session, event_log, youtube):
    """
    Provide a test client wired to the test database,
    the test event log and the fake YouTube API.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_event_log] = lambda: event_log
    app.dependency_overrides[get_youtube_client] = lambda: youtube
    yield TestClient(app)
    app.dependency_overrides.clear()
