import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from snapchat_ads import SnapchatAdsClient  # noqa: E402

_ENV_VARS = (
    "SNAPCHAT_ADS_HOST",
    "SNAPCHAT_ADS_API_VERSION",
    "SNAPCHAT_ADS_ACCESS_TOKEN",
    "SNAPCHAT_ADS_REQUEST_TIMEOUT",
    "TWITTER_ADS_HOST",
    "TWITTER_ADS_API_VERSION",
)


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    config.addinivalue_line("markers", "unit: mark test as a unit test")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's Snapchat Ads environment.

    Removes every variable the settings read and runs the test from an
    empty directory so no stray .env file is picked up.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


def _envelope(
    plural: str,
    singular: str,
    entities: List[Dict[str, Any]],
    status: str = "SUCCESS",
    sub_statuses: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build a Snapchat Ads response envelope."""
    sub_statuses = sub_statuses or ["SUCCESS"] * len(entities)
    return {
        "request_status": status,
        "request_id": "req-123",
        plural: [
            {"sub_request_status": sub, singular: entity}
            for sub, entity in zip(sub_statuses, entities)
        ],
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays responses."""

    def __init__(self, payload: Any = None, status_code: int = 200):
        self.payload = payload
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_envelope():
    """Return a builder for Snapchat Ads response envelopes."""
    return _envelope


@pytest.fixture
def handler():
    """Recording handler answering with an empty success envelope."""
    return RecordingHandler(payload={"request_status": "SUCCESS"})


@pytest.fixture
def client(handler):
    """Client wired to a MockTransport backed by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SnapchatAdsClient(access_token="test-token", http_client=http_client)
