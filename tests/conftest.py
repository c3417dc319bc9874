import os
import sys
from pathlib import Path

import pytest

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / "src"))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("TRIPDESK_LOG_DIR", str(log_dir))
os.environ.setdefault("TRIPDESK_CONFIG_DIR", str(root / ".tripdesk-test"))


@pytest.fixture
def app():
    from tripdesk.api.main import create_app

    return create_app()


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as client:
        yield client


class InProcessHttp:
    """TestClient front for the adapter. The per-request ``timeout`` is dropped."""

    def __init__(self, client):
        self._client = client

    def request(self, method, url, **kwargs):
        kwargs.pop("timeout", None)
        return self._client.request(method, url, **kwargs)

    def close(self):
        self._client.close()


@pytest.fixture
def api_http(client):
    return InProcessHttp(client)


@pytest.fixture
def adapter(api_http):
    """Adapter that talks to the in-process app."""

    from tripdesk.client.adapter import TripsApiClient

    return TripsApiClient("http://testserver", http=api_http)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error
        if text is None:
            import json

            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeHttp:
    """Records requests and replays canned responses (or raises)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        result = self.responses.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def fake_http():
    return FakeHttp


@pytest.fixture
def fake_response():
    return FakeResponse
