import sys, pathlib, json

import pytest
import requests

# Ensure project src directory is on path for tests
PROJECT_ROOT = pathlib.Path(__file__).parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeResponse:
    """Stand-in for a streamed requests.Response."""

    def __init__(self, body=b"", status_code=200, chunk=5):
        self.body = body
        self.status_code = status_code
        self.chunk = chunk
        self.closed = False

    def iter_content(self, chunk_size=1):
        step = self.chunk or chunk_size
        for i in range(0, len(self.body), step):
            yield self.body[i : i + step]

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True


@pytest.fixture
def write_catalog(tmp_path):
    def _write(data, name="result.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; returns the list of recorded calls."""
    calls = []

    def install(response):
        def _get(url, **kwargs):
            calls.append((url, kwargs))
            return response

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install
