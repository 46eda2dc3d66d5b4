import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, List, Optional

import pytest


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Stand-in for ``requests.Session`` that replays canned responses."""

    def __init__(self, responses: List[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        outcome = self._responses.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_session():
    def _build(*responses: Any) -> FakeSession:
        return FakeSession(list(responses))

    return _build


@pytest.fixture
def ok():
    def _build(body: Any) -> FakeResponse:
        text = body if isinstance(body, str) else json.dumps(body)
        return FakeResponse(200, text)

    return _build


@pytest.fixture
def reply():
    def _build(status: int, body: Any) -> FakeResponse:
        text = body if isinstance(body, str) else json.dumps(body)
        return FakeResponse(status, text)

    return _build


class _SlowHandler(BaseHTTPRequestHandler):
    delay = 1.0

    def do_GET(self):
        time.sleep(self.delay)
        try:
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.end_headers()
            self.wfile.write(b"{}")
        except OSError:
            pass

    def log_message(self, *_args):
        pass


@pytest.fixture
def slow_server():
    """Local HTTP server that waits a second before answering any GET."""

    server = ThreadingHTTPServer(("127.0.0.1", 0), _SlowHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}/slow"
    server.shutdown()
    server.server_close()
