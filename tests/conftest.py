"""
Pytest configuration and shared fixtures for the Xelon SDK tests.

The ``api`` fixture runs a small threaded HTTP server on localhost that
stands in for the Xelon API. Tests register canned answers per method and
path and inspect the requests the client sent.
"""

import json
import threading
import time
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlsplit

import pytest

from xelon_sdk import XelonClient


@dataclass
class RecordedRequest:
    """A request as received by the fake API server."""

    method: str
    path: str
    query: str
    headers: Dict[str, str]
    body: bytes

    @property
    def params(self) -> List[Tuple[str, str]]:
        return parse_qsl(self.query, keep_blank_values=True)

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


@dataclass
class CannedResponse:
    status: int = 200
    body: Union[bytes, str, dict, list, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    # Seconds to hold the connection open after writing the body.
    stall: float = 0

    def encoded_body(self) -> bytes:
        if self.body is None:
            return b""
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")


Handler = Callable[[RecordedRequest], Union[CannedResponse, Tuple[int, Any]]]


class FakeAPI:
    """Routing table plus request log shared with the server thread."""

    def __init__(self, url: str):
        self.url = url
        self.requests: List[RecordedRequest] = []
        self._routes: Dict[Tuple[str, str], Union[CannedResponse, Handler]] = {}
        self._lock = threading.Lock()

    def route(
        self,
        method: str,
        path: str,
        body: Any = None,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
        handler: Optional[Handler] = None,
        stall: float = 0,
    ) -> None:
        """
        Register the answer for ``method`` on ``path``.

        ``path`` is relative to the base URL, without a query string. A
        ``handler`` receives the recorded request and returns a
        :class:`CannedResponse` or a ``(status, body)`` tuple; otherwise ``body``, ``status`` and
        ``headers`` are returned as given. ``stall`` keeps the connection open
        for that many seconds after the body was written; together with a
        larger ``Content-Length`` header it simulates a body that stops arriving.
        """
        key = (method.upper(), "/" + path.lstrip("/"))
        with self._lock:
            if handler is not None:
                self._routes[key] = handler
            else:
                self._routes[key] = CannedResponse(status, body, headers or {}, stall)

    @property
    def last_request(self) -> RecordedRequest:
        with self._lock:
            return self.requests[-1]

    def _dispatch(self, request: RecordedRequest) -> CannedResponse:
        with self._lock:
            self.requests.append(request)
            answer = self._routes.get((request.method, request.path))
        if answer is None:
            return CannedResponse(404, {"error": f"no route for {request.method} {request.path}"})
        if callable(answer):
            result = answer(request)
            if isinstance(result, tuple):
                return CannedResponse(*result)
            return result
        return answer


def _make_handler(api: FakeAPI):
    class RequestHandler(BaseHTTPRequestHandler):
        protocol_version = "HTTP/1.1"

        def _handle(self):
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            parts = urlsplit(self.path)
            recorded = RecordedRequest(
                method=self.command,
                path=parts.path,
                query=parts.query,
                headers={key: value for key, value in self.headers.items()},
                body=body,
            )
            answer = api._dispatch(recorded)
            payload = answer.encoded_body()

            self.send_response(answer.status)
            for key, value in answer.headers.items():
                self.send_header(key, value)
            if payload and "Content-Type" not in answer.headers:
                self.send_header("Content-Type", "application/json")
            if "Content-Length" not in answer.headers:
                self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            if payload and self.command != "HEAD":
                self.wfile.write(payload)
            if answer.stall:
                self.wfile.flush()
                time.sleep(answer.stall)

        do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = do_HEAD = _handle

        def log_message(self, format, *args):
            pass

    return RequestHandler


@pytest.fixture
def api():
    """A fake Xelon API served from a background thread."""
    fake = FakeAPI("")
    server = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(fake))
    host, port = server.server_address[:2]
    fake.url = f"http://{host}:{port}/"

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield fake
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


@pytest.fixture
def client(api):
    """A client pointed at the fake API."""
    return XelonClient("auth-token", base_url=api.url, client_id="client-id")
