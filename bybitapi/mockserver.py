"""A local HTTP server that answers fixed JSON bodies, and JSON comparison."""

from __future__ import annotations

import base64
import threading
from dataclasses import asdict, dataclass, is_dataclass
from enum import Enum
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

NOT_FOUND_BODY = b"404 page not found\n"


@dataclass(frozen=True)
class HandlerOption:
    """Answer requests to ``path`` made with ``method`` with ``status`` and ``body``."""

    path: str
    method: str
    status: int
    body: bytes


def handler_option(path: str, method: str, status: int, body: bytes) -> HandlerOption:
    return HandlerOption(path=path, method=method, status=status, body=bytes(body))


def _match_route(routes: Mapping[str, Any], path: str) -> Optional[Any]:
    """Exact match first; patterns ending in '/' match their whole subtree."""
    if path in routes:
        return routes[path]
    candidates = [p for p in routes if p.endswith("/") and path.startswith(p)]
    if not candidates:
        return None
    return routes[max(candidates, key=len)]


def _build_routes(options) -> dict:
    routes = {}
    for option in options:
        if option.path in routes:
            raise ValueError(f"multiple registrations for {option.path}")
        routes[option.path] = option
    return routes


def _make_handler(routes: Mapping[str, HandlerOption]):
    class _Handler(BaseHTTPRequestHandler):
        def _discard_request_body(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            if length:
                self.rfile.read(length)

        def _reply(self, status: int, content_type: str, body: bytes) -> None:
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        def _dispatch(self) -> None:
            self._discard_request_body()
            option = _match_route(routes, urlsplit(self.path).path)
            if option is None:
                self._reply(404, "text/plain; charset=utf-8", NOT_FOUND_BODY)
            elif self.command == option.method:
                self._reply(option.status, "application/json", option.body)
            else:
                self._reply(200, "application/json", b"")

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: Any) -> None:
            pass

    return _Handler


class MockServer:
    """A running local server; use as a context manager or call :meth:`close`."""

    def __init__(self, options) -> None:
        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(_build_routes(options)))
        self._httpd.daemon_threads = True
        host, port = self._httpd.server_address[:2]
        self.url = f"http://{host}:{port}"
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)
        self._thread.start()

    def close(self) -> None:
        self._httpd.shutdown()
        self._httpd.server_close()
        self._thread.join()

    def __enter__(self) -> "MockServer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def serve(*args: HandlerOption) -> MockServer:
    """Start a local server answering the given handler options."""
    return MockServer(args)


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return _jsonable(to_dict())
    if is_dataclass(value) and not isinstance(value, type):
        return _jsonable(asdict(value))
    if isinstance(value, Enum):
        return _jsonable(value.value)
    if isinstance(value, Mapping):
        return {
            (k.value if isinstance(k, Enum) else str(k)): _jsonable(v) for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    raise TypeError(f"cannot represent {type(value).__name__} as JSON")


def _same(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict):
        return isinstance(b, dict) and a.keys() == b.keys() and all(_same(a[k], b[k]) for k in a)
    if isinstance(a, list):
        return isinstance(b, list) and len(a) == len(b) and all(map(_same, a, b))
    if isinstance(a, (int, float)):
        return isinstance(b, (int, float)) and float(a) == float(b)
    return a == b


def json_equal(want: Any, got: Any) -> bool:
    """Whether two values have the same JSON representation, ignoring key order."""
    return _same(_jsonable(want), _jsonable(got))