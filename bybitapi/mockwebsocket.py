"""A local websocket server that answers every message with a fixed body."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any
from urllib.parse import urlsplit

from websockets.exceptions import ConnectionClosed
from websockets.sync.server import serve as _serve

from .mockserver import NOT_FOUND_BODY, _build_routes, _match_route

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WebsocketHandlerOption:
    """Answer each message received on ``path`` with ``body``."""

    path: str
    body: bytes


def websocket_handler_option(path: str, body: bytes) -> WebsocketHandlerOption:
    return WebsocketHandlerOption(path=path, body=bytes(body))


def make_ws_protocol(url: str) -> str:
    """Turn an http(s) URL into the matching ws(s) URL."""
    if url.startswith("https"):
        return "wss" + url[len("https"):]
    if url.startswith("http"):
        return "ws" + url[len("http"):]
    return url


class MockWebsocketServer:
    """A running local websocket server; use as a context manager or call :meth:`close`."""

    def __init__(self, options) -> None:
        routes = _build_routes(options)

        def process_request(connection, request):
            if _match_route(routes, urlsplit(request.path).path) is None:
                return connection.respond(HTTPStatus.NOT_FOUND, NOT_FOUND_BODY.decode())
            return None

        def handler(connection) -> None:
            option = _match_route(routes, urlsplit(connection.request.path).path)
            try:
                for message in connection:
                    if isinstance(message, str):
                        connection.send(option.body.decode("utf-8", "replace"))
                    else:
                        connection.send(option.body)
            except ConnectionClosed as exc:
                _log.info("read: %s", exc)

        self._server = _serve(handler, "127.0.0.1", 0, process_request=process_request)
        host, port = self._server.socket.getsockname()[:2]
        self.url = make_ws_protocol(f"http://{host}:{port}")
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def close(self) -> None:
        self._server.shutdown()
        self._thread.join()

    def __enter__(self) -> "MockWebsocketServer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def serve_websocket(*args: WebsocketHandlerOption) -> MockWebsocketServer:
    """Start a local websocket server answering the given handler options."""
    return MockWebsocketServer(args)