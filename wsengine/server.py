"""Blocking WebSocket echo server."""

from __future__ import annotations

import threading
from typing import Optional, Union

from websockets.exceptions import ConnectionClosed
from websockets.sync.server import Server, ServerConnection, serve

from wsengine.logsys import Log, get_log

Message = Union[str, bytes]


class Handler:
    """Handles messages arriving on a WebSocket connection."""

    def __init__(self, log: Optional[Log] = None) -> None:
        self._log = log if log is not None else get_log()
        self._log.info("WebSocketHandler created successfully")

    def echo(self, ws) -> Message:
        """Read one message and send it back with the same frame type."""
        message = ws.recv()
        ws.send(message)
        return message


class EchoServer:
    """WebSocket server that echoes every message back to its sender."""

    def __init__(self, port: int = 8080, log: Optional[Log] = None, host: str = "0.0.0.0") -> None:
        self.port = port
        self.host = host
        self._log = log if log is not None else get_log()
        self._handler = Handler(self._log)
        self._server: Optional[Server] = None
        self._lock = threading.Lock()
        self._stopping = False
        self.ready = threading.Event()
        self._log.info("Starting communication server")

    def _serve_connection(self, ws: ServerConnection) -> None:
        self._log.info("client connected")
        self._log.info("websocket handshake completed successfully")
        try:
            while True:
                self._handler.echo(ws)
        except ConnectionClosed:
            self._log.info("client disconnected")

    def run(self) -> None:
        """Bind and serve until stop() is called."""
        try:
            server = serve(self._serve_connection, self.host, self.port)
        except OSError as exc:
            self._log.error(f"error {exc}")
            self.ready.set()
            raise
        with self._lock:
            if self._stopping:
                server.shutdown()
                self.ready.set()
                return
            self._server = server
        self.port = server.socket.getsockname()[1]
        self._log.info(f"Communication Server is running at: {self.port}")
        self.ready.set()
        server.serve_forever()

    def stop(self) -> None:
        with self._lock:
            if self._stopping:
                return
            self._stopping = True
            server = self._server
        if server is not None:
            server.shutdown()
        self._log.info("Communication Server stopped")