"""WebSocket echo server with JSON configuration, logging and a thread pool."""

__version__ = "0.1.0"