"""Concurrency, file reading and WebSocket exercises."""

__version__ = "0.1.0"