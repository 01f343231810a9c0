from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, TextIO


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class DetailsFormatter(logging.Formatter):
    """Render ``extra={"details": ...}`` as ``key=value`` pairs after the event name."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None)
        if details:
            line += " " + " ".join(f"{key}={value}" for key, value in details.items())
        return line


def ring_buffer(logger: logging.Logger) -> RingBufferHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def attach_stream(logger: logging.Logger, stream: TextIO) -> logging.StreamHandler:
    # One console handler per logger; a later call retargets it.
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(DetailsFormatter("%(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return handler


def create_logger(
    name: str,
    ring_size: int,
    level: str = "INFO",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if ring_buffer(logger) is None:
        logger.addHandler(RingBufferHandler(max_entries=ring_size))
        logger.propagate = False
    if stream is not None:
        attach_stream(logger, stream)
    return logger
