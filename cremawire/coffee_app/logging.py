import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._emitted = 0
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
            self._emitted += 1

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def mark(self) -> int:
        with self._lock:
            return self._emitted

    def events_since(self, mark: int) -> List[Dict]:
        """Events emitted after ``mark``, limited to what the ring still holds."""
        with self._lock:
            count = min(self._emitted - mark, len(self._events))
            if count <= 0:
                return []
            return list(self._events)[-count:]


def create_logger(name: str, ring_size: int) -> logging.Logger:
    """Return the named logger, attaching a ring buffer unless one is already there."""
    logger = logging.getLogger(name)
    if ring_handler(logger) is not None:
        return logger
    logger.setLevel(logging.INFO)
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_handler(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def ring_events(logger: logging.Logger) -> List[Dict]:
    handler = ring_handler(logger)
    return handler.get_events() if handler else []
