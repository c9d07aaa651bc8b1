"""Logger: assigns event ids and builds events for a handler.

Provides one method per level plus a generic ``event()``.  Ids start at 1
and increase by one per call, across threads.

Thread Safety:
    Id allocation is locked; event construction and delivery run on the
    calling thread without the lock, so the handler decides its own
    ordering guarantees (``Filter`` serializes delivery).

"""

from __future__ import annotations

import itertools
import threading
from typing import TYPE_CHECKING, Any

from sawmill.config import DEFAULT_CONFIG, SawmillConfig
from sawmill.event.levels import Level
from sawmill.event.model import new_event

if TYPE_CHECKING:
    from sawmill.hook.base import Hook


class Logger:
    """Front end that turns log calls into events.

    Args:
        handler: Receives every event (a ``Filter`` or a terminal hook).
        config: Stack trimming, depth limits and ``stack_min_level``.

    """

    __slots__ = ("_config", "_handler", "_ids", "_lock")

    def __init__(self, handler: Hook, *, config: SawmillConfig | None = None) -> None:
        self._handler = handler
        self._config = config if config is not None else DEFAULT_CONFIG
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def handler(self) -> Hook:
        """The handler events are delivered to."""
        return self._handler

    @property
    def config(self) -> SawmillConfig:
        """The configuration events are built with."""
        return self._config

    def _next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def event(self, level: Level, message: str, fields: Any = None) -> int:
        """Build and deliver one event; return its id.

        A stack is captured when ``config.stack_min_level`` is set and
        ``level`` is at or above it.
        """
        stack_min = self._config.stack_min_level
        get_stack = stack_min is not None and level >= stack_min
        event = new_event(
            self._next_id(),
            level,
            message,
            fields,
            get_stack,
            config=self._config,
        )
        self._handler.event(event)
        return event.id

    # ----- per-level shortcuts -----

    def debug(self, message: str, fields: Any = None) -> int:
        return self.event(Level.DEBUG, message, fields)

    def info(self, message: str, fields: Any = None) -> int:
        return self.event(Level.INFO, message, fields)

    def notice(self, message: str, fields: Any = None) -> int:
        return self.event(Level.NOTICE, message, fields)

    def warning(self, message: str, fields: Any = None) -> int:
        return self.event(Level.WARNING, message, fields)

    def error(self, message: str, fields: Any = None) -> int:
        return self.event(Level.ERROR, message, fields)

    def critical(self, message: str, fields: Any = None) -> int:
        return self.event(Level.CRITICAL, message, fields)

    def alert(self, message: str, fields: Any = None) -> int:
        return self.event(Level.ALERT, message, fields)

    def emergency(self, message: str, fields: Any = None) -> int:
        return self.event(Level.EMERGENCY, message, fields)
