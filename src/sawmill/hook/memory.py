"""Memory hook: queryable, thread-safe capture of delivered events.

Stores a bounded ring buffer of events, which makes it the natural sink
for tests and for in-process inspection of recent log activity.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  Safe for
    concurrent reads and writes from multiple threads.

"""

import threading
from collections import deque
from datetime import datetime

from sawmill.event.levels import Level
from sawmill.event.model import Event


class MemoryHook:
    """Bounded event store with query support.

    Events are stored in a ring buffer (deque with maxlen).  When the
    buffer is full, the oldest events are discarded automatically.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[Event] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def event(self, event: Event) -> None:
        """Record an event."""
        with self._lock:
            self._events.append(event)

    def events(self) -> list[Event]:
        """All retained events, oldest first."""
        with self._lock:
            return list(self._events)

    def query(
        self,
        *,
        level_min: Level | None = None,
        message: str | None = None,
        since: datetime | None = None,
        limit: int = 100,
    ) -> list[Event]:
        """Query events with optional filters.

        Args:
            level_min: Only return events at or above this level.
            message: Only return events whose message contains this text.
            since: Only return events captured at or after this time.
            limit: Maximum number of events to return.

        Returns:
            List of matching events, most recent first.

        """
        with self._lock:
            results: list[Event] = []
            for event in reversed(self._events):
                if len(results) >= limit:
                    break
                if level_min is not None and event.level < level_min:
                    continue
                if message is not None and message not in event.message:
                    continue
                if since is not None and event.time < since:
                    continue
                results.append(event)
            return results

    def messages(self) -> list[str]:
        """Messages of all retained events, oldest first."""
        with self._lock:
            return [event.message for event in self._events]

    def clear(self) -> list[Event]:
        """Drop every retained event and return them, oldest first."""
        with self._lock:
            drained = list(self._events)
            self._events.clear()
        return drained

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
