"""Filter: predicate, level-range and duplicate gating in front of a hook.

Stages run in a fixed order for every event:

1. registered predicates, in registration order (all must accept),
2. the minimum level gate,
3. the maximum level gate,
4. duplicate suppression (when enabled),
5. delivery to the wrapped hook.

A rejected event is a silent no-op.  Exceptions raised by the wrapped hook
propagate unchanged.  A ``Filter`` is itself a hook, so filters nest::

    chain = Filter(Filter(IOWriterHook(sys.stderr)).level_min(Level.ERROR))
    chain.dedup()

Thread Safety:
    One lock guards the predicate list, the level bounds and the dedup
    bookkeeping.  It is held for the whole of ``event()``, delivery
    included, so a roll-up and the event that triggered it always reach
    the hook together and in order.

"""

from __future__ import annotations

import dataclasses
import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sawmill._types import Predicate
    from sawmill.config import SawmillConfig
    from sawmill.event.levels import Level
    from sawmill.event.model import Event
    from sawmill.hook.base import Hook

logger = logging.getLogger(__name__)

DUPLICATES_MESSAGE = "duplicates of last log event suppressed"


class Filter:
    """Gate events before they reach ``hook``.

    Configuration methods return the filter itself so calls can be chained.
    Level bounds are inclusive and unbounded until set; dedup is off until
    enabled.

    Args:
        hook: Downstream consumer (another ``Filter`` or a terminal hook).

    """

    __slots__ = (
        "_dedup",
        "_dup_count",
        "_hook",
        "_last_dup",
        "_last_message",
        "_level_max",
        "_level_min",
        "_lock",
        "_predicates",
    )

    def __init__(self, hook: Hook) -> None:
        self._hook = hook
        self._lock = threading.Lock()
        self._predicates: list[Predicate] = []
        self._level_min: Level | None = None
        self._level_max: Level | None = None
        self._dedup = False
        self._last_message: str | None = None
        self._last_dup: Event | None = None
        self._dup_count = 0

    @classmethod
    def from_config(cls, hook: Hook, config: SawmillConfig) -> Filter:
        """Build a filter with the level bounds and dedup setting of ``config``."""
        flt = cls(hook)
        if config.level_min is not None:
            flt.level_min(config.level_min)
        if config.level_max is not None:
            flt.level_max(config.level_max)
        if config.dedup:
            flt.dedup()
        return flt

    @property
    def hook(self) -> Hook:
        """The wrapped downstream hook."""
        return self._hook

    # ----- configuration -----

    def filter(self, predicate: Predicate) -> Filter:
        """Register a predicate; the event passes only if every predicate accepts."""
        with self._lock:
            self._predicates.append(predicate)
        return self

    def level_min(self, level: Level) -> Filter:
        """Set (or replace) the inclusive lower level bound."""
        with self._lock:
            self._level_min = level
        return self

    def level_max(self, level: Level) -> Filter:
        """Set (or replace) the inclusive upper level bound."""
        with self._lock:
            self._level_max = level
        return self

    def dedup(self, enabled: bool = True) -> Filter:
        """Enable suppression of consecutive events with identical messages.

        Disabling clears any pending suppressed count without emitting it.
        """
        with self._lock:
            self._dedup = enabled
            if not enabled:
                self._reset_dedup()
        return self

    # ----- processing -----

    def event(self, event: Event) -> None:
        """Run ``event`` through every stage and deliver it if accepted."""
        with self._lock:
            for predicate in self._predicates:
                if not predicate(event):
                    return
            if self._level_min is not None and event.level < self._level_min:
                return
            if self._level_max is not None and event.level > self._level_max:
                return
            if self._dedup:
                self._dedup_event(event)
                return
            self._hook.event(event)

    def _dedup_event(self, event: Event) -> None:
        """Suppress a repeat of the last forwarded message, or flush and forward.

        Called with the lock held.
        """
        if self._last_message is not None and event.message == self._last_message:
            self._dup_count += 1
            self._last_dup = event
            return

        rollup = None
        if self._dup_count and self._last_dup is not None:
            rollup = _rollup_event(self._last_dup, self._dup_count)
            logger.debug("flushing %d suppressed duplicates", self._dup_count)

        # Bookkeeping is updated before delivery: an event handed to the
        # hook counts as forwarded even if the hook raises.
        self._last_message = event.message
        self._last_dup = None
        self._dup_count = 0

        if rollup is not None:
            self._hook.event(rollup)
        self._hook.event(event)

    def _reset_dedup(self) -> None:
        self._last_message = None
        self._last_dup = None
        self._dup_count = 0


def _rollup_event(last_dup: Event, count: int) -> Event:
    """Summarize ``count`` suppressed events as one notice.

    The notice reuses the id, level and time of the most recently
    suppressed event.
    """
    return dataclasses.replace(
        last_dup,
        message=DUPLICATES_MESSAGE,
        fields={"count": count},
        flat_fields=MappingProxyType({"count": count}),
    )
