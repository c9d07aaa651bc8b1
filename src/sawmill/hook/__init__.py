"""Hooks: terminal consumers of events.

``Hook`` is the one-method contract; ``IOWriterHook`` renders events to a
stream and ``MemoryHook`` keeps them in memory for inspection.
"""

from sawmill.hook.base import Hook
from sawmill.hook.memory import MemoryHook
from sawmill.hook.writer import IOWriterHook

__all__ = ["Hook", "IOWriterHook", "MemoryHook"]
