"""Reference hook: writes a verbose rendering of each event to a stream."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, TextIO

from sawmill._errors import HookError

if TYPE_CHECKING:
    from sawmill.event.model import Event


class IOWriterHook:
    """Write ``repr(event)`` plus a newline to ``output``.

    Write errors from the stream propagate to the caller; there is no retry.
    Concurrent calls are serialized so lines never interleave.

    Args:
        output: Text stream, e.g. ``sys.stderr`` or an open file.

    """

    __slots__ = ("_lock", "_output")

    def __init__(self, output: TextIO) -> None:
        self._output = output
        self._lock = threading.Lock()

    @property
    def output(self) -> TextIO:
        """The destination stream."""
        return self._output

    def event(self, event: Event) -> None:
        if getattr(self._output, "closed", False):
            msg = "output stream is closed"
            raise HookError(msg)
        with self._lock:
            self._output.write(f"{event!r}\n")
