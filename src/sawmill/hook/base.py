"""Hook contract: the terminal consumer of accepted events.

A hook implements one method, ``event(e)``.  It may block on I/O.  Any
exception it raises travels back unchanged through every filter to the
code that logged the event.  A hook that keeps events beyond the call
keeps the (immutable) event object itself or copies what it needs.

"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sawmill.event.model import Event


@runtime_checkable
class Hook(Protocol):
    """Anything that accepts events."""

    def event(self, event: "Event") -> None: ...
