"""Event construction: levels, flattened fields, and captured stacks.

Quick Start:
    >>> from sawmill.event import Level, new_event
    >>> event = new_event(1, Level.INFO, "user created", {"user": {"id": 7}})
    >>> event.flat_fields["user.id"]
    7

"""

from sawmill.event.flatten import Kind, de_struct
from sawmill.event.levels import Level
from sawmill.event.model import Event, new_event
from sawmill.event.stack import StackFrame, capture_stack

__all__ = [
    "Event",
    "Kind",
    "Level",
    "StackFrame",
    "capture_stack",
    "de_struct",
    "new_event",
]
