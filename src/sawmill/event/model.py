"""Event model: one immutable log occurrence.

``new_event`` does all the expensive work up front: the payload is
deep-copied and flattened, and the call stack (when requested) is resolved
to plain ``StackFrame`` values.  Everything downstream sees a stable,
already-normalized event.

Thread Safety:
    Events are frozen and safe to share across threads.  ``fields`` and
    ``flat_fields`` are private copies; ``flat_fields`` is a read-only view.

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sawmill.event.flatten import de_struct
from sawmill.event.levels import Level
from sawmill.event.stack import StackFrame, capture_stack

if TYPE_CHECKING:
    from sawmill._types import FlatFields
    from sawmill.config import SawmillConfig


@dataclass(frozen=True, slots=True)
class Event:
    """A single log event.

    Attributes:
        id: Caller-assigned identifier, normally monotonically increasing.
        level: Severity.
        time: Wall-clock capture time (UTC).
        message: Human-readable text.
        fields: Deep copy of the caller's structured payload.
        flat_fields: Path-keyed scalars derived from ``fields``.
        stack: Captured frames, innermost (the logging call site) first,
            or ``None`` when no stack was requested.

    """

    id: int
    level: Level
    time: datetime
    message: str
    fields: Any = field(default=None, hash=False)
    flat_fields: FlatFields = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    stack: tuple[StackFrame | None, ...] | None = field(default=None, hash=False)


def new_event(
    id: int,  # noqa: A002
    level: Level,
    message: str,
    fields: Any = None,
    get_stack: bool = False,
    *,
    config: SawmillConfig | None = None,
) -> Event:
    """Create a new Event.

    The time is set to now and ``fields`` is deep-copied and flattened.
    With ``get_stack`` the stack is captured starting at the caller, with
    leading frames under ``config.repo_path`` trimmed away.

    Never raises for any payload.

    """
    if config is None:
        from sawmill.config import DEFAULT_CONFIG

        config = DEFAULT_CONFIG

    now = datetime.now(UTC)

    stack = None
    if get_stack:
        stack = capture_stack(
            sys._getframe(1),  # noqa: SLF001
            repo_path=config.repo_path,
            max_depth=config.stack_max_depth,
        )

    fields_copy, _, flat = de_struct(fields, max_depth=config.flatten_max_depth)

    return Event(
        id=id,
        level=Level(level),
        time=now,
        message=message,
        fields=fields_copy,
        flat_fields=MappingProxyType(flat),
        stack=stack,
    )
