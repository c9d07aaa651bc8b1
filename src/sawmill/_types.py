"""Shared type definitions for sawmill."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from sawmill.event.model import Event

# Dotted/bracketed path -> scalar, e.g. {"user.roles[0]": "admin"}
FlatFields: TypeAlias = Mapping[str, Any]

# Accept/reject callable registered on a Filter
Predicate: TypeAlias = Callable[["Event"], bool]
