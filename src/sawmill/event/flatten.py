"""Field flattening: deep copy plus a path-keyed flat view of arbitrary data.

``de_struct`` walks a caller's structured payload once and produces:

- a deep copy with no mutable container shared with the input, and
- a flat ``{path: scalar}`` mapping for hooks that cannot render nesting.

Records are dataclass instances, namedtuples, attrs classes and plain
objects carrying a ``__dict__``.  Mapping keys and record attributes are
joined with ``.``; sequence positions become ``[i]``::

    >>> _, kind, flat = de_struct({"user": {"name": "ann", "roles": ["a", "b"]}})
    >>> flat
    {'user.name': 'ann', 'user.roles[0]': 'a', 'user.roles[1]': 'b'}

Never raises.  Values the walker cannot copy are stringified; a reference
back to a container on the current path becomes ``"<cycle: TypeName>"``;
anything nested deeper than ``max_depth`` is stringified in place.

"""

from __future__ import annotations

import copy
import dataclasses
import datetime
import decimal
import enum
import fractions
import inspect
import logging
import pathlib
import uuid
from collections.abc import Mapping, Sequence, Set
from typing import Any

logger = logging.getLogger(__name__)

# Key used for the single flat entry of a non-structured root value.
SCALAR_KEY = "value"

DEFAULT_MAX_DEPTH = 32

_UNSET = object()

_SCALAR_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    decimal.Decimal,
    fractions.Fraction,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    enum.Enum,
    pathlib.PurePath,
    range,
)
_BUFFER_TYPES = (bytearray, memoryview)


class Kind(enum.Enum):
    """Shape of a flattened value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"


def de_struct(
    value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[Any, Kind, dict[str, Any]]:
    """Deep-copy ``value`` and derive its flat field map.

    Args:
        value: Arbitrary payload.
        max_depth: Container nesting limit.

    Returns:
        ``(copy, kind, flat)``.  A ``None`` root gives an empty flat map;
        any other scalar root gives ``{SCALAR_KEY: value}``.

    """
    kind = kind_of(value)
    flat: dict[str, Any] = {}
    if value is None:
        return None, Kind.SCALAR, flat
    walker = _Walker(flat, max_depth)
    copied = walker.walk(value, "", 0)
    if kind is Kind.SCALAR:
        flat[SCALAR_KEY] = copied
    return copied, kind, flat


def kind_of(value: Any) -> Kind:
    """Classify ``value`` the way ``de_struct`` will walk it."""
    if value is None or isinstance(value, _SCALAR_TYPES + _BUFFER_TYPES):
        return Kind.SCALAR
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if _is_namedtuple(value) or _is_declared_record(value):
        return Kind.RECORD
    if isinstance(value, (Sequence, Set)):
        return Kind.SEQUENCE
    if _is_record(value):
        return Kind.RECORD
    return Kind.SCALAR


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _is_declared_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or hasattr(type(value), "__attrs_attrs__")


def _is_record(value: Any) -> bool:
    if isinstance(value, type) or inspect.isroutine(value) or inspect.ismodule(value):
        return False
    if isinstance(value, BaseException):
        return False
    return hasattr(value, "__dict__")


def _copy_scalar(value: Any) -> Any:
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, _BUFFER_TYPES):
        return bytes(value)
    return stringify(value)


def _record_items(value: Any) -> list[tuple[str, Any]]:
    """Public attribute name/value pairs of a record, in declaration order.

    Declared fields that were never assigned (``field(init=False)`` without
    a default) are skipped.
    """
    if dataclasses.is_dataclass(value):
        names = [f.name for f in dataclasses.fields(value)]
    elif (attrs := getattr(type(value), "__attrs_attrs__", None)) is not None:
        names = [a.name for a in attrs]
    else:
        return [(k, v) for k, v in vars(value).items() if not k.startswith("_")]
    pairs = [(name, getattr(value, name, _UNSET)) for name in names]
    return [(name, item) for name, item in pairs if item is not _UNSET]


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def stringify(value: Any) -> str:
    """Best-effort printable form of ``value``."""
    try:
        return str(value)
    except Exception:  # noqa: BLE001 arbitrary __str__ implementations
        logger.debug("str() failed for %s; using default repr", type(value).__name__)
        return object.__repr__(value)


class _Walker:
    """Single-use recursive copier that fills a flat map as it goes."""

    __slots__ = ("_active", "_flat", "_max_depth")

    def __init__(self, flat: dict[str, Any], max_depth: int) -> None:
        self._flat = flat
        self._max_depth = max_depth
        # ids of containers on the current path
        self._active: set[int] = set()

    def walk(self, value: Any, path: str, depth: int) -> Any:
        kind = kind_of(value)
        if kind is Kind.SCALAR:
            leaf = _copy_scalar(value)
            if path:
                self._flat[path] = leaf
            return leaf

        if id(value) in self._active:
            logger.debug("cycle through %s at %r", type(value).__name__, path)
            return self._leaf(f"<cycle: {type(value).__name__}>", path)
        if depth >= self._max_depth:
            logger.debug("max depth %d reached at %r", self._max_depth, path)
            return self._leaf(stringify(value), path)

        self._active.add(id(value))
        try:
            if kind is Kind.MAPPING:
                return self._walk_mapping(value, path, depth)
            if kind is Kind.RECORD:
                return self._walk_record(value, path, depth)
            return self._walk_sequence(value, path, depth)
        finally:
            self._active.discard(id(value))

    def _leaf(self, leaf: str, path: str) -> str:
        if path:
            self._flat[path] = leaf
        return leaf

    def _walk_mapping(self, value: Mapping[Any, Any], path: str, depth: int) -> dict[Any, Any]:
        out: dict[Any, Any] = {}
        for key, item in value.items():
            out[key] = self.walk(item, _join(path, stringify(key)), depth + 1)
        return out

    def _walk_sequence(self, value: Any, path: str, depth: int) -> Any:
        if isinstance(value, Set):
            # Sets have no stable order; sort by printable form so repeated
            # flattening yields identical index keys.
            items = sorted(value, key=stringify)
        else:
            items = list(value)
        copied = [
            self.walk(item, f"{path}[{i}]", depth + 1) for i, item in enumerate(items)
        ]
        if isinstance(value, tuple):
            return tuple(copied)
        if isinstance(value, Set):
            try:
                return frozenset(copied) if isinstance(value, frozenset) else set(copied)
            except TypeError:
                # a member degraded to an unhashable copy
                return copied
        return copied

    def _walk_record(self, value: Any, path: str, depth: int) -> Any:
        if _is_namedtuple(value):
            items = list(zip(type(value)._fields, value, strict=True))
        else:
            items = _record_items(value)
        copied = {
            name: self.walk(item, _join(path, name), depth + 1) for name, item in items
        }
        if _is_namedtuple(value):
            return type(value)._make(copied[name] for name, _ in items)
        return _rebuild_record(value, copied)


def _rebuild_record(value: Any, copied: dict[str, Any]) -> Any:
    """Shallow-copy a record and install the deep-copied attribute values.

    Instance attributes that were not walked (private names, extras set
    outside the declared fields) are deep-copied too, so the clone shares
    no mutable state with ``value``.  Falls back to the plain attribute
    dict when the object refuses to be copied or assigned (custom
    ``__copy__``, read-only properties, uncopyable private state).
    """
    hidden = {
        k: v for k, v in getattr(value, "__dict__", {}).items() if k not in copied
    }
    try:
        clone = copy.copy(value)
        for name, item in copied.items():
            object.__setattr__(clone, name, item)
        for name, item in copy.deepcopy(hidden).items():
            object.__setattr__(clone, name, item)
    except Exception:  # noqa: BLE001 arbitrary user classes
        logger.debug("cannot clone %s; storing attributes as a dict", type(value).__name__)
        return copied
    return clone
