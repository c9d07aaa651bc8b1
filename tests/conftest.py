"""Shared test fixtures for sawmill."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

import pytest

from sawmill.event import Event, Level, new_event


class CaptureHook:
    """Hook that keeps every event in a plain list."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def event(self, event: Event) -> None:
        self.events.append(event)


class FailingHook:
    """Hook that always raises the given exception."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def event(self, event: Event) -> None:
        raise self.exc


@pytest.fixture
def capture() -> CaptureHook:
    return CaptureHook()


@pytest.fixture
def make_event(request: pytest.FixtureRequest) -> Callable[..., Event]:
    """Factory for events with increasing ids and a per-test message.

    The message and fields name the requesting test so events from
    different tests never compare equal.
    """
    counter = itertools.count(1)
    name = request.node.name

    def factory(level: Level = Level.DEBUG, message: str | None = None, **fields: Any) -> Event:
        return new_event(
            next(counter),
            level,
            message if message is not None else f"testing {name}()",
            fields or {"test": name},
            False,
        )

    return factory
