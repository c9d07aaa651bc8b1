"""Handlers that sit between event construction and hooks."""

from sawmill.handler.filter import DUPLICATES_MESSAGE, Filter

__all__ = ["DUPLICATES_MESSAGE", "Filter"]
