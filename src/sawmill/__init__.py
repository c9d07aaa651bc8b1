"""Sawmill: structured event logging core.

Builds immutable events with deep-copied, flattened payloads and optional
call stacks, then routes them through filters to hooks.

Quick start::

    import sys
    from sawmill import Filter, IOWriterHook, Level, Logger

    chain = Filter(IOWriterHook(sys.stderr)).level_min(Level.NOTICE).dedup()
    log = Logger(chain)
    log.warning("disk nearly full", {"mount": "/var", "free": 0.04})

"""

import logging

from sawmill._errors import ConfigError, HookError, SawmillError
from sawmill.config import SawmillConfig
from sawmill.config_loader import load_config
from sawmill.event import Event, Level, StackFrame, de_struct, new_event
from sawmill.handler import Filter
from sawmill.hook import Hook, IOWriterHook, MemoryHook
from sawmill.logger import Logger

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "Event",
    "Filter",
    "Hook",
    "HookError",
    "IOWriterHook",
    "Level",
    "Logger",
    "MemoryHook",
    "SawmillConfig",
    "SawmillError",
    "StackFrame",
    "__version__",
    "de_struct",
    "load_config",
    "new_event",
]
