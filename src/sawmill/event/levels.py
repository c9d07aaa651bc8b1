"""Severity levels.

Eight ordinals ranked Debug < Info < Notice < Warning < Error < Critical
< Alert < Emergency.  Levels are ``IntEnum`` members so they compare and
sort by severity; the short aliases are enum aliases of the same member.

"""

from enum import IntEnum


_LEVEL_NAMES = (
    "Debug",
    "Info",
    "Notice",
    "Warning",
    "Error",
    "Critical",
    "Alert",
    "Emergency",
)


class Level(IntEnum):
    """Ordinal event severity."""

    DEBUG = 0
    DBG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    WARN = 3
    ERROR = 4
    ERR = 4
    CRITICAL = 5
    CRIT = 5
    ALERT = 6
    ALRT = 6
    EMERGENCY = 7
    EMERG = 7

    def __str__(self) -> str:
        return _LEVEL_NAMES[self.value]

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, text: str | int) -> "Level":
        """Resolve a canonical name, alias, or ordinal to a ``Level``.

        Names are matched case-insensitively, so ``"warn"``, ``"Warning"``
        and ``3`` all give ``Level.WARNING``.

        Raises:
            ValueError: ``text`` names no level.

        """
        if isinstance(text, int) and not isinstance(text, bool):
            return cls(text)
        key = str(text).strip().upper()
        if key.isdigit():
            return cls(int(key))
        try:
            return cls[key]
        except KeyError:
            msg = f"unknown level {text!r}"
            raise ValueError(msg) from None
