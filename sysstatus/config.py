"""The status line layout and its settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .network import NetSpeed
from .power import battery_perc, battery_state
from .system import datetime

INTERVAL = 1000
"""Time between updates in milliseconds."""

UNKNOWN_STR = "n/a"
"""Text shown when a value cannot be retrieved."""

MAXLEN = 2048
"""Maximum length of the status line in bytes."""


def _apply(fmt, value):
    pieces = fmt.split("%%")
    return "%".join(piece.replace("%s", value) for piece in pieces)


@dataclass(frozen=True)
class StatusArg:
    """One item of the status line: a function, a format and its argument."""

    func: Callable[..., Optional[str]]
    fmt: str
    arg: Any = None

    def render(self, unknown):
        """Call the function and place its result, or ``unknown``, into the format."""
        result = self.func() if self.arg is None else self.func(self.arg)
        if result is None:
            result = unknown
        return _apply(self.fmt, result)


def default_args(interval=INTERVAL):
    """The configured items of the status line."""
    speed = NetSpeed(interval)
    return [
        StatusArg(speed.rx, " [r: %s]", "wlp3s0"),
        StatusArg(speed.tx, " [t: %s]", "wlp3s0"),
        StatusArg(battery_perc, " [battery: %s%%", "BAT0"),
        StatusArg(battery_state, "%s]", "BAT0"),
        StatusArg(datetime, " [%s]", "%d/%m/%y %T"),
    ]