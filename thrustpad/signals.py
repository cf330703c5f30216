"""A small signal/slot mechanism and the two demo objects wired together at start-up."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked, in connection order, on emit."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def __len__(self) -> int:
        return len(self._slots)

    def connect(self, slot: Slot) -> None:
        """Attach a callable; connecting the same callable twice calls it twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Detach every connection to the callable; raise ValueError if there is none."""
        remaining = [s for s in self._slots if s != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected to this signal")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call every connected slot with the given arguments."""
        for slot in list(self._slots):
            slot(*args)


class Announcer:
    """An object that only owns a signal for others to listen to."""

    def __init__(self) -> None:
        self.print_it = Signal()


class Printer:
    """A receiver whose slot writes a fixed line to a stream (standard error by default)."""

    MESSAGE = "I have printed"

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report(self) -> None:
        """Write the message line."""
        stream = self._stream if self._stream is not None else sys.stderr
        print(self.MESSAGE, file=stream)