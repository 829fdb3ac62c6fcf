"""A timer that fires callbacks once a clock reaches their scheduled time."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["Event", "Descriptor", "Timer"]


@dataclass
class Event:
    """A scheduled event handed to its callback.

    A callback may set ``re_schedule`` (and usually a new ``time``) to have
    the event queued again.
    """

    time: Any
    re_schedule: bool = False


@dataclass(eq=False)
class _Entry:
    event: Event
    callback: Callable[[Event], Any]
    descriptor: Descriptor
    enabled: bool = True


class Descriptor:
    """Handle to a scheduled event, used to cancel it."""

    __slots__ = ("_entry",)

    def __init__(self) -> None:
        self._entry: _Entry | None = None

    def is_valid(self) -> bool:
        """True while the event is still pending."""
        return self._entry is not None


class Timer:
    """Orders events by time and fires those that are due."""

    def __init__(self, get_current_time: Callable[[], Any]):
        self._get_current_time = get_current_time
        self._heap: list[tuple[Any, int, _Entry]] = []
        self._sequence = itertools.count()

    @property
    def current_time(self) -> Any:
        return self._get_current_time()

    def __len__(self) -> int:
        return len(self._heap)

    def _push(self, entry: _Entry) -> None:
        heapq.heappush(self._heap, (entry.event.time, next(self._sequence), entry))

    def schedule_event(self, time: Any, callback: Callable[[Event], Any]) -> Descriptor:
        """Queue ``callback`` to run once the clock reaches ``time``."""
        descriptor = Descriptor()
        entry = _Entry(Event(time), callback, descriptor)
        descriptor._entry = entry
        self._push(entry)
        return descriptor

    def unschedule_event(self, descriptor: Descriptor) -> None:
        """Cancel a pending event; it stays queued but will not fire."""
        entry = descriptor._entry
        if entry is None:
            raise ValueError("descriptor does not refer to a pending event")
        entry.enabled = False
        descriptor._entry = None

    def trigger_events(self) -> None:
        """Fire every enabled event whose time is not after the current time."""
        now = self.current_time
        while self._heap and self._heap[0][0] <= now:
            _, _, entry = heapq.heappop(self._heap)
            event = entry.event
            event.re_schedule = False
            if entry.enabled:
                entry.callback(event)
            if event.re_schedule:
                self._push(entry)
            else:
                entry.descriptor._entry = None