"""
The Agenda : a time-ordered queue of pending Events.

Events are kept in non-decreasing time order.  Among events with the same time, the
order of insertion is preserved, so simultaneous actions happen first-come,
first-served.
"""

from bisect import insort_right
from typing import Iterator

from wiresim.event import Event

__all__ = ["Agenda"]


class Agenda:
    def __init__(self, events: list[Event] | None = None):
        self._events: list[Event] = []
        for event in events or []:
            self.insert(event)

    def __repr__(self):
        return f"Agenda({self._events!r})"

    def __len__(self):
        return len(self._events)

    def __bool__(self):
        return bool(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def is_empty(self) -> bool:
        return not self._events

    def insert(self, event: Event):
        # N.B. 'right' insertion places the new event *after* any others at the same
        # time, which is what makes equal-time events run in FIFO order.
        insort_right(self._events, event, key=lambda ev: ev.time)

    def peek_time(self) -> int | None:
        """Return the time of the earliest event, or None if there are none."""
        if not self._events:
            return None
        return self._events[0].time

    def pop_earliest(self) -> Event:
        if not self._events:
            raise IndexError("Cannot pop from an empty agenda.")
        return self._events.pop(0)

    def clear(self):
        self._events = []
