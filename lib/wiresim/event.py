"""
Fundamental simulation event classes.

An Action is the basic type of callback used to implement event passing : a
zero-argument call, performed for its side effects.

An Event describes an Action to be performed at a given (integer) simulation time.
"""

from __future__ import annotations
from typing import Any, Callable, TypeAlias

Action: TypeAlias = Callable[[], Any]

__all__ = ["Action", "Event", "check_delay", "check_time"]


def check_time(time: int, name: str = "time") -> int:
    """Check that a simulation time (or delay) is a non-negative integer.

    N.B. bools are rejected, even though they are technically ints.
    """
    match time:
        case int() if not isinstance(time, bool):
            pass
        case _:
            raise TypeError(f"Argument {name!r}, {time!r} has unsupported type.")
    if time < 0:
        msg = f"Argument {name!r} must not be negative : got {time}."
        raise ValueError(msg)
    return time


def check_delay(delay: int) -> int:
    return check_time(delay, name="delay")


class Event:
    time: int
    action: Action

    def __init__(self, time: int, action: Action):
        self.time = check_time(time)
        if not callable(action):
            raise TypeError(f"Argument 'action', {action!r} is not callable.")
        self.action = action

    def __repr__(self):
        return f"Event(time={self.time}, action={self.action!r})"

    def __call__(self):
        return self.action()
