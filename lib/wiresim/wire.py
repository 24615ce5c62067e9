"""
Wire support.

A Wire is an object with a current boolean "signal", which notifies a list of
reactions whenever the signal *changes* via Wire.set_signal(value).

Setting a wire to the value it already has does nothing : no reactions are called.
This is what stops stable circuits from re-triggering themselves forever.

Reactions are added with Wire.add_action(action).  Each new action is also called
once, immediately, when it is added : this is how gates compute their initial
outputs, before any input has changed.

A wire's signal is its only state, and it implements no logic or scheduling functions:
It is purely a message-passing mechanism.
Wires are normally created by Simulator.new_wire, which records each one in the
simulator's wire arena, under its 'index'.
"""

from wiresim.event import Action

__all__ = ["Wire", "to_signal"]


def to_signal(value: bool | int) -> bool:
    """Convert a value to a boolean signal, accepting only booleans and 0 / 1."""
    match value:
        case bool():
            return value
        case 0 | 1 if isinstance(value, int):
            return bool(value)
        case _:
            msg = f"Signal value {value!r} is not a boolean (or 0 / 1)."
            raise TypeError(msg)


class Wire:
    def __init__(self, name: str, index: int = -1):
        self.name = name
        self.index = index
        self.signal: bool = False
        self.reactions: list[Action] = []

    def __str__(self):
        return f"Wire<{self.name} = {self.signal}>"

    def __repr__(self):
        return f"Wire({self.name!r}, index={self.index}, signal={self.signal})"

    def get_signal(self) -> bool:
        return self.signal

    def set_signal(self, value: bool | int):
        value = to_signal(value)
        if value != self.signal:
            self.signal = value
            # N.B. iterate over a copy : a reaction may add further reactions.
            for action in list(self.reactions):
                action()

    def add_action(self, action: Action):
        """Add a reaction, and call it once straight away."""
        self.reactions.append(action)
        action()
