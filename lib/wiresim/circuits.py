"""
Composite circuits, built only by wiring together primitive gates and new internal
wires.

Delays of the component gates can be overridden with the 'inverter_delay',
'and_delay' and 'or_delay' keywords, which are passed on to every gate of that type.

Multi-bit values are carried on "buses" : lists of wires with the least significant
bit first.
"""

from wiresim.gates import and_gate, inverter, or_gate
from wiresim.simulator import Simulator
from wiresim.wire import Wire

__all__ = [
    "full_adder",
    "half_adder",
    "read_bus",
    "ripple_carry_adder",
    "set_bus",
]


def half_adder(
    sim: Simulator,
    a: Wire,
    b: Wire,
    s: Wire,
    c: Wire,
    *,
    inverter_delay: int | None = None,
    and_delay: int | None = None,
    or_delay: int | None = None,
):
    """
    Sum two bits : s = (a OR b) AND NOT(a AND b), c = a AND b.

    The slowest path (a -> c -> s) takes and + inverter + and delays.
    """
    d, e = sim.new_wire(f"{s.name}.d"), sim.new_wire(f"{s.name}.e")
    or_gate(sim, a, b, d, delay=or_delay)
    and_gate(sim, a, b, c, delay=and_delay)
    inverter(sim, c, e, delay=inverter_delay)
    and_gate(sim, d, e, s, delay=and_delay)


def full_adder(
    sim: Simulator,
    a: Wire,
    b: Wire,
    c_in: Wire,
    s: Wire,
    c_out: Wire,
    **delays: int | None,
):
    """Sum two bits plus a carry, with two half adders and an OR of their carries."""
    s1 = sim.new_wire(f"{s.name}.s1")
    c1 = sim.new_wire(f"{s.name}.c1")
    c2 = sim.new_wire(f"{s.name}.c2")
    half_adder(sim, b, c_in, s1, c1, **delays)
    half_adder(sim, a, s1, s, c2, **delays)
    or_gate(sim, c1, c2, c_out, delay=delays.get("or_delay"))


def ripple_carry_adder(
    sim: Simulator,
    a_bus: list[Wire],
    b_bus: list[Wire],
    s_bus: list[Wire],
    c: Wire,
    **delays: int | None,
):
    """
    Add two n-bit numbers, with a chain of n full adders.

    'c' is the final carry-out.  The carry-in of the first stage is a new wire, which
    is never set (so is always 0).
    """
    n_bits = len(a_bus)
    if n_bits == 0:
        raise ValueError("Cannot build an adder for zero bits.")
    if len(b_bus) != n_bits or len(s_bus) != n_bits:
        msg = (
            "Adder buses have mismatched sizes : "
            f"a={n_bits}, b={len(b_bus)}, s={len(s_bus)}."
        )
        raise ValueError(msg)
    carry = sim.new_wire(f"{c.name}.c_in")
    for i_bit, (a, b, s) in enumerate(zip(a_bus, b_bus, s_bus)):
        if i_bit == n_bits - 1:
            c_out = c
        else:
            c_out = sim.new_wire(f"{c.name}.c{i_bit}")
        full_adder(sim, a, b, carry, s, c_out, **delays)
        carry = c_out


def set_bus(wires: list[Wire], value: int):
    """Set the wires of a bus from the bits of an integer, LSB first."""
    n_bits = len(wires)
    if not (0 <= value < 2**n_bits):
        msg = f"Value {value} does not fit in a bus of {n_bits} bits."
        raise ValueError(msg)
    for i_bit, wire in enumerate(wires):
        wire.set_signal(bool((value >> i_bit) & 1))


def read_bus(wires: list[Wire]) -> int:
    return sum(1 << i_bit for i_bit, wire in enumerate(wires) if wire.get_signal())
