"""
Primitive logic gates.

Each gate is a plain function which installs reactions on its input wire(s), and
returns nothing.  When an input changes, the reaction reads the *current* input
signals and schedules a write of the new output value, after the gate's propagation
delay.  No output is ever changed immediately.

The reactions hold the arena indices of the wires, which are resolved through the
simulator when they execute.

Delays default to the simulator's configured timings (e.g. 'sim.t_and_gate'), but can
be given explicitly.
"""

from operator import and_, or_, xor
from typing import Callable, TypeAlias

from wiresim.simulator import Simulator
from wiresim.wire import Wire

__all__ = [
    "and_gate",
    "inverter",
    "nand_gate",
    "nor_gate",
    "or_gate",
    "xor_gate",
]

BinaryLogic: TypeAlias = Callable[[bool, bool], bool]


def _set_later(sim: Simulator, delay: int, i_output: int, value: bool):
    def set_output():
        sim.wire(i_output).set_signal(value)

    sim.after_delay(delay, set_output)


def inverter(sim: Simulator, input: Wire, output: Wire, delay: int | None = None):
    delay = sim.timing("t_inverter", delay)
    i_input, i_output = sim.handle(input), sim.handle(output)

    def invert_input():
        new_value = not sim.wire(i_input).get_signal()
        _set_later(sim, delay, i_output, new_value)

    input.add_action(invert_input)


def _binary_gate(
    sim: Simulator,
    in1: Wire,
    in2: Wire,
    output: Wire,
    delay: int,
    logic: BinaryLogic,
):
    """Install the same reaction on both inputs, computing 'logic' of the two."""
    i_in1, i_in2, i_output = sim.handle(in1), sim.handle(in2), sim.handle(output)

    def combine_inputs():
        new_value = logic(sim.wire(i_in1).get_signal(), sim.wire(i_in2).get_signal())
        _set_later(sim, delay, i_output, new_value)

    in1.add_action(combine_inputs)
    in2.add_action(combine_inputs)


def and_gate(
    sim: Simulator, in1: Wire, in2: Wire, output: Wire, delay: int | None = None
):
    delay = sim.timing("t_and_gate", delay)
    _binary_gate(sim, in1, in2, output, delay, and_)


def or_gate(
    sim: Simulator, in1: Wire, in2: Wire, output: Wire, delay: int | None = None
):
    delay = sim.timing("t_or_gate", delay)
    _binary_gate(sim, in1, in2, output, delay, or_)


# Some further primitives : each is a single gate, with a single delay.


def nand_gate(
    sim: Simulator, in1: Wire, in2: Wire, output: Wire, delay: int | None = None
):
    delay = sim.timing("t_nand_gate", delay)
    _binary_gate(sim, in1, in2, output, delay, lambda a, b: not (a and b))


def nor_gate(
    sim: Simulator, in1: Wire, in2: Wire, output: Wire, delay: int | None = None
):
    delay = sim.timing("t_nor_gate", delay)
    _binary_gate(sim, in1, in2, output, delay, lambda a, b: not (a or b))


def xor_gate(
    sim: Simulator, in1: Wire, in2: Wire, output: Wire, delay: int | None = None
):
    delay = sim.timing("t_xor_gate", delay)
    _binary_gate(sim, in1, in2, output, delay, xor)
