"""
Discrete Event Simulation of digital circuits.

Provides Wires, which carry a boolean signal, and gates + circuits which connect them.

A Wire has a boolean signal, and calls its "reactions" whenever that signal changes.

A Simulator owns an Agenda of Events, each of which specifies an Action (a call) at a
particular integer time.  The simulator runs them in time order, and events at the
same time in the order they were scheduled.
Any action can schedule further (future) actions, with Simulator.after_delay.
A simulator can run: until no events remain; for a number of steps; or to a certain
time.

Gates are functions which install reactions on their input wires.  When an input
changes, the gate schedules a change of its output, after its propagation delay.
Circuits, such as adders, are functions which connect up gates and internal wires.

Probes are passive reactions which report a wire's value each time it changes.

Example
-------
>>> sim = Simulator()
>>> a, b, s, c = (sim.new_wire(name) for name in "absc")
>>> half_adder(sim, a, b, s, c)
>>> probe(sim, "sum", s)
@0: Probe<sum> = 0
>>> a.set_signal(True)
>>> n_events = sim.run()
@8: Probe<sum> = 1
"""

# Import the major commonly used definitions into the root module.
from .event import Action, Event
from .agenda import Agenda
from .wire import Wire
from .simulator import Simulator
from .gates import and_gate, inverter, nand_gate, nor_gate, or_gate, xor_gate
from .circuits import full_adder, half_adder, read_bus, ripple_carry_adder, set_bus
from .probes import ProbeRecorder, probe

__all__ = [
    "Action",
    "Agenda",
    "Event",
    "ProbeRecorder",
    "Simulator",
    "Wire",
    "and_gate",
    "full_adder",
    "half_adder",
    "inverter",
    "nand_gate",
    "nor_gate",
    "or_gate",
    "probe",
    "read_bus",
    "ripple_carry_adder",
    "set_bus",
    "xor_gate",
]
