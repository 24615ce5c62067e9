from wiresim.agenda import Agenda
from wiresim.event import Action, Event, check_delay, check_time
from wiresim.wire import Wire

__all__ = ["Simulator"]


class Simulator:
    """
    Object to own a simulation session : the clock, the agenda, and the wires.

    Simulator.agenda holds pending Events, which execute in time order.
    Simulator.wires is the wire "arena" : gate actions refer to wires by their index in
        it, and resolve them through the simulator when they execute.
    Simulator.timings are the configured gate propagation delays.  Defaults are in the
        class TIMINGS, and any of them can be overridden by keyword arguments.
    Actions may schedule further actions with 'after_delay', while the simulation runs.
    """

    TIMINGS: dict[str, int] = {
        "t_inverter": 2,
        "t_and_gate": 3,
        "t_or_gate": 5,
        "t_nand_gate": 3,
        "t_nor_gate": 5,
        "t_xor_gate": 5,
    }

    def __init__(self, verbose: bool = False, **kwargs):
        self.verbose = verbose
        self.agenda = Agenda()
        self.current_time: int = 0
        self.wires: list[Wire] = []
        # Simulation times at which a run announced its start.
        self.started_at: list[int] = []
        # Whether the previous run finished with an empty agenda.
        self._drained = True
        self.timings = self.TIMINGS.copy()
        for name, time in self.timings.items():
            if not name.startswith("t_"):
                raise ValueError(f"Timing name {name!r} does not begin 't_'.")
            time_arg = kwargs.pop(name, None)
            if time_arg is not None:
                time = check_time(time_arg, name=name)
                self.timings[name] = time
            setattr(self, name, time)
        if kwargs:
            msg = f"Unexpected keyword arguments {sorted(kwargs)!r} : not known timings."
            raise TypeError(msg)

    def __repr__(self):
        return (
            f"Simulator(time={self.current_time}, "
            f"pending={len(self.agenda)}, wires={len(self.wires)})"
        )

    # Wires.

    def new_wire(self, name: str | None = None) -> Wire:
        index = len(self.wires)
        if name is None:
            name = f"w{index}"
        wire = Wire(name, index)
        self.wires.append(wire)
        return wire

    def new_wires(self, n_wires: int, name: str | None = None) -> list[Wire]:
        """Make a 'bus' of wires, named like "name[0]", "name[1]" ..."""
        if name is None:
            name = f"bus{len(self.wires)}"
        return [self.new_wire(f"{name}[{i_wire}]") for i_wire in range(n_wires)]

    def wire(self, index: int) -> Wire:
        return self.wires[index]

    def handle(self, wire: Wire) -> int:
        """Return the arena index of a wire, checking that it belongs here."""
        index = wire.index
        if not (0 <= index < len(self.wires)) or self.wires[index] is not wire:
            msg = f"{wire!r} is not a wire of this simulator."
            raise ValueError(msg)
        return index

    # Timings.

    def timing(self, name: str, delay: int | None = None) -> int:
        """Return a given delay, or else the configured timing of that name."""
        if delay is not None:
            return check_delay(delay)
        if name not in self.timings:
            raise ValueError(f"Unknown timing {name!r}.")
        return self.timings[name]

    # Scheduling + execution.

    def after_delay(self, delay: int, action: Action):
        delay = check_delay(delay)
        self.agenda.insert(Event(self.current_time + delay, action))

    def _announce_start(self):
        self.started_at.append(self.current_time)
        if self.verbose:
            print(f"Simulation started at time {self.current_time}.")

    def run(
        self,
        steps: int | None = None,
        *,
        stop: int | None = None,
        period: int | None = None,
    ) -> int:
        """
        Execute pending events, in time order, until there are none left.

        Each action can schedule further events, which are then also executed.

        Optionally, halt after a given number of 'steps' (events executed), or before
        any event at or after time 'stop' (or 'period' after the current time).
        Events not executed remain on the agenda, and a later run will continue.

        Returns the number of events executed.
        """
        verbose = self.verbose
        if steps is None:
            halt_steps = -1
        else:
            halt_steps = check_time(steps, name="steps")
        if period is not None:
            stop = self.current_time + check_time(period, name="period")
        if stop is not None:
            stop = check_time(stop, name="stop")

        if self._drained and self.agenda:
            # Only a fresh start is announced, not resuming a halted run.
            self.after_delay(0, self._announce_start)
            self._drained = False

        n_done = 0
        while self.agenda:
            next_time = self.agenda.peek_time()
            if next_time < self.current_time:
                msg = (
                    "Unexpected backwards step : "
                    f"time {self.current_time} --> {next_time}."
                )
                raise ValueError(msg)
            if stop is not None and next_time >= stop:
                if verbose:
                    print(f"Halted at set time: {next_time} >= {stop}.")
                break
            if halt_steps >= 0 and n_done >= halt_steps:
                if verbose:
                    print(f"Halted after {steps} steps.")
                break
            event = self.agenda.pop_earliest()
            self.current_time = event.time
            if verbose:
                print("NEXT:", event)
            event.action()
            n_done += 1
        else:
            self._drained = True
            if verbose:
                print("Halted with no more events.")
        return n_done

    def step(self, steps: int = 1) -> int:
        return self.run(steps=steps)

    def until(self, time: int) -> int:
        return self.run(stop=time)

    def awhile(self, period: int) -> int:
        return self.run(period=period)
