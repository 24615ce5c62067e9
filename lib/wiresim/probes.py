"""
Probe support.

A probe is a passive reaction on a wire, which reports the wire's value whenever it
changes (and once when it is installed).  It has no effect on the simulation.

Reports are made by calling a 'report' client, as report(label, time, value).
When no client is given, probes call REPORT_HANDLER_CLIENT : its default is the
'default_report' function, which prints to the terminal.  This can be changed to
redirect the output of all such probes.

A ProbeRecorder collects reports as (time, label, value) records, instead.
"""

from typing import Callable, TypeAlias

from wiresim.simulator import Simulator
from wiresim.wire import Wire

__all__ = ["ProbeRecorder", "ReportClient", "default_report", "probe"]

ReportClient: TypeAlias = Callable[[str, int, bool], None]


def default_report(label: str, time: int, value: bool):
    """The default report operation = print the probe value to the terminal."""
    print(f"@{time}: Probe<{label}> = {int(value)}")


# : A single common definition for what default probe reports do.
REPORT_HANDLER_CLIENT: ReportClient = default_report


def probe(sim: Simulator, label: str, wire: Wire, report: ReportClient | None = None):
    def report_value():
        # N.B. look up the module handler at call time, so it can be replaced.
        client = REPORT_HANDLER_CLIENT if report is None else report
        client(label, sim.current_time, wire.get_signal())

    wire.add_action(report_value)


class ProbeRecorder:
    """Record wire values, at the times when they change."""

    def __init__(self):
        self.records: list[tuple[int, str, bool]] = []

    def report(self, label: str, time: int, value: bool):
        self.records.append((time, label, value))

    def probe(self, sim: Simulator, label: str, wire: Wire):
        probe(sim, label, wire, report=self.report)

    def values(self, label: str) -> list[tuple[int, bool]]:
        """The (time, value) records of just one label."""
        return [(time, value) for time, name, value in self.records if name == label]

    def stringify(self) -> str:
        return ", ".join(
            f"{time}:{label}={int(value)}" for time, label, value in self.records
        )

    def clear(self):
        self.records = []
