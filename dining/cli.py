"""Command entry point: read the arguments and run the table."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from dining.args import ArgumentError, validate_args
from dining.routine import monitor, philosopher_routine, single_routine
from dining.simulation import Settings, Simulation, parse_settings


def _report(message: str) -> None:
    sys.stderr.write(f"Error: \n{message}\n")


def run(settings: Settings, out: TextIO | None = None) -> Simulation:
    """Run a whole simulation, writing its log to ``out``, and return it."""
    simulation = Simulation(settings, out=out)
    if settings.philosopher_count > 1:
        threads = [threading.Thread(target=monitor, args=(simulation,))]
        threads += [
            threading.Thread(target=philosopher_routine, args=(simulation, p))
            for p in simulation.philosophers
        ]
    else:
        threads = [
            threading.Thread(
                target=single_routine, args=(simulation, simulation.philosophers[0])
            )
        ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_args(args)
    except ArgumentError as exc:
        _report(str(exc))
        return 1
    try:
        settings = parse_settings(args)
    except ArgumentError as exc:
        _report(str(exc))
        return 2
    try:
        run(settings)
    except RuntimeError:
        _report("Creating thread.")
        return 4
    return 0


if __name__ == "__main__":
    sys.exit(main())