"""Command-line entry point that runs the simulation."""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import TextIO

from .config import ArgumentError, Config, parse_args
from .monitor import monitor
from .routines import routine_even, routine_odd, routine_single
from .table import Table


def run(config: Config, out: TextIO | None = None) -> int:
    """Run one simulation and return the process exit status."""
    table = Table(config, out)
    if config.philo_count == 1:
        lone = table.philos[0]
        lone.thread = threading.Thread(target=routine_single, args=(table, lone))
        lone.thread.start()
        lone.thread.join()
        return 0

    routine = routine_even if config.philo_count % 2 == 0 else routine_odd
    started: list[threading.Thread] = []
    try:
        for philo in table.philos:
            philo.thread = threading.Thread(target=routine, args=(table, philo))
            philo.thread.start()
            started.append(philo.thread)
    except RuntimeError:
        table.abort()
        for thread in started:
            thread.join()
        return 1

    table.start()
    watcher = threading.Thread(target=monitor, args=(table,))
    try:
        watcher.start()
    except RuntimeError:
        table.stop()
        for thread in started:
            thread.join()
        return 1
    watcher.join()
    for thread in started:
        thread.join()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ArgumentError as exc:
        print(exc)
        return 1
    return run(config, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())