"""Shared table state: forks, philosophers, the state lock and timing helpers."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from .config import Config

_POLL_SECONDS = 0.0005
_READY_POLL_SECONDS = 0.0001


def timestamp_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class _Readiness(Enum):
    WAITING = 0
    READY = 1
    ABORTED = -1


@dataclass
class Philosopher:
    """One seat at the table."""

    id: int
    last_meal: int = 0
    meals_eaten: int = 0
    thread: threading.Thread | None = None


class Table:
    """Everything the philosophers and the monitor share."""

    def __init__(self, config: Config, out: TextIO | None = None) -> None:
        self.config = config
        self.out = sys.stdout if out is None else out
        self.forks = [threading.Lock() for _ in range(config.philo_count)]
        self.philos = [Philosopher(seat) for seat in range(config.philo_count)]
        self.lock = threading.Lock()
        self.someone_dead = False
        self._readiness = _Readiness.WAITING
        self.start_time = timestamp_ms()

    def _fork_pair(self, philo: Philosopher) -> tuple[int, int]:
        return philo.id, (philo.id + 1) % self.config.philo_count

    def print_status(self, philo: Philosopher, msg: str) -> None:
        """Log a state change unless the simulation has stopped."""
        with self.lock:
            if not self.someone_dead:
                elapsed = timestamp_ms() - self.start_time
                self.out.write(f"{elapsed} {philo.id + 1} {msg}\n")
                self.out.flush()

    def take_forks(self, philo: Philosopher) -> None:
        """Pick up both forks; even seats start with the right one."""
        left, right = self._fork_pair(philo)
        order = (right, left) if philo.id % 2 == 0 else (left, right)
        for fork in order:
            self.forks[fork].acquire()
            self.print_status(philo, "has taken a fork")

    def drop_forks(self, philo: Philosopher) -> None:
        left, right = self._fork_pair(philo)
        self.forks[left].release()
        self.forks[right].release()

    def smart_sleep(self, ms: int) -> None:
        """Sleep for ms milliseconds, waking early if the simulation stops."""
        start = timestamp_ms()
        while not self.is_stopped():
            if timestamp_ms() - start >= ms:
                return
            time.sleep(_POLL_SECONDS)

    def wait_until_ready(self) -> bool:
        """Block until the start signal; False if the start was aborted."""
        while True:
            with self.lock:
                if self._readiness is _Readiness.ABORTED:
                    return False
                if self._readiness is _Readiness.READY:
                    return True
            time.sleep(_READY_POLL_SECONDS)

    def is_stopped(self) -> bool:
        with self.lock:
            return self.someone_dead

    def start(self) -> None:
        """Reset every philosopher's last meal to the start time and release them."""
        with self.lock:
            for philo in self.philos:
                philo.last_meal = self.start_time
            self._readiness = _Readiness.READY

    def abort(self) -> None:
        """Tell waiting philosophers that the simulation will not start."""
        with self.lock:
            self._readiness = _Readiness.ABORTED

    def stop(self) -> None:
        """End the simulation; later status messages are suppressed."""
        with self.lock:
            self.someone_dead = True