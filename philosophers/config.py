"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

USAGE = "Usage: philos, die, eat, sleep, must_eat(opt)"
NON_NUMERIC = "Error: Non-numeric argument detected."
NOT_POSITIVE = "Error: Values must be greater than 0."

_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used."""


@dataclass(frozen=True)
class Config:
    """Simulation parameters; times are in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = -1


def _is_number(text: str) -> bool:
    return bool(text) and all(char in _DIGITS for char in text)


def parse_args(argv: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name."""
    if len(argv) not in (4, 5):
        raise ArgumentError(USAGE)
    if not all(_is_number(arg) for arg in argv):
        raise ArgumentError(NON_NUMERIC)
    numbers = [int(arg) for arg in argv]
    philo_count, time_to_die, time_to_eat, time_to_sleep = numbers[:4]
    must_eat = numbers[4] if len(numbers) == 5 else -1
    if min(philo_count, time_to_die, time_to_eat, time_to_sleep) < 1:
        raise ArgumentError(NOT_POSITIVE)
    return Config(philo_count, time_to_die, time_to_eat, time_to_sleep, must_eat)