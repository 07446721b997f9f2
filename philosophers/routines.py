"""What each philosopher thread does."""

from __future__ import annotations

import time

from .table import Philosopher, Table, timestamp_ms

_STAGGER_SECONDS = 0.001


def eat_cycle(table: Table, philo: Philosopher) -> bool:
    """Eat, then sleep and think; False once the philosopher has eaten enough."""
    config = table.config
    table.take_forks(philo)
    with table.lock:
        philo.last_meal = timestamp_ms()
    table.print_status(philo, "is eating")
    with table.lock:
        philo.meals_eaten += 1
        done = philo.meals_eaten == config.must_eat
    table.smart_sleep(config.time_to_eat)
    table.drop_forks(philo)
    if done:
        return False
    table.print_status(philo, "is sleeping")
    table.smart_sleep(config.time_to_sleep)
    table.print_status(philo, "is thinking")
    return True


def routine_even(table: Table, philo: Philosopher) -> None:
    """Loop used when the table has an even number of seats."""
    if not table.wait_until_ready():
        return
    if philo.id % 2 == 0:
        time.sleep(_STAGGER_SECONDS)
    while not table.is_stopped():
        if not eat_cycle(table, philo):
            return
        time.sleep(_STAGGER_SECONDS)


def routine_odd(table: Table, philo: Philosopher) -> None:
    """Loop used when the table has an odd number of seats."""
    if not table.wait_until_ready():
        return
    if philo.id == 0 or philo.id % 2 == 1:
        table.smart_sleep(table.config.time_to_eat)
    while not table.is_stopped():
        if not eat_cycle(table, philo):
            return
        table.smart_sleep(table.config.time_to_eat + 1)


def routine_single(table: Table, philo: Philosopher) -> None:
    """A lone philosopher holds one fork and starves."""
    fork = table.forks[philo.id]
    with fork:
        table.print_status(philo, "has taken a fork")
    table.smart_sleep(table.config.time_to_die)
    table.print_status(philo, "died")