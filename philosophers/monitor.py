"""The watcher that detects starvation and full bellies."""

from __future__ import annotations

import time

from .table import Table, timestamp_ms

_POLL_SECONDS = 0.0005


def check_all_full(table: Table) -> bool:
    """True when a meal limit is set and every philosopher has reached it."""
    must_eat = table.config.must_eat
    if must_eat == -1:
        return False
    with table.lock:
        return all(philo.meals_eaten >= must_eat for philo in table.philos)


def check_death(table: Table) -> bool:
    """Announce and record the first starved philosopher, if any."""
    for philo in table.philos:
        with table.lock:
            now = timestamp_ms()
            if now - philo.last_meal > table.config.time_to_die:
                table.someone_dead = True
                elapsed = timestamp_ms() - table.start_time
                table.out.write(f"{elapsed} {philo.id + 1} died\n")
                table.out.flush()
                return True
    return False


def monitor(table: Table) -> None:
    """Watch the table until someone dies or everyone has eaten enough."""
    while not table.is_stopped():
        if check_death(table):
            return
        if check_all_full(table):
            table.stop()
            return
        time.sleep(_POLL_SECONDS)