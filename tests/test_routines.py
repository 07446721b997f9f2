import io
import time

from philosophers.config import Config
from philosophers.routines import eat_cycle, routine_even, routine_odd, routine_single
from philosophers.table import Table, timestamp_ms


def make_table(count=2, die=800, eat=10, sleep=10, must_eat=-1):
    out = io.StringIO()
    return Table(Config(count, die, eat, sleep, must_eat), out), out


def messages(out):
    return [line.split(" ", 2)[2] for line in out.getvalue().splitlines()]


def test_final_meal_ends_the_cycle():
    table, out = make_table(must_eat=1)
    philo = table.philos[0]
    before = timestamp_ms()
    assert eat_cycle(table, philo) is False
    assert philo.meals_eaten == 1
    assert philo.last_meal >= before
    assert messages(out) == ["has taken a fork", "has taken a fork", "is eating"]
    assert not any(fork.locked() for fork in table.forks)


def test_cycle_continues_without_meal_limit():
    table, out = make_table()
    philo = table.philos[1]
    assert eat_cycle(table, philo) is True
    assert philo.meals_eaten == 1
    assert messages(out) == [
        "has taken a fork",
        "has taken a fork",
        "is eating",
        "is sleeping",
        "is thinking",
    ]


def test_single_philosopher_takes_one_fork_and_dies():
    table, out = make_table(count=1, die=30)
    start = timestamp_ms()
    routine_single(table, table.philos[0])
    assert timestamp_ms() - start >= table.config.time_to_die
    assert messages(out) == ["has taken a fork", "died"]
    assert out.getvalue().splitlines()[-1].endswith(" 1 died")
    assert not table.forks[0].locked()


def test_routine_even_returns_when_aborted():
    table, out = make_table()
    table.abort()
    routine_even(table, table.philos[0])
    assert out.getvalue() == ""
    assert table.philos[0].meals_eaten == 0


def test_routine_odd_returns_when_aborted():
    table, out = make_table(count=3)
    table.abort()
    routine_odd(table, table.philos[1])
    assert out.getvalue() == ""
    assert table.philos[1].meals_eaten == 0


def test_routine_odd_stops_when_simulation_over():
    table, out = make_table(count=3, eat=5000)
    table.start()
    table.stop()
    started = time.monotonic()
    routine_odd(table, table.philos[0])
    assert time.monotonic() - started < 1.0
    assert out.getvalue() == ""


def test_routine_even_eats_until_full():
    table, out = make_table(must_eat=1)
    table.start()
    routine_even(table, table.philos[1])
    assert table.philos[1].meals_eaten == 1
    assert messages(out)[-1] == "is eating"