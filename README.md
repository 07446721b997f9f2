# philosophers

A simulation of the dining philosophers problem. Each philosopher is a
thread and each fork is a lock. A monitor thread watches the table and ends
the simulation when a philosopher starves or when every philosopher has
eaten enough.

## Installation

    pip install .

## Usage

    philo number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat]

The same command can be started with `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be a plain non-negative
integer (digits only), and the first four must be greater than zero. If
`must_eat` is given, the simulation stops once every philosopher has eaten
that many meals.

Example:

    philo 5 800 200 200 7

Each line of output is a timestamp in milliseconds since the start,
followed by the philosopher's number (counted from 1) and what they did:

    0 1 has taken a fork
    0 1 has taken a fork
    0 1 is eating
    200 1 is sleeping
    400 1 is thinking
    ...
    810 3 died

Nothing is printed after a death is announced. A lone philosopher takes
its single fork, waits `time_to_die` milliseconds and dies.

On bad arguments the command prints one of these messages and exits with
status 1:

- `Usage: philos, die, eat, sleep, must_eat(opt)` for a wrong number of
  arguments,
- `Error: Non-numeric argument detected.` for an argument that is not made
  of digits only,
- `Error: Values must be greater than 0.` when one of the first four values
  is zero.

## Using it from Python

```python
import sys

from philosophers.config import parse_args
from philosophers.cli import run

config = parse_args(["4", "410", "200", "200", "3"])
status = run(config, sys.stdout)
```

`parse_args` takes the arguments that follow the program name and returns a
frozen `Config` (`philo_count`, `time_to_die`, `time_to_eat`,
`time_to_sleep`, `must_eat`, with `must_eat` set to -1 when no limit is
given). It raises `ArgumentError`, a `ValueError`, with one of the messages
above. `run` writes the simulation's log to the given text stream and
returns the exit status. `main(argv=None)` parses `argv` (or `sys.argv[1:]`),
prints any argument error and returns 1, and otherwise runs the simulation
on standard output.

The pieces can also be used on their own:

- `philosophers.table` holds `Table`, the shared state (forks, philosophers,
  the state lock, the log stream), with `print_status`, `take_forks`,
  `drop_forks`, `smart_sleep`, `wait_until_ready`, `is_stopped`, `start`,
  `abort` and `stop`, plus `Philosopher` and `timestamp_ms`.
- `philosophers.routines` holds the thread bodies `routine_even`,
  `routine_odd` and `routine_single`, and `eat_cycle`, one round of eating,
  sleeping and thinking.
- `philosophers.monitor` holds `monitor` and its checks `check_death` and
  `check_all_full`.

## Running the tests

    pip install .[test]
    pytest