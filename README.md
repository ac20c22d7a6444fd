# philosim

A simulation of the dining philosophers problem. Each philosopher runs in its own
thread, sits at a round table between two forks, and cycles through eating,
sleeping and thinking until one of them starves or everyone has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philosim NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same command can be started as `python -m philosim.cli`.

All times are in milliseconds. Every argument must be a plain decimal integer
(an optional leading `+` or `-`, no spaces) that fits in a signed 32-bit int.

- `NUMBER_OF_PHILOSOPHERS`: between 1 and 200.
- `TIME_TO_DIE`: the longest a philosopher's day may run without a reset.
- `TIME_TO_EAT`: how long a meal takes. A philosopher holds both forks while eating.
- `TIME_TO_SLEEP`: how long a philosopher sleeps after a meal.
- `MEALS` (optional): the simulation stops once every philosopher has eaten at
  least this many times. With `0` there is nothing to do: the program prints
  nothing and exits with status 1.

Time spent thinking is derived from the other values as
`TIME_TO_DIE - (TIME_TO_EAT + TIME_TO_SLEEP)`, clamped to the range 0–200.
When it comes out as 0, philosophers skip thinking and go straight from
sleeping back to waiting for forks.

Example:

```
philosim 5 800 200 200 7
```

Each event is printed on its own line as the philosopher's simulated time (the
sum of the durations of everything that philosopher has done so far), the
philosopher's number (counting from 1), and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

A death is reported as `<time> <number> died`, after which nothing more is
printed. A single philosopher has only one fork and cannot eat, so it
eventually dies.

Invalid arguments produce a message on standard error, prefixed `ERR : `, and
exit status 1:

- wrong number of arguments (`Too much/little args`),
- a philosopher count that is not a number or is outside 1–200
  (`0 < philo_nbr <= 200`),
- negative, zero or non-numeric times, or a negative or non-numeric meal count
  (`some args are negative or invalid`).

## Using it from Python

```python
from philosim.settings import parse_settings
from philosim.table import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
Table(settings).run()
```

- `philosim.settings.parse_number(text)` parses one strict integer and raises
  `ValueError` for anything else.
- `philosim.settings.parse_settings(argv)` returns a frozen `Settings`
  (`philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep`, `meals`, and
  the derived `time_to_think`). It raises a `SettingsError` subclass
  (`ArgumentCountError`, `PhilosopherRangeError`, `InvalidArgumentError`) for
  bad input, and `NothingToDo` when the meal count is zero.
- `philosim.table.Table(settings, out=None, sleep=time.sleep)` writes events to
  `out` (standard output by default) and waits with `sleep`, which takes
  seconds. `run()` starts one thread per philosopher and returns when all have
  stopped; `stopped` tells whether the simulation has ended.
- `philosim.table.format_event(timestamp, pid, activity)` renders one log line
  for a 0-based seat and an `Activity` (`FORK`, `EAT`, `SLEEP`, `THINK`,
  `DEAD`).

## Running the tests

```
pip install .[test]
pytest
```