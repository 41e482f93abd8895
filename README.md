# dining

A threaded simulation of the dining philosophers problem.

Philosophers sit around a table. There is one fork between each pair of
neighbours. Each philosopher takes two forks, eats, thinks and sleeps, and
repeats this. A monitor thread watches all of them. It stops the simulation
when a philosopher goes longer than the time to die without starting a
meal. It also stops the simulation when every philosopher has eaten exactly
the required number of times.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MUST_EAT_TIMES]
```

All times are in milliseconds. Each argument may start with `+`. After that
it may hold only digits and spaces. The command rejects an argument that is
empty, negative, non-numeric or zero, and writes an error message to
standard error. Spaces pass the check, but only leading whitespace is
skipped when the value is read. Write the numbers without spaces.

Example:

```
dining 5 800 200 200 7
```

Each event is printed on its own line to standard output. A line holds
three fields:

- the milliseconds since the simulation started
- the philosopher's number, counting from 1
- the action

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
...
```

The actions are `has taken a fork`, `is eating`, `is thinking`,
`is sleeping` and `died`. The monitor prints `is eating` in green and
`died` in red, using ANSI colour codes.

A table with a single philosopher has only one fork. That philosopher takes
the fork and then dies straight away. This `died` line is not coloured.

Exit status:

| Status | Meaning |
| ------ | ------- |
| 0 | The simulation ran |
| 1 | The arguments are invalid: too few, empty, non-numeric or negative |
| 2 | A value is not above zero |
| 4 | A thread could not be started |

## Use from Python

```python
import sys
from dining.simulation import parse_settings
from dining.cli import run

settings = parse_settings(["4", "410", "200", "200", "3"])
simulation = run(settings, sys.stdout)
print(simulation.died, simulation.all_ate)
```

The modules are:

- `dining.args` holds `validate_args`, `parse_number`, `current_millis` and
  `ArgumentError`.
- `dining.simulation` holds:
  - `Settings` and `parse_settings`.
  - `Philosopher`.
  - `Simulation`. It holds the philosophers in a ring, the `died` and
    `all_ate` flags and the log.
- `dining.routine` holds the thread bodies: `philosopher_routine`,
  `monitor`, `single_routine` and `eat`.
- `dining.cli` holds `run` and `main`.

`Simulation` takes an optional `out` stream for its log and an optional
`clock` function that returns milliseconds.

## Running the tests

```
pip install ".[test]"
pytest
```