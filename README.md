# diningphilo

diningphilo simulates the dining philosophers problem. Each philosopher
runs in its own thread. Each one shares a fork, which is a lock, with each
neighbour. A monitor thread checks for a philosopher who goes too long
without eating. If a meal count is given, the monitor also ends the run once
every philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
diningphilo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

`python -m diningphilo.cli` takes the same arguments.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers sit at the table, from 1 to 199.
- `TIME_TO_DIE`: the most milliseconds a philosopher may go between the starts of two meals. The clock also runs from the start of the simulation.
- `TIME_TO_EAT`: how many milliseconds a meal takes. The philosopher holds both forks while eating.
- `TIME_TO_SLEEP`: how many milliseconds the philosopher sleeps after a meal.
- `MEALS_REQUIRED` (optional): the run ends once every philosopher has eaten at least this many meals.

An argument may hold only the digits 0 to 9 and spaces. Each of the first
four values must be greater than zero. If the meal count is given, it must be
at least 1. A meal count too large for a 32-bit integer counts as no meal
count.

The program checks the arguments in the following order, prints a message and exits with status 1 at the first failure:

- The wrong number of arguments prints `Wrong args count` to standard error.
- A character other than a digit or a space prints `Bad args: Invalid input` to standard output.
- An out-of-range value prints `incorrect number` to standard error.

Example:

```
diningphilo 5 800 200 200 7
```

Each event appears on its own line. A line gives the milliseconds since the
start, the philosopher's number (counting from 1) and the event. The events
are `has taken a fork`, `is eating`, `is sleeping`, `is thinking` and `died`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

After a `died` line, no philosopher prints anything more, and the run ends.
A lone philosopher has only one fork. It prints `has taking a fork`, waits
`TIME_TO_DIE` milliseconds and then dies.

The exit status is 0 after any run that started, including a run where a
philosopher died.

## Library use

```python
import sys
from diningphilo.args import parse_settings
from diningphilo.simulation import Simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
dead = Simulation(settings, sys.stdout).run()
```

- `parse_settings` takes the arguments without the program name and returns a frozen `Settings`. Its fields are `philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals_required`, where `meals_required` is `None` when no count was given. It raises `diningphilo.args.ArgumentError` when the arguments are malformed or out of range. The error's `to_stdout` attribute tells where the command line would print its message.
- `Simulation.run()` blocks until the run ends. It returns the number of the philosopher who died, or `None` if every philosopher ate the required meals.
- `diningphilo.clock` provides `now_ms()` and `sleep_ms(milliseconds, stop)`. `sleep_ms` returns early once `stop()` is true.