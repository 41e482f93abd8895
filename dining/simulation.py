"""Shared state of a dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from dining.args import ArgumentError, current_millis, parse_number, validate_args

TAKEN_FORK = "has taken a fork"
EATING = "\033[0;32mis eating\033[0m"
THINKING = "is thinking"
SLEEPING = "is sleeping"
DIED = "\033[0;31mdied\033[0m"

_PAUSE_STEP_SECONDS = 0.0002


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; times are in milliseconds."""

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the program arguments and build the settings from them."""
    validate_args(args)
    count, to_die, to_eat, to_sleep = (parse_number(arg) for arg in args[:4])
    must_eat = parse_number(args[4]) if len(args) > 4 else None
    if 0 in (count, to_die, to_eat, to_sleep, must_eat):
        raise ArgumentError("Arguments values must be higher than 0.")
    return Settings(count, to_die, to_eat, to_sleep, must_eat)


@dataclass(eq=False)
class Philosopher:
    """One seat at the table, with the fork to its right."""

    id: int
    last_meal: int
    eaten_times: int = 0
    previous: Philosopher | None = field(default=None, repr=False)
    fork: threading.Lock = field(default_factory=threading.Lock, repr=False)
    meal_lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def record_meal(self, timestamp: int) -> None:
        """Count one more meal and remember when it started."""
        with self.meal_lock:
            self.eaten_times += 1
            self.last_meal = timestamp

    def ate_enough(self, must_eat: int | None) -> bool:
        """Tell whether exactly ``must_eat`` meals have been eaten."""
        with self.meal_lock:
            return must_eat is not None and self.eaten_times == must_eat


class Simulation:
    """The table: philosophers in a ring, shared flags and the log."""

    def __init__(
        self,
        settings: Settings,
        out: TextIO | None = None,
        clock: Callable[[], int] = current_millis,
    ) -> None:
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.clock = clock
        self.start = clock()
        self._died = False
        self._all_ate = False
        self._dead_lock = threading.Lock()
        self._all_ate_lock = threading.Lock()
        self._log_lock = threading.Lock()
        self.philosophers = [
            Philosopher(id=number, last_meal=self.start)
            for number in range(1, settings.philosopher_count + 1)
        ]
        if self.philosophers:
            ring = [self.philosophers[-1], *self.philosophers[:-1]]
            for philosopher, previous in zip(self.philosophers, ring):
                philosopher.previous = previous

    @property
    def died(self) -> bool:
        """Whether some philosopher has died."""
        with self._dead_lock:
            return self._died

    @property
    def all_ate(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        with self._all_ate_lock:
            return self._all_ate

    def elapsed(self) -> int:
        """Milliseconds since the simulation started."""
        return self.clock() - self.start

    def has_ended(self) -> bool:
        """Whether everyone has eaten enough or someone has died."""
        return self.all_ate or self.died

    def log(self, philosopher: Philosopher, action: str) -> None:
        """Write one timestamped line for ``philosopher``."""
        with self._log_lock:
            self.out.write(f"{self.elapsed()} {philosopher.id} {action}\n")
            self.out.flush()

    def log_if_running(self, philosopher: Philosopher, action: str) -> bool:
        """Log the action unless the simulation has ended; report which."""
        if self.has_ended():
            return False
        self.log(philosopher, action)
        return True

    def mark_died(self, philosopher: Philosopher) -> None:
        """Record the death of ``philosopher`` and log it."""
        with self._dead_lock:
            self._died = True
            self.log(philosopher, DIED)

    def mark_all_ate(self) -> None:
        """Record that every philosopher has eaten enough."""
        with self._all_ate_lock:
            self._all_ate = True

    def pause(self, duration_ms: int) -> None:
        """Wait ``duration_ms`` milliseconds, stopping early on a death."""
        started = self.clock()
        while self.clock() - started < duration_ms:
            if self.died:
                break
            time.sleep(_PAUSE_STEP_SECONDS)