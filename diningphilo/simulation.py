"""The dining-philosophers simulation: philosopher threads and a monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .args import Settings
from .clock import now_ms, sleep_ms

_EVEN_START_DELAY = 0.002
_MONITOR_PAUSE = 0.0002
_FORK_WAIT = 0.001


@dataclass(eq=False)
class Philosopher:
    """One seat at the table: its forks and its eating record."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int
    meals_eaten: int = 0


class Simulation:
    """A table of philosophers sharing forks, watched by a monitor thread."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self._print_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self._death_lock = threading.Lock()
        self._over = False
        self.dead: Optional[int] = None
        self.start_time = now_ms()
        count = settings.philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers: List[Philosopher] = [
            Philosopher(
                id=seat + 1,
                left_fork=self.forks[seat],
                right_fork=self.forks[(seat + 1) % count],
                last_meal=self.start_time,
            )
            for seat in range(count)
        ]

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped action unless the simulation has ended."""
        with self._print_lock:
            if not self.is_over():
                elapsed = now_ms() - self.start_time
                self.out.write(f"{elapsed} {philosopher.id} {message}\n")

    def is_over(self) -> bool:
        """Return whether a death or full meals have ended the simulation."""
        with self._death_lock:
            return self._over

    def all_ate(self) -> bool:
        """Return whether every philosopher has eaten the required number of meals."""
        required = self.settings.meals_required
        if required is None:
            return False
        with self._meal_lock:
            return all(p.meals_eaten >= required for p in self.philosophers)

    def run(self) -> Optional[int]:
        """Run to completion; return the id of the philosopher who died, if any."""
        threads = [
            threading.Thread(target=self._live, args=(p,), daemon=True)
            for p in self.philosophers
        ]
        threads.append(threading.Thread(target=self._monitor, daemon=True))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return self.dead

    def _finish(self) -> None:
        with self._death_lock:
            self._over = True

    def _take(self, fork: threading.Lock) -> bool:
        while not fork.acquire(timeout=_FORK_WAIT):
            if self.is_over():
                return False
        return True

    def _eat(self, philosopher: Philosopher) -> bool:
        if not self._take(philosopher.left_fork):
            return False
        try:
            self.announce(philosopher, "has taken a fork")
            if not self._take(philosopher.right_fork):
                return False
            try:
                self.announce(philosopher, "has taken a fork")
                self.announce(philosopher, "is eating")
                with self._meal_lock:
                    philosopher.last_meal = now_ms()
                    philosopher.meals_eaten += 1
                sleep_ms(self.settings.time_to_eat, self.is_over)
            finally:
                philosopher.right_fork.release()
        finally:
            philosopher.left_fork.release()
        return True

    def _live(self, philosopher: Philosopher) -> None:
        if self.settings.philosophers == 1:
            self.announce(philosopher, "has taking a fork")
            sleep_ms(self.settings.time_to_die, self.is_over)
            return
        if philosopher.id % 2 == 0:
            time.sleep(_EVEN_START_DELAY)
        while not self.is_over():
            if not self._eat(philosopher):
                break
            self.announce(philosopher, "is sleeping")
            sleep_ms(self.settings.time_to_sleep, self.is_over)
            self.announce(philosopher, "is thinking")

    def _starved(self, philosopher: Philosopher) -> bool:
        with self._meal_lock:
            starved = now_ms() - philosopher.last_meal > self.settings.time_to_die
        if not starved:
            return False
        self._finish()
        self.dead = philosopher.id
        with self._print_lock:
            elapsed = now_ms() - self.start_time
            self.out.write(f"{elapsed} {philosopher.id} died\n")
        return True

    def _monitor(self) -> None:
        while not self.is_over():
            if any(self._starved(p) for p in self.philosophers):
                return
            if self.all_ate():
                self._finish()
                return
            time.sleep(_MONITOR_PAUSE)