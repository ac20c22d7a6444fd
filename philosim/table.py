"""The dining table: shared forks, per-philosopher calendars and the run loop."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from .settings import Settings

_IDLE_SECONDS = 5e-6


class Activity(Enum):
    """Events a philosopher can report, with the text printed for each."""

    FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DEAD = "died"


def current_millis() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def format_event(timestamp: int, pid: int, activity: Activity) -> str:
    """Render one log line; ``pid`` is the 0-based seat, printed 1-based."""
    return f"{timestamp} {pid + 1} {activity.value}\n"


@dataclass
class _Seat:
    """Everything one philosopher keeps track of."""

    born: int
    may_eat: bool = True
    may_sleep: bool = True
    may_think: bool = True
    age: int = 0
    day: int = 0
    meals: int = 0


class Table:
    """A round table of philosophers sharing one fork between each neighbour pair.

    Timestamps in the log are each philosopher's simulated age: the sum of
    the durations of everything it has done so far.
    """

    def __init__(
        self,
        settings: Settings,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.settings = settings
        self._out = sys.stdout if out is None else out
        self._sleep = sleep
        count = settings.philosophers
        now = current_millis()
        self._seats = [_Seat(born=now) for _ in range(count)]
        self._forks = [True] * count
        self._fork_locks = [threading.Lock() for _ in range(count)]
        self._print_lock = threading.Lock()
        self._stopped = False

    @property
    def stopped(self) -> bool:
        """Whether the simulation has ended, by a death or by everyone being fed."""
        return self._stopped

    def _neighbour(self, pid: int) -> int:
        return (pid + 1) % self.settings.philosophers

    @contextmanager
    def _holding_forks(self, pid: int) -> Iterator[None]:
        # Locks are always taken in index order so neighbours cannot deadlock.
        first, second = sorted((pid, self._neighbour(pid)))
        with self._fork_locks[first], self._fork_locks[second]:
            yield

    def _forks_free(self, pid: int) -> bool:
        return self._forks[pid] and self._forks[self._neighbour(pid)]

    def can_eat(self, pid: int) -> bool:
        """Whether the philosopher wants to eat and both its forks are on the table."""
        if not self._seats[pid].may_eat or self.settings.philosophers <= 1:
            return False
        with self._holding_forks(pid):
            return self._forks_free(pid)

    def is_dead(self, pid: int) -> bool:
        """Check whether the philosopher has died; announce it if so.

        Returns True as well once the simulation has already stopped.
        """
        seat = self._seats[pid]
        real_age = current_millis() - (seat.born + self.settings.philosophers)
        if self._stopped:
            return True
        starving = real_age > seat.age and seat.meals < 2
        if starving or seat.day > self.settings.time_to_die:
            with self._print_lock:
                if not self._stopped:
                    self._out.write(format_event(seat.age, pid, Activity.DEAD))
                    self._out.flush()
                self._stopped = True
            return True
        if not seat.may_sleep and seat.may_think:
            seat.day = 0
        return False

    def everyone_fed(self) -> bool:
        """Whether every philosopher has eaten the required number of meals.

        Returns True as well once the simulation has already stopped.
        """
        if self._stopped:
            return True
        target = self.settings.meals
        if target is None:
            return False
        if all(seat.meals >= target for seat in self._seats):
            self._stopped = True
            return True
        return False

    def report(self, pid: int, activity: Activity) -> None:
        """Print an event at the philosopher's current age, unless stopped."""
        with self._print_lock:
            if not self._stopped:
                self._out.write(format_event(self._seats[pid].age, pid, activity))
                self._out.flush()

    def _update_flags(self, seat: _Seat, activity: Activity) -> None:
        if activity is Activity.EAT:
            seat.may_eat = False
            seat.may_sleep = True
        elif activity is Activity.SLEEP:
            seat.may_sleep = False
            seat.may_think = True
            if self.settings.time_to_think == 0:
                seat.may_eat = True
        elif activity is Activity.THINK:
            seat.may_think = False
            seat.may_eat = True

    def _duration(self, activity: Activity) -> int:
        durations = {
            Activity.EAT: self.settings.time_to_eat,
            Activity.SLEEP: self.settings.time_to_sleep,
            Activity.THINK: self.settings.time_to_think,
        }
        return durations[activity]

    def _advance(self, seat: _Seat, activity: Activity) -> None:
        spent = self._duration(activity)
        seat.age += spent
        seat.day += spent
        if activity is Activity.EAT:
            seat.meals += 1

    def _try_eat(self, pid: int) -> bool:
        seat = self._seats[pid]
        if not seat.may_eat or self.settings.philosophers <= 1:
            return False
        neighbour = self._neighbour(pid)
        with self._holding_forks(pid):
            if not self._forks_free(pid):
                return False
            self._update_flags(seat, Activity.EAT)
            self.report(pid, Activity.FORK)
            self.report(pid, Activity.FORK)
            self._forks[pid] = self._forks[neighbour] = False
            self.report(pid, Activity.EAT)
        self._advance(seat, Activity.EAT)
        self._sleep(self.settings.time_to_eat / 1000)
        with self._holding_forks(pid):
            self._forks[pid] = self._forks[neighbour] = True
        return True

    def _rest(self, pid: int, activity: Activity) -> None:
        seat = self._seats[pid]
        self._update_flags(seat, activity)
        self.report(pid, activity)
        self._advance(seat, activity)
        self._sleep(self._duration(activity) / 1000)

    def _live(self, pid: int) -> None:
        seat = self._seats[pid]
        seat.born = current_millis()
        while True:
            if self._try_eat(pid):
                pass
            elif seat.may_sleep:
                self._rest(pid, Activity.SLEEP)
            elif seat.may_think and self.settings.time_to_think > 0:
                self._rest(pid, Activity.THINK)
            else:
                self._sleep(_IDLE_SECONDS)
            if self.is_dead(pid) or self.everyone_fed():
                break

    def run(self) -> None:
        """Start one thread per philosopher and wait until all have stopped."""
        threads = [
            threading.Thread(target=self._live, args=(pid,), name=f"philosopher-{pid + 1}")
            for pid in range(self.settings.philosophers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()