"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

MAX_PHILOSOPHERS = 200
MAX_THINK_TIME = 200

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_DIGITS = frozenset("0123456789")


class SettingsError(ValueError):
    """Raised when the command-line arguments cannot start a simulation."""

    message = ""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(self.message if message is None else message)


class ArgumentCountError(SettingsError):
    """Too few or too many arguments were given."""

    message = "Too much/little args"


class PhilosopherRangeError(SettingsError):
    """The number of philosophers is invalid or out of range."""

    message = f"0 < philo_nbr <= {MAX_PHILOSOPHERS}"


class InvalidArgumentError(SettingsError):
    """A duration or the meal count is negative, zero or not a number."""

    message = "some args are negative or invalid"


class NothingToDo(SettingsError):
    """Every philosopher must eat zero times, so there is nothing to simulate."""


def parse_number(text: str) -> int:
    """Parse a strict decimal integer that fits in a signed 32-bit int.

    An optional single sign may precede the digits; anything else, including
    surrounding whitespace, makes the text invalid and raises ValueError.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or not set(body) <= _DIGITS:
        raise ValueError(f"not a number: {text!r}")
    sign = -1 if text.startswith("-") else 1
    value = 0
    for char in body:
        value = value * 10 + sign * (ord(char) - ord("0"))
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"number out of range: {text!r}")
    return value


def _parse_or_none(text: str) -> Optional[int]:
    try:
        return parse_number(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters; durations are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None

    @property
    def time_to_think(self) -> int:
        """Time left over after eating and sleeping, clamped to [0, 200]."""
        spare = self.time_to_die - (self.time_to_eat + self.time_to_sleep)
        return max(0, min(spare, MAX_THINK_TIME))


def parse_settings(argv: Sequence[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Expects: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat].
    """
    if not 4 <= len(argv) <= 5:
        raise ArgumentCountError()
    philosophers, die, eat, sleep = (_parse_or_none(arg) for arg in argv[:4])
    meals_given = len(argv) == 5
    meals = _parse_or_none(argv[4]) if meals_given else None

    if meals_given and meals == 0:
        raise NothingToDo()
    if philosophers is None or not 0 < philosophers <= MAX_PHILOSOPHERS:
        raise PhilosopherRangeError()
    if any(value is None or value <= 0 for value in (die, eat, sleep)):
        raise InvalidArgumentError()
    if meals_given and (meals is None or meals < 0):
        raise InvalidArgumentError()

    return Settings(
        philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals=meals,
    )