"""Command-line argument checking and parsing into simulation settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

MAX_PHILOSOPHERS = 200
_INT_MAX = 2147483647


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable.

    ``to_stdout`` tells whether the message belongs on standard output
    rather than standard error.
    """

    def __init__(self, message: str, to_stdout: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.to_stdout = to_stdout


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers run (times in milliseconds)."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: Optional[int] = None


def check_input(args: Sequence[str]) -> None:
    """Check the argument count and that every argument holds only digits and spaces."""
    if not 4 <= len(args) <= 5:
        raise ArgumentError("Wrong args count")
    for arg in args:
        if any(not ch.isdigit() and ch != " " for ch in arg) or not arg.isascii():
            raise ArgumentError("Bad args: Invalid input", to_stdout=True)


def parse_number(text: str) -> int:
    """Parse leading spaces then decimal digits; return -1 if the value exceeds a 32-bit int."""
    digits = text.lstrip(" ")
    result = 0
    for ch in digits:
        if not ("0" <= ch <= "9"):
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if result > _INT_MAX:
            return -1
    return result


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate ``args`` (without the program name) and build the settings."""
    check_input(args)
    philosophers, time_to_die, time_to_eat, time_to_sleep = (
        parse_number(arg) for arg in args[:4]
    )
    meals: Optional[int] = None
    if len(args) == 5:
        parsed = parse_number(args[4])
        meals = None if parsed == -1 else parsed
    if (
        philosophers <= 0
        or time_to_die <= 0
        or time_to_eat <= 0
        or time_to_sleep <= 0
        or philosophers >= MAX_PHILOSOPHERS
        or (meals is not None and meals < 1)
    ):
        raise ArgumentError("incorrect number")
    return Settings(philosophers, time_to_die, time_to_eat, time_to_sleep, meals)