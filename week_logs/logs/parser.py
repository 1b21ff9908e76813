import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..errors import MalformedDate, MalformedDuration

DAY_FORMAT = "%d/%m/%y"

_DAY_PATTERN = re.compile(r"\d{2}/\d{2}/\d{2}")

# Longer units first so "ms" is never read as minutes followed by "s"
_DURATION_TOKEN = r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|h|m|s)"
_DURATION_PATTERN = re.compile(rf"(?:{_DURATION_TOKEN})+")
_TOKEN_PATTERN = re.compile(_DURATION_TOKEN)

UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


@dataclass(frozen=True)
class Log:
    """A single time-tracking entry read from the sheet"""

    day: date
    duration: timedelta
    description: str
    particularities: str


def parse_day(text: str) -> date:
    """Parse a DD/MM/YY day, rejecting any other shape"""
    if not _DAY_PATTERN.fullmatch(text):
        raise MalformedDate(f"Day {text!r} does not match DD/MM/YY")
    try:
        return datetime.strptime(text, DAY_FORMAT).date()
    except ValueError as e:
        raise MalformedDate(f"Day {text!r} is not a calendar date: {e}") from e


def parse_duration(text: str) -> timedelta:
    """Parse an elapsed time such as "2h30m" or "1.5h"

    A bare "0" is accepted as zero. Signs and whitespace are rejected, so a
    duration can never be negative.
    """
    if text == "0":
        return timedelta(0)
    if not _DURATION_PATTERN.fullmatch(text):
        raise MalformedDuration(f"Duration {text!r} is not a sequence of <number><unit> tokens")

    seconds = sum(float(number) * UNIT_SECONDS[unit] for number, unit in _TOKEN_PATTERN.findall(text))
    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise MalformedDuration(f"Duration {text!r} is out of range") from e


def new_log(day: str, duration: str, description: str, particularities: str) -> Log:
    """Build a validated Log from raw cell text"""
    return Log(
        day=parse_day(day),
        duration=parse_duration(duration),
        description=description,
        particularities=particularities,
    )
