"""Request parameter types: taxonomies, frame periods and units of measure."""

import re
from dataclasses import dataclass
from enum import Enum


class Taxonomy(str, Enum):
    """Standard XBRL taxonomies published by the SEC."""

    US_GAAP = "us-gaap"
    IFRS_FULL = "ifrs-full"
    DEI = "dei"
    SRT = "srt"

    def __str__(self) -> str:
        return self.value


def _check_quarter(quarter: int) -> None:
    if not 1 <= quarter <= 4:
        raise ValueError(f"Quarter must be between 1 and 4, got {quarter}")


@dataclass(frozen=True)
class Annual:
    """A full calendar-year duration, e.g. CY2023."""

    year: int

    @property
    def code(self) -> str:
        return f"CY{self.year}"

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Duration:
    """A calendar-quarter duration for flow concepts, e.g. CY2024Q1."""

    year: int
    quarter: int

    def __post_init__(self) -> None:
        _check_quarter(self.quarter)

    @property
    def code(self) -> str:
        return f"CY{self.year}Q{self.quarter}"

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Instantaneous:
    """A point in time at the end of a calendar quarter, e.g. CY2024Q1I."""

    year: int
    quarter: int

    def __post_init__(self) -> None:
        _check_quarter(self.quarter)

    @property
    def code(self) -> str:
        return f"CY{self.year}Q{self.quarter}I"

    def __str__(self) -> str:
        return self.code


Period = Annual | Duration | Instantaneous

_PERIOD_RE = re.compile(r"^CY(?P<year>\d{4})(?:Q(?P<quarter>[1-4])(?P<instant>I)?)?$")


def parse_period(code: str) -> Period:
    """
    Parse a frame period code such as "CY2023", "CY2024Q1" or "CY2024Q1I".

    Raises:
        ValueError: If the code does not follow the frame period grammar
    """
    match = _PERIOD_RE.match(code.strip())
    if match is None:
        raise ValueError(f"Invalid period code: '{code}'")

    year = int(match.group("year"))
    if match.group("quarter") is None:
        return Annual(year)

    quarter = int(match.group("quarter"))
    if match.group("instant"):
        return Instantaneous(year, quarter)
    return Duration(year, quarter)


@dataclass(frozen=True)
class Simple:
    """A single unit of measure, e.g. USD or shares."""

    label: str

    @property
    def code(self) -> str:
        return self.label

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class PerShare:
    """A ratio unit such as USD-per-shares."""

    numerator: str
    denominator: str

    @property
    def code(self) -> str:
        return f"{self.numerator}-per-{self.denominator}"

    def __str__(self) -> str:
        return self.code


Unit = Simple | PerShare

_PER = "-per-"


def parse_unit(code: str) -> Unit:
    """Parse a unit path segment; anything containing "-per-" is a ratio unit."""
    numerator, sep, denominator = code.partition(_PER)
    if sep and numerator and denominator:
        return PerShare(numerator, denominator)
    return Simple(code)
