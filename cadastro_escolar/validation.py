"""Checks on birth dates and CPF numbers typed in by users."""

from __future__ import annotations

import datetime
import re

from .models import BirthDate

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")

INVALID_MONTH = "Mês inválido"
INVALID_YEAR = "Ano inválido"
INVALID_DAY = "Dia inválido"


class InvalidDateError(ValueError):
    """Raised when a birth date fails validation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def date_errors(
    day: int, month: int, year: int, current_year: int | None = None
) -> list[str]:
    """Return the problems found with a birth date, empty when it is valid.

    The day is only checked when the month and the year are both valid.
    """
    if current_year is None:
        current_year = datetime.date.today().year
    errors = []
    if month < 1 or month > 12:
        errors.append(INVALID_MONTH)
    if year <= 1900 or year > current_year:
        errors.append(INVALID_YEAR)
    if errors:
        return errors

    if month in _THIRTY_ONE_DAY_MONTHS:
        last_day = 31
    elif month in _THIRTY_DAY_MONTHS:
        last_day = 30
    else:
        last_day = 29 if is_leap_year(year) else 28
    if day < 1 or day > last_day:
        errors.append(INVALID_DAY)
    return errors


def validate_date(
    day: int, month: int, year: int, current_year: int | None = None
) -> BirthDate:
    """Return the date as a BirthDate, or raise InvalidDateError."""
    errors = date_errors(day, month, year, current_year)
    if errors:
        raise InvalidDateError(errors)
    return BirthDate(day, month, year)


def is_valid_cpf_format(cpf: str) -> bool:
    """True for text shaped like xxx.xxx.xxx-xx."""
    return len(cpf) == 14 and cpf[3] == "." and cpf[7] == "." and cpf[11] == "-"


def parse_birth_date(text: str) -> tuple[int, int, int]:
    """Read day/month/year from text; anything after the year is ignored."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a date in the form dd/mm/yyyy: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return day, month, year