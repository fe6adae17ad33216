"""Gregorian calendar arithmetic for the year, month, day and hour pillars.

Two month strategies exist:

``fast``
    Gregorian month boundaries; February is the first (寅) month.
``solar_term``
    Months begin on the approximate day of each sectional solar term
    (節氣). Dates before the February term belong to the previous
    sexagenary year.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ..exceptions import InvalidDateError
from .pillars import Pillar

__all__ = [
    "MonthStrategy",
    "SolarTerm",
    "SOLAR_TERMS",
    "SOLAR_TERM_CUTOVER_DAYS",
    "day_pillar",
    "days_in_month",
    "gregorian_to_jdn",
    "hour_branch_index",
    "hour_pillar",
    "is_leap_year",
    "jdn_to_gregorian",
    "month_order",
    "month_pillar",
    "solar_month",
    "validate_date",
    "validate_hour",
    "year_pillar",
]


class MonthStrategy(StrEnum):
    FAST = "fast"
    SOLAR_TERM = "solar_term"


@dataclass(frozen=True)
class SolarTerm:
    """Sectional solar term opening a sexagenary month."""

    month: int
    day: int
    hangul: str
    hanja: str


# Approximate cutover day per Gregorian month, January first.
SOLAR_TERM_CUTOVER_DAYS: Final[tuple[int, ...]] = (6, 4, 6, 5, 6, 6, 7, 7, 8, 8, 7, 7)

SOLAR_TERMS: Final[tuple[SolarTerm, ...]] = (
    SolarTerm(1, 6, "소한", "小寒"),
    SolarTerm(2, 4, "입춘", "立春"),
    SolarTerm(3, 6, "경칩", "驚蟄"),
    SolarTerm(4, 5, "청명", "淸明"),
    SolarTerm(5, 6, "입하", "立夏"),
    SolarTerm(6, 6, "망종", "芒種"),
    SolarTerm(7, 7, "소서", "小暑"),
    SolarTerm(8, 7, "입추", "立秋"),
    SolarTerm(9, 8, "백로", "白露"),
    SolarTerm(10, 8, "한로", "寒露"),
    SolarTerm(11, 7, "입동", "立冬"),
    SolarTerm(12, 7, "대설", "大雪"),
)

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Offset aligning the Julian Day Number with the 甲子 day count.
_JDN_DAY_OFFSET: Final[int] = 49


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be 1-12, got {month}", year=year, month=month)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def validate_date(year: int, month: int, day: int) -> None:
    """Raise :class:`InvalidDateError` unless ``year-month-day`` exists."""

    limit = days_in_month(year, month)
    if not 1 <= day <= limit:
        raise InvalidDateError(
            f"{year:04d}-{month:02d} has no day {day}", year=year, month=month, day=day
        )


def validate_hour(hour: int) -> None:
    if not 0 <= hour <= 23:
        raise InvalidDateError(f"hour must be 0-23, got {hour}", hour=hour)


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date."""

    validate_date(year, month, day)
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Inverse of :func:`gregorian_to_jdn`."""

    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def year_pillar(year: int) -> Pillar:
    """Return the pillar for a sexagenary ``year`` (year 4 is 甲子)."""

    offset = year - 4
    return Pillar(offset % 10, offset % 12)


def month_order(month: int) -> int:
    """Return the position of ``month`` counted from the 寅 month (February = 0)."""

    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be 1-12, got {month}", month=month)
    return (month - 2) % 12


def month_pillar(year_stem: int, month: int) -> Pillar:
    """Return the month pillar for ``month`` in a year whose stem is ``year_stem``."""

    order = month_order(month)
    base = ((year_stem % 5) * 2 + 2) % 10
    return Pillar((base + order) % 10, (2 + order) % 12)


def solar_month(year: int, month: int, day: int) -> tuple[int, int]:
    """Return ``(sexagenary_year, effective_month)`` under the solar-term rule.

    A day before its month's cutover belongs to the previous month; January
    wraps to December. Everything before the February cutover is counted in
    the previous sexagenary year.
    """

    validate_date(year, month, day)
    effective = month
    if day < SOLAR_TERM_CUTOVER_DAYS[month - 1]:
        effective = 12 if month == 1 else month - 1
    if month == 1 or (month == 2 and effective == 1):
        return year - 1, effective
    return year, effective


def day_pillar(year: int, month: int, day: int) -> Pillar:
    """Return the day pillar (2000-01-07 is 甲子)."""

    return Pillar.from_cycle_index(gregorian_to_jdn(year, month, day) + _JDN_DAY_OFFSET)


def hour_branch_index(hour: int) -> int:
    """Return the double-hour branch; 23:00 already counts as the 子 hour."""

    validate_hour(hour)
    if hour == 23:
        return 0
    return (hour + 1) // 2


def hour_pillar(day_stem: int, hour: int) -> Pillar:
    branch = hour_branch_index(hour)
    return Pillar(((day_stem % 5) * 2 + branch) % 10, branch)
