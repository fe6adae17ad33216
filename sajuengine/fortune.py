"""Date fortune grading (歲運 / 月運 / 日運 / 時運) against a role system."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Mapping, Sequence

from .cycle.calendar import MonthStrategy
from .cycle.constants import HeavenlyStem
from .cycle.four_pillars import PillarCalculator
from .cycle.pillars import DecadeLuck, Pillar
from .exceptions import InvalidDateError
from .relations import BranchRelation, check_branch_relations
from .scoring.composite import clamp, round_half_up, safe_mean
from .ten_gods import TenGod, classify_stems
from .yongshin import FiveRoleSystem, NotComputable, YongshinGrade, grade_element

LOG = logging.getLogger(__name__)

__all__ = [
    "DateFortune",
    "DayFortune",
    "DecadeFortune",
    "HourFortune",
    "PillarFortune",
    "YearFortune",
    "compute_date_fortune",
    "daily_range",
    "daily_score",
    "grade_decades",
    "grade_pillar",
    "hourly_calendar",
    "monthly_calendar",
    "yearly_timeline",
]


@dataclass(frozen=True)
class PillarFortune:
    """A pillar graded by the element of its stem."""

    pillar: Pillar
    grade: YongshinGrade
    ten_god: TenGod | None = None
    relations: tuple[BranchRelation, ...] = ()

    @property
    def animal(self) -> str:
        return self.pillar.branch.animal


@dataclass(frozen=True)
class DateFortune:
    year: int
    month: int | None
    day: int | None
    hour: int | None
    strategy: MonthStrategy
    pillars: Mapping[str, PillarFortune] = field(default_factory=dict)

    def ordered(self) -> tuple[PillarFortune, ...]:
        keys = ("year", "month", "day", "hour")
        return tuple(self.pillars[key] for key in keys if key in self.pillars)


@dataclass(frozen=True)
class YearFortune:
    year: int
    fortune: PillarFortune


@dataclass(frozen=True)
class DecadeFortune:
    decade: DecadeLuck
    grade: YongshinGrade


@dataclass(frozen=True)
class HourFortune:
    start_hour: int
    end_hour: int
    fortune: PillarFortune


@dataclass(frozen=True)
class DayFortune:
    day: date
    fortune: PillarFortune
    score: int


def grade_pillar(
    pillar: Pillar,
    roles: FiveRoleSystem,
    *,
    day_master: HeavenlyStem | None = None,
    natal_branches: Sequence[int] = (),
) -> PillarFortune:
    return PillarFortune(
        pillar=pillar,
        grade=grade_element(pillar.element, roles),
        ten_god=classify_stems(day_master, pillar.stem) if day_master else None,
        relations=(
            check_branch_relations(pillar.branch_index, natal_branches) if natal_branches else ()
        ),
    )


def compute_date_fortune(
    roles: FiveRoleSystem | NotComputable,
    year: int,
    month: int | None = None,
    day: int | None = None,
    hour: int | None = None,
    *,
    calculator: PillarCalculator | None = None,
    day_master: HeavenlyStem | None = None,
    natal_branches: Sequence[int] = (),
) -> DateFortune | NotComputable:
    """Grade the year and, when given, the month, day and hour of a date.

    A finer unit needs every coarser one: a day requires a month and an hour
    requires a day.
    """

    if isinstance(roles, NotComputable):
        return roles
    if day is not None and month is None:
        raise InvalidDateError("a day requires a month", year=year, day=day)
    if hour is not None and day is None:
        raise InvalidDateError("an hour requires a day", year=year, month=month, hour=hour)

    calc = calculator or PillarCalculator()
    ref_month = month or 6
    ref_day = day or 15
    pillars = {"year": calc.year(year, ref_month, ref_day)}
    if month is not None:
        pillars["month"] = calc.month(year, month, ref_day)
    if day is not None:
        pillars["day"] = calc.day(year, ref_month, day)
    if hour is not None:
        pillars["hour"] = calc.hour(year, ref_month, ref_day, hour)

    graded = {
        key: grade_pillar(pillar, roles, day_master=day_master, natal_branches=natal_branches)
        for key, pillar in pillars.items()
    }
    return DateFortune(year, month, day, hour, calc.strategy, graded)


def yearly_timeline(
    roles: FiveRoleSystem | NotComputable,
    center_year: int,
    before: int = 5,
    after: int = 5,
    *,
    calculator: PillarCalculator | None = None,
    day_master: HeavenlyStem | None = None,
) -> list[YearFortune] | NotComputable:
    """Return graded year pillars from ``center_year - before`` to ``+ after``, oldest first."""

    if isinstance(roles, NotComputable):
        return roles
    calc = calculator or PillarCalculator()
    first = center_year - abs(before)
    last = center_year + abs(after)
    return [
        YearFortune(year, grade_pillar(calc.year(year), roles, day_master=day_master))
        for year in range(first, last + 1)
    ]


def monthly_calendar(
    roles: FiveRoleSystem | NotComputable,
    year: int,
    *,
    calculator: PillarCalculator | None = None,
    day_master: HeavenlyStem | None = None,
) -> list[PillarFortune] | NotComputable:
    """Return the twelve graded month pillars of ``year`` in calendar order."""

    if isinstance(roles, NotComputable):
        return roles
    calc = calculator or PillarCalculator()
    return [
        grade_pillar(calc.month(year, month), roles, day_master=day_master)
        for month in range(1, 13)
    ]


def grade_decades(
    roles: FiveRoleSystem | NotComputable, decades: Sequence[DecadeLuck]
) -> list[DecadeFortune] | NotComputable:
    """Grade decade luck periods, ordered by starting age."""

    if isinstance(roles, NotComputable):
        return roles
    ordered = sorted(decades, key=lambda item: (item.start_age, item.end_age))
    return [DecadeFortune(decade, grade_element(decade.element, roles)) for decade in ordered]


def hourly_calendar(
    roles: FiveRoleSystem | NotComputable,
    day_stem: int,
    *,
    day_master: HeavenlyStem | None = None,
) -> list[HourFortune] | NotComputable:
    """Return the twelve double-hours of a day, starting with the 子 hour at 23:00."""

    if isinstance(roles, NotComputable):
        return roles
    entries = []
    for branch in range(12):
        stem = ((day_stem % 5) * 2 + branch) % 10
        start = (2 * branch - 1) % 24
        entries.append(
            HourFortune(
                start_hour=start,
                end_hour=(start + 2) % 24,
                fortune=grade_pillar(Pillar(stem, branch), roles, day_master=day_master),
            )
        )
    return entries


def daily_score(day_grade: int, hour_grades: Sequence[int]) -> int:
    """Blend the day grade and the mean hour grade (50/50) onto a 20-100 scale."""

    raw = day_grade * 0.5 + safe_mean(hour_grades) * 0.5
    return int(clamp(round_half_up((raw - 1) * 20 + 20), 0, 100))


def daily_range(
    roles: FiveRoleSystem | NotComputable,
    start: date,
    days: int = 7,
    *,
    calculator: PillarCalculator | None = None,
    day_master: HeavenlyStem | None = None,
) -> list[DayFortune] | NotComputable:
    """Return ``days`` consecutive graded days beginning at ``start``."""

    if isinstance(roles, NotComputable):
        return roles
    calc = calculator or PillarCalculator()
    result = []
    for offset in range(max(0, days)):
        current = start + timedelta(days=offset)
        pillar = calc.day(current.year, current.month, current.day)
        fortune = grade_pillar(pillar, roles, day_master=day_master)
        hours = hourly_calendar(roles, pillar.stem_index)
        score = daily_score(fortune.grade.grade, [entry.fortune.grade.grade for entry in hours])
        result.append(DayFortune(current, fortune, score))
    LOG.debug("graded %d days from %s", len(result), start.isoformat())
    return result
