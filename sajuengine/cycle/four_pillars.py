"""Four Pillars (四柱) computation bound to a single month strategy."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Sequence

from .calendar import (
    MonthStrategy,
    day_pillar,
    gregorian_to_jdn,
    hour_pillar,
    month_pillar,
    solar_month,
    validate_date,
    year_pillar,
)
from .pillars import Pillar

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class FourPillarsChart:
    """Container for the year, month, day, and (optional) hour pillars."""

    year: int
    month: int
    day: int
    hour: int | None
    strategy: MonthStrategy
    pillars: Mapping[str, Pillar]
    provenance: Mapping[str, object] = field(default_factory=dict)

    @property
    def day_master(self) -> Pillar:
        return self.pillars["day"]

    def ordered_pillars(self) -> Sequence[Pillar]:
        keys = ("year", "month", "day", "hour")
        return tuple(self.pillars[key] for key in keys if key in self.pillars)


@dataclass(frozen=True)
class PillarCalculator:
    """Resolve pillars for Gregorian dates with one fixed month strategy.

    A report holds one calculator, so every month pillar it shows comes from
    the same strategy.
    """

    strategy: MonthStrategy = MonthStrategy.FAST

    def sexagenary_year(self, year: int, month: int, day: int) -> int:
        if self.strategy is MonthStrategy.SOLAR_TERM:
            return solar_month(year, month, day)[0]
        validate_date(year, month, day)
        return year

    def year(self, year: int, month: int = 6, day: int = 15) -> Pillar:
        """Return the year pillar of the date; mid-year by default."""

        return year_pillar(self.sexagenary_year(year, month, day))

    def month(self, year: int, month: int, day: int = 15) -> Pillar:
        if self.strategy is MonthStrategy.SOLAR_TERM:
            solar_year, effective = solar_month(year, month, day)
            return month_pillar(year_pillar(solar_year).stem_index, effective)
        validate_date(year, month, day)
        return month_pillar(year_pillar(year).stem_index, month)

    def day(self, year: int, month: int, day: int) -> Pillar:
        return day_pillar(year, month, day)

    def hour(self, year: int, month: int, day: int, hour: int) -> Pillar:
        return hour_pillar(day_pillar(year, month, day).stem_index, hour)


def compute_four_pillars(
    moment: date | datetime,
    hour: int | None = None,
    *,
    calculator: PillarCalculator | None = None,
) -> FourPillarsChart:
    """Compute the Four Pillars for ``moment``.

    Parameters
    ----------
    moment:
        Calendar date of the event. A :class:`~datetime.datetime` also
        supplies the hour unless ``hour`` is given explicitly.
    hour:
        Local clock hour (0-23). When omitted for a plain date the chart has
        no hour pillar.
    calculator:
        Strategy-bound calculator; defaults to the fast month strategy.
    """

    calc = calculator or PillarCalculator()
    if hour is None and isinstance(moment, datetime):
        hour = moment.hour
    y, m, d = moment.year, moment.month, moment.day

    pillars: dict[str, Pillar] = {
        "year": calc.year(y, m, d),
        "month": calc.month(y, m, d),
        "day": calc.day(y, m, d),
    }
    if hour is not None:
        pillars["hour"] = calc.hour(y, m, d, hour)

    provenance: dict[str, object] = {
        "month_strategy": calc.strategy.value,
        "sexagenary_year": calc.sexagenary_year(y, m, d),
        "julian_day_number": gregorian_to_jdn(y, m, d),
    }
    LOG.debug("four pillars for %04d-%02d-%02d: %s", y, m, d, pillars)

    return FourPillarsChart(
        year=y,
        month=m,
        day=d,
        hour=hour,
        strategy=calc.strategy,
        pillars=pillars,
        provenance=provenance,
    )


__all__ = ["FourPillarsChart", "PillarCalculator", "compute_four_pillars"]
