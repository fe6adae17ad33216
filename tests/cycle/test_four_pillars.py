from __future__ import annotations

from datetime import date, datetime

from sajuengine.cycle import MonthStrategy, PillarCalculator, compute_four_pillars


def _hanja(chart) -> dict[str, str]:
    return {key: pillar.hanja() for key, pillar in chart.pillars.items()}


def test_fast_strategy_chart() -> None:
    chart = compute_four_pillars(date(2000, 1, 7), 12)
    assert _hanja(chart) == {"year": "庚辰", "month": "己丑", "day": "甲子", "hour": "庚午"}
    assert chart.day_master.stem.hanja == "甲"
    assert chart.provenance["month_strategy"] == "fast"
    assert chart.provenance["julian_day_number"] == 2451551


def test_solar_term_strategy_shifts_year_and_month() -> None:
    calc = PillarCalculator(MonthStrategy.SOLAR_TERM)
    chart = compute_four_pillars(date(2000, 1, 7), calculator=calc)
    assert _hanja(chart) == {"year": "己卯", "month": "丁丑", "day": "甲子"}
    assert chart.hour is None
    assert chart.provenance["sexagenary_year"] == 1999


def test_strategies_disagree_before_spring_start() -> None:
    moment = date(2024, 2, 3)
    fast = compute_four_pillars(moment)
    solar = compute_four_pillars(moment, calculator=PillarCalculator(MonthStrategy.SOLAR_TERM))
    assert (fast.pillars["year"].hanja(), fast.pillars["month"].hanja()) == ("甲辰", "丙寅")
    assert (solar.pillars["year"].hanja(), solar.pillars["month"].hanja()) == ("癸卯", "乙丑")
    assert fast.pillars["day"] == solar.pillars["day"]


def test_solar_term_months_after_cutover() -> None:
    calc = PillarCalculator(MonthStrategy.SOLAR_TERM)
    assert calc.month(2024, 1, 15).hanja() == "乙丑"
    assert calc.month(2024, 2, 10).hanja() == "丙寅"


def test_datetime_supplies_hour() -> None:
    chart = compute_four_pillars(datetime(2000, 1, 7, 23, 30))
    assert chart.hour == 23
    assert chart.pillars["hour"].hanja() == "甲子"
    assert [p.hanja() for p in chart.ordered_pillars()][-1] == "甲子"
