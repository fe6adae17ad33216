from __future__ import annotations

import pytest

from sajuengine.cycle.calendar import (
    SOLAR_TERM_CUTOVER_DAYS,
    SOLAR_TERMS,
    day_pillar,
    gregorian_to_jdn,
    hour_branch_index,
    hour_pillar,
    jdn_to_gregorian,
    month_order,
    month_pillar,
    solar_month,
    validate_date,
    validate_hour,
    year_pillar,
)
from sajuengine.exceptions import InvalidDateError


def test_julian_day_numbers() -> None:
    """JDN values match the published J2000 reference."""

    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(2000, 1, 7) == 2451551
    assert gregorian_to_jdn(1858, 11, 17) == 2400001


@pytest.mark.parametrize(
    "ymd", [(2000, 1, 1), (1900, 3, 1), (2024, 2, 29), (1582, 10, 15), (2100, 12, 31)]
)
def test_jdn_inverse(ymd: tuple[int, int, int]) -> None:
    assert jdn_to_gregorian(gregorian_to_jdn(*ymd)) == ymd


def test_day_pillar_reference_days() -> None:
    assert day_pillar(2000, 1, 7).hanja() == "甲子"
    assert day_pillar(2000, 1, 1).hanja() == "戊午"
    assert day_pillar(1949, 10, 1).hanja() == "甲子"
    assert day_pillar(2000, 1, 8).hanja() == "乙丑"


def test_year_pillar() -> None:
    assert year_pillar(4).hanja() == "甲子"
    assert year_pillar(1984).hanja() == "甲子"
    assert year_pillar(3).hanja() == "癸亥"

    pillar = year_pillar(2024)
    assert (pillar.stem_index, pillar.branch_index) == (0, 4)
    assert pillar.hangul() == "갑진"
    assert pillar.branch.animal == "용"


def test_year_pillar_before_epoch_stays_in_range() -> None:
    pillar = year_pillar(-100)
    assert 0 <= pillar.stem_index < 10
    assert 0 <= pillar.branch_index < 12


def test_month_order_starts_in_february() -> None:
    assert month_order(2) == 0
    assert month_order(1) == 11
    assert month_order(12) == 10
    with pytest.raises(InvalidDateError):
        month_order(13)


def test_month_pillar_fast_formula() -> None:
    assert month_pillar(0, 2).hanja() == "丙寅"
    assert month_pillar(0, 1).hanja() == "丁丑"
    assert month_pillar(1, 2).hanja() == "戊寅"
    assert month_pillar(4, 2).hanja() == "甲寅"


def test_hour_branch() -> None:
    assert hour_branch_index(23) == 0
    assert hour_branch_index(0) == 0
    assert hour_branch_index(1) == 1
    assert hour_branch_index(2) == 1
    assert hour_branch_index(12) == 6
    assert hour_branch_index(22) == 11


def test_hour_pillar() -> None:
    assert hour_pillar(0, 0).hanja() == "甲子"
    assert hour_pillar(0, 23).hanja() == "甲子"
    assert hour_pillar(1, 0).hanja() == "丙子"
    assert hour_pillar(0, 12).hanja() == "庚午"


@pytest.mark.parametrize(
    ("y", "m", "d"),
    [(2023, 2, 29), (2024, 4, 31), (2024, 13, 1), (2024, 0, 1), (2024, 1, 0), (1900, 2, 29)],
)
def test_nonexistent_dates_rejected(y: int, m: int, d: int) -> None:
    with pytest.raises(InvalidDateError):
        validate_date(y, m, d)
    with pytest.raises(InvalidDateError):
        day_pillar(y, m, d)


def test_leap_day_accepted() -> None:
    validate_date(2024, 2, 29)
    validate_date(2000, 2, 29)


@pytest.mark.parametrize("hour", [-1, 24, 99])
def test_invalid_hours_rejected(hour: int) -> None:
    with pytest.raises(InvalidDateError):
        validate_hour(hour)
    with pytest.raises(InvalidDateError):
        hour_pillar(0, hour)


@pytest.mark.parametrize(
    ("ymd", "expected"),
    [
        ((2024, 2, 3), (2023, 1)),
        ((2024, 2, 4), (2024, 2)),
        ((2024, 1, 5), (2023, 12)),
        ((2024, 1, 6), (2023, 1)),
        ((2024, 3, 5), (2024, 2)),
        ((2024, 3, 6), (2024, 3)),
        ((2024, 12, 6), (2024, 11)),
        ((2024, 12, 7), (2024, 12)),
    ],
)
def test_solar_month_cutovers(ymd: tuple[int, int, int], expected: tuple[int, int]) -> None:
    assert solar_month(*ymd) == expected


def test_solar_term_table_matches_cutovers() -> None:
    assert len(SOLAR_TERM_CUTOVER_DAYS) == 12
    assert [term.day for term in SOLAR_TERMS] == list(SOLAR_TERM_CUTOVER_DAYS)
    assert SOLAR_TERMS[1].hangul == "입춘"
