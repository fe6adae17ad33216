"""Sexagenary (干支) calendar arithmetic."""

from .calendar import (
    SOLAR_TERM_CUTOVER_DAYS,
    SOLAR_TERMS,
    MonthStrategy,
    SolarTerm,
    day_pillar,
    gregorian_to_jdn,
    hour_branch_index,
    hour_pillar,
    jdn_to_gregorian,
    month_pillar,
    solar_month,
    validate_date,
    validate_hour,
    year_pillar,
)
from .constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    EarthlyBranch,
    HeavenlyStem,
    branch_for_index,
    stem_for_index,
)
from .four_pillars import FourPillarsChart, PillarCalculator, compute_four_pillars
from .pillars import DecadeLuck, Pillar
from .sexagenary import (
    GANZHI_60,
    SEXAGENARY_CYCLE_LENGTH,
    SexagenaryCycleEntry,
    sexagenary_entry_for_index,
    sexagenary_index,
)

__all__ = [
    "EARTHLY_BRANCHES",
    "EarthlyBranch",
    "FourPillarsChart",
    "GANZHI_60",
    "HEAVENLY_STEMS",
    "HeavenlyStem",
    "DecadeLuck",
    "MonthStrategy",
    "Pillar",
    "PillarCalculator",
    "SEXAGENARY_CYCLE_LENGTH",
    "SOLAR_TERMS",
    "SOLAR_TERM_CUTOVER_DAYS",
    "SexagenaryCycleEntry",
    "SolarTerm",
    "branch_for_index",
    "compute_four_pillars",
    "day_pillar",
    "gregorian_to_jdn",
    "hour_branch_index",
    "hour_pillar",
    "jdn_to_gregorian",
    "month_pillar",
    "sexagenary_entry_for_index",
    "sexagenary_index",
    "solar_month",
    "stem_for_index",
    "validate_date",
    "validate_hour",
    "year_pillar",
]
