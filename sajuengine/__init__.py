"""sajuengine package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("sajuengine")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .context import EvaluationContext
from .cycle import (
    FourPillarsChart,
    MonthStrategy,
    Pillar,
    PillarCalculator,
    compute_four_pillars,
)
from .elements import Element, ElementRelation, Polarity, relation
from .exceptions import (
    InvalidDateError,
    InvalidPillarError,
    PolicyError,
    SajuEngineError,
    UnknownElementError,
)
from .ten_gods import TenGod, classify
from .yongshin import FiveRoleSystem, NotComputable, build_role_system, grade_of


def get_version() -> str:
    """Return the resolved package version."""

    return __version__


__all__ = [
    "Element",
    "ElementRelation",
    "EvaluationContext",
    "FiveRoleSystem",
    "FourPillarsChart",
    "InvalidDateError",
    "InvalidPillarError",
    "MonthStrategy",
    "NotComputable",
    "Pillar",
    "PillarCalculator",
    "Polarity",
    "PolicyError",
    "SajuEngineError",
    "TenGod",
    "UnknownElementError",
    "__version__",
    "build_role_system",
    "classify",
    "compute_four_pillars",
    "get_version",
    "grade_of",
    "relation",
]
