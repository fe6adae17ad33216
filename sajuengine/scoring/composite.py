"""Weighted composite scores and letter grades.

Two weighting conventions coexist and are never mixed inside one score:

``fractional``
    Every sub-score lives on 0-100 and carries a weight; weights are
    renormalised to sum to 1.0 before the weighted sum is taken.
``point_cap``
    Every sub-score is already expressed in points and is clamped to its own
    cap; the caps of one score add up to 100 and the total is a plain sum.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Sequence

LOG = logging.getLogger(__name__)

__all__ = [
    "CompositeScore",
    "GradeScale",
    "NAME_COMPARISON_SCALE",
    "SYNERGY_SCALE",
    "ScoreComponent",
    "ScoreInput",
    "WeightingStrategy",
    "clamp",
    "compute_composite",
    "round_half_up",
    "safe_mean",
    "safe_ratio",
]


class WeightingStrategy(StrEnum):
    FRACTIONAL = "fractional"
    POINT_CAP = "point_cap"


@dataclass(frozen=True)
class ScoreInput:
    """Raw sub-score fed into :func:`compute_composite`.

    ``weight`` is read by the fractional strategy and ``cap`` by the
    point-cap strategy.
    """

    name: str
    value: float
    weight: float = 0.0
    cap: float = 100.0


@dataclass(frozen=True)
class ScoreComponent:
    name: str
    value: float
    cap: float
    weight: float
    contribution: float


@dataclass(frozen=True)
class GradeScale:
    """Named threshold table mapping a 0-100 total to a letter."""

    name: str
    thresholds: tuple[tuple[str, float], ...]
    floor: str = "D"

    def grade_for(self, total: float) -> str:
        for letter, minimum in self.thresholds:
            if total >= minimum:
                return letter
        return self.floor


NAME_COMPARISON_SCALE = GradeScale(
    "name_comparison", (("S", 90.0), ("A", 75.0), ("B", 60.0), ("C", 45.0))
)
SYNERGY_SCALE = GradeScale("synergy", (("S", 90.0), ("A", 75.0), ("B", 55.0), ("C", 35.0)))


@dataclass(frozen=True)
class CompositeScore:
    components: tuple[ScoreComponent, ...]
    total: float
    grade: str
    strategy: WeightingStrategy
    scale: str

    def component(self, name: str) -> ScoreComponent:
        for item in self.components:
            if item.name == name:
                return item
        raise KeyError(name)

    def as_dict(self) -> dict[str, float]:
        return {item.name: item.contribution for item in self.components}


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; NaN and infinities map to ``lower``."""

    if not math.isfinite(value):
        return lower
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def safe_ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def safe_mean(values: Iterable[float]) -> float:
    items = list(values)
    return safe_ratio(sum(items), len(items))


def _fractional(inputs: Sequence[ScoreInput]) -> tuple[list[ScoreComponent], float]:
    weights = [clamp(item.weight, 0.0, math.inf) for item in inputs]
    weight_sum = sum(weights)
    if weight_sum and not math.isclose(weight_sum, 1.0, abs_tol=1e-9):
        LOG.debug("renormalising fractional weights summing to %.4f", weight_sum)
    components: list[ScoreComponent] = []
    total = 0.0
    for item, weight in zip(inputs, weights):
        value = clamp(item.value, 0.0, 100.0)
        share = safe_ratio(weight, weight_sum)
        contribution = value * share
        total += contribution
        components.append(ScoreComponent(item.name, value, 100.0, share, contribution))
    return components, total


def _point_cap(inputs: Sequence[ScoreInput]) -> tuple[list[ScoreComponent], float]:
    components: list[ScoreComponent] = []
    total = 0.0
    for item in inputs:
        cap = clamp(item.cap, 0.0, 100.0)
        value = clamp(item.value, 0.0, cap)
        if value != item.value:
            LOG.debug("clamped %s from %r to %.2f (cap %.2f)", item.name, item.value, value, cap)
        total += value
        components.append(ScoreComponent(item.name, value, cap, 0.0, value))
    return components, total


def compute_composite(
    inputs: Sequence[ScoreInput],
    *,
    strategy: WeightingStrategy,
    scale: GradeScale,
) -> CompositeScore:
    """Combine ``inputs`` under ``strategy`` and grade the total on ``scale``."""

    if strategy is WeightingStrategy.FRACTIONAL:
        components, raw_total = _fractional(inputs)
    elif strategy is WeightingStrategy.POINT_CAP:
        components, raw_total = _point_cap(inputs)
    else:
        raise AssertionError(f"unhandled weighting strategy {strategy!r}")
    total = float(clamp(round_half_up(clamp(raw_total, 0.0, 100.0)), 0.0, 100.0))
    return CompositeScore(
        components=tuple(components),
        total=total,
        grade=scale.grade_for(total),
        strategy=strategy,
        scale=scale.name,
    )
