"""Normalised-weight fit of a name's elements against a chart.

Used as a cross-check next to the point-cap name comparison. Four
categories are scored on 0-100; a category with no input drops out and the
remaining weights are renormalised.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from ..elements import ELEMENT_CYCLE, Element, ElementRelation, relation
from ..yongshin import FiveRoleSystem
from .composite import (
    CompositeScore,
    ScoreInput,
    WeightingStrategy,
    clamp,
    compute_composite,
    round_half_up,
    safe_ratio,
)
from .policy import ScoringPolicy, load_scoring_policy

__all__ = [
    "NameFitResult",
    "balance_score",
    "deficiency_coverage_score",
    "element_category_score",
    "element_rule_score",
    "score_name_fit",
]

NEUTRAL_SCORE = 50.0

_RELATION_POINTS = {
    ElementRelation.GENERATES: 2,
    ElementRelation.GENERATED_BY: 1,
    ElementRelation.CONTROLS: -2,
    ElementRelation.CONTROLLED_BY: -1,
}


@dataclass(frozen=True)
class NameFitResult:
    total: float
    composite: CompositeScore | None
    category_scores: dict[str, float]


def element_rule_score(element: Element, roles: FiveRoleSystem) -> int:
    """Score one element from -4 (gishin) to +4 (yongshin)."""

    if element == roles.yongshin:
        return 4
    if element == roles.gishin:
        return -4
    if element == roles.heeshin:
        return 3
    return _RELATION_POINTS.get(relation(element, roles.yongshin), 0)


def element_category_score(elements: Sequence[Element], roles: FiveRoleSystem) -> float:
    if not elements:
        return NEUTRAL_SCORE
    average = sum(element_rule_score(el, roles) for el in elements) / len(elements)
    return float(round_half_up(clamp((average + 4) / 8 * 100, 0.0, 100.0)))


def deficiency_coverage_score(
    combined: Sequence[Element], deficiency: Sequence[Element]
) -> float:
    targets = list(dict.fromkeys(deficiency))
    if not targets:
        return NEUTRAL_SCORE
    if not combined:
        return 0.0
    counts = Counter(combined)
    covered = sum(1 for el in targets if counts[el] > 0)
    support = sum(counts[el] for el in targets)
    ratio = 0.7 * safe_ratio(covered, len(targets)) + 0.3 * safe_ratio(support, len(combined))
    return float(round_half_up(clamp(ratio * 100, 0.0, 100.0)))


def balance_score(combined: Sequence[Element], gishin: Element | None) -> float:
    """Reward spread across elements; penalise a gishin share above 40%."""

    if not combined:
        return NEUTRAL_SCORE
    counts = Counter(combined)
    distinct = sum(1 for el in ELEMENT_CYCLE if counts[el] > 0)
    max_share = max(counts.values()) / len(combined)
    diversity = distinct / len(ELEMENT_CYCLE)
    concentration = 1 - clamp((max_share - 0.2) / 0.8, 0.0, 1.0)
    score = round_half_up(clamp((0.6 * diversity + 0.4 * concentration) * 100, 0.0, 100.0))
    if gishin is not None:
        gishin_share = counts[gishin] / len(combined)
        if gishin_share > 0.4:
            penalty = round_half_up((gishin_share - 0.4) / 0.6 * 20)
            score = int(clamp(score - penalty, 0, 100))
    return float(score)


def score_name_fit(
    name_elements: Sequence[Element],
    suri_elements: Sequence[Element],
    roles: FiveRoleSystem,
    deficiency: Sequence[Element] = (),
    *,
    policy: ScoringPolicy | None = None,
) -> NameFitResult:
    policy = policy or load_scoring_policy()
    weights = policy.weights("name_fit")
    combined = [*name_elements, *suri_elements]
    categories = {
        "name_elements": (element_category_score(name_elements, roles), bool(name_elements)),
        "suri_elements": (element_category_score(suri_elements, roles), bool(suri_elements)),
        "deficiency": (deficiency_coverage_score(combined, deficiency), bool(deficiency)),
        "balance": (balance_score(combined, roles.gishin), bool(combined)),
    }
    scores = {key: value for key, (value, _) in categories.items()}
    inputs = [
        ScoreInput(key, value, weight=weights.get(key, 0.0))
        for key, (value, active) in categories.items()
        if active
    ]
    if not inputs:
        return NameFitResult(NEUTRAL_SCORE, None, scores)
    composite = compute_composite(
        inputs, strategy=WeightingStrategy.FRACTIONAL, scale=policy.grade_scale("synergy")
    )
    return NameFitResult(composite.total, composite, scores)
