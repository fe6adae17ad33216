"""Saju-name synergy: how well a name supports a chart.

Five sub-scores on 0-100 feed one fractional composite graded on the
synergy scale:

* ``yongshin_compensation`` - name and frame elements vs. the roles
* ``pattern_fit`` - name elements vs. the chart's pattern (格局) category
* ``decade_defense`` - protection offered through each decade luck period
* ``strength_role`` - whether the name plays the role the chart strength needs
* ``relation_impact`` - buffering of clashes among the natal branches
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Mapping, Sequence

from ..cycle.constants import branch_for_index
from ..cycle.pillars import DecadeLuck
from ..elements import Element, controls, generated_by, generates, mediator
from ..relations import BranchRelation, RelationType
from ..yongshin import FiveRoleSystem, NotComputable, grade_of
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

LOG = logging.getLogger(__name__)

__all__ = [
    "DecadeProtection",
    "PatternCategory",
    "StrengthLevel",
    "SubScore",
    "SynergyInputs",
    "SynergyReport",
    "classify_strength",
    "decade_defense",
    "pattern_fit",
    "relation_impact",
    "score_synergy",
    "strength_index",
    "strength_role",
    "yongshin_compensation",
]


class PatternCategory(StrEnum):
    REGULAR = "정격"
    IRREGULAR = "편격"
    FOLLOWING = "종격"
    OTHER = "기타"

    @classmethod
    def coerce(cls, value: "PatternCategory | str | None") -> "PatternCategory":
        if isinstance(value, PatternCategory):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        return cls.OTHER


class StrengthLevel(StrEnum):
    EXTREME_STRONG = "EXTREME_STRONG"
    STRONG = "STRONG"
    BALANCED = "BALANCED"
    WEAK = "WEAK"
    EXTREME_WEAK = "EXTREME_WEAK"


class DecadeProtection(StrEnum):
    STRONG = "strong"
    PARTIAL = "partial"
    NONE = "none"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class SubScore:
    score: float
    details: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class SynergyInputs:
    """Chart facts the synergy score reads besides the role system."""

    name_elements: tuple[Element, ...]
    suri_elements: tuple[Element, ...] = ()
    pattern: PatternCategory | str | None = None
    excessive_elements: tuple[Element, ...] = ()
    day_master: Element | None = None
    strength: float = 50.0
    decades: tuple[DecadeLuck, ...] = ()
    relations: tuple[BranchRelation, ...] = ()


@dataclass(frozen=True)
class SynergyReport:
    composite: CompositeScore
    parts: Mapping[str, SubScore]
    strength_level: StrengthLevel

    @property
    def total(self) -> float:
        return self.composite.total

    @property
    def grade(self) -> str:
        return self.composite.grade


def strength_index(support: float, oppose: float, *, is_strong: bool = False) -> int:
    """Return the 0-100 share of supporting force; fall back to 65/35 without data."""

    total = support + oppose
    if total > 0:
        return round_half_up(support / total * 100)
    return 65 if is_strong else 35


def classify_strength(index: float) -> StrengthLevel:
    if index >= 80:
        return StrengthLevel.EXTREME_STRONG
    if index >= 60:
        return StrengthLevel.STRONG
    if index > 40:
        return StrengthLevel.BALANCED
    if index > 20:
        return StrengthLevel.WEAK
    return StrengthLevel.EXTREME_WEAK


def _finish(score: float) -> float:
    return float(round_half_up(clamp(score, 0.0, 100.0)))


def yongshin_compensation(
    roles: FiveRoleSystem, name_elements: Sequence[Element], suri_elements: Sequence[Element]
) -> SubScore:
    combined = [*name_elements, *suri_elements]
    direct = supporting = opposing = gishin = 0
    for element in combined:
        if element == roles.yongshin:
            direct += 1
        elif element == roles.heeshin or generates(element) == roles.yongshin:
            supporting += 1
        elif controls(element) == roles.yongshin:
            opposing += 1
        if element == roles.gishin:
            gishin += 1

    total = len(combined) or 1
    score = 50.0
    score += direct / total * 30
    score += supporting / total * 20
    score -= opposing / total * 15
    score -= gishin / total * 10
    score += 8 * sum(1 for el in name_elements if el == roles.yongshin)
    score += 5 * sum(1 for el in name_elements if el == roles.heeshin)
    return SubScore(
        _finish(score),
        {"direct": direct, "supporting": supporting, "opposing": opposing, "gishin": gishin},
    )


def pattern_fit(
    roles: FiveRoleSystem,
    name_elements: Sequence[Element],
    pattern: PatternCategory | str | None,
    excessive_elements: Sequence[Element] = (),
) -> SubScore:
    category = PatternCategory.coerce(pattern)
    has_yong = roles.yongshin in name_elements
    has_hee = roles.heeshin in name_elements
    has_gi = roles.gishin in name_elements
    score = 50.0

    if category is PatternCategory.REGULAR:
        if has_yong:
            score += 25
        elif has_hee:
            score += 15
        if has_gi:
            score -= 15
    elif category is PatternCategory.IRREGULAR:
        if has_yong:
            score += 20
        elif has_hee:
            score += 12
        if has_gi:
            score -= 10
    elif category is PatternCategory.FOLLOWING:
        dominant = excessive_elements[0] if excessive_elements else None
        if dominant is not None and dominant in name_elements:
            score += 25
        elif has_yong:
            score += 15
    else:
        if has_yong:
            score += 18
        elif has_hee:
            score += 10
    return SubScore(_finish(score), {"category": category})


def _protection(
    grade: int, roles: FiveRoleSystem, name_elements: Sequence[Element]
) -> tuple[DecadeProtection, bool, bool]:
    """Return (protection, counts as protected, counts as vulnerable)."""

    has_yong = roles.yongshin in name_elements
    if grade <= 2:
        if has_yong or any(controls(el) == roles.gishin for el in name_elements):
            return DecadeProtection.STRONG, True, False
        if roles.heeshin in name_elements:
            return DecadeProtection.PARTIAL, True, False
        if roles.gishin in name_elements:
            return DecadeProtection.CONFLICT, False, True
        return DecadeProtection.NONE, False, False
    if grade >= 4:
        if has_yong:
            return DecadeProtection.STRONG, True, False
        return DecadeProtection.PARTIAL, False, False
    if has_yong:
        return DecadeProtection.PARTIAL, False, False
    return DecadeProtection.NONE, False, False


def decade_defense(
    roles: FiveRoleSystem, name_elements: Sequence[Element], decades: Sequence[DecadeLuck]
) -> SubScore:
    if not decades:
        return SubScore(50.0, {"periods": ()})
    protected = vulnerable = 0
    periods = []
    for decade in sorted(decades, key=lambda item: item.start_age):
        grade = grade_of(decade.element, roles)
        protection, is_protected, is_vulnerable = _protection(grade, roles, name_elements)
        protected += is_protected
        vulnerable += is_vulnerable
        periods.append((decade.start_age, decade.end_age, grade, protection))
    total = len(decades)
    score = (
        50
        + round_half_up(safe_ratio(protected, total) * 35)
        - round_half_up(safe_ratio(vulnerable, total) * 25)
    )
    return SubScore(
        _finish(score),
        {"protected": protected, "vulnerable": vulnerable, "periods": tuple(periods)},
    )


def strength_role(
    roles: FiveRoleSystem,
    name_elements: Sequence[Element],
    level: StrengthLevel,
    day_master: Element | None = None,
    excessive_elements: Sequence[Element] = (),
) -> SubScore:
    has_yong = roles.yongshin in name_elements
    has_hee = roles.heeshin in name_elements
    has_gi = roles.gishin in name_elements

    if level is StrengthLevel.EXTREME_STRONG:
        output = generates(day_master) if day_master else None
        wealth = generates(output) if output else None
        if output is not None and output in name_elements:
            score = 80
        elif wealth is not None and wealth in name_elements:
            score = 70
        elif has_gi:
            score = 35
        else:
            score = 50
    elif level is StrengthLevel.STRONG:
        score = 85 if has_yong else 70 if has_hee else 30 if has_gi else 50
    elif level is StrengthLevel.BALANCED:
        score = 75 if has_yong else 40 if has_gi else 60
    elif level is StrengthLevel.WEAK:
        resource = generated_by(day_master) if day_master else None
        if has_yong:
            score = 85
        elif resource is not None and resource in name_elements:
            score = 75
        elif day_master is not None and day_master in name_elements:
            score = 70
        elif has_gi:
            score = 25
        else:
            score = 45
    else:
        dominant = excessive_elements[0] if excessive_elements else None
        if dominant is not None and dominant in name_elements:
            score = 80
        elif has_yong:
            score = 70
        elif has_gi:
            score = 20
        else:
            score = 40
    return SubScore(float(score), {"level": level})


def relation_impact(
    roles: FiveRoleSystem, name_elements: Sequence[Element], relations: Sequence[BranchRelation]
) -> SubScore:
    """Score how the name buffers harmonies and conflicts among natal branches.

    A clash is bridged when the name holds the element that mediates the two
    branch elements (Wood between a Water/Fire clash).
    """

    def of(*kinds: RelationType) -> list[BranchRelation]:
        return [item for item in relations if item.type in kinds]

    harmonies = of(RelationType.YUKHAP, RelationType.SAMHAP, RelationType.BANGHAP)
    clashes = of(RelationType.CHUNG)
    punishments = of(RelationType.HYEONG)
    breaks = of(RelationType.PA)
    harms = of(RelationType.HAE)
    has_yong = roles.yongshin in name_elements

    score = 50.0
    if harmonies and has_yong:
        score += 5
    bridged = 0
    for clash in clashes:
        if len(clash.branches) < 2:
            continue
        first = branch_for_index(clash.branches[0]).element
        second = branch_for_index(clash.branches[1]).element
        bridge = mediator(first, second)
        if bridge is not None and bridge in name_elements:
            bridged += 1
            score += 8
    if punishments and has_yong:
        score += 5
    negative = len(clashes) + len(punishments) + len(breaks) + len(harms)
    if negative >= 3:
        score += 10 if has_yong else -5
    return SubScore(
        _finish(score),
        {"harmonies": len(harmonies), "negative": negative, "bridged": bridged},
    )


def score_synergy(
    roles: FiveRoleSystem | NotComputable,
    inputs: SynergyInputs,
    *,
    policy: ScoringPolicy | None = None,
) -> SynergyReport | NotComputable:
    if isinstance(roles, NotComputable):
        return roles
    policy = policy or load_scoring_policy()
    weights = policy.weights("synergy")
    names = inputs.name_elements
    level = classify_strength(inputs.strength)

    parts = {
        "yongshin_compensation": yongshin_compensation(roles, names, inputs.suri_elements),
        "pattern_fit": pattern_fit(roles, names, inputs.pattern, inputs.excessive_elements),
        "decade_defense": decade_defense(roles, names, inputs.decades),
        "strength_role": strength_role(
            roles, names, level, inputs.day_master, inputs.excessive_elements
        ),
        "relation_impact": relation_impact(roles, names, inputs.relations),
    }
    composite = compute_composite(
        [ScoreInput(key, part.score, weight=weights.get(key, 0.0)) for key, part in parts.items()],
        strategy=WeightingStrategy.FRACTIONAL,
        scale=policy.grade_scale("synergy"),
    )
    LOG.debug(
        "synergy %s -> %.0f (%s)",
        {key: part.score for key, part in parts.items()},
        composite.total,
        composite.grade,
    )
    return SynergyReport(composite=composite, parts=parts, strength_level=level)
