"""Point-cap comparison of candidate names against a chart.

Each candidate earns up to 100 points from four capped items:

=====  ===============================================  ===
A      character (resource) elements vs. the roles      40
B      numerological frame (suri) elements vs. roles    30
C      chart deficiencies filled by the name            15
D      generating flow between adjacent frames          15
=====  ===============================================  ===
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping, Sequence

from ..elements import ELEMENT_CYCLE, Element, is_friendly
from ..yongshin import FiveRoleSystem, NotComputable
from .composite import (
    CompositeScore,
    ScoreInput,
    WeightingStrategy,
    compute_composite,
    round_half_up,
    safe_ratio,
)
from .name_fit import score_name_fit
from .policy import ScoringPolicy, load_scoring_policy

LOG = logging.getLogger(__name__)

__all__ = [
    "NameCandidate",
    "NameEvaluation",
    "SuriLuck",
    "SURI_81_LUCK",
    "deficiency_fill_score",
    "evaluate_name",
    "generation_flow_score",
    "rank_candidates",
    "resource_element_score",
    "suri_element_score",
    "suri_luck",
    "suri_to_element",
]


class SuriLuck(StrEnum):
    GREAT = "GREAT"
    GOOD = "GOOD"
    HALF = "HALF"
    BAD = "BAD"


_G, _H, _B = SuriLuck.GREAT, SuriLuck.HALF, SuriLuck.BAD

# Fortune of the 81 stroke-count numbers, indexed from 1.
_SURI_ROWS: Final[tuple[SuriLuck, ...]] = (
    _G, _B, _G, _B, _G, _G, _G, _G, _B, _B,
    _G, _B, _G, _B, _G, _G, _G, _G, _B, _B,
    _G, _B, _G, _G, _G, _H, _H, _B, _G, _H,
    _G, _G, _G, _B, _G, _H, _G, _H, _G, _H,
    _G, _H, _B, _B, _G, _B, _G, _G, _B, _H,
    _H, _G, _H, _B, _H, _B, _G, _H, _B, _B,
    _G, _B, _G, _B, _G, _B, _G, _G, _B, _B,
    _G, _B, _G, _B, _G, _B, _H, _H, _B, _B,
    _G,
)
SURI_81_LUCK: Final[Mapping[int, SuriLuck]] = MappingProxyType(
    {number: luck for number, luck in enumerate(_SURI_ROWS, start=1)}
)

_SURI_LAST_DIGIT: Final[tuple[Element, ...]] = (
    Element.WATER,
    Element.WOOD,
    Element.WOOD,
    Element.FIRE,
    Element.FIRE,
    Element.EARTH,
    Element.EARTH,
    Element.METAL,
    Element.METAL,
    Element.WATER,
)


def suri_to_element(strokes: int) -> Element:
    """Return the element of a stroke sum from its last digit."""

    return _SURI_LAST_DIGIT[strokes % 10]


def suri_luck(strokes: int) -> SuriLuck:
    return SURI_81_LUCK[(strokes - 1) % 81 + 1]


@dataclass(frozen=True)
class NameCandidate:
    """A candidate name reduced to the facts the comparison needs.

    ``frame_strokes`` are the stroke sums of the four frames (四格); their
    elements are derived unless ``frame_elements`` is given.
    """

    label: str
    char_elements: tuple[Element, ...]
    frame_strokes: tuple[int, ...] = ()
    frame_elements: tuple[Element, ...] | None = None

    def suri_elements(self) -> tuple[Element, ...]:
        if self.frame_elements is not None:
            return self.frame_elements
        return tuple(suri_to_element(strokes) for strokes in self.frame_strokes)


@dataclass(frozen=True)
class NameEvaluation:
    candidate: NameCandidate
    composite: CompositeScore
    cross_check: float | None
    yongshin_matches: int
    heeshin_matches: int
    gishin_matches: int
    deficiency_fills: int
    friendly_pairs: int
    total_pairs: int
    suri_lucks: tuple[SuriLuck, ...] = ()
    rank: int = 0

    @property
    def total(self) -> float:
        return self.composite.total

    @property
    def grade(self) -> str:
        return self.composite.grade


@dataclass(frozen=True)
class _ItemScore:
    score: float
    counts: Mapping[str, int] = field(default_factory=dict)


def resource_element_score(
    char_elements: Sequence[Element],
    roles: FiveRoleSystem,
    *,
    cap: float = 40.0,
    ratios: Mapping[str, float] | None = None,
) -> _ItemScore:
    """Item A: share of ``cap`` earned per character by the role of its element."""

    if not char_elements:
        return _ItemScore(0.0, {"yongshin": 0, "heeshin": 0, "gishin": 0})
    table = {"yongshin": 1.0, "heeshin": 0.75, "hansin": 0.4, "gushin": 0.15, "gishin": 0.0}
    table.update(ratios or {})
    known = {roles.yongshin, roles.heeshin, roles.gishin, roles.gushin}
    idle = [el for el in ELEMENT_CYCLE if el not in known]

    per_char = cap / len(char_elements)
    counts = {"yongshin": 0, "heeshin": 0, "gishin": 0}
    total = 0.0
    for element in char_elements:
        if element == roles.yongshin:
            ratio = table["yongshin"]
            counts["yongshin"] += 1
        elif element == roles.heeshin:
            ratio = table["heeshin"]
            counts["heeshin"] += 1
        elif element in idle:
            ratio = table["hansin"]
        elif element == roles.gushin:
            ratio = table["gushin"]
        elif element == roles.gishin:
            ratio = table["gishin"]
            counts["gishin"] += 1
        else:
            ratio = table["hansin"]
        total += per_char * ratio
    return _ItemScore(float(round_half_up(min(cap, total))), counts)


def suri_element_score(
    suri_elements: Sequence[Element],
    roles: FiveRoleSystem,
    *,
    cap: float = 30.0,
    points: float = 7.5,
) -> _ItemScore:
    """Item B: ``points`` per frame whose element is the yongshin or heeshin."""

    if not suri_elements:
        return _ItemScore(0.0, {"matches": 0})
    matches = sum(1 for el in suri_elements if el in (roles.yongshin, roles.heeshin))
    return _ItemScore(float(round_half_up(min(cap, matches * points))), {"matches": matches})


def deficiency_fill_score(
    char_elements: Sequence[Element],
    suri_elements: Sequence[Element],
    deficiency: Sequence[Element],
    *,
    cap: float = 15.0,
    partial: float = 8.0,
) -> _ItemScore:
    """Item C: full marks when every deficient element appears in the name."""

    targets = list(dict.fromkeys(deficiency))
    if not targets:
        return _ItemScore(cap, {"fills": 0})
    present = {*char_elements, *suri_elements}
    fills = sum(1 for el in targets if el in present)
    if fills >= len(targets):
        return _ItemScore(cap, {"fills": fills})
    if fills:
        return _ItemScore(min(cap, partial), {"fills": fills})
    return _ItemScore(0.0, {"fills": 0})


def generation_flow_score(suri_elements: Sequence[Element], *, cap: float = 15.0) -> _ItemScore:
    """Item D: proportion of adjacent frame pairs in a friendly relation."""

    if len(suri_elements) < 2:
        return _ItemScore(0.0, {"friendly": 0, "pairs": 0})
    pairs = len(suri_elements) - 1
    friendly = sum(
        1 for first, second in zip(suri_elements, suri_elements[1:]) if is_friendly(first, second)
    )
    score = round_half_up(safe_ratio(friendly, pairs) * cap)
    return _ItemScore(float(min(cap, score)), {"friendly": friendly, "pairs": pairs})


def evaluate_name(
    candidate: NameCandidate,
    roles: FiveRoleSystem | NotComputable,
    deficiency: Sequence[Element] = (),
    *,
    policy: ScoringPolicy | None = None,
) -> NameEvaluation | NotComputable:
    """Score one candidate on the name-comparison scale."""

    if isinstance(roles, NotComputable):
        return roles
    policy = policy or load_scoring_policy()
    caps = policy.caps("name_comparison")
    naming = policy.naming
    suri = candidate.suri_elements()

    item_a = resource_element_score(
        candidate.char_elements,
        roles,
        cap=caps["resource_element"],
        ratios=policy.character_ratios,
    )
    item_b = suri_element_score(
        suri, roles, cap=caps["suri_element"], points=float(naming.get("suri_points", 7.5))
    )
    item_c = deficiency_fill_score(
        candidate.char_elements,
        suri,
        deficiency,
        cap=caps["deficiency_fill"],
        partial=float(naming.get("partial_fill_points", 8)),
    )
    item_d = generation_flow_score(suri, cap=caps["generation_flow"])

    composite = compute_composite(
        [
            ScoreInput("resource_element", item_a.score, cap=caps["resource_element"]),
            ScoreInput("suri_element", item_b.score, cap=caps["suri_element"]),
            ScoreInput("deficiency_fill", item_c.score, cap=caps["deficiency_fill"]),
            ScoreInput("generation_flow", item_d.score, cap=caps["generation_flow"]),
        ],
        strategy=WeightingStrategy.POINT_CAP,
        scale=policy.grade_scale("name_comparison"),
    )

    cross_check = None
    if candidate.char_elements or suri:
        cross_check = score_name_fit(
            candidate.char_elements, suri, roles, deficiency, policy=policy
        ).total

    return NameEvaluation(
        candidate=candidate,
        composite=composite,
        cross_check=cross_check,
        yongshin_matches=item_a.counts["yongshin"],
        heeshin_matches=item_a.counts["heeshin"],
        gishin_matches=item_a.counts["gishin"],
        deficiency_fills=item_c.counts["fills"],
        friendly_pairs=item_d.counts["friendly"],
        total_pairs=item_d.counts["pairs"],
        suri_lucks=tuple(suri_luck(strokes) for strokes in candidate.frame_strokes),
    )


def rank_candidates(
    candidates: Sequence[NameCandidate],
    roles: FiveRoleSystem | NotComputable,
    deficiency: Sequence[Element] = (),
    *,
    limit: int | None = None,
    policy: ScoringPolicy | None = None,
) -> list[NameEvaluation] | NotComputable:
    """Evaluate and rank candidates, best first.

    Only the first ``limit`` candidates (policy default 8) are compared. Ties
    keep their input order.
    """

    if isinstance(roles, NotComputable):
        return roles
    policy = policy or load_scoring_policy()
    limit = policy.max_candidates if limit is None else max(0, limit)
    if len(candidates) > limit:
        LOG.info("comparing the first %d of %d name candidates", limit, len(candidates))

    evaluations = [
        evaluate_name(candidate, roles, deficiency, policy=policy)
        for candidate in candidates[:limit]
    ]
    ordered = sorted(evaluations, key=lambda item: -item.total)
    return [replace(item, rank=position) for position, item in enumerate(ordered, start=1)]
