"""Harmony and conflict relations between Earthly Branches (合沖刑破害).

:func:`check_branch_relations` compares one incoming branch (of a year,
month, day or hour fortune) with the natal branches and reports every
relation it forms, in table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Sequence

from .cycle.constants import branch_for_index
from .elements import Element

__all__ = [
    "BranchRelation",
    "RelationTone",
    "RelationType",
    "RELATION_LABELS",
    "check_branch_relations",
    "count_by_type",
]


class RelationType(StrEnum):
    YUKHAP = "YUKHAP"
    SAMHAP = "SAMHAP"
    BANGHAP = "BANGHAP"
    CHUNG = "CHUNG"
    HYEONG = "HYEONG"
    PA = "PA"
    HAE = "HAE"
    WONJIN = "WONJIN"


class RelationTone(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


RELATION_LABELS: Final[Mapping[RelationType, str]] = MappingProxyType(
    {
        RelationType.YUKHAP: "육합(六合)",
        RelationType.SAMHAP: "삼합(三合)",
        RelationType.BANGHAP: "방합(方合)",
        RelationType.CHUNG: "충(冲)",
        RelationType.HYEONG: "형(刑)",
        RelationType.PA: "파(破)",
        RelationType.HAE: "해(害)",
        RelationType.WONJIN: "원진(怨嗔)",
    }
)

_HARMONIES: Final[frozenset[RelationType]] = frozenset(
    {RelationType.YUKHAP, RelationType.SAMHAP, RelationType.BANGHAP}
)

_YUKHAP: Final[tuple[tuple[int, int, Element], ...]] = (
    (0, 1, Element.EARTH),
    (2, 11, Element.WOOD),
    (3, 10, Element.FIRE),
    (4, 9, Element.METAL),
    (5, 8, Element.WATER),
    (6, 7, Element.FIRE),
)

_SAMHAP: Final[tuple[tuple[tuple[int, int, int], Element], ...]] = (
    ((8, 0, 4), Element.WATER),
    ((2, 6, 10), Element.FIRE),
    ((5, 9, 1), Element.METAL),
    ((11, 3, 7), Element.WOOD),
)

_BANGHAP: Final[tuple[tuple[tuple[int, int, int], Element], ...]] = (
    ((2, 3, 4), Element.WOOD),
    ((5, 6, 7), Element.FIRE),
    ((8, 9, 10), Element.METAL),
    ((11, 0, 1), Element.WATER),
)

_CHUNG: Final[tuple[tuple[int, int], ...]] = ((0, 6), (1, 7), (2, 8), (3, 9), (4, 10), (5, 11))

# Triple punishments, the 子卯 pair, then self-punishing branches.
_HYEONG_GROUPS: Final[tuple[tuple[int, ...], ...]] = ((2, 5, 8), (1, 10, 7), (0, 3))
_SELF_HYEONG: Final[tuple[int, ...]] = (4, 6, 9, 11)

_PA: Final[tuple[tuple[int, int], ...]] = ((0, 9), (1, 4), (2, 11), (3, 6), (5, 8), (7, 10))
_HAE: Final[tuple[tuple[int, int], ...]] = ((0, 7), (1, 6), (2, 5), (3, 4), (8, 11), (9, 10))
_WONJIN: Final[tuple[tuple[int, int], ...]] = ((0, 7), (1, 6), (2, 9), (3, 8), (4, 11), (5, 10))


@dataclass(frozen=True)
class BranchRelation:
    """One relation formed by the incoming branch (always first in ``branches``)."""

    type: RelationType
    branches: tuple[int, ...]
    result_element: Element | None = None
    complete: bool = False

    @property
    def tone(self) -> RelationTone:
        return RelationTone.POSITIVE if self.type in _HARMONIES else RelationTone.NEGATIVE

    def describe(self) -> str:
        members = "↔".join(branch_for_index(idx).label() for idx in self.branches)
        text = f"{RELATION_LABELS[self.type]}: {members}"
        if self.result_element is not None:
            text += f" → {self.result_element.label()}"
        return text


def _pairs(
    kind: RelationType, table: Iterable[tuple[int, int]], incoming: int, natal: Sequence[int]
) -> list[BranchRelation]:
    found: list[BranchRelation] = []
    for a, b in table:
        for other in natal:
            if (incoming, other) in ((a, b), (b, a)):
                found.append(BranchRelation(kind, (incoming, other)))
    return found


def _groups(
    kind: RelationType,
    table: Iterable[tuple[tuple[int, int, int], Element]],
    incoming: int,
    natal: Sequence[int],
) -> list[BranchRelation]:
    found: list[BranchRelation] = []
    for members, element in table:
        if incoming not in members:
            continue
        matches = [other for other in natal if other in members and other != incoming]
        if not matches:
            continue
        complete = set(members) <= {incoming, *matches}
        found.append(BranchRelation(kind, (incoming, *matches), element, complete))
    return found


def check_branch_relations(incoming: int, natal: Sequence[int]) -> tuple[BranchRelation, ...]:
    """Return every relation between branch ``incoming`` and the ``natal`` branches."""

    incoming %= 12
    natal = [idx % 12 for idx in natal]
    found: list[BranchRelation] = []

    for a, b, element in _YUKHAP:
        for other in natal:
            if (incoming, other) in ((a, b), (b, a)):
                found.append(BranchRelation(RelationType.YUKHAP, (incoming, other), element))
    found.extend(_groups(RelationType.SAMHAP, _SAMHAP, incoming, natal))
    found.extend(_groups(RelationType.BANGHAP, _BANGHAP, incoming, natal))
    found.extend(_pairs(RelationType.CHUNG, _CHUNG, incoming, natal))

    for members in _HYEONG_GROUPS:
        if incoming not in members:
            continue
        for other in natal:
            if other in members and other != incoming:
                found.append(BranchRelation(RelationType.HYEONG, (incoming, other)))
    if incoming in _SELF_HYEONG:
        for other in natal:
            if other == incoming:
                found.append(BranchRelation(RelationType.HYEONG, (incoming, other)))

    found.extend(_pairs(RelationType.PA, _PA, incoming, natal))
    found.extend(_pairs(RelationType.HAE, _HAE, incoming, natal))
    found.extend(_pairs(RelationType.WONJIN, _WONJIN, incoming, natal))
    return tuple(found)


def count_by_type(relations: Iterable[BranchRelation]) -> dict[RelationType, int]:
    counts = {kind: 0 for kind in RelationType}
    for item in relations:
        counts[item.type] += 1
    return counts
