"""Ten Gods (十神) classification relative to a day master."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from .cycle.constants import HeavenlyStem
from .elements import Element, ElementRelation, Polarity, relation

__all__ = [
    "TenGod",
    "TenGodFamily",
    "TenGodInfo",
    "TEN_GOD_INFO",
    "FAMILY_LABELS",
    "classify",
    "classify_stems",
    "family_of",
]


class TenGod(StrEnum):
    BI_GYEON = "BI_GYEON"
    GEOB_JAE = "GEOB_JAE"
    SIK_SHIN = "SIK_SHIN"
    SANG_GWAN = "SANG_GWAN"
    PYEON_JAE = "PYEON_JAE"
    JEONG_JAE = "JEONG_JAE"
    PYEON_GWAN = "PYEON_GWAN"
    JEONG_GWAN = "JEONG_GWAN"
    PYEON_IN = "PYEON_IN"
    JEONG_IN = "JEONG_IN"


class TenGodFamily(StrEnum):
    FRIEND = "friend"
    OUTPUT = "output"
    WEALTH = "wealth"
    AUTHORITY = "authority"
    RESOURCE = "resource"


@dataclass(frozen=True)
class TenGodInfo:
    god: TenGod
    korean: str
    hanja: str
    family: TenGodFamily

    def label(self) -> str:
        return f"{self.korean}({self.hanja})"


TEN_GOD_INFO: Final[Mapping[TenGod, TenGodInfo]] = MappingProxyType(
    {
        info.god: info
        for info in (
            TenGodInfo(TenGod.BI_GYEON, "비견", "比肩", TenGodFamily.FRIEND),
            TenGodInfo(TenGod.GEOB_JAE, "겁재", "劫財", TenGodFamily.FRIEND),
            TenGodInfo(TenGod.SIK_SHIN, "식신", "食神", TenGodFamily.OUTPUT),
            TenGodInfo(TenGod.SANG_GWAN, "상관", "傷官", TenGodFamily.OUTPUT),
            TenGodInfo(TenGod.PYEON_JAE, "편재", "偏財", TenGodFamily.WEALTH),
            TenGodInfo(TenGod.JEONG_JAE, "정재", "正財", TenGodFamily.WEALTH),
            TenGodInfo(TenGod.PYEON_GWAN, "편관", "偏官", TenGodFamily.AUTHORITY),
            TenGodInfo(TenGod.JEONG_GWAN, "정관", "正官", TenGodFamily.AUTHORITY),
            TenGodInfo(TenGod.PYEON_IN, "편인", "偏印", TenGodFamily.RESOURCE),
            TenGodInfo(TenGod.JEONG_IN, "정인", "正印", TenGodFamily.RESOURCE),
        )
    }
)

FAMILY_LABELS: Final[Mapping[TenGodFamily, str]] = MappingProxyType(
    {
        TenGodFamily.FRIEND: "비겁(比劫)",
        TenGodFamily.OUTPUT: "식상(食傷)",
        TenGodFamily.WEALTH: "재성(財星)",
        TenGodFamily.AUTHORITY: "관성(官星)",
        TenGodFamily.RESOURCE: "인성(印星)",
    }
)

# (same polarity, different polarity) per element relation
_BY_RELATION: Final[Mapping[ElementRelation, tuple[TenGod, TenGod]]] = MappingProxyType(
    {
        ElementRelation.SAME: (TenGod.BI_GYEON, TenGod.GEOB_JAE),
        ElementRelation.GENERATES: (TenGod.SIK_SHIN, TenGod.SANG_GWAN),
        ElementRelation.CONTROLS: (TenGod.PYEON_JAE, TenGod.JEONG_JAE),
        ElementRelation.CONTROLLED_BY: (TenGod.PYEON_GWAN, TenGod.JEONG_GWAN),
        ElementRelation.GENERATED_BY: (TenGod.PYEON_IN, TenGod.JEONG_IN),
    }
)


def classify(
    reference_element: Element,
    reference_polarity: Polarity,
    target_element: Element,
    target_polarity: Polarity,
) -> TenGod:
    """Return the Ten God of a target relative to the reference (day master)."""

    pair = _BY_RELATION.get(relation(reference_element, target_element))
    if pair is None:
        return TenGod.BI_GYEON
    same, different = pair
    return same if reference_polarity == target_polarity else different


def classify_stems(day_master: HeavenlyStem, target: HeavenlyStem) -> TenGod:
    return classify(day_master.element, day_master.polarity, target.element, target.polarity)


def family_of(god: TenGod) -> TenGodFamily:
    return TEN_GOD_INFO[god].family
