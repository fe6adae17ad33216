"""Lookup tables for Heavenly Stems and Earthly Branches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..elements import Element, Polarity


@dataclass(frozen=True)
class HeavenlyStem:
    """One of the ten Heavenly Stems (天干)."""

    index: int
    code: str
    hangul: str
    hanja: str
    element: Element
    polarity: Polarity

    def label(self) -> str:
        return f"{self.hangul}({self.hanja})"


@dataclass(frozen=True)
class EarthlyBranch:
    """One of the twelve Earthly Branches (地支)."""

    index: int
    code: str
    hangul: str
    hanja: str
    element: Element
    polarity: Polarity
    animal: str

    def label(self) -> str:
        return f"{self.hangul}({self.hanja})"


_W, _F, _E, _M, _WA = Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER
_YANG, _YIN = Polarity.YANG, Polarity.YIN

HEAVENLY_STEMS: Final[tuple[HeavenlyStem, ...]] = (
    HeavenlyStem(0, "GAP", "갑", "甲", _W, _YANG),
    HeavenlyStem(1, "EUL", "을", "乙", _W, _YIN),
    HeavenlyStem(2, "BYEONG", "병", "丙", _F, _YANG),
    HeavenlyStem(3, "JEONG", "정", "丁", _F, _YIN),
    HeavenlyStem(4, "MU", "무", "戊", _E, _YANG),
    HeavenlyStem(5, "GI", "기", "己", _E, _YIN),
    HeavenlyStem(6, "GYEONG", "경", "庚", _M, _YANG),
    HeavenlyStem(7, "SIN", "신", "辛", _M, _YIN),
    HeavenlyStem(8, "IM", "임", "壬", _WA, _YANG),
    HeavenlyStem(9, "GYE", "계", "癸", _WA, _YIN),
)


EARTHLY_BRANCHES: Final[tuple[EarthlyBranch, ...]] = (
    EarthlyBranch(0, "JA", "자", "子", _WA, _YANG, "쥐"),
    EarthlyBranch(1, "CHUK", "축", "丑", _E, _YIN, "소"),
    EarthlyBranch(2, "IN", "인", "寅", _W, _YANG, "호랑이"),
    EarthlyBranch(3, "MYO", "묘", "卯", _W, _YIN, "토끼"),
    EarthlyBranch(4, "JIN", "진", "辰", _E, _YANG, "용"),
    EarthlyBranch(5, "SA", "사", "巳", _F, _YIN, "뱀"),
    EarthlyBranch(6, "O", "오", "午", _F, _YANG, "말"),
    EarthlyBranch(7, "MI", "미", "未", _E, _YIN, "양"),
    EarthlyBranch(8, "SHIN", "신", "申", _M, _YANG, "원숭이"),
    EarthlyBranch(9, "YU", "유", "酉", _M, _YIN, "닭"),
    EarthlyBranch(10, "SUL", "술", "戌", _E, _YANG, "개"),
    EarthlyBranch(11, "HAE", "해", "亥", _WA, _YIN, "돼지"),
)


def stem_for_index(index: int) -> HeavenlyStem:
    """Return the Heavenly Stem for ``index`` (wrapped into 0-9)."""

    return HEAVENLY_STEMS[index % len(HEAVENLY_STEMS)]


def branch_for_index(index: int) -> EarthlyBranch:
    """Return the Earthly Branch for ``index`` (wrapped into 0-11)."""

    return EARTHLY_BRANCHES[index % len(EARTHLY_BRANCHES)]


def stem_for_hanja(char: str) -> HeavenlyStem | None:
    for stem in HEAVENLY_STEMS:
        if char in (stem.hanja, stem.hangul):
            return stem
    return None


def branch_for_hanja(char: str) -> EarthlyBranch | None:
    for branch in EARTHLY_BRANCHES:
        if char in (branch.hanja, branch.hangul):
            return branch
    return None


__all__ = [
    "HeavenlyStem",
    "EarthlyBranch",
    "HEAVENLY_STEMS",
    "EARTHLY_BRANCHES",
    "stem_for_index",
    "branch_for_index",
    "stem_for_hanja",
    "branch_for_hanja",
]
