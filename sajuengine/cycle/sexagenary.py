"""Utilities for working with the sixty Gapja (甲子) combinations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..exceptions import InvalidPillarError
from .constants import EARTHLY_BRANCHES, HEAVENLY_STEMS, EarthlyBranch, HeavenlyStem

SEXAGENARY_CYCLE_LENGTH: Final[int] = 60


@dataclass(frozen=True)
class SexagenaryCycleEntry:
    """Pairing of a Heavenly Stem and Earthly Branch."""

    index: int
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.branch_index]

    def hangul(self) -> str:
        return f"{self.stem.hangul}{self.branch.hangul}"

    def hanja(self) -> str:
        return f"{self.stem.hanja}{self.branch.hanja}"

    def label(self) -> str:
        """Return a human-readable label (e.g., ``갑자(甲子)``)."""

        return f"{self.hangul()}({self.hanja()})"


def sexagenary_entry_for_index(index: int) -> SexagenaryCycleEntry:
    """Return the cycle entry for ``index`` (wrapped into 0-59)."""

    idx = index % SEXAGENARY_CYCLE_LENGTH
    return SexagenaryCycleEntry(index=idx, stem_index=idx % 10, branch_index=idx % 12)


def is_valid_pairing(stem_index: int, branch_index: int) -> bool:
    """Return ``True`` when stem and branch share parity (yang/yang or yin/yin)."""

    return stem_index % 2 == branch_index % 2


def sexagenary_index(stem_index: int, branch_index: int, *, strict: bool = True) -> int:
    """Return the 0-59 index for the provided stem/branch combination.

    Mismatched parity never occurs in the cycle; it raises
    :class:`InvalidPillarError` unless ``strict`` is false, in which case ``-1``
    is returned.
    """

    stem = stem_index % 10
    branch = branch_index % 12
    if not is_valid_pairing(stem, branch):
        if not strict:
            return -1
        msg = f"Invalid stem/branch pairing: stem={stem_index}, branch={branch_index}"
        raise InvalidPillarError(msg)
    return (6 * stem - 5 * branch) % SEXAGENARY_CYCLE_LENGTH


GANZHI_60: Final[tuple[SexagenaryCycleEntry, ...]] = tuple(
    sexagenary_entry_for_index(idx) for idx in range(SEXAGENARY_CYCLE_LENGTH)
)


__all__ = [
    "GANZHI_60",
    "SexagenaryCycleEntry",
    "SEXAGENARY_CYCLE_LENGTH",
    "is_valid_pairing",
    "sexagenary_entry_for_index",
    "sexagenary_index",
]
