"""The stem/branch pillar record shared by every calendar strategy."""

from __future__ import annotations

from dataclasses import dataclass

from ..elements import Element, Polarity
from ..exceptions import InvalidPillarError
from .constants import EARTHLY_BRANCHES, HEAVENLY_STEMS, EarthlyBranch, HeavenlyStem
from .sexagenary import (
    SexagenaryCycleEntry,
    is_valid_pairing,
    sexagenary_entry_for_index,
    sexagenary_index,
)


@dataclass(frozen=True)
class Pillar:
    """A single pillar made up of a Heavenly Stem and Earthly Branch.

    Only the sixty same-parity pairings exist; anything else is rejected at
    construction time.
    """

    stem_index: int
    branch_index: int

    def __post_init__(self) -> None:
        if not 0 <= self.stem_index < len(HEAVENLY_STEMS):
            raise InvalidPillarError(f"stem index out of range: {self.stem_index}")
        if not 0 <= self.branch_index < len(EARTHLY_BRANCHES):
            raise InvalidPillarError(f"branch index out of range: {self.branch_index}")
        if not is_valid_pairing(self.stem_index, self.branch_index):
            raise InvalidPillarError(
                f"stem {self.stem_index} and branch {self.branch_index} differ in parity"
            )

    @classmethod
    def from_cycle_index(cls, index: int) -> "Pillar":
        entry = sexagenary_entry_for_index(index)
        return cls(entry.stem_index, entry.branch_index)

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.branch_index]

    @property
    def cycle_index(self) -> int:
        return sexagenary_index(self.stem_index, self.branch_index)

    @property
    def element(self) -> Element:
        """Element of the stem, used when grading a pillar."""

        return self.stem.element

    @property
    def polarity(self) -> Polarity:
        return self.stem.polarity

    def entry(self) -> SexagenaryCycleEntry:
        return sexagenary_entry_for_index(self.cycle_index)

    def hangul(self) -> str:
        return f"{self.stem.hangul}{self.branch.hangul}"

    def hanja(self) -> str:
        return f"{self.stem.hanja}{self.branch.hanja}"

    def label(self) -> str:
        return f"{self.hangul()}({self.hanja()})"


@dataclass(frozen=True)
class DecadeLuck:
    """A ten-year luck period (大運) graded by the element of its stem."""

    element: Element
    start_age: int
    end_age: int
    pillar: Pillar | None = None

    @classmethod
    def from_pillar(
        cls, pillar: Pillar, start_age: int, end_age: int | None = None
    ) -> "DecadeLuck":
        end = start_age + 9 if end_age is None else end_age
        return cls(pillar.element, start_age, end, pillar)


__all__ = ["DecadeLuck", "Pillar"]
