from __future__ import annotations

import pytest

from sajuengine.cycle import GANZHI_60, Pillar, sexagenary_index
from sajuengine.cycle.constants import branch_for_hanja, stem_for_hanja
from sajuengine.cycle.sexagenary import is_valid_pairing
from sajuengine.exceptions import InvalidPillarError


def test_cycle_has_sixty_distinct_pairs() -> None:
    pairs = {(entry.stem_index, entry.branch_index) for entry in GANZHI_60}
    assert len(pairs) == 60
    assert all(is_valid_pairing(stem, branch) for stem, branch in pairs)


def test_index_round_trip() -> None:
    for entry in GANZHI_60:
        assert sexagenary_index(entry.stem_index, entry.branch_index) == entry.index


def test_first_and_last_entries() -> None:
    assert GANZHI_60[0].label() == "갑자(甲子)"
    assert GANZHI_60[59].hanja() == "癸亥"
    assert GANZHI_60[40].hanja() == "甲辰"


def test_mismatched_parity() -> None:
    with pytest.raises(InvalidPillarError):
        sexagenary_index(0, 1)
    assert sexagenary_index(0, 1, strict=False) == -1


@pytest.mark.parametrize(("stem", "branch"), [(0, 1), (3, 0), (10, 0), (0, 12), (-1, 1)])
def test_invalid_pillars_rejected(stem: int, branch: int) -> None:
    with pytest.raises(InvalidPillarError):
        Pillar(stem, branch)


def test_pillar_accessors() -> None:
    pillar = Pillar.from_cycle_index(59)
    assert pillar.label() == "계해(癸亥)"
    assert pillar.cycle_index == 59
    assert pillar.element.value == "WATER"
    assert pillar.polarity.value == "YIN"
    assert Pillar.from_cycle_index(60) == Pillar(0, 0)


def test_pillar_entry_matches_cycle_table() -> None:
    pillar = Pillar(0, 4)
    entry = pillar.entry()
    assert entry == GANZHI_60[40]
    assert entry.index == pillar.cycle_index == 40
    assert entry.label() == pillar.label()


def test_lookup_by_hanja() -> None:
    assert stem_for_hanja("丙").index == 2
    assert branch_for_hanja("午").animal == "말"
    assert stem_for_hanja("갑").index == 0
    assert stem_for_hanja("X") is None
