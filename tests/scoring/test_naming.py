from __future__ import annotations

import logging

import pytest

from sajuengine.elements import Element
from sajuengine.scoring.composite import WeightingStrategy
from sajuengine.scoring.naming import (
    NameCandidate,
    SuriLuck,
    deficiency_fill_score,
    evaluate_name,
    generation_flow_score,
    rank_candidates,
    resource_element_score,
    suri_element_score,
    suri_luck,
    suri_to_element,
)
from sajuengine.yongshin import NotComputable, build_role_system

W, F, E, M, A = Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER
ROLES = build_role_system(W)


@pytest.mark.parametrize(
    ("strokes", "element"),
    [(1, W), (12, W), (23, F), (35, E), (47, M), (49, A), (50, A)],
)
def test_suri_to_element(strokes: int, element: Element) -> None:
    assert suri_to_element(strokes) is element


def test_suri_luck_wraps_after_81() -> None:
    assert suri_luck(1) is SuriLuck.GREAT
    assert suri_luck(2) is SuriLuck.BAD
    assert suri_luck(26) is SuriLuck.HALF
    assert suri_luck(82) is suri_luck(1)


def test_resource_element_score() -> None:
    item = resource_element_score([W, A], ROLES)
    assert item.score == 35
    assert item.counts == {"yongshin": 1, "heeshin": 1, "gishin": 0}
    assert resource_element_score([M, M], ROLES).counts["gishin"] == 2
    assert resource_element_score([M, M], ROLES).score == 0
    assert resource_element_score([E], ROLES).score == 6
    assert resource_element_score([F], ROLES).score == 16
    assert resource_element_score([], ROLES).score == 0


def test_suri_element_score() -> None:
    assert suri_element_score([W, A, F, W], ROLES).score == 23
    assert suri_element_score([W, A, W, A], ROLES).score == 30
    assert suri_element_score([], ROLES).score == 0


def test_deficiency_fill_score() -> None:
    assert deficiency_fill_score([W], [], []).score == 15
    assert deficiency_fill_score([F], [], [F, M]).score == 8
    assert deficiency_fill_score([F], [M], [F, M]).score == 15
    assert deficiency_fill_score([W], [W], [F, M]).score == 0


def test_generation_flow_score() -> None:
    assert generation_flow_score([W, F, E, M]).score == 15
    assert generation_flow_score([W, E, A]).score == 0
    assert generation_flow_score([W, F, M]).score == 8
    assert generation_flow_score([W]).score == 0


def test_evaluate_name_totals_four_items() -> None:
    candidate = NameCandidate("good", (W, A), frame_elements=(W, A, W, F))
    evaluation = evaluate_name(candidate, ROLES, [F])
    assert evaluation.composite.strategy is WeightingStrategy.POINT_CAP
    assert evaluation.composite.as_dict() == {
        "resource_element": 35,
        "suri_element": 23,
        "deficiency_fill": 15,
        "generation_flow": 15,
    }
    assert evaluation.total == 88.0
    assert evaluation.grade == "A"
    assert evaluation.yongshin_matches == 1
    assert evaluation.friendly_pairs == 3
    assert evaluation.cross_check is not None


def test_frame_strokes_drive_suri_elements() -> None:
    candidate = NameCandidate("strokes", (W,), frame_strokes=(11, 21, 32, 41))
    assert candidate.suri_elements() == (W, W, W, W)
    evaluation = evaluate_name(candidate, ROLES)
    assert evaluation.suri_lucks == (SuriLuck.GREAT,) * 4


def test_empty_candidate_has_no_cross_check() -> None:
    evaluation = evaluate_name(NameCandidate("empty", ()), ROLES)
    assert evaluation.cross_check is None
    assert evaluation.total == 15.0


def _candidates(count: int) -> list[NameCandidate]:
    weak = NameCandidate("weak", (M, M))
    strong = NameCandidate("strong", (W, W), frame_elements=(W, A))
    return [weak] * (count - 1) + [strong]


def test_rank_candidates_orders_and_numbers() -> None:
    ranked = rank_candidates(_candidates(4), ROLES)
    assert [item.rank for item in ranked] == [1, 2, 3, 4]
    assert ranked[0].candidate.label == "strong"
    totals = [item.total for item in ranked]
    assert totals == sorted(totals, reverse=True)


def test_rank_candidates_limits_before_sorting(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="sajuengine.scoring.naming"):
        ranked = rank_candidates(_candidates(10), ROLES)
    assert len(ranked) == 8
    # the strong candidate sits at position 10 and is never compared
    assert all(item.candidate.label == "weak" for item in ranked)
    assert "first 8 of 10" in caplog.text


def test_rank_candidates_ties_keep_input_order() -> None:
    first = NameCandidate("first", (F,))
    second = NameCandidate("second", (F,))
    ranked = rank_candidates([first, second], ROLES, limit=5)
    assert [item.candidate.label for item in ranked] == ["first", "second"]


def test_missing_roles_propagate() -> None:
    missing = NotComputable("no yongshin")
    assert rank_candidates(_candidates(2), missing) is missing
    assert evaluate_name(NameCandidate("x", (W,)), missing) is missing
