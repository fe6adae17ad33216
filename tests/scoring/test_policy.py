from __future__ import annotations

import json
from pathlib import Path

import pytest

from sajuengine.exceptions import PolicyError
from sajuengine.scoring.composite import NAME_COMPARISON_SCALE, SYNERGY_SCALE
from sajuengine.scoring.policy import load_scoring_policy
from sajuengine.utils import deep_merge, load_json_document


def test_bundled_policy_matches_builtin_scales() -> None:
    policy = load_scoring_policy()
    assert policy.grade_scale("synergy") == SYNERGY_SCALE
    assert policy.grade_scale("name_comparison") == NAME_COMPARISON_SCALE


def test_bundled_weights_and_caps() -> None:
    policy = load_scoring_policy()
    assert sum(policy.weights("synergy").values()) == pytest.approx(1.0)
    assert sum(policy.weights("name_fit").values()) == pytest.approx(1.0)
    assert sum(policy.caps("name_comparison").values()) == pytest.approx(100.0)
    assert policy.max_candidates == 8
    assert policy.character_ratios["heeshin"] == pytest.approx(0.75)


def test_overrides_do_not_leak_into_base() -> None:
    tuned = load_scoring_policy(overrides={"naming": {"max_candidates": 3}})
    assert tuned.max_candidates == 3
    assert tuned.character_ratios["yongshin"] == pytest.approx(1.0)
    assert load_scoring_policy().max_candidates == 8


def test_unknown_entries_raise_policy_error() -> None:
    policy = load_scoring_policy()
    with pytest.raises(PolicyError):
        policy.weights("missing")
    with pytest.raises(PolicyError):
        policy.grade_scale("missing")


def test_custom_policy_file(tmp_path: Path) -> None:
    path = tmp_path / "policy.json"
    payload = {"grade_scales": {"strict": {"thresholds": [["B", 50], ["A", 80]]}}}
    path.write_text("# custom\n" + json.dumps(payload), encoding="utf-8")
    scale = load_scoring_policy(path=path).grade_scale("strict")
    assert scale.thresholds == (("A", 80.0), ("B", 50.0))
    assert scale.grade_for(10) == "D"


def test_load_json_document_skips_comment_lines(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('# heading\n{\n  # inline\n  "a": 1\n}\n', encoding="utf-8")
    assert load_json_document(path) == {"a": 1}


def test_deep_merge_is_non_destructive() -> None:
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = deep_merge(base, {"a": {"b": 10}, "e": 4})
    assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 4}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}
