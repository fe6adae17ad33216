"""Load and merge the composite scoring policy document."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from ..exceptions import PolicyError
from ..paths import profiles_dir
from ..utils import deep_merge, load_json_document
from .composite import GradeScale

__all__ = ["ScoringPolicy", "load_scoring_policy"]

_DEF_SCORING_POLICY = profiles_dir() / "scoring_policy.json"


@lru_cache(maxsize=4)
def _base_scoring_policy(path: str | None = None) -> dict[str, Any]:
    return load_json_document(Path(path) if path else _DEF_SCORING_POLICY)


@dataclass(frozen=True)
class ScoringPolicy:
    """Wrapper for scoring policy data with helper accessors."""

    data: Mapping[str, Any]

    def _section(self, section: str, name: str) -> Mapping[str, Any]:
        entries = self.data.get(section, {})
        if not isinstance(entries, Mapping) or name not in entries:
            raise PolicyError(f"scoring policy has no {section} entry named {name!r}")
        return entries[name]

    def weights(self, name: str) -> dict[str, float]:
        return {str(key): float(value) for key, value in self._section("weights", name).items()}

    def caps(self, name: str) -> dict[str, float]:
        return {str(key): float(value) for key, value in self._section("caps", name).items()}

    def grade_scale(self, name: str) -> GradeScale:
        entry = self._section("grade_scales", name)
        thresholds = tuple((str(letter), float(minimum)) for letter, minimum in entry["thresholds"])
        ordered = tuple(sorted(thresholds, key=lambda pair: pair[1], reverse=True))
        return GradeScale(name, ordered, str(entry.get("floor", "D")))

    @property
    def naming(self) -> Mapping[str, Any]:
        section = self.data.get("naming", {})
        return section if isinstance(section, Mapping) else {}

    @property
    def max_candidates(self) -> int:
        return int(self.naming.get("max_candidates", 8))

    @property
    def character_ratios(self) -> dict[str, float]:
        ratios = self.naming.get("character_ratios", {})
        return {str(key): float(value) for key, value in ratios.items()}


def load_scoring_policy(
    *, overrides: Mapping[str, Any] | None = None, path: str | Path | None = None
) -> ScoringPolicy:
    base = _base_scoring_policy(str(path) if path else None)
    if overrides:
        data = deep_merge(base, overrides)
    else:
        data = deepcopy(base)
    return ScoringPolicy(data)
