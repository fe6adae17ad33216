"""Composite scoring: engine, policy, name comparison and synergy."""

from .composite import (
    NAME_COMPARISON_SCALE,
    SYNERGY_SCALE,
    CompositeScore,
    GradeScale,
    ScoreComponent,
    ScoreInput,
    WeightingStrategy,
    compute_composite,
)
from .name_fit import NameFitResult, score_name_fit
from .naming import NameCandidate, NameEvaluation, evaluate_name, rank_candidates
from .policy import ScoringPolicy, load_scoring_policy
from .synergy import SynergyInputs, SynergyReport, score_synergy

__all__ = [
    "CompositeScore",
    "GradeScale",
    "NAME_COMPARISON_SCALE",
    "NameCandidate",
    "NameEvaluation",
    "NameFitResult",
    "SYNERGY_SCALE",
    "ScoreComponent",
    "ScoreInput",
    "ScoringPolicy",
    "SynergyInputs",
    "SynergyReport",
    "WeightingStrategy",
    "compute_composite",
    "evaluate_name",
    "load_scoring_policy",
    "rank_candidates",
    "score_name_fit",
    "score_synergy",
]
