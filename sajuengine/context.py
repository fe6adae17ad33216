"""Per-report evaluation context.

A context fixes the month strategy, the scoring policy and the ranking limit
once; every date, name and synergy computation of a report goes through the
same context so they never disagree on those choices.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence

from . import fortune
from .config.settings import Settings, default_settings
from .cycle.calendar import MonthStrategy
from .cycle.constants import HeavenlyStem
from .cycle.four_pillars import FourPillarsChart, PillarCalculator, compute_four_pillars
from .elements import Element, coerce_element
from .scoring.naming import NameCandidate, NameEvaluation, rank_candidates
from .scoring.policy import ScoringPolicy, load_scoring_policy
from .scoring.synergy import SynergyInputs, SynergyReport, score_synergy
from .yongshin import FiveRoleSystem, NotComputable, resolve_role_system

LOG = logging.getLogger(__name__)

__all__ = ["EvaluationContext"]


@dataclass(frozen=True)
class EvaluationContext:
    settings: Settings
    calculator: PillarCalculator
    policy: ScoringPolicy

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EvaluationContext":
        settings = settings or default_settings()
        overrides = dict(settings.scoring.policy_overrides)
        naming = dict(overrides.get("naming", {}))
        naming.setdefault("max_candidates", settings.scoring.max_candidates)
        overrides["naming"] = naming
        policy = load_scoring_policy(overrides=overrides, path=settings.scoring.policy_path)
        strategy = MonthStrategy(settings.calendar.month_strategy)
        LOG.debug("evaluation context using %s month strategy", strategy)
        return cls(settings=settings, calculator=PillarCalculator(strategy), policy=policy)

    @property
    def strategy(self) -> MonthStrategy:
        return self.calculator.strategy

    def roles(
        self,
        yongshin: Element | str | None,
        heeshin: Element | str | None = None,
        gishin: Element | str | None = None,
        gushin: Element | str | None = None,
    ) -> FiveRoleSystem | NotComputable:
        """Resolve the role system, falling back to configured overrides."""

        defaults = self.settings.roles

        def pick(value: Element | str | None, fallback: str | None) -> Element | None:
            chosen = value if value is not None else fallback
            return coerce_element(chosen) if chosen is not None else None

        return resolve_role_system(
            pick(yongshin, None),
            pick(heeshin, defaults.heeshin),
            pick(gishin, defaults.gishin),
            pick(gushin, defaults.gushin),
        )

    def four_pillars(self, moment: date | datetime, hour: int | None = None) -> FourPillarsChart:
        return compute_four_pillars(moment, hour, calculator=self.calculator)

    def date_fortune(
        self,
        roles: FiveRoleSystem | NotComputable,
        year: int,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        *,
        day_master: HeavenlyStem | None = None,
        natal_branches: Sequence[int] = (),
    ) -> fortune.DateFortune | NotComputable:
        return fortune.compute_date_fortune(
            roles,
            year,
            month,
            day,
            hour,
            calculator=self.calculator,
            day_master=day_master,
            natal_branches=natal_branches,
        )

    def yearly_timeline(
        self,
        roles: FiveRoleSystem | NotComputable,
        center_year: int,
        *,
        day_master: HeavenlyStem | None = None,
    ) -> list[fortune.YearFortune] | NotComputable:
        cfg = self.settings.calendar
        return fortune.yearly_timeline(
            roles,
            center_year,
            cfg.timeline_before,
            cfg.timeline_after,
            calculator=self.calculator,
            day_master=day_master,
        )

    def monthly_calendar(
        self,
        roles: FiveRoleSystem | NotComputable,
        year: int,
        *,
        day_master: HeavenlyStem | None = None,
    ) -> list[fortune.PillarFortune] | NotComputable:
        return fortune.monthly_calendar(
            roles, year, calculator=self.calculator, day_master=day_master
        )

    def daily_range(
        self,
        roles: FiveRoleSystem | NotComputable,
        start: date,
        *,
        day_master: HeavenlyStem | None = None,
    ) -> list[fortune.DayFortune] | NotComputable:
        return fortune.daily_range(
            roles,
            start,
            self.settings.calendar.daily_range_days,
            calculator=self.calculator,
            day_master=day_master,
        )

    def rank_names(
        self,
        candidates: Sequence[NameCandidate],
        roles: FiveRoleSystem | NotComputable,
        deficiency: Sequence[Element] = (),
    ) -> list[NameEvaluation] | NotComputable:
        return rank_candidates(candidates, roles, deficiency, policy=self.policy)

    def synergy(
        self, roles: FiveRoleSystem | NotComputable, inputs: SynergyInputs
    ) -> SynergyReport | NotComputable:
        return score_synergy(roles, inputs, policy=self.policy)
