from __future__ import annotations

from datetime import date

import sajuengine
from sajuengine import EvaluationContext, MonthStrategy
from sajuengine.config.settings import CalendarCfg, RolesCfg, ScoringCfg, Settings
from sajuengine.elements import Element
from sajuengine.scoring.naming import NameCandidate
from sajuengine.scoring.synergy import SynergyInputs
from sajuengine.yongshin import NotComputable


def test_default_context() -> None:
    ctx = EvaluationContext.from_settings()
    assert ctx.strategy is MonthStrategy.FAST
    assert ctx.policy.max_candidates == 8


def test_strategy_is_shared_by_every_pillar() -> None:
    ctx = EvaluationContext.from_settings(
        Settings(calendar=CalendarCfg(month_strategy="solar_term"))
    )
    roles = ctx.roles("WOOD")
    fortune = ctx.date_fortune(roles, 2024, 2, 3)
    chart = ctx.four_pillars(date(2024, 2, 3))
    assert fortune.strategy is MonthStrategy.SOLAR_TERM
    assert fortune.pillars["month"].pillar == chart.pillars["month"]
    assert chart.pillars["month"].hanja() == "乙丑"
    assert ctx.monthly_calendar(roles, 2024)[1].pillar.hanja() == "丙寅"


def test_roles_use_configured_defaults() -> None:
    ctx = EvaluationContext.from_settings(Settings(roles=RolesCfg(heeshin="fire")))
    roles = ctx.roles("목")
    assert roles.yongshin is Element.WOOD
    assert roles.heeshin is Element.FIRE
    assert ctx.roles("WOOD", heeshin="WATER").heeshin is Element.WATER
    assert isinstance(ctx.roles(None), NotComputable)


def test_configured_candidate_limit() -> None:
    ctx = EvaluationContext.from_settings(Settings(scoring=ScoringCfg(max_candidates=2)))
    candidates = [NameCandidate(f"n{i}", (Element.WOOD,)) for i in range(5)]
    ranked = ctx.rank_names(candidates, ctx.roles("WOOD"))
    assert [item.candidate.label for item in ranked] == ["n0", "n1"]


def test_policy_overrides_reach_synergy() -> None:
    overrides = {"weights": {"synergy": {"relation_impact": 0.0}}}
    ctx = EvaluationContext.from_settings(
        Settings(scoring=ScoringCfg(policy_overrides=overrides))
    )
    assert ctx.policy.weights("synergy")["relation_impact"] == 0.0
    report = ctx.synergy(ctx.roles("WOOD"), SynergyInputs(name_elements=(Element.WOOD,)))
    assert report.composite.component("relation_impact").contribution == 0.0


def test_timeline_and_daily_range_follow_settings() -> None:
    ctx = EvaluationContext.from_settings(
        Settings(calendar=CalendarCfg(timeline_before=1, timeline_after=0, daily_range_days=2))
    )
    roles = ctx.roles("WOOD")
    assert [item.year for item in ctx.yearly_timeline(roles, 2024)] == [2023, 2024]
    assert len(ctx.daily_range(roles, date(2024, 1, 1))) == 2


def test_version_is_exposed() -> None:
    assert sajuengine.get_version() == sajuengine.__version__
