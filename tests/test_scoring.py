"""Tests for enterprise fit scoring and selection reasoning."""

import pytest

from stackwise.decisions.catalog import get_default_catalog
from stackwise.decisions.models import (
    BudgetTier,
    Level,
    MaintenanceCapability,
    PricingModel,
    RiskTolerance,
    ScalabilityNeeds,
    SupportLevel,
    TeamSize,
    TimeToMarket,
    ToolType,
)
from stackwise.decisions.scoring import (
    GENERIC_REASONING,
    explain_selection,
    score_breakdown,
    score_tool,
)


class TestBaseScore:
    def test_neutral_context_scores_popularity(self, make_tool, make_context):
        assert score_tool(make_tool(popularity=70), make_context()) == 70

    def test_missing_popularity_defaults_to_50(self, make_tool, make_context):
        assert score_tool(make_tool(popularity=None), make_context()) == 50

    def test_clamped_to_100(self, make_tool, make_context):
        ctx = make_context(
            team_size=TeamSize.SMALL,
            time_to_market=TimeToMarket.URGENT,
            maintenance_capability=MaintenanceCapability.LIMITED,
        )
        tool = make_tool(
            type=ToolType.MANAGED_SERVICE,
            complexity=Level.LOW,
            integration_effort=Level.LOW,
            popularity=95,
        )
        assert score_tool(tool, ctx) == 100

    def test_clamped_to_0(self, make_tool, make_context):
        assert score_tool(make_tool(popularity=-40), make_context()) == 0

    def test_every_catalog_tool_in_range(self, make_context):
        contexts = [
            make_context(),
            make_context(
                team_size=TeamSize.SMALL,
                budget_tier=BudgetTier.STARTUP,
                compliance_needs=("HIPAA",),
                time_to_market=TimeToMarket.URGENT,
                scalability_needs=ScalabilityNeeds.MASSIVE,
                maintenance_capability=MaintenanceCapability.LIMITED,
                risk_tolerance=RiskTolerance.LOW,
            ),
            make_context(team_size=TeamSize.ENTERPRISE, budget_tier=BudgetTier.ENTERPRISE),
        ]
        for tools in get_default_catalog().categories.values():
            for tool in tools:
                for ctx in contexts:
                    assert 0 <= score_tool(tool, ctx) <= 100


class TestTeamSizeBranch:
    def test_small_team_managed_low_complexity(self, make_tool, make_context):
        ctx = make_context(team_size=TeamSize.SMALL)
        tool = make_tool(type=ToolType.MANAGED_SERVICE, complexity=Level.LOW, popularity=40)
        assert score_breakdown(tool, ctx)["team_size"] == 35
        assert score_tool(tool, ctx) == 75

    def test_large_team_open_source(self, make_tool, make_context):
        tool = make_tool(type=ToolType.OPEN_SOURCE)
        assert score_breakdown(tool, make_context(team_size=TeamSize.LARGE))["team_size"] == 10

    def test_large_team_popular_complex_tool(self, make_tool, make_context):
        ctx = make_context(team_size=TeamSize.ENTERPRISE)
        points = score_breakdown(make_tool(complexity=Level.HIGH, popularity=81), ctx)
        assert points["team_size"] == 15

    def test_popularity_threshold_is_strict(self, make_tool, make_context):
        ctx = make_context(team_size=TeamSize.ENTERPRISE)
        points = score_breakdown(make_tool(complexity=Level.HIGH, popularity=80), ctx)
        assert points["team_size"] == 0


class TestBudgetBranch:
    def test_startup_free_open_source(self, make_tool, make_context):
        tool = make_tool(type=ToolType.OPEN_SOURCE, pricing_model=PricingModel.FREE)
        assert score_breakdown(tool, make_context(budget_tier=BudgetTier.STARTUP))["budget"] == 45

    def test_startup_freemium(self, make_tool, make_context):
        tool = make_tool(type=ToolType.FREEMIUM, pricing_model=PricingModel.FREEMIUM)
        assert score_breakdown(tool, make_context(budget_tier=BudgetTier.STARTUP))["budget"] == 15

    def test_enterprise_commercial_with_enterprise_support(self, make_tool, make_context):
        tool = make_tool(type=ToolType.COMMERCIAL, support_level=SupportLevel.ENTERPRISE)
        ctx = make_context(budget_tier=BudgetTier.ENTERPRISE)
        assert score_breakdown(tool, ctx)["budget"] == 35

    @pytest.mark.parametrize("tier", [BudgetTier.GROWTH, BudgetTier.ESTABLISHED])
    def test_middle_tiers_award_nothing(self, make_tool, make_context, tier):
        tool = make_tool(type=ToolType.OPEN_SOURCE, pricing_model=PricingModel.FREE)
        assert score_breakdown(tool, make_context(budget_tier=tier))["budget"] == 0


class TestOtherBranches:
    def test_compliance(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE, cloud_provider="AWS")
        assert score_breakdown(tool, make_context(compliance_needs=("GDPR",)))["compliance"] == 25
        assert score_breakdown(tool, make_context())["compliance"] == 0

    def test_urgent_time_to_market(self, make_tool, make_context):
        tool = make_tool(
            type=ToolType.MANAGED_SERVICE, complexity=Level.LOW, integration_effort=Level.LOW
        )
        ctx = make_context(time_to_market=TimeToMarket.URGENT)
        assert score_breakdown(tool, ctx)["time_to_market"] == 50

    @pytest.mark.parametrize(
        "needs,expected",
        [
            (ScalabilityNeeds.MASSIVE, 25),
            (ScalabilityNeeds.HIGH, 25),
            (ScalabilityNeeds.MEDIUM, 0),
        ],
    )
    def test_scalability(self, make_tool, make_context, needs, expected):
        tool = make_tool(type=ToolType.MANAGED_SERVICE, cloud_provider="GCP")
        points = score_breakdown(tool, make_context(scalability_needs=needs))
        assert points["scalability"] == expected

    def test_limited_maintenance(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE, complexity=Level.LOW)
        ctx = make_context(maintenance_capability=MaintenanceCapability.LIMITED)
        assert score_breakdown(tool, ctx)["maintenance"] == 40

    def test_low_risk_tolerance(self, make_tool, make_context):
        tool = make_tool(
            type=ToolType.MANAGED_SERVICE, popularity=90, documentation_quality="Excellent"
        )
        ctx = make_context(risk_tolerance=RiskTolerance.LOW)
        assert score_breakdown(tool, ctx)["risk_tolerance"] == 35

    def test_proven_threshold_is_strict(self, make_tool, make_context):
        ctx = make_context(risk_tolerance=RiskTolerance.LOW)
        assert score_breakdown(make_tool(popularity=85), ctx)["risk_tolerance"] == 0

    def test_contributions_sum(self, make_tool, make_context):
        """Every branch is evaluated and the points add up."""
        ctx = make_context(
            compliance_needs=("SOC 2",),
            scalability_needs=ScalabilityNeeds.HIGH,
        )
        tool = make_tool(type=ToolType.MANAGED_SERVICE, cloud_provider="AWS", popularity=20)
        # compliance 25 + scalability 25
        assert score_tool(tool, ctx) == 70


class TestExplainSelection:
    def test_generic_when_nothing_applies(self, make_tool, make_context):
        assert explain_selection(make_tool(), make_context()) == GENERIC_REASONING

    def test_startup_budget_sentence(self, make_tool, make_context):
        tool = make_tool(type=ToolType.OPEN_SOURCE, pricing_model=PricingModel.FREE)
        reasoning = explain_selection(tool, make_context(budget_tier=BudgetTier.STARTUP))
        assert "Cost-effective solution aligned with startup budget constraints" in reasoning

    def test_enterprise_support_sentence(self, make_tool, make_context):
        tool = make_tool(type=ToolType.COMMERCIAL, support_level=SupportLevel.ENTERPRISE)
        reasoning = explain_selection(tool, make_context(budget_tier=BudgetTier.ENTERPRISE))
        assert "Enterprise-grade support and SLAs justify the investment" in reasoning

    def test_enterprise_budget_without_enterprise_support(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE, support_level=SupportLevel.COMMUNITY)
        reasoning = explain_selection(tool, make_context(budget_tier=BudgetTier.ENTERPRISE))
        assert "Enterprise-grade support" not in reasoning
        assert "Commercial backing provides vendor accountability for enterprise use" in reasoning

    def test_compliance_sentence_lists_tags(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE)
        reasoning = explain_selection(tool, make_context(compliance_needs=("HIPAA", "GDPR")))
        assert "Meets HIPAA, GDPR compliance requirements" in reasoning

    def test_team_size_sentence_names_team(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE)
        reasoning = explain_selection(tool, make_context(team_size=TeamSize.SMALL))
        assert reasoning.startswith("Managed service reduces operational overhead for small teams")

    def test_sentences_joined_with_trailing_period(self, make_tool, make_context):
        tool = make_tool(type=ToolType.MANAGED_SERVICE, complexity=Level.LOW)
        ctx = make_context(
            team_size=TeamSize.SMALL,
            time_to_market=TimeToMarket.URGENT,
        )
        assert explain_selection(tool, ctx) == (
            "Managed service reduces operational overhead for small teams. "
            "Quick setup enables faster time to market."
        )

    def test_one_sentence_per_scoring_dimension(self, make_context):
        """Reasoning stays aligned with the branches that awarded points."""
        ctx = make_context(
            team_size=TeamSize.SMALL,
            budget_tier=BudgetTier.STARTUP,
            compliance_needs=("PCI DSS",),
            time_to_market=TimeToMarket.URGENT,
            scalability_needs=ScalabilityNeeds.HIGH,
            maintenance_capability=MaintenanceCapability.LIMITED,
            risk_tolerance=RiskTolerance.LOW,
        )
        for tools in get_default_catalog().categories.values():
            for tool in tools:
                fired = [name for name, points in score_breakdown(tool, ctx).items() if points]
                reasoning = explain_selection(tool, ctx)
                if fired:
                    assert len(reasoning.rstrip(".").split(". ")) == len(fired)
                else:
                    assert reasoning == GENERIC_REASONING
