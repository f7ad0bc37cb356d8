"""Tests for enterprise context detection.

Covers:
- Node-count thresholds for team size, budget, scalability, maintenance
- Keyword detection (case-insensitive, substring) and its priority order
- Multiple compliance tags from one description
- Monotonicity as the architecture grows
"""

import pytest

from stackwise.decisions.context_analyzer import (
    analyze_context,
    detect_budget_tier,
    detect_compliance_needs,
    detect_existing_stack,
    detect_maintenance_capability,
    detect_risk_tolerance,
    detect_scalability_needs,
    detect_team_size,
    detect_time_to_market,
)
from stackwise.decisions.models import (
    BudgetTier,
    MaintenanceCapability,
    RiskTolerance,
    ScalabilityNeeds,
    TeamSize,
    TimeToMarket,
)


class TestTeamSize:
    @pytest.mark.parametrize(
        "node_count,expected",
        [
            (0, TeamSize.SMALL),
            (4, TeamSize.SMALL),
            (5, TeamSize.MEDIUM),
            (8, TeamSize.MEDIUM),
            (9, TeamSize.LARGE),
            (15, TeamSize.LARGE),
            (16, TeamSize.ENTERPRISE),
        ],
    )
    def test_thresholds(self, node_count, expected):
        assert detect_team_size(node_count) == expected


class TestBudgetTier:
    def test_startup_keywords(self):
        assert detect_budget_tier("Bootstrapped side project", 20) == BudgetTier.STARTUP
        assert detect_budget_tier("We have a LIMITED BUDGET", 20) == BudgetTier.STARTUP

    def test_enterprise_keywords(self):
        assert detect_budget_tier("Internal tool for a large company", 1) == BudgetTier.ENTERPRISE

    def test_growth_keywords(self):
        assert detect_budget_tier("We are expanding into new markets", 1) == BudgetTier.GROWTH

    def test_startup_wins_over_enterprise(self):
        """Keywords are checked in priority order."""
        assert detect_budget_tier("enterprise-grade MVP", 1) == BudgetTier.STARTUP

    @pytest.mark.parametrize(
        "node_count,expected",
        [
            (6, BudgetTier.STARTUP),
            (7, BudgetTier.ESTABLISHED),
            (12, BudgetTier.ESTABLISHED),
            (13, BudgetTier.ENTERPRISE),
        ],
    )
    def test_node_count_fallback(self, node_count, expected):
        assert detect_budget_tier("An internal dashboard", node_count) == expected


class TestComplianceNeeds:
    def test_no_match_is_empty(self):
        assert detect_compliance_needs("A todo list app") == ()

    def test_substring_match(self):
        """'healthcare' contains 'health'."""
        assert detect_compliance_needs("Healthcare scheduling") == ("HIPAA",)

    def test_payment_maps_to_pci(self):
        assert detect_compliance_needs("We process payments") == ("PCI DSS",)

    def test_soc2_with_and_without_space(self):
        assert detect_compliance_needs("needs SOC2") == ("SOC 2",)
        assert detect_compliance_needs("needs SOC 2") == ("SOC 2",)

    def test_multiple_tags_in_fixed_order(self):
        tags = detect_compliance_needs("GDPR and HIPAA with a yearly audit")
        assert tags == ("HIPAA", "SOC 2", "GDPR")

    def test_iso_regulation(self):
        assert detect_compliance_needs("heavy regulation") == ("ISO 27001",)


class TestTimeToMarket:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Launch ASAP", TimeToMarket.URGENT),
            ("needs to ship quickly", TimeToMarket.URGENT),
            ("quick launch", TimeToMarket.URGENT),
            ("on the roadmap for Q3", TimeToMarket.PLANNED),
            ("a long-term investment", TimeToMarket.PLANNED),
            ("an internal dashboard", TimeToMarket.STANDARD),
        ],
    )
    def test_detection(self, text, expected):
        assert detect_time_to_market(text) == expected

    def test_urgent_wins_over_planned(self):
        assert detect_time_to_market("urgent item on the roadmap") == TimeToMarket.URGENT


class TestScalabilityNeeds:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("serving millions of users", ScalabilityNeeds.MASSIVE),
            ("Global marketplace", ScalabilityNeeds.MASSIVE),
            ("high-traffic storefront", ScalabilityNeeds.HIGH),
            ("performance matters", ScalabilityNeeds.HIGH),
            ("a simple blog", ScalabilityNeeds.LOW),
        ],
    )
    def test_keywords(self, text, expected):
        assert detect_scalability_needs(text, 20) == expected

    @pytest.mark.parametrize(
        "node_count,expected",
        [
            (6, ScalabilityNeeds.LOW),
            (7, ScalabilityNeeds.MEDIUM),
            (10, ScalabilityNeeds.MEDIUM),
            (11, ScalabilityNeeds.HIGH),
        ],
    )
    def test_node_count_fallback(self, node_count, expected):
        assert detect_scalability_needs("An internal dashboard", node_count) == expected


class TestMaintenanceCapability:
    @pytest.mark.parametrize(
        "node_count,expected",
        [
            (6, MaintenanceCapability.LIMITED),
            (7, MaintenanceCapability.MODERATE),
            (12, MaintenanceCapability.MODERATE),
            (13, MaintenanceCapability.STRONG),
        ],
    )
    def test_thresholds(self, node_count, expected):
        assert detect_maintenance_capability(node_count) == expected


class TestRiskTolerance:
    def test_low(self):
        assert detect_risk_tolerance("We need a Stable, proven stack") == RiskTolerance.LOW

    def test_high(self):
        assert detect_risk_tolerance("an innovative, cutting-edge product") == RiskTolerance.HIGH

    def test_low_wins_over_high(self):
        assert detect_risk_tolerance("reliable experiment") == RiskTolerance.LOW

    def test_default_medium(self):
        assert detect_risk_tolerance("") == RiskTolerance.MEDIUM


class TestExistingStack:
    def test_multiple_platforms_in_fixed_order(self):
        stack = detect_existing_stack("Docker images on k8s, hosted in AWS")
        assert stack == ("AWS", "Kubernetes", "Docker")

    def test_aliases(self):
        assert detect_existing_stack("Google Cloud") == ("GCP",)
        assert detect_existing_stack("Microsoft shop") == ("Azure",)

    def test_nothing_detected(self):
        assert detect_existing_stack("on-prem servers") == ()


class TestAnalyzeContext:
    def test_builds_every_dimension(self, make_graph):
        graph = make_graph(["database"])
        ctx = analyze_context(graph, "startup MVP, needs Postgres, quick launch")

        assert ctx.team_size == TeamSize.SMALL
        assert ctx.budget_tier == BudgetTier.STARTUP
        assert ctx.compliance_needs == ()
        assert ctx.time_to_market == TimeToMarket.URGENT
        assert ctx.scalability_needs == ScalabilityNeeds.LOW
        assert ctx.maintenance_capability == MaintenanceCapability.LIMITED
        assert ctx.risk_tolerance == RiskTolerance.MEDIUM
        assert ctx.existing_stack == ()

    @pytest.mark.parametrize("text", ["", "\n\t", "🚀🚀🚀", "x" * 10_000, "(?P<unbalanced"])
    def test_never_raises(self, make_graph, text):
        ctx = analyze_context(make_graph([]), text)
        assert ctx.team_size == TeamSize.SMALL

    def test_detection_is_independent(self, make_graph):
        """Compliance keywords do not change the budget tier."""
        graph = make_graph(["database"] * 3)
        plain = analyze_context(graph, "expanding marketplace")
        with_compliance = analyze_context(graph, "expanding marketplace with HIPAA data")

        assert plain.budget_tier == with_compliance.budget_tier == BudgetTier.GROWTH
        assert with_compliance.compliance_needs == ("HIPAA",)


class TestMonotonicity:
    def test_growing_architecture(self, make_graph):
        """Team size goes small -> enterprise and maintenance never decreases."""
        order = list(MaintenanceCapability)
        previous = None

        for node_count in range(4, 21):
            ctx = analyze_context(make_graph(["database"] * node_count), "An internal dashboard")
            if previous is not None:
                assert order.index(ctx.maintenance_capability) >= order.index(previous)
            previous = ctx.maintenance_capability

            if node_count == 4:
                assert ctx.team_size == TeamSize.SMALL
            if node_count == 20:
                assert ctx.team_size == TeamSize.ENTERPRISE
