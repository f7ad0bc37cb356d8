"""Shared test fixtures and helpers.

Factories build engine inputs with neutral defaults so each test only
spells out the fields it is about.
"""

from typing import Any

import pytest

from stackwise.decisions.catalog import build_tool_catalog
from stackwise.decisions.classification import display_name_for, group_for, impact_for
from stackwise.decisions.graph import ArchitectureGraph
from stackwise.decisions.models import (
    BudgetTier,
    ComponentCategory,
    Decision,
    EnterpriseContext,
    Level,
    MaintenanceCapability,
    PricingModel,
    RiskTolerance,
    ScalabilityNeeds,
    ScoredCandidate,
    TeamSize,
    TimeToMarket,
    ToolCandidate,
    ToolType,
    Urgency,
)


def _make_tool(**overrides: Any) -> ToolCandidate:
    fields: dict[str, Any] = {
        "id": "tool",
        "category": ComponentCategory.DATABASE,
        "name": "Tool",
        "type": ToolType.COMMERCIAL,
        "pricing_model": PricingModel.FREEMIUM,
        "complexity": Level.MEDIUM,
        "integration_effort": Level.MEDIUM,
        "popularity": 70,
        "documentation_quality": "Good",
    }
    fields.update(overrides)
    return ToolCandidate(**fields)


def _make_context(**overrides: Any) -> EnterpriseContext:
    """Context where no scoring branch fires for a commercial, medium-complexity tool."""
    fields: dict[str, Any] = {
        "team_size": TeamSize.LARGE,
        "budget_tier": BudgetTier.GROWTH,
        "compliance_needs": (),
        "time_to_market": TimeToMarket.STANDARD,
        "scalability_needs": ScalabilityNeeds.MEDIUM,
        "maintenance_capability": MaintenanceCapability.MODERATE,
        "risk_tolerance": RiskTolerance.MEDIUM,
        "existing_stack": (),
    }
    fields.update(overrides)
    return EnterpriseContext(**fields)


def _make_graph(node_types: list[str], edge_count: int = 0) -> ArchitectureGraph:
    nodes = [{"id": f"n{i}", "type": node_type} for i, node_type in enumerate(node_types)]
    edges = [{"source": "n0", "target": f"n{i}"} for i in range(edge_count)]
    return ArchitectureGraph.model_validate({"nodes": nodes, "edges": edges})


def _make_decision(
    component: ComponentCategory = ComponentCategory.DATABASE,
    urgency: Urgency = Urgency.OPTIONAL,
    tool: ToolCandidate | None = None,
    title: str | None = None,
    score: int = 80,
) -> Decision:
    tool = tool or _make_tool(id=f"{component}-tool", category=component)
    return Decision(
        id=f"decision-{component}",
        title=title or f"{display_name_for(component)} Selection",
        description="",
        group=group_for(component),
        component=component,
        candidates=(ScoredCandidate(tool=tool, enterprise_score=score),),
        selected_tool_id=tool.id,
        reasoning="",
        impact=impact_for(component),
        urgency=urgency,
    )


def _catalog_entry(tool_id: str, **overrides: Any) -> dict[str, Any]:
    """One YAML-shaped catalog entry."""
    entry: dict[str, Any] = {
        "id": tool_id,
        "name": tool_id.title(),
        "type": "open-source",
        "pricing": {"model": "free"},
        "complexity": "medium",
        "popularity": 70,
        "documentation": "Good",
        "integration": {"effort": "medium", "time_estimate": "1 week"},
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def make_tool():
    return _make_tool


@pytest.fixture
def make_context():
    return _make_context


@pytest.fixture
def make_graph():
    return _make_graph


@pytest.fixture
def make_decision():
    return _make_decision


@pytest.fixture
def catalog_entry():
    return _catalog_entry


@pytest.fixture
def full_coverage_data():
    """Catalog data with one candidate in every category."""
    return {
        "categories": {
            category.value: [_catalog_entry(f"{category.value}-tool")]
            for category in ComponentCategory
        }
    }


@pytest.fixture
def small_catalog(full_coverage_data):
    return build_tool_catalog(full_coverage_data)
