"""Cost and timeline estimation for a set of decisions."""

import math
import re
from collections.abc import Sequence
from functools import reduce

from stackwise.config import (
    ANNUAL_DISCOUNT,
    DEVELOPMENT_BASE_COST,
    EFFORT_MULTIPLIERS,
    MODERATE_MAX_EDGES,
    MODERATE_MAX_NODES,
    MONTHLY_BASE_COST,
    MONTHS_PER_YEAR,
    SIMPLE_MAX_EDGES,
    SIMPLE_MAX_NODES,
    SUBSCRIPTION_DISCOUNT,
    TIMELINE_BASE_WEEKS,
    TIMELINE_TEAM_FACTORS,
    TIMELINE_URGENCY_FACTORS,
    USAGE_BASED_DEFAULT_MONTHLY_COST,
    USAGE_BASED_MONTHLY_COST,
)

from .graph import ArchitectureGraph
from .models import (
    ArchitectureComplexity,
    CostEstimate,
    Decision,
    EnterpriseContext,
    PricingModel,
    Timeline,
    ToolCandidate,
)

_PRICE_RE = re.compile(r"\$(\d+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (not to even)."""
    return math.floor(value + 0.5)


def format_currency(amount: int | float) -> str:
    """Render an amount as whole dollars with thousands separators, e.g. "$12,000"."""
    return f"${round_half_up(amount):,}"


def classify_complexity(graph: ArchitectureGraph) -> ArchitectureComplexity:
    nodes, edges = graph.node_count, graph.edge_count
    if nodes <= SIMPLE_MAX_NODES and edges <= SIMPLE_MAX_EDGES:
        return ArchitectureComplexity.SIMPLE
    if nodes <= MODERATE_MAX_NODES and edges <= MODERATE_MAX_EDGES:
        return ArchitectureComplexity.MODERATE
    return ArchitectureComplexity.COMPLEX


def parse_listed_price(cost: str | None) -> int | None:
    """First whole-dollar amount in a price hint ("$15-23/host/month" -> 15)."""
    if not cost:
        return None
    match = _PRICE_RE.search(cost)
    return int(match.group(1)) if match else None


def monthly_tool_cost(tool: ToolCandidate, ctx: EnterpriseContext) -> float:
    """Monthly operational addend for one selected tool."""
    if tool.pricing_model == PricingModel.SUBSCRIPTION:
        price = parse_listed_price(tool.cost)
        return price * SUBSCRIPTION_DISCOUNT if price is not None else 0
    if tool.pricing_model == PricingModel.USAGE_BASED:
        return USAGE_BASED_MONTHLY_COST.get(ctx.scalability_needs, USAGE_BASED_DEFAULT_MONTHLY_COST)
    return 0


def _selected_tools(decisions: Sequence[Decision]) -> list[ToolCandidate]:
    return [d.selected_tool for d in decisions if d.selected_tool is not None]


def estimate_costs(decisions: Sequence[Decision], ctx: EnterpriseContext) -> CostEstimate:
    """
    Estimate development and operational costs.

    Development cost starts from the team-size base and is multiplied by
    each selected tool's integration-effort factor in decision order, so
    the factors compound. Monthly cost is the budget-tier base plus each
    tool's subscription or usage addend. Annual cost is derived from the
    unrounded monthly figure.

    Args:
        decisions: Decisions with their selected tools
        ctx: Enterprise context (team size, budget tier, scalability)

    Returns:
        CostEstimate with half-up rounded integers
    """
    tools = _selected_tools(decisions)

    development = reduce(
        lambda total, tool: total * EFFORT_MULTIPLIERS[tool.integration_effort],
        tools,
        float(DEVELOPMENT_BASE_COST[ctx.team_size]),
    )
    monthly = reduce(
        lambda total, tool: total + monthly_tool_cost(tool, ctx),
        tools,
        float(MONTHLY_BASE_COST[ctx.budget_tier]),
    )

    return CostEstimate(
        development=round_half_up(development),
        monthly_operational=round_half_up(monthly),
        annual_operational=round_half_up(monthly * MONTHS_PER_YEAR * ANNUAL_DISCOUNT),
    )


def estimate_timeline(
    complexity: ArchitectureComplexity,
    component_count: int,
    ctx: EnterpriseContext,
) -> Timeline:
    """
    Estimate implementation horizons.

    MVP weeks are the complexity base scaled by team-size and urgency
    factors; production adds one week per two components and scale adds
    one week per component.
    """
    mvp_weeks = round_half_up(
        TIMELINE_BASE_WEEKS[complexity]
        * TIMELINE_TEAM_FACTORS[ctx.team_size]
        * TIMELINE_URGENCY_FACTORS[ctx.time_to_market]
    )
    return Timeline(
        mvp_weeks=mvp_weeks,
        production_weeks=mvp_weeks + component_count // 2,
        scale_weeks=mvp_weeks + component_count,
    )
