"""Enterprise fit scoring for catalog tools.

A tool's score starts at its popularity and gains points from each context
dimension that favors it. Every dimension is a separate function returning
the points it awards, so the reasoning text is built from exactly the
branches that contributed to the score.
"""

from collections.abc import Callable

from stackwise.config import (
    DEFAULT_POPULARITY,
    POPULAR_COMPLEX_TOOL_THRESHOLD,
    PROVEN_TOOL_THRESHOLD,
    SCORE_MAX,
    SCORE_MIN,
)

from .models import (
    BudgetTier,
    EnterpriseContext,
    Level,
    MaintenanceCapability,
    PricingModel,
    RiskTolerance,
    ScalabilityNeeds,
    SupportLevel,
    TeamSize,
    TimeToMarket,
    ToolCandidate,
    ToolType,
)

GENERIC_REASONING = (
    "Selected based on balanced evaluation of technical requirements and enterprise constraints."
)


def _popularity_above(tool: ToolCandidate, threshold: int) -> bool:
    # A tool without a popularity figure never counts as popular
    return tool.popularity is not None and tool.popularity > threshold


# =============================================================================
# Per-dimension points
# =============================================================================


def _team_size_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.team_size in (TeamSize.SMALL, TeamSize.MEDIUM):
        if tool.is_managed:
            points += 20
        if tool.complexity == Level.LOW:
            points += 15
    else:
        if tool.type == ToolType.OPEN_SOURCE:
            points += 10
        if tool.complexity == Level.HIGH and _popularity_above(
            tool, POPULAR_COMPLEX_TOOL_THRESHOLD
        ):
            points += 15
    return points


def _budget_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.budget_tier == BudgetTier.STARTUP:
        if tool.pricing_model == PricingModel.FREE:
            points += 25
        elif tool.pricing_model == PricingModel.FREEMIUM:
            points += 15
        if tool.type == ToolType.OPEN_SOURCE:
            points += 20
    elif ctx.budget_tier == BudgetTier.ENTERPRISE:
        if tool.type in (ToolType.COMMERCIAL, ToolType.MANAGED_SERVICE):
            points += 15
        if tool.support_level == SupportLevel.ENTERPRISE:
            points += 20
    return points


def _compliance_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.has_compliance_needs:
        if tool.is_managed:
            points += 15
        if tool.cloud_provider:
            points += 10
    return points


def _time_to_market_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.time_to_market == TimeToMarket.URGENT:
        if tool.complexity == Level.LOW:
            points += 20
        if tool.integration_effort == Level.LOW:
            points += 15
        if tool.is_managed:
            points += 15
    return points


def _scalability_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.scalability_needs in (ScalabilityNeeds.HIGH, ScalabilityNeeds.MASSIVE):
        if tool.is_managed:
            points += 15
        if tool.cloud_provider:
            points += 10
    return points


def _maintenance_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.maintenance_capability == MaintenanceCapability.LIMITED:
        if tool.is_managed:
            points += 25
        if tool.complexity == Level.LOW:
            points += 15
    return points


def _risk_tolerance_points(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    points = 0
    if ctx.risk_tolerance == RiskTolerance.LOW:
        if _popularity_above(tool, PROVEN_TOOL_THRESHOLD):
            points += 15
        if tool.is_managed:
            points += 10
        if tool.documentation_quality == "Excellent":
            points += 10
    return points


# =============================================================================
# Per-dimension reasoning
# =============================================================================


def _team_size_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    if ctx.team_size in (TeamSize.SMALL, TeamSize.MEDIUM):
        if tool.is_managed:
            return f"Managed service reduces operational overhead for {ctx.team_size} teams"
        return f"Low complexity keeps the learning curve manageable for {ctx.team_size} teams"
    if tool.type == ToolType.OPEN_SOURCE:
        return (
            "Open-source solution provides flexibility needed for "
            f"{ctx.team_size} engineering teams"
        )
    return f"Mature, widely adopted platform suits {ctx.team_size} engineering teams"


def _budget_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    if ctx.budget_tier == BudgetTier.STARTUP:
        return "Cost-effective solution aligned with startup budget constraints"
    if tool.support_level == SupportLevel.ENTERPRISE:
        return "Enterprise-grade support and SLAs justify the investment"
    return "Commercial backing provides vendor accountability for enterprise use"


def _compliance_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    return f"Meets {', '.join(ctx.compliance_needs)} compliance requirements"


def _time_to_market_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    return "Quick setup enables faster time to market"


def _scalability_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    return "Auto-scaling capabilities handle high-traffic demands"


def _maintenance_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    return "Minimal upkeep fits a team with limited maintenance capacity"


def _risk_tolerance_sentence(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    return "Proven solution with strong community and track record"


ScoreFn = Callable[[ToolCandidate, EnterpriseContext], int]
SentenceFn = Callable[[ToolCandidate, EnterpriseContext], str]

# Evaluation order is also the order of sentences in the reasoning text
SCORING_DIMENSIONS: tuple[tuple[str, ScoreFn, SentenceFn], ...] = (
    ("team_size", _team_size_points, _team_size_sentence),
    ("budget", _budget_points, _budget_sentence),
    ("compliance", _compliance_points, _compliance_sentence),
    ("time_to_market", _time_to_market_points, _time_to_market_sentence),
    ("scalability", _scalability_points, _scalability_sentence),
    ("maintenance", _maintenance_points, _maintenance_sentence),
    ("risk_tolerance", _risk_tolerance_points, _risk_tolerance_sentence),
)


def score_breakdown(tool: ToolCandidate, ctx: EnterpriseContext) -> dict[str, int]:
    """Points each context dimension awards a tool, before the base score."""
    return {name: points_fn(tool, ctx) for name, points_fn, _ in SCORING_DIMENSIONS}


def score_tool(tool: ToolCandidate, ctx: EnterpriseContext) -> int:
    """
    Score how well a tool fits the enterprise context.

    Every dimension is evaluated and the contributions are summed onto the
    base score (popularity, or DEFAULT_POPULARITY when unset).

    Args:
        tool: Catalog tool to score
        ctx: Enterprise context of the current invocation

    Returns:
        Score clamped to [SCORE_MIN, SCORE_MAX]
    """
    base = tool.popularity if tool.popularity is not None else DEFAULT_POPULARITY
    total = base + sum(score_breakdown(tool, ctx).values())
    return max(SCORE_MIN, min(SCORE_MAX, total))


def explain_selection(tool: ToolCandidate, ctx: EnterpriseContext) -> str:
    """
    Explain why a tool fits the context.

    One sentence per dimension that awarded the tool points, in scoring
    order. Falls back to GENERIC_REASONING when none did.
    """
    sentences = [
        sentence_fn(tool, ctx)
        for _, points_fn, sentence_fn in SCORING_DIMENSIONS
        if points_fn(tool, ctx) > 0
    ]
    if not sentences:
        return GENERIC_REASONING
    return ". ".join(sentences) + "."
