"""Rule-based risk assessment over the selected tools."""

import logging
from collections.abc import Sequence

from stackwise.config import MAX_COMPLEX_TOOLS_FOR_LIMITED_TEAM

from .graph import ArchitectureGraph
from .models import (
    BudgetTier,
    Decision,
    EnterpriseContext,
    Level,
    MaintenanceCapability,
    RiskAssessment,
    ScalabilityNeeds,
    TeamSize,
    ToolCandidate,
)

logger = logging.getLogger(__name__)

COMPLIANCE_TECHNICAL_RISK = "Self-managed tools may not meet compliance requirements"
COMPLIANCE_OPERATIONAL_RISK = "Additional compliance audits and certifications needed"
VENDOR_LOCK_IN_RISK = "Single cloud provider dependency creates vendor lock-in risk"
VENDOR_PRICING_RISK = "Pricing changes from single vendor could impact costs significantly"
TEAM_CAPACITY_RISK = "Multiple complex tools may exceed team maintenance capacity"
TEAM_CAPACITY_MITIGATION = "Consider managed alternatives to reduce operational burden"
SCALING_COST_RISK = "Rapid scaling may lead to unexpected cost increases"
SCALING_COST_MITIGATION = "Plan for cost monitoring and budget alerts"


def assess_risks(
    decisions: Sequence[Decision],
    graph: ArchitectureGraph,
    ctx: EnterpriseContext,
) -> RiskAssessment:
    """
    Assess technical, operational and financial risks of the selection.

    Rules run independently:
        - compliance needs with no managed service selected
        - every cloud-affine tool tied to one provider
        - a small or thinly staffed team running several high-complexity tools
        - a startup budget facing high scalability needs

    Args:
        decisions: Decisions with their selected tools
        graph: Architecture graph (accepted for rule extensions; unused today)
        ctx: Enterprise context

    Returns:
        RiskAssessment; any bucket may be empty
    """
    tools: list[ToolCandidate] = [d.selected_tool for d in decisions if d.selected_tool]
    technical: list[str] = []
    operational: list[str] = []
    financial: list[str] = []

    if ctx.has_compliance_needs and not any(tool.is_managed for tool in tools):
        technical.append(COMPLIANCE_TECHNICAL_RISK)
        operational.append(COMPLIANCE_OPERATIONAL_RISK)

    providers = {tool.cloud_provider for tool in tools if tool.cloud_provider}
    if len(providers) == 1:
        operational.append(VENDOR_LOCK_IN_RISK)
        financial.append(VENDOR_PRICING_RISK)

    if (
        ctx.team_size == TeamSize.SMALL
        or ctx.maintenance_capability == MaintenanceCapability.LIMITED
    ):
        complex_count = sum(1 for tool in tools if tool.complexity == Level.HIGH)
        if complex_count > MAX_COMPLEX_TOOLS_FOR_LIMITED_TEAM:
            technical.append(TEAM_CAPACITY_RISK)
            operational.append(TEAM_CAPACITY_MITIGATION)

    if ctx.budget_tier == BudgetTier.STARTUP and ctx.scalability_needs == ScalabilityNeeds.HIGH:
        financial.append(SCALING_COST_RISK)
        operational.append(SCALING_COST_MITIGATION)

    assessment = RiskAssessment(
        technical=tuple(technical),
        operational=tuple(operational),
        financial=tuple(financial),
    )
    logger.debug(
        f"Risk assessment: {len(technical)} technical, {len(operational)} operational, "
        f"{len(financial)} financial"
    )
    return assessment
