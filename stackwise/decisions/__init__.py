"""Architecture decision engine: tool selection, estimates, rollout plan and risks."""

from .catalog import ToolCatalog, build_tool_catalog, get_default_catalog, load_tool_catalog
from .classification import display_name_for, group_for, impact_for, urgency_for
from .context_analyzer import (
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
from .estimates import classify_complexity, estimate_costs, estimate_timeline, format_currency
from .graph import ArchitectureEdge, ArchitectureGraph, ArchitectureNode, ProjectDescriptor
from .models import (
    ArchitectureComplexity,
    BudgetTier,
    ComponentCategory,
    CostEstimate,
    Decision,
    DecisionFilter,
    DecisionGroup,
    DecisionReport,
    EnterpriseContext,
    IntegrationPlan,
    Level,
    MaintenanceCapability,
    PricingModel,
    RiskAssessment,
    RiskTolerance,
    ScalabilityNeeds,
    ScoredCandidate,
    SupportLevel,
    TeamSize,
    TimeToMarket,
    Timeline,
    ToolCandidate,
    ToolType,
    Urgency,
)
from .planner import plan_integration
from .report import filter_decisions, generate_decision_report, validate_decision_report
from .risk import assess_risks
from .scoring import explain_selection, score_tool
from .selector import select_decisions

__all__ = [
    # Entry point
    "generate_decision_report",
    "validate_decision_report",
    "filter_decisions",
    # Inputs
    "ArchitectureGraph",
    "ArchitectureNode",
    "ArchitectureEdge",
    "ProjectDescriptor",
    # Core types
    "ComponentCategory",
    "ToolType",
    "PricingModel",
    "Level",
    "SupportLevel",
    "TeamSize",
    "BudgetTier",
    "TimeToMarket",
    "ScalabilityNeeds",
    "MaintenanceCapability",
    "RiskTolerance",
    "Urgency",
    "ArchitectureComplexity",
    "DecisionGroup",
    "ToolCandidate",
    "EnterpriseContext",
    "ScoredCandidate",
    "Decision",
    "DecisionFilter",
    "CostEstimate",
    "Timeline",
    "IntegrationPlan",
    "RiskAssessment",
    "DecisionReport",
    # Catalog
    "ToolCatalog",
    "build_tool_catalog",
    "load_tool_catalog",
    "get_default_catalog",
    # Context
    "analyze_context",
    "detect_team_size",
    "detect_budget_tier",
    "detect_compliance_needs",
    "detect_time_to_market",
    "detect_scalability_needs",
    "detect_maintenance_capability",
    "detect_risk_tolerance",
    "detect_existing_stack",
    # Scoring & selection
    "score_tool",
    "explain_selection",
    "impact_for",
    "urgency_for",
    "display_name_for",
    "group_for",
    "select_decisions",
    # Estimates, plan & risks
    "classify_complexity",
    "estimate_costs",
    "estimate_timeline",
    "format_currency",
    "plan_integration",
    "assess_risks",
]
