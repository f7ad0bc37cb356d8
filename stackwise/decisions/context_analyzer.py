"""Enterprise context detection.

Infers the organizational profile (team size, budget, compliance, urgency,
scale, maintenance capability, risk appetite, existing platforms) from the
project description and the size of the architecture graph.

Every detector is an independent pure function: none reads another's
result, and each returns a defined default when nothing matches. Keyword
matching is case-insensitive substring search, so "quickly" counts as
"quick" and "healthcare" counts as "health".
"""

import logging
import re

from stackwise.config import (
    BUDGET_ENTERPRISE_MIN_NODES,
    BUDGET_ESTABLISHED_MIN_NODES,
    MAINTENANCE_MODERATE_MIN_NODES,
    MAINTENANCE_STRONG_MIN_NODES,
    SCALABILITY_HIGH_MIN_NODES,
    SCALABILITY_MEDIUM_MIN_NODES,
    TEAM_SIZE_LARGE_MAX_NODES,
    TEAM_SIZE_MEDIUM_MAX_NODES,
    TEAM_SIZE_SMALL_MAX_NODES,
)

from .graph import ArchitectureGraph
from .models import (
    BudgetTier,
    EnterpriseContext,
    MaintenanceCapability,
    RiskTolerance,
    ScalabilityNeeds,
    TeamSize,
    TimeToMarket,
)

logger = logging.getLogger(__name__)

# Budget keywords, checked in priority order
_STARTUP_RE = re.compile(r"startup|mvp|bootstrap|limited budget", re.IGNORECASE)
_ENTERPRISE_RE = re.compile(r"enterprise|large company|corporation", re.IGNORECASE)
_GROWTH_RE = re.compile(r"scale|growth|expanding", re.IGNORECASE)

# Compliance tags; every matching tag is reported, in this order
_COMPLIANCE_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("HIPAA", re.compile(r"hipaa|health|medical", re.IGNORECASE)),
    ("PCI DSS", re.compile(r"pci|payment|financial|banking", re.IGNORECASE)),
    ("SOC 2", re.compile(r"soc\s?2|security|audit", re.IGNORECASE)),
    ("GDPR", re.compile(r"gdpr|privacy|europe", re.IGNORECASE)),
    ("ISO 27001", re.compile(r"iso|compliance|regulation", re.IGNORECASE)),
)

_URGENT_RE = re.compile(r"urgent|asap|quick|fast|rush", re.IGNORECASE)
_PLANNED_RE = re.compile(r"planned|roadmap|future|long.term", re.IGNORECASE)

_MASSIVE_SCALE_RE = re.compile(r"massive|millions|global|huge", re.IGNORECASE)
_HIGH_SCALE_RE = re.compile(r"scale|high.traffic|load|performance", re.IGNORECASE)
_LOW_SCALE_RE = re.compile(r"small|simple|basic", re.IGNORECASE)

_LOW_RISK_RE = re.compile(r"safe|stable|reliable|proven", re.IGNORECASE)
_HIGH_RISK_RE = re.compile(r"experiment|innovative|cutting.edge", re.IGNORECASE)

# Platforms already in use, in report order
_STACK_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("AWS", re.compile(r"aws|amazon", re.IGNORECASE)),
    ("Azure", re.compile(r"azure|microsoft", re.IGNORECASE)),
    ("GCP", re.compile(r"gcp|google cloud", re.IGNORECASE)),
    ("Kubernetes", re.compile(r"kubernetes|k8s", re.IGNORECASE)),
    ("Docker", re.compile(r"docker", re.IGNORECASE)),
)


def detect_team_size(node_count: int) -> TeamSize:
    """Estimate team size from how many components the architecture has."""
    if node_count <= TEAM_SIZE_SMALL_MAX_NODES:
        return TeamSize.SMALL
    if node_count <= TEAM_SIZE_MEDIUM_MAX_NODES:
        return TeamSize.MEDIUM
    if node_count <= TEAM_SIZE_LARGE_MAX_NODES:
        return TeamSize.LARGE
    return TeamSize.ENTERPRISE


def detect_budget_tier(description: str, node_count: int) -> BudgetTier:
    """Detect budget tier from keywords, falling back to architecture size."""
    if _STARTUP_RE.search(description):
        return BudgetTier.STARTUP
    if _ENTERPRISE_RE.search(description):
        return BudgetTier.ENTERPRISE
    if _GROWTH_RE.search(description):
        return BudgetTier.GROWTH

    if node_count > BUDGET_ENTERPRISE_MIN_NODES:
        return BudgetTier.ENTERPRISE
    if node_count > BUDGET_ESTABLISHED_MIN_NODES:
        return BudgetTier.ESTABLISHED
    return BudgetTier.STARTUP


def detect_compliance_needs(description: str) -> tuple[str, ...]:
    """Detect every compliance regime the description hints at."""
    return tuple(tag for tag, pattern in _COMPLIANCE_PATTERNS if pattern.search(description))


def detect_time_to_market(description: str) -> TimeToMarket:
    if _URGENT_RE.search(description):
        return TimeToMarket.URGENT
    if _PLANNED_RE.search(description):
        return TimeToMarket.PLANNED
    return TimeToMarket.STANDARD


def detect_scalability_needs(description: str, node_count: int) -> ScalabilityNeeds:
    """Detect expected load from keywords, falling back to architecture size."""
    if _MASSIVE_SCALE_RE.search(description):
        return ScalabilityNeeds.MASSIVE
    if _HIGH_SCALE_RE.search(description):
        return ScalabilityNeeds.HIGH
    if _LOW_SCALE_RE.search(description):
        return ScalabilityNeeds.LOW

    if node_count > SCALABILITY_HIGH_MIN_NODES:
        return ScalabilityNeeds.HIGH
    if node_count > SCALABILITY_MEDIUM_MIN_NODES:
        return ScalabilityNeeds.MEDIUM
    return ScalabilityNeeds.LOW


def detect_maintenance_capability(node_count: int) -> MaintenanceCapability:
    """Estimate operations capacity; depends on architecture size only."""
    if node_count > MAINTENANCE_STRONG_MIN_NODES:
        return MaintenanceCapability.STRONG
    if node_count > MAINTENANCE_MODERATE_MIN_NODES:
        return MaintenanceCapability.MODERATE
    return MaintenanceCapability.LIMITED


def detect_risk_tolerance(description: str) -> RiskTolerance:
    if _LOW_RISK_RE.search(description):
        return RiskTolerance.LOW
    if _HIGH_RISK_RE.search(description):
        return RiskTolerance.HIGH
    return RiskTolerance.MEDIUM


def detect_existing_stack(description: str) -> tuple[str, ...]:
    return tuple(name for name, pattern in _STACK_PATTERNS if pattern.search(description))


def analyze_context(graph: ArchitectureGraph, description: str) -> EnterpriseContext:
    """Build the enterprise context for one engine invocation.

    Args:
        graph: Validated architecture graph (only its node count is used)
        description: Free-text project description

    Returns:
        EnterpriseContext with every dimension set
    """
    node_count = graph.node_count
    context = EnterpriseContext(
        team_size=detect_team_size(node_count),
        budget_tier=detect_budget_tier(description, node_count),
        compliance_needs=detect_compliance_needs(description),
        time_to_market=detect_time_to_market(description),
        scalability_needs=detect_scalability_needs(description, node_count),
        maintenance_capability=detect_maintenance_capability(node_count),
        risk_tolerance=detect_risk_tolerance(description),
        existing_stack=detect_existing_stack(description),
    )
    logger.debug(f"Enterprise context: {context.to_dict()}")
    return context
