"""Static per-category classification: impact, urgency, display name and group.

Every table is keyed by every ComponentCategory member, so a new category
fails loudly (KeyError, and the exhaustiveness tests) instead of silently
falling back to a default.
"""

from .models import (
    ComponentCategory,
    DecisionGroup,
    EnterpriseContext,
    Level,
    ScalabilityNeeds,
    TimeToMarket,
    Urgency,
)

C = ComponentCategory

IMPACT: dict[ComponentCategory, Level] = {
    C.DATABASE: Level.HIGH,
    C.API_GATEWAY: Level.HIGH,
    C.MONITORING: Level.HIGH,
    C.CLOUD_PROVIDER: Level.HIGH,
    C.SECURITY: Level.HIGH,
    C.CACHE: Level.MEDIUM,
    C.CI_CD: Level.MEDIUM,
    C.LOGGING: Level.MEDIUM,
    C.CONTAINER_ORCHESTRATION: Level.MEDIUM,
    C.MESSAGE_QUEUE: Level.MEDIUM,
    C.SEARCH_ENGINE: Level.LOW,
    C.ANALYTICS: Level.LOW,
    C.LOAD_BALANCER: Level.LOW,
    C.CDN: Level.LOW,
}

BASE_URGENCY: dict[ComponentCategory, Urgency] = {
    C.DATABASE: Urgency.CRITICAL,
    C.CLOUD_PROVIDER: Urgency.CRITICAL,
    C.MONITORING: Urgency.RECOMMENDED,
    C.CI_CD: Urgency.RECOMMENDED,
    C.CACHE: Urgency.RECOMMENDED,
    C.SECURITY: Urgency.RECOMMENDED,
    C.API_GATEWAY: Urgency.RECOMMENDED,
    C.LOGGING: Urgency.OPTIONAL,
    C.CONTAINER_ORCHESTRATION: Urgency.OPTIONAL,
    C.MESSAGE_QUEUE: Urgency.OPTIONAL,
    C.SEARCH_ENGINE: Urgency.OPTIONAL,
    C.ANALYTICS: Urgency.OPTIONAL,
    C.LOAD_BALANCER: Urgency.OPTIONAL,
    C.CDN: Urgency.OPTIONAL,
}

DISPLAY_NAMES: dict[ComponentCategory, str] = {
    C.DATABASE: "Database",
    C.API_GATEWAY: "API Gateway",
    C.MONITORING: "Monitoring Solution",
    C.CACHE: "Caching Layer",
    C.CI_CD: "CI/CD Pipeline",
    C.LOGGING: "Logging System",
    C.SEARCH_ENGINE: "Search Engine",
    C.CLOUD_PROVIDER: "Cloud Infrastructure",
    C.CONTAINER_ORCHESTRATION: "Container Orchestration",
    C.SECURITY: "Security & Secrets Management",
    C.MESSAGE_QUEUE: "Message Queue",
    C.ANALYTICS: "Analytics Platform",
    C.LOAD_BALANCER: "Load Balancer",
    C.CDN: "Content Delivery Network",
}

GROUPS: dict[ComponentCategory, DecisionGroup] = {
    C.DATABASE: DecisionGroup.DATABASE,
    C.API_GATEWAY: DecisionGroup.INFRASTRUCTURE,
    C.MONITORING: DecisionGroup.MONITORING,
    C.CACHE: DecisionGroup.INFRASTRUCTURE,
    C.CI_CD: DecisionGroup.DEPLOYMENT,
    C.LOGGING: DecisionGroup.MONITORING,
    C.SEARCH_ENGINE: DecisionGroup.DATABASE,
    C.CLOUD_PROVIDER: DecisionGroup.INFRASTRUCTURE,
    C.CONTAINER_ORCHESTRATION: DecisionGroup.INFRASTRUCTURE,
    C.SECURITY: DecisionGroup.SECURITY,
    C.MESSAGE_QUEUE: DecisionGroup.INFRASTRUCTURE,
    C.ANALYTICS: DecisionGroup.ANALYTICS,
    C.LOAD_BALANCER: DecisionGroup.INFRASTRUCTURE,
    C.CDN: DecisionGroup.INFRASTRUCTURE,
}


def impact_for(category: ComponentCategory) -> Level:
    return IMPACT[category]


def urgency_for(category: ComponentCategory, ctx: EnterpriseContext | None = None) -> Urgency:
    """
    Urgency of a decision, with context overrides applied before the table.

    Overrides (each forces CRITICAL):
        - security when any compliance regime was detected
        - container orchestration when scalability needs are high
        - CI/CD when time to market is urgent

    Args:
        category: Component category of the decision
        ctx: Enterprise context; None returns the static table value

    Returns:
        Urgency for the category
    """
    if ctx is not None:
        if category == C.SECURITY and ctx.has_compliance_needs:
            return Urgency.CRITICAL
        if category == C.CONTAINER_ORCHESTRATION and ctx.scalability_needs == ScalabilityNeeds.HIGH:
            return Urgency.CRITICAL
        if category == C.CI_CD and ctx.time_to_market == TimeToMarket.URGENT:
            return Urgency.CRITICAL
    return BASE_URGENCY[category]


def display_name_for(category: ComponentCategory) -> str:
    """Human-readable component name, e.g. "Caching Layer"."""
    return DISPLAY_NAMES[category]


def group_for(category: ComponentCategory) -> DecisionGroup:
    return GROUPS[category]
