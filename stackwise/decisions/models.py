"""Data models for architecture decisions."""

import json
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# =============================================================================
# Closed Tag Types
# =============================================================================


class ComponentCategory(StrEnum):
    """Infrastructure component category shared by graph nodes and catalog tools."""

    DATABASE = "database"
    CACHE = "cache"
    MESSAGE_QUEUE = "message-queue"
    CI_CD = "ci-cd"
    CLOUD_PROVIDER = "cloud-provider"
    CONTAINER_ORCHESTRATION = "container-orchestration"
    SECURITY = "security"
    SEARCH_ENGINE = "search-engine"
    ANALYTICS = "analytics"
    LOAD_BALANCER = "load-balancer"
    CDN = "cdn"
    MONITORING = "monitoring"
    API_GATEWAY = "api-gateway"
    LOGGING = "logging"

    @classmethod
    def parse(cls, value: str) -> "ComponentCategory | None":
        """Return the category for a graph node type, or None if it has no catalog category."""
        try:
            return cls(value)
        except ValueError:
            return None


class ToolType(StrEnum):
    OPEN_SOURCE = "open-source"
    MANAGED_SERVICE = "managed-service"
    COMMERCIAL = "commercial"
    FREEMIUM = "freemium"


class PricingModel(StrEnum):
    FREE = "free"
    FREEMIUM = "freemium"
    SUBSCRIPTION = "subscription"
    USAGE_BASED = "usage-based"


class Level(StrEnum):
    """Three-step scale used for complexity, integration effort and impact."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SupportLevel(StrEnum):
    COMMUNITY = "community"
    COMMERCIAL = "commercial"
    ENTERPRISE = "enterprise"


class TeamSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class BudgetTier(StrEnum):
    STARTUP = "startup"
    GROWTH = "growth"
    ESTABLISHED = "established"
    ENTERPRISE = "enterprise"


class TimeToMarket(StrEnum):
    URGENT = "urgent"
    STANDARD = "standard"
    PLANNED = "planned"


class ScalabilityNeeds(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    MASSIVE = "massive"


class MaintenanceCapability(StrEnum):
    LIMITED = "limited"
    MODERATE = "moderate"
    STRONG = "strong"


class RiskTolerance(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Urgency(StrEnum):
    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    CRITICAL = "critical"


class ArchitectureComplexity(StrEnum):
    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class DecisionGroup(StrEnum):
    """Coarse grouping of decisions for dashboards and filters."""

    INFRASTRUCTURE = "infrastructure"
    DATABASE = "database"
    MONITORING = "monitoring"
    SECURITY = "security"
    DEVELOPMENT = "development"
    DEPLOYMENT = "deployment"
    ANALYTICS = "analytics"


# =============================================================================
# Catalog & Context
# =============================================================================


@dataclass(frozen=True)
class ToolCandidate:
    """Immutable catalog entry for one concrete technology option.

    Attributes:
        id: Unique tool id (e.g., "postgresql")
        category: Component category this tool serves
        popularity: 0-100 adoption score; None falls back to the default base score
        cost: Free-text price hint (e.g., "$15-23/host/month")
        documentation_quality: "Good", "Excellent", ...
    """

    id: str
    category: ComponentCategory
    name: str
    type: ToolType
    pricing_model: PricingModel
    complexity: Level
    integration_effort: Level
    popularity: int | None = None
    documentation_quality: str = "Good"
    cost: str | None = None
    cloud_provider: str | None = None
    support_level: SupportLevel | None = None
    description: str = ""
    pros: tuple[str, ...] = ()
    cons: tuple[str, ...] = ()
    time_estimate: str = ""
    website: str = ""

    @property
    def is_managed(self) -> bool:
        """Check if the tool is operated by its vendor."""
        return self.type == ToolType.MANAGED_SERVICE

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "id": self.id,
            "category": self.category.value,
            "name": self.name,
            "type": self.type.value,
            "pricing_model": self.pricing_model.value,
            "cost": self.cost,
            "complexity": self.complexity.value,
            "popularity": self.popularity,
            "documentation_quality": self.documentation_quality,
            "integration_effort": self.integration_effort.value,
            "cloud_provider": self.cloud_provider,
            "support_level": self.support_level.value if self.support_level else None,
            "description": self.description,
            "pros": list(self.pros),
            "cons": list(self.cons),
            "time_estimate": self.time_estimate,
            "website": self.website,
        }


@dataclass(frozen=True)
class EnterpriseContext:
    """Organizational profile inferred from the graph and the project description."""

    team_size: TeamSize
    budget_tier: BudgetTier
    compliance_needs: tuple[str, ...]
    time_to_market: TimeToMarket
    scalability_needs: ScalabilityNeeds
    maintenance_capability: MaintenanceCapability
    risk_tolerance: RiskTolerance
    existing_stack: tuple[str, ...] = ()

    @property
    def has_compliance_needs(self) -> bool:
        return bool(self.compliance_needs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "team_size": self.team_size.value,
            "budget_tier": self.budget_tier.value,
            "compliance_needs": list(self.compliance_needs),
            "time_to_market": self.time_to_market.value,
            "scalability_needs": self.scalability_needs.value,
            "maintenance_capability": self.maintenance_capability.value,
            "risk_tolerance": self.risk_tolerance.value,
            "existing_stack": list(self.existing_stack),
        }


# =============================================================================
# Decisions
# =============================================================================


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog tool annotated with its enterprise score."""

    tool: ToolCandidate
    enterprise_score: int

    def to_dict(self) -> dict[str, Any]:
        data = self.tool.to_dict()
        data["enterprise_score"] = self.enterprise_score
        return data


@dataclass(frozen=True)
class Decision:
    """Tool selection for one component category.

    Attributes:
        id: Stable decision id ("decision-<category>")
        title: Display title, unique within a report
        candidates: Every catalog tool for the category, in catalog order
        selected_tool_id: Id of the highest-scoring candidate
        cross_cutting: True when the category was added because it is mandatory,
            not because the graph contains it
    """

    id: str
    title: str
    description: str
    group: DecisionGroup
    component: ComponentCategory
    candidates: tuple[ScoredCandidate, ...]
    selected_tool_id: str
    reasoning: str
    impact: Level
    urgency: Urgency
    cross_cutting: bool = False

    @property
    def selected(self) -> ScoredCandidate | None:
        """The scored candidate matching ``selected_tool_id``."""
        for candidate in self.candidates:
            if candidate.tool.id == self.selected_tool_id:
                return candidate
        return None

    @property
    def selected_tool(self) -> ToolCandidate | None:
        """The selected catalog tool."""
        selected = self.selected
        return selected.tool if selected else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "group": self.group.value,
            "component": self.component.value,
            "candidates": [c.to_dict() for c in self.candidates],
            "selected_tool_id": self.selected_tool_id,
            "reasoning": self.reasoning,
            "impact": self.impact.value,
            "urgency": self.urgency.value,
            "cross_cutting": self.cross_cutting,
        }


@dataclass(frozen=True)
class DecisionFilter:
    """Optional criteria for narrowing a decision list (all AND-combined)."""

    group: DecisionGroup | None = None
    tool_type: ToolType | None = None
    complexity: Level | None = None
    urgency: Urgency | None = None

    def matches(self, decision: Decision) -> bool:
        """Check if a decision satisfies every set criterion."""
        if self.group is not None and decision.group != self.group:
            return False
        if self.urgency is not None and decision.urgency != self.urgency:
            return False

        tool = decision.selected_tool
        if self.tool_type is not None and (tool is None or tool.type != self.tool_type):
            return False
        if self.complexity is not None and (tool is None or tool.complexity != self.complexity):
            return False
        return True


# =============================================================================
# Estimates, Plan & Risks
# =============================================================================


@dataclass(frozen=True)
class CostEstimate:
    """Rounded cost figures in currency-agnostic units."""

    development: int
    monthly_operational: int
    annual_operational: int

    def to_dict(self) -> dict[str, int]:
        return {
            "development": self.development,
            "monthly_operational": self.monthly_operational,
            "annual_operational": self.annual_operational,
        }


@dataclass(frozen=True)
class Timeline:
    """Implementation horizons in whole weeks."""

    mvp_weeks: int
    production_weeks: int
    scale_weeks: int

    @property
    def mvp(self) -> str:
        return f"{self.mvp_weeks} weeks"

    @property
    def production(self) -> str:
        return f"{self.production_weeks} weeks"

    @property
    def scale(self) -> str:
        return f"{self.scale_weeks} weeks"

    def to_dict(self) -> dict[str, str]:
        return {"mvp": self.mvp, "production": self.production, "scale": self.scale}


@dataclass(frozen=True)
class IntegrationPlan:
    """Three-phase rollout of decision titles."""

    phase1: tuple[str, ...] = ()
    phase2: tuple[str, ...] = ()
    phase3: tuple[str, ...] = ()

    def all_titles(self) -> list[str]:
        """Every planned title, phase by phase."""
        return [*self.phase1, *self.phase2, *self.phase3]

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "phase1": list(self.phase1),
            "phase2": list(self.phase2),
            "phase3": list(self.phase3),
        }


@dataclass(frozen=True)
class RiskAssessment:
    """Risk statements bucketed by kind. Any bucket may be empty."""

    technical: tuple[str, ...] = ()
    operational: tuple[str, ...] = ()
    financial: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.technical or self.operational or self.financial)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "technical": list(self.technical),
            "operational": list(self.operational),
            "financial": list(self.financial),
        }


# =============================================================================
# Report
# =============================================================================


@dataclass(frozen=True)
class DecisionReport:
    """Full output of one engine invocation.

    Attributes:
        formatted_cost: ``cost_estimate`` rendered as currency strings, keyed
            "development", "monthly" and "annual"
        context: Enterprise context the decisions were scored against
    """

    project_name: str
    complexity: ArchitectureComplexity
    component_count: int
    cost_estimate: CostEstimate
    formatted_cost: dict[str, str]
    timeline: Timeline
    decisions: tuple[Decision, ...]
    integration_plan: IntegrationPlan
    risk_assessment: RiskAssessment
    context: EnterpriseContext

    def get_decision(self, component: str) -> Decision | None:
        """Look up the decision for a component category id."""
        for decision in self.decisions:
            if decision.component == component:
                return decision
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "project_name": self.project_name,
            "architecture": {
                "complexity": self.complexity.value,
                "components": self.component_count,
                "estimated_cost": dict(self.formatted_cost),
                "timeline": self.timeline.to_dict(),
            },
            "context": self.context.to_dict(),
            "decisions": [d.to_dict() for d in self.decisions],
            "integration_plan": self.integration_plan.to_dict(),
            "total_cost_estimate": self.cost_estimate.to_dict(),
            "risk_assessment": self.risk_assessment.to_dict(),
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON text. Identical reports give identical text."""
        return json.dumps(self.to_dict(), indent=indent)
