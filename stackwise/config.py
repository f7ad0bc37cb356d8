"""Centralized configuration for Stackwise.

This module provides a single source of truth for every constant the
decision engine uses: context-detection thresholds, cost bases and
multipliers, timeline weeks, rollout phase caps and the mandatory
cross-cutting components.

Design Principles:
- All numeric thresholds in one place, named for what they gate
- Runtime settings read from the environment through one dataclass
- Engine modules import constants from here instead of hardcoding them
"""

import os
from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# Context Detection Thresholds (node count)
# =============================================================================

# Team size: <= SMALL -> small, <= MEDIUM -> medium, <= LARGE -> large, else enterprise
TEAM_SIZE_SMALL_MAX_NODES = 4
TEAM_SIZE_MEDIUM_MAX_NODES = 8
TEAM_SIZE_LARGE_MAX_NODES = 15

# Budget fallback when no keyword matches: > ENTERPRISE -> enterprise, > ESTABLISHED -> established
BUDGET_ENTERPRISE_MIN_NODES = 12
BUDGET_ESTABLISHED_MIN_NODES = 6

# Scalability fallback: > HIGH -> high, > MEDIUM -> medium, else low
SCALABILITY_HIGH_MIN_NODES = 10
SCALABILITY_MEDIUM_MIN_NODES = 6

# Maintenance capability: > STRONG -> strong, > MODERATE -> moderate, else limited
MAINTENANCE_STRONG_MIN_NODES = 12
MAINTENANCE_MODERATE_MIN_NODES = 6


# =============================================================================
# Scoring
# =============================================================================

# Base score for a catalog entry without a popularity figure
DEFAULT_POPULARITY = 50

SCORE_MIN = 0
SCORE_MAX = 100

# Popularity a high-complexity tool needs before large teams get a bonus for it
POPULAR_COMPLEX_TOOL_THRESHOLD = 80

# Popularity counted as "proven" for risk-averse organizations
PROVEN_TOOL_THRESHOLD = 85


# =============================================================================
# Architecture Complexity
# =============================================================================

SIMPLE_MAX_NODES = 6
SIMPLE_MAX_EDGES = 8
MODERATE_MAX_NODES = 12
MODERATE_MAX_EDGES = 18


# =============================================================================
# Cost Estimation (currency-agnostic units)
# =============================================================================

DEVELOPMENT_BASE_COST = {
    "enterprise": 50000,
    "large": 30000,
    "medium": 15000,
    "small": 8000,
}

MONTHLY_BASE_COST = {
    "enterprise": 500,
    "established": 200,
    "growth": 100,
    "startup": 50,
}

# Development cost compounds by these factors, one per selected tool
EFFORT_MULTIPLIERS = {
    "high": 1.5,
    "medium": 1.2,
    "low": 1.0,
}

# Applied to the listed price of subscription tools
SUBSCRIPTION_DISCOUNT = 0.8

# Flat monthly addend for usage-based tools, keyed by scalability needs
USAGE_BASED_MONTHLY_COST = {
    "massive": 200,
    "high": 100,
}
USAGE_BASED_DEFAULT_MONTHLY_COST = 30

ANNUAL_DISCOUNT = 0.9
MONTHS_PER_YEAR = 12


# =============================================================================
# Timeline Estimation
# =============================================================================

TIMELINE_BASE_WEEKS = {
    "simple": 6,
    "moderate": 12,
    "complex": 24,
}

TIMELINE_TEAM_FACTORS = {
    "enterprise": 0.7,
    "large": 0.8,
    "medium": 1.0,
    "small": 1.3,
}

TIMELINE_URGENCY_FACTORS = {
    "urgent": 0.8,
    "planned": 1.2,
    "standard": 1.0,
}


# =============================================================================
# Decision Selection & Rollout Planning
# =============================================================================

# Components every architecture gets a decision for, in emission order
MANDATORY_COMPONENTS = (
    "cloud-provider",
    "container-orchestration",
    "security",
    "message-queue",
    "analytics",
)

PHASE1_COMPONENTS = frozenset({"database", "cloud-provider", "security"})
PHASE2_COMPONENTS = frozenset({"monitoring", "ci-cd", "container-orchestration"})

PHASE1_CAP = 5
PHASE2_CAP = 6

# Fallback when the descriptor carries no project name
DEFAULT_PROJECT_NAME = "Your Project"

# Complex tools a small or thinly staffed team can run before it becomes a risk
MAX_COMPLEX_TOOLS_FOR_LIMITED_TEAM = 2


# =============================================================================
# Runtime Settings
# =============================================================================

DEFAULT_CATALOG_PATH = Path(__file__).parent / "decisions" / "tool_catalog.yaml"


@dataclass(frozen=True)
class EngineSettings:
    """Runtime settings for the engine and its CLI.

    All values are read from environment variables with sensible defaults.
    """

    log_level: str = "INFO"
    catalog_path: Path = DEFAULT_CATALOG_PATH

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Create settings from environment variables."""
        catalog_path = os.getenv("STACKWISE_CATALOG_PATH")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
        )
