"""Tool catalog loader for architecture decisions."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from stackwise.config import DEFAULT_CATALOG_PATH
from stackwise.errors import CatalogConfigurationError

from .models import (
    ComponentCategory,
    Level,
    PricingModel,
    SupportLevel,
    ToolCandidate,
    ToolType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolCatalog:
    """Loaded tool catalog with lookup by component category.

    Candidates keep their declaration order, which is the tie-break order
    for selection.
    """

    categories: dict[ComponentCategory, tuple[ToolCandidate, ...]] = field(default_factory=dict)

    def candidates_for(self, category: ComponentCategory | str) -> tuple[ToolCandidate, ...]:
        """
        Get the candidates for a category.

        Args:
            category: Component category or its id (e.g., "database")

        Returns:
            Candidates in catalog order; empty for unknown or empty categories
        """
        parsed = ComponentCategory.parse(category)
        if parsed is None:
            return ()
        return self.categories.get(parsed, ())

    def get_tool(self, tool_id: str) -> ToolCandidate | None:
        """Find a tool by id across all categories."""
        for tools in self.categories.values():
            for tool in tools:
                if tool.id == tool_id:
                    return tool
        return None

    def missing_categories(self) -> list[ComponentCategory]:
        """Categories with no candidates, in enum order."""
        return [category for category in ComponentCategory if not self.categories.get(category)]

    def validate(self) -> None:
        """
        Check that every component category has at least one candidate.

        Raises:
            CatalogConfigurationError: If any category is uncovered
        """
        missing = self.missing_categories()
        if missing:
            names = [category.value for category in missing]
            raise CatalogConfigurationError(
                f"Tool catalog has no candidates for: {', '.join(names)}",
                missing_categories=names,
            )

    def __len__(self) -> int:
        return sum(len(tools) for tools in self.categories.values())


def _parse_enum(enum_cls: type, value: Any, where: str):
    """Parse an enum value, reporting the catalog location on failure."""
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise CatalogConfigurationError(
            f"{where}: invalid value {value!r} (expected one of: {allowed})"
        ) from e


def _parse_tool(category: ComponentCategory, data: dict[str, Any], index: int) -> ToolCandidate:
    """Build a ToolCandidate from one YAML entry."""
    where = f"{category.value}[{index}]"
    if not isinstance(data, dict):
        raise CatalogConfigurationError(f"{where}: tool entry must be a mapping")
    tool_id = data.get("id")
    if not tool_id:
        raise CatalogConfigurationError(f"{where}: tool entry is missing an id")
    where = f"{category.value}/{tool_id}"

    pricing = data.get("pricing") or {}
    integration = data.get("integration") or {}
    support_level = data.get("support_level")

    return ToolCandidate(
        id=tool_id,
        category=category,
        name=data.get("name", tool_id),
        type=_parse_enum(ToolType, data.get("type"), where),
        pricing_model=_parse_enum(PricingModel, pricing.get("model"), where),
        cost=pricing.get("cost"),
        complexity=_parse_enum(Level, data.get("complexity"), where),
        integration_effort=_parse_enum(Level, integration.get("effort"), where),
        popularity=data.get("popularity"),
        documentation_quality=data.get("documentation", "Good"),
        cloud_provider=data.get("cloud_provider"),
        support_level=_parse_enum(SupportLevel, support_level, where) if support_level else None,
        description=data.get("description", ""),
        pros=tuple(data.get("pros", [])),
        cons=tuple(data.get("cons", [])),
        time_estimate=integration.get("time_estimate", ""),
        website=data.get("website", ""),
    )


def build_tool_catalog(data: dict[str, Any]) -> ToolCatalog:
    """
    Build a catalog from already-parsed catalog data.

    Args:
        data: Mapping with a ``categories`` key of category id -> list of tool entries

    Returns:
        ToolCatalog (not validated for coverage; call ``validate()`` for that)

    Raises:
        CatalogConfigurationError: On unknown categories, enum values or duplicate ids
    """
    categories: dict[ComponentCategory, tuple[ToolCandidate, ...]] = {}
    seen_ids: set[str] = set()

    for category_id, entries in (data.get("categories") or {}).items():
        category = ComponentCategory.parse(category_id)
        if category is None:
            raise CatalogConfigurationError(f"Unknown component category in catalog: {category_id}")

        tools = []
        for index, entry in enumerate(entries or []):
            tool = _parse_tool(category, entry, index)
            if tool.id in seen_ids:
                raise CatalogConfigurationError(f"Duplicate tool id in catalog: {tool.id}")
            seen_ids.add(tool.id)
            tools.append(tool)

        categories[category] = tuple(tools)

    return ToolCatalog(categories=categories)


def load_tool_catalog(catalog_path: Path | str | None = None) -> ToolCatalog:
    """
    Load tool catalog from YAML file.

    Args:
        catalog_path: Path to catalog YAML. Defaults to bundled catalog.

    Returns:
        Loaded ToolCatalog

    Raises:
        CatalogConfigurationError: If the file is missing, unparsable or malformed
    """
    catalog_path = Path(catalog_path) if catalog_path is not None else DEFAULT_CATALOG_PATH

    if not catalog_path.exists():
        raise CatalogConfigurationError(f"Tool catalog not found: {catalog_path}")

    with open(catalog_path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogConfigurationError(f"Tool catalog is not valid YAML: {e}") from e

    catalog = build_tool_catalog(data)
    logger.debug(f"Loaded {len(catalog)} tools in {len(catalog.categories)} categories")
    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> ToolCatalog:
    """Bundled catalog, loaded once per process and validated for coverage."""
    catalog = load_tool_catalog()
    catalog.validate()
    return catalog
