"""Decision selection: one scored tool choice per component category."""

import logging

from stackwise.config import MANDATORY_COMPONENTS

from .catalog import ToolCatalog
from .classification import display_name_for, group_for, impact_for, urgency_for
from .graph import ArchitectureGraph
from .models import ComponentCategory, Decision, EnterpriseContext, ScoredCandidate
from .scoring import explain_selection, score_tool

logger = logging.getLogger(__name__)


def decision_categories(graph: ArchitectureGraph) -> list[tuple[ComponentCategory, bool]]:
    """
    Categories to decide on, in emission order.

    Graph categories come first in first-seen node order, then the mandatory
    cross-cutting categories the graph lacks. Node types that are not known
    categories are dropped.

    Returns:
        (category, cross_cutting) pairs
    """
    categories: list[tuple[ComponentCategory, bool]] = []
    seen: set[ComponentCategory] = set()

    for node_type in graph.node_types():
        category = ComponentCategory.parse(node_type)
        if category is None:
            logger.debug(f"Skipping node type with no catalog category: {node_type}")
            continue
        if category not in seen:
            seen.add(category)
            categories.append((category, False))

    for component in MANDATORY_COMPONENTS:
        category = ComponentCategory(component)
        if category not in seen:
            seen.add(category)
            categories.append((category, True))

    return categories


def pick_best(candidates: tuple[ScoredCandidate, ...]) -> ScoredCandidate:
    """Highest-scoring candidate; the earliest one wins a tie."""
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.enterprise_score > best.enterprise_score:
            best = candidate
    return best


def build_decision(
    category: ComponentCategory,
    candidates: tuple[ScoredCandidate, ...],
    ctx: EnterpriseContext,
    cross_cutting: bool = False,
) -> Decision:
    """Assemble the Decision record for one category from its scored candidates."""
    best = pick_best(candidates)
    display_name = display_name_for(category)
    if cross_cutting:
        description = f"Essential {category} component for enterprise architecture"
    else:
        description = (
            f"Choose the best {category} solution for your architecture "
            "based on enterprise requirements"
        )

    return Decision(
        id=f"decision-{category}",
        title=f"{display_name} Selection",
        description=description,
        group=group_for(category),
        component=category,
        candidates=candidates,
        selected_tool_id=best.tool.id,
        reasoning=explain_selection(best.tool, ctx),
        impact=impact_for(category),
        urgency=urgency_for(category, ctx),
        cross_cutting=cross_cutting,
    )


def select_decisions(
    graph: ArchitectureGraph,
    catalog: ToolCatalog,
    ctx: EnterpriseContext,
) -> list[Decision]:
    """
    Select the best-fit tool for every category the architecture needs.

    Categories without catalog candidates produce no decision.

    Args:
        graph: Validated architecture graph
        catalog: Tool catalog to choose from
        ctx: Enterprise context used for scoring

    Returns:
        Decisions, graph-derived first, then cross-cutting additions
    """
    decisions = []
    for category, cross_cutting in decision_categories(graph):
        tools = catalog.candidates_for(category)
        if not tools:
            logger.debug(f"No catalog candidates for {category}, skipping decision")
            continue

        candidates = tuple(
            ScoredCandidate(tool=tool, enterprise_score=score_tool(tool, ctx)) for tool in tools
        )
        decision = build_decision(category, candidates, ctx, cross_cutting=cross_cutting)
        logger.debug(
            f"{decision.title}: selected {decision.selected_tool_id} "
            f"(score {decision.selected.enterprise_score})"
        )
        decisions.append(decision)

    return decisions
