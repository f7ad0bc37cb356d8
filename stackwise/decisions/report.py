"""Decision report assembly, validation and filtering.

``generate_decision_report`` is the engine's entry point: it validates the
inputs and runs the whole pipeline (context, selection, estimates, rollout
plan, risks) in one pure call.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from stackwise.telemetry import report_span

from .catalog import ToolCatalog, get_default_catalog
from .context_analyzer import analyze_context
from .estimates import classify_complexity, estimate_costs, estimate_timeline, format_currency
from .graph import ArchitectureGraph, ProjectDescriptor, parse_descriptor, parse_graph
from .models import Decision, DecisionFilter, DecisionReport
from .planner import plan_integration
from .risk import assess_risks
from .selector import select_decisions

logger = logging.getLogger(__name__)


def generate_decision_report(
    graph: ArchitectureGraph | dict[str, Any],
    descriptor: ProjectDescriptor | dict[str, Any],
    catalog: ToolCatalog | None = None,
) -> DecisionReport:
    """
    Generate the full decision report for an architecture.

    Args:
        graph: Architecture graph (model or dict with ``nodes`` and ``edges``)
        descriptor: Project descriptor (model or dict with ``description``
            and optional ``projectName``)
        catalog: Tool catalog; defaults to the bundled catalog

    Returns:
        DecisionReport; identical inputs give identical reports

    Raises:
        InputError: If the graph or descriptor is malformed
    """
    graph = parse_graph(graph)
    descriptor = parse_descriptor(descriptor)
    # An empty catalog is falsy, so test for None explicitly
    catalog = catalog if catalog is not None else get_default_catalog()

    with report_span(descriptor.project_name, graph.node_count) as span:
        ctx = analyze_context(graph, descriptor.description)
        decisions = select_decisions(graph, catalog, ctx)

        complexity = classify_complexity(graph)
        cost_estimate = estimate_costs(decisions, ctx)
        timeline = estimate_timeline(complexity, graph.node_count, ctx)

        report = DecisionReport(
            project_name=descriptor.project_name,
            complexity=complexity,
            component_count=graph.node_count,
            cost_estimate=cost_estimate,
            formatted_cost={
                "development": format_currency(cost_estimate.development),
                "monthly": format_currency(cost_estimate.monthly_operational),
                "annual": format_currency(cost_estimate.annual_operational),
            },
            timeline=timeline,
            decisions=tuple(decisions),
            integration_plan=plan_integration(decisions),
            risk_assessment=assess_risks(decisions, graph, ctx),
            context=ctx,
        )

        span.set_attribute("report.decision_count", len(decisions))
        span.set_attribute("report.complexity", complexity.value)

    logger.info(
        f"Generated decision report for '{report.project_name}': "
        f"{len(report.decisions)} decisions, complexity={report.complexity}, "
        f"mvp={report.timeline.mvp}"
    )
    return report


def validate_decision_report(report: DecisionReport) -> list[str]:
    """
    Check a report for structural problems.

    Returns:
        List of problems (empty when the report is valid)
    """
    errors: list[str] = []

    if not report.project_name:
        errors.append("Project name is required")

    if not report.decisions:
        errors.append("At least one decision is required")

    for decision in report.decisions:
        if not decision.selected_tool_id:
            errors.append(f"Decision {decision.id} must have a selected tool")
        elif decision.selected is None:
            errors.append(
                f"Decision {decision.id} selected tool {decision.selected_tool_id} "
                "is not among its candidates"
            )

    title_counts = Counter(d.title for d in report.decisions)
    for title, count in title_counts.items():
        if count > 1:
            errors.append(f"Decision title appears {count} times: {title}")

    planned = Counter(report.integration_plan.all_titles())
    for title in title_counts:
        if planned[title] == 0:
            errors.append(f"Decision is missing from the integration plan: {title}")
        elif planned[title] > 1:
            errors.append(f"Decision appears in more than one phase: {title}")
    for title in planned:
        if title not in title_counts:
            errors.append(f"Integration plan references an unknown decision: {title}")

    if errors:
        logger.warning(f"Decision report validation found {len(errors)} problem(s)")
    return errors


def filter_decisions(
    decisions: Sequence[Decision],
    criteria: DecisionFilter | None = None,
) -> list[Decision]:
    """Decisions matching every set criterion, in their original order."""
    if criteria is None:
        return list(decisions)
    return [d for d in decisions if criteria.matches(d)]
