"""Three-phase rollout planning for decisions."""

from collections.abc import Sequence

from stackwise.config import PHASE1_CAP, PHASE1_COMPONENTS, PHASE2_CAP, PHASE2_COMPONENTS

from .models import Decision, IntegrationPlan, Urgency


def is_phase1(decision: Decision) -> bool:
    return decision.urgency == Urgency.CRITICAL or decision.component in PHASE1_COMPONENTS


def is_phase2(decision: Decision) -> bool:
    return decision.urgency == Urgency.RECOMMENDED or decision.component in PHASE2_COMPONENTS


def plan_integration(decisions: Sequence[Decision]) -> IntegrationPlan:
    """
    Partition decisions into rollout phases by title.

    Phase 1 takes critical and foundational decisions, phase 2 takes
    recommended and delivery-pipeline decisions that did not qualify for
    phase 1. Each phase is capped; decisions cut by a cap fall through to
    phase 3 after the decisions that qualified for neither phase. Every
    decision lands in exactly one phase.
    """
    phase1_pool = [d for d in decisions if is_phase1(d)]
    phase2_pool = [d for d in decisions if not is_phase1(d) and is_phase2(d)]
    unqualified = [d for d in decisions if not is_phase1(d) and not is_phase2(d)]

    phase3 = unqualified + phase1_pool[PHASE1_CAP:] + phase2_pool[PHASE2_CAP:]

    return IntegrationPlan(
        phase1=tuple(d.title for d in phase1_pool[:PHASE1_CAP]),
        phase2=tuple(d.title for d in phase2_pool[:PHASE2_CAP]),
        phase3=tuple(d.title for d in phase3),
    )
