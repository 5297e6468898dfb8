"""
Rule evaluator: runs a batch of events through the active rule set.

Algorithm
---------
1. Keep only ``ACTIVE`` rules.
2. Stable-sort by ``priority`` descending (ties keep input order; there is
   no secondary key).
3. Deep-copy the starting profile; this copy is the *running* profile.
4. For each event, in input order:
     for each sorted rule whose ``event`` matches the event type:
       - rebuild the context from the running profile (so effects of a
         higher-priority rule are visible to the next rule);
       - if all conditions hold, apply every effect in order and append one
         ``TraceEntry`` with the ``"; "``-joined non-empty descriptions.
5. Stamp ``last_updated`` and return the profile with the trace.

Malformed rules never raise here: they fail to match or apply as no-ops.
Only structurally wrong top-level arguments (not lists) are rejected.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from rule_studio.engine.conditions import build_context, conditions_met
from rule_studio.engine.effects import apply_effect
from rule_studio.models.event import Event
from rule_studio.models.profile import Profile
from rule_studio.models.rule import Rule
from rule_studio.models.simulation import EvaluationResult, TraceEntry
from rule_studio.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


def sort_active_rules(rules: list[Rule]) -> list[Rule]:
    """Return the ``ACTIVE`` rules ordered by priority, highest first.

    ``sorted`` is stable, so equal priorities keep their input order.
    """
    active = [r for r in rules if r.is_active]
    return sorted(active, key=lambda r: -r.priority)


def evaluate_rules(
    rules:           list[Rule],
    initial_profile: Profile,
    events:          list[Event],
    *,
    now:             Optional[datetime] = None,
) -> EvaluationResult:
    """Evaluate ``events`` against ``rules`` starting from ``initial_profile``.

    Args:
        rules:           Rule set; non-ACTIVE rules are ignored.
        initial_profile: Starting profile. Never mutated.
        events:          Events to process, strictly in this order.
        now:             Timestamp for ``last_updated``. Defaults to the
                         current UTC time.

    Returns:
        EvaluationResult with the final profile and the ordered trace.

    Raises:
        TypeError: If ``rules`` or ``events`` is not a list.
    """
    if not isinstance(rules, list):
        raise TypeError(f"rules must be a list, got {type(rules).__name__}.")
    if not isinstance(events, list):
        raise TypeError(f"events must be a list, got {type(events).__name__}.")

    sorted_rules = sort_active_rules(rules)
    profile = initial_profile.model_copy(deep=True)
    trace: list[TraceEntry] = []

    for event in events:
        matching = [r for r in sorted_rules if r.event == event.type]
        for rule in matching:
            context = build_context(profile, event)
            if not conditions_met(rule.conditions, context):
                logger.debug("Rule %s did not match %s.", rule.id, event.type)
                continue

            descriptions: list[str] = []
            for effect in rule.effects:
                result = apply_effect(profile, effect)
                profile = result.profile
                if result.description:
                    descriptions.append(result.description)

            trace.append(
                TraceEntry(
                    rule_id=rule.id,
                    rule_name=rule.name,
                    effect_description="; ".join(descriptions),
                )
            )
            logger.debug("Rule %s fired on %s: %s", rule.id, event.type, descriptions)

    profile.last_updated = now or utcnow()

    logger.info(
        "Evaluated %d event(s) against %d active rule(s): %d firing(s).",
        len(events), len(sorted_rules), len(trace),
    )
    return EvaluationResult(profile=profile, trace=trace)
