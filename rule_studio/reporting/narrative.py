"""
Narrative and rule-preview text.

``generate_narrative(trace, recommendations)`` summarises a simulation::

    2 rules matched:
    • "Salary credit boosts stability": financialStability +10 (52 → 62); Added tag "stable-income"
    • "Recurring rent → renter intent": homeOwnershipIntent +20 (35 → 55); Added tag "renter"

    Recommendation Summary:
    Showing: Home Loan
    Hidden: Personal Loan, Investment Account, Credit Card

``generate_rule_preview(rule)`` renders a one-line description of a rule
for authors reviewing it before publication.
"""

from __future__ import annotations

import json
from typing import Any

from rule_studio.models.product import ProductRecommendation
from rule_studio.models.rule import (
    AddTagEffect,
    Effect,
    RemoveTagEffect,
    Rule,
    ScoreDeltaEffect,
)
from rule_studio.models.simulation import TraceEntry
from rule_studio.taxonomy.rule_taxonomy import Decision
from rule_studio.utils.numbers import format_number

NO_RULES_TRIGGERED = "No rules were triggered by the provided events."
INCOMPLETE_RULE_PREVIEW = "Complete the rule configuration to see preview..."


def generate_narrative(
    trace:           list[TraceEntry],
    recommendations: list[ProductRecommendation],
) -> str:
    """Render the trace and the SHOWN/HIDDEN split as plain text."""
    parts: list[str] = []

    if not trace:
        parts.append(NO_RULES_TRIGGERED)
    else:
        plural = "s" if len(trace) > 1 else ""
        parts.append(f"{len(trace)} rule{plural} matched:")
        for entry in trace:
            parts.append(f'• "{entry.rule_name}": {entry.effect_description}')

    parts.append("")
    parts.append("Recommendation Summary:")

    shown  = [r.product.name for r in recommendations if r.decision == Decision.SHOWN]
    hidden = [r.product.name for r in recommendations if r.decision == Decision.HIDDEN]
    if shown:
        parts.append(f"Showing: {', '.join(shown)}")
    if hidden:
        parts.append(f"Hidden: {', '.join(hidden)}")

    return "\n".join(parts)


def generate_rule_preview(rule: Rule) -> str:
    """Return a one-line, human-readable summary of ``rule``.

    Example::

        When **salary credit** and amount > 50000 → financialStability +10, add tag "stable-income"

    Rules without conditions or effects get a placeholder asking the author
    to finish the configuration.
    """
    if not rule.conditions or not rule.effects:
        return INCOMPLETE_RULE_PREVIEW

    event_label = rule.event.value.replace("_", " ", 1).lower()

    condition_parts = [
        f"{(cond.source.split('.')[-1] or cond.source)} {cond.op} {_json_literal(cond.value)}"
        for cond in rule.conditions
    ]
    effect_parts = [text for text in (_describe_effect(e) for e in rule.effects) if text]

    return (
        f"When **{event_label}** and {' and '.join(condition_parts)} "
        f"→ {', '.join(effect_parts)}"
    )


# ── Helpers ───────────────────────────────────────────────────────────────────

def _describe_effect(effect: Effect) -> str:
    if isinstance(effect, ScoreDeltaEffect):
        if not effect.score or effect.delta is None:
            return ""
        sign = "+" if effect.delta >= 0 else ""
        return f"{effect.score} {sign}{format_number(effect.delta)}"
    if isinstance(effect, AddTagEffect) and effect.tag:
        return f'add tag "{effect.tag}"'
    if isinstance(effect, RemoveTagEffect) and effect.tag:
        return f'remove tag "{effect.tag}"'
    return ""


def _json_literal(value: Any) -> str:
    """Compact JSON rendering; integral floats print as integers."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
