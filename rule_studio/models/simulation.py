"""
Evaluation and simulation result models.

``TraceEntry`` records one rule firing. ``EvaluationResult`` is the output of
the rule evaluator; ``SimulationResult`` bundles a full simulation run
(evaluation + recommendation + narrative) for reporting.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from rule_studio.models.product import ProductRecommendation
from rule_studio.models.profile import Profile


class TraceEntry(BaseModel):
    """One fired rule, in firing order.

    Attributes:
        rule_id: ``Rule.id`` of the fired rule.
        rule_name: ``Rule.name`` at evaluation time.
        effect_description: ``"; "``-joined non-empty effect descriptions.
            Empty when every effect was a no-op.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    rule_id: str
    rule_name: str
    effect_description: str = ""


class EvaluationResult(BaseModel):
    """Output of ``evaluate_rules``: final profile plus the ordered trace."""

    model_config = ConfigDict(frozen=True)

    profile: Profile
    trace: list[TraceEntry] = []


class SimulationResult(BaseModel):
    """Everything produced by one simulation run.

    Attributes:
        original_profile: The profile as supplied (never mutated).
        new_profile: The profile after all events were evaluated.
        trace: Fired rules in order.
        recommendations: Ranked product recommendations for ``new_profile``.
        narrative: Human-readable summary of ``trace`` and ``recommendations``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    original_profile: Profile
    new_profile: Profile
    trace: list[TraceEntry] = []
    recommendations: list[ProductRecommendation] = []
    narrative: str = ""
