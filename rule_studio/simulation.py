"""
Simulation runner: rules + profile + events → evolved profile → ranked
products → narrative.

``run_simulation`` is the in-memory equivalent of the studio's "Run
simulation" button. Callers (CLI, tests, a future API layer) are responsible
for fetching rules and products; the runner evaluates whatever it is given,
re-filtering to ACTIVE rules itself.

Example event sets
------------------
``EXAMPLE_EVENT_SETS`` holds the canned scenarios offered to analysts:

  high-salary : one large salary credit
  renter      : one monthly rent transfer
  combo       : salary credit followed by rent transfer (the default)
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from rule_studio.engine.evaluator import evaluate_rules
from rule_studio.models.event import Event
from rule_studio.models.product import Product
from rule_studio.models.profile import Profile
from rule_studio.models.rule import Rule
from rule_studio.models.simulation import SimulationResult
from rule_studio.recommendations.ranker import recommend
from rule_studio.reporting.narrative import generate_narrative
from rule_studio.taxonomy.rule_taxonomy import RuleEvent

logger = logging.getLogger(__name__)

DEFAULT_EVENTS: tuple[Event, ...] = (
    Event(type=RuleEvent.SALARY_CREDIT, payload={"amount": 65000}),
    Event(
        type=RuleEvent.TRANSFER_POSTED,
        payload={"counterpartyLabel": "Rent - Mr. Sharma", "frequency": "monthly"},
    ),
)

EXAMPLE_EVENT_SETS: dict[str, tuple[Event, ...]] = {
    "high-salary": (
        Event(type=RuleEvent.SALARY_CREDIT, payload={"amount": 150000}),
    ),
    "renter": (
        Event(
            type=RuleEvent.TRANSFER_POSTED,
            payload={"counterpartyLabel": "House Rent Payment", "frequency": "monthly"},
        ),
    ),
    "combo": DEFAULT_EVENTS,
}


def example_events(name: str) -> list[Event]:
    """Return a copy of the named example event set.

    Raises:
        KeyError: If ``name`` is not one of ``EXAMPLE_EVENT_SETS``.
    """
    if name not in EXAMPLE_EVENT_SETS:
        raise KeyError(
            f"Unknown example '{name}'. Must be one of {sorted(EXAMPLE_EVENT_SETS)}."
        )
    return list(EXAMPLE_EVENT_SETS[name])


def run_simulation(
    rules:           list[Rule],
    products:        list[Product],
    profile:         Profile,
    events:          list[Event],
    *,
    now:             Optional[datetime] = None,
    score_precision: int = 2,
) -> SimulationResult:
    """Evaluate ``events`` and recommend products for the resulting profile.

    Args:
        rules:           Rule set (non-ACTIVE rules are ignored).
        products:        Product catalog (inactive products are dropped).
        profile:         Starting profile; returned unchanged as
                         ``original_profile``.
        events:          Events in processing order.
        now:             Timestamp for ``last_updated`` (defaults to now, UTC).
        score_precision: Decimal places for ranking scores.

    Returns:
        SimulationResult with both profiles, trace, recommendations and
        narrative.
    """
    evaluation = evaluate_rules(rules, profile, events, now=now)
    recommendations = recommend(products, evaluation.profile, precision=score_precision)
    narrative = generate_narrative(evaluation.trace, recommendations)

    logger.info(
        "Simulation for %s: %d event(s), %d rule firing(s), %d product(s) ranked.",
        profile.customer_id, len(events), len(evaluation.trace), len(recommendations),
    )

    return SimulationResult(
        original_profile=profile.model_copy(deep=True),
        new_profile=evaluation.profile,
        trace=evaluation.trace,
        recommendations=recommendations,
        narrative=narrative,
    )
