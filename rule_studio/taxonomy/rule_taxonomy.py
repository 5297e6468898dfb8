"""
Rule taxonomy for customer profile rules.

Every rule and product recommendation is described by a handful of closed
vocabularies:
  - ``RuleStatus``   — lifecycle state; only ``ACTIVE`` rules are evaluated.
  - ``RuleEvent``    — the business event kind that can trigger a rule.
  - ``ConditionOp``  — comparison operators understood by the evaluator.
  - ``EffectType``   — the three kinds of profile mutation a rule can apply.
  - ``Decision``     — product visibility after recommendation scoring.

``ConditionOp`` is *not* enforced on ``Condition.op`` — unknown
operators must load and then evaluate to ``False``. The enum is the catalog
of what the evaluator implements.

Usage example::

    from rule_studio.taxonomy.rule_taxonomy import RuleEvent, RuleStatus

    event  = RuleEvent.SALARY_CREDIT
    status = RuleStatus.ACTIVE

This module has NO imports from any other ``rule_studio`` package.
"""

from enum import StrEnum


class RuleStatus(StrEnum):
    """Lifecycle state of a rule record."""

    DRAFT = "DRAFT"
    """Being authored; never evaluated."""

    ACTIVE = "ACTIVE"
    """Published; participates in evaluation."""

    INACTIVE = "INACTIVE"
    """Disabled after publication; never evaluated."""


class RuleEvent(StrEnum):
    """Business event kinds that can trigger rule evaluation."""

    LOGIN = "LOGIN"
    """Customer signed in to a digital channel."""

    SALARY_CREDIT = "SALARY_CREDIT"
    """Salary deposit posted to the account."""

    TRANSFER_POSTED = "TRANSFER_POSTED"
    """Outgoing transfer (rent, bills, peers) settled."""

    MARKETPLACE_VIEW = "MARKETPLACE_VIEW"
    """Customer browsed a product category in the marketplace."""


class ConditionOp(StrEnum):
    """Comparison operators implemented by the condition evaluator."""

    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    EQ = "="
    CONTAINS = "contains"
    IN = "in"


class EffectType(StrEnum):
    """Discriminator values for rule effects."""

    SCORE_DELTA = "scoreDelta"
    ADD_TAG = "addTag"
    REMOVE_TAG = "removeTag"


class Decision(StrEnum):
    """Product visibility after recommendation scoring."""

    SHOWN = "SHOWN"
    HIDDEN = "HIDDEN"


# ── Authoring catalog ─────────────────────────────────────────────────────────
# Suggestions surfaced to rule authors. Not enforced by the evaluator: any
# dotted path and any score name is accepted.

EVENT_LABELS: dict[RuleEvent, str] = {
    RuleEvent.LOGIN:            "Login",
    RuleEvent.SALARY_CREDIT:    "Salary Credit",
    RuleEvent.TRANSFER_POSTED:  "Transfer Posted",
    RuleEvent.MARKETPLACE_VIEW: "Marketplace View",
}

OPERATOR_LABELS: dict[ConditionOp, str] = {
    ConditionOp.GT:       "Greater than",
    ConditionOp.LT:       "Less than",
    ConditionOp.EQ:       "Equals",
    ConditionOp.GTE:      "Greater or equal",
    ConditionOp.LTE:      "Less or equal",
    ConditionOp.CONTAINS: "Contains",
    ConditionOp.IN:       "In list",
}

KNOWN_SCORES: tuple[str, ...] = (
    "financialStability",
    "homeOwnershipIntent",
    "creditReadiness",
    "digitalEngagement",
)

# (path, label, value type)
FIELD_SUGGESTIONS: tuple[tuple[str, str, str], ...] = (
    ("event.amount",                             "Event Amount",              "number"),
    ("event.counterpartyLabel",                  "Counterparty Label",        "string"),
    ("event.frequency",                          "Event Frequency",           "string"),
    ("event.category",                           "Event Category",            "string"),
    ("profile.static.age",                       "Customer Age",              "number"),
    ("profile.static.employment",                "Employment Status",         "string"),
    ("profile.static.hasHomeLoan",               "Has Home Loan",             "boolean"),
    ("profile.behavioral.salaryCreditsPerMonth", "Salary Credits/Month",      "number"),
    ("profile.behavioral.rentPaymentsPerMonth",  "Rent Payments/Month",       "number"),
    ("profile.behavioral.marketplaceVisits",     "Marketplace Visits",        "number"),
    ("profile.scores.financialStability",        "Financial Stability Score", "number"),
    ("profile.scores.homeOwnershipIntent",       "Home Ownership Intent",     "number"),
    ("profile.scores.creditReadiness",           "Credit Readiness",          "number"),
    ("profile.scores.digitalEngagement",         "Digital Engagement",        "number"),
)
