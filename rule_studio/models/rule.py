"""
Declarative rule models: conditions, effects, and the rule itself.

A ``Rule`` says: *when* ``event`` happens and *all* ``conditions`` hold,
apply ``effects`` in order. Rules are authored in a CRUD layer (manually or
drafted by an assistant) and arrive here as plain JSON; both sources produce
the same objects.

Leniency
--------
Condition and effect fields are optional. An incompletely authored
rule must still load — the evaluator then treats it as never matching
(conditions) or as a no-op (effects) instead of failing the whole batch.
Only the effect discriminator ``type`` is strict: an effect of unknown kind
is rejected at load time.

``Condition.op`` is a plain string, not ``ConditionOp``: unknown operators
evaluate to ``False`` rather than failing validation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rule_studio.models.profile import Number
from rule_studio.taxonomy.rule_taxonomy import RuleEvent, RuleStatus

ConditionValue = Union[bool, int, float, str, list[Union[str, int, float, bool]]]


class Condition(BaseModel):
    """One comparison between a context path and a literal.

    Attributes:
        source: Dotted path resolved against the evaluation context,
            e.g. ``"event.amount"`` or ``"profile.scores.creditReadiness"``.
        op: Operator string (see ``ConditionOp``).
        value: Literal to compare against; a list for the ``in`` operator.
    """

    model_config = ConfigDict(frozen=True)

    source: str = ""
    op: str = ""
    value: Optional[ConditionValue] = None


class ScoreDeltaEffect(BaseModel):
    """Add ``delta`` (may be negative) to the named score."""

    model_config = ConfigDict(frozen=True)

    type: Literal["scoreDelta"] = "scoreDelta"
    score: Optional[str] = None
    delta: Optional[Number] = None


class AddTagEffect(BaseModel):
    """Add ``tag`` to the profile's tag set if absent."""

    model_config = ConfigDict(frozen=True)

    type: Literal["addTag"] = "addTag"
    tag: Optional[str] = None


class RemoveTagEffect(BaseModel):
    """Remove ``tag`` from the profile's tag set if present."""

    model_config = ConfigDict(frozen=True)

    type: Literal["removeTag"] = "removeTag"
    tag: Optional[str] = None


Effect = Annotated[
    Union[ScoreDeltaEffect, AddTagEffect, RemoveTagEffect],
    Field(discriminator="type"),
]


class RuleScopes(BaseModel):
    """Targeting hints carried on the rule record. Not evaluated."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    channels: list[str] = []
    segments: list[str] = []
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None


class RuleMetadata(BaseModel):
    """Authoring metadata carried on the rule record. Not evaluated."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    owner: Optional[str] = None
    last_edited_by: Optional[str] = None
    notes: Optional[str] = None


class Rule(BaseModel):
    """A prioritized, event-scoped, condition-gated set of effects.

    Attributes:
        id: Stable rule identifier, e.g. ``"r-salary"``.
        name: Display name used in traces and narratives.
        status: Only ``RuleStatus.ACTIVE`` rules are evaluated.
        priority: Higher values evaluate earlier; ties keep input order.
        event: The single event kind that can trigger this rule.
        conditions: ANDed conditions; an empty list always matches.
        effects: Applied in list order when the rule fires.
        scopes: Optional targeting hints (informational).
        metadata: Optional authoring metadata (informational).
        version: Record version maintained by the CRUD layer.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    status: RuleStatus = RuleStatus.DRAFT
    priority: int = 50
    event: RuleEvent
    conditions: list[Condition] = []
    effects: list[Effect] = []
    scopes: Optional[RuleScopes] = None
    metadata: Optional[RuleMetadata] = None
    version: int = 1

    @property
    def is_active(self) -> bool:
        return self.status == RuleStatus.ACTIVE
