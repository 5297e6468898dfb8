"""
Business event model — the trigger for rule evaluation.

``Event`` is ephemeral: it is supplied per evaluation request and is never
persisted by the engine. The ``payload`` is an arbitrary mapping whose keys
are addressed by condition paths of the form ``event.<key>[.<nested>]``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from rule_studio.taxonomy.rule_taxonomy import RuleEvent


class Event(BaseModel):
    """A discrete business occurrence with its payload.

    Attributes:
        type: Event kind; selects which rules are eligible.
        payload: Event-specific fields, e.g. ``{"amount": 65000}``.
    """

    model_config = ConfigDict(frozen=True)

    type: RuleEvent
    payload: dict[str, Any] = {}
