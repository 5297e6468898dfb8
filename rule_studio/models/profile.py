"""
Customer profile model — the state that rules evolve.

``Profile`` carries two read-only attribute maps (``static_data`` and
``behavioral``, maintained by external ingestion) and two rule-mutable
collections: numeric ``scores`` and string ``tags``.

``Profile`` is the one model that is NOT frozen: effects mutate ``scores``
and ``tags`` and the evaluator stamps ``last_updated``. The engine only ever
mutates its own deep copy (``model_copy(deep=True)``), never the caller's
instance.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

Number = Union[int, float]


class Profile(BaseModel):
    """A customer's evolving behavioral profile.

    Attributes:
        customer_id: Opaque customer identifier.
        static_data: Slow-changing attributes (age, employment, flags).
        behavioral: Observed behavior counters (visits, payments per month).
        scores: Score name → value. Unbounded; absent scores read as 0.
        tags: De-duplicated labels. Insertion order is kept for display only.
        last_updated: Set by the rule evaluator on every evaluation pass.
    """

    model_config = ConfigDict(
        frozen=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    customer_id: str
    static_data: dict[str, Any] = {}
    behavioral: dict[str, Any] = {}
    scores: dict[str, Number] = {}
    tags: list[str] = []
    last_updated: Optional[datetime] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))

    def score(self, name: str) -> Number:
        """Return the named score, or ``0`` when the profile has none."""
        return self.scores.get(name) or 0

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
