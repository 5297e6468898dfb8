"""
Product catalog and recommendation output models.

``Product`` describes eligibility (``required_scores`` thresholds and
``exclusions`` tags) and ranking (``weight_by_score``) for one offering.

``ProductRecommendation`` is the per-product outcome of scoring a profile:
SHOWN/HIDDEN, a ranking score, the explanation lines, and the observed
score values that the thresholds were checked against.

Both models are frozen. The ranker assigns ``rank`` when it builds the
final objects, after ordering.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from rule_studio.models.profile import Number
from rule_studio.taxonomy.rule_taxonomy import Decision


class Product(BaseModel):
    """A recommendable product.

    Attributes:
        id: Stable product identifier, e.g. ``"home-loan"``.
        name: Display name.
        required_scores: Score name → minimum value (inclusive).
        weight_by_score: Score name → weight for the ranking score.
        exclusions: Tags that hide the product outright, checked in order.
        active: Inactive products are dropped from recommendations entirely.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    required_scores: dict[str, Number] = {}
    weight_by_score: dict[str, Number] = {}
    exclusions: list[str] = []
    active: bool = True


class ProductRecommendation(BaseModel):
    """Recommendation outcome for one product.

    Attributes:
        product: The scored product.
        decision: ``SHOWN`` or ``HIDDEN``.
        rank: 1-based position in the combined SHOWN-then-HIDDEN ordering.
        score: Weighted ranking score, rounded. ``0`` when excluded by tag.
        why: Explanation lines (exclusion reason or one line per threshold).
        score_breakdown: Observed value of each thresholded score.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    product: Product
    decision: Decision
    rank: int
    score: float
    why: list[str] = []
    score_breakdown: dict[str, Number] = {}

    @field_validator("rank")
    @classmethod
    def validate_rank_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"rank must be >= 1, got {v}.")
        return v

    @property
    def is_shown(self) -> bool:
        return self.decision == Decision.SHOWN
