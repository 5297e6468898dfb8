"""
Recommendation scoring: evaluates one Product against one Profile.

Per-product pipeline (first match wins for the decision)
---------------------------------------------------------
    1. EXCLUSION : any tag in ``product.exclusions`` present on the profile
                   → HIDDEN, score 0, no breakdown, no weight computation.
                   The reported tag is the first one in *exclusions* order.
    2. THRESHOLD : every ``required_scores`` entry is checked
                   (``profile.scores.get(name, 0) >= threshold``). Each check
                   adds one ✓/✗ explanation line and records the observed
                   value in the breakdown. Any failure → HIDDEN.
    3. RANK SCORE: ``Σ profile.scores.get(name, 0) * weight`` over
                   ``weight_by_score``, rounded half-up (ties go towards
                   +infinity, so 0.125 becomes 0.13). Computed even when a
                   threshold failed, so hidden products can still be compared.

Explanation lines
-----------------
    Excluded: customer has "has-home-loan" tag
    ✓ financialStability: 62 ≥ 60
    ✗ homeOwnershipIntent: 35 < 50 required
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from rule_studio.models.product import Product
from rule_studio.models.profile import Number, Profile
from rule_studio.taxonomy.rule_taxonomy import Decision
from rule_studio.utils.numbers import format_number


@dataclass
class ProductScore:
    """Unranked scoring outcome for one product.

    Attributes:
        product:         The scored product.
        decision:        SHOWN or HIDDEN.
        score:           Rounded weighted ranking score.
        why:             Explanation lines, in check order.
        score_breakdown: Observed values for each thresholded score.
        excluded_by:     The exclusion tag that hid the product, if any.
    """

    product:         Product
    decision:        Decision
    score:           float
    why:             list[str] = field(default_factory=list)
    score_breakdown: dict[str, Number] = field(default_factory=dict)
    excluded_by:     Optional[str] = None


def find_exclusion(product: Product, profile: Profile) -> Optional[str]:
    """Return the first tag of ``product.exclusions`` the profile carries."""
    for tag in product.exclusions:
        if profile.has_tag(tag):
            return tag
    return None


def check_thresholds(
    product: Product,
    profile: Profile,
) -> tuple[bool, list[str], dict[str, Number]]:
    """Check every ``required_scores`` threshold.

    Returns:
        ``(all_met, why_lines, breakdown)``. The breakdown holds the observed
        value for every thresholded score, pass or fail.
    """
    all_met = True
    why: list[str] = []
    breakdown: dict[str, Number] = {}

    for name, threshold in product.required_scores.items():
        observed = profile.score(name)
        breakdown[name] = observed
        if observed >= threshold:
            why.append(f"✓ {name}: {format_number(observed)} ≥ {format_number(threshold)}")
        else:
            why.append(
                f"✗ {name}: {format_number(observed)} < {format_number(threshold)} required"
            )
            all_met = False

    return all_met, why, breakdown


def compute_rank_score(product: Product, profile: Profile, precision: int = 2) -> float:
    """Weighted sum of profile scores, rounded half-up to ``precision`` decimals.

    Exact halves go towards +infinity: 0.125 -> 0.13, -0.125 -> -0.12.
    """
    total = 0.0
    for name, weight in product.weight_by_score.items():
        total += profile.score(name) * weight
    if not math.isfinite(total):
        return total
    factor = 10 ** precision
    return math.floor(total * factor + 0.5) / factor


def score_product(product: Product, profile: Profile, precision: int = 2) -> ProductScore:
    """Run the exclusion → threshold → rank-score pipeline for one product.

    Args:
        product:   Product to evaluate (assumed active; the ranker filters).
        profile:   Profile to evaluate against.
        precision: Decimal places for the ranking score.

    Returns:
        ProductScore with decision, score, explanation and breakdown.
    """
    excluded_by = find_exclusion(product, profile)
    if excluded_by is not None:
        return ProductScore(
            product=product,
            decision=Decision.HIDDEN,
            score=0.0,
            why=[f'Excluded: customer has "{excluded_by}" tag'],
            excluded_by=excluded_by,
        )

    all_met, why, breakdown = check_thresholds(product, profile)
    return ProductScore(
        product=product,
        decision=Decision.SHOWN if all_met else Decision.HIDDEN,
        score=compute_rank_score(product, profile, precision),
        why=why,
        score_breakdown=breakdown,
    )
