"""
Recommendation ranker: scores the active catalog and assigns ranks.

Usage flow
----------
1. score_catalog(products, profile)
   -> list[ProductScore]  (active products only, catalog order)

2. order_scores(scored)
   -> list[ProductScore]  (SHOWN first, then HIDDEN; score desc; stable)

3. recommend(products, profile)
   -> list[ProductRecommendation]  (steps 1-2 plus 1-based ranks)

Ranks run continuously across the SHOWN/HIDDEN boundary: with two shown and
two hidden products the ranks are 1, 2, 3, 4. Equal scores within a
partition keep the catalog's relative order; no secondary key is introduced.
"""

from __future__ import annotations

import logging

from rule_studio.models.product import Product, ProductRecommendation
from rule_studio.models.profile import Profile
from rule_studio.recommendations.scorer import ProductScore, score_product
from rule_studio.taxonomy.rule_taxonomy import Decision

logger = logging.getLogger(__name__)


def score_catalog(
    products:  list[Product],
    profile:   Profile,
    precision: int = 2,
) -> list[ProductScore]:
    """Score every active product; inactive products are dropped entirely.

    Args:
        products:  Catalog in display order.
        profile:   Profile to score against.
        precision: Decimal places for ranking scores.

    Returns:
        ProductScore list in catalog order.
    """
    scored: list[ProductScore] = []
    for product in products:
        if not product.active:
            continue
        ps = score_product(product, profile, precision)
        if ps.excluded_by is not None:
            logger.debug("Product %s excluded by tag %r", product.id, ps.excluded_by)
        elif ps.decision == Decision.HIDDEN:
            logger.debug("Product %s hidden: %s", product.id, "; ".join(ps.why))
        scored.append(ps)
    return scored


def order_scores(scored: list[ProductScore]) -> list[ProductScore]:
    """Order SHOWN before HIDDEN, each partition by score descending.

    ``sorted`` is stable, so ties keep their incoming (catalog) order.
    """
    return sorted(
        scored,
        key=lambda ps: (ps.decision != Decision.SHOWN, -ps.score),
    )


def recommend(
    products:  list[Product],
    profile:   Profile,
    precision: int = 2,
) -> list[ProductRecommendation]:
    """Score, order and rank the catalog for ``profile``.

    Args:
        products:  Product catalog; inactive entries are excluded.
        profile:   Profile (typically the evaluator's output).
        precision: Decimal places for ranking scores.

    Returns:
        ProductRecommendation list in rank order (rank 1 first).

    Raises:
        TypeError: If ``products`` is not a list.
    """
    if not isinstance(products, list):
        raise TypeError(f"products must be a list, got {type(products).__name__}.")

    ordered = order_scores(score_catalog(products, profile, precision))

    recommendations = [
        ProductRecommendation(
            product=ps.product,
            decision=ps.decision,
            rank=rank,
            score=ps.score,
            why=ps.why,
            score_breakdown=ps.score_breakdown,
        )
        for rank, ps in enumerate(ordered, start=1)
    ]

    shown = sum(1 for r in recommendations if r.is_shown)
    logger.info(
        "Ranked %d product(s) for %s: %d shown, %d hidden.",
        len(recommendations), profile.customer_id, shown, len(recommendations) - shown,
    )
    return recommendations
