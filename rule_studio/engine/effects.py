"""
Effect application: copy-on-write profile mutation.

``apply_effect(profile, effect)`` never touches its input. It deep-copies
the profile, applies one effect to the copy, and returns the copy together
with a human-readable description for the trace:

    scoreDelta  "financialStability +10 (52 → 62)"
    addTag      'Added tag "stable-income"'     (only if newly added)
    removeTag   'Removed tag "renter"'          (only if actually removed)

A no-op (tag already present / absent, or an effect missing its required
fields) returns an empty description. Incomplete effects never raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rule_studio.models.profile import Profile
from rule_studio.models.rule import (
    AddTagEffect,
    Effect,
    RemoveTagEffect,
    ScoreDeltaEffect,
)
from rule_studio.utils.numbers import format_number

logger = logging.getLogger(__name__)


@dataclass
class EffectResult:
    """Outcome of applying one effect.

    Attributes:
        profile:     New profile snapshot (a deep copy of the input).
        description: Trace text; empty when the effect changed nothing.
    """

    profile:     Profile
    description: str = ""


def apply_effect(profile: Profile, effect: Effect) -> EffectResult:
    """Apply ``effect`` to a deep copy of ``profile``.

    Args:
        profile: Current profile snapshot (left untouched).
        effect:  One of ``ScoreDeltaEffect``, ``AddTagEffect``,
                 ``RemoveTagEffect``.

    Returns:
        EffectResult with the new snapshot and its description.
    """
    new_profile = profile.model_copy(deep=True)

    if isinstance(effect, ScoreDeltaEffect):
        if not effect.score or effect.delta is None:
            logger.debug("Skipping incomplete scoreDelta effect: %r", effect)
            return EffectResult(profile=new_profile)
        old = new_profile.scores.get(effect.score) or 0
        new = old + effect.delta
        new_profile.scores[effect.score] = new
        sign = "+" if effect.delta >= 0 else ""
        return EffectResult(
            profile=new_profile,
            description=(
                f"{effect.score} {sign}{format_number(effect.delta)} "
                f"({format_number(old)} → {format_number(new)})"
            ),
        )

    if isinstance(effect, AddTagEffect):
        if not effect.tag or effect.tag in new_profile.tags:
            return EffectResult(profile=new_profile)
        new_profile.tags.append(effect.tag)
        return EffectResult(profile=new_profile, description=f'Added tag "{effect.tag}"')

    if isinstance(effect, RemoveTagEffect):
        if not effect.tag or effect.tag not in new_profile.tags:
            return EffectResult(profile=new_profile)
        new_profile.tags.remove(effect.tag)
        return EffectResult(profile=new_profile, description=f'Removed tag "{effect.tag}"')

    logger.debug("Ignoring unsupported effect: %r", effect)
    return EffectResult(profile=new_profile)
