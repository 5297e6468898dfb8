"""
Condition evaluation: one operator, one context value, one literal.

Context shape
-------------
``build_context(profile, event)`` produces::

    {
        "event":   event.payload,
        "profile": {
            "static":     profile.static_data,
            "behavioral": profile.behavioral,
            "scores":     profile.scores,
            "tags":       profile.tags,
        },
    }

Operator semantics
------------------
    >, <, >=, <=  numeric; both sides coerced, NaN never matches
    =             case-insensitive equality of the stringified values
    contains      case-insensitive substring of the stringified values
    in            target must be a list; any element equals (as for ``=``)
    (other)       False

An absent (``None``) context value never satisfies any operator. Nothing in
this module raises on bad rule data: a malformed condition simply does not
match.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from typing import Any

from rule_studio.engine.paths import resolve_path
from rule_studio.models.event import Event
from rule_studio.models.profile import Profile
from rule_studio.models.rule import Condition
from rule_studio.taxonomy.rule_taxonomy import ConditionOp


def build_context(profile: Profile, event: Event) -> dict[str, Any]:
    """Build the lookup root that condition paths resolve against."""
    return {
        "event": event.payload,
        "profile": {
            "static":     profile.static_data,
            "behavioral": profile.behavioral,
            "scores":     profile.scores,
            "tags":       profile.tags,
        },
    }


def check_condition(context_value: Any, op: str, target: Any) -> bool:
    """Return whether ``context_value <op> target`` holds.

    Args:
        context_value: Value resolved from the context (``None`` if absent).
        op:            Operator string; see module docstring.
        target:        Literal from the condition; a list for ``in``.

    Returns:
        ``True`` only when the comparison holds. Absent values, NaN
        coercions, non-list ``in`` targets and unknown operators are all
        ``False``.
    """
    if context_value is None:
        return False

    if op in (ConditionOp.GT, ConditionOp.LT, ConditionOp.GTE, ConditionOp.LTE):
        left  = _to_number(context_value)
        right = _to_number(target)
        if math.isnan(left) or math.isnan(right):
            return False
        if op == ConditionOp.GT:
            return left > right
        if op == ConditionOp.LT:
            return left < right
        if op == ConditionOp.GTE:
            return left >= right
        return left <= right

    if op == ConditionOp.EQ:
        return _normalize(context_value) == _normalize(target)

    if op == ConditionOp.CONTAINS:
        return _normalize(target) in _normalize(context_value)

    if op == ConditionOp.IN:
        if isinstance(target, (str, bytes)) or not isinstance(target, Sequence):
            return False
        needle = _normalize(context_value)
        return any(_normalize(item) == needle for item in target)

    return False


def conditions_met(conditions: Sequence[Condition], context: Mapping[str, Any]) -> bool:
    """AND over ``conditions``; an empty sequence is vacuously ``True``."""
    return all(
        check_condition(resolve_path(context, cond.source), cond.op, cond.value)
        for cond in conditions
    )


# ── Coercion helpers ──────────────────────────────────────────────────────────

def _to_number(value: Any) -> float:
    """Coerce ``value`` to float; anything unparseable becomes NaN.

    Booleans count as 1/0 and a blank string as 0, so ``true > 0`` and
    ``"" <= 0`` behave the same way JSON-authored rules expect.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _stringify(value: Any) -> str:
    """Render ``value`` the way JSON literals read.

    ``True`` → ``"true"``, ``65000.0`` → ``"65000"``, ``["a", "b"]`` →
    ``"a,b"``, ``None`` → ``"null"``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, Mapping):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


def _normalize(value: Any) -> str:
    return _stringify(value).lower()
