"""
Dotted-path resolution against the evaluation context.

``resolve_path(context, "profile.scores.creditReadiness")`` walks the nested
mappings one segment at a time. Missing data is expected (payload keys vary
by event, profiles may lack a score) so any dead end returns ``None``
instead of raising. There is no list-index syntax.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def resolve_path(context: Mapping[str, Any], path: str) -> Any:
    """Return the value at ``path`` inside ``context``, or ``None``.

    Args:
        context: Root mapping, normally from ``build_context()``.
        path:    Dot-separated field names, e.g. ``"event.amount"``.

    Returns:
        The resolved value, or ``None`` when any segment is missing or an
        intermediate value is not a mapping.

    Raises:
        TypeError: If ``context`` itself is not a mapping.
    """
    if not isinstance(context, Mapping):
        raise TypeError(
            f"context must be a mapping, got {type(context).__name__}."
        )

    current: Any = context
    for part in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current
