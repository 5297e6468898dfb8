"""
Number rendering shared by trace descriptions and recommendation text.

Scores arrive from JSON as ints or floats. Text output should read like the
JSON literal the author wrote: ``62`` not ``62.0``. Fractional values are
never rounded; a trace must show the exact old, delta and new values.
"""

from __future__ import annotations

from typing import Union


def format_number(value: Union[int, float]) -> str:
    """Format a score value without a spurious trailing ``.0``.

    ``62`` → ``"62"``, ``62.0`` → ``"62"``, ``59.9999999`` → ``"59.9999999"``.
    Other floats use ``repr``, the shortest string that round-trips.
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
