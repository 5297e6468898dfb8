"""
ASCII terminal formatters for CLI output.

All formatters accept in-memory result objects and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Layout
------
Each formatter emits a ``=== Title ===`` header followed by a fixed-width
table, or a parenthesised placeholder line when there is nothing to show::

    === Recommendations ===
      Rank  Product                   Decision   Score
      -----------------------------------------------
         1  Home Loan                    SHOWN   59.20
             ✓ financialStability: 62 ≥ 60
"""

from __future__ import annotations

from rule_studio.models.product import ProductRecommendation
from rule_studio.models.simulation import TraceEntry
from rule_studio.reporting.diff import ProfileDiff
from rule_studio.utils.numbers import format_number


# ── Trace ─────────────────────────────────────────────────────────────────────


def format_trace_table(trace: list[TraceEntry]) -> str:
    """Format fired rules in firing order.

    Args:
        trace: Trace entries from ``evaluate_rules``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Rule Trace ===")

    if not trace:
        lines.append("  (no rules triggered)")
        return "\n".join(lines)

    header = f"  {'#':>3}  {'Rule':<24}  {'Name':<36}  Effects"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for i, entry in enumerate(trace, start=1):
        effects = entry.effect_description or "(no changes)"
        lines.append(
            f"  {i:>3}  {entry.rule_id[:24]:<24}  {entry.rule_name[:36]:<36}  {effects}"
        )
    return "\n".join(lines)


# ── Profile diff ──────────────────────────────────────────────────────────────


def format_profile_diff(diff: ProfileDiff, customer_id: str = "") -> str:
    """Format score and tag changes between two profile snapshots.

    Unchanged scores are listed without an arrow so the reader sees the
    full score set; changed scores show ``before -> after (delta)``.
    """
    lines: list[str] = []
    lines.append("")
    if customer_id:
        lines.append(f"=== Profile Changes ({customer_id}) ===")
    else:
        lines.append("=== Profile Changes ===")

    lines.append("  Scores:")
    if not diff.scores:
        lines.append("    (no scores)")
    for change in diff.scores:
        before = format_number(change.before)
        if change.changed:
            sign = "+" if change.delta > 0 else ""
            lines.append(
                f"    {change.name:<28}  {before:>8} -> {format_number(change.after):<8}"
                f" ({sign}{format_number(change.delta)})"
            )
        else:
            lines.append(f"    {change.name:<28}  {before:>8}")

    lines.append("  Tags:")
    if not (diff.added_tags or diff.removed_tags or diff.unchanged_tags):
        lines.append("    (no tags)")
    for tag in diff.added_tags:
        lines.append(f"    + {tag}")
    for tag in diff.removed_tags:
        lines.append(f"    - {tag}")
    for tag in diff.unchanged_tags:
        lines.append(f"      {tag}")

    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations_table(
    recommendations: list[ProductRecommendation],
    show_why:        bool = True,
) -> str:
    """Format ranked recommendations, one row per product.

    Args:
        recommendations: Output of ``recommend()`` (already in rank order).
        show_why:        Append the explanation lines under each row.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommendations ===")

    if not recommendations:
        lines.append("  (no active products in catalog)")
        return "\n".join(lines)

    header = f"  {'Rank':>4}  {'Product':<28}  {'Decision':>8}  {'Score':>8}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for rec in recommendations:
        lines.append(
            f"  {rec.rank:>4}  {rec.product.name[:28]:<28}  "
            f"{rec.decision.value:>8}  {rec.score:>8.2f}"
        )
        if show_why:
            for reason in rec.why:
                lines.append(f"          {reason}")

    return "\n".join(lines)
