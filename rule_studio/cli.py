"""
Rule Studio — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load seed/input files (command-line paths override config defaults).
  4. Execute action (evaluate, rank, preview).
  5. Report result to stdout.

Install and run::

    pip install -e .
    rule-studio --help
    rule-studio validate-config
    rule-studio simulate
    rule-studio simulate --example high-salary --output-dir data/outputs
    rule-studio simulate --save-reports
    rule-studio preview-rules --status ACTIVE
    rule-studio recommend
    rule-studio vocabulary
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="rule-studio",
    help="Rule Studio — event-driven profile rules and product recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from rule_studio.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from rule_studio.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_or_exit(loader, path: Path, what: str):
    """Run one of the ingestion loaders, exiting with code 1 on failure."""
    try:
        return loader(path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] Could not load {what}:\n{exc}", err=True)
        raise typer.Exit(code=1)


def _pick(override: Optional[str], default: Path) -> Path:
    return Path(override) if override else default


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Seed directory:   {config.data.seed_dir}")
    typer.echo(f"  Rules file:       {config.data.rules_file}")
    typer.echo(f"  Products file:    {config.data.products_file}")
    typer.echo(f"  Output directory: {config.data.output_dir}")
    typer.echo(f"  Score precision:  {config.engine.score_precision}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("simulate")
def simulate(
    rules_file: Optional[str] = typer.Option(
        None, "--rules", help="Rules JSON file. Defaults to the seed rules."
    ),
    products_file: Optional[str] = typer.Option(
        None, "--products", help="Products JSON file. Defaults to the seed catalog."
    ),
    profile_file: Optional[str] = typer.Option(
        None, "--profile", help="Profile JSON file. Defaults to the seed profile."
    ),
    events_file: Optional[str] = typer.Option(
        None, "--events", help="Events JSON file. Defaults to the seed events."
    ),
    example: Optional[str] = typer.Option(
        None,
        "--example",
        help="Use a canned event set instead of --events: high-salary, renter, combo.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Write recommendation CSV + simulation JSON reports to this directory.",
    ),
    save_reports: bool = typer.Option(
        False,
        "--save-reports",
        help="Write reports to the configured output directory ([data].output_dir).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the simulation result as JSON instead of tables.",
    ),
) -> None:
    """Run events through the active rules and rank products for the result.

    Prints the rule trace, profile changes, ranked recommendations and the
    narrative summary.
    """
    from rule_studio.ingestion.loaders import (
        load_events,
        load_products,
        load_profile,
        load_rules,
    )
    from rule_studio.recommendations.reporter import (
        write_recommendation_csv,
        write_simulation_json,
    )
    from rule_studio.reporting.diff import diff_profiles
    from rule_studio.reporting.formatters import (
        format_profile_diff,
        format_recommendations_table,
        format_trace_table,
    )
    from rule_studio.simulation import example_events, run_simulation

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if example and events_file:
        typer.echo("[ERROR] Use either --events or --example, not both.", err=True)
        raise typer.Exit(code=1)

    rules = _load_or_exit(load_rules, _pick(rules_file, config.data.rules_path), "rules")
    products = _load_or_exit(
        load_products, _pick(products_file, config.data.products_path), "products"
    )
    profile = _load_or_exit(
        load_profile, _pick(profile_file, config.data.profile_path), "profile"
    )

    if example:
        try:
            events = example_events(example)
        except KeyError as exc:
            typer.echo(f"[ERROR] {exc.args[0]}", err=True)
            raise typer.Exit(code=1)
    else:
        events = _load_or_exit(
            load_events, _pick(events_file, config.data.events_path), "events"
        )

    result = run_simulation(
        rules, products, profile, events,
        score_precision=config.engine.score_precision,
    )

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
    else:
        typer.echo(f"Simulating {len(events)} event(s) for customer {profile.customer_id}")
        typer.echo(format_trace_table(result.trace))
        typer.echo(
            format_profile_diff(
                diff_profiles(result.original_profile, result.new_profile),
                customer_id=profile.customer_id,
            )
        )
        typer.echo(format_recommendations_table(result.recommendations))
        typer.echo("")
        typer.echo(result.narrative)

    report_dir = output_dir or (config.data.output_dir if save_reports else None)
    if report_dir:
        out = Path(report_dir)
        csv_path = write_recommendation_csv(
            result.recommendations, out, result.new_profile.customer_id
        )
        json_path = write_simulation_json(result, out)
        # Keep stdout parseable when --json is set.
        typer.echo(f"[OK] Reports written: {csv_path}, {json_path}", err=as_json)


@app.command("preview-rules")
def preview_rules(
    rules_file: Optional[str] = typer.Option(
        None, "--rules", help="Rules JSON file. Defaults to the seed rules."
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
    status: Optional[str] = typer.Option(
        None,
        "--status",
        help="Only preview rules with this status: DRAFT, ACTIVE, INACTIVE.",
    ),
) -> None:
    """Print a one-line natural-language preview for each rule."""
    from rule_studio.ingestion.loaders import load_rules
    from rule_studio.reporting.narrative import generate_rule_preview
    from rule_studio.taxonomy.rule_taxonomy import RuleStatus

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    wanted: Optional[RuleStatus] = None
    if status:
        try:
            wanted = RuleStatus(status.upper())
        except ValueError:
            valid = ", ".join(s.value for s in RuleStatus)
            typer.echo(f"[ERROR] Unknown status '{status}'. Must be one of: {valid}.", err=True)
            raise typer.Exit(code=1)

    rules = _load_or_exit(load_rules, _pick(rules_file, config.data.rules_path), "rules")
    selected = sorted(
        (r for r in rules if wanted is None or r.status == wanted),
        key=lambda r: -r.priority,
    )

    if not selected:
        typer.echo("(no rules to preview)")
        return

    for rule in selected:
        typer.echo(f"[{rule.status.value:<8}] {rule.priority:>3}  {rule.name}")
        typer.echo(f"    {generate_rule_preview(rule)}")


@app.command("recommend")
def recommend_cmd(
    products_file: Optional[str] = typer.Option(
        None, "--products", help="Products JSON file. Defaults to the seed catalog."
    ),
    profile_file: Optional[str] = typer.Option(
        None, "--profile", help="Profile JSON file. Defaults to the seed profile."
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank the product catalog for a profile as-is (no rule evaluation)."""
    from rule_studio.ingestion.loaders import load_products, load_profile
    from rule_studio.recommendations.ranker import recommend
    from rule_studio.reporting.formatters import format_recommendations_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    products = _load_or_exit(
        load_products, _pick(products_file, config.data.products_path), "products"
    )
    profile = _load_or_exit(
        load_profile, _pick(profile_file, config.data.profile_path), "profile"
    )

    recommendations = recommend(products, profile, precision=config.engine.score_precision)
    typer.echo(f"Recommendations for customer {profile.customer_id}")
    typer.echo(format_recommendations_table(recommendations))


@app.command("vocabulary")
def vocabulary() -> None:
    """List the events, operators, effect types, fields and scores rule authors can use."""
    from rule_studio.taxonomy.rule_taxonomy import (
        EVENT_LABELS,
        FIELD_SUGGESTIONS,
        KNOWN_SCORES,
        OPERATOR_LABELS,
        EffectType,
    )

    typer.echo("Events:")
    for event, label in EVENT_LABELS.items():
        typer.echo(f"  {event.value:<18} {label}")

    typer.echo("")
    typer.echo("Operators:")
    for op, label in OPERATOR_LABELS.items():
        typer.echo(f"  {op.value:<18} {label}")

    typer.echo("")
    typer.echo("Effect types:")
    for effect_type in EffectType:
        typer.echo(f"  {effect_type.value}")

    typer.echo("")
    typer.echo("Condition fields:")
    for path, label, value_type in FIELD_SUGGESTIONS:
        typer.echo(f"  {path:<42} {label:<26} ({value_type})")

    typer.echo("")
    typer.echo(f"Known scores: {', '.join(KNOWN_SCORES)}")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
