"""
Simulation report writer: CSV and JSON output for recommendations and
full simulation runs.

All functions are pure I/O. They consume in-memory results and write
human-readable + machine-readable files.

Output files (written by ``rule-studio simulate --output-dir``)
---------------------------------------------------------------
  <output_dir>/
    recommendations_{customer}_{date}.csv   -- one row per ranked product
    simulation_{customer}_{date}.json       -- trace, profiles, recommendations
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from rule_studio.models.product import ProductRecommendation
from rule_studio.models.simulation import SimulationResult
from rule_studio.utils.time_utils import run_date_label, to_utc_iso

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def write_recommendation_csv(
    recommendations: list[ProductRecommendation],
    output_dir:      Path,
    customer_id:     str,
    run_date:        Optional[date] = None,
) -> Path:
    """Write ranked recommendations to a CSV file.

    Columns: rank, product_id, product_name, decision, score, why.
    ``why`` lines are joined with ``" | "``.

    Args:
        recommendations: Output of ``recommend()`` in rank order.
        output_dir:      Directory to write the file (created if missing).
        customer_id:     Used in the filename.
        run_date:        Date label for the filename. Defaults to today (UTC).

    Returns:
        Path to the written CSV file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{customer_id}_{run_date_label(run_date)}.csv"

    fieldnames = ["rank", "product_id", "product_name", "decision", "score", "why"]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rec in recommendations:
            writer.writerow(
                {
                    "rank":         rec.rank,
                    "product_id":   rec.product.id,
                    "product_name": rec.product.name,
                    "decision":     rec.decision.value,
                    "score":        rec.score,
                    "why":          " | ".join(rec.why),
                }
            )

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, len(recommendations))
    return csv_path


def write_simulation_json(
    result:     SimulationResult,
    output_dir: Path,
    run_date:   Optional[date] = None,
) -> Path:
    """Write a full simulation result to a structured JSON file.

    Args:
        result:     Output of ``run_simulation()``.
        output_dir: Target directory (created if missing).
        run_date:   Date label. Defaults to today (UTC).

    Returns:
        Path to the written JSON file.
    """
    customer_id = result.new_profile.customer_id
    label = run_date_label(run_date)

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"simulation_{customer_id}_{label}.json"

    payload: dict = {
        "schema_version": SCHEMA_VERSION,
        "customer_id":    customer_id,
        "generated_at":   label,
        "last_updated":   to_utc_iso(result.new_profile.last_updated),
        "trace": [
            {
                "rule_id":            t.rule_id,
                "rule_name":          t.rule_name,
                "effect_description": t.effect_description,
            }
            for t in result.trace
        ],
        "recommendations": [
            {
                "rank":            rec.rank,
                "product_id":      rec.product.id,
                "product_name":    rec.product.name,
                "decision":        rec.decision.value,
                "score":           rec.score,
                "why":             rec.why,
                "score_breakdown": rec.score_breakdown,
            }
            for rec in result.recommendations
        ],
        "profile_before": result.original_profile.model_dump(mode="json"),
        "profile_after":  result.new_profile.model_dump(mode="json"),
        "narrative":      result.narrative,
    }

    json_path.write_text(
        json.dumps(payload, indent=2, default=str, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Simulation JSON written: %s", json_path)
    return json_path
