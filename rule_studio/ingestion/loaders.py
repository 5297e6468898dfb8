"""
JSON loaders for rules, products, profiles and events.

File formats
------------
  rules.json     — array of Rule objects
  products.json  — array of Product objects
  profile.json   — single Profile object
  events.json    — array of Event objects

Keys may be snake_case (``static_data``, ``required_scores``) or camelCase
(``staticData``, ``requiredScores``). Array entries whose keys all start with
``_comment`` are documentation and are skipped.

Validation rules
----------------
- All records are validated before any are returned. If **any** record
  fails, a single ``ValueError`` lists the first 10 failures by index.
- Duplicate ``id`` values among rules or products are rejected.
- A top-level value of the wrong shape (object vs array) is rejected.

Rule *content* problems that the evaluator tolerates (unknown operators,
effects missing fields, empty condition lists) are NOT rejected here; they
load and then simply never match or apply as no-ops.

Usage
-----
    from rule_studio.ingestion.loaders import load_products, load_rules

    rules    = load_rules(Path("config/seed/rules.json"))
    products = load_products(Path("config/seed/products.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rule_studio.models.event import Event
from rule_studio.models.product import Product
from rule_studio.models.profile import Profile
from rule_studio.models.rule import Rule

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_MAX_ERRORS_SHOWN = 10


def load_rules(path: Path) -> list[Rule]:
    """Load and validate a rules JSON array.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON, failed validation, or duplicate ids.
    """
    rules = _validate_records(_read_array(path), Rule, path)
    _check_unique_ids([r.id for r in rules], "rule", path)
    logger.info("Loaded %d rule(s) from %s", len(rules), path.name)
    return rules


def load_products(path: Path) -> list[Product]:
    """Load and validate a products JSON array.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON, failed validation, or duplicate ids.
    """
    products = _validate_records(_read_array(path), Product, path)
    _check_unique_ids([p.id for p in products], "product", path)
    logger.info("Loaded %d product(s) from %s", len(products), path.name)
    return products


def load_events(path: Path) -> list[Event]:
    """Load and validate an events JSON array (order is preserved).

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON or failed validation.
    """
    events = _validate_records(_read_array(path), Event, path)
    logger.info("Loaded %d event(s) from %s", len(events), path.name)
    return events


def load_profile(path: Path) -> Profile:
    """Load and validate a single profile JSON object.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On malformed JSON or failed validation.
    """
    raw = _read_json(path)
    if not isinstance(raw, dict):
        raise ValueError(f"Profile file must contain a JSON object: {path}")
    try:
        profile = Profile.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Profile failed validation in {path.name}:\n{exc}") from exc
    logger.info("Loaded profile %s from %s", profile.customer_id, path.name)
    return profile


# ── Private helpers ────────────────────────────────────────────────────────────

def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"JSON parse error in {path.name}: {exc}") from exc


def _read_array(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array, dropping comment-only entries."""
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise ValueError(f"File must contain a JSON array: {path}")
    return [r for r in raw if not _is_comment(r)]


def _is_comment(record: Any) -> bool:
    return (
        isinstance(record, dict)
        and bool(record)
        and all(str(k).startswith("_comment") for k in record)
    )


def _validate_records(
    records: list[dict[str, Any]],
    model:   type[ModelT],
    path:    Path,
) -> list[ModelT]:
    """Validate every record; raise one ValueError summarising all failures."""
    validated: list[ModelT] = []
    errors: list[tuple[int, str]] = []

    for i, raw in enumerate(records):
        try:
            validated.append(model.model_validate(raw))
        except ValidationError as exc:
            errors.append((i, str(exc)))

    if errors:
        detail = "\n".join(f"  #{idx}: {msg}" for idx, msg in errors[:_MAX_ERRORS_SHOWN])
        extra = len(errors) - _MAX_ERRORS_SHOWN
        suffix = f"\n  … and {extra} more" if extra > 0 else ""
        raise ValueError(
            f"{len(errors)} {model.__name__} record(s) failed validation in "
            f"{path.name}:\n{detail}{suffix}"
        )
    return validated


def _check_unique_ids(ids: list[str], kind: str, path: Path) -> None:
    seen: set[str] = set()
    for i, record_id in enumerate(ids):
        if record_id in seen:
            raise ValueError(f"Duplicate {kind} id '{record_id}' at index {i} in {path.name}.")
        seen.add(record_id)
