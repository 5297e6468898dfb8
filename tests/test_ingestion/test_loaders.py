"""
Tests for rule_studio/ingestion/loaders.py.

What we test
------------
- Committed seed files load cleanly.
- Comment entries are skipped.
- Missing file → FileNotFoundError; malformed JSON / wrong shape → ValueError.
- Validation errors are aggregated with record indices, capped at 10.
- Duplicate rule / product ids are rejected.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rule_studio.ingestion.loaders import (
    load_events,
    load_products,
    load_profile,
    load_rules,
)
from rule_studio.taxonomy.rule_taxonomy import RuleEvent, RuleStatus


# ── Helpers ────────────────────────────────────────────────────────────────────

def _write(tmp_path: Path, name: str, content) -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(content), encoding="utf-8")
    return path


def _rule(rule_id: str = "r-1", **overrides) -> dict:
    raw = {"id": rule_id, "name": "Rule", "status": "ACTIVE", "event": "LOGIN"}
    raw.update(overrides)
    return raw


# ── Seed files ────────────────────────────────────────────────────────────────

class TestSeedFiles:
    def test_rules(self, seed_dir, sample_rules):
        rules = load_rules(seed_dir / "rules.json")
        assert [r.id for r in rules] == [r.id for r in sample_rules]
        assert [r.status for r in rules] == [
            RuleStatus.ACTIVE, RuleStatus.ACTIVE, RuleStatus.ACTIVE, RuleStatus.DRAFT,
        ]
        assert rules[1].model_dump() == sample_rules[1].model_dump()
        assert rules[0].metadata.owner == "risk-team"

    def test_products(self, seed_dir, sample_products):
        loaded = load_products(seed_dir / "products.json")
        assert [p.model_dump() for p in loaded] == [p.model_dump() for p in sample_products]

    def test_profile(self, seed_dir, sample_profile):
        assert load_profile(seed_dir / "profile.json").model_dump() == sample_profile.model_dump()

    def test_events(self, seed_dir, sample_events):
        events = load_events(seed_dir / "events.json")
        assert [e.model_dump() for e in events] == [e.model_dump() for e in sample_events]
        assert events[0].type == RuleEvent.SALARY_CREDIT


# ── File-level errors ─────────────────────────────────────────────────────────

class TestFileErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON parse error"):
            load_rules(path)

    def test_object_instead_of_array(self, tmp_path):
        with pytest.raises(ValueError, match="JSON array"):
            load_products(_write(tmp_path, "p.json", {"id": "x"}))

    def test_array_instead_of_object_for_profile(self, tmp_path):
        with pytest.raises(ValueError, match="JSON object"):
            load_profile(_write(tmp_path, "profile.json", []))

    def test_invalid_profile(self, tmp_path):
        with pytest.raises(ValueError, match="Profile failed validation"):
            load_profile(_write(tmp_path, "profile.json", {"scores": {}}))


# ── Record-level validation ───────────────────────────────────────────────────

class TestRecordValidation:
    def test_comment_entries_skipped(self, tmp_path):
        path = _write(tmp_path, "rules.json", [{"_comment": "hello"}, _rule()])
        assert [r.id for r in load_rules(path)] == ["r-1"]

    def test_empty_array(self, tmp_path):
        assert load_events(_write(tmp_path, "events.json", [])) == []

    def test_errors_report_index(self, tmp_path):
        path = _write(tmp_path, "rules.json", [_rule("ok"), _rule("bad", event="PAYDAY")])
        with pytest.raises(ValueError) as exc_info:
            load_rules(path)
        message = str(exc_info.value)
        assert "1 Rule record(s) failed validation in rules.json" in message
        assert "#1:" in message

    def test_errors_capped_at_ten(self, tmp_path):
        bad = [{"type": "NOPE"} for _ in range(12)]
        with pytest.raises(ValueError) as exc_info:
            load_events(_write(tmp_path, "events.json", bad))
        message = str(exc_info.value)
        assert "12 Event record(s)" in message
        assert "#9:" in message
        assert "#10:" not in message
        assert "and 2 more" in message

    def test_duplicate_rule_ids(self, tmp_path):
        path = _write(tmp_path, "rules.json", [_rule("dup"), _rule("dup")])
        with pytest.raises(ValueError, match="Duplicate rule id 'dup'"):
            load_rules(path)

    def test_duplicate_product_ids(self, tmp_path):
        product = {"id": "p", "name": "P"}
        with pytest.raises(ValueError, match="Duplicate product id 'p'"):
            load_products(_write(tmp_path, "products.json", [product, product]))

    def test_snake_case_keys_accepted(self, tmp_path):
        path = _write(
            tmp_path,
            "products.json",
            [{"id": "p", "name": "P", "required_scores": {"a": 1}}],
        )
        assert load_products(path)[0].required_scores == {"a": 1}

    def test_lenient_rule_content_loads(self, tmp_path):
        path = _write(
            tmp_path,
            "rules.json",
            [_rule(conditions=[{"op": "~"}], effects=[{"type": "addTag"}])],
        )
        rule = load_rules(path)[0]
        assert rule.conditions[0].op == "~"
        assert rule.effects[0].tag is None
