"""Tests for Rule, Condition and Effect models — JSON shape and leniency."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rule_studio.models.rule import (
    AddTagEffect,
    Condition,
    RemoveTagEffect,
    Rule,
    ScoreDeltaEffect,
)
from rule_studio.taxonomy.rule_taxonomy import RuleEvent, RuleStatus


def _raw_rule(**overrides) -> dict:
    raw = {
        "id": "r-1",
        "name": "Rule one",
        "status": "ACTIVE",
        "priority": 80,
        "event": "SALARY_CREDIT",
        "conditions": [{"source": "event.amount", "op": ">", "value": 100}],
        "effects": [
            {"type": "scoreDelta", "score": "financialStability", "delta": 10},
            {"type": "addTag", "tag": "stable-income"},
            {"type": "removeTag", "tag": "student"},
        ],
    }
    raw.update(overrides)
    return raw


class TestRuleConstruction:
    def test_from_json_dict(self):
        rule = Rule.model_validate(_raw_rule())
        assert rule.status == RuleStatus.ACTIVE
        assert rule.event == RuleEvent.SALARY_CREDIT
        assert rule.conditions[0] == Condition(source="event.amount", op=">", value=100)
        assert isinstance(rule.effects[0], ScoreDeltaEffect)
        assert isinstance(rule.effects[1], AddTagEffect)
        assert isinstance(rule.effects[2], RemoveTagEffect)

    def test_defaults(self):
        rule = Rule(id="r", name="r", event=RuleEvent.LOGIN)
        assert rule.status == RuleStatus.DRAFT
        assert rule.priority == 50
        assert rule.conditions == []
        assert rule.effects == []
        assert rule.version == 1
        assert rule.is_active is False

    def test_is_active(self):
        assert Rule.model_validate(_raw_rule()).is_active is True

    def test_unknown_event_rejected(self):
        with pytest.raises(ValidationError):
            Rule.model_validate(_raw_rule(event="PAYDAY"))

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Rule.model_validate(_raw_rule(status="ARCHIVED"))

    def test_unknown_effect_type_rejected(self):
        with pytest.raises(ValidationError):
            Rule.model_validate(_raw_rule(effects=[{"type": "setScore", "score": "x"}]))

    def test_unknown_operator_accepted(self):
        rule = Rule.model_validate(
            _raw_rule(conditions=[{"source": "event.amount", "op": "!=", "value": 1}])
        )
        assert rule.conditions[0].op == "!="

    def test_incomplete_effects_accepted(self):
        rule = Rule.model_validate(_raw_rule(effects=[{"type": "scoreDelta"}, {"type": "addTag"}]))
        assert rule.effects[0].score is None
        assert rule.effects[1].tag is None

    def test_list_condition_value(self):
        cond = Condition.model_validate({"source": "x", "op": "in", "value": ["a", 1, True]})
        assert cond.value == ["a", 1, True]

    def test_scopes_and_metadata_camel_case(self):
        rule = Rule.model_validate(
            _raw_rule(
                scopes={"channels": ["app"], "validFrom": "2026-01-01T00:00:00Z"},
                metadata={"owner": "risk", "lastEditedBy": "ana"},
            )
        )
        assert rule.scopes.channels == ["app"]
        assert rule.scopes.valid_from.year == 2026
        assert rule.metadata.last_edited_by == "ana"

    def test_frozen(self):
        rule = Rule.model_validate(_raw_rule())
        with pytest.raises(ValidationError):
            rule.priority = 1  # type: ignore[misc]
