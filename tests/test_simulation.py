"""Tests for rule_studio.simulation."""

from __future__ import annotations

import pytest

from rule_studio.simulation import (
    DEFAULT_EVENTS,
    EXAMPLE_EVENT_SETS,
    example_events,
    run_simulation,
)
from rule_studio.taxonomy.rule_taxonomy import Decision, RuleEvent


class TestRunSimulation:
    def test_default_scenario(self, sample_rules, sample_products, sample_profile, fixed_now):
        result = run_simulation(
            sample_rules, sample_products, sample_profile, list(DEFAULT_EVENTS), now=fixed_now
        )
        assert result.new_profile.scores["financialStability"] == 62
        assert result.new_profile.scores["homeOwnershipIntent"] == 55
        assert result.new_profile.last_updated == fixed_now
        assert [t.rule_id for t in result.trace] == ["r-salary", "r-rent"]
        assert [r.product.id for r in result.recommendations if r.decision == Decision.SHOWN] == [
            "home-loan"
        ]
        assert result.narrative.startswith("2 rules matched:")

    def test_original_profile_unchanged(self, sample_rules, sample_products, sample_profile):
        result = run_simulation(
            sample_rules, sample_products, sample_profile, example_events("combo")
        )
        assert result.original_profile.scores == sample_profile.scores
        assert result.original_profile.tags == []
        assert result.original_profile is not sample_profile
        assert sample_profile.scores["financialStability"] == 52

    def test_no_events(self, sample_rules, sample_products, sample_profile):
        result = run_simulation(sample_rules, sample_products, sample_profile, [])
        assert result.trace == []
        assert result.narrative.startswith("No rules were triggered")
        assert len(result.recommendations) == 4

    def test_score_precision_passed_through(self, sample_rules, sample_products, sample_profile):
        result = run_simulation(
            sample_rules, sample_products, sample_profile, [], score_precision=0
        )
        scores = {r.product.id: r.score for r in result.recommendations}
        assert scores["investment-account"] == 42.0

    def test_high_salary_example(self, sample_rules, sample_products, sample_profile):
        result = run_simulation(
            sample_rules, sample_products, sample_profile, example_events("high-salary")
        )
        assert [t.rule_id for t in result.trace] == ["r-salary"]
        assert result.new_profile.has_tag("stable-income")

    def test_renter_example(self, sample_rules, sample_products, sample_profile):
        result = run_simulation(
            sample_rules, sample_products, sample_profile, example_events("renter")
        )
        assert [t.rule_id for t in result.trace] == ["r-rent"]


class TestExampleEvents:
    def test_known_sets(self):
        assert set(EXAMPLE_EVENT_SETS) == {"high-salary", "renter", "combo"}

    def test_combo_is_default(self):
        assert example_events("combo") == list(DEFAULT_EVENTS)

    def test_returns_fresh_list(self):
        events = example_events("renter")
        events.clear()
        assert len(example_events("renter")) == 1
        assert example_events("renter")[0].type == RuleEvent.TRANSFER_POSTED

    def test_unknown_name(self):
        with pytest.raises(KeyError, match="Unknown example"):
            example_events("lottery")
