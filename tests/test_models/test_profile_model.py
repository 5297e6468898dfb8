"""Tests for Profile, Product, ProductRecommendation and Event models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rule_studio.models.event import Event
from rule_studio.models.product import Product, ProductRecommendation
from rule_studio.models.profile import Profile
from rule_studio.taxonomy.rule_taxonomy import Decision, RuleEvent


class TestProfile:
    def test_camel_case_json(self):
        profile = Profile.model_validate(
            {
                "customerId": "C9",
                "staticData": {"age": 41},
                "behavioral": {"marketplaceVisits": 2},
                "scores": {"financialStability": 70},
                "tags": ["renter"],
                "lastUpdated": "2026-02-05T18:28:08Z",
            }
        )
        assert profile.customer_id == "C9"
        assert profile.static_data == {"age": 41}
        assert profile.last_updated.year == 2026

    def test_snake_case_accepted(self):
        assert Profile(customer_id="C1", static_data={"a": 1}).static_data == {"a": 1}

    def test_tags_deduplicated_in_order(self):
        profile = Profile(customer_id="C1", tags=["b", "a", "b"])
        assert profile.tags == ["b", "a"]

    def test_score_defaults_to_zero(self):
        profile = Profile(customer_id="C1", scores={"a": 5})
        assert profile.score("a") == 5
        assert profile.score("missing") == 0

    def test_int_scores_stay_int(self):
        profile = Profile(customer_id="C1", scores={"a": 5, "b": 2.5})
        assert isinstance(profile.scores["a"], int)
        assert profile.scores["b"] == 2.5

    def test_has_tag(self):
        profile = Profile(customer_id="C1", tags=["renter"])
        assert profile.has_tag("renter")
        assert not profile.has_tag("owner")

    def test_deep_copy_is_independent(self, sample_profile):
        copy = sample_profile.model_copy(deep=True)
        copy.scores["financialStability"] = 0
        copy.tags.append("x")
        assert sample_profile.scores["financialStability"] == 52
        assert sample_profile.tags == []


class TestProduct:
    def test_camel_case_json(self):
        product = Product.model_validate(
            {
                "id": "p",
                "name": "P",
                "requiredScores": {"a": 10},
                "weightByScore": {"a": 0.5},
            }
        )
        assert product.required_scores == {"a": 10}
        assert product.weight_by_score == {"a": 0.5}
        assert product.exclusions == []
        assert product.active is True

    def test_rank_must_be_positive(self):
        with pytest.raises(ValidationError, match="rank"):
            ProductRecommendation(
                product=Product(id="p", name="P"),
                decision=Decision.SHOWN,
                rank=0,
                score=1.0,
            )

    def test_is_shown(self):
        rec = ProductRecommendation(
            product=Product(id="p", name="P"), decision=Decision.HIDDEN, rank=1, score=0
        )
        assert rec.is_shown is False


class TestEvent:
    def test_payload_defaults_empty(self):
        assert Event(type=RuleEvent.LOGIN).payload == {}

    def test_from_json(self):
        event = Event.model_validate({"type": "SALARY_CREDIT", "payload": {"amount": 1}})
        assert event.type == RuleEvent.SALARY_CREDIT

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Event.model_validate({"type": "NOPE"})
