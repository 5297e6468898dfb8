"""
Shared pytest fixtures for the Rule Studio test suite.

Provides:
  - Sample domain objects mirroring the committed seed data
    (customer C123, the four seed rules, the four seed products, and the
    salary + rent event pair).
  - ``seed_dir``: path to ``config/seed`` for loader and CLI tests.
  - ``cli_config``: a TOML config in ``tmp_path`` pointing at the seed data
    with WARNING-level logging, so CLI output is not interleaved with logs.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from rule_studio.models.event import Event
from rule_studio.models.product import Product
from rule_studio.models.profile import Profile
from rule_studio.models.rule import (
    AddTagEffect,
    Condition,
    Rule,
    ScoreDeltaEffect,
)
from rule_studio.taxonomy.rule_taxonomy import RuleEvent, RuleStatus

PROJECT_ROOT = Path(__file__).parent.parent

FIXED_NOW = datetime(2026, 2, 5, 18, 28, 8, tzinfo=timezone.utc)


# ── Sample domain object factories ────────────────────────────────────────────

@pytest.fixture
def sample_profile() -> Profile:
    """Customer C123 as seeded."""
    return Profile(
        customer_id="C123",
        static_data={"age": 30, "employment": "salaried", "hasHomeLoan": False},
        behavioral={
            "salaryCreditsPerMonth": 1,
            "rentPaymentsPerMonth": 1,
            "marketplaceVisits": 4,
        },
        scores={
            "financialStability": 52,
            "homeOwnershipIntent": 35,
            "creditReadiness": 40,
            "digitalEngagement": 20,
        },
        tags=[],
    )


@pytest.fixture
def sample_rules() -> list[Rule]:
    """The four seed rules (three ACTIVE, one DRAFT)."""
    return [
        Rule(
            id="r-salary",
            name="Salary credit boosts stability",
            status=RuleStatus.ACTIVE,
            priority=90,
            event=RuleEvent.SALARY_CREDIT,
            conditions=[Condition(source="event.amount", op=">", value=50000)],
            effects=[
                ScoreDeltaEffect(score="financialStability", delta=10),
                AddTagEffect(tag="stable-income"),
            ],
        ),
        Rule(
            id="r-rent",
            name="Recurring rent → renter intent",
            status=RuleStatus.ACTIVE,
            priority=85,
            event=RuleEvent.TRANSFER_POSTED,
            conditions=[
                Condition(source="event.counterpartyLabel", op="contains", value="rent"),
                Condition(source="event.frequency", op="=", value="monthly"),
            ],
            effects=[
                ScoreDeltaEffect(score="homeOwnershipIntent", delta=20),
                AddTagEffect(tag="renter"),
            ],
        ),
        Rule(
            id="r-login-engagement",
            name="Login boosts digital engagement",
            status=RuleStatus.ACTIVE,
            priority=70,
            event=RuleEvent.LOGIN,
            conditions=[
                Condition(source="profile.behavioral.marketplaceVisits", op=">", value=2)
            ],
            effects=[ScoreDeltaEffect(score="digitalEngagement", delta=5)],
        ),
        Rule(
            id="r-marketplace",
            name="Marketplace browsing indicates credit interest",
            status=RuleStatus.DRAFT,
            priority=60,
            event=RuleEvent.MARKETPLACE_VIEW,
            conditions=[Condition(source="event.category", op="=", value="loans")],
            effects=[
                ScoreDeltaEffect(score="creditReadiness", delta=8),
                AddTagEffect(tag="loan-interest"),
            ],
        ),
    ]


@pytest.fixture
def sample_products() -> list[Product]:
    """The four seed products, in catalog order."""
    return [
        Product(
            id="home-loan",
            name="Home Loan",
            required_scores={"financialStability": 60, "homeOwnershipIntent": 50},
            weight_by_score={"financialStability": 0.6, "homeOwnershipIntent": 0.4},
            exclusions=["has-home-loan"],
        ),
        Product(
            id="credit-card",
            name="Credit Card",
            required_scores={"creditReadiness": 55, "digitalEngagement": 30},
            weight_by_score={"creditReadiness": 0.6, "digitalEngagement": 0.4},
        ),
        Product(
            id="personal-loan",
            name="Personal Loan",
            required_scores={"financialStability": 50, "creditReadiness": 45},
            weight_by_score={"financialStability": 0.5, "creditReadiness": 0.5},
        ),
        Product(
            id="investment-account",
            name="Investment Account",
            required_scores={"financialStability": 70, "digitalEngagement": 40},
            weight_by_score={"financialStability": 0.7, "digitalEngagement": 0.3},
        ),
    ]


@pytest.fixture
def sample_events() -> list[Event]:
    """A qualifying salary credit followed by a monthly rent transfer."""
    return [
        Event(type=RuleEvent.SALARY_CREDIT, payload={"amount": 65000}),
        Event(
            type=RuleEvent.TRANSFER_POSTED,
            payload={"counterpartyLabel": "Rent - Mr. Sharma", "frequency": "monthly"},
        ),
    ]


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


# ── Filesystem fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def seed_dir() -> Path:
    return PROJECT_ROOT / "config" / "seed"


@pytest.fixture
def cli_config(tmp_path: Path, seed_dir: Path) -> Path:
    """Write a config TOML that points at the seed data and quiets logging."""
    path = tmp_path / "test.toml"
    path.write_text(
        "[data]\n"
        f'seed_dir = "{seed_dir.as_posix()}"\n'
        f'output_dir = "{(tmp_path / "outputs").as_posix()}"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n',
        encoding="utf-8",
    )
    return path
