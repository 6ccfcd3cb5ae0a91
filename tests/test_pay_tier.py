"""
Unit Tests for the Pay Tier Resolver and Upfront Pay
"""

import pytest
from decimal import Decimal
from earnings.calculators.pay_tier import PayTierResolver, resolve_pay_type
from earnings.calculators.upfront import calculate_upfront_pay
from earnings.models import PayType, Project, TierPolicy


def paid_projects(user_id: str, count: int, status: str = "paid") -> list[Project]:
    return [
        Project(id=f"{user_id}-{i}", user_id=user_id, status=status, install_date=f"{2015 + i % 10}-06-01")
        for i in range(count)
    ]


class TestResolvePayType:
    """Test tier thresholds."""

    @pytest.mark.parametrize("count,expected", [
        (0, PayType.ROOKIE),
        (3, PayType.ROOKIE),
        (9, PayType.ROOKIE),
        (10, PayType.VET),
        (12, PayType.VET),
        (19, PayType.VET),
        (20, PayType.PRO),
        (22, PayType.PRO),
    ])
    def test_thresholds(self, count, expected):
        assert resolve_pay_type("rep-1", paid_projects("rep-1", count)) == expected

    def test_only_paid_status_counts(self):
        projects = paid_projects("rep-1", 9) + paid_projects("rep-1", 15, status="pto")
        assert resolve_pay_type("rep-1", projects) == PayType.ROOKIE

    def test_other_users_ignored(self):
        projects = paid_projects("rep-1", 3) + paid_projects("rep-2", 25)

        assert resolve_pay_type("rep-1", projects) == PayType.ROOKIE
        assert resolve_pay_type("rep-2", projects) == PayType.PRO

    def test_no_year_restriction(self):
        projects = paid_projects("rep-1", 10)
        assert len({p.install_date[:4] for p in projects}) == 10
        assert resolve_pay_type("rep-1", projects) == PayType.VET

    def test_recomputed_on_every_call(self):
        resolver = PayTierResolver()
        projects = paid_projects("rep-1", 9)

        assert resolver.resolve("rep-1", projects) == PayType.ROOKIE
        projects.append(Project(id="extra", user_id="rep-1", status="paid"))
        assert resolver.resolve("rep-1", projects) == PayType.VET

    def test_custom_policy(self):
        policy = TierPolicy(vet_threshold=2, pro_threshold=4)

        assert resolve_pay_type("rep-1", paid_projects("rep-1", 2), policy) == PayType.VET
        assert resolve_pay_type("rep-1", paid_projects("rep-1", 4), policy) == PayType.PRO


class TestTierPolicyFromEnv:
    """Test threshold configuration from the environment."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EARNINGS_VET_THRESHOLD", raising=False)
        monkeypatch.delenv("EARNINGS_PRO_THRESHOLD", raising=False)

        assert TierPolicy.from_env() == TierPolicy(10, 20)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("EARNINGS_VET_THRESHOLD", "5")
        monkeypatch.setenv("EARNINGS_PRO_THRESHOLD", "15")

        assert TierPolicy.from_env() == TierPolicy(5, 15)

    def test_invalid_value_falls_back(self, monkeypatch):
        monkeypatch.setenv("EARNINGS_VET_THRESHOLD", "ten")
        monkeypatch.delenv("EARNINGS_PRO_THRESHOLD", raising=False)

        assert TierPolicy.from_env() == TierPolicy(10, 20)


class TestUpfrontPay:
    """Test per-deal upfront pay."""

    @pytest.mark.parametrize("pay_type,expected", [
        (PayType.ROOKIE, Decimal('1500')),
        (PayType.VET, Decimal('3000')),
        (PayType.PRO, Decimal('4000')),
        ("Unknown", Decimal('1500')),
    ])
    def test_rates(self, pay_type, expected):
        assert calculate_upfront_pay(5, pay_type) == expected

    def test_no_deals(self):
        assert calculate_upfront_pay(0, PayType.PRO) == Decimal('0')
