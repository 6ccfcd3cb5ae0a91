"""
Unit Tests for rep/company statistics and the pay summary
"""

import pytest
from decimal import Decimal
from earnings.calculators.stats import calculate_company_stats, calculate_rep_stats
from earnings.models import PayType, Project, TierPolicy
from earnings.summary import build_pay_summary


class TestRepStats:
    """Deal counts over non-cancelled projects."""

    @pytest.fixture
    def projects(self):
        return [
            Project(id="1", deal_number=1, payment_amount=30000),
            Project(id="2", deal_number=10, payment_amount="25000"),
            Project(id="3", deal_number=11),
            Project(id="4", deal_number=20, payment_amount=40000),
            Project(id="5", deal_number=21, payment_amount=10000),
            Project(id="6"),  # No deal number counts as tier 1
            Project(id="7", deal_number=2, payment_amount=99999, status="cancelled"),
        ]

    def test_counts(self, projects):
        stats = calculate_rep_stats(projects)

        assert stats.deal_count == 6
        assert stats.tier1_deals == 3
        assert stats.tier2_deals == 2

    def test_total_commission_sums_payment_amounts(self, projects):
        assert calculate_rep_stats(projects).total_commission == Decimal('105000')

    def test_empty(self):
        stats = calculate_rep_stats([])

        assert stats.deal_count == 0
        assert stats.total_commission == Decimal('0')


class TestCompanyStats:
    """Averages over non-cancelled projects."""

    def test_averages(self):
        projects = [
            Project(id="1", system_size="10", gross_ppw="4"),
            Project(id="2", system_size="6", gross_ppw="5"),
            Project(id="3", system_size="8"),  # Size only
            Project(id="4", system_size="12", gross_ppw="4", status="cancelled"),
        ]
        stats = calculate_company_stats(projects)

        assert stats.avg_system_size == Decimal('8')
        assert stats.total_revenue == Decimal('70000')
        assert stats.avg_contract_value == Decimal('35000')

    def test_listed_zero_size_counts_toward_contract_average(self):
        projects = [
            Project(id="1", system_size="10", gross_ppw="4"),
            Project(id="2", system_size="0", gross_ppw="5"),
            Project(id="3", system_size="", gross_ppw="5"),
        ]
        stats = calculate_company_stats(projects)

        assert stats.avg_system_size == Decimal('10')
        assert stats.total_revenue == Decimal('40000')
        assert stats.avg_contract_value == Decimal('20000')

    def test_empty(self):
        stats = calculate_company_stats([])

        assert stats.avg_system_size == Decimal('0')
        assert stats.total_revenue == Decimal('0')
        assert stats.avg_contract_value == Decimal('0')


class TestPaySummary:
    """Upfront plus milestone pay for one rep."""

    @pytest.fixture
    def projects(self):
        history = [
            Project(id=f"old-{i}", user_id="rep-1", status="paid", install_date="2024-05-01",
                    system_size="10", gross_ppw="4.5")
            for i in range(10)
        ]
        this_year = [
            Project(id="new-1", user_id="rep-1", status="install", install_date="2025-02-01",
                    system_size="10", gross_ppw="4.5"),
            Project(id="new-2", user_id="rep-1", status="cancelled", install_date="2025-03-01",
                    system_size="10", gross_ppw="4.5"),
            Project(id="other", user_id="rep-2", status="pto", install_date="2025-03-01",
                    system_size="10", gross_ppw="4.5"),
        ]
        return history + this_year

    def test_resolves_tier_from_history(self, projects):
        summary = build_pay_summary("rep-1", projects, 2025)

        assert summary.pay_type == PayType.VET
        assert summary.deal_count == 11
        assert summary.upfront_pay == Decimal('6600')
        assert summary.milestone_pay == Decimal('3900')
        assert summary.total_pay == Decimal('10500')

    def test_explicit_pay_type(self, projects):
        summary = build_pay_summary("rep-1", projects, 2025, PayType.PRO)

        assert summary.pay_type == PayType.PRO
        assert summary.upfront_pay == Decimal('8800')
        assert summary.milestone_pay == Decimal('5000')

    def test_policy_applies(self, projects):
        summary = build_pay_summary("rep-1", projects, 2025, policy=TierPolicy(vet_threshold=5, pro_threshold=8))
        assert summary.pay_type == PayType.PRO

    def test_unknown_rep(self, projects):
        summary = build_pay_summary("nobody", projects, 2025)

        assert summary.pay_type == PayType.ROOKIE
        assert summary.deal_count == 0
        assert summary.total_pay == Decimal('0')
