"""
Aggregation Engine

Rolls per-project results up into team, office and year totals.

Every aggregation shares the same qualifying rule:
- install_date must parse to a calendar date in the requested year
  (missing or unparseable dates are silently excluded)
- cancelled projects are always excluded
"""

from decimal import Decimal

from .calculators.commission import CommissionCalculator
from .models import PayType, Project
from .normalizers import ZERO, install_year, to_decimal


class AggregationEngine:
    """Filters a project collection and sums calculator results over it."""

    MANAGER_RATE_PER_KW = Decimal("175")

    def __init__(self, calculator: CommissionCalculator | None = None):
        self.calculator = calculator or CommissionCalculator()

    @staticmethod
    def qualifies(project: Project, year: int) -> bool:
        """True when the project counts toward the given year's totals."""
        if project.is_cancelled:
            return False
        return install_year(project.install_date) == year

    def qualifying(self, projects, year: int) -> list[Project]:
        return [p for p in projects if self.qualifies(p, year)]

    def team_earnings(self, projects, year: int, pay_type=PayType.ROOKIE) -> Decimal:
        """
        Total rep commission for the year with one tier applied to every project.

        This is a "what if everyone were tier X" figure, not each rep's own tier.
        """
        total = ZERO
        for project in self.qualifying(projects, year):
            total += self.calculator.calculate(project, pay_type).final_commission
        return total

    def manager_commission(self, projects, year: int) -> Decimal:
        """Flat $175/kW override on every qualifying project with a positive size."""
        total = ZERO
        for project in self.qualifying(projects, year):
            system_size = to_decimal(project.system_size)
            if system_size > 0:
                total += system_size * self.MANAGER_RATE_PER_KW
        return total

    def team_revenue(self, projects, year: int) -> Decimal:
        """
        Gross revenue for the year.

        Per project: payment_amount when present and non-zero, otherwise the
        computed contract value (kW × PPW × 1000).
        """
        total = ZERO
        for project in self.qualifying(projects, year):
            payment = to_decimal(project.payment_amount)
            if payment:
                total += payment
            else:
                total += to_decimal(project.system_size) * to_decimal(project.gross_ppw) * Decimal("1000")
        return total

    def team_earnings_by_office(self, projects, office: str, year: int, pay_type=PayType.ROOKIE) -> Decimal:
        return self.team_earnings(filter_by_office(projects, office), year, pay_type)

    def team_revenue_by_office(self, projects, office: str, year: int) -> Decimal:
        return self.team_revenue(filter_by_office(projects, office), year)


def filter_by_office(projects, office: str) -> list[Project]:
    """Exact office-label match, applied before any year/status filtering."""
    return [p for p in projects if p.office == office]


def filter_by_user(projects, user_id: str) -> list[Project]:
    return [p for p in projects if p.user_id == user_id]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_engine = AggregationEngine()


def calculate_team_earnings(projects, year: int, pay_type=PayType.ROOKIE) -> Decimal:
    return _engine.team_earnings(projects, year, pay_type)


def calculate_manager_commission(projects, year: int) -> Decimal:
    return _engine.manager_commission(projects, year)


def calculate_team_revenue(projects, year: int) -> Decimal:
    return _engine.team_revenue(projects, year)


def calculate_team_earnings_by_office(projects, office: str, year: int, pay_type=PayType.ROOKIE) -> Decimal:
    return _engine.team_earnings_by_office(projects, office, year, pay_type)


def calculate_team_revenue_by_office(projects, office: str, year: int) -> Decimal:
    return _engine.team_revenue_by_office(projects, office, year)
