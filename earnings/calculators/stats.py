"""
Statistics Calculator

Deal counts and averages shown alongside a rep's earnings. Cancelled projects
are excluded from every metric.
"""

from decimal import Decimal

from ..models import CompanyStats, Project, RepStats
from ..normalizers import ZERO, to_decimal

TIER1_MAX_DEAL_NUMBER = 10
TIER2_MAX_DEAL_NUMBER = 20


class StatsCalculator:
    """Builds RepStats and CompanyStats from a scoped project collection."""

    def rep_stats(self, projects) -> RepStats:
        active = _active(projects)

        deal_numbers = [to_decimal(p.deal_number) for p in active]
        tier1 = sum(1 for n in deal_numbers if n <= TIER1_MAX_DEAL_NUMBER)
        tier2 = sum(1 for n in deal_numbers if TIER1_MAX_DEAL_NUMBER < n <= TIER2_MAX_DEAL_NUMBER)

        return RepStats(
            deal_count=len(active),
            tier1_deals=tier1,
            tier2_deals=tier2,
            total_commission=sum((to_decimal(p.payment_amount) for p in active), ZERO),
        )

    def company_stats(self, projects) -> CompanyStats:
        active = _active(projects)

        sizes = [to_decimal(p.system_size) for p in active]
        positive_sizes = [size for size in sizes if size > 0]

        # Contract values for projects that list a size and a positive PPW; a
        # listed size of "0" still counts toward the average
        contract_values = []
        for size, project in zip(sizes, active):
            ppw = to_decimal(project.gross_ppw)
            if project.system_size and ppw > 0:
                contract_values.append(size * ppw * Decimal("1000"))

        total_revenue = sum(contract_values, ZERO)

        return CompanyStats(
            total_revenue=total_revenue,
            avg_system_size=_average(positive_sizes),
            avg_contract_value=total_revenue / len(contract_values) if contract_values else ZERO,
        )


def _active(projects) -> list[Project]:
    return [p for p in projects if not p.is_cancelled]


def _average(values: list[Decimal]) -> Decimal:
    if not values:
        return ZERO
    return sum(values, ZERO) / len(values)


def calculate_rep_stats(projects) -> RepStats:
    return StatsCalculator().rep_stats(projects)


def calculate_company_stats(projects) -> CompanyStats:
    return StatsCalculator().company_stats(projects)
