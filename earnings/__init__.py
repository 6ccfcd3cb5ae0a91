"""
SOLAR EARNINGS ENGINE
Commission, revenue and pay-tier calculations for the sales pipeline
"""

from .aggregation import (
    AggregationEngine,
    calculate_manager_commission,
    calculate_team_earnings,
    calculate_team_earnings_by_office,
    calculate_team_revenue,
    calculate_team_revenue_by_office,
)
from .calculators import (
    calculate_company_stats,
    calculate_rep_stats,
    calculate_upfront_pay,
    compute_breakdown,
    resolve_pay_type,
)
from .models import CommissionBreakdown, PayType, Project, ProjectStatus, TierPolicy
from .normalizers import map_crm_status
from .processor import EarningsProcessor
from .summary import build_pay_summary

__all__ = [
    'EarningsProcessor',
    'AggregationEngine',
    'Project',
    'ProjectStatus',
    'PayType',
    'TierPolicy',
    'CommissionBreakdown',
    'compute_breakdown',
    'calculate_team_earnings',
    'calculate_manager_commission',
    'calculate_team_revenue',
    'calculate_team_earnings_by_office',
    'calculate_team_revenue_by_office',
    'resolve_pay_type',
    'calculate_upfront_pay',
    'calculate_rep_stats',
    'calculate_company_stats',
    'build_pay_summary',
    'map_crm_status',
]
