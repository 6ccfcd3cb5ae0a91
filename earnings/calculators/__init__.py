"""
Calculators Package

Provides all per-project and per-rep calculation components.
"""

from .commission import CommissionCalculator, compute_breakdown
from .pay_tier import PayTierResolver, resolve_pay_type
from .stats import StatsCalculator, calculate_company_stats, calculate_rep_stats
from .upfront import UpfrontPayCalculator, calculate_upfront_pay

__all__ = [
    "CommissionCalculator",
    "PayTierResolver",
    "StatsCalculator",
    "UpfrontPayCalculator",
    "compute_breakdown",
    "resolve_pay_type",
    "calculate_rep_stats",
    "calculate_company_stats",
    "calculate_upfront_pay",
]
