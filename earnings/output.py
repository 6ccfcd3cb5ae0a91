"""
Output Builder

Constructs API responses from engine results.
"""

from decimal import Decimal

from .models import CommissionBreakdown, CompanyStats, PaySummary, RepStats


def to_money(value: Decimal) -> float:
    """Convert Decimal to float with 2 decimal places."""
    return round(float(value), 2)


def _fmt(value) -> str:
    """Format a number as currency string for descriptions."""
    return f"${value:,.2f}"


def _pct(rate: Decimal) -> str:
    return f"{float(rate) * 100:.0f}%"


class OutputBuilder:
    """Builds JSON-ready dictionaries."""

    def build_breakdown(self, breakdown: CommissionBreakdown) -> dict:
        """Breakdown with a value and dynamic description for each field."""
        size = float(breakdown.system_size)
        contract_price = to_money(breakdown.contract_price)
        base_cost = to_money(breakdown.base_cost)
        adders = to_money(breakdown.adders)
        total_cost = to_money(breakdown.total_cost)
        commission_amount = to_money(breakdown.commission_amount)
        final = to_money(breakdown.final_commission)
        rate = _pct(breakdown.commission_percentage)

        return {
            "selected_pay_type": breakdown.selected_pay_type.value,
            "system_size": {
                "value": size,
                "description": f"System size of {size:g} kW"
            },
            "contract_price": {
                "value": contract_price,
                "description": f"{size:g} kW × PPW × 1000 = {_fmt(contract_price)}"
            },
            "base_cost": {
                "value": base_cost,
                "description": f"{size:g} kW × 1000 × $3.50 = {_fmt(base_cost)}"
            },
            "adders": {
                "value": adders,
                "description": f"Equipment adders totalling {_fmt(adders)}" if adders else "No adders on this project"
            },
            "total_cost": {
                "value": total_cost,
                "description": f"base_cost ({_fmt(base_cost)}) + adders ({_fmt(adders)}) = {_fmt(total_cost)}"
            },
            "commission_amount": {
                "value": commission_amount,
                "description": f"contract_price ({_fmt(contract_price)}) - total_cost ({_fmt(total_cost)}) = {_fmt(commission_amount)}"
            },
            "commission_percentage": {
                "value": float(breakdown.commission_percentage),
                "description": f"{breakdown.selected_pay_type.value} rate of {rate}"
            },
            "final_commission": {
                "value": final,
                "description": f"{rate} × {_fmt(commission_amount)} = {_fmt(final)}" if breakdown.commission_amount > 0 else "Contract price does not cover total cost, no commission earned"
            }
        }

    def build_rep_stats(self, stats: RepStats) -> dict:
        return {
            "deal_count": stats.deal_count,
            "tier1_deals": stats.tier1_deals,
            "tier2_deals": stats.tier2_deals,
            "total_commission": to_money(stats.total_commission)
        }

    def build_company_stats(self, stats: CompanyStats) -> dict:
        return {
            "total_revenue": to_money(stats.total_revenue),
            "avg_system_size": round(float(stats.avg_system_size), 2),
            "avg_contract_value": to_money(stats.avg_contract_value)
        }

    def build_pay_summary(self, summary: PaySummary) -> dict:
        return {
            "user_id": summary.user_id,
            "year": summary.year,
            "pay_type": summary.pay_type.value,
            "deal_count": summary.deal_count,
            "upfront_pay": to_money(summary.upfront_pay),
            "milestone_pay": to_money(summary.milestone_pay),
            "total_pay": to_money(summary.total_pay)
        }
