"""
Upfront Pay Calculator

Flat per-deal payment that a rep receives on top of milestone commission.
"""

from decimal import Decimal

from ..models import PayType


class UpfrontPayCalculator:
    """Calculates upfront pay as deal count × per-deal tier rate."""

    PER_DEAL_RATES = {
        PayType.ROOKIE: Decimal("300"),
        PayType.VET: Decimal("600"),
        PayType.PRO: Decimal("800"),
    }

    def calculate(self, deal_count: int, pay_type=PayType.ROOKIE) -> Decimal:
        if deal_count <= 0:
            return Decimal("0")
        return self.PER_DEAL_RATES[PayType.resolve(pay_type)] * deal_count


def calculate_upfront_pay(deal_count: int, pay_type=PayType.ROOKIE) -> Decimal:
    return UpfrontPayCalculator().calculate(deal_count, pay_type)
