"""
Commission Calculator

Computes the full commission breakdown for a single project.
"""

from decimal import Decimal

from ..models import CommissionBreakdown, PayType, Project
from ..normalizers import ZERO, to_decimal


class CommissionCalculator:
    """Calculates a rep's commission for one project at a given pay tier."""

    WATTS_PER_KW = Decimal("1000")
    BASE_COST_PER_WATT = Decimal("3.5")

    # Fixed-dollar adders, keyed by Project attribute
    ADDER_AMOUNTS = {
        "ea_battery": Decimal("8000"),
        "backup_battery": Decimal("13000"),
        "mpu": Decimal("3500"),
        "hti": Decimal("2500"),
        "reroof": Decimal("15000"),
    }

    def calculate(self, project: Project, pay_type=PayType.ROOKIE) -> CommissionBreakdown:
        """
        Calculate the commission breakdown.

        Contract Price = kW × PPW × 1000
        Base Cost      = kW × 1000 × $3.50
        Total Cost     = Base Cost + Adders
        Commission     = Contract Price - Total Cost   (may be negative)
        Final          = max(0, Commission) × tier rate
        """
        selected = PayType.resolve(pay_type)

        system_size = to_decimal(project.system_size)
        ppw = to_decimal(project.gross_ppw)

        contract_price = system_size * ppw * self.WATTS_PER_KW
        base_cost = system_size * self.WATTS_PER_KW * self.BASE_COST_PER_WATT
        adders = self.calculate_adders(project)
        total_cost = base_cost + adders
        commission_amount = contract_price - total_cost

        percentage = selected.rate
        final_commission = max(ZERO, commission_amount) * percentage

        return CommissionBreakdown(
            system_size=system_size,
            contract_price=contract_price,
            base_cost=base_cost,
            adders=adders,
            total_cost=total_cost,
            commission_amount=commission_amount,
            commission_percentage=percentage,
            final_commission=final_commission,
            selected_pay_type=selected,
        )

    def calculate_adders(self, project: Project) -> Decimal:
        """Sum the fixed amount of every adder flagged on the project."""
        adders = ZERO
        for field_name, amount in self.ADDER_AMOUNTS.items():
            if getattr(project, field_name):
                adders += amount
        return adders


_calculator = CommissionCalculator()


def compute_breakdown(project: Project, pay_type=PayType.ROOKIE) -> CommissionBreakdown:
    """Module-level shortcut for CommissionCalculator().calculate()."""
    return _calculator.calculate(project, pay_type)
