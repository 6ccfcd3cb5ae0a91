"""
Pay Summary

A rep's year-to-date pay: upfront pay per deal plus milestone commission.
"""

from .aggregation import AggregationEngine, filter_by_user
from .calculators import PayTierResolver, UpfrontPayCalculator
from .models import DEFAULT_TIER_POLICY, PaySummary, PayType, TierPolicy


class PaySummaryBuilder:
    """Combines tier resolution, upfront pay and milestone pay for one rep."""

    def __init__(self, policy: TierPolicy = DEFAULT_TIER_POLICY):
        self.tier_resolver = PayTierResolver(policy)
        self.upfront_calculator = UpfrontPayCalculator()
        self.aggregation = AggregationEngine()

    def build(self, user_id: str, projects, year: int, pay_type=None) -> PaySummary:
        """
        Build the summary.

        When pay_type is omitted the tier is resolved from the rep's paid
        history in the full collection. Deal count covers the rep's
        non-cancelled projects; milestone pay covers the rep's projects
        installed in the year.
        """
        if pay_type is None:
            selected = self.tier_resolver.resolve(user_id, projects)
        else:
            selected = PayType.resolve(pay_type)

        rep_projects = filter_by_user(projects, user_id)
        deal_count = sum(1 for p in rep_projects if not p.is_cancelled)

        return PaySummary(
            user_id=user_id,
            year=year,
            pay_type=selected,
            deal_count=deal_count,
            upfront_pay=self.upfront_calculator.calculate(deal_count, selected),
            milestone_pay=self.aggregation.team_earnings(rep_projects, year, selected),
        )


def build_pay_summary(user_id: str, projects, year: int, pay_type=None,
                      policy: TierPolicy = DEFAULT_TIER_POLICY) -> PaySummary:
    return PaySummaryBuilder(policy).build(user_id, projects, year, pay_type)
