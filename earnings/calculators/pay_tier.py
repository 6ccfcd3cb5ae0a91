"""
Pay Tier Resolver

Infers a rep's pay tier from their paid-project history.
"""

from ..models import DEFAULT_TIER_POLICY, PayType, ProjectStatus, TierPolicy


class PayTierResolver:
    """Maps a rep's paid-project count onto Rookie / Vet / Pro."""

    def __init__(self, policy: TierPolicy = DEFAULT_TIER_POLICY):
        self.policy = policy

    def count_paid_projects(self, user_id, projects) -> int:
        """Paid projects owned by the rep, across all years."""
        return sum(
            1 for project in projects
            if project.user_id == user_id and project.status_value == ProjectStatus.PAID.value
        )

    def resolve(self, user_id, projects) -> PayType:
        """
        Resolve the tier from the full supplied collection.

        Nothing is remembered between calls; callers wanting a stable tier
        over a session must snapshot the collection themselves.
        """
        paid = self.count_paid_projects(user_id, projects)

        if paid >= self.policy.pro_threshold:
            return PayType.PRO
        if paid >= self.policy.vet_threshold:
            return PayType.VET
        return PayType.ROOKIE


def resolve_pay_type(user_id, projects, policy: TierPolicy = DEFAULT_TIER_POLICY) -> PayType:
    return PayTierResolver(policy).resolve(user_id, projects)
