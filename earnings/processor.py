"""
Earnings Processor - Main Orchestrator

Turns raw request dictionaries into engine calls and JSON-ready results.
"""

from typing import Any, Dict

from .aggregation import AggregationEngine
from .calculators import CommissionCalculator, PayTierResolver, StatsCalculator
from .models import DEFAULT_TIER_POLICY, PayType, Project, TierPolicy
from .output import OutputBuilder, to_money
from .summary import PaySummaryBuilder
from .validators import RequestValidator


class EarningsProcessor:
    """
    Main orchestrator for API operations.

    Every operation follows the same steps:
    1. Validate request shape
    2. Build Project models
    3. Run the engine
    4. Build output
    """

    def __init__(self, policy: TierPolicy = DEFAULT_TIER_POLICY):
        self.policy = policy
        self.validator = RequestValidator()
        self.commission_calculator = CommissionCalculator()
        self.aggregation = AggregationEngine(self.commission_calculator)
        self.tier_resolver = PayTierResolver(policy)
        self.stats_calculator = StatsCalculator()
        self.summary_builder = PaySummaryBuilder(policy)
        self.output_builder = OutputBuilder()

    def breakdown(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.validator.validate_breakdown(data)

        project = Project.from_dict(data["project"])
        result = self.commission_calculator.calculate(project, data.get("pay_type", PayType.ROOKIE))

        return {
            "project_id": project.id,
            "breakdown": self.output_builder.build_breakdown(result)
        }

    def team_earnings(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.validator.validate_projects_request(data)

        projects = self._build_projects(data)
        pay_type = PayType.resolve(data.get("pay_type"))
        office = data.get("office")

        if office is None:
            total = self.aggregation.team_earnings(projects, data["year"], pay_type)
        else:
            total = self.aggregation.team_earnings_by_office(projects, office, data["year"], pay_type)

        return {
            "year": data["year"],
            "office": office,
            "pay_type": pay_type.value,
            "team_earnings": to_money(total)
        }

    def manager_commission(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.validator.validate_projects_request(data)

        projects = self._build_projects(data)
        total = self.aggregation.manager_commission(projects, data["year"])

        return {
            "year": data["year"],
            "manager_commission": to_money(total)
        }

    def team_revenue(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.validator.validate_projects_request(data)

        projects = self._build_projects(data)
        office = data.get("office")

        if office is None:
            total = self.aggregation.team_revenue(projects, data["year"])
        else:
            total = self.aggregation.team_revenue_by_office(projects, office, data["year"])

        return {
            "year": data["year"],
            "office": office,
            "team_revenue": to_money(total)
        }

    def pay_type(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.validator.validate_user_request(data)

        projects = self._build_projects(data)
        user_id = data["user_id"]

        return {
            "user_id": user_id,
            "pay_type": self.tier_resolver.resolve(user_id, projects).value,
            "paid_projects": self.tier_resolver.count_paid_projects(user_id, projects)
        }

    def pay_summary(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Rep pay summary plus the rep's deal stats and company-wide averages."""
        self.validator.validate_user_request(data, require_year=True)

        projects = self._build_projects(data)
        user_id = data["user_id"]
        summary = self.summary_builder.build(user_id, projects, data["year"], data.get("pay_type"))
        rep_projects = [p for p in projects if p.user_id == user_id]

        output = self.output_builder.build_pay_summary(summary)
        output["rep_stats"] = self.output_builder.build_rep_stats(
            self.stats_calculator.rep_stats(rep_projects)
        )
        output["company_stats"] = self.output_builder.build_company_stats(
            self.stats_calculator.company_stats(projects)
        )
        return output

    def _build_projects(self, data: Dict[str, Any]) -> list[Project]:
        return [Project.from_dict(p) for p in data["projects"]]
