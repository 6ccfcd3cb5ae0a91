"""
Domain Models for the Solar Earnings Engine

These dataclasses provide type-safe representations of all business entities.
All monetary values use Decimal for precision.
"""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)

# =============================================================================
# ENUMERATIONS
# =============================================================================


class PayType(Enum):
    """A rep's commission-rate bracket."""

    ROOKIE = "Rookie"
    VET = "Vet"
    PRO = "Pro"

    @property
    def rate(self) -> Decimal:
        return PAY_TYPE_RATES[self]

    @classmethod
    def resolve(cls, value) -> "PayType":
        """Return the matching PayType, falling back to Rookie for anything unknown."""
        if isinstance(value, cls):
            return value
        for pay_type in cls:
            if value == pay_type.value:
                return pay_type
        return cls.ROOKIE


PAY_TYPE_RATES = {
    PayType.ROOKIE: Decimal("0.24"),
    PayType.VET: Decimal("0.39"),
    PayType.PRO: Decimal("0.50"),
}


class ProjectStatus(Enum):
    """Pipeline stage of an installation."""

    SITE_SURVEY = "site_survey"
    INSTALL = "install"
    PTO = "pto"
    PAID = "paid"
    CANCELLED = "cancelled"
    ON_HOLD = "on_hold"

    @property
    def is_terminal(self) -> bool:
        return self in (ProjectStatus.PAID, ProjectStatus.CANCELLED)

    def can_transition_to(self, other: "ProjectStatus") -> bool:
        """
        Describe the conventional lifecycle.

        site_survey -> install -> pto -> paid, with cancelled and on_hold
        reachable from any non-terminal state. on_hold may return to any
        active (pre-paid) state. Nothing in the engine enforces this.
        """
        if self.is_terminal or other == self:
            return False
        if other in (ProjectStatus.CANCELLED, ProjectStatus.ON_HOLD):
            return True
        if self == ProjectStatus.ON_HOLD:
            return other in _ACTIVE_FLOW[:-1]
        return other in _ACTIVE_FLOW and _ACTIVE_FLOW.index(other) == _ACTIVE_FLOW.index(self) + 1


_ACTIVE_FLOW = [ProjectStatus.SITE_SURVEY, ProjectStatus.INSTALL, ProjectStatus.PTO, ProjectStatus.PAID]


# =============================================================================
# INPUT MODELS
# =============================================================================


@dataclass(frozen=True)
class Project:
    """
    A single solar installation deal as supplied by the import/persistence layer.

    Numeric fields are kept exactly as supplied (usually strings); the
    calculators coerce them on read.
    """

    id: str = ""
    customer_name: str = ""
    address: str = ""
    install_date: object = None
    status: object = ProjectStatus.SITE_SURVEY.value
    system_size: object = None  # kW
    gross_ppw: object = None
    payment_amount: object = None
    ea_battery: bool | None = None
    backup_battery: bool | None = None
    mpu: bool | None = None
    hti: bool | None = None
    reroof: bool | None = None
    office: str | None = None
    user_id: str | None = None
    deal_number: object = None

    @property
    def status_value(self) -> str | None:
        """The raw status string, whether stored as an enum or as text."""
        if isinstance(self.status, ProjectStatus):
            return self.status.value
        return self.status

    @property
    def is_cancelled(self) -> bool:
        return self.status_value == ProjectStatus.CANCELLED.value

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        # Records arrive camelCased from the web collaborators; snake_case is
        # accepted for Python callers.
        def pick(snake, camel, default=None):
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            id=str(data["id"]) if data.get("id") is not None else "",
            customer_name=pick("customer_name", "customerName", ""),
            address=data.get("address", ""),
            install_date=pick("install_date", "installDate"),
            status=data.get("status", ProjectStatus.SITE_SURVEY.value),
            system_size=pick("system_size", "systemSize"),
            gross_ppw=pick("gross_ppw", "grossPPW"),
            payment_amount=pick("payment_amount", "paymentAmount"),
            ea_battery=pick("ea_battery", "eaBattery"),
            backup_battery=pick("backup_battery", "backupBattery"),
            mpu=data.get("mpu"),
            hti=data.get("hti"),
            reroof=data.get("reroof"),
            office=data.get("office"),
            user_id=pick("user_id", "userId"),
            deal_number=pick("deal_number", "dealNumber"),
        )


@dataclass(frozen=True)
class TierPolicy:
    """Paid-project thresholds used to infer a rep's pay tier."""

    vet_threshold: int = 10
    pro_threshold: int = 20

    @classmethod
    def from_env(cls) -> "TierPolicy":
        default = cls()
        return cls(
            vet_threshold=_int_from_env("EARNINGS_VET_THRESHOLD", default.vet_threshold),
            pro_threshold=_int_from_env("EARNINGS_PRO_THRESHOLD", default.pro_threshold),
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


DEFAULT_TIER_POLICY = TierPolicy()


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class CommissionBreakdown:
    """All intermediate and final values of one project's commission."""

    system_size: Decimal
    contract_price: Decimal
    base_cost: Decimal
    adders: Decimal
    total_cost: Decimal
    commission_amount: Decimal  # Before tier rate and clamp, may be negative
    commission_percentage: Decimal
    final_commission: Decimal
    selected_pay_type: PayType


@dataclass
class RepStats:
    """Deal statistics for one rep's (already scoped) projects."""

    deal_count: int = 0
    tier1_deals: int = 0
    tier2_deals: int = 0
    total_commission: Decimal = Decimal("0")


@dataclass
class CompanyStats:
    """Averages across a project collection."""

    total_revenue: Decimal = Decimal("0")
    avg_system_size: Decimal = Decimal("0")
    avg_contract_value: Decimal = Decimal("0")


@dataclass
class PaySummary:
    """
    Year-to-date pay for a rep.

    total_pay = upfront_pay + milestone_pay
    """

    user_id: str
    year: int
    pay_type: PayType
    deal_count: int = 0
    upfront_pay: Decimal = Decimal("0")
    milestone_pay: Decimal = Decimal("0")

    @property
    def total_pay(self) -> Decimal:
        return self.upfront_pay + self.milestone_pay
