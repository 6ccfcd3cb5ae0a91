"""
Input Normalization for the Solar Earnings Engine

Coerces raw record fields into well-defined values. Every function here is
fail-soft: malformed input degrades to a documented default and never raises.
"""

import logging
import re
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .models import ProjectStatus

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Anything larger reads as Infinity to a float parser
MAX_MAGNITUDE = Decimal(sys.float_info.max)

# Leading number, the way spreadsheet cells like "6.5 kW" are read
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_DATE_FORMATS = (
    "%m/%d/%Y", "%m/%d/%y", "%Y/%m/%d",
    "%B %d, %Y", "%b %d, %Y", "%B %d %Y", "%b %d %Y",
    "%Y-%m", "%Y",
)

# Checked in order; first keyword hit wins
_CRM_STATUS_KEYWORDS = [
    (("survey", "site"), ProjectStatus.SITE_SURVEY),
    (("install", "construction"), ProjectStatus.INSTALL),
    (("pto", "permission"), ProjectStatus.PTO),
    (("paid", "complete"), ProjectStatus.PAID),
    (("cancel", "lost"), ProjectStatus.CANCELLED),
]


def to_decimal(value) -> Decimal:
    """
    Parse a numeric-like value into a Decimal.

    Missing, empty, non-numeric and non-finite values all become 0, as do
    values whose magnitude is beyond float range.
    Strings are read up to the end of their leading number.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, Decimal):
        return _in_range(value)

    if isinstance(value, (int, float)):
        return _in_range(Decimal(str(value)))

    match = _NUMERIC_PREFIX.match(str(value))
    if not match:
        logger.debug(f"Non-numeric value {value!r} treated as 0")
        return ZERO

    try:
        return _in_range(Decimal(match.group(1)))
    except InvalidOperation:
        logger.debug(f"Unparseable value {value!r} treated as 0")
        return ZERO


def _in_range(result: Decimal) -> Decimal:
    if not result.is_finite() or abs(result) > MAX_MAGNITUDE:
        logger.debug(f"Out-of-range value {result} treated as 0")
        return ZERO
    return result


def parse_calendar_date(value) -> date | None:
    """
    Parse an install date.

    Accepts date/datetime objects, ISO-8601 strings (with or without a time
    part) and common US spreadsheet formats. Returns None when the value
    cannot be read as a date.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_text).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    logger.debug(f"Unparseable install date {value!r}")
    return None


def install_year(value) -> int | None:
    parsed = parse_calendar_date(value)
    return parsed.year if parsed else None


def map_crm_status(crm_status) -> ProjectStatus:
    """
    Map a free-text CRM status (spreadsheet import) onto a ProjectStatus.

    Anything unrecognized starts at site_survey.
    """
    status = str(crm_status or "").lower().strip()

    for keywords, mapped in _CRM_STATUS_KEYWORDS:
        if any(keyword in status for keyword in keywords):
            return mapped

    return ProjectStatus.SITE_SURVEY
