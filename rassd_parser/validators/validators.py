"""
RASSD Date Validation Functions

Implements the two date checks used by the elimination parser:
- Structural check of a YYMMDD candidate (month 01-12, day 00-31)
- Calendar date construction with the GS1 "day 00 = last day of month" rule

Based on GS1 General Specifications (AI 17, YYMMDD with DD=00 allowed).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from dateutil.relativedelta import relativedelta


DEFAULT_CENTURY = 2000

NUMERIC = frozenset('0123456789')


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def resolve_year(yy: int, century: int = DEFAULT_CENTURY) -> int:
    """
    Resolve a two-digit year against a fixed century base.

    No windowing is applied: 99 with the default base is 2099, not 1999.
    """
    if not 0 <= yy <= 99:
        raise ValueError(f"Two-digit year out of range: {yy}")
    if century % 100 != 0:
        raise ValueError(f"Century base must be a multiple of 100, got {century}")
    return century + yy


def is_valid_gs1_date(value: str) -> bool:
    """
    Structural check of a YYMMDD expiration date candidate.

    The year is unconstrained, the month must be 01-12 and the day 00-31.
    Day 00 is legal and means "last day of the month". Month lengths are
    not checked here.
    """
    if len(value) != 6 or not set(value) <= NUMERIC:
        return False

    mm = int(value[2:4])
    dd = int(value[4:6])
    return 1 <= mm <= 12 and 0 <= dd <= 31


def validate_expiry_date(
    value: str,
    century: int = DEFAULT_CENTURY
) -> ValidationResult:
    """
    Build the calendar date for a YYMMDD expiration value.

    Day 00 resolves to the last day of the month (leap years respected).
    A day past the end of its month rolls into the next month, so 31
    February 2027 becomes 3 March 2027. Other errors (such as a bad century)
    are reported in the result, not raised.

    Args:
        value: 6-digit YYMMDD string
        century: Century base added to the two-digit year

    Returns:
        ValidationResult with the date under meta['date']
    """
    result = ValidationResult(valid=True)

    if not is_valid_gs1_date(value):
        result.valid = False
        result.errors.append(f"Not a YYMMDD date: {value!r}")
        return result

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    try:
        year = resolve_year(yy, century)
        if dd == 0:
            expiry = date(year, mm, 1) + relativedelta(day=31)
            result.meta['end_of_month'] = True
        else:
            expiry = date(year, mm, 1) + relativedelta(days=dd - 1)
            if expiry.month != mm:
                result.meta['rolled_over'] = True
                result.warnings.append(
                    f"Day {dd} past end of month {mm}, rolled to {expiry.isoformat()}"
                )
    except ValueError as e:
        result.valid = False
        result.errors.append(f"Date parsing error: {e}")
        return result

    result.meta['date'] = expiry
    result.meta['iso_date'] = expiry.isoformat()
    return result
