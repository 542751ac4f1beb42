"""
Validation modules for the RASSD QR parser.
"""

from .validators import (
    is_valid_gs1_date,
    validate_expiry_date,
    resolve_year,
    ValidationResult,
    DEFAULT_CENTURY,
    NUMERIC,
)

__all__ = [
    "is_valid_gs1_date",
    "validate_expiry_date",
    "resolve_year",
    "ValidationResult",
    "DEFAULT_CENTURY",
    "NUMERIC",
]
