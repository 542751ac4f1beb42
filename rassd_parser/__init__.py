"""
RASSD QR Code Parser

Extracts GTIN, expiry date, batch/lot and serial number from the GS1
element strings printed without separators in RASSD pharmaceutical QR codes,
using a process-of-elimination strategy.

Based on GS1 General Specifications (AIs 01, 17, 10, 21).
"""

from .core.elimination_parser import (
    parse_rassd_qr,
    RassdQrParser,
    ParseOptions,
    ParsedRecord,
    FailureReason,
)
from .validators.validators import (
    is_valid_gs1_date,
    validate_expiry_date,
    resolve_year,
    ValidationResult,
)
from .formatters.json_formatter import (
    parse_rassd_to_json,
    parse_rassd_to_dict,
    format_record_json,
    format_records_json,
)

__version__ = "1.0.0"
__all__ = [
    "parse_rassd_qr",
    "RassdQrParser",
    "ParseOptions",
    "ParsedRecord",
    "FailureReason",
    "is_valid_gs1_date",
    "validate_expiry_date",
    "resolve_year",
    "ValidationResult",
    "parse_rassd_to_json",
    "parse_rassd_to_dict",
    "format_record_json",
    "format_records_json",
]
