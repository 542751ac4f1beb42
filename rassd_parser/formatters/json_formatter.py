"""
JSON Formatter for the RASSD QR Parser

Provides the fixed-key projection used by downstream systems:
- "GTIN", "SN", "BN", "XD" in that order
- Expiry rendered as ISO YYYY-MM-DD, null when missing
- Pretty-printed, slashes and non-ASCII left unescaped
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable

from ..core.elimination_parser import ParsedRecord, parse_rassd_qr


def format_record_json(record: ParsedRecord, include_validity: bool = False) -> str:
    """
    Format a parsed record as JSON.

    Args:
        record: Result of parse_rassd_qr()
        include_validity: Add "_valid" and "_failure" keys (default: False)

    Returns:
        Pretty JSON string with stable key order
    """
    return json.dumps(_record_output(record, include_validity), ensure_ascii=False, indent=2)


def format_records_json(records: Iterable[ParsedRecord], include_validity: bool = False) -> str:
    """Format several records as a JSON array."""
    output = [_record_output(record, include_validity) for record in records]
    return json.dumps(output, ensure_ascii=False, indent=2)


def _record_output(record: ParsedRecord, include_validity: bool) -> Dict[str, Any]:
    output = record.to_dict()
    if include_validity:
        output["_valid"] = record.is_valid
        output["_failure"] = record.failure.value if record.failure else None
    return output


def parse_rassd_to_json(
    qr_code: str,
    include_validity: bool = False,
    **parse_options
) -> str:
    """
    Parse a RASSD QR code and return JSON output.

    Args:
        qr_code: Raw QR data (no separators)
        include_validity: Add "_valid" and "_failure" keys (default: False)
        **parse_options: Additional options for parse_rassd_qr()

    Returns:
        JSON string with parsed fields

    Example:
        >>> print(parse_rassd_to_json("01062810860101121727040110114487921215645645465456"))
        {
          "GTIN": "06281086010112",
          "SN": "215645645465456",
          "BN": "1144879",
          "XD": "2027-04-01"
        }
    """
    record = parse_rassd_qr(qr_code, **parse_options)
    return format_record_json(record, include_validity=include_validity)


def parse_rassd_to_dict(qr_code: str, **parse_options) -> Dict[str, Any]:
    """
    Parse a RASSD QR code and return the GTIN/SN/BN/XD dictionary.

    Args:
        qr_code: Raw QR data (no separators)
        **parse_options: Additional options for parse_rassd_qr()
    """
    return parse_rassd_qr(qr_code, **parse_options).to_dict()
