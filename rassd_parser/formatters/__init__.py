"""
Output formatters for the RASSD QR parser.
"""

from .json_formatter import (
    parse_rassd_to_json,
    parse_rassd_to_dict,
    format_record_json,
    format_records_json,
)

__all__ = [
    "parse_rassd_to_json",
    "parse_rassd_to_dict",
    "format_record_json",
    "format_records_json",
]
