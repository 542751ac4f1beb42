"""
Core parsing modules for the RASSD QR parser.
"""

from .elimination_parser import (
    parse_rassd_qr,
    RassdQrParser,
    ParseOptions,
    ParsedRecord,
    FailureReason,
    find_and_remove_date,
    split_batch_and_serial,
)

__all__ = [
    "parse_rassd_qr",
    "RassdQrParser",
    "ParseOptions",
    "ParsedRecord",
    "FailureReason",
    "find_and_remove_date",
    "split_batch_and_serial",
]
