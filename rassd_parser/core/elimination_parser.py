"""
RASSD QR Elimination Parser

Parser for the GS1 element strings printed in RASSD pharmaceutical QR codes.
These strings are ALWAYS missing separators and carry exactly four AIs:
(01) GTIN, (17) expiry, (10) batch/lot and (21) serial.

The AI prefixes "10", "17" and "21" can appear inside the free-form batch
and serial values, so a naive split misparses. Fields are instead removed by
process of elimination, in an order where every step is unambiguous:

1. (01) is always at offset 0 with a fixed 14-digit value.
2. The first "17" followed by a structurally valid YYMMDD is the expiry.
   A "17" inside another value almost never passes the month/day check.
3. With the expiry spliced out, only (10) and (21) remain. Whichever marker
   comes first is bounded by the other; the second runs to the end.

Based on:
- GS1 AI Reference: https://ref.gs1.org/ai/
- RASSD track-and-trace QR layout (SFDA)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..validators.validators import (
    DEFAULT_CENTURY,
    is_valid_gs1_date,
    resolve_year,
    validate_expiry_date,
)


logger = logging.getLogger(__name__)


AI_GTIN = "01"
AI_BATCH_NUMBER = "10"
AI_EXPIRATION = "17"
AI_SERIAL_NUMBER = "21"

LENGTH_GTIN = 14
LENGTH_EXPIRATION = 6


class FailureReason(str, Enum):
    """Step at which an invalid parse stopped."""
    MISSING_GTIN_PREFIX = "MISSING_GTIN_PREFIX"
    NO_EXPIRATION_DATE = "NO_EXPIRATION_DATE"
    INVALID_EXPIRATION_DATE = "INVALID_EXPIRATION_DATE"
    MISSING_BATCH_OR_SERIAL = "MISSING_BATCH_OR_SERIAL"


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        century: Century base for two-digit years (YY -> century + YY).
                 No windowing is applied.
    """
    century: int = DEFAULT_CENTURY

    def __post_init__(self):
        resolve_year(0, self.century)


@dataclass(frozen=True)
class ParsedRecord:
    """
    Fields extracted from one RASSD QR payload.

    A field is None when the step producing it did not succeed. Empty
    batch/serial strings are present values, not missing ones.
    """
    raw: str
    gtin: Optional[str] = None
    batch_number: Optional[str] = None
    serial_number: Optional[str] = None
    expiration_date: Optional[date] = None
    raw_expiration: Optional[str] = None
    failure: Optional[FailureReason] = None

    @property
    def is_valid(self) -> bool:
        """True if GTIN, batch, serial and expiry were all extracted."""
        return (
            self.gtin is not None
            and self.batch_number is not None
            and self.serial_number is not None
            and self.expiration_date is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Project the four fields onto the GTIN/SN/BN/XD mapping."""
        return {
            "GTIN": self.gtin,
            "SN": self.serial_number,
            "BN": self.batch_number,
            "XD": self.expiration_date.isoformat() if self.expiration_date else None,
        }


def find_and_remove_date(remainder: str) -> Tuple[Optional[str], str]:
    """
    Find the first structurally valid (17) block and splice it out.

    Every "17" is a candidate, overlapping ones included: after a rejected
    candidate the search resumes one character later, never past the block.

    Returns:
        (YYMMDD value, remainder without the 8-char block), or
        (None, unchanged remainder) when no candidate is valid.
    """
    block_length = len(AI_EXPIRATION) + LENGTH_EXPIRATION
    pos = remainder.find(AI_EXPIRATION)

    while pos != -1:
        value_start = pos + len(AI_EXPIRATION)
        candidate = remainder[value_start:value_start + LENGTH_EXPIRATION]

        if is_valid_gs1_date(candidate):
            logger.debug("Accepted (17)%s at offset %d", candidate, pos)
            return candidate, remainder[:pos] + remainder[pos + block_length:]

        logger.debug("Rejected (17) candidate %r at offset %d", candidate, pos)
        pos = remainder.find(AI_EXPIRATION, pos + 1)

    return None, remainder


def split_batch_and_serial(remainder: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a remainder holding only the (10) and (21) blocks.

    The first occurrence of each marker is used. Whichever comes first is
    bounded by the other marker; the second runs to the end of the string.

    Returns:
        (batch_number, serial_number), both None if either marker is missing.
    """
    pos10 = remainder.find(AI_BATCH_NUMBER)
    pos21 = remainder.find(AI_SERIAL_NUMBER)

    if pos10 == -1 or pos21 == -1:
        return None, None

    if pos10 < pos21:
        # (10)...(21)...
        batch = remainder[pos10 + len(AI_BATCH_NUMBER):pos21]
        serial = remainder[pos21 + len(AI_SERIAL_NUMBER):]
    else:
        # (21)...(10)...
        serial = remainder[pos21 + len(AI_SERIAL_NUMBER):pos10]
        batch = remainder[pos10 + len(AI_BATCH_NUMBER):]

    return batch, serial


class RassdQrParser:
    """
    Process-of-elimination parser for RASSD QR codes.

    Keeps no per-parse state; one instance can serve any number of threads.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()

    def parse(self, qr_code: str) -> ParsedRecord:
        """
        Parse a RASSD QR payload.

        Never raises for malformed input: failures are reported through
        missing fields, is_valid and the failure reason.

        Args:
            qr_code: Raw data string from the QR code (no separators)

        Returns:
            ParsedRecord
        """
        if not isinstance(qr_code, str):
            raise TypeError(f"qr_code must be str, got {type(qr_code).__name__}")

        # (01) is always first
        gtin_end = len(AI_GTIN) + LENGTH_GTIN
        if not qr_code.startswith(AI_GTIN) or len(qr_code) < gtin_end:
            logger.debug("Missing (01) prefix in %r", qr_code)
            return ParsedRecord(raw=qr_code, failure=FailureReason.MISSING_GTIN_PREFIX)

        gtin = qr_code[len(AI_GTIN):gtin_end]
        remainder = qr_code[gtin_end:]

        raw_expiration, remainder = find_and_remove_date(remainder)
        if raw_expiration is None:
            logger.debug("No valid (17) block in %r", qr_code)
            return ParsedRecord(
                raw=qr_code,
                gtin=gtin,
                failure=FailureReason.NO_EXPIRATION_DATE,
            )

        date_result = validate_expiry_date(raw_expiration, self.options.century)
        expiration_date = date_result.meta.get('date') if date_result.valid else None
        if not date_result.valid:
            logger.debug("Expiry %s rejected: %s", raw_expiration, "; ".join(date_result.errors))
        for warning in date_result.warnings:
            logger.debug("Expiry %s: %s", raw_expiration, warning)

        # Only (10) and (21) are left
        batch, serial = split_batch_and_serial(remainder)

        failure = None
        if expiration_date is None:
            failure = FailureReason.INVALID_EXPIRATION_DATE
        elif batch is None:
            logger.debug("Missing (10) or (21) marker in %r", remainder)
            failure = FailureReason.MISSING_BATCH_OR_SERIAL

        return ParsedRecord(
            raw=qr_code,
            gtin=gtin,
            batch_number=batch,
            serial_number=serial,
            expiration_date=expiration_date,
            raw_expiration=raw_expiration,
            failure=failure,
        )


def parse_rassd_qr(
    qr_code: str,
    century: int = DEFAULT_CENTURY,
) -> ParsedRecord:
    """
    Parse a RASSD QR payload into GTIN, expiry, batch and serial.

    This is the main entry point for elimination parsing.

    Args:
        qr_code: Raw QR data (no separators)
        century: Century base for the two-digit expiry year

    Returns:
        ParsedRecord; check is_valid before trusting any field.

    Example:
        >>> record = parse_rassd_qr("01062810860101121727040110114487921215645645465456")
        >>> record.gtin, record.expiration_date.isoformat()
        ('06281086010112', '2027-04-01')
        >>> record.batch_number, record.serial_number
        ('1144879', '215645645465456')
    """
    parser = RassdQrParser(ParseOptions(century=century))
    return parser.parse(qr_code)
