"""
CLI interface for the RASSD QR parser.

Usage:
    python -m rassd_parser "<qr code>" ["<qr code>" ...] [options]

Options:
    --json              Output the GTIN/SN/BN/XD projection as JSON
    --century N         Century base for two-digit expiry years (default 2000)
    -v, --verbose       Debug logging to stderr
"""

import argparse
import logging
import sys
from typing import Optional

from .core.elimination_parser import ParseOptions, ParsedRecord, RassdQrParser
from .formatters.json_formatter import format_record_json, format_records_json
from .validators.validators import DEFAULT_CENTURY


def format_result(record: ParsedRecord) -> str:
    """Format a parsed record for display."""
    expiry = record.expiration_date.isoformat() if record.expiration_date else None
    lines = [
        "=" * 60,
        "RASSD QR Parse Result",
        "=" * 60,
        f"Raw Input: {record.raw!r}",
        "",
        f"  GTIN:   {record.gtin!r}",
        f"  Expiry: {expiry!r} (raw: {record.raw_expiration!r})",
        f"  Batch:  {record.batch_number!r}",
        f"  Serial: {record.serial_number!r}",
        "",
        f"Valid: {record.is_valid}",
    ]

    if record.failure:
        lines.append(f"Failure: {record.failure.value}")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='rassd_parser',
        description='Parse RASSD QR codes (GS1 AIs 01, 17, 10, 21 without separators)'
    )

    parser.add_argument(
        'qr_codes',
        nargs='+',
        metavar='qr_code',
        help='QR code data to parse'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--century',
        type=int,
        default=DEFAULT_CENTURY,
        help='Century base for two-digit expiry years'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        options = ParseOptions(century=args.century)
    except ValueError as e:
        parser.error(str(e))

    qr_parser = RassdQrParser(options)
    records = [qr_parser.parse(qr_code) for qr_code in args.qr_codes]

    if args.json:
        if len(records) == 1:
            print(format_record_json(records[0]))
        else:
            print(format_records_json(records))
    else:
        print('\n\n'.join(format_result(record) for record in records))

    # Non-zero exit if any code failed to parse
    return 0 if all(record.is_valid for record in records) else 1


if __name__ == '__main__':
    sys.exit(main())
