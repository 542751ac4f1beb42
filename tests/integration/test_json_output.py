"""
Tests for JSON formatter output.

Ensures the GTIN/SN/BN/XD projection:
- Uses the fixed keys in a stable order
- Renders the expiry as ISO YYYY-MM-DD, null when missing
- Is pretty-printed
"""

import json

import pytest
from rassd_parser import (
    parse_rassd_qr,
    parse_rassd_to_json,
    parse_rassd_to_dict,
    format_record_json,
    format_records_json,
)


ROUND_TRIP = "01062810860101121727040110114487921215645645465456"


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_basic_json_output(self):
        json_output = parse_rassd_to_json(ROUND_TRIP)

        data = json.loads(json_output)

        assert data == {
            "GTIN": "06281086010112",
            "SN": "215645645465456",
            "BN": "1144879",
            "XD": "2027-04-01",
        }

    def test_stable_key_order(self):
        data = json.loads(parse_rassd_to_json(ROUND_TRIP))

        assert list(data.keys()) == ["GTIN", "SN", "BN", "XD"]

    def test_pretty_printed(self):
        json_output = parse_rassd_to_json(ROUND_TRIP)

        assert json_output.startswith('{\n  "GTIN": ')
        assert json_output.count('\n') == 5

    def test_slashes_not_escaped(self):
        json_output = parse_rassd_to_json("010628108601011217270401" + "10A/B21C/D")

        assert '"BN": "A/B"' in json_output
        assert '"SN": "C/D"' in json_output

    def test_end_of_month_iso_date(self):
        data = parse_rassd_to_dict("010625115902606717290400104562202106902409792902")

        assert data["XD"] == "2029-04-30"

    def test_invalid_record_uses_null(self):
        data = json.loads(parse_rassd_to_json("0106281086010112" + "10ABC21XYZ"))

        assert data == {
            "GTIN": "06281086010112",
            "SN": None,
            "BN": None,
            "XD": None,
        }

    def test_wrong_prefix_all_null(self):
        data = parse_rassd_to_dict("garbage")

        assert all(value is None for value in data.values())

    def test_parse_options_forwarded(self):
        data = parse_rassd_to_dict(ROUND_TRIP, century=1900)

        assert data["XD"] == "1927-04-01"


class TestValidityKeys:
    """Optional validity metadata."""

    def test_not_included_by_default(self):
        data = json.loads(parse_rassd_to_json(ROUND_TRIP))

        assert "_valid" not in data
        assert "_failure" not in data

    def test_valid_record(self):
        data = json.loads(parse_rassd_to_json(ROUND_TRIP, include_validity=True))

        assert data["_valid"] is True
        assert data["_failure"] is None

    def test_invalid_record(self):
        record = parse_rassd_qr("0106281086010112" + "17270401" + "10ABCDEF")

        data = json.loads(format_record_json(record, include_validity=True))

        assert data["_valid"] is False
        assert data["_failure"] == "MISSING_BATCH_OR_SERIAL"
        assert data["XD"] == "2027-04-01"


class TestMultipleRecords:

    def test_array_output(self):
        records = [parse_rassd_qr(ROUND_TRIP), parse_rassd_qr("bad")]

        data = json.loads(format_records_json(records))

        assert isinstance(data, list)
        assert len(data) == 2
        assert data[0]["GTIN"] == "06281086010112"
        assert data[1]["GTIN"] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
