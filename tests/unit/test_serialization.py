"""Tests for the wire codec — canonical JSON and report digests."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest
from pydantic import ValidationError

from pinreport.core.serialization import (
    canonical_json_bytes,
    decode_report,
    encode_report,
    report_digest,
    report_to_wire,
)
from pinreport.models.report import MismatchReport


class TestCanonicalJson:
    def test_sorted_and_compact(self):
        assert canonical_json_bytes({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_ascii_escaped(self):
        assert canonical_json_bytes({"h": "bücher.example"}) == b'{"h":"b\\u00fccher.example"}'


class TestEncodeReport:
    def test_payload_types(self, report: MismatchReport):
        wire = json.loads(encode_report(report))
        assert wire["hostname"] == "mail.example.com"
        assert wire["port"] == 443
        assert wire["include-subdomains"] is False
        assert wire["validated-certificate-chain"] == []
        assert wire["known-pins"] == ['pin-sha256="AAA="']
        assert wire["app-version"] == "1.0.0"
        assert wire["date-time"] == "2026-03-14T09:26:53Z"
        assert wire["effective-expiration-date"] == "2027-03-14T09:26:53Z"
        assert isinstance(wire["served-certificate-chain"], list)

    def test_deterministic(self, make_report: Callable[..., MismatchReport]):
        assert encode_report(make_report()) == encode_report(make_report())

    def test_matches_wire_dict(self, report: MismatchReport):
        assert json.loads(encode_report(report)) == report_to_wire(report)

    def test_round_trip_preserves_every_field(self, report: MismatchReport):
        decoded = decode_report(encode_report(report))
        assert decoded == report
        assert decoded.served_chain == report.served_chain
        assert decoded.noted_hostname == report.noted_hostname


class TestDecodeReport:
    def test_rejects_missing_fields(self):
        with pytest.raises(ValidationError):
            decode_report(b'{"hostname": "h"}')

    def test_accepts_str(self, report: MismatchReport):
        assert decode_report(encode_report(report).decode("utf-8")) == report


class TestReportDigest:
    def test_format(self):
        digest = report_digest(b"{}")
        assert digest.startswith("sha256:")
        assert len(digest) == len("sha256:") + 64

    def test_differs_per_report(self, make_report: Callable[..., MismatchReport]):
        a = report_digest(encode_report(make_report(host="a.example.com")))
        b = report_digest(encode_report(make_report(host="b.example.com")))
        assert a != b
