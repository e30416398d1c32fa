"""Tests for whoisrecord.parser.flat."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from whoisrecord.parser.flat import parse_flat

_UTC = timezone.utc


# ---------------------------------------------------------------------------
# Canonical fields
# ---------------------------------------------------------------------------


class TestCanonicalFields:
    _RESPONSE = (
        "Domain Name: EXAMPLE.COM\n"
        "Registrar: Example Registrar LLC\n"
        "Name Server: NS1.EXAMPLE.COM\n"
        "Name Server: ns1.example.com\n"
        "Creation Date: 1995-08-14T04:00:00Z\n"
    )

    def test_domain(self) -> None:
        assert parse_flat(self._RESPONSE).domain == "EXAMPLE.COM"

    def test_registrar(self) -> None:
        assert parse_flat(self._RESPONSE).registrar == "Example Registrar LLC"

    def test_nameservers_are_deduplicated(self) -> None:
        assert parse_flat(self._RESPONSE).nameservers == ("ns1.example.com",)

    def test_creation_date(self) -> None:
        assert parse_flat(self._RESPONSE).created_at == datetime(1995, 8, 14, 4, 0, tzinfo=_UTC)

    def test_raw_text_is_kept(self) -> None:
        assert parse_flat(self._RESPONSE).raw_text == self._RESPONSE

    def test_verisign_response(self, verisign_response: str) -> None:
        record = parse_flat(verisign_response)
        assert record.domain == "EXAMPLE.COM"
        assert record.registrar == "RESERVED-Internet Assigned Numbers Authority"
        assert record.nameservers == ("a.iana-servers.net", "b.iana-servers.net")
        assert record.created_at == datetime(1995, 8, 14, 4, 0, tzinfo=_UTC)
        assert record.updated_at == datetime(2023, 8, 14, 7, 1, 38, tzinfo=_UTC)
        assert record.expires_at == datetime(2024, 8, 13, 4, 0, tzinfo=_UTC)

    def test_sponsoring_registrar(self) -> None:
        assert parse_flat("Sponsoring Registrar: Old Registrar Inc.").registrar == "Old Registrar Inc."

    @pytest.mark.parametrize("label", ["Expiration Date", "Registry Expiry Date", "EXPIRATION DATE"])
    def test_expiry_labels(self, label: str) -> None:
        record = parse_flat(f"{label}: 2030-01-02T03:04:05Z")
        assert record.expires_at == datetime(2030, 1, 2, 3, 4, 5, tzinfo=_UTC)

    def test_value_keeps_later_colons(self) -> None:
        assert parse_flat("Registrar: http://registrar.example").registrar == "http://registrar.example"

    def test_later_line_overwrites_earlier(self) -> None:
        assert parse_flat("Registrar: First\nRegistrar: Second").registrar == "Second"

    def test_unknown_labels_are_dropped(self) -> None:
        record = parse_flat("DNSSEC: unsigned\nRegistrar IANA ID: 292\nDomain Status: ok")
        assert record.is_empty

    def test_crlf_line_endings(self) -> None:
        record = parse_flat("Domain Name: EXAMPLE.COM\r\nName Server: NS1.EXAMPLE.COM\r\n")
        assert record.domain == "EXAMPLE.COM"
        assert record.nameservers == ("ns1.example.com",)


# ---------------------------------------------------------------------------
# Lines that must not change the record
# ---------------------------------------------------------------------------


class TestIgnoredLines:
    @pytest.mark.parametrize(
        "line",
        ["", "   ", "no colon on this line", ">>> Last update of whois database <<<", ": orphan value"],
    )
    def test_line_leaves_record_untouched(self, line: str) -> None:
        assert parse_flat(line).summary() == parse_flat("").summary()

    def test_empty_value_is_ignored(self) -> None:
        record = parse_flat("Domain Name: EXAMPLE.COM\nDomain Name:\nName Server:  ")
        assert record.domain == "EXAMPLE.COM"
        assert record.nameservers == ()


# ---------------------------------------------------------------------------
# Dates only change on a successful parse
# ---------------------------------------------------------------------------


class TestDateRetention:
    def test_failed_later_parse_keeps_earlier_value(self) -> None:
        record = parse_flat(
            "Creation Date: 1995-08-14T04:00:00Z\n"
            "Creation Date: before the dawn of time\n"
        )
        assert record.created_at == datetime(1995, 8, 14, 4, 0, tzinfo=_UTC)

    def test_later_successful_parse_wins(self) -> None:
        record = parse_flat(
            "Updated Date: 2020-01-01T00:00:00Z\n"
            "Updated Date: garbage\n"
            "Updated Date: 2021-06-30\n"
        )
        assert record.updated_at == datetime(2021, 6, 30, tzinfo=_UTC)

    def test_unparseable_only_value_leaves_field_empty(self) -> None:
        assert parse_flat("Expiration Date: 14-Feb-2019").expires_at is None


# ---------------------------------------------------------------------------
# Contacts
# ---------------------------------------------------------------------------


class TestContacts:
    _RESPONSE = "\n".join([
        "Registrant Name: Jane Doe",
        "Registrant Organization: Example Inc.",
        "Registrant Street: 1 Main St",
        "Registrant City: Springfield",
        "Registrant State/Province: IL",
        "Registrant Postal Code: 62701",
        "Registrant Country: US",
        "Registrant Phone: +1.5555551234",
        "Registrant Fax: +1.5555550000",
        "Registrant Email: jane@example.com",
        "Registrant Fax-Extension: 42",
        "Admin Name: Admin Person",
        "Admin Email: admin@example.com",
        "Tech Organization: Hosting Co",
        "Tech Phone Ext: 12",
        "Billing Email: billing@example.com",
    ])

    def test_registrant_fields(self) -> None:
        registrant = parse_flat(self._RESPONSE).contacts.registrant
        assert registrant.model_dump() == {
            "name": "Jane Doe",
            "organization": "Example Inc.",
            "street": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip": "62701",
            "country": "US",
            "phone": "+1.5555551234",
            "fax": "+1.5555550000",
            "email": "jane@example.com",
        }

    def test_administrator_fields(self) -> None:
        administrator = parse_flat(self._RESPONSE).contacts.administrator
        assert administrator.name == "Admin Person"
        assert administrator.email == "admin@example.com"
        assert administrator.phone is None

    def test_unrecognized_suffix_leaves_known_fields(self) -> None:
        technical = parse_flat(self._RESPONSE).contacts.technical
        assert technical.organization == "Hosting Co"
        assert technical.phone is None

    def test_registrar_label_is_not_a_registrant_prefix(self) -> None:
        record = parse_flat("Registrar: Example Registrar LLC")
        assert record.contacts.registrant.model_dump() == parse_flat("").contacts.registrant.model_dump()


# ---------------------------------------------------------------------------
# Properties holding for any input
# ---------------------------------------------------------------------------

_INPUTS = [
    "",
    "garbage",
    "Name Server: NS1.EXAMPLE.COM\nName Server: ns1.Example.com\nName Server: NS2.example.com",
    "Registrant Name: Someone\r\nTech Email: t@example.com",
    TestCanonicalFields._RESPONSE,
]


class TestRecordProperties:
    @pytest.mark.parametrize("raw", _INPUTS)
    def test_no_case_insensitive_duplicate_nameservers(self, raw: str) -> None:
        nameservers = parse_flat(raw).nameservers
        assert len({ns.lower() for ns in nameservers}) == len(nameservers)

    @pytest.mark.parametrize("raw", _INPUTS)
    def test_contact_slots_always_present(self, raw: str) -> None:
        contacts = parse_flat(raw).contacts.model_dump()
        assert set(contacts) == {"registrant", "administrator", "technical"}
