"""
Tests for the supplier field validators.
"""

import pytest

from supplier_quality.scoring.models import Address
from supplier_quality.scoring.rules import DEFAULT_REQUIRED_ADDRESS_FIELDS, DEFAULT_TRUSTED_EMAIL_DOMAINS
from supplier_quality.scoring.validators import (
    is_address_complete,
    is_email_domain_trusted,
    is_email_valid,
    is_phone_valid,
    is_reference_city,
    is_tax_number_valid,
    is_trade_name_present,
)

VALID_TAX_NUMBERS = ["5260250274", "1234563218"]


class TestTradeName:
    def test_present(self):
        assert is_trade_name_present("Wise B2B Sp. z o.o.") is True

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_absent(self, value):
        assert is_trade_name_present(value) is False


class TestTaxNumber:
    @pytest.mark.parametrize("tax_number", VALID_TAX_NUMBERS)
    def test_valid_checksum(self, tax_number):
        assert is_tax_number_valid(tax_number) is True

    def test_separators_ignored(self):
        assert is_tax_number_valid("526-025-02-74") is True
        assert is_tax_number_valid("PL 526 025 02 74") is True

    @pytest.mark.parametrize("tax_number", VALID_TAX_NUMBERS)
    def test_single_digit_mutation_invalidates(self, tax_number):
        """Changing any one digit breaks the checksum."""
        for pos in range(len(tax_number)):
            mutated_digit = str((int(tax_number[pos]) + 1) % 10)
            mutated = tax_number[:pos] + mutated_digit + tax_number[pos + 1:]
            assert is_tax_number_valid(mutated) is False, mutated

    @pytest.mark.parametrize("tax_number", [None, "", "526025027", "52602502745", "abcdefghij"])
    def test_wrong_length(self, tax_number):
        assert is_tax_number_valid(tax_number) is False

    def test_control_ten_never_valid(self):
        """Weighted sum mod 11 == 10 cannot match any check digit."""
        for last in range(10):
            assert is_tax_number_valid(f"123456789{last}") is False


class TestEmailSyntax:
    @pytest.mark.parametrize("email", [
        "biuro@wiseb2b.eu",
        "jan.kowalski@gmail.com",
        "first.last+tag@my-company.eu",
        "biuro@firma.local",
        "biuro@firma.test",
        "\"jan kowalski\"@wiseb2b.eu",
        "jan@[192.168.0.1]",
    ])
    def test_valid(self, email):
        assert is_email_valid(email) is True

    @pytest.mark.parametrize("email", [
        None,
        "",
        "not-an-email",
        "two@@signs.eu",
        "user@",
        "@wiseb2b.eu",
        "spaces in@wiseb2b.eu",
        "x" * 300 + "@wiseb2b.eu",
    ])
    def test_invalid(self, email):
        assert is_email_valid(email) is False


class TestEmailDomainTrusted:
    @pytest.mark.parametrize("email", [
        "a@example.com",
        "b@my-company.eu",
        "c@wiseb2b.eu",
    ])
    def test_trusted(self, email):
        assert is_email_domain_trusted(email, DEFAULT_TRUSTED_EMAIL_DOMAINS) is True

    @pytest.mark.parametrize("email", [
        None,
        "",
        "a@gmail.com",
        "a@mail.example.com",
        "a@wiseb2b.eu.evil.com",
        "a@WISEB2B.EU",
        "wiseb2b.eu",
    ])
    def test_untrusted(self, email):
        assert is_email_domain_trusted(email, DEFAULT_TRUSTED_EMAIL_DOMAINS) is False

    def test_custom_allow_list(self):
        assert is_email_domain_trusted("a@acme.pl", ("acme.pl",)) is True
        assert is_email_domain_trusted("a@wiseb2b.eu", ("acme.pl",)) is False


class TestPhone:
    @pytest.mark.parametrize("phone", [
        "123456789",
        "+48 22 123 45 67",
        "(022) 123-45-67",
        "123456789012",
    ])
    def test_valid_lengths(self, phone):
        assert is_phone_valid(phone) is True

    @pytest.mark.parametrize("phone", [None, "", "12345678", "1234567890123", "phone"])
    def test_invalid_lengths(self, phone):
        assert is_phone_valid(phone) is False


class TestAddressComplete:
    def _address(self, **overrides):
        data = {
            "street": "Marszałkowska",
            "house_number": "10",
            "city": "Warszawa",
            "postal_code": "00-001",
            "country_code": "PL",
        }
        data.update(overrides)
        return Address(**data)

    def test_required_fields_only(self):
        assert is_address_complete(self._address(), DEFAULT_REQUIRED_ADDRESS_FIELDS) is True

    def test_no_address(self):
        assert is_address_complete(None, DEFAULT_REQUIRED_ADDRESS_FIELDS) is False

    @pytest.mark.parametrize("missing", list(DEFAULT_REQUIRED_ADDRESS_FIELDS))
    def test_missing_required_field(self, missing):
        address = self._address(apartment_number="4", state="mazowieckie", **{missing: None})
        assert is_address_complete(address, DEFAULT_REQUIRED_ADDRESS_FIELDS) is False

    def test_whitespace_counts_as_missing(self):
        address = self._address(street="   ")
        assert is_address_complete(address, DEFAULT_REQUIRED_ADDRESS_FIELDS) is False


class TestReferenceCity:
    def test_exact_match(self):
        assert is_reference_city("Warszawa", "Warszawa") is True

    @pytest.mark.parametrize("city", [None, "", "warszawa", "Warsaw", " Warszawa"])
    def test_no_match(self, city):
        assert is_reference_city(city, "Warszawa") is False
