"""
Field validators for supplier records.

Each validator is a pure predicate over one attribute of the record.
Absent input is a normal negative result: none of these raise on None,
empty strings or garbage values.
"""

from __future__ import annotations

from collections.abc import Collection

from email_validator import EmailNotValidError, validate_email

from supplier_quality.core.logging import get_logger
from supplier_quality.scoring.models import Address
from supplier_quality.scoring.normalize import digits_only, email_domain, is_not_empty

logger = get_logger(__name__)

TAX_NUMBER_LENGTH = 10
TAX_NUMBER_WEIGHTS = (6, 5, 7, 2, 3, 4, 5, 6, 7)

PHONE_MIN_DIGITS = 9
PHONE_MAX_DIGITS = 12


def is_trade_name_present(registered_trade_name: str | None) -> bool:
    return is_not_empty(registered_trade_name)


def is_tax_number_valid(tax_number: str | None) -> bool:
    """
    Check a Polish NIP style tax number.

    Separators are ignored.  The first nine digits are weighted, summed
    and taken mod 11; the result must equal the tenth digit.  A control
    value of 10 can never match and is therefore always invalid.
    """
    digits = digits_only(tax_number)
    if len(digits) != TAX_NUMBER_LENGTH:
        return False

    total = sum(weight * int(digit) for weight, digit in zip(TAX_NUMBER_WEIGHTS, digits))
    control = total % 11

    return control == int(digits[-1])


def is_email_valid(email: str | None) -> bool:
    """Syntax-only email check.  No DNS or mailbox lookups."""
    if not email:
        return False

    try:
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError as exc:
        logger.debug("Email rejected", reason=str(exc))
        return False

    return True


def is_email_domain_trusted(email: str | None, trusted_domains: Collection[str]) -> bool:
    """True when the domain after the last '@' is exactly one of trusted_domains."""
    if not email:
        return False

    return email_domain(email) in trusted_domains


def is_phone_valid(phone: str | None) -> bool:
    if not phone:
        return False

    return PHONE_MIN_DIGITS <= len(digits_only(phone)) <= PHONE_MAX_DIGITS


def is_address_complete(address: Address | None, required_fields: Collection[str]) -> bool:
    """All required address parts are filled in.  No address at all fails."""
    if address is None:
        return False

    return all(is_not_empty(getattr(address, field, None)) for field in required_fields)


def is_reference_city(city: str | None, reference_city: str) -> bool:
    # Exact match, no case or diacritic folding.
    return city is not None and city == reference_city
