"""Shared constants and enums used across the application."""

from enum import StrEnum


class QualityRule(StrEnum):
    """Names of the supplier quality rules, as they appear in score breakdowns."""

    TRADE_NAME_PRESENT = "trade_name_present"
    TAX_NUMBER_VALID = "tax_number_valid"
    EMAIL_VALID = "email_valid"
    EMAIL_DOMAIN_TRUSTED = "email_domain_trusted"
    PHONE_VALID = "phone_valid"
    ADDRESS_COMPLETE = "address_complete"
    CITY_IS_REFERENCE = "city_is_reference"


class ReviewStatus(StrEnum):
    """Outcome of routing a scored supplier record."""

    ACCEPTED = "ACCEPTED"
    NEEDS_REVIEW = "NEEDS_REVIEW"
