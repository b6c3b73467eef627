"""
Rule table for supplier quality scoring.

The reference data the rules compare against (trusted email domains,
the reference city, the required address parts) lives in RuleConfig
and is handed to the scorer at construction time.  build_rules() turns
a config into the declarative (name, weight, predicate) table the
scorer folds over.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, ConfigDict, field_validator

from supplier_quality.core.config import Settings
from supplier_quality.core.constants import QualityRule
from supplier_quality.scoring import validators
from supplier_quality.scoring.errors import RuleConfigurationError
from supplier_quality.scoring.models import Address, SupplierRecord

DEFAULT_TRUSTED_EMAIL_DOMAINS = ("example.com", "my-company.eu", "wiseb2b.eu")
DEFAULT_REFERENCE_CITY = "Warszawa"
DEFAULT_REQUIRED_ADDRESS_FIELDS = ("street", "house_number", "city", "postal_code", "country_code")

# Points awarded when a rule passes.
MINOR_RULE_POINTS = 5
MAJOR_RULE_POINTS = 10


class RuleConfig(BaseModel):
    """Immutable reference data used by the quality rules."""

    model_config = ConfigDict(frozen=True)

    trusted_email_domains: tuple[str, ...] = DEFAULT_TRUSTED_EMAIL_DOMAINS
    reference_city: str = DEFAULT_REFERENCE_CITY
    required_address_fields: tuple[str, ...] = DEFAULT_REQUIRED_ADDRESS_FIELDS

    @field_validator("required_address_fields")
    @classmethod
    def _known_address_fields(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [f for f in value if f not in Address.model_fields]
        if unknown:
            raise RuleConfigurationError(
                f"Unknown address fields in rule config: {', '.join(unknown)}",
                details={"unknown": unknown, "allowed": list(Address.model_fields)},
            )
        return value

    @classmethod
    def from_settings(cls, settings: Settings) -> RuleConfig:
        """Build a rule config from application settings."""
        return cls(
            trusted_email_domains=tuple(settings.QUALITY_TRUSTED_EMAIL_DOMAINS),
            reference_city=settings.QUALITY_REFERENCE_CITY,
            required_address_fields=tuple(settings.QUALITY_REQUIRED_ADDRESS_FIELDS),
        )


@dataclass(frozen=True)
class QualityRuleSpec:
    """One row of the rule table."""

    name: str
    weight: int
    predicate: Callable[[SupplierRecord], bool]

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise RuleConfigurationError(
                f"Rule '{self.name}' must have a positive weight",
                details={"rule": self.name, "weight": self.weight},
            )


def _city(record: SupplierRecord) -> str | None:
    return record.address.city if record.address is not None else None


def build_rules(config: RuleConfig) -> tuple[QualityRuleSpec, ...]:
    """Return the rule table for the given config."""
    return (
        QualityRuleSpec(
            QualityRule.TRADE_NAME_PRESENT,
            MINOR_RULE_POINTS,
            lambda r: validators.is_trade_name_present(r.registered_trade_name),
        ),
        QualityRuleSpec(
            QualityRule.PHONE_VALID,
            MINOR_RULE_POINTS,
            lambda r: validators.is_phone_valid(r.phone),
        ),
        QualityRuleSpec(
            QualityRule.EMAIL_DOMAIN_TRUSTED,
            MINOR_RULE_POINTS,
            lambda r: validators.is_email_domain_trusted(r.email, config.trusted_email_domains),
        ),
        QualityRuleSpec(
            QualityRule.CITY_IS_REFERENCE,
            MINOR_RULE_POINTS,
            lambda r: validators.is_reference_city(_city(r), config.reference_city),
        ),
        QualityRuleSpec(
            QualityRule.TAX_NUMBER_VALID,
            MAJOR_RULE_POINTS,
            lambda r: validators.is_tax_number_valid(r.tax_number),
        ),
        QualityRuleSpec(
            QualityRule.EMAIL_VALID,
            MAJOR_RULE_POINTS,
            lambda r: validators.is_email_valid(r.email),
        ),
        QualityRuleSpec(
            QualityRule.ADDRESS_COMPLETE,
            MAJOR_RULE_POINTS,
            lambda r: validators.is_address_complete(r.address, config.required_address_fields),
        ),
    )
