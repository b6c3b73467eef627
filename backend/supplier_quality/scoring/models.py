"""
Supplier record and score result models.

The upstream DTO layer speaks camelCase (taxNumber, houseNumber, ...);
both the aliases and the snake_case field names are accepted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Address(_RecordModel):
    """Postal address of a supplier.  Every part is optional."""

    name: str | None = None
    street: str | None = None
    house_number: str | None = None
    apartment_number: str | None = None
    city: str | None = None
    postal_code: str | None = None
    state: str | None = None
    country_code: str | None = None


class SupplierRecord(_RecordModel):
    """A GPSR supplier (responsible person) record as handed to the scorer."""

    id: str | int | None = None
    name: str | None = None
    tax_number: str | None = None
    email: str | None = None
    phone: str | None = None
    registered_trade_name: str | None = None
    address: Address | None = None


class ScoreResult(BaseModel):
    """Quality score of one supplier record plus the checks behind it."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0)
    max_score: int = Field(..., ge=0)
    checks: dict[str, bool] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _score_within_max(self) -> ScoreResult:
        if self.score > self.max_score:
            raise ValueError(f"score {self.score} exceeds max_score {self.max_score}")
        return self

    @property
    def failed_rules(self) -> list[str]:
        """Names of the rules that did not pass."""
        return [name for name, passed in self.checks.items() if not passed]
