"""
Pytest configuration and shared fixtures.
"""

import logging
from typing import Any, Dict

import pytest

from supplier_quality.core.logging import configure_structlog
from supplier_quality.scoring.rules import RuleConfig
from supplier_quality.scoring.scorer import QualityScorer

# Weighted sum of the first nine digits mod 11 equals the last digit.
VALID_TAX_NUMBER = "5260250274"


@pytest.fixture
def full_address() -> Dict[str, Any]:
    """Address with every required part and the reference city."""
    return {
        "street": "Marszałkowska",
        "houseNumber": "10",
        "apartmentNumber": "4",
        "city": "Warszawa",
        "postalCode": "00-001",
        "state": "mazowieckie",
        "countryCode": "PL",
    }


@pytest.fixture
def full_record(full_address) -> Dict[str, Any]:
    """Supplier record that passes every quality rule."""
    return {
        "id": "sup-001",
        "name": "Wise B2B",
        "taxNumber": VALID_TAX_NUMBER,
        "email": "biuro@wiseb2b.eu",
        "phone": "022 123 45 67",
        "registeredTradeName": "Wise B2B Sp. z o.o.",
        "address": full_address,
    }


@pytest.fixture
def scorer() -> QualityScorer:
    """Scorer with the built-in rule configuration."""
    return QualityScorer(RuleConfig())


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests see the silent library defaults."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    configure_structlog()
