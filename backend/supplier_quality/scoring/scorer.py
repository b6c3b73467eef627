"""
QualityScorer — sums the weights of the passing quality rules.

Every rule is evaluated exactly once against the raw record fields.
No rule depends on another's outcome and none subtracts points, so the
score is bounded by [0, max_score] and independent of rule order.

Usage::

    scorer = QualityScorer()
    result = scorer.evaluate({"taxNumber": "526-025-02-74", "email": "biuro@wiseb2b.eu"})
    result.score      # 25
    result.checks     # {"tax_number_valid": True, "email_valid": True, ...}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from supplier_quality.core.config import settings
from supplier_quality.core.logging import get_logger
from supplier_quality.scoring.models import ScoreResult, SupplierRecord
from supplier_quality.scoring.rules import QualityRuleSpec, RuleConfig, build_rules

logger = get_logger(__name__)


class QualityScorer:
    """Scores supplier records against a fixed rule table."""

    def __init__(
        self,
        config: RuleConfig | None = None,
        rules: tuple[QualityRuleSpec, ...] | None = None,
    ) -> None:
        self.config = config or RuleConfig()
        self.rules = rules if rules is not None else build_rules(self.config)

    @property
    def max_score(self) -> int:
        return sum(rule.weight for rule in self.rules)

    def evaluate(self, record: SupplierRecord | Mapping[str, Any]) -> ScoreResult:
        """Score a record and return the per-rule breakdown."""
        if not isinstance(record, SupplierRecord):
            record = SupplierRecord.model_validate(record)

        checks: dict[str, bool] = {}
        score = 0
        for rule in self.rules:
            passed = bool(rule.predicate(record))
            checks[rule.name] = passed
            if passed:
                score += rule.weight

        result = ScoreResult(score=score, max_score=self.max_score, checks=checks)

        logger.debug(
            "Supplier quality computed",
            supplier_id=record.id,
            score=score,
            max_score=result.max_score,
            failed_rules=result.failed_rules,
        )
        return result

    def compute_score(self, record: SupplierRecord | Mapping[str, Any]) -> int:
        """Score a record.  Returns just the integer score."""
        return self.evaluate(record).score


_default_scorer: QualityScorer | None = None


def get_default_scorer() -> QualityScorer:
    """Scorer built from the application settings, created on first use."""
    global _default_scorer

    if _default_scorer is None:
        _default_scorer = QualityScorer(RuleConfig.from_settings(settings))

    return _default_scorer


def compute_score(record: SupplierRecord | Mapping[str, Any]) -> int:
    """Score a record with the default scorer."""
    return get_default_scorer().compute_score(record)
