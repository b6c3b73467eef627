"""
Review routing — splits scored suppliers into accepted and review lists.

Suppliers scoring below the minimum quality score go to the review
list, with the failed rules as reasons.  Everything else is accepted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from supplier_quality.core.config import settings
from supplier_quality.core.constants import ReviewStatus
from supplier_quality.core.logging import get_logger
from supplier_quality.scoring.models import ScoreResult, SupplierRecord
from supplier_quality.scoring.scorer import QualityScorer, get_default_scorer

logger = get_logger(__name__)


@dataclass
class ReviewItem:
    """Routing decision for one supplier."""

    supplier_id: str
    result: ScoreResult
    status: str                     # ReviewStatus value
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "supplier_id": self.supplier_id,
            "score": self.result.score,
            "max_score": self.result.max_score,
            "checks": dict(self.result.checks),
            "status": self.status,
            "reasons": self.reasons,
        }


@dataclass
class ReviewBatch:
    """Outcome of routing a batch of suppliers."""

    min_score: int
    accepted: list[ReviewItem] = field(default_factory=list)
    for_review: list[ReviewItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.accepted) + len(self.for_review)


def route_for_review(
    records: Iterable[SupplierRecord | Mapping[str, Any]],
    scorer: QualityScorer | None = None,
    min_score: int | None = None,
) -> ReviewBatch:
    """Score each record and route low scorers to review."""
    scorer = scorer or get_default_scorer()
    if min_score is None:
        min_score = settings.MIN_QUALITY_SCORE

    batch = ReviewBatch(min_score=min_score)

    for idx, record in enumerate(records):
        if not isinstance(record, SupplierRecord):
            record = SupplierRecord.model_validate(record)

        result = scorer.evaluate(record)
        supplier_id = str(record.id) if record.id is not None else str(idx)

        if result.score < min_score:
            item = ReviewItem(
                supplier_id=supplier_id,
                result=result,
                status=ReviewStatus.NEEDS_REVIEW,
                reasons=result.failed_rules,
            )
            batch.for_review.append(item)
            logger.info(
                "Supplier routed to review",
                supplier_id=supplier_id,
                score=result.score,
                reason=", ".join(item.reasons),
            )
        else:
            batch.accepted.append(ReviewItem(
                supplier_id=supplier_id,
                result=result,
                status=ReviewStatus.ACCEPTED,
            ))

    logger.info(
        "Review routing complete",
        total=batch.total,
        accepted=len(batch.accepted),
        for_review=len(batch.for_review),
        min_score=min_score,
    )
    return batch
