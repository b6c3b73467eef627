"""
Supplier quality — data-quality scoring for GPSR supplier records.

The scoring engine rates how complete and well-formed a supplier
("responsible person") record is, and exposes the per-rule breakdown
that produced the score.
"""

from supplier_quality.scoring.models import Address, ScoreResult, SupplierRecord
from supplier_quality.scoring.scorer import QualityScorer, compute_score

__all__ = ["Address", "SupplierRecord", "ScoreResult", "QualityScorer", "compute_score"]
