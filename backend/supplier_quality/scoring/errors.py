"""
Exception hierarchy for the quality scoring engine.

Validators never raise for missing or malformed supplier data; a bad
field is simply a failed check.  These exceptions cover misuse of the
engine itself, such as an invalid rule configuration.
"""

from __future__ import annotations


class QualityError(Exception):
    """Base exception for all quality scoring errors."""

    def __init__(
        self,
        message: str,
        *,
        details: dict | None = None,
    ) -> None:
        self.details = details or {}
        super().__init__(message)


class RuleConfigurationError(QualityError):
    """The rule configuration handed to the scorer is unusable."""
    pass
