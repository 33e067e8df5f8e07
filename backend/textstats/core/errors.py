from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textstats.domain.schema import ValidationErrors


class DomainError(ValueError):
    """Invalid input in a domain sense (nothing to analyze, malformed body, etc.)."""


class RequestValidationFailed(DomainError):
    """Raised when a raw request cannot be normalized; carries the flattened errors."""

    def __init__(self, errors: "ValidationErrors"):
        self.errors = errors
        super().__init__(errors.first_message())
