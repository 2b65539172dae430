"""Exception hierarchy for sample statistics."""

from typing import Any


class SampleStatisticsError(Exception):
    """Base error for sample statistics failures.

    Attributes:
        details: Structured context about the failure, suitable for log binding.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class InvalidInputError(SampleStatisticsError, ValueError):
    """Raised when a sample or statistic argument cannot be used."""


__all__ = ["InvalidInputError", "SampleStatisticsError"]
