"""
Centralized exception hierarchy for domain-specific errors.

Missing inputs are never errors here: metric functions return ``None`` for
"nothing to display". The classes below cover data-contract violations,
configuration mistakes and navigation over an empty collection.
"""


class HitchlogError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(HitchlogError):
    """Exception raised when input data violates the record contract."""


class UnknownLabelError(ValidationError):
    """Exception raised for an experience value outside the fixed scale."""


class AmbiguousCountryError(ValidationError):
    """Exception raised when a trip spans countries and the policy rejects it."""


class ConfigurationError(HitchlogError):
    """Exception raised when a configuration value cannot be used."""


class EmptyCollectionError(HitchlogError):
    """Exception raised when navigating a collection with no entries."""


UnknownLabel = UnknownLabelError
EmptyCollection = EmptyCollectionError
