"""Custom exceptions for the EAC scheduling SDK."""


class SchedulingError(Exception):
    """Base exception for EAC scheduling operations."""


class InvalidNetworkError(SchedulingError):
    """Raised when no contract address set is configured for a network."""


class ValidityFlagsError(SchedulingError):
    """Raised when a validity report does not hold exactly one flag per known check."""
