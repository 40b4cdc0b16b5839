"""
Exception types for refractometer-core.

All exceptions inherit from RefractometerError for easy catching
of any library-related errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of rejected input."""

    ORDERING = "ordering"
    RANGE = "range"
    DEGENERATE = "degenerate"


class RefractometerError(Exception):
    """Base exception for all refractometer-core errors."""

    pass


class ValidationError(RefractometerError):
    """Raised when a pair of gravity readings fails validation."""

    kind: ErrorKind


class OrderingViolation(ValidationError):
    """Raised when the original gravity is not greater than the final gravity."""

    kind = ErrorKind.ORDERING


class RangeViolation(ValidationError):
    """Raised when a reading falls outside the range of its unit."""

    kind = ErrorKind.RANGE


class DegenerateInputError(RefractometerError):
    """Raised when a metric formula would divide by zero."""

    kind = ErrorKind.DEGENERATE


class UnitConversionError(RefractometerError):
    """Raised when a unit conversion fails."""

    pass


class ConfigurationError(RefractometerError):
    """Raised when configuration is invalid or missing."""

    pass
