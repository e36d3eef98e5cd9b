"""Custom exceptions for the ZoCal calendar engine."""

from typing import Any, Dict, Optional


class ZocalException(Exception):
    """Base custom exception class.

    Attributes:
        message: The error message
        code: Machine readable error code
        details: Optional extra context for the caller
    """

    code = "zocal_error"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize the custom exception.

        Args:
            message: Human readable error message
            details: Optional extra context, e.g. the rejected value
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_json(self) -> Dict[str, Any]:
        """Convert the error to a JSON friendly dictionary.

        Returns:
            Dictionary with code, message and details
        """
        return {"code": self.code, "message": self.message, "details": self.details}


class InvalidDateError(ZocalException):
    """Raised when a value cannot be read as a Gregorian calendar date."""

    code = "invalid_date"

    def __init__(self, value: Any, reason: str = "Invalid date format") -> None:
        self.value = value
        super().__init__(reason, details={"value": repr(value)})


class UnsupportedVariantError(ZocalException):
    """Raised when a calendar variant outside Shenshai, Kadmi and Fasli is requested."""

    code = "unsupported_variant"

    def __init__(self, variant: Any) -> None:
        self.variant = variant
        super().__init__(
            f"Unsupported calendar variant: {variant!r}",
            details={"variant": repr(variant)},
        )
