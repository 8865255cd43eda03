"""Domain error classes.

Protocol-agnostic errors that represent business failures of the credit kernel
and the services around it. Protocol adapters (HTTP today) translate them into
transport responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a human-readable message plus arbitrary context that protocol
    adapters can expose (field names, offending values, partner codes).
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for the error (e.g., field, value)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Raised when a credit application breaks leasing policy. Every failed rule
    is carried in ``errors`` so callers can render a complete report.

    Examples:
        - Down payment below the minimum ratio for a used motorcycle
        - Tenor not offered for the vehicle category
        - Vehicle price below the category minimum

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "tenor", "message": "...", "code": "INVALID_TENOR"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class InvalidCreditInput(DomainError):
    """A kernel policy lookup received a value outside its domain.

    Examples:
        - Default interest rate requested for tenor 0
        - Default admin fee requested for a negative price

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "INVALID_CREDIT_INPUT"


class CreditCalculationError(DomainError):
    """Degenerate numbers reached the calculation stage.

    ``calculate_credit`` trusts that the application was validated first.
    When it was not (zero tenor, non-positive principal, negative fees) the
    kernel fails with this error instead of producing an undefined figure.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "CALCULATION_ERROR"


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Leasing partner with code not found
        - No published leasing rate for a category/condition/tenor

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "LeasingPartner", "LeasingRate")
            identifier: Resource identifier (e.g., partner code)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class UnauthorizedError(DomainError):
    """Authentication required or failed.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


