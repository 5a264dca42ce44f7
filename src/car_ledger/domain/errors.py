"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP status codes, JSON bodies) by protocol adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP or any other transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., asset ids, amounts)
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

    Used for domain invariant violations and malformed caller input.

    Examples:
        - Malfunction price <= 0
        - Money value that is not a valid decimal
        - Raw query string without a selector object

    Protocol mappings:
        - REST: 422 Unprocessable Entity
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
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be > 0"}]
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


class SaleCancelledError(ValidationError):
    """Purchase refused because the buyer did not acknowledge malfunctions.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "SALE_CANCELLED"


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Car key absent from the world state
        - Owner or buyer user record absent

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "User", "Asset")
            identifier: World state key of the resource
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Examples:
        - Buyer already owns the car

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class InsufficientFundsError(DomainError):
    """User balance is below the amount required for a purchase or repair.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "INSUFFICIENT_FUNDS"


class DecodeError(DomainError):
    """Stored bytes do not match the expected entity shape.

    Raised for corrupt records and for cross-type results (a user record
    decoded as a car). Aborts the whole operation, including query collection.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "DECODE_ERROR"


class PersistenceError(DomainError):
    """The world state backend failed to read, write or delete.

    Should be logged for investigation.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "PERSISTENCE_ERROR"
