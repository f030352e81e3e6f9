"""Error Hierarchy: typed, categorized exceptions for all Crave failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 4xx; collaborator/configuration errors are 5xx
    - to_response() produces the REST envelope shared by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CraveError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
    - Duplicate accounts answer 400, not 409: clients treat it as a form error
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | str | None = None
    debug_info: dict[str, Any] | None = None


class CraveError(Exception):
    """Base exception for all Crave errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(CraveError):
    """Requested entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = resource_type
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class NothingPlayingError(CraveError):
    """Restaurant has no track flagged as playing."""
    def __init__(self, restaurant_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = "Restaurant"
        ctx.entity_id = restaurant_id
        super().__init__(
            "No music is currently playing",
            "NOTHING_PLAYING", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


class DuplicateAccountError(CraveError):
    """Registration or profile update collides with an existing account."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field_name.capitalize()} already exists",
            "ACCOUNT_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field_name


class InvalidCredentialsError(CraveError):
    """Login failed: unknown user or wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidStatusTransitionError(CraveError):
    """Status change not allowed from the entity's current status."""
    def __init__(
        self, entity: str, current: str, requested: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = entity
        super().__init__(
            f"{entity} cannot move from '{current}' to '{requested}'",
            "INVALID_STATUS_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.current = current
        self.requested = requested


# ─── Configuration / Collaborator Errors (500-level) ─────────────

class PaymentNotConfiguredError(CraveError):
    """No payment processor credentials configured."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Payments are not configured. Set STRIPE_SECRET_KEY to enable them.",
            "PAYMENTS_NOT_CONFIGURED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class PaymentProviderError(CraveError):
    """Payment processor rejected or failed the call."""
    def __init__(self, provider_error_type: str, context: ErrorContext | None = None):
        super().__init__(
            "Payment provider could not create the payment intent",
            "PAYMENT_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.provider_error_type = provider_error_type


class GeocodingError(CraveError):
    """Geocoding service unreachable or returned an unusable response."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Location service is unavailable",
            "GEOCODING_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.reason = reason
