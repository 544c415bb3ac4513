"""Error Hierarchy — typed, categorized exceptions for all interaction failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Authentication and malformed-payload errors are answered synchronously (HTTP envelope)
    - Every other error is rendered by user_message() into an ephemeral follow-up
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with XpdError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Command-processing errors carry Discord-facing wording; the invoker is the only reader
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
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    interaction_id: int | None = None
    guild_id: int | None = None
    command_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class XpdError(Exception):
    """Base exception for all xpd-slash errors."""

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
                    "interaction_id": self.context.interaction_id,
                    "guild_id": self.context.guild_id,
                    "command_name": self.context.command_name,
                },
            }
        }

    def user_message(self) -> str:
        """Text shown to the invoker in the ephemeral follow-up."""
        return self.context.user_message or self.message


# ─── Request Errors (answered synchronously) ────────────────────

class SignatureInvalidError(XpdError):
    """Request signature missing or not valid for the configured public key."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Signature validation error: {reason}",
            "SIGNATURE_INVALID", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


class MalformedPayloadError(XpdError):
    """Verified body could not be decoded into an interaction."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            f"Interaction payload could not be decoded: {detail}",
            "MALFORMED_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Command Errors (delivered as ephemeral follow-up) ──────────

class UnrecognizedCommandError(XpdError):
    """Slash command name outside the known set."""
    def __init__(self, name: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Discord sent a command that is not known!",
            "UNRECOGNIZED_COMMAND", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.name = name


class WrongInteractionDataError(XpdError):
    """Interaction data variant this pipeline does not handle."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "This bot does not support ModalSubmit or MessageComponent interactions!",
            "WRONG_INTERACTION_DATA", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class NoInteractionDataError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Discord did not send interaction data!",
            "NO_INTERACTION_DATA", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NoInvokerError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Discord did not send a user ID for the command invoker when it was required!",
            "NO_INVOKER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NoResolvedDataError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Discord did not send part of the Resolved Data!",
            "NO_RESOLVED_DATA", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NoMessageTargetIdError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Discord did not send target ID for message!",
            "NO_MESSAGE_TARGET_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NoTargetError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Discord did not send the user this command targets!",
            "NO_TARGET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class NoGuildIdError(XpdError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "This command can only be used inside a server!",
            "NO_GUILD_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class GuildConfigValidationError(XpdError):
    """Requested guild configuration violates a config rule."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "GUILD_CONFIG_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class CardCustomizationError(XpdError):
    """Requested card setting is not a valid color or known asset."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CARD_CUSTOMIZATION_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(XpdError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
