"""Error Hierarchy — typed, categorized exceptions for device store failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - DeviceNotFoundError is recoverable (absent device == new device for callers)
    - StoreAccessError always carries the operation description and chains the
      driver exception as __cause__
    - No driver types leak through the hierarchy: callers never import pymongo

Design Decisions:
    - Single hierarchy with DeviceAdmError base: one except clause catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    device_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class DeviceAdmError(Exception):
    """Base exception for all device store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_response(self) -> dict:
        """Convert to a standardized error envelope for an outer API layer."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "device_id": self.context.device_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class DeviceNotFoundError(DeviceAdmError):
    """No stored device matches the requested identity."""
    def __init__(self, device_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.device_id = device_id
        super().__init__(
            f"device '{device_id}' not found",
            "DEVICE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.device_id = device_id


# ─── Infrastructure Errors ──────────────────────────────────────

class StoreAccessError(DeviceAdmError):
    """Reaching the backing store failed (connectivity, query, serialization)."""
    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
        code: str = "STORE_ACCESS_ERROR",
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        message = f"{operation}: {cause}" if cause is not None else operation
        super().__init__(
            message, code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
        self.cause = cause


class StoreConnectionError(StoreAccessError):
    """Initial connection to the store could not be established."""
    def __init__(
        self, cause: BaseException | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            "failed to open store session", cause, context,
            code="STORE_CONNECTION_ERROR",
        )
