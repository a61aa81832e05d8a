"""Error Hierarchy — typed, categorized exceptions for CellControl failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Persistence and startup errors are critical
    - Messages are for logs only; handlers choose what the client sees

Design Decisions:
    - Single hierarchy with CellControlError base: callers catch one type
    - Errors raised once at the store boundary and propagated unchanged upward
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"
    CONFIGURATION = "configuration"


class CellControlError(Exception):
    """Base exception for all CellControl errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity


class DatabaseError(CellControlError):
    """Database operation failed (constraint violation, connectivity, driver)."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, ErrorSeverity.CRITICAL,
        )
        self.operation = operation


class StoreInitError(CellControlError):
    """Store could not be opened or migrated at startup. Fatal."""
    def __init__(self, message: str):
        super().__init__(
            message, "STORE_INIT_FAILED", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL,
        )
