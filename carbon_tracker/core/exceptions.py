"""
Domain exceptions.

Every error carries a human-readable message plus a ``context`` dict naming
the offending identifier or field, so the HTTP layer can build a precise
response without parsing strings.
"""
from typing import Any


class CarbonTrackerError(Exception):
    """Base class for all carbon tracker errors."""

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = {key: str(value) for key, value in context.items()}
        super().__init__(message)


class NotFoundError(CarbonTrackerError):
    """A referenced category, business, log or benchmark does not exist."""


class ForbiddenError(CarbonTrackerError):
    """A resource exists but belongs to another business."""


class ConflictError(CarbonTrackerError):
    """The resource already exists."""


class InvalidInputError(CarbonTrackerError):
    """Input failed validation before any computation or store mutation."""


class ConfigurationError(CarbonTrackerError):
    """
    Catalog or reference data is inconsistent.

    Raised when a category has no emission factor or a business references
    an industry with no benchmark. Should be treated as an operational alert.
    """


class MissingBenchmarkError(ConfigurationError, NotFoundError):
    """A business references an industry absent from the benchmark table."""


class StoreFailureError(CarbonTrackerError):
    """
    The persistence layer failed (connectivity, constraint violation).

    Wraps the original exception; no retry is attempted.
    """

    def __init__(
        self, operation: str, original_exception: Exception | None = None, **context
    ):
        self.operation = operation
        self.original_exception = original_exception

        message = f"Store operation '{operation}' failed"
        if original_exception:
            message += f": {type(original_exception).__name__}: {original_exception}"

        super().__init__(message, operation=operation, **context)
