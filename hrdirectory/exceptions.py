"""
Exception hierarchy for the directory service.

The facade registry and the command layer raise these; the application
factory maps each one to a JSON error response.  Absent results (an
unknown employee or department ID) are *not* errors and never raise.
"""


class DirectoryError(Exception):
    """Base exception for all directory errors."""


class ConfigurationError(DirectoryError, RuntimeError):
    """Raised when no storage connection is configured or the backend name is invalid."""


class NotFoundError(DirectoryError, LookupError):
    """Raised when an organization is unknown or has been removed."""


class ValidationError(DirectoryError, ValueError):
    """Raised when a value would break an entity invariant."""


class OperationFailedError(DirectoryError):
    """Raised by a command when the storage connection rejects a write."""
