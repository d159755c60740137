"""
Domain Errors

EntryValidationError - input rejected before anything is written
StorageError         - the store could not complete a read or write
"""

from typing import Optional


class SpendingError(Exception):
    """Base class for spending tracker errors"""


class EntryValidationError(SpendingError):
    """Rejected draft (bad amount, category or date)"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class StorageError(SpendingError):
    """Persistence failure, surfaced as-is (no retry)"""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        detail = f"{operation} failed"
        if cause is not None:
            detail = f"{detail}: {cause.__class__.__name__}"
        super().__init__(detail)
        self.operation = operation
