# billing/core/exceptions.py
"""Domain errors raised by the billing services.

Every public operation converts store failures into one of these, so callers
see a stable, operation-scoped message ("Failed to fetch invoices.") and never
the underlying driver error. The original exception is kept as ``__cause__``.
"""


class BillingError(Exception):
    """Base class for all billing domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreUnavailableError(BillingError):
    """The backing store could not complete the request."""


class IntegrityViolationError(BillingError):
    """A row broke a relational invariant (e.g. an invoice without its customer)."""


class InvalidInputError(BillingError):
    """Caller input was rejected before any store call was made."""


class OperationCancelledError(BillingError):
    """The operation was abandoned because it exceeded its time limit."""


class NotFoundError(BillingError):
    """A record looked up by id does not exist."""
