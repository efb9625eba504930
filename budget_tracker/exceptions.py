"""Exceptions raised by the budget tracker."""


class BudgetTrackerError(Exception):
    """Base class for all budget tracker errors."""


class InvalidTransactionError(BudgetTrackerError, ValueError):
    """A transaction record failed validation."""


class StorageUnavailableError(BudgetTrackerError):
    """Session storage cannot be read from or written to."""
