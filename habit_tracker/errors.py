"""
Errors raised by the habit services and the persistence layer.
"""


class HabitTrackerError(Exception):
    """Base class for all domain errors."""


class ValidationError(HabitTrackerError, ValueError):
    """Input was rejected before anything was written."""


class NotFoundError(HabitTrackerError):
    """A referenced habit or day does not exist."""


class ConflictError(HabitTrackerError):
    """A uniqueness constraint rejected an insert (concurrent creation)."""
