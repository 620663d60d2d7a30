from __future__ import annotations


class SchedulingError(ValueError):
    """Base class for errors raised by the scheduling simulators."""


class InvalidProcessError(SchedulingError):
    """A process description violates the model invariants."""


class EmptyInputError(SchedulingError):
    """An aggregate was requested over zero processes."""
