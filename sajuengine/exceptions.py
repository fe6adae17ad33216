"""Exception types raised by :mod:`sajuengine`."""

from __future__ import annotations

__all__ = [
    "SajuEngineError",
    "InvalidDateError",
    "InvalidPillarError",
    "UnknownElementError",
    "PolicyError",
]


class SajuEngineError(ValueError):
    """Base class for invalid input rejected by the engine."""


class InvalidDateError(SajuEngineError):
    """Raised when a calendar date or hour does not exist."""

    def __init__(
        self,
        message: str,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
    ) -> None:
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour


class InvalidPillarError(SajuEngineError):
    """Raised when a stem/branch pairing cannot occur in the sixty-cycle."""


class UnknownElementError(SajuEngineError):
    """Raised when a value cannot be interpreted as one of the five elements."""


class PolicyError(RuntimeError):
    """Raised when a scoring policy document is missing required entries."""
