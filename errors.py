"""
errors.py
---------
Exception types raised by the data-access layer.

A lookup that matches nothing is not an error: accessors return ``None``
(or an empty list) for that. These exceptions are reserved for a store
that could not run a statement, and for arguments that are unusable
before any statement is sent.
"""

from typing import Optional


class LightBnbError(Exception):
    """Base class for all data-access errors."""


class ExecutionError(LightBnbError):
    """The store rejected or could not run a statement."""

    def __init__(self, message: str, statement: Optional[str] = None):
        super().__init__(message)
        self.statement = statement


class ValidationError(LightBnbError, ValueError):
    """A caller-supplied record or argument is missing required data."""
