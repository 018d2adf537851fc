"""
Domain exceptions for the progress engine.

Only failures that must abort a request are exceptions.  Missing or
invalid data is represented as an explicit empty result by the engine
and never raised.
"""

from typing import Optional


class ProgressError(Exception):
    """Base class for progress-engine errors."""


class FetchFailure(ProgressError):
    """The record store could not serve a read.

    Report generation aborts on this error and persists nothing.
    """

    def __init__(self, operation: str, detail: Optional[str] = None):
        self.operation = operation
        self.detail = detail
        message = f"Record store fetch failed during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
