"""
Failures raised by solcatalog.

Every failure is recoverable: the library raises them and never terminates the process. They also
derive from the matching builtin (``ValueError`` or ``LookupError``) so that callers catching the
builtin keep working.
"""

from typing import Optional


class SolCatalogError(Exception):
    """Base exception for all solcatalog errors."""


class ValidationFailure(SolCatalogError, ValueError):
    """A name is missing or a value lies outside its permitted band."""


class NotFoundFailure(SolCatalogError, LookupError):
    """A referenced solar system, planet or moon does not exist."""


class NoSelectionFailure(NotFoundFailure):
    """An operation on the current solar system was requested while none is selected."""


class UniquenessFailure(SolCatalogError, ValueError):
    """A name is already taken within its scope."""


class ParseFailure(SolCatalogError, ValueError):
    """Free text could not be read as a finite number."""


class MalformedRecordFailure(SolCatalogError, ValueError):
    """A line of catalog text does not describe a valid record."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
