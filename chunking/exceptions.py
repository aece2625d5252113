"""
Custom Exceptions for the Chunking Pipeline.

Exception Hierarchy:
    ChunkingError (base)
    └── InvalidInputError

An empty page sequence is not an error: it yields an empty chunk list.
Oversized pages and sentences are handled by policy and never raise.

Usage:
    from chunking.exceptions import ChunkingError, InvalidInputError

    try:
        chunks = assemble_chunks(pages, max_tokens=700)
    except InvalidInputError as e:
        print(f"Bad input ({e.field}): {e}")
"""

from __future__ import annotations

from typing import Any, Optional


class ChunkingError(Exception):
    """
    Base exception for all chunking-related errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A chunking error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class InvalidInputError(ChunkingError):
    """
    Raised when a page record or a chunking parameter is malformed.

    Not recoverable locally: no partial result is returned.

    Attributes:
        field: Name of the offending field or parameter (optional)
        value: The rejected value (optional)
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        details: Optional[str] = None,
    ):
        self.field = field
        self.value = value
        if field:
            message = f"{message} [{field}={value!r}]"
        super().__init__(message, details)
