"""
Custom Exceptions for page extraction.

Exception Hierarchy:
    PageExtractionError (base)
    ├── PDFNotFoundError
    └── PDFCorruptedError
"""

from __future__ import annotations

from typing import Optional


class PageExtractionError(Exception):
    """
    Base exception for all page extraction errors.

    Attributes:
        message: Human-readable error description
        path: Path to the PDF file (optional)
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "Page extraction failed",
        path: Optional[str] = None,
        details: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class PDFNotFoundError(PageExtractionError):
    """Raised when the PDF file cannot be found."""

    def __init__(self, path: str):
        super().__init__(
            message=f"PDF file not found: {path}",
            path=path,
        )


class PDFCorruptedError(PageExtractionError):
    """
    Raised when the PDF file is corrupted or cannot be opened.

    Attributes:
        original_error: The underlying error from PyMuPDF
    """

    def __init__(
        self,
        path: str,
        original_error: Optional[Exception] = None,
    ):
        self.original_error = original_error
        details = str(original_error) if original_error else None
        super().__init__(
            message=f"PDF file is corrupted or unreadable: {path}",
            path=path,
            details=details,
        )
