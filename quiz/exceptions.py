"""
Custom Exceptions for chunk quiz generation.

Exception Hierarchy:
    QuizError (base)
    ├── QuizAPIError      - the completion API call failed
    ├── QuizParseError    - the reply did not contain a usable quiz
    └── SummaryError      - nothing to summarize

No retries happen here; callers decide whether to try again.
"""

from __future__ import annotations

from typing import Optional


class QuizError(Exception):
    """
    Base exception for quiz generation errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "Quiz generation failed",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


class QuizAPIError(QuizError):
    """
    Raised when the OpenAI request fails.

    Attributes:
        original_error: The underlying OpenAI exception
        status_code: HTTP status code if available
    """

    def __init__(
        self,
        message: str = "Completion API call failed",
        original_error: Optional[Exception] = None,
        status_code: Optional[int] = None,
    ):
        self.original_error = original_error
        self.status_code = status_code
        details = str(original_error) if original_error else None
        if status_code:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message, details)


class QuizParseError(QuizError):
    """
    Raised when the model reply is empty, not JSON, or not a quiz.

    Attributes:
        raw_content: The raw reply text (truncated in the message)
    """

    def __init__(
        self,
        message: str = "Failed to parse quiz from model reply",
        raw_content: Optional[str] = None,
    ):
        self.raw_content = raw_content
        details = raw_content[:200] if raw_content else None
        super().__init__(message, details)


class SummaryError(QuizError):
    """Raised when a document has no page content to summarize."""

    def __init__(self, message: str = "No page content to summarize", details: Optional[str] = None):
        super().__init__(message, details)
