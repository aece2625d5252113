"""
Chunk quiz generation.

Summarizes a document, then sends one chunk's text (with the summary as
context) to an OpenAI chat model and parses the JSON quiz it returns.
"""

__version__ = "1.0.0"

from .config import QuizConfig
from .exceptions import QuizAPIError, QuizError, QuizParseError, SummaryError
from .models import Quiz, QuizRequest, QuizResponse
from .service import QuizService
from .storage import QuizStorage
from .summary import SummaryService

__all__ = [
    "__version__",
    "QuizConfig",
    "QuizAPIError",
    "QuizError",
    "QuizParseError",
    "Quiz",
    "QuizRequest",
    "QuizResponse",
    "QuizService",
    "QuizStorage",
    "SummaryError",
    "SummaryService",
]
