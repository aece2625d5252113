"""
Page extraction - one plain-text record per physical PDF page.

Quick Start:
    from pdf_pages import PageExtractor

    pages = PageExtractor().extract("lecture.pdf")
    # [Page(page_number=1, text="..."), ...]
"""

__version__ = "1.0.0"

from .exceptions import PageExtractionError, PDFCorruptedError, PDFNotFoundError
from .extractor import PageExtractor
from .models import ExtractedDocument, Page
from .storage import PagesStorage

__all__ = [
    "__version__",
    "PageExtractionError",
    "PDFCorruptedError",
    "PDFNotFoundError",
    "PageExtractor",
    "ExtractedDocument",
    "Page",
    "PagesStorage",
]
