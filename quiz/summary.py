"""
Document summaries for quiz prompts.

Long pages get a short summary of their own; the document summary is then
written from the page summaries, falling back to the page text where a page
has none. The result is passed to quiz generation as the document context.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from pdf_pages.models import Page

from .client import QuizClient
from .config import QuizConfig
from .exceptions import SummaryError
from .prompts import (
    SUMMARY_SYSTEM_PROMPT,
    build_document_summary_prompt,
    build_page_summary_prompt,
)

logger = logging.getLogger(__name__)

# Pages at or below this many characters are not worth a summary.
MIN_SUMMARY_CHARS = 500


class SummaryService:
    def __init__(
        self,
        config: QuizConfig | None = None,
        client: QuizClient | None = None,
    ):
        self.config = config or QuizConfig.from_env()
        self.client = client or QuizClient(
            model=self.config.model,
            temperature=self.config.temperature,
            max_tokens=self.config.summary_max_tokens,
            api_key=self.config.api_key,
        )

    def summarize_pages(self, pages: Iterable[Page]) -> dict[int, str]:
        """Summarize every page longer than MIN_SUMMARY_CHARS, keyed by page number."""
        summaries: dict[int, str] = {}
        for page in pages:
            if len(page.text) <= MIN_SUMMARY_CHARS:
                continue
            completion = self.client.complete(
                SUMMARY_SYSTEM_PROMPT, build_page_summary_prompt(page.text)
            )
            summaries[page.page_number] = completion.content
        logger.info(f"Summarized {len(summaries)} pages")
        return summaries

    def summarize_document(
        self,
        pages: Iterable[Page],
        page_summaries: Optional[dict[int, str]] = None,
    ) -> str:
        """
        Write a three-sentence summary of the whole document.

        Args:
            pages: The document's pages in order.
            page_summaries: Page summaries by page number; pages without one
                contribute their own text.

        Raises:
            SummaryError: If no page has any content.
        """
        page_summaries = page_summaries or {}
        contents: list[str] = []
        for page in pages:
            summary = page_summaries.get(page.page_number, "").strip()
            content = summary or page.text.strip()
            if content:
                contents.append(content)

        if not contents:
            raise SummaryError()

        completion = self.client.complete(
            SUMMARY_SYSTEM_PROMPT, build_document_summary_prompt(contents)
        )
        return completion.content
