"""
Text-native PDF page extraction.

Extracts the selectable text of every page with PyMuPDF, one Page record
per physical page. Text blocks are read top-to-bottom, left-to-right
(optionally column by column), line-break hyphenation is undone and runs of
whitespace are collapsed.
"""

from __future__ import annotations

from pathlib import Path
import logging
import re
from typing import Iterator

import fitz  # PyMuPDF

from .exceptions import PDFCorruptedError, PDFNotFoundError
from .models import ExtractedDocument, Page

logger = logging.getLogger(__name__)


class PageExtractor:
    def __init__(
        self,
        sort_blocks: bool = True,
        preserve_line_breaks: bool = False,
        layout_mode: str = "simple",
        column_gap_ratio: float = 0.25,
    ) -> None:
        self.sort_blocks = sort_blocks
        self.preserve_line_breaks = preserve_line_breaks
        self.layout_mode = layout_mode
        self.column_gap_ratio = column_gap_ratio

    def extract(self, pdf_path: str | Path) -> list[Page]:
        return list(self.iter_pages(pdf_path))

    def extract_document(self, pdf_path: str | Path) -> ExtractedDocument:
        return ExtractedDocument(source_file=str(pdf_path), pages=self.extract(pdf_path))

    def iter_pages(self, pdf_path: str | Path) -> Iterator[Page]:
        path = Path(pdf_path)
        if not path.exists():
            raise PDFNotFoundError(str(path))

        try:
            doc = fitz.open(path)
        except Exception as exc:
            raise PDFCorruptedError(str(path), exc) from exc

        with doc:
            logger.info(f"Extracting {len(doc)} pages from {path}")
            for index, page in enumerate(doc):
                blocks = page.get_text("blocks", sort=False)
                raw_text = self._join_blocks(blocks, page.rect.width)
                text = self.clean_text(raw_text)
                if not text:
                    logger.debug(f"Page {index + 1}: no selectable text")
                yield Page(page_number=index + 1, text=text)

    def clean_text(self, text: str) -> str:
        if not text:
            return ""
        cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
        # De-hyphenate line breaks: "infor-\nmation" -> "information"
        cleaned = re.sub(r"(?<=\w)-\n(?=\w)", "", cleaned)
        cleaned = re.sub(r"[ \t]+", " ", cleaned)
        if not self.preserve_line_breaks:
            cleaned = re.sub(r"\s*\n\s*", " ", cleaned)
        cleaned = re.sub(r"\n{3,}", "\n\n", cleaned)
        return cleaned.strip()

    def _join_blocks(self, blocks: list, page_width: float) -> str:
        texts: list[str] = []
        ordered_blocks = self._order_blocks(blocks, page_width) if self.sort_blocks else blocks
        for block in ordered_blocks:
            if len(block) < 5:
                continue
            text = block[4]
            block_type = block[-1] if isinstance(block[-1], int) else 0
            if block_type != 0:
                continue  # skip image blocks
            if text and text.strip():
                texts.append(text)

        return "\n\n".join(texts).strip()

    def _order_blocks(self, blocks: list, page_width: float) -> list:
        if self.layout_mode != "columns":
            return sorted(blocks, key=lambda b: (b[1], b[0]))

        text_blocks = [b for b in blocks if len(b) >= 5 and (b[-1] if isinstance(b[-1], int) else 0) == 0]
        x0s = sorted(b[0] for b in text_blocks if b[4] and str(b[4]).strip())
        if len(x0s) < 6:
            return sorted(blocks, key=lambda b: (b[1], b[0]))

        gaps = [(x0s[i + 1] - x0s[i], i) for i in range(len(x0s) - 1)]
        max_gap, idx = max(gaps, key=lambda g: g[0])
        if max_gap < page_width * self.column_gap_ratio:
            return sorted(blocks, key=lambda b: (b[1], b[0]))

        split = x0s[idx]
        left = sorted((b for b in blocks if b[0] <= split), key=lambda b: (b[1], b[0]))
        right = sorted((b for b in blocks if b[0] > split), key=lambda b: (b[1], b[0]))
        return left + right
