"""
Data Models for page extraction.

Page is the record handed to the chunker; ExtractedDocument keeps all pages
of one PDF together for JSON persistence between pipeline steps.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Page(BaseModel):
    """A single page of extracted text."""
    page_number: int = Field(
        ...,
        description="1-based page number in the source document",
        ge=1,
    )
    text: str = Field(
        ...,
        description="Plain text of the page",
    )


class ExtractedDocument(BaseModel):
    """All pages extracted from one PDF, in page order."""
    source_file: str = Field(
        ...,
        description="Path to the source PDF",
    )
    pages: list[Page] = Field(
        default_factory=list,
        description="Extracted pages in ascending page order",
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="When extraction was performed",
    )

    @property
    def document_id(self) -> str:
        return Path(self.source_file.replace("\\", "/")).stem

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def save(self, path: str) -> None:
        """Save the extracted pages to a JSON file."""
        Path(path).write_text(
            json.dumps(self.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )

    @classmethod
    def load(cls, path: str) -> "ExtractedDocument":
        """Load extracted pages from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)
