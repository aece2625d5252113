"""
Data Models for the Chunking Pipeline

Defines:
1. ChunkingConfig - Token budget, overlap and tokenizer selection
2. Chunk - A bounded, ordered text segment (output)
3. ChunkingStats / ChunkingResult - A complete chunking run with statistics
4. ChunkRequest / ChunkResponse - HTTP payloads for the chunking app

Design Principles:
- Pydantic v2 for validation and serialization
- Chunks carry their page span and 1-based order; the document id lives on
  the result, never on the chunk
- Save/load pattern for JSON persistence

Usage:
    config = ChunkingConfig(max_tokens=700, overlap_units=1)
    result = DocumentChunker(config).chunk("lecture-01", pages)
    result.save("chunks.json")
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from pdf_pages.models import Page

MAX_TOKENS = 700
OVERLAP_SENTENCES = 1


class ChunkingConfig(BaseModel):
    """
    Configuration for the chunk assembler.

    Defaults match the quiz pipeline: 700 estimated tokens per chunk and one
    unit of overlap between consecutive chunks.
    """
    max_tokens: int = Field(
        MAX_TOKENS,
        description="Maximum estimated tokens per chunk",
        gt=0,
    )
    overlap_units: int = Field(
        OVERLAP_SENTENCES,
        description="Trailing units (pages or sentences) carried into the next chunk",
        ge=0,
    )
    tokenizer: Literal["approx", "tiktoken"] = Field(
        "approx",
        description="Token counting strategy: 4-chars-per-token estimate or tiktoken",
    )


class Chunk(BaseModel):
    """
    A single text chunk, ready to be persisted or sent to quiz generation.
    """
    start_page: int = Field(
        ...,
        description="Page number of the first contributing unit",
    )
    end_page: int = Field(
        ...,
        description="Page number of the last contributing unit",
    )
    text: str = Field(
        ...,
        description="Contributing units joined with a single space",
    )
    token_count: int = Field(
        ...,
        description="Estimated tokens of the contributing units",
        ge=0,
    )
    order: int = Field(
        ...,
        description="1-based position among the chunks of this run",
        ge=1,
    )

    @model_validator(mode="after")
    def _check_page_span(self) -> "Chunk":
        if self.start_page > self.end_page:
            raise ValueError(
                f"start_page ({self.start_page}) must not exceed end_page ({self.end_page})"
            )
        return self

    @property
    def page_numbers(self) -> list[int]:
        return list(range(self.start_page, self.end_page + 1))

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ChunkingStats(BaseModel):
    """Statistics about the chunking process."""
    total_chunks: int = 0
    total_tokens: int = 0
    avg_chunk_tokens: float = 0.0
    min_chunk_tokens: int = 0
    max_chunk_tokens: int = 0
    total_pages_processed: int = 0
    oversized_pages: int = 0
    oversized_chunks: int = 0


class ChunkingResult(BaseModel):
    """
    Complete result of chunking a document.

    Contains all chunks in order plus processing statistics.
    """
    document_id: str = Field(
        ...,
        description="Caller-supplied document identifier",
    )
    config: ChunkingConfig = Field(
        ...,
        description="Configuration used for chunking",
    )
    chunks: list[Chunk] = Field(
        default_factory=list,
        description="All chunks, ordered by their order field",
    )
    stats: ChunkingStats = Field(
        default_factory=ChunkingStats,
        description="Chunking statistics",
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="When chunking was performed",
    )

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def get_chunk(self, order: int) -> Optional[Chunk]:
        """Find a chunk by its order number."""
        for chunk in self.chunks:
            if chunk.order == order:
                return chunk
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    def save(self, path: str) -> None:
        """Save chunking result to a JSON file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: str) -> "ChunkingResult":
        """Load chunking result from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.model_validate(data)


class ChunkRequest(BaseModel):
    document_id: str = Field(..., min_length=1)
    pages: Optional[list[dict[str, Any]]] = None
    pdf_path: Optional[str] = None
    max_tokens: Optional[int] = None
    overlap_units: Optional[int] = None
    save: bool = True

    @model_validator(mode="after")
    def _check_source(self) -> "ChunkRequest":
        if (self.pages is None) == (self.pdf_path is None):
            raise ValueError("Provide exactly one of 'pages' or 'pdf_path'")
        return self


class ChunkResponse(BaseModel):
    document_id: str
    total_chunks: int
    chunks: list[Chunk] = Field(default_factory=list)
    output_path: Optional[str] = None
