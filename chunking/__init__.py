"""
Chunking Module - Page-based chunking for per-chunk quiz generation

Splits a document's extracted pages into ordered chunks bounded by an
estimated token budget (default 700), with one unit of overlap between
consecutive chunks. Pages too large for one chunk are split into sentences.

Quick Start:
    from chunking import DocumentChunker, ChunkingConfig

    pages = [{"page_number": 1, "text": "Short sentence one. Short sentence two."}]
    chunker = DocumentChunker(ChunkingConfig(max_tokens=700))
    result = chunker.chunk("lecture-01", pages)
    result.save("chunks.json")
"""

__version__ = "1.0.0"

from .chunker import DocumentChunker, assemble_chunks, pack_units
from .exceptions import ChunkingError, InvalidInputError
from .service import ChunkingService
from .config import ChunkingServiceConfig
from .models import (
    MAX_TOKENS,
    OVERLAP_SENTENCES,
    Chunk,
    ChunkingConfig,
    ChunkingResult,
    ChunkingStats,
    Page,
)
from .sentence_splitter import split_sentences
from .token_counter import count_tokens, estimate_tokens, get_token_counter
from .units import PageUnit, SentenceUnit

__all__ = [
    "__version__",
    "DocumentChunker",
    "assemble_chunks",
    "pack_units",
    "ChunkingError",
    "InvalidInputError",
    "ChunkingService",
    "ChunkingServiceConfig",
    "MAX_TOKENS",
    "OVERLAP_SENTENCES",
    "Chunk",
    "ChunkingConfig",
    "ChunkingResult",
    "ChunkingStats",
    "Page",
    "split_sentences",
    "count_tokens",
    "estimate_tokens",
    "get_token_counter",
    "PageUnit",
    "SentenceUnit",
]
