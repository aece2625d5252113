"""
Document Chunker - Core chunking logic for the quiz pipeline

Takes the ordered pages of a document and produces bounded-size, slightly
overlapping chunks, one quiz per chunk downstream.

Algorithm (per page, in the order supplied):
1. Estimate the page's tokens.
2. Oversized page (estimate > max_tokens): split it into sentences and pack
   them into chunks of their own, all tagged with that page. The cross-page
   buffer is left untouched and resumed with the next page.
3. Otherwise the whole page is one unit on the cross-page buffer. Before a
   unit would push a non-empty buffer past max_tokens, the buffer is flushed
   as a chunk and re-seeded with its last `overlap_units` units.
4. Whatever is left in the buffer at the end becomes the final chunk.

Blank pages are ordinary units: they extend a chunk's page span
and can be carried as overlap.

A bucket is never flushed while empty, so a single unit larger than
max_tokens still becomes a chunk on its own. Content is never dropped.

Usage:
    from chunking import DocumentChunker, ChunkingConfig

    chunker = DocumentChunker(ChunkingConfig(max_tokens=700, overlap_units=1))
    result = chunker.chunk("lecture-01", pages)
    result.save("chunks.json")
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import ValidationError

from .exceptions import InvalidInputError
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
from .token_counter import TokenCounter, count_tokens_batch, estimate_tokens, get_token_counter
from .units import PageUnit, SentenceUnit, Unit

logger = logging.getLogger(__name__)

PageLike = Union[Page, Mapping[str, Any]]


@dataclass(frozen=True)
class Bucket:
    """Units collected for the chunk under construction and their token total."""
    units: tuple[Unit, ...] = ()
    tokens: int = 0


def add_unit(
    bucket: Bucket,
    unit: Unit,
    max_tokens: int,
    overlap_units: int,
    count_tokens: TokenCounter = estimate_tokens,
) -> tuple[Bucket, Optional[Bucket]]:
    """
    Append one unit to a bucket, flushing first if it would overflow.

    Returns:
        Tuple of (next_bucket, flushed) where flushed is the finished bucket
        or None when no flush happened.
    """
    unit_tokens = count_tokens(unit.text)
    flushed: Optional[Bucket] = None

    if bucket.units and bucket.tokens + unit_tokens > max_tokens:
        flushed = bucket
        bucket = _overlap_seed(bucket, unit_tokens, max_tokens, overlap_units, count_tokens)

    return Bucket(bucket.units + (unit,), bucket.tokens + unit_tokens), flushed


def _overlap_seed(
    flushed: Bucket,
    incoming_tokens: int,
    max_tokens: int,
    overlap_units: int,
    count_tokens: TokenCounter,
) -> Bucket:
    """
    Seed the next bucket with the trailing units of a flushed one.

    Leading seed units are dropped while the seed plus the incoming unit
    would exceed max_tokens.
    """
    if overlap_units <= 0:
        return Bucket()

    kept = list(flushed.units[-overlap_units:])
    sizes = [count_tokens(u.text) for u in kept]
    while kept and sum(sizes) + incoming_tokens > max_tokens:
        kept.pop(0)
        sizes.pop(0)
    return Bucket(tuple(kept), sum(sizes))


def pack_units(
    units: Iterable[Unit],
    max_tokens: int,
    overlap_units: int,
    count_tokens: TokenCounter = estimate_tokens,
) -> list[Bucket]:
    """Bin-pack units in order into finished buckets, including the last one."""
    finished: list[Bucket] = []
    bucket = Bucket()

    for unit in units:
        bucket, flushed = add_unit(bucket, unit, max_tokens, overlap_units, count_tokens)
        if flushed is not None:
            finished.append(flushed)

    if bucket.units:
        finished.append(bucket)
    return finished


def assemble_chunks(
    pages: Iterable[PageLike],
    max_tokens: int = MAX_TOKENS,
    overlap_units: int = OVERLAP_SENTENCES,
    count_tokens: TokenCounter = estimate_tokens,
) -> list[Chunk]:
    """
    Split ordered pages into ordered, bounded, overlapping chunks.

    Args:
        pages: Pages in ascending page order (Page models or mappings with
            page_number and text).
        max_tokens: Maximum estimated tokens per chunk.
        overlap_units: Trailing units carried from one chunk to the next.
        count_tokens: Token counting strategy.

    Returns:
        Chunks with order 1..N. Empty input yields an empty list.

    Raises:
        InvalidInputError: On malformed pages or out-of-range parameters.
    """
    _validate_params(max_tokens, overlap_units)
    validated = _coerce_pages(pages)

    finished: list[Bucket] = []
    buffer = Bucket()

    for page in validated:
        page_tokens = count_tokens(page.text)

        if page_tokens > max_tokens:
            sentences = split_sentences(page.text)
            page_buckets = pack_units(
                (SentenceUnit(page.page_number, s) for s in sentences),
                max_tokens,
                overlap_units,
                count_tokens,
            )
            logger.debug(
                f"Page {page.page_number}: {page_tokens} tokens exceeds {max_tokens}, "
                f"split into {len(sentences)} sentences / {len(page_buckets)} chunks"
            )
            finished.extend(page_buckets)
            continue

        buffer, flushed = add_unit(
            buffer,
            PageUnit(page.page_number, page.text),
            max_tokens,
            overlap_units,
            count_tokens,
        )
        if flushed is not None:
            finished.append(flushed)

    if buffer.units:
        finished.append(buffer)

    return [_to_chunk(bucket, order) for order, bucket in enumerate(finished, start=1)]


def _to_chunk(bucket: Bucket, order: int) -> Chunk:
    return Chunk(
        start_page=bucket.units[0].page_number,
        end_page=bucket.units[-1].page_number,
        text=" ".join(u.text for u in bucket.units),
        token_count=bucket.tokens,
        order=order,
    )


def _validate_params(max_tokens: int, overlap_units: int) -> None:
    if isinstance(max_tokens, bool) or not isinstance(max_tokens, int) or max_tokens <= 0:
        raise InvalidInputError("max_tokens must be a positive integer", "max_tokens", max_tokens)
    if isinstance(overlap_units, bool) or not isinstance(overlap_units, int) or overlap_units < 0:
        raise InvalidInputError(
            "overlap_units must be a non-negative integer", "overlap_units", overlap_units
        )


def _coerce_pages(pages: Iterable[PageLike]) -> list[Page]:
    if pages is None:
        raise InvalidInputError("pages must be a sequence of page records", "pages", None)

    validated: list[Page] = []
    for index, page in enumerate(pages):
        if not isinstance(page, Page):
            try:
                page = Page.model_validate(page)
            except ValidationError as exc:
                raise InvalidInputError(
                    "Malformed page record",
                    field=f"pages[{index}]",
                    value=page,
                    details=str(exc),
                ) from exc
        if validated and page.page_number < validated[-1].page_number:
            raise InvalidInputError(
                f"Pages must be in ascending order, page {page.page_number} "
                f"follows page {validated[-1].page_number}",
                field=f"pages[{index}]",
                value=page.page_number,
            )
        validated.append(page)
    return validated


class DocumentChunker:
    """
    Splits a document's pages into ordered quiz-sized chunks and wraps them
    in a ChunkingResult with statistics.
    """

    def __init__(self, config: Optional[ChunkingConfig] = None):
        self.config = config or ChunkingConfig()
        self.count_tokens = get_token_counter(self.config.tokenizer)

    def chunk(self, document_id: str, pages: Iterable[PageLike]) -> ChunkingResult:
        """
        Chunk a document's pages.

        Args:
            document_id: Caller-supplied identifier stored on the result.
            pages: Pages in ascending page order.

        Returns:
            ChunkingResult with all chunks and statistics.
        """
        validated = _coerce_pages(pages)
        chunks = assemble_chunks(
            validated,
            max_tokens=self.config.max_tokens,
            overlap_units=self.config.overlap_units,
            count_tokens=self.count_tokens,
        )
        stats = self._compute_stats(chunks, validated)
        logger.info(
            f"Chunked {document_id}: {stats.total_pages_processed} pages -> "
            f"{stats.total_chunks} chunks ({stats.oversized_pages} oversized pages)"
        )
        return ChunkingResult(
            document_id=document_id,
            config=self.config,
            chunks=chunks,
            stats=stats,
        )

    def chunk_from_file(self, json_path: str) -> ChunkingResult:
        """
        Load pages from a JSON file and chunk them.

        The file holds either a bare list of pages or an object with "pages"
        (e.g. a saved ExtractedDocument). The document id is taken from
        "document_id", then from the stem of "source_file", then from the
        stem of the JSON file itself.
        """
        data = json.loads(Path(json_path).read_text(encoding="utf-8"))
        document_id = self._make_document_id(json_path)
        if isinstance(data, dict):
            if data.get("document_id"):
                document_id = data["document_id"]
            elif data.get("source_file"):
                document_id = self._make_document_id(data["source_file"])
            pages = data.get("pages")
        else:
            pages = data
        return self.chunk(document_id, pages)

    def _make_document_id(self, source_file: str) -> str:
        """Generate a document ID from the source file path."""
        normalized = source_file.replace("\\", "/")
        return Path(normalized).stem

    def _compute_stats(self, chunks: list[Chunk], pages: list[Page]) -> ChunkingStats:
        """Compute statistics about the chunking result."""
        page_tokens = count_tokens_batch([p.text for p in pages], self.count_tokens)
        oversized_pages = sum(1 for t in page_tokens if t > self.config.max_tokens)
        if not chunks:
            return ChunkingStats(
                total_pages_processed=len(pages),
                oversized_pages=oversized_pages,
            )

        token_counts = [c.token_count for c in chunks]
        return ChunkingStats(
            total_chunks=len(chunks),
            total_tokens=sum(token_counts),
            avg_chunk_tokens=sum(token_counts) / len(token_counts),
            min_chunk_tokens=min(token_counts),
            max_chunk_tokens=max(token_counts),
            total_pages_processed=len(pages),
            oversized_pages=oversized_pages,
            oversized_chunks=sum(1 for t in token_counts if t > self.config.max_tokens),
        )
