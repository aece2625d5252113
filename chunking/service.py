import logging
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from pdf_pages import PageExtractor

from .config import ChunkingServiceConfig
from .chunker import DocumentChunker, PageLike
from .exceptions import InvalidInputError
from .models import ChunkingConfig, ChunkingResult
from .storage import ChunkingStorage

logger = logging.getLogger(__name__)


class ChunkingService:
    def __init__(
        self,
        config: ChunkingServiceConfig | None = None,
        extractor: PageExtractor | None = None,
    ):
        self.config = config or ChunkingServiceConfig()
        self.chunker = DocumentChunker(self.config.chunking)
        self.storage = ChunkingStorage(self.config.data_dir)
        self.extractor = extractor or PageExtractor()

    def chunk_pages(
        self,
        document_id: str,
        pages: Iterable[PageLike],
        max_tokens: Optional[int] = None,
        overlap_units: Optional[int] = None,
    ) -> ChunkingResult:
        return self._chunker_for(max_tokens, overlap_units).chunk(document_id, pages)

    def chunk_pdf(
        self,
        document_id: str,
        pdf_path: str,
        max_tokens: Optional[int] = None,
        overlap_units: Optional[int] = None,
    ) -> ChunkingResult:
        pages = self.extractor.extract(pdf_path)
        logger.info(f"Extracted {len(pages)} pages from {pdf_path}")
        return self.chunk_pages(document_id, pages, max_tokens, overlap_units)

    def chunk_from_file(self, pages_path: str) -> ChunkingResult:
        return self.chunker.chunk_from_file(pages_path)

    def save(self, result: ChunkingResult) -> str:
        paths = self.storage.save(result)
        logger.info(f"Saved {result.total_chunks} chunks to {paths.chunk_file}")
        return str(paths.chunk_file)

    def chunk_and_save(self, pages_path: str) -> tuple[ChunkingResult, str]:
        result = self.chunk_from_file(pages_path)
        return result, self.save(result)

    def _chunker_for(
        self,
        max_tokens: Optional[int],
        overlap_units: Optional[int],
    ) -> DocumentChunker:
        if max_tokens is None and overlap_units is None:
            return self.chunker
        overrides: dict[str, Any] = {}
        if max_tokens is not None:
            overrides["max_tokens"] = max_tokens
        if overlap_units is not None:
            overrides["overlap_units"] = overlap_units
        try:
            config = ChunkingConfig.model_validate(
                {**self.config.chunking.model_dump(), **overrides}
            )
        except ValidationError as exc:
            raise InvalidInputError("Invalid chunking parameters", details=str(exc)) from exc
        return DocumentChunker(config)
