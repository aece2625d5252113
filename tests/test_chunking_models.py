"""Tests for chunking.models."""

import pytest
from pydantic import ValidationError

from chunking.models import (
    Chunk,
    ChunkingConfig,
    ChunkingResult,
    ChunkingStats,
    ChunkRequest,
)


def _chunk(order: int = 1, **overrides) -> Chunk:
    defaults = dict(start_page=1, end_page=2, text="Some text.", token_count=3, order=order)
    defaults.update(overrides)
    return Chunk(**defaults)


class TestChunkingConfig:
    def test_defaults(self):
        config = ChunkingConfig()
        assert config.max_tokens == 700
        assert config.overlap_units == 1
        assert config.tokenizer == "approx"

    def test_custom_values(self):
        config = ChunkingConfig(max_tokens=256, overlap_units=0, tokenizer="tiktoken")
        assert config.max_tokens == 256
        assert config.overlap_units == 0

    def test_max_tokens_must_be_positive(self):
        with pytest.raises(ValidationError):
            ChunkingConfig(max_tokens=0)

    def test_overlap_not_negative(self):
        with pytest.raises(ValidationError):
            ChunkingConfig(overlap_units=-1)

    def test_unknown_tokenizer(self):
        with pytest.raises(ValidationError):
            ChunkingConfig(tokenizer="spacy")


class TestChunk:
    def test_creation(self):
        chunk = _chunk()
        assert chunk.page_numbers == [1, 2]

    def test_start_after_end_rejected(self):
        with pytest.raises(ValidationError, match="start_page"):
            _chunk(start_page=3, end_page=2)

    def test_order_starts_at_one(self):
        with pytest.raises(ValidationError):
            _chunk(order=0)

    def test_to_dict(self):
        assert _chunk().to_dict() == {
            "start_page": 1,
            "end_page": 2,
            "text": "Some text.",
            "token_count": 3,
            "order": 1,
        }


class TestChunkingResult:
    def _result(self) -> ChunkingResult:
        return ChunkingResult(
            document_id="doc001",
            config=ChunkingConfig(),
            chunks=[_chunk(1), _chunk(2, start_page=2, end_page=3)],
            stats=ChunkingStats(total_chunks=2, total_tokens=6),
        )

    def test_total_chunks(self):
        assert self._result().total_chunks == 2

    def test_get_chunk(self):
        result = self._result()
        assert result.get_chunk(2).start_page == 2
        assert result.get_chunk(5) is None

    def test_save_and_load(self, tmp_path):
        result = self._result()
        path = tmp_path / "chunks.json"
        result.save(str(path))

        loaded = ChunkingResult.load(str(path))
        assert loaded.document_id == "doc001"
        assert loaded.chunks == result.chunks
        assert loaded.stats.total_tokens == 6
        assert loaded.config == result.config


class TestChunkRequest:
    def test_pages_source(self):
        request = ChunkRequest(document_id="d", pages=[{"page_number": 1, "text": "x"}])
        assert request.save is True

    def test_requires_a_source(self):
        with pytest.raises(ValidationError):
            ChunkRequest(document_id="d")

    def test_rejects_both_sources(self):
        with pytest.raises(ValidationError):
            ChunkRequest(document_id="d", pages=[], pdf_path="a.pdf")
