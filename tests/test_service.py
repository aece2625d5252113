"""Tests for chunking.service and chunking.config."""

import json

import pytest

from chunking import ChunkingConfig, ChunkingService, ChunkingServiceConfig
from chunking.exceptions import InvalidInputError


@pytest.fixture
def service(tmp_path):
    return ChunkingService(ChunkingServiceConfig(data_dir=str(tmp_path)))


class TestChunkingService:
    def test_chunk_pages(self, service, short_pages):
        result = service.chunk_pages("bio", short_pages)
        assert result.total_chunks == 1

    def test_overrides(self, service):
        pages = [{"page_number": n, "text": "x" * 400} for n in (1, 2, 3)]
        result = service.chunk_pages("bio", pages, max_tokens=150, overlap_units=0)
        assert [(c.start_page, c.end_page) for c in result.chunks] == [(1, 1), (2, 2), (3, 3)]
        assert result.config.max_tokens == 150
        assert service.config.chunking.max_tokens == 700

    def test_invalid_override(self, service, short_pages):
        with pytest.raises(InvalidInputError):
            service.chunk_pages("bio", short_pages, max_tokens=0)

    def test_chunk_pdf(self, service, sample_pdf):
        result = service.chunk_pdf("lecture", str(sample_pdf))
        assert result.total_chunks == 1
        assert result.chunks[0].start_page == 1
        assert result.chunks[0].end_page == 3
        assert "Chlorophyll" in result.chunks[0].text

    def test_chunk_and_save(self, service, tmp_path, short_pages):
        pages_file = tmp_path / "bio_pages.json"
        pages_file.write_text(json.dumps({"document_id": "bio", "pages": short_pages}), encoding="utf-8")

        result, output_path = service.chunk_and_save(str(pages_file))
        assert result.document_id == "bio"
        assert output_path.endswith(".json")
        assert service.storage.load_latest("bio").total_chunks == 1


class TestServiceConfig:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHUNKING_DATA_DIR", "/tmp/chunks")
        monkeypatch.setenv("CHUNKING_MAX_TOKENS", "300")
        monkeypatch.setenv("CHUNKING_OVERLAP_UNITS", "2")
        config = ChunkingServiceConfig.from_env()
        assert config.data_dir == "/tmp/chunks"
        assert config.chunking == ChunkingConfig(max_tokens=300, overlap_units=2)

    def test_from_env_defaults(self, monkeypatch):
        for name in ("CHUNKING_DATA_DIR", "CHUNKING_MAX_TOKENS", "CHUNKING_OVERLAP_UNITS", "CHUNKING_TOKENIZER"):
            monkeypatch.delenv(name, raising=False)
        config = ChunkingServiceConfig.from_env()
        assert config.data_dir == "data/chunking"
        assert config.chunking == ChunkingConfig()
