from dataclasses import dataclass, field
import os

from .models import ChunkingConfig


@dataclass
class ChunkingServiceConfig:
    data_dir: str = "data/chunking"
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)

    @classmethod
    def from_env(cls) -> "ChunkingServiceConfig":
        defaults = ChunkingConfig()

        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        return cls(
            data_dir=os.environ.get("CHUNKING_DATA_DIR", cls.data_dir),
            chunking=ChunkingConfig(
                max_tokens=_int("CHUNKING_MAX_TOKENS", defaults.max_tokens),
                overlap_units=_int("CHUNKING_OVERLAP_UNITS", defaults.overlap_units),
                tokenizer=os.environ.get("CHUNKING_TOKENIZER", defaults.tokenizer),
            ),
        )
