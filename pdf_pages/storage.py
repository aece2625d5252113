from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .models import ExtractedDocument


@dataclass
class PagesPaths:
    document_id: str
    pages_dir: Path
    pages_file: Path


class PagesStorage:
    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def build_paths(self, document_id: str) -> PagesPaths:
        timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S_%f")
        pages_dir = self.data_dir / document_id / "pages"
        pages_dir.mkdir(parents=True, exist_ok=True)
        pages_file = pages_dir / f"{document_id}_{timestamp}.json"
        return PagesPaths(
            document_id=document_id,
            pages_dir=pages_dir,
            pages_file=pages_file,
        )

    def save(self, document: ExtractedDocument) -> PagesPaths:
        paths = self.build_paths(document.document_id)
        document.save(str(paths.pages_file))
        return paths
