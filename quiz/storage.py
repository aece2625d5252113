import json
from pathlib import Path

from .models import QuizResponse


class QuizStorage:
    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def quiz_file(self, document_id: str, chunk_order: int) -> Path:
        return self.data_dir / document_id / "quizzes" / f"chunk_{chunk_order:04d}.json"

    def save(self, document_id: str, response: QuizResponse) -> Path:
        if response.chunk_order is None:
            raise ValueError("QuizResponse.chunk_order is required to save a chunk quiz")
        path = self.quiz_file(document_id, response.chunk_order)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "document_id": document_id,
            "chunk_order": response.chunk_order,
            "quiz": response.quiz.to_dict(),
            "metadata": response.metadata,
        }
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return path

    def summary_file(self, document_id: str) -> Path:
        return self.data_dir / document_id / "summary.json"

    def save_summary(self, document_id: str, summary: str, page_summaries: dict[int, str]) -> Path:
        path = self.summary_file(document_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "document_id": document_id,
            "summary": summary,
            "page_summaries": {str(number): text for number, text in sorted(page_summaries.items())},
        }
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return path
