from dataclasses import dataclass
import os
from typing import Optional


@dataclass
class QuizConfig:
    model: str = "gpt-4.1"
    temperature: float = 0.7
    max_tokens: int = 2500
    question_count: int = 7
    summary_max_tokens: int = 200
    api_key: Optional[str] = None
    data_dir: str = "data/quizzes"

    @classmethod
    def from_env(cls) -> "QuizConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _float(name: str, default: float) -> float:
            value = os.environ.get(name)
            return float(value) if value else default

        return cls(
            model=os.environ.get("QUIZ_MODEL", cls.model),
            temperature=_float("QUIZ_TEMPERATURE", cls.temperature),
            max_tokens=_int("QUIZ_MAX_TOKENS", cls.max_tokens),
            question_count=_int("QUIZ_QUESTION_COUNT", cls.question_count),
            summary_max_tokens=_int("QUIZ_SUMMARY_MAX_TOKENS", cls.summary_max_tokens),
            api_key=os.environ.get("OPENAI_API_KEY"),
            data_dir=os.environ.get("QUIZ_DATA_DIR", cls.data_dir),
        )
