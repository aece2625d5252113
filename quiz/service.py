from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from chunking.models import ChunkingResult

from .client import QuizClient
from .config import QuizConfig
from .exceptions import QuizParseError
from .json_utils import safe_parse_json
from .models import Quiz, QuizRequest, QuizResponse
from .prompts import build_system_prompt, build_user_prompt

logger = logging.getLogger(__name__)


class QuizService:
    def __init__(
        self,
        config: QuizConfig | None = None,
        client: QuizClient | None = None,
    ):
        self.config = config or QuizConfig.from_env()
        self.client = client or QuizClient(
            model=self.config.model,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            api_key=self.config.api_key,
        )

    def generate(self, request: QuizRequest) -> QuizResponse:
        system_prompt = build_system_prompt(self.config.question_count)
        user_prompt = build_user_prompt(
            chunk_text=request.chunk_text,
            question_count=self.config.question_count,
            title=request.document_title,
            summary=request.document_summary,
        )

        completion = self.client.complete(system_prompt, user_prompt)

        payload = safe_parse_json(completion.content)
        if not payload:
            raise QuizParseError("Model reply is not a JSON object", completion.content)
        try:
            quiz = Quiz.model_validate(payload)
        except ValidationError as exc:
            raise QuizParseError(f"Model reply is not a valid quiz: {exc}", completion.content) from exc

        logger.info(
            f"Generated quiz '{quiz.quiz_title}' with {len(quiz.questions)} questions"
            + (f" for chunk {request.chunk_order}" if request.chunk_order else "")
        )
        return QuizResponse(
            quiz=quiz,
            chunk_order=request.chunk_order,
            metadata={
                "model": completion.model,
                "input_tokens": completion.input_tokens,
                "output_tokens": completion.output_tokens,
                "finish_reason": completion.finish_reason,
            },
        )

    def generate_for_chunks(
        self,
        result: ChunkingResult,
        document_title: Optional[str] = None,
        document_summary: Optional[str] = None,
    ) -> list[QuizResponse]:
        responses: list[QuizResponse] = []
        for chunk in result.chunks:
            request = QuizRequest(
                chunk_text=chunk.text,
                chunk_order=chunk.order,
                document_title=document_title,
                document_summary=document_summary,
            )
            responses.append(self.generate(request))
        return responses
