"""
OpenAI chat-completion client for quiz generation.

One request per chunk, JSON reply expected. Failures surface as
QuizAPIError; there is no retry loop here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from openai import OpenAI, APIStatusError, OpenAIError

from .exceptions import QuizAPIError, QuizParseError

logger = logging.getLogger(__name__)


@dataclass
class Completion:
    content: str
    input_tokens: int
    output_tokens: int
    model: str
    finish_reason: str


class QuizClient:
    def __init__(
        self,
        model: str = "gpt-4.1",
        temperature: float = 0.7,
        max_tokens: int = 2500,
        api_key: Optional[str] = None,
        client: Any = None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.api_key = api_key
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def complete(self, system_prompt: str, user_prompt: str) -> Completion:
        logger.debug(f"Requesting completion from {self.model}")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIStatusError as e:
            raise QuizAPIError(original_error=e, status_code=e.status_code) from e
        except OpenAIError as e:
            raise QuizAPIError(original_error=e) from e

        choice = response.choices[0]
        content = (choice.message.content or "").strip()
        if choice.finish_reason == "content_filter":
            raise QuizParseError("Response blocked by content filter", content)
        if not content:
            raise QuizParseError("Empty response from API", content)

        usage = response.usage
        return Completion(
            content=content,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=getattr(response, "model", self.model),
            finish_reason=choice.finish_reason or "",
        )
