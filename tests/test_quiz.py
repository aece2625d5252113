"""Tests for the quiz package (prompts, JSON parsing, client, service)."""

import json
from unittest.mock import MagicMock

import httpx
import openai
import pytest

from chunking import DocumentChunker
from pdf_pages.models import Page
from quiz import QuizConfig, QuizRequest, QuizService, SummaryError, SummaryService
from quiz.client import Completion, QuizClient
from quiz.exceptions import QuizAPIError, QuizParseError
from quiz.json_utils import extract_first_json_object, safe_parse_json
from quiz.prompts import build_system_prompt, build_user_prompt


QUIZ_JSON = {
    "quizTitle": "Cell Basics",
    "description": "Check your understanding of cells.",
    "approximateTime": 5,
    "heroIconName": "BeakerIcon",
    "questions": [
        {"id": 1, "type": "TrueFalse", "prompt": "Cells have membranes.", "correctAnswer": True},
    ],
}


class FakeClient:
    def __init__(self, content: str):
        self.content = content
        self.calls: list[tuple[str, str]] = []

    def complete(self, system_prompt: str, user_prompt: str) -> Completion:
        self.calls.append((system_prompt, user_prompt))
        return Completion(
            content=self.content,
            input_tokens=100,
            output_tokens=50,
            model="gpt-4.1",
            finish_reason="stop",
        )


def _service(content: str) -> tuple[QuizService, FakeClient]:
    client = FakeClient(content)
    return QuizService(config=QuizConfig(), client=client), client


class TestJsonUtils:
    def test_plain_object(self):
        assert safe_parse_json('{"a": 1}') == {"a": 1}

    def test_fenced_object(self):
        text = '```json\n{"quizTitle": "T"}\n```'
        assert safe_parse_json(text) == {"quizTitle": "T"}

    def test_braces_inside_strings(self):
        text = 'Here: {"prompt": "Use {x} and }", "id": 1} trailing'
        assert extract_first_json_object(text) == '{"prompt": "Use {x} and }", "id": 1}'

    def test_not_json(self):
        assert safe_parse_json("no json here") == {}

    def test_array_is_rejected(self):
        assert safe_parse_json("[1, 2]") == {}


class TestPrompts:
    def test_system_prompt_question_count(self):
        prompt = build_system_prompt(7)
        assert "exactly 7 questions" in prompt
        assert '"quizTitle"' in prompt

    def test_user_prompt_with_summary(self):
        prompt = build_user_prompt("Chunk text.", 7, title="Biology", summary="About cells.")
        assert "Document Title: Biology" in prompt
        assert "Document Summary: About cells." in prompt
        assert "Chunk text." in prompt

    def test_user_prompt_without_summary(self):
        prompt = build_user_prompt("Chunk text.", 5, title="Biology")
        assert "Document Summary" not in prompt
        assert "exactly 5 questions" in prompt


class TestQuizService:
    def test_generate(self):
        service, client = _service(json.dumps(QUIZ_JSON))
        response = service.generate(QuizRequest(chunk_text="Cells have membranes.", chunk_order=2))

        assert response.quiz.quiz_title == "Cell Basics"
        assert response.quiz.approximate_time == 5
        assert response.chunk_order == 2
        assert response.metadata["input_tokens"] == 100
        assert "Cells have membranes." in client.calls[0][1]

    def test_quiz_dumped_with_original_keys(self):
        service, _ = _service(json.dumps({**QUIZ_JSON, "difficulty": "easy"}))
        quiz = service.generate(QuizRequest(chunk_text="x")).quiz
        data = quiz.to_dict()
        assert data["quizTitle"] == "Cell Basics"
        assert data["difficulty"] == "easy"

    def test_reply_wrapped_in_prose(self):
        service, _ = _service("Sure! " + json.dumps(QUIZ_JSON) + " Enjoy.")
        assert service.generate(QuizRequest(chunk_text="x")).quiz.quiz_title == "Cell Basics"

    def test_non_json_reply(self):
        service, _ = _service("I cannot do that.")
        with pytest.raises(QuizParseError):
            service.generate(QuizRequest(chunk_text="x"))

    def test_missing_title(self):
        service, _ = _service(json.dumps({"questions": []}))
        with pytest.raises(QuizParseError, match="not a valid quiz"):
            service.generate(QuizRequest(chunk_text="x"))

    def test_generate_for_chunks(self):
        pages = [{"page_number": n, "text": "x" * 2000} for n in (1, 2, 3)]
        result = DocumentChunker().chunk("doc", pages)
        service, client = _service(json.dumps(QUIZ_JSON))

        responses = service.generate_for_chunks(result, document_title="Doc", document_summary="Sum")
        assert [r.chunk_order for r in responses] == [1, 2, 3]
        assert all("Document Title: Doc" in user for _, user in client.calls)


def _openai_response(content, finish_reason="stop"):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.choices[0].finish_reason = finish_reason
    response.usage.prompt_tokens = 10
    response.usage.completion_tokens = 20
    response.model = "gpt-4.1"
    return response


class TestQuizClient:
    def test_complete(self):
        openai_client = MagicMock()
        openai_client.chat.completions.create.return_value = _openai_response('  {"quizTitle": "T"}  ')
        client = QuizClient(model="gpt-4.1", temperature=0.7, max_tokens=2500, client=openai_client)

        completion = client.complete("system", "user")
        assert completion.content == '{"quizTitle": "T"}'
        assert completion.input_tokens == 10
        kwargs = openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4.1"
        assert kwargs["max_tokens"] == 2500
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    def test_empty_reply(self):
        openai_client = MagicMock()
        openai_client.chat.completions.create.return_value = _openai_response("")
        with pytest.raises(QuizParseError, match="Empty"):
            QuizClient(client=openai_client).complete("s", "u")

    def test_content_filter(self):
        openai_client = MagicMock()
        openai_client.chat.completions.create.return_value = _openai_response("x", "content_filter")
        with pytest.raises(QuizParseError, match="content filter"):
            QuizClient(client=openai_client).complete("s", "u")

    def test_connection_error_wrapped(self):
        openai_client = MagicMock()
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        openai_client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)
        with pytest.raises(QuizAPIError):
            QuizClient(client=openai_client).complete("s", "u")

    def test_status_error_keeps_code(self):
        openai_client = MagicMock()
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(429, request=request)
        openai_client.chat.completions.create.side_effect = openai.RateLimitError(
            "rate limited", response=response, body=None
        )
        with pytest.raises(QuizAPIError) as exc_info:
            QuizClient(client=openai_client).complete("s", "u")
        assert exc_info.value.status_code == 429


class TestSummaryService:
    def _service(self, content: str = "A short summary.") -> tuple[SummaryService, FakeClient]:
        client = FakeClient(content)
        return SummaryService(config=QuizConfig(), client=client), client

    def test_only_long_pages_summarized(self):
        service, client = self._service()
        pages = [Page(page_number=1, text="x" * 501), Page(page_number=2, text="y" * 500)]

        summaries = service.summarize_pages(pages)
        assert summaries == {1: "A short summary."}
        assert len(client.calls) == 1
        assert "2-3 sentences" in client.calls[0][1]

    def test_document_summary_prefers_page_summaries(self):
        service, client = self._service("Whole document.")
        pages = [
            Page(page_number=1, text="Long page text."),
            Page(page_number=2, text="  Short page.  "),
            Page(page_number=3, text="   "),
        ]

        summary = service.summarize_document(pages, {1: " Page one summary. "})
        assert summary == "Whole document."
        user_prompt = client.calls[0][1]
        assert user_prompt.endswith("Page one summary.\n\nShort page.")
        assert "Long page text." not in user_prompt

    def test_document_without_content(self):
        service, client = self._service()
        with pytest.raises(SummaryError):
            service.summarize_document([Page(page_number=1, text="")])
        assert client.calls == []

    def test_default_client_uses_summary_budget(self):
        service = SummaryService(config=QuizConfig(summary_max_tokens=150))
        assert service.client.max_tokens == 150

    def test_summary_reaches_quiz_prompt(self):
        pages = [Page(page_number=1, text="Cells divide. " * 50)]
        summary = self._service("Cells and division.")[0].summarize_document(pages)
        result = DocumentChunker().chunk("doc", pages)
        quiz_service, client = _service(json.dumps(QUIZ_JSON))

        quiz_service.generate_for_chunks(result, document_summary=summary)
        assert "Document Summary: Cells and division." in client.calls[0][1]
