SYSTEM_PROMPT = """You are an expert quiz creator that writes quiz data as JSON.

Quiz object:
{{
  "quizTitle": string,
  "description": string,
  "approximateTime": number,      // minutes
  "heroIconName": string,         // a Heroicons name, e.g. "AcademicCapIcon", "BookOpenIcon", "LightBulbIcon"
  "questions": QuizQuestion[]
}}

Every question has a unique numeric "id", a "type" and a "prompt". Types:
- "SAMCQ": single answer multiple choice -> "options": string[], "correctAnswer": string
- "MAMCQ": multiple answer multiple choice -> "options": string[], "correctAnswers": string[]
- "TrueFalse": -> "correctAnswer": boolean
- "FillBlanks": -> "blanks": number, "answers": string[]
- "Matching": -> "pairs": [{{"term": string, "definition": string}}]

Rules:
1) The content is ONE chunk of a larger document. Ask only about this chunk.
2) Write the questions in the SAME LANGUAGE as the chunk.
3) Aim for exactly {question_count} questions (fewer only if the chunk is very short).
4) Mix question types. Use FillBlanks sparingly: blanks do not accept synonyms.
5) Focus on the most important concepts and facts. Wrong options must not be obvious.
6) Return ONLY the JSON object. No Markdown, no comments, no explanations.
"""


USER_PROMPT_WITH_SUMMARY = """CONTEXT: This content chunk is part of a larger PDF document.

Document Title: {title}

Document Summary: {summary}

CONTENT CHUNK TO CREATE QUIZ FROM:
{chunk_text}

Create a quiz with exactly {question_count} questions based ONLY on the content chunk above. Use the document context to understand the subject, but ask only about the chunk.
"""


USER_PROMPT = """CONTEXT: This content chunk is part of a larger educational PDF document.

CONTENT CHUNK TO CREATE QUIZ FROM:
{chunk_text}

Create a quiz with exactly {question_count} questions based ONLY on the content chunk above.
"""


def build_system_prompt(question_count: int) -> str:
    return SYSTEM_PROMPT.format(question_count=question_count)


def build_user_prompt(
    chunk_text: str,
    question_count: int,
    title: str | None = None,
    summary: str | None = None,
) -> str:
    if summary:
        return USER_PROMPT_WITH_SUMMARY.format(
            title=title or "Educational Document",
            summary=summary,
            chunk_text=chunk_text,
            question_count=question_count,
        )
    return USER_PROMPT.format(chunk_text=chunk_text, question_count=question_count)


SUMMARY_SYSTEM_PROMPT = "You are a helpful assistant."

PAGE_SUMMARY_PROMPT = """Summarize the below text in 2-3 sentences, in the same language as provided:

{text}"""

DOCUMENT_SUMMARY_PROMPT = """Please write a concise, 3-sentence summary of the overall document (in the same language as the content), based on the following content:

{content}"""


def build_page_summary_prompt(text: str) -> str:
    return PAGE_SUMMARY_PROMPT.format(text=text)


def build_document_summary_prompt(contents: list[str]) -> str:
    return DOCUMENT_SUMMARY_PROMPT.format(content="\n\n".join(contents))
