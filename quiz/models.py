from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Quiz(BaseModel):
    """
    Quiz object as returned by the model.

    Only the title is required; questions are kept as the raw dicts the
    model produced and any extra top-level keys are preserved.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    quiz_title: str = Field(..., alias="quizTitle", min_length=1)
    description: str = ""
    approximate_time: Optional[int] = Field(None, alias="approximateTime")
    hero_icon_name: Optional[str] = Field(None, alias="heroIconName")
    questions: list[dict[str, Any]] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class QuizRequest(BaseModel):
    chunk_text: str = Field(..., min_length=1)
    chunk_order: Optional[int] = Field(None, ge=1)
    document_title: Optional[str] = None
    document_summary: Optional[str] = None


class QuizResponse(BaseModel):
    quiz: Quiz
    chunk_order: Optional[int] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
