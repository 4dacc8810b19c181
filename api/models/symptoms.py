"""Symptom battery API models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, StrictInt

from assessment import CategoryAssessmentController, ScoreResult
from assessment.catalog import Category, Question


class CategorySummary(BaseModel):
    """A selectable body-system category."""

    key: str
    label: str
    question_count: int
    conditions: list[str]

    @classmethod
    def from_category(cls, category: Category) -> "CategorySummary":
        return cls(
            key=category.key,
            label=category.label,
            question_count=len(category.questions),
            conditions=[c.label for c in category.conditions],
        )


class CategoryDetail(BaseModel):
    """Questions of the selected category."""

    key: str
    label: str
    questions: list[Question]


class CreateSymptomCheckRequest(BaseModel):
    """Request to start a symptom check, optionally with a category."""

    language: Optional[str] = None
    category: Optional[str] = None


class SelectCategoryRequest(BaseModel):
    category: str


class SetAnswerRequest(BaseModel):
    value: StrictInt


class SymptomCheckState(BaseModel):
    """Current answers and latest results of a symptom check."""

    session_id: str
    language: str
    category: Optional[CategoryDetail]
    answers: list[int]
    results: list[ScoreResult]
    all_unlikely: bool

    @classmethod
    def build(
        cls, session_id: str, controller: CategoryAssessmentController
    ) -> "SymptomCheckState":
        category = controller.category
        detail = None
        if category is not None:
            detail = CategoryDetail(
                key=category.key,
                label=category.label,
                questions=list(category.questions),
            )
        return cls(
            session_id=session_id,
            language=controller.language,
            category=detail,
            answers=list(controller.answers),
            results=controller.results,
            all_unlikely=controller.all_unlikely(),
        )


class CreateSymptomCheckResponse(BaseModel):
    session_id: str
    created_at: datetime
    symptom_check: SymptomCheckState
