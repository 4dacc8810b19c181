"""API models."""

from api.models.assessment import (
    AnswerRequest,
    AssessmentState,
    CreateAssessmentRequest,
    CreateAssessmentResponse,
    CrisisInfo,
    FinishResponse,
    TransitionResponse,
)
from api.models.symptoms import (
    CategoryDetail,
    CategorySummary,
    CreateSymptomCheckRequest,
    CreateSymptomCheckResponse,
    SelectCategoryRequest,
    SetAnswerRequest,
    SymptomCheckState,
)

__all__ = [
    "AnswerRequest",
    "AssessmentState",
    "CreateAssessmentRequest",
    "CreateAssessmentResponse",
    "CrisisInfo",
    "FinishResponse",
    "TransitionResponse",
    "CategoryDetail",
    "CategorySummary",
    "CreateSymptomCheckRequest",
    "CreateSymptomCheckResponse",
    "SelectCategoryRequest",
    "SetAnswerRequest",
    "SymptomCheckState",
]
