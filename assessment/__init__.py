"""Self-assessment and scoring engine."""

from assessment.answers import AnswerStore, invert
from assessment.catalog.provider import CatalogProvider, get_catalog
from assessment.category import CategoryAssessmentController
from assessment.exceptions import (
    AssessmentError,
    CatalogShapeError,
    FlowStateError,
    InputRangeError,
    UnknownCategoryError,
    UnknownLanguageError,
    UnknownQuestionError,
)
from assessment.flow import EMERGENCY_OVERLAY, SectionFlowController, TransitionStatus
from assessment.results import AssessmentResults, ScoreResult, SeverityLabel

__all__ = [
    "EMERGENCY_OVERLAY",
    "AnswerStore",
    "AssessmentError",
    "AssessmentResults",
    "CatalogProvider",
    "CatalogShapeError",
    "CategoryAssessmentController",
    "FlowStateError",
    "InputRangeError",
    "ScoreResult",
    "SectionFlowController",
    "SeverityLabel",
    "TransitionStatus",
    "UnknownCategoryError",
    "UnknownLanguageError",
    "UnknownQuestionError",
    "get_catalog",
    "invert",
]
