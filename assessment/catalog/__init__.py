"""Question catalog models. The loader lives in ``assessment.catalog.provider``."""

from assessment.catalog.models import (
    CATEGORY_QUESTION_COUNT,
    DOMAIN_QUESTION_COUNT,
    Category,
    Condition,
    CrisisResource,
    Question,
    QuestionKind,
    Section,
    SectionKind,
    Thresholds,
)

__all__ = [
    "CATEGORY_QUESTION_COUNT",
    "DOMAIN_QUESTION_COUNT",
    "Category",
    "Condition",
    "CrisisResource",
    "Question",
    "QuestionKind",
    "Section",
    "SectionKind",
    "Thresholds",
]
