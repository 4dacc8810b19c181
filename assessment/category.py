"""
Body-system symptom assessment.

GOVERNANCE:
- Switching category always starts from a fresh answer vector
- Results are listed in condition declaration order, never re-ranked
"""

import logging
from typing import Optional

from assessment.answers import validate_scale_value
from assessment.catalog.models import CATEGORY_QUESTION_COUNT, Category
from assessment.catalog.provider import CatalogProvider
from assessment.exceptions import FlowStateError, InputRangeError, UnknownQuestionError
from assessment.results import ScoreResult
from assessment.scoring import all_unlikely, score_conditions
from config import get_settings

logger = logging.getLogger(__name__)


class CategoryAssessmentController:
    """Answer vector and results for one user's symptom battery."""

    def __init__(
        self,
        catalog: CatalogProvider,
        language: str,
        default_answer: Optional[int] = None,
    ):
        # Fails early on an unsupported language.
        catalog.categories(language)
        self._catalog = catalog
        self.language = language
        if default_answer is None:
            default_answer = get_settings().default_answer_value
        self._default_answer = validate_scale_value(default_answer)
        self._category: Optional[Category] = None
        self._answers = [self._default_answer] * CATEGORY_QUESTION_COUNT
        self._results: list[ScoreResult] = []

    @property
    def category(self) -> Optional[Category]:
        return self._category

    @property
    def answers(self) -> tuple[int, ...]:
        return tuple(self._answers)

    @property
    def results(self) -> list[ScoreResult]:
        return list(self._results)

    def select_category(self, key: str) -> Category:
        """
        Switch to a category, resetting answers and discarding results.

        Raises:
            UnknownCategoryError: If the key is not in the catalog
        """
        category = self._catalog.category(key, self.language)
        self._category = category
        self._answers = [self._default_answer] * len(category.questions)
        self._results = []
        logger.debug("Selected symptom category %s", key)
        return category

    def set_answer(self, index: int, value: int) -> None:
        """
        Set the answer at a question position.

        Raises:
            InputRangeError: If index is outside 0..9 or value outside 1..10
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InputRangeError(f"Answer index must be an integer, got {index!r}")
        if not 0 <= index < len(self._answers):
            raise InputRangeError(
                f"Answer index must be between 0 and {len(self._answers) - 1}, got {index}"
            )
        self._answers[index] = validate_scale_value(value)

    def answer(self, question_id: str, value: int) -> None:
        """Set an answer by question id in the selected category."""
        category = self._require_category()
        for index, question in enumerate(category.questions):
            if question.id == question_id:
                self.set_answer(index, value)
                return
        raise UnknownQuestionError(f"Unknown question in {category.key}: {question_id}")

    def compute_results(self) -> list[ScoreResult]:
        """
        Score every condition of the selected category.

        Raises:
            FlowStateError: If no category has been selected
        """
        category = self._require_category()
        self._results = score_conditions(category.conditions, self._answers)
        return list(self._results)

    def all_unlikely(self) -> bool:
        return all_unlikely(self._results)

    def _require_category(self) -> Category:
        if self._category is None:
            raise FlowStateError("No symptom category selected")
        return self._category
