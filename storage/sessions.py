"""
In-memory session storage.

GOVERNANCE:
- No persistent storage (results are handed to the caller)
- No external database connections
"""

import logging
from functools import lru_cache
from typing import Optional

from assessment import (
    AssessmentResults,
    CategoryAssessmentController,
    SectionFlowController,
)

logger = logging.getLogger(__name__)


class SessionStorage:
    """Live assessment controllers keyed by session id."""

    def __init__(self):
        self._assessments: dict[str, SectionFlowController] = {}
        self._symptom_checks: dict[str, CategoryAssessmentController] = {}
        self._completed: dict[str, list[AssessmentResults]] = {}

    def create_assessment(self, session_id: str, controller: SectionFlowController) -> None:
        """Store a new sectional assessment."""
        self._assessments[session_id] = controller
        logger.info("Created assessment session %s", session_id)

    def get_assessment(self, session_id: str) -> Optional[SectionFlowController]:
        return self._assessments.get(session_id)

    def create_symptom_check(
        self, session_id: str, controller: CategoryAssessmentController
    ) -> None:
        """Store a new symptom battery session."""
        self._symptom_checks[session_id] = controller
        logger.info("Created symptom check session %s", session_id)

    def get_symptom_check(self, session_id: str) -> Optional[CategoryAssessmentController]:
        return self._symptom_checks.get(session_id)

    def record_results(self, session_id: str, results: AssessmentResults) -> None:
        """Keep the results of a finished sectional attempt."""
        self._completed.setdefault(session_id, []).append(results)

    def completed_results(self, session_id: str) -> list[AssessmentResults]:
        return list(self._completed.get(session_id, []))

    def remove_assessment(self, session_id: str) -> bool:
        """Forget a sectional assessment and its archived results."""
        self._completed.pop(session_id, None)
        return self._assessments.pop(session_id, None) is not None

    def remove_symptom_check(self, session_id: str) -> bool:
        return self._symptom_checks.pop(session_id, None) is not None

    def count_by_kind(self) -> dict[str, int]:
        return {
            "assessments": len(self._assessments),
            "symptom_checks": len(self._symptom_checks),
        }


@lru_cache
def get_storage() -> SessionStorage:
    """Get the singleton storage instance."""
    return SessionStorage()
