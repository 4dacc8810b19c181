"""
Sectional assessment flow.

Walks a user through the ordered sections of the mental-health assessment.

GOVERNANCE:
- A section is left only once every question in it is answered
- Positive crisis answers always surface the emergency overlay first
- Results are emitted only by an explicit finish on the completion section
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Optional

from assessment.answers import AnswerStore
from assessment.catalog.models import QuestionKind, Section, SectionKind
from assessment.catalog.provider import CatalogProvider
from assessment.exceptions import FlowStateError
from assessment.results import AssessmentResults
from assessment.scoring import compute_assessment_results

logger = logging.getLogger(__name__)

EMERGENCY_OVERLAY = "emergency_overlay"

ResultSink = Callable[[AssessmentResults], None]


class TransitionStatus(str, Enum):
    """Outcome of a navigation request."""

    ADVANCED = "advanced"
    MOVED_BACK = "moved_back"
    INCOMPLETE = "incomplete"  # Current section still has unanswered questions
    EMERGENCY = "emergency"  # Emergency overlay is showing
    RETURNED = "returned"  # Overlay dismissed, still on the emergency section
    AT_START = "at_start"
    AT_END = "at_end"
    NO_OVERLAY = "no_overlay"


class SectionFlowController:
    """
    State machine over the catalog's sections for one user attempt.

    Navigation never raises for expected situations (incomplete section,
    crisis answers); it reports them through ``TransitionStatus``.
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        language: str,
        result_sink: Optional[ResultSink] = None,
    ):
        self._catalog = catalog
        self._sections = catalog.sections(language)
        self._domains = catalog.domain_question_ids()
        self._crisis_ids = catalog.crisis_question_ids()
        self._result_sink = result_sink
        self.language = language
        self.answers = AnswerStore()
        self._index = 0
        self._overlay = False

    # ─────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────
    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def current_section_index(self) -> int:
        return self._index

    @property
    def current_section(self) -> Section:
        return self._sections[self._index]

    @property
    def emergency_overlay(self) -> bool:
        return self._overlay

    @property
    def state(self) -> str:
        """Id of the section on screen, or the overlay pseudo-state."""
        return EMERGENCY_OVERLAY if self._overlay else self.current_section.id

    @property
    def progress(self) -> float:
        """Fraction of the flow passed, 0.0 on the intro and 1.0 on completion."""
        return self._index / (len(self._sections) - 1)

    @property
    def crisis_detected(self) -> bool:
        """True when any crisis indicator was answered yes."""
        return any(self.answers.get(qid) == 1 for qid in self._crisis_ids)

    def is_section_complete(self, section: Section) -> bool:
        if section.is_trivially_complete:
            return True
        return self.answers.is_complete(section.questions)

    def is_current_section_complete(self) -> bool:
        return self.is_section_complete(self.current_section)

    # ─────────────────────────────────────────────────────────
    # Answers
    # ─────────────────────────────────────────────────────────
    def answer(self, question_id: str, value: int | bool) -> int:
        """
        Record an answer using the question's kind and inversion.

        Args:
            question_id: Any question of the sectional catalog
            value: 1..10 for scale questions, True/False for boolean ones

        Returns:
            The stored value

        Raises:
            UnknownQuestionError: If the id is not in the catalog
            InputRangeError: If the value does not fit the question kind
        """
        question = self._catalog.section_question(question_id, self.language)
        if question.kind is QuestionKind.BOOLEAN:
            return self.answers.set_boolean_answer(question.id, value)
        return self.answers.set_scale_answer(question.id, value, question.inverted)

    # ─────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────
    def go_next(self) -> TransitionStatus:
        if self._overlay:
            return TransitionStatus.EMERGENCY

        section = self.current_section
        if not self.is_section_complete(section):
            return TransitionStatus.INCOMPLETE

        if section.kind is SectionKind.EMERGENCY and self._section_in_crisis(section):
            self._overlay = True
            logger.warning("Crisis indicators positive in section %s, showing overlay", section.id)
            return TransitionStatus.EMERGENCY

        return self._advance()

    def go_previous(self) -> TransitionStatus:
        self._overlay = False
        if self._index == 0:
            return TransitionStatus.AT_START
        self._index -= 1
        return TransitionStatus.MOVED_BACK

    def acknowledge_emergency_and_continue(self) -> TransitionStatus:
        """Leave the overlay and advance without re-checking crisis answers."""
        if not self._overlay:
            return TransitionStatus.NO_OVERLAY
        self._overlay = False
        logger.info("Emergency overlay acknowledged on section %s", self.current_section.id)
        return self._advance()

    def return_to_assessment(self) -> TransitionStatus:
        if not self._overlay:
            return TransitionStatus.NO_OVERLAY
        self._overlay = False
        return TransitionStatus.RETURNED

    def finish(self) -> AssessmentResults:
        """
        Score the attempt, hand the results to the sink and start over.

        Raises:
            FlowStateError: If the flow is not on the completion section
        """
        if self.current_section.kind is not SectionKind.COMPLETION:
            raise FlowStateError(
                f"Assessment can only be finished on the completion section, "
                f"currently at {self.state}"
            )

        results = compute_assessment_results(self.answers, self._domains)
        if self._result_sink is not None:
            self._result_sink(results)
        logger.info("Sectional assessment finished (%s)", self.language)

        self.reset()
        return results

    def reset(self) -> None:
        self.answers.clear()
        self._index = 0
        self._overlay = False

    def _advance(self) -> TransitionStatus:
        if self._index >= len(self._sections) - 1:
            return TransitionStatus.AT_END
        self._index += 1
        return TransitionStatus.ADVANCED

    def _section_in_crisis(self, section: Section) -> bool:
        return any(self.answers.get(q.id) == 1 for q in section.questions)
