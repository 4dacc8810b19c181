"""
Sectional assessment API models.

GOVERNANCE:
- Crisis resources travel with every state while crisis answers are positive
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, StrictBool, StrictInt

from assessment import AssessmentResults, SectionFlowController, TransitionStatus
from assessment.catalog import CrisisResource, Section
from assessment.catalog.provider import CatalogProvider


class CreateAssessmentRequest(BaseModel):
    """Request to start a sectional assessment."""

    language: Optional[str] = None


class AnswerRequest(BaseModel):
    """One answer: 1..10 for scale questions, true/false for yes/no questions."""

    question_id: str
    value: Union[StrictBool, StrictInt]


class CrisisInfo(BaseModel):
    """Crisis contacts to show prominently."""

    message: str
    resources: list[CrisisResource]


class AssessmentState(BaseModel):
    """Where a sectional assessment currently stands."""

    session_id: str
    language: str
    state: str
    section_index: int
    section_count: int
    progress: float
    section: Section
    section_complete: bool
    emergency_overlay: bool
    crisis_detected: bool
    crisis: Optional[CrisisInfo] = None
    scale_labels: dict[int, str]
    answered: list[str]

    @classmethod
    def build(
        cls, session_id: str, flow: SectionFlowController, catalog: CatalogProvider
    ) -> "AssessmentState":
        crisis = None
        if flow.crisis_detected:
            crisis = CrisisInfo(
                message=catalog.crisis_message(flow.language),
                resources=list(catalog.crisis_resources(flow.language)),
            )
        return cls(
            session_id=session_id,
            language=flow.language,
            state=flow.state,
            section_index=flow.current_section_index,
            section_count=len(flow.sections),
            progress=flow.progress,
            section=flow.current_section,
            section_complete=flow.is_current_section_complete(),
            emergency_overlay=flow.emergency_overlay,
            crisis_detected=flow.crisis_detected,
            crisis=crisis,
            scale_labels=catalog.scale_labels(flow.language),
            answered=sorted(flow.answers),
        )


class CreateAssessmentResponse(BaseModel):
    """Response with the new session id and its first section."""

    session_id: str
    created_at: datetime
    assessment: AssessmentState


class TransitionResponse(BaseModel):
    """Outcome of a navigation action plus the resulting state."""

    status: TransitionStatus
    assessment: AssessmentState


class FinishResponse(BaseModel):
    """Scores of a finished attempt. The session restarts at the intro."""

    session_id: str
    results: AssessmentResults
    assessment: AssessmentState
