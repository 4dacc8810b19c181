"""
Sectional (mental-health) assessment routes.

GOVERNANCE:
- Navigation outcomes are reported as status values, not errors
- Crisis resources are returned whenever crisis answers are positive
"""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from api.models.assessment import (
    AnswerRequest,
    AssessmentState,
    CreateAssessmentRequest,
    CreateAssessmentResponse,
    FinishResponse,
    TransitionResponse,
)
from assessment import AssessmentResults, SectionFlowController, TransitionStatus
from assessment.catalog.provider import get_catalog
from config import get_settings
from storage import get_storage

router = APIRouter(prefix="/v1/assessments", tags=["assessments"])


def _get_flow(session_id: str) -> SectionFlowController:
    flow = get_storage().get_assessment(session_id)
    if flow is None:
        raise HTTPException(status_code=404, detail="Assessment session not found")
    return flow


def _transition(session_id: str, flow: SectionFlowController, status: TransitionStatus):
    return TransitionResponse(
        status=status,
        assessment=AssessmentState.build(session_id, flow, get_catalog()),
    )


@router.post("", response_model=CreateAssessmentResponse)
def create_assessment(request: CreateAssessmentRequest):
    """Start a sectional assessment on its intro section."""
    storage = get_storage()
    catalog = get_catalog()
    language = request.language or get_settings().default_language
    session_id = str(uuid.uuid4())

    def archive(results: AssessmentResults) -> None:
        storage.record_results(session_id, results)

    flow = SectionFlowController(catalog, language, result_sink=archive)
    storage.create_assessment(session_id, flow)

    return CreateAssessmentResponse(
        session_id=session_id,
        created_at=datetime.now(timezone.utc),
        assessment=AssessmentState.build(session_id, flow, catalog),
    )


@router.get("/{session_id}", response_model=AssessmentState)
def get_assessment(session_id: str):
    flow = _get_flow(session_id)
    return AssessmentState.build(session_id, flow, get_catalog())


@router.post("/{session_id}/answers", response_model=AssessmentState)
def submit_answer(session_id: str, request: AnswerRequest):
    """Record one answer. Inversion is applied from the catalog."""
    flow = _get_flow(session_id)
    flow.answer(request.question_id, request.value)
    return AssessmentState.build(session_id, flow, get_catalog())


@router.post("/{session_id}/next", response_model=TransitionResponse)
def go_next(session_id: str):
    flow = _get_flow(session_id)
    return _transition(session_id, flow, flow.go_next())


@router.post("/{session_id}/previous", response_model=TransitionResponse)
def go_previous(session_id: str):
    flow = _get_flow(session_id)
    return _transition(session_id, flow, flow.go_previous())


@router.post("/{session_id}/emergency/continue", response_model=TransitionResponse)
def acknowledge_emergency(session_id: str):
    """Leave the crisis overlay and move on past the emergency section."""
    flow = _get_flow(session_id)
    return _transition(session_id, flow, flow.acknowledge_emergency_and_continue())


@router.post("/{session_id}/emergency/return", response_model=TransitionResponse)
def return_to_assessment(session_id: str):
    flow = _get_flow(session_id)
    return _transition(session_id, flow, flow.return_to_assessment())


@router.post("/{session_id}/finish", response_model=FinishResponse)
def finish_assessment(session_id: str):
    """
    Score the attempt from the completion section.

    The session restarts at the intro with no answers.
    """
    flow = _get_flow(session_id)
    results = flow.finish()
    return FinishResponse(
        session_id=session_id,
        results=results,
        assessment=AssessmentState.build(session_id, flow, get_catalog()),
    )


@router.get("/{session_id}/results", response_model=list[AssessmentResults])
def get_completed_results(session_id: str):
    """Results of every finished attempt in this session."""
    _get_flow(session_id)
    return get_storage().completed_results(session_id)


@router.delete("/{session_id}")
def delete_assessment(session_id: str):
    if not get_storage().remove_assessment(session_id):
        raise HTTPException(status_code=404, detail="Assessment session not found")
    return {"deleted": session_id}
