"""
Symptom battery routes.

GOVERNANCE:
- Scores are listed in catalog order, never ranked
- The "consult a doctor" decision stays with the caller (all_unlikely flag)
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException

from api.models.symptoms import (
    CategorySummary,
    CreateSymptomCheckRequest,
    CreateSymptomCheckResponse,
    SelectCategoryRequest,
    SetAnswerRequest,
    SymptomCheckState,
)
from assessment import CategoryAssessmentController
from assessment.catalog.provider import get_catalog
from config import get_settings
from storage import get_storage

router = APIRouter(prefix="/v1/symptoms", tags=["symptoms"])


def _get_check(session_id: str) -> CategoryAssessmentController:
    controller = get_storage().get_symptom_check(session_id)
    if controller is None:
        raise HTTPException(status_code=404, detail="Symptom check session not found")
    return controller


@router.get("/categories", response_model=list[CategorySummary])
def list_categories(language: Optional[str] = None):
    catalog = get_catalog()
    language = language or get_settings().default_language
    return [CategorySummary.from_category(c) for c in catalog.categories(language)]


@router.post("", response_model=CreateSymptomCheckResponse)
def create_symptom_check(request: CreateSymptomCheckRequest):
    """Start a symptom check, selecting a category when one is given."""
    language = request.language or get_settings().default_language
    controller = CategoryAssessmentController(get_catalog(), language)
    if request.category:
        controller.select_category(request.category)

    session_id = str(uuid.uuid4())
    get_storage().create_symptom_check(session_id, controller)

    return CreateSymptomCheckResponse(
        session_id=session_id,
        created_at=datetime.now(timezone.utc),
        symptom_check=SymptomCheckState.build(session_id, controller),
    )


@router.get("/{session_id}", response_model=SymptomCheckState)
def get_symptom_check(session_id: str):
    return SymptomCheckState.build(session_id, _get_check(session_id))


@router.post("/{session_id}/category", response_model=SymptomCheckState)
def select_category(session_id: str, request: SelectCategoryRequest):
    """Switch category. Answers reset and earlier results are dropped."""
    controller = _get_check(session_id)
    controller.select_category(request.category)
    return SymptomCheckState.build(session_id, controller)


@router.put("/{session_id}/answers/{index}", response_model=SymptomCheckState)
def set_answer(session_id: str, index: int, request: SetAnswerRequest):
    controller = _get_check(session_id)
    controller.set_answer(index, request.value)
    return SymptomCheckState.build(session_id, controller)


@router.post("/{session_id}/results", response_model=SymptomCheckState)
def compute_results(session_id: str):
    """Score every condition of the selected category."""
    controller = _get_check(session_id)
    controller.compute_results()
    return SymptomCheckState.build(session_id, controller)


@router.delete("/{session_id}")
def delete_symptom_check(session_id: str):
    if not get_storage().remove_symptom_check(session_id):
        raise HTTPException(status_code=404, detail="Symptom check session not found")
    return {"deleted": session_id}
