"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from assessment import CategoryAssessmentController, SectionFlowController
from assessment.catalog import QuestionKind
from assessment.catalog.provider import get_catalog
from storage import get_storage


@pytest.fixture
def catalog():
    """The packaged bilingual catalog."""
    return get_catalog()


@pytest.fixture
def flow(catalog):
    """A fresh English sectional assessment."""
    return SectionFlowController(catalog, "english")


@pytest.fixture
def symptom_check(catalog):
    """A fresh English symptom check with the minimum default answer."""
    return CategoryAssessmentController(catalog, "english", default_answer=1)


@pytest.fixture
def client():
    """API client with empty session storage."""
    from api.main import app

    get_storage.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    get_storage.cache_clear()


@pytest.fixture
def answer_section():
    """Answer every question of the current section: scale with one value, yes/no with no."""

    def _answer(flow: SectionFlowController, value: int = 5) -> None:
        for question in flow.current_section.questions:
            if question.kind is QuestionKind.BOOLEAN:
                flow.answer(question.id, False)
            else:
                flow.answer(question.id, value)

    return _answer
