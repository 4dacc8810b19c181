"""Tests for the symptom battery controller."""

import pytest

from assessment import (
    CategoryAssessmentController,
    FlowStateError,
    InputRangeError,
    SeverityLabel,
    UnknownCategoryError,
    UnknownQuestionError,
)


def test_select_category_starts_from_default_answers(symptom_check):
    category = symptom_check.select_category("SKIN")

    assert category.key == "SKIN"
    assert symptom_check.answers == (1,) * 10
    assert symptom_check.results == []


def test_default_answer_comes_from_settings(catalog, monkeypatch):
    from config import get_settings

    monkeypatch.setenv("SELFCHECK_DEFAULT_ANSWER_VALUE", "5")
    get_settings.cache_clear()
    try:
        controller = CategoryAssessmentController(catalog, "english")
        assert controller.answers == (5,) * 10
    finally:
        get_settings.cache_clear()


def test_default_answer_must_be_on_the_scale(catalog):
    with pytest.raises(InputRangeError):
        CategoryAssessmentController(catalog, "english", default_answer=0)


def test_acne_scores_mild_at_midpoint(symptom_check):
    symptom_check.select_category("SKIN")
    for index in range(10):
        symptom_check.set_answer(index, 5)

    results = symptom_check.compute_results()

    acne = results[0]
    assert acne.condition_name == "Acne"
    assert acne.score == 30
    assert acne.severity is SeverityLabel.MILD


def test_results_follow_declaration_order(symptom_check):
    symptom_check.select_category("SKIN")
    symptom_check.answer("skin_scaling", 10)

    results = symptom_check.compute_results()

    assert [r.condition_name for r in results] == ["Acne", "Eczema", "Psoriasis", "Hives"]
    assert symptom_check.results == results


def test_minimum_answers_are_all_unlikely(symptom_check):
    symptom_check.select_category("CHEST")

    symptom_check.compute_results()

    assert symptom_check.all_unlikely()


def test_all_unlikely_is_false_before_scoring(symptom_check):
    symptom_check.select_category("CHEST")
    assert not symptom_check.all_unlikely()


def test_severe_when_every_answer_is_maximum(symptom_check):
    symptom_check.select_category("HEAD")
    for index in range(10):
        symptom_check.set_answer(index, 10)

    results = symptom_check.compute_results()

    assert all(r.severity is SeverityLabel.SEVERE for r in results)
    assert not symptom_check.all_unlikely()


@pytest.mark.parametrize("index", [-1, 10, True, "3"])
def test_set_answer_rejects_bad_index(symptom_check, index):
    symptom_check.select_category("SKIN")
    with pytest.raises(InputRangeError):
        symptom_check.set_answer(index, 5)


@pytest.mark.parametrize("value", [0, 11, 2.5])
def test_set_answer_rejects_bad_value(symptom_check, value):
    symptom_check.select_category("SKIN")
    with pytest.raises(InputRangeError):
        symptom_check.set_answer(0, value)
    assert symptom_check.answers[0] == 1


def test_changing_category_discards_answers_and_results(symptom_check):
    symptom_check.select_category("SKIN")
    for index in range(10):
        symptom_check.set_answer(index, 10)
    symptom_check.compute_results()

    symptom_check.select_category("STOMACH")

    assert symptom_check.answers == (1,) * 10
    assert symptom_check.results == []
    results = symptom_check.compute_results()
    assert all(r.severity is SeverityLabel.UNLIKELY for r in results)


def test_answer_by_unknown_id(symptom_check):
    symptom_check.select_category("SKIN")
    with pytest.raises(UnknownQuestionError):
        symptom_check.answer("chest_pain", 4)


def test_scoring_needs_a_category(symptom_check):
    with pytest.raises(FlowStateError):
        symptom_check.compute_results()


def test_unknown_category(symptom_check):
    with pytest.raises(UnknownCategoryError):
        symptom_check.select_category("ELBOW")
