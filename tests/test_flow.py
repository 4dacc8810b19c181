"""Tests for the sectional assessment flow."""

import pytest

from assessment import (
    EMERGENCY_OVERLAY,
    FlowStateError,
    InputRangeError,
    SectionFlowController,
    TransitionStatus,
    UnknownLanguageError,
    UnknownQuestionError,
)

ANXIETY, EMERGENCY, COMPLETION = 1, 6, 7


def _walk_to(flow, index, answer_section):
    while flow.current_section_index < index:
        answer_section(flow)
        assert flow.go_next() is TransitionStatus.ADVANCED


def test_starts_on_intro(flow):
    assert flow.current_section_index == 0
    assert flow.state == "intro"
    assert flow.progress == 0.0
    assert not flow.emergency_overlay


def test_intro_and_completion_are_always_complete(flow):
    for section in flow.sections:
        if section.kind.value in ("intro", "completion"):
            assert flow.is_section_complete(section)


def test_incomplete_section_blocks_next(flow):
    assert flow.go_next() is TransitionStatus.ADVANCED
    assert flow.current_section.id == "anxiety"

    flow.answer("anxiety_1", 3)
    flow.answer("anxiety_2", 5)

    assert flow.go_next() is TransitionStatus.INCOMPLETE
    assert flow.current_section_index == ANXIETY

    flow.answer("anxiety_3", 4)
    assert flow.go_next() is TransitionStatus.ADVANCED
    assert flow.current_section.id == "depression"


def test_previous_needs_no_answers_and_clamps_at_zero(flow, answer_section):
    _walk_to(flow, 3, answer_section)

    assert flow.go_previous() is TransitionStatus.MOVED_BACK
    assert flow.current_section_index == 2
    flow.go_previous()
    flow.go_previous()
    assert flow.go_previous() is TransitionStatus.AT_START
    assert flow.current_section_index == 0


def test_answers_are_inverted_from_catalog(flow):
    flow.answer("sleep_2", 2)
    flow.answer("sleep_1", 2)
    assert flow.answers["sleep_2"] == 9
    assert flow.answers["sleep_1"] == 2


def test_answer_validates_question_kind(flow):
    with pytest.raises(InputRangeError):
        flow.answer("emergency_1", 1)
    with pytest.raises(InputRangeError):
        flow.answer("anxiety_1", True)
    with pytest.raises(InputRangeError):
        flow.answer("anxiety_1", 11)
    with pytest.raises(UnknownQuestionError):
        flow.answer("anxiety_9", 3)


def test_positive_crisis_answer_shows_overlay(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", True)
    flow.answer("emergency_2", False)

    assert flow.crisis_detected
    assert flow.go_next() is TransitionStatus.EMERGENCY
    assert flow.state == EMERGENCY_OVERLAY
    assert flow.current_section_index == EMERGENCY

    # Stays on the overlay until the user acts on it.
    assert flow.go_next() is TransitionStatus.EMERGENCY
    assert flow.current_section_index == EMERGENCY


def test_second_crisis_indicator_alone_triggers_overlay(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", False)
    flow.answer("emergency_2", True)

    assert flow.go_next() is TransitionStatus.EMERGENCY


def test_acknowledging_overlay_advances_without_looping(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", True)
    flow.answer("emergency_2", True)
    flow.go_next()

    assert flow.acknowledge_emergency_and_continue() is TransitionStatus.ADVANCED
    assert flow.current_section_index == COMPLETION
    assert not flow.emergency_overlay


def test_return_to_assessment_keeps_section(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", True)
    flow.answer("emergency_2", False)
    flow.go_next()

    assert flow.return_to_assessment() is TransitionStatus.RETURNED
    assert flow.state == "emergency"
    assert flow.current_section_index == EMERGENCY

    # Changing the answer lets the user move on normally.
    flow.answer("emergency_1", False)
    assert not flow.crisis_detected
    assert flow.go_next() is TransitionStatus.ADVANCED


def test_previous_from_overlay_clears_it(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", True)
    flow.answer("emergency_2", False)
    flow.go_next()
    assert flow.state == EMERGENCY_OVERLAY

    assert flow.go_previous() is TransitionStatus.MOVED_BACK

    assert not flow.emergency_overlay
    assert flow.current_section_index == EMERGENCY - 1
    assert flow.current_section.id == "social"


def test_overlay_actions_without_overlay_are_no_ops(flow):
    assert flow.acknowledge_emergency_and_continue() is TransitionStatus.NO_OVERLAY
    assert flow.return_to_assessment() is TransitionStatus.NO_OVERLAY
    assert flow.current_section_index == 0


def test_negative_crisis_answers_advance(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    answer_section(flow)

    assert flow.go_next() is TransitionStatus.ADVANCED
    assert flow.current_section.id == "completion"
    assert flow.progress == 1.0


def test_next_on_completion_stays_put(flow, answer_section):
    _walk_to(flow, COMPLETION, answer_section)
    assert flow.go_next() is TransitionStatus.AT_END
    assert flow.current_section_index == COMPLETION


def test_finish_scores_and_resets(catalog, answer_section):
    received = []
    flow = SectionFlowController(catalog, "english", result_sink=received.append)
    flow.go_next()
    for qid, value in (("anxiety_1", 3), ("anxiety_2", 5), ("anxiety_3", 4)):
        flow.answer(qid, value)
    flow.go_next()
    _walk_to(flow, COMPLETION, answer_section)

    results = flow.finish()

    assert results.anxiety == 4
    # sleep_2 and social_2 are inverted: 5 is stored as 6, so (5 + 6 + 5) / 3
    assert results.sleep == 5
    assert results.social == 5
    # (7 + 6 + 6 + 5 + 5) / 5 = 5.8
    assert results.overall == 6
    assert received == [results]
    assert flow.current_section_index == 0
    assert len(flow.answers) == 0


def test_finish_away_from_completion_is_rejected(flow):
    with pytest.raises(FlowStateError):
        flow.finish()


def test_finish_is_rejected_while_overlay_shows(flow, answer_section):
    _walk_to(flow, EMERGENCY, answer_section)
    flow.answer("emergency_1", True)
    flow.answer("emergency_2", True)
    flow.go_next()

    with pytest.raises(FlowStateError):
        flow.finish()
    assert flow.emergency_overlay


def test_hindi_flow_uses_same_ids(catalog):
    flow = SectionFlowController(catalog, "hindi")
    flow.go_next()
    assert flow.current_section.id == "anxiety"
    assert flow.current_section.title == "चिंता मूल्यांकन"


def test_unknown_language_is_rejected(catalog):
    with pytest.raises(UnknownLanguageError):
        SectionFlowController(catalog, "french")
