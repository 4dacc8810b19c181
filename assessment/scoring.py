"""
Scoring engine.

Pure functions over answers and catalog data; nothing here keeps state.

Halves round up (``floor(x + 0.5)``), never to even.
"""

import math
from collections.abc import Iterable, Mapping, Sequence

from assessment.answers import invert
from assessment.catalog.models import SCALE_MAX, SCALE_MIN, Condition, Thresholds
from assessment.results import (
    RESULT_DOMAINS,
    AssessmentResults,
    ScoreResult,
    SeverityLabel,
)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ─────────────────────────────────────────────────────────────
# Sectional assessment
# ─────────────────────────────────────────────────────────────
def domain_score(answers: Mapping[str, int], question_ids: Sequence[str]) -> int:
    """
    Rounded mean of a domain's answers.

    Unanswered questions count as 0.
    """
    if not question_ids:
        raise ValueError("A domain needs at least one question")
    total = sum(answers.get(qid, 0) for qid in question_ids)
    return round_half_up(total / len(question_ids))


def overall_score(anxiety: int, depression: int, stress: int, sleep: int, social: int) -> int:
    """Wellness score where distress domains are inverted before averaging."""
    return round_half_up(
        (invert(anxiety) + invert(depression) + invert(stress) + sleep + social) / 5
    )


def compute_assessment_results(
    answers: Mapping[str, int], domains: Mapping[str, Sequence[str]]
) -> AssessmentResults:
    """
    Score a sectional assessment.

    Args:
        answers: Stored answers keyed by question id
        domains: Question ids per domain, e.g. ``{"anxiety": [...], ...}``

    Returns:
        Domain scores plus the overall wellness score
    """
    scores = {domain: domain_score(answers, domains[domain]) for domain in RESULT_DOMAINS}
    return AssessmentResults(**scores, overall=overall_score(**scores))


# ─────────────────────────────────────────────────────────────
# Symptom battery
# ─────────────────────────────────────────────────────────────
def condition_score(weights: Mapping[int, float], answers: Sequence[int]) -> int:
    """Weighted sum over the weighted positions only."""
    return round_half_up(sum(weight * answers[index] for index, weight in weights.items()))


def severity_label(score: float, thresholds: Thresholds) -> SeverityLabel:
    if score >= thresholds.severe:
        return SeverityLabel.SEVERE
    if score >= thresholds.moderate:
        return SeverityLabel.MODERATE
    if score >= thresholds.mild:
        return SeverityLabel.MILD
    return SeverityLabel.UNLIKELY


def score_conditions(conditions: Iterable[Condition], answers: Sequence[int]) -> list[ScoreResult]:
    """Score every condition, keeping declaration order."""
    results = []
    for condition in conditions:
        score = condition_score(condition.weights, answers)
        results.append(
            ScoreResult(
                condition_name=condition.name,
                score=score,
                severity=severity_label(score, condition.thresholds),
            )
        )
    return results


def all_unlikely(results: Sequence[ScoreResult]) -> bool:
    """True when there is at least one result and none is above Unlikely."""
    return len(results) > 0 and all(r.severity is SeverityLabel.UNLIKELY for r in results)


def max_condition_score(weights: Mapping[int, float]) -> int:
    """Highest score any in-range answer vector can reach."""
    return round_half_up(
        sum(max(weight * SCALE_MIN, weight * SCALE_MAX) for weight in weights.values())
    )


def is_severe_reachable(condition: Condition) -> bool:
    return max_condition_score(condition.weights) >= condition.thresholds.severe
