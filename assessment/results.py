"""Result objects emitted by the scoring engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

# Sectional domains reported in AssessmentResults. Anxiety, depression and
# stress measure distress; sleep and social measure wellbeing.
NEGATIVE_DOMAINS = ("anxiety", "depression", "stress")
POSITIVE_DOMAINS = ("sleep", "social")
RESULT_DOMAINS = NEGATIVE_DOMAINS + POSITIVE_DOMAINS


class SeverityLabel(str, Enum):
    """Severity classification for a scored condition."""

    UNLIKELY = "unlikely"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ScoreResult(BaseModel):
    """Weighted score and severity for one condition."""

    model_config = ConfigDict(frozen=True)

    condition_name: str
    score: int
    severity: SeverityLabel


class AssessmentResults(BaseModel):
    """Domain scores of a finished sectional assessment.

    Higher ``overall`` always means better wellbeing.
    """

    model_config = ConfigDict(frozen=True)

    anxiety: int
    depression: int
    stress: int
    sleep: int
    social: int
    overall: int
