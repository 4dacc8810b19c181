"""
Answer storage for one assessment session.

GOVERNANCE:
- Stored values are "higher = more of the measured thing"
- Absence means unanswered, never zero
"""

from collections.abc import Iterable, Iterator, Mapping

from assessment.catalog.models import SCALE_MAX, SCALE_MIN, Question
from assessment.exceptions import InputRangeError

INVERSION_BASE = SCALE_MIN + SCALE_MAX


def invert(value: int) -> int:
    """Flip a 1..10 value; applying it twice gives the value back."""
    return INVERSION_BASE - value


def validate_scale_value(value: int) -> int:
    # bool is an int subclass; a yes/no never counts as a scale value.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputRangeError(f"Scale answer must be an integer, got {value!r}")
    if not SCALE_MIN <= value <= SCALE_MAX:
        raise InputRangeError(
            f"Scale answer must be between {SCALE_MIN} and {SCALE_MAX}, got {value}"
        )
    return value


class AnswerStore(Mapping[str, int]):
    """Question id to stored numeric answer. Last write wins."""

    def __init__(self) -> None:
        self._answers: dict[str, int] = {}

    def __getitem__(self, question_id: str) -> int:
        return self._answers[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        return f"AnswerStore(answered={len(self._answers)})"

    def set_scale_answer(self, question_id: str, raw_value: int, inverted: bool = False) -> int:
        """
        Store a 1..10 answer.

        Args:
            question_id: Question being answered
            raw_value: Value the user picked
            inverted: Store ``11 - raw_value`` instead of the raw value

        Returns:
            The stored value

        Raises:
            InputRangeError: If raw_value is not an integer in 1..10
        """
        validate_scale_value(raw_value)
        stored = invert(raw_value) if inverted else raw_value
        self._answers[question_id] = stored
        return stored

    def set_boolean_answer(self, question_id: str, value: bool) -> int:
        """Store a yes/no answer as 1/0."""
        if not isinstance(value, bool):
            raise InputRangeError(f"Boolean answer must be true or false, got {value!r}")
        stored = 1 if value else 0
        self._answers[question_id] = stored
        return stored

    def is_complete(self, questions: Iterable[Question]) -> bool:
        return all(q.id in self._answers for q in questions)

    def as_dict(self) -> dict[str, int]:
        return dict(self._answers)

    def clear(self) -> None:
        self._answers.clear()
