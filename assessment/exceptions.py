"""
Assessment engine exceptions.

GOVERNANCE:
- Bad answer values are rejected, never clamped
- Catalog defects fail at load time, not at scoring time
"""


class AssessmentError(Exception):
    """Base class for all assessment engine errors."""

    def __init__(self, message: str = "An assessment error occurred"):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InputRangeError(AssessmentError, ValueError):
    """An answer value (or answer index) is outside its valid domain."""


class CatalogShapeError(AssessmentError):
    """Catalog data violates a structural invariant."""


class UnknownQuestionError(AssessmentError, LookupError):
    """No question with the given id exists in the active catalog."""


class UnknownCategoryError(AssessmentError, LookupError):
    """No symptom category with the given key exists."""


class UnknownLanguageError(AssessmentError, LookupError):
    """The catalog has no variant for the requested language."""


class FlowStateError(AssessmentError):
    """An action is not allowed in the current flow state."""
