"""
Catalog models.

Definitions (``*Spec``) carry every language's text keyed by language tag and
are what the JSON data files deserialize into. ``localize`` turns them into the
plain per-language objects the controllers work with.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Condition weights are resolved to positional indices against this arity.
CATEGORY_QUESTION_COUNT = 10

DOMAIN_QUESTION_COUNT = 3

SCALE_MIN = 1
SCALE_MAX = 10

LocalizedText = dict[str, str]


class QuestionKind(str, Enum):
    """How a question is answered."""

    SCALE = "scale"  # 1..10 intensity
    BOOLEAN = "boolean"  # yes / no, stored as 1 / 0


class SectionKind(str, Enum):
    """Role of a section in the sectional flow."""

    INTRO = "intro"
    QUESTIONS = "questions"
    EMERGENCY = "emergency"
    COMPLETION = "completion"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ─────────────────────────────────────────────────────────────
# Per-language runtime objects
# ─────────────────────────────────────────────────────────────
class Question(_Frozen):
    """A single question in one language."""

    id: str
    text: str
    kind: QuestionKind = QuestionKind.SCALE
    inverted: bool = False


class Section(_Frozen):
    """An ordered step of the sectional assessment."""

    id: str
    kind: SectionKind
    title: str
    description: str = ""
    questions: tuple[Question, ...] = ()

    @property
    def is_trivially_complete(self) -> bool:
        return self.kind in (SectionKind.INTRO, SectionKind.COMPLETION)


class Thresholds(_Frozen):
    """Lower bounds of each severity band."""

    unlikely: float = 0
    mild: float
    moderate: float
    severe: float

    @model_validator(mode="after")
    def _check_order(self) -> "Thresholds":
        if self.unlikely != 0:
            raise ValueError("unlikely threshold must be 0")
        if not (self.unlikely <= self.mild < self.moderate < self.severe):
            raise ValueError(
                "thresholds must satisfy 0 = unlikely <= mild < moderate < severe, "
                f"got {self.mild}/{self.moderate}/{self.severe}"
            )
        return self


class Condition(_Frozen):
    """A candidate condition with weights resolved to answer positions."""

    name: str
    label: str
    weights: dict[int, float]
    thresholds: Thresholds


class Category(_Frozen):
    """A body-system grouping of exactly ten scale questions."""

    key: str
    label: str
    questions: tuple[Question, ...]
    conditions: tuple[Condition, ...] = ()


class CrisisResource(_Frozen):
    """A crisis contact shown when the emergency signal fires."""

    label: str
    contact: str


# ─────────────────────────────────────────────────────────────
# Multi-language definitions (data file shape)
# ─────────────────────────────────────────────────────────────
def _pick(text: LocalizedText, language: str) -> str:
    return text[language]


def _unique(ids: list[str], what: str) -> None:
    seen: set[str] = set()
    for item in ids:
        if item in seen:
            raise ValueError(f"duplicate {what} id: {item}")
        seen.add(item)


class QuestionSpec(_Frozen):
    id: str = Field(..., min_length=1)
    kind: QuestionKind = QuestionKind.SCALE
    inverted: bool = False
    text: LocalizedText

    @model_validator(mode="after")
    def _check_inversion(self) -> "QuestionSpec":
        if self.inverted and self.kind is not QuestionKind.SCALE:
            raise ValueError(f"question {self.id}: only scale questions can be inverted")
        return self

    def localize(self, language: str) -> Question:
        return Question(
            id=self.id,
            text=_pick(self.text, language),
            kind=self.kind,
            inverted=self.inverted,
        )


class SectionSpec(_Frozen):
    id: str = Field(..., min_length=1)
    kind: SectionKind
    title: LocalizedText
    description: LocalizedText = Field(default_factory=dict)
    questions: tuple[QuestionSpec, ...] = ()

    @model_validator(mode="after")
    def _check_questions(self) -> "SectionSpec":
        if self.kind in (SectionKind.INTRO, SectionKind.COMPLETION):
            if self.questions:
                raise ValueError(f"section {self.id}: {self.kind.value} sections take no questions")
        elif not self.questions:
            raise ValueError(f"section {self.id}: {self.kind.value} sections need questions")
        if self.kind is SectionKind.EMERGENCY:
            if any(q.kind is not QuestionKind.BOOLEAN for q in self.questions):
                raise ValueError(f"section {self.id}: crisis indicators must be boolean")
        _unique([q.id for q in self.questions], "question")
        return self

    def localize(self, language: str) -> Section:
        return Section(
            id=self.id,
            kind=self.kind,
            title=_pick(self.title, language),
            description=self.description.get(language, ""),
            questions=tuple(q.localize(language) for q in self.questions),
        )


class ConditionSpec(_Frozen):
    name: str = Field(..., min_length=1)
    label: LocalizedText = Field(default_factory=dict)
    # Keyed by question id, never by position.
    weights: dict[str, float]
    thresholds: Thresholds


class CategorySpec(_Frozen):
    key: str = Field(..., min_length=1)
    label: LocalizedText
    questions: tuple[QuestionSpec, ...]
    conditions: tuple[ConditionSpec, ...] = ()

    @model_validator(mode="after")
    def _check_shape(self) -> "CategorySpec":
        if len(self.questions) != CATEGORY_QUESTION_COUNT:
            raise ValueError(
                f"category {self.key}: expected {CATEGORY_QUESTION_COUNT} questions, "
                f"got {len(self.questions)}"
            )
        for q in self.questions:
            if q.kind is not QuestionKind.SCALE:
                raise ValueError(f"category {self.key}: question {q.id} must be a scale question")
        _unique([q.id for q in self.questions], "question")
        _unique([c.name for c in self.conditions], "condition")

        known = {q.id for q in self.questions}
        for condition in self.conditions:
            unknown = sorted(set(condition.weights) - known)
            if unknown:
                raise ValueError(
                    f"category {self.key}: condition {condition.name} weights "
                    f"unknown questions {unknown}"
                )
        return self

    def weight_vector(self, condition: ConditionSpec) -> dict[int, float]:
        """Resolve a condition's question-id weights to answer positions."""
        position = {q.id: index for index, q in enumerate(self.questions)}
        return {position[qid]: weight for qid, weight in condition.weights.items()}

    def localize(self, language: str) -> Category:
        return Category(
            key=self.key,
            label=_pick(self.label, language),
            questions=tuple(q.localize(language) for q in self.questions),
            conditions=tuple(
                Condition(
                    name=c.name,
                    label=c.label.get(language, c.name),
                    weights=self.weight_vector(c),
                    thresholds=c.thresholds,
                )
                for c in self.conditions
            ),
        )


class SectionCatalogDocument(_Frozen):
    """Shape of ``sections.json``."""

    languages: tuple[str, ...]
    sections: tuple[SectionSpec, ...]


class CategoryCatalogDocument(_Frozen):
    """Shape of ``categories.json``."""

    categories: tuple[CategorySpec, ...]


class ResourcesDocument(_Frozen):
    """Shape of ``resources.json``: scale labels and crisis contacts."""

    scale_labels: dict[str, dict[int, str]]
    crisis_resources: dict[str, tuple[CrisisResource, ...]]
    crisis_message: LocalizedText = Field(default_factory=dict)
