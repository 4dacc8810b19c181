"""
Catalog provider.

Loads the question catalog once and validates every shape invariant the
scoring engine relies on, so a bad data file fails at startup instead of
producing wrong scores later.

GOVERNANCE:
- All languages share one structure; only text differs
- Condition weights are authored against question ids, never positions
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import ValidationError

from assessment.catalog.models import (
    DOMAIN_QUESTION_COUNT,
    SCALE_MAX,
    SCALE_MIN,
    Category,
    CategoryCatalogDocument,
    CrisisResource,
    LocalizedText,
    Question,
    ResourcesDocument,
    Section,
    SectionCatalogDocument,
    SectionKind,
)
from assessment.exceptions import (
    CatalogShapeError,
    UnknownCategoryError,
    UnknownLanguageError,
    UnknownQuestionError,
)
from assessment.results import RESULT_DOMAINS
from assessment.scoring import is_severe_reachable
from config import get_settings

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

SECTIONS_FILE = "sections.json"
CATEGORIES_FILE = "categories.json"
RESOURCES_FILE = "resources.json"


class CatalogProvider:
    """Immutable, validated question catalog for every supported language."""

    def __init__(
        self,
        sections: SectionCatalogDocument,
        categories: CategoryCatalogDocument,
        resources: ResourcesDocument,
    ):
        self._languages = sections.languages
        self._section_specs = sections.sections
        self._category_specs = categories.categories
        self._resources = resources

        self._validate()

        self._sections: dict[str, tuple[Section, ...]] = {
            lang: tuple(spec.localize(lang) for spec in self._section_specs)
            for lang in self._languages
        }
        self._categories: dict[str, dict[str, Category]] = {
            lang: {spec.key: spec.localize(lang) for spec in self._category_specs}
            for lang in self._languages
        }

        for category_key, condition_name in self.unreachable_severities():
            logger.warning(
                "Severe threshold unreachable for condition %s in category %s",
                condition_name,
                category_key,
            )

    @classmethod
    def from_directory(cls, directory: Path) -> "CatalogProvider":
        """
        Load the catalog from a data directory.

        Args:
            directory: Folder holding sections.json, categories.json, resources.json

        Raises:
            CatalogShapeError: If any file does not match the catalog shape
            FileNotFoundError: If a catalog file is missing
        """
        try:
            sections = SectionCatalogDocument.model_validate_json(
                (directory / SECTIONS_FILE).read_text(encoding="utf-8")
            )
            categories = CategoryCatalogDocument.model_validate_json(
                (directory / CATEGORIES_FILE).read_text(encoding="utf-8")
            )
            resources = ResourcesDocument.model_validate_json(
                (directory / RESOURCES_FILE).read_text(encoding="utf-8")
            )
        except ValidationError as e:
            raise CatalogShapeError(f"Invalid catalog data in {directory}: {e}") from e

        provider = cls(sections, categories, resources)
        logger.info(
            "Loaded catalog from %s: %d sections, %d categories, languages=%s",
            directory,
            len(provider._section_specs),
            len(provider._category_specs),
            ",".join(provider.languages),
        )
        return provider

    # ─────────────────────────────────────────────────────────
    # Validation
    # ─────────────────────────────────────────────────────────
    def _validate(self) -> None:
        if not self._languages:
            raise CatalogShapeError("Catalog declares no languages")
        if len(set(self._languages)) != len(self._languages):
            raise CatalogShapeError("Catalog declares a language twice")
        self._validate_sections()
        self._validate_categories()
        self._validate_resources()

    def _require_languages(self, text: LocalizedText, where: str) -> None:
        missing = [lang for lang in self._languages if not text.get(lang)]
        if missing:
            raise CatalogShapeError(f"{where}: missing text for {', '.join(missing)}")

    def _validate_sections(self) -> None:
        specs = self._section_specs
        if len(specs) < 2:
            raise CatalogShapeError("Sectional assessment needs at least an intro and a completion")
        if specs[0].kind is not SectionKind.INTRO:
            raise CatalogShapeError(f"First section must be an intro, got {specs[0].kind.value}")
        if specs[-1].kind is not SectionKind.COMPLETION:
            raise CatalogShapeError(f"Last section must be a completion, got {specs[-1].kind.value}")
        if sum(1 for s in specs if s.kind is SectionKind.COMPLETION) != 1:
            raise CatalogShapeError("Exactly one completion section is allowed")

        section_ids: set[str] = set()
        question_ids: set[str] = set()
        for spec in specs:
            if spec.id in section_ids:
                raise CatalogShapeError(f"Duplicate section id: {spec.id}")
            section_ids.add(spec.id)
            self._require_languages(spec.title, f"section {spec.id} title")
            for question in spec.questions:
                # Answers are keyed by question id across the whole session.
                if question.id in question_ids:
                    raise CatalogShapeError(f"Duplicate question id: {question.id}")
                question_ids.add(question.id)
                self._require_languages(question.text, f"question {question.id}")

        domains = self.domain_question_ids()
        missing = [d for d in RESULT_DOMAINS if d not in domains]
        if missing:
            raise CatalogShapeError(f"Missing domain sections: {', '.join(missing)}")
        for domain in RESULT_DOMAINS:
            if len(domains[domain]) != DOMAIN_QUESTION_COUNT:
                raise CatalogShapeError(
                    f"Domain {domain}: expected {DOMAIN_QUESTION_COUNT} questions, "
                    f"got {len(domains[domain])}"
                )

    def _validate_categories(self) -> None:
        keys: set[str] = set()
        for spec in self._category_specs:
            if spec.key in keys:
                raise CatalogShapeError(f"Duplicate category key: {spec.key}")
            keys.add(spec.key)
            self._require_languages(spec.label, f"category {spec.key} label")
            for question in spec.questions:
                self._require_languages(question.text, f"category {spec.key} question {question.id}")

    def _validate_resources(self) -> None:
        expected = set(range(SCALE_MIN, SCALE_MAX + 1))
        for lang in self._languages:
            labels = self._resources.scale_labels.get(lang)
            if labels is None or set(labels) != expected:
                raise CatalogShapeError(f"Scale labels for {lang} must cover {SCALE_MIN}..{SCALE_MAX}")
            if lang not in self._resources.crisis_resources:
                raise CatalogShapeError(f"No crisis resources for {lang}")

    # ─────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────
    @property
    def languages(self) -> tuple[str, ...]:
        return self._languages

    def _check_language(self, language: str) -> None:
        if language not in self._languages:
            raise UnknownLanguageError(f"Unsupported language: {language}")

    def sections(self, language: str) -> tuple[Section, ...]:
        self._check_language(language)
        return self._sections[language]

    def section_question(self, question_id: str, language: str) -> Question:
        """Find a sectional question by id."""
        for section in self.sections(language):
            for question in section.questions:
                if question.id == question_id:
                    return question
        raise UnknownQuestionError(f"Unknown question: {question_id}")

    def domain_question_ids(self) -> dict[str, tuple[str, ...]]:
        """Question ids of every plain question section, keyed by section id."""
        return {
            spec.id: tuple(q.id for q in spec.questions)
            for spec in self._section_specs
            if spec.kind is SectionKind.QUESTIONS
        }

    def crisis_question_ids(self) -> tuple[str, ...]:
        return tuple(
            q.id
            for spec in self._section_specs
            if spec.kind is SectionKind.EMERGENCY
            for q in spec.questions
        )

    def category_keys(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self._category_specs)

    def categories(self, language: str) -> tuple[Category, ...]:
        self._check_language(language)
        return tuple(self._categories[language].values())

    def category(self, key: str, language: str) -> Category:
        self._check_language(language)
        try:
            return self._categories[language][key]
        except KeyError:
            raise UnknownCategoryError(f"Unknown category: {key}") from None

    def scale_labels(self, language: str) -> dict[int, str]:
        self._check_language(language)
        return dict(self._resources.scale_labels[language])

    def crisis_resources(self, language: str) -> tuple[CrisisResource, ...]:
        self._check_language(language)
        return self._resources.crisis_resources[language]

    def crisis_message(self, language: str) -> str:
        self._check_language(language)
        return self._resources.crisis_message.get(language, "")

    def unreachable_severities(self) -> list[tuple[str, str]]:
        """(category key, condition name) pairs whose severe band no answers can reach."""
        language = self._languages[0]
        return [
            (category.key, condition.name)
            for category in self._categories[language].values()
            for condition in category.conditions
            if not is_severe_reachable(condition)
        ]


@lru_cache
def get_catalog() -> CatalogProvider:
    """Get the cached catalog loaded from the configured directory."""
    settings = get_settings()
    directory = Path(settings.catalog_dir) if settings.catalog_dir else DATA_DIR
    return CatalogProvider.from_directory(directory)
