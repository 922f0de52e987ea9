"""
Template Catalogs

Candidate sources for the category and tag strategies.
"""

from typing import List

from suggestion_engine.domain.suggestions.interfaces import CatalogEntry, TemplateCatalog
from suggestion_engine.domain.suggestions.template_library import filter_templates


CATEGORY_BASE_SCORE = 0.85
TAG_BASE_SCORE = 0.78
SCORE_STEP = 0.03


def _descending_scores(base: float, count: int) -> List[float]:
    return [round(base - SCORE_STEP * rank, 2) for rank in range(count)]


class PlaceholderTemplateCatalog:
    """
    Synthesizes ``{label}-template-N`` ids.

    Stands in for a real catalog service; ids are unique per label by
    construction.
    """

    def by_category(self, category: str, limit: int) -> List[CatalogEntry]:
        return [
            CatalogEntry(f"{category}-template-{n}", score)
            for n, score in enumerate(_descending_scores(CATEGORY_BASE_SCORE, limit), start=1)
        ]

    def by_tag(self, tag: str, limit: int) -> List[CatalogEntry]:
        return [
            CatalogEntry(f"{tag}-template-{n}", score)
            for n, score in enumerate(_descending_scores(TAG_BASE_SCORE, limit), start=1)
        ]


class ComponentTemplateCatalog:
    """Looks candidates up in the built-in component template library."""

    def by_category(self, category: str, limit: int) -> List[CatalogEntry]:
        matches = filter_templates(category=category)[:limit]
        scores = _descending_scores(CATEGORY_BASE_SCORE, len(matches))
        return [CatalogEntry(t.id, score) for t, score in zip(matches, scores)]

    def by_tag(self, tag: str, limit: int) -> List[CatalogEntry]:
        matches = filter_templates(tags=[tag])[:limit]
        scores = _descending_scores(TAG_BASE_SCORE, len(matches))
        return [CatalogEntry(t.id, score) for t, score in zip(matches, scores)]


def build_catalog(kind: str) -> TemplateCatalog:
    """Catalog implementation for the configured ``template_catalog`` value."""
    if kind == "library":
        return ComponentTemplateCatalog()
    return PlaceholderTemplateCatalog()
