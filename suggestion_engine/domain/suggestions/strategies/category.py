"""
Category Strategy

Suggests templates from the user's two favorite categories.
"""

from typing import List

from suggestion_engine.domain.suggestions.interfaces import (
    BaseSuggestionStrategy,
    SuggestionContext,
    TemplateCatalog,
    TemplateSuggestion,
)


class CategoryStrategy(BaseSuggestionStrategy):
    """Two catalog candidates for each of the top two categories."""

    TOP_CATEGORIES = 2
    PER_CATEGORY = 2

    def __init__(self, catalog: TemplateCatalog):
        self._catalog = catalog

    @property
    def name(self) -> str:
        return "category"

    def is_applicable(self, context: SuggestionContext) -> bool:
        return (
            context.options.include_categories
            and bool(context.profile.preferred_categories)
        )

    def candidates(self, context: SuggestionContext) -> List[TemplateSuggestion]:
        suggestions: List[TemplateSuggestion] = []
        for category in context.profile.preferred_categories[:self.TOP_CATEGORIES]:
            for entry in self._catalog.by_category(category, self.PER_CATEGORY):
                suggestions.append(
                    TemplateSuggestion(
                        template_id=entry.template_id,
                        score=entry.score,
                        reason=f"From your favorite category: {category}",
                    )
                )
        return suggestions
