"""
Tag Strategy

Suggests templates matching the user's top three tags.
"""

from typing import List

from suggestion_engine.domain.suggestions.interfaces import (
    BaseSuggestionStrategy,
    SuggestionContext,
    TemplateCatalog,
    TemplateSuggestion,
)


class TagStrategy(BaseSuggestionStrategy):

    TOP_TAGS = 3
    PER_TAG = 2

    def __init__(self, catalog: TemplateCatalog):
        self._catalog = catalog

    @property
    def name(self) -> str:
        return "tag"

    def is_applicable(self, context: SuggestionContext) -> bool:
        return context.options.include_tags and bool(context.profile.preferred_tags)

    def candidates(self, context: SuggestionContext) -> List[TemplateSuggestion]:
        suggestions: List[TemplateSuggestion] = []
        for tag in context.profile.preferred_tags[:self.TOP_TAGS]:
            for entry in self._catalog.by_tag(tag, self.PER_TAG):
                suggestions.append(
                    TemplateSuggestion(
                        template_id=entry.template_id,
                        score=entry.score,
                        reason=f'Matches your interest in "{tag}"',
                    )
                )
        return suggestions
