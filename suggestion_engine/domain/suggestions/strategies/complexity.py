"""
Complexity Strategy

Suggests default templates from the user's preferred complexity tier.
"""

from typing import List

from suggestion_engine.domain.suggestions.default_templates import get_default_templates
from suggestion_engine.domain.suggestions.interfaces import (
    BaseSuggestionStrategy,
    SuggestionContext,
    TemplateSuggestion,
)


class ComplexityStrategy(BaseSuggestionStrategy):
    """Runs only when the caller asked for complexity-based suggestions."""

    @property
    def name(self) -> str:
        return "complexity"

    def is_applicable(self, context: SuggestionContext) -> bool:
        return context.options.include_complexity

    def candidates(self, context: SuggestionContext) -> List[TemplateSuggestion]:
        level = context.profile.preferred_complexity
        return [
            TemplateSuggestion(
                template_id=default.template_id,
                score=default.score,
                reason=f"Based on your preferred complexity level: {level}",
            )
            for default in get_default_templates(level)
        ]
