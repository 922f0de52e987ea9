"""
Suggestion Composer

Runs the suggestion strategies in priority order and merges their output
into one ranked, de-duplicated list.
"""

from typing import Iterable, List, Optional

from suggestion_engine.domain.suggestions.catalogs import PlaceholderTemplateCatalog
from suggestion_engine.domain.suggestions.default_templates import get_default_templates
from suggestion_engine.domain.suggestions.interfaces import (
    DEFAULT_COMPLEXITY,
    BaseSuggestionStrategy,
    PreferenceProfile,
    SuggestionContext,
    SuggestionOptions,
    TemplateCatalog,
    TemplateSuggestion,
)
from suggestion_engine.domain.suggestions.strategies import (
    CategoryStrategy,
    ComplexityStrategy,
    TagStrategy,
)


def fallback_suggestions(limit: int) -> List[TemplateSuggestion]:
    """Beginner defaults, used for new users and on any failure."""
    if limit <= 0:
        return []
    return get_default_templates(DEFAULT_COMPLEXITY)[:limit]


class SuggestionComposer:
    """
    Template suggestion engine.

    Strategy order is significant: once the accumulated candidates reach
    the limit, the remaining strategies do not run at all.
    """

    def __init__(
        self,
        catalog: Optional[TemplateCatalog] = None,
        strategies: Optional[List[BaseSuggestionStrategy]] = None,
    ):
        self._catalog = catalog or PlaceholderTemplateCatalog()
        self._strategies = strategies or self._default_strategies()

    def _default_strategies(self) -> List[BaseSuggestionStrategy]:
        """Complexity, then category, then tag."""
        return [
            ComplexityStrategy(),
            CategoryStrategy(self._catalog),
            TagStrategy(self._catalog),
        ]

    @property
    def strategies(self) -> List[BaseSuggestionStrategy]:
        return list(self._strategies)

    def compose(
        self,
        profile: Optional[PreferenceProfile],
        excluded_ids: Iterable[str],
        options: SuggestionOptions,
    ) -> List[TemplateSuggestion]:
        """
        Build the suggestion list for one request.

        Args:
            profile: Preference profile, or None when the user has no history
            excluded_ids: Template ids the user just viewed or implemented
            options: Limit and strategy switches

        Returns:
            At most ``options.limit`` suggestions with unique template ids
        """
        limit = options.limit
        if limit <= 0:
            return []

        if profile is None:
            return fallback_suggestions(limit)

        context = SuggestionContext(
            profile=profile,
            excluded_ids=frozenset(excluded_ids),
            options=options,
        )

        suggestions: List[TemplateSuggestion] = []
        for strategy in self._strategies:
            suggestions.extend(strategy.suggest(context))
            if len(suggestions) >= limit:
                break

        if len(suggestions) < limit:
            chosen = {s.template_id for s in suggestions}
            backfill = [
                default for default in get_default_templates(DEFAULT_COMPLEXITY)
                if default.template_id not in context.excluded_ids
                and default.template_id not in chosen
            ]
            suggestions.extend(backfill[:limit - len(suggestions)])

        return self._deduplicate(suggestions)[:limit]

    @staticmethod
    def _deduplicate(suggestions: List[TemplateSuggestion]) -> List[TemplateSuggestion]:
        """Keep the first suggestion for each template id."""
        seen = set()
        unique: List[TemplateSuggestion] = []
        for suggestion in suggestions:
            if suggestion.template_id in seen:
                continue
            seen.add(suggestion.template_id)
            unique.append(suggestion)
        return unique
