# Suggestion module for the Template Suggestion Engine
from suggestion_engine.domain.suggestions.interfaces import (
    BaseSuggestionStrategy,
    CatalogEntry,
    ItemDetails,
    PreferenceProfile,
    SuggestionContext,
    SuggestionOptions,
    TemplateCatalog,
    TemplateSuggestion,
)
from suggestion_engine.domain.suggestions.preference_aggregator import (
    aggregate_preferences,
    tally_behavior,
)
from suggestion_engine.domain.suggestions.catalogs import build_catalog
from suggestion_engine.domain.suggestions.composer import (
    SuggestionComposer,
    fallback_suggestions,
)

__all__ = [
    "BaseSuggestionStrategy",
    "CatalogEntry",
    "ItemDetails",
    "PreferenceProfile",
    "SuggestionContext",
    "SuggestionOptions",
    "TemplateCatalog",
    "TemplateSuggestion",
    "aggregate_preferences",
    "tally_behavior",
    "build_catalog",
    "SuggestionComposer",
    "fallback_suggestions",
]
