# Suggestion strategies submodule
from suggestion_engine.domain.suggestions.strategies.complexity import ComplexityStrategy
from suggestion_engine.domain.suggestions.strategies.category import CategoryStrategy
from suggestion_engine.domain.suggestions.strategies.tag import TagStrategy

__all__ = [
    "ComplexityStrategy",
    "CategoryStrategy",
    "TagStrategy",
]
