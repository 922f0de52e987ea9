"""
Suggestion Interfaces

Data models and protocols shared by the preference aggregation and the
suggestion strategies. Nothing here touches the database.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Protocol, runtime_checkable


COMPLEXITY_LEVELS = ("beginner", "intermediate", "advanced")
DEFAULT_COMPLEXITY = "beginner"


@dataclass(frozen=True)
class ItemDetails:
    """
    Typed view over a behavior record's open detail map.

    Only well-typed values make it into the typed fields; everything else
    (including unknown keys) is kept in ``extra``.
    """
    category: Optional[str] = None
    complexity: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "ItemDetails":
        if not isinstance(raw, Mapping):
            return cls()

        category = raw.get("category")
        complexity = raw.get("complexity")
        tags = raw.get("tags")

        return cls(
            category=category if isinstance(category, str) and category else None,
            complexity=complexity if complexity in COMPLEXITY_LEVELS else None,
            tags=[t for t in tags if isinstance(t, str) and t] if isinstance(tags, list) else [],
            extra={
                k: v for k, v in raw.items()
                if k not in ("category", "complexity", "tags")
            },
        )


@runtime_checkable
class BehaviorLike(Protocol):
    """Anything with an action and a detail map (ORM rows, test doubles)."""

    action: str
    item_details: Optional[Mapping[str, Any]]


@dataclass
class PreferenceProfile:
    """The fields of a preference snapshot, as derived from behavior."""
    preferred_categories: List[str] = field(default_factory=list)
    preferred_complexity: str = DEFAULT_COMPLEXITY
    preferred_tags: List[str] = field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: Any) -> "PreferenceProfile":
        """Build from a stored snapshot row."""
        return cls(
            preferred_categories=list(snapshot.preferred_categories or []),
            preferred_complexity=snapshot.preferred_complexity or DEFAULT_COMPLEXITY,
            preferred_tags=list(snapshot.preferred_tags or []),
        )


@dataclass
class TemplateSuggestion:
    """
    One suggested template.

    ``score`` only ranks suggestions against each other.
    """
    template_id: str
    score: float
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "templateId": self.template_id,
            "score": self.score,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SuggestionOptions:
    """Caller-controlled knobs for one suggestion request."""
    limit: int = 5
    include_complexity: bool = False
    include_categories: bool = False
    include_tags: bool = False


@dataclass
class SuggestionContext:
    """Everything a strategy needs to produce candidates."""
    profile: PreferenceProfile
    excluded_ids: FrozenSet[str]
    options: SuggestionOptions


@dataclass(frozen=True)
class CatalogEntry:
    """A template id found in a catalog, with its relative score."""
    template_id: str
    score: float


@runtime_checkable
class TemplateCatalog(Protocol):
    """Source of candidate templates for category and tag strategies."""

    def by_category(self, category: str, limit: int) -> List[CatalogEntry]:
        ...

    def by_tag(self, tag: str, limit: int) -> List[CatalogEntry]:
        ...


class BaseSuggestionStrategy(ABC):
    """
    Base class for suggestion strategies.

    Subclasses produce raw candidates; this class applies the exclusion set
    and the per-strategy cap.
    """

    MAX_CANDIDATES = 3

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def is_applicable(self, context: SuggestionContext) -> bool:
        pass

    @abstractmethod
    def candidates(self, context: SuggestionContext) -> List[TemplateSuggestion]:
        pass

    def suggest(self, context: SuggestionContext) -> List[TemplateSuggestion]:
        if not self.is_applicable(context):
            return []
        allowed = [
            candidate for candidate in self.candidates(context)
            if candidate.template_id not in context.excluded_ids
        ]
        return allowed[:self.MAX_CANDIDATES]
