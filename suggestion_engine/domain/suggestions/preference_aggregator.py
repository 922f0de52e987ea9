"""
Preference Aggregation

Turns a user's recent behavior into weighted tallies and then into a
preference profile. Pure functions; the caller loads the records.

Ranking ties keep the order in which labels first appear while walking the
records newest-first, so recent interests win ties.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from suggestion_engine.domain.suggestions.interfaces import (
    DEFAULT_COMPLEXITY,
    BehaviorLike,
    ItemDetails,
    PreferenceProfile,
)


ACTION_WEIGHTS: Dict[str, float] = {
    "implement": 5,  # Implementing a template is the strongest signal
    "favorite": 4,
    "search": 2,
    "view": 1,
}
DEFAULT_ACTION_WEIGHT = 1

MAX_PREFERRED_CATEGORIES = 5
MAX_PREFERRED_TAGS = 10


def action_weight(action: str) -> float:
    """Weight for an action kind; unknown kinds count like a view."""
    return ACTION_WEIGHTS.get(action, DEFAULT_ACTION_WEIGHT)


def _ranked(scores: Dict[str, float], limit: Optional[int] = None) -> List[str]:
    # sorted() is stable, so equal scores keep first-appearance order
    ranked = [label for label, _ in sorted(scores.items(), key=lambda item: -item[1])]
    return ranked if limit is None else ranked[:limit]


@dataclass
class PreferenceTally:
    """Accumulated scores per category, complexity and tag."""
    category_scores: Dict[str, float] = field(default_factory=dict)
    complexity_scores: Dict[str, float] = field(default_factory=dict)
    tag_scores: Dict[str, float] = field(default_factory=dict)

    def add(self, action: str, details: ItemDetails) -> None:
        weight = action_weight(action)

        if details.category:
            self.category_scores[details.category] = (
                self.category_scores.get(details.category, 0) + weight
            )

        if details.complexity:
            self.complexity_scores[details.complexity] = (
                self.complexity_scores.get(details.complexity, 0) + weight
            )

        if details.tags:
            # A record's tags share its weight
            share = weight / len(details.tags)
            for tag in details.tags:
                self.tag_scores[tag] = self.tag_scores.get(tag, 0) + share

    def to_profile(self) -> PreferenceProfile:
        complexities = _ranked(self.complexity_scores, limit=1)
        return PreferenceProfile(
            preferred_categories=_ranked(self.category_scores, MAX_PREFERRED_CATEGORIES),
            preferred_complexity=complexities[0] if complexities else DEFAULT_COMPLEXITY,
            preferred_tags=_ranked(self.tag_scores, MAX_PREFERRED_TAGS),
        )


def tally_behavior(records: Iterable[BehaviorLike]) -> PreferenceTally:
    """
    Weight every record into a tally.

    Args:
        records: Behavior records, newest first

    Returns:
        PreferenceTally with the raw scores
    """
    tally = PreferenceTally()
    for record in records:
        tally.add(record.action, ItemDetails.from_mapping(record.item_details))
    return tally


def aggregate_preferences(records: Iterable[BehaviorLike]) -> PreferenceProfile:
    """Derive the preference profile for a newest-first record list."""
    return tally_behavior(records).to_profile()
