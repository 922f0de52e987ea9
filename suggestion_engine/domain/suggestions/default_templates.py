"""
Default template suggestions per complexity tier.

Used when there is not enough behavior signal to personalize, and as the
pool for the complexity strategy.
"""

from typing import Dict, List, Tuple

from suggestion_engine.domain.suggestions.interfaces import TemplateSuggestion


_DEFAULTS: Dict[str, Tuple[Tuple[str, float, str], ...]] = {
    "beginner": (
        ("simple-card-component", 0.95, "Popular beginner template"),
        ("basic-form", 0.92, "Recommended for new users"),
        ("profile-card", 0.90, "Easy to implement"),
        ("notification-banner", 0.88, "Simple but useful component"),
        ("button-set", 0.85, "Fundamental UI element"),
    ),
    "intermediate": (
        ("data-table-sortable", 0.93, "Popular intermediate component"),
        ("multi-step-form", 0.91, "Builds on form basics"),
        ("chart-dashboard", 0.89, "Visualize your data"),
        ("file-uploader", 0.86, "Useful for content management"),
        ("kanban-board", 0.84, "Interactive drag-and-drop UI"),
    ),
    "advanced": (
        ("authentication-system", 0.94, "Complete auth workflow"),
        ("real-time-dashboard", 0.92, "Advanced data visualization"),
        ("e-commerce-product-page", 0.90, "Complex interactive component"),
        ("image-editor", 0.87, "Advanced user interaction"),
        ("chat-interface", 0.85, "Real-time messaging UI"),
    ),
}

# Served for any label outside the three tiers
_GENERIC: Tuple[Tuple[str, float, str], ...] = (
    ("simple-card-component", 0.95, "Popular template"),
    ("basic-form", 0.92, "Essential component"),
    ("profile-card", 0.90, "Commonly used UI element"),
    ("data-table-sortable", 0.88, "Useful data component"),
    ("notification-banner", 0.85, "Effective user alert"),
)


def get_default_templates(complexity: str) -> List[TemplateSuggestion]:
    """Fresh, score-descending default suggestions for a complexity label."""
    rows = _DEFAULTS.get(complexity, _GENERIC)
    return [TemplateSuggestion(template_id, score, reason) for template_id, score, reason in rows]
