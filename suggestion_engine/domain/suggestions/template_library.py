"""
Component Template Library

Metadata for the built-in website builder component templates, plus the
filtering helpers behind the template listing and search endpoints.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class ComponentTemplate:
    """A ready-to-use component template (metadata only)."""
    id: str
    name: str
    description: str
    category: str
    tags: Sequence[str] = field(default_factory=tuple)
    complexity: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "complexity": self.complexity,
        }


COMPONENT_TEMPLATES: List[ComponentTemplate] = [
    ComponentTemplate(
        id="data-table-basic",
        name="Basic Data Table",
        description="Simple data table for displaying structured information",
        category="tables",
        tags=("data", "table", "display"),
    ),
    ComponentTemplate(
        id="data-table-pagination",
        name="Paginated Data Table",
        description="Interactive data table with pagination controls",
        category="tables",
        tags=("data", "table", "pagination"),
    ),
    ComponentTemplate(
        id="contact-form",
        name="Contact Form",
        description="Standard contact form with name, email, and message fields",
        category="forms",
        tags=("form", "contact", "input"),
    ),
    ComponentTemplate(
        id="responsive-navbar",
        name="Responsive Navbar",
        description="Mobile-friendly navigation bar with dropdown menu",
        category="navigation",
        tags=("navigation", "header", "responsive"),
    ),
    ComponentTemplate(
        id="feature-card",
        name="Feature Card",
        description="Highlight key features with icon and description",
        category="cards",
        tags=("card", "feature", "display"),
    ),
    ComponentTemplate(
        id="hero-section",
        name="Hero Section",
        description="Attention-grabbing hero section with call-to-action",
        category="layout",
        tags=("hero", "landing", "header"),
        complexity="beginner",
    ),
    ComponentTemplate(
        id="features-grid",
        name="Features Grid",
        description="Responsive grid layout for showcasing features or services",
        category="layout",
        tags=("features", "grid", "responsive", "services"),
        complexity="intermediate",
    ),
    ComponentTemplate(
        id="pricing-table",
        name="Pricing Table",
        description="Comparison table for displaying pricing plans and features",
        category="pricing",
        tags=("pricing", "table", "subscription", "comparison"),
        complexity="intermediate",
    ),
    ComponentTemplate(
        id="testimonials-carousel",
        name="Testimonials Carousel",
        description="Animated carousel for customer testimonials and reviews",
        category="marketing",
        tags=("testimonials", "carousel", "reviews", "social proof"),
        complexity="advanced",
    ),
    ComponentTemplate(
        id="login-form",
        name="Login Form",
        description="Secure login form with email and password fields",
        category="authentication",
        tags=("auth", "login", "form", "security"),
        complexity="beginner",
    ),
    ComponentTemplate(
        id="stats-dashboard",
        name="Stats Dashboard Cards",
        description="Set of dashboard cards for displaying key metrics and statistics",
        category="dashboard",
        tags=("dashboard", "statistics", "metrics", "analytics"),
        complexity="intermediate",
    ),
    ComponentTemplate(
        id="multi-step-wizard",
        name="Multi-Step Wizard",
        description="Interactive multi-step form with progress tracking",
        category="forms",
        tags=("wizard", "multi-step", "form", "workflow"),
        complexity="advanced",
    ),
    ComponentTemplate(
        id="analytics-chart",
        name="Analytics Chart",
        description="Interactive chart for data visualization and analytics",
        category="data-visualization",
        tags=("chart", "analytics", "data", "visualization", "graph"),
        complexity="intermediate",
    ),
]


def get_template(template_id: str) -> Optional[ComponentTemplate]:
    """Look a template up by id."""
    for template in COMPONENT_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def filter_templates(
    category: Optional[str] = None,
    tags: Optional[Sequence[str]] = None,
    complexity: Optional[str] = None,
) -> List[ComponentTemplate]:
    """
    Filter the library.

    - category "all" (or None) matches everything
    - tags match when any requested tag is on the template
    - "beginner" also matches templates without a complexity; other tiers
      match exactly; "all" matches everything
    """
    result = list(COMPONENT_TEMPLATES)

    if category and category != "all":
        result = [t for t in result if t.category == category]

    if tags:
        result = [t for t in result if any(tag in t.tags for tag in tags)]

    if complexity and complexity != "all":
        if complexity == "beginner":
            result = [t for t in result if t.complexity in (None, "beginner")]
        else:
            result = [t for t in result if t.complexity == complexity]

    return result


def search_templates(query: str) -> List[ComponentTemplate]:
    """Case-insensitive match on name, description and tags."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [
        t for t in COMPONENT_TEMPLATES
        if needle in t.name.lower()
        or needle in t.description.lower()
        or any(needle in tag.lower() for tag in t.tags)
    ]


def get_template_categories() -> List[str]:
    """Unique categories in library order."""
    return list(dict.fromkeys(t.category for t in COMPONENT_TEMPLATES))


def get_template_tags() -> List[str]:
    """Unique tags in library order."""
    return list(dict.fromkeys(tag for t in COMPONENT_TEMPLATES for tag in t.tags))


def get_library_metadata() -> Dict[str, Any]:
    """Totals used by the template listing when metadata is requested."""
    return {
        "total": len(COMPONENT_TEMPLATES),
        "categories": get_template_categories(),
        "allTags": get_template_tags(),
        "complexityStats": {
            level: sum(1 for t in COMPONENT_TEMPLATES if t.complexity == level)
            for level in ("beginner", "intermediate", "advanced")
        },
    }
