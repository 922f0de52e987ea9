"""
Unit tests for template catalogs, default templates and the component
template library.
"""

import pytest

from suggestion_engine.domain.suggestions.catalogs import (
    ComponentTemplateCatalog,
    PlaceholderTemplateCatalog,
    build_catalog,
)
from suggestion_engine.domain.suggestions.default_templates import get_default_templates
from suggestion_engine.domain.suggestions.interfaces import CatalogEntry, TemplateCatalog
from suggestion_engine.domain.suggestions.template_library import (
    COMPONENT_TEMPLATES,
    filter_templates,
    get_library_metadata,
    get_template,
    get_template_categories,
    search_templates,
)


class TestCatalogs:

    def test_placeholder_category_ids(self):
        entries = PlaceholderTemplateCatalog().by_category("dashboard", 2)
        assert entries == [
            CatalogEntry("dashboard-template-1", 0.85),
            CatalogEntry("dashboard-template-2", 0.82),
        ]

    def test_placeholder_tag_ids(self):
        entries = PlaceholderTemplateCatalog().by_tag("charts", 2)
        assert entries == [
            CatalogEntry("charts-template-1", 0.78),
            CatalogEntry("charts-template-2", 0.75),
        ]

    def test_library_catalog_uses_component_templates(self):
        catalog = ComponentTemplateCatalog()

        assert catalog.by_category("forms", 2) == [
            CatalogEntry("contact-form", 0.85),
            CatalogEntry("multi-step-wizard", 0.82),
        ]
        assert [e.template_id for e in catalog.by_tag("table", 2)] == [
            "data-table-basic",
            "data-table-pagination",
        ]

    def test_library_catalog_unknown_category_is_empty(self):
        assert ComponentTemplateCatalog().by_category("no-such-category", 2) == []

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("library", ComponentTemplateCatalog),
            ("placeholder", PlaceholderTemplateCatalog),
            ("anything-else", PlaceholderTemplateCatalog),
        ],
    )
    def test_build_catalog(self, kind, expected):
        catalog = build_catalog(kind)
        assert isinstance(catalog, expected)
        assert isinstance(catalog, TemplateCatalog)


class TestDefaultTemplates:

    def test_each_tier_has_five_descending_defaults(self):
        for level in ("beginner", "intermediate", "advanced"):
            defaults = get_default_templates(level)
            scores = [d.score for d in defaults]
            assert len(defaults) == 5
            assert scores == sorted(scores, reverse=True)

    def test_unknown_label_gets_generic_list(self):
        defaults = get_default_templates("expert")
        assert defaults[0].template_id == "simple-card-component"
        assert defaults[0].reason == "Popular template"
        assert defaults[3].template_id == "data-table-sortable"

    def test_defaults_are_fresh_copies(self):
        first = get_default_templates("beginner")
        first[0].score = 0.0
        assert get_default_templates("beginner")[0].score == 0.95


class TestTemplateLibrary:

    def test_library_size(self):
        assert len(COMPONENT_TEMPLATES) == 13

    def test_get_template(self):
        assert get_template("hero-section").name == "Hero Section"
        assert get_template("missing") is None

    def test_beginner_includes_unrated_templates(self):
        result = {t.id for t in filter_templates(complexity="beginner")}
        assert result == {
            "data-table-basic",
            "data-table-pagination",
            "contact-form",
            "responsive-navbar",
            "feature-card",
            "hero-section",
            "login-form",
        }

    def test_other_tiers_match_exactly(self):
        result = [t.id for t in filter_templates(complexity="advanced")]
        assert result == ["testimonials-carousel", "multi-step-wizard"]

    def test_all_matches_everything(self):
        assert len(filter_templates(category="all", complexity="all")) == 13

    def test_tags_match_any(self):
        result = [t.id for t in filter_templates(tags=["wizard", "login"])]
        assert result == ["login-form", "multi-step-wizard"]

    def test_filters_combine(self):
        result = [t.id for t in filter_templates(category="forms", complexity="beginner")]
        assert result == ["contact-form"]

    def test_search_is_case_insensitive(self):
        assert [t.id for t in search_templates("DASHBOARD")] == ["stats-dashboard"]

    def test_blank_search_returns_nothing(self):
        assert search_templates("   ") == []

    def test_metadata(self):
        metadata = get_library_metadata()

        assert metadata["total"] == 13
        assert metadata["categories"] == get_template_categories()
        assert metadata["categories"][0] == "tables"
        assert "social proof" in metadata["allTags"]
        assert metadata["complexityStats"] == {
            "beginner": 2,
            "intermediate": 4,
            "advanced": 2,
        }
