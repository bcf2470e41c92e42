"""
Tests for the component catalog.
"""

from uiforge.catalog import (
    CATEGORIES,
    DEFAULTS,
    REGISTRY,
    components_by_category,
    container_variants,
    get_definition,
    get_defaults,
    is_known_variant,
    list_components,
    materialize,
    search_components,
)
from uiforge.placement import CONTAINER_VARIANTS


class TestRegistry:
    """Test catalog lookups."""

    def test_every_variant_has_defaults(self):
        for variant in REGISTRY:
            assert variant in DEFAULTS

    def test_categories_are_known(self):
        for definition in list_components():
            assert definition.category in CATEGORIES

    def test_grouping_covers_everything(self):
        grouped = components_by_category()
        assert sum(len(v) for v in grouped.values()) == len(REGISTRY)

    def test_placement_containers_are_catalog_containers(self):
        # Catalog containers also include sections, cards, forms and navigation blocks
        assert set(CONTAINER_VARIANTS) <= set(container_variants())

    def test_lookup(self):
        assert get_definition("primary-button").name
        assert get_definition("nope") is None
        assert is_known_variant("heading")
        assert not is_known_variant("nope")

    def test_search(self):
        variants = [d.variant for d in search_components("button")]
        assert "primary-button" in variants
        assert "button-group" in variants
        assert len(search_components("")) == len(REGISTRY)

    def test_list_by_category(self):
        assert all(d.category == "forms" for d in list_components("forms"))


class TestMaterialize:
    """Test building fresh nodes from defaults."""

    def test_node_from_defaults(self):
        node = materialize("heading")
        assert node.id == ""
        assert node.attributes == get_defaults("heading")["attributes"]
        assert node.styles.typography == ["text-3xl", "font-bold"]
        assert node.display_name == get_definition("heading").name

    def test_defaults_are_not_shared(self):
        first = materialize("list")
        first.attributes["items"].append("mutated")
        assert "mutated" not in materialize("list").attributes["items"]

    def test_display_name_override(self):
        assert materialize("paragraph", "Intro").display_name == "Intro"

    def test_unknown_variant(self):
        node = materialize("hologram")
        assert node.variant == "hologram"
        assert node.attributes == {}
