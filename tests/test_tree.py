"""
Unit tests for the element tree model: ids, traversal and invariants.
"""

import re

import pytest

from uiforge.schemas import Node, StyleGroups
from uiforge.exceptions import InvalidStyleGroup
from uiforge.tree import (
    check_invariants,
    collect_ids,
    count_nodes,
    depth_of,
    find_node,
    find_parent,
    generate_id,
    is_descendant,
    is_well_formed,
    iter_nodes,
    locate,
    normalize_forest,
    reassign_ids,
    siblings_of,
    with_parent,
)


class TestIds:
    """Test node id generation."""

    def test_id_format(self):
        assert re.fullmatch(r"el_\d+_[0-9a-f]{9}", generate_id())

    def test_ids_unique_in_tight_loop(self):
        ids = {generate_id() for _ in range(2000)}
        assert len(ids) == 2000


class TestTraversal:
    """Test read-only forest queries."""

    def test_preorder(self, sample_forest):
        assert [n.id for n in iter_nodes(sample_forest)] == ["box", "title", "row", "cta", "footer-text"]

    def test_find_node_and_parent(self, sample_forest):
        assert find_node(sample_forest, "cta").variant == "primary-button"
        assert find_node(sample_forest, "missing") is None
        assert find_parent(sample_forest, "cta").id == "row"
        assert find_parent(sample_forest, "box") is None

    def test_locate(self, sample_forest):
        assert locate(sample_forest, "footer-text") == (None, 1)
        parent, index = locate(sample_forest, "row")
        assert parent.id == "box" and index == 1
        assert locate(sample_forest, "missing") is None

    def test_siblings_of(self, sample_forest):
        assert [n.id for n in siblings_of(sample_forest, "title")] == ["title", "row"]
        assert [n.id for n in siblings_of(sample_forest, "box")] == ["box", "footer-text"]

    def test_is_descendant_is_strict(self, sample_forest):
        box = sample_forest[0]
        assert is_descendant(box, "cta")
        assert not is_descendant(box, "box")
        assert not is_descendant(box, "footer-text")

    def test_counts_and_depth(self, sample_forest):
        assert count_nodes(sample_forest) == 5
        assert collect_ids(sample_forest) == {"box", "title", "row", "cta", "footer-text"}
        assert depth_of(sample_forest, "cta") == 2
        assert depth_of(sample_forest, "footer-text") == 0
        assert depth_of(sample_forest, "missing") is None


class TestInvariants:
    """Test invariant checks and repair."""

    def test_sample_is_well_formed(self, sample_forest):
        assert check_invariants(sample_forest) == []
        assert is_well_formed(sample_forest)

    def test_duplicate_ids_detected(self, make_node):
        forest = [make_node("a"), make_node("a")]
        assert any("duplicate id 'a'" in v for v in check_invariants(forest))

    def test_wrong_parent_link_detected(self, make_node):
        child = Node(id="c", variant="paragraph", parent_id="elsewhere")
        parent = Node(id="p", variant="container", children=[child])
        violations = check_invariants([parent])
        assert len(violations) == 1
        assert "'c' has parent_id" in violations[0]

    def test_with_parent_fixes_subtree(self):
        grandchild = Node(id="g", variant="paragraph")
        child = Node(id="c", variant="container", children=[grandchild])
        fixed = with_parent(child, "root")
        assert fixed.parent_id == "root"
        assert fixed.children[0].parent_id == "c"

    def test_with_parent_reuses_consistent_node(self, make_node):
        node = make_node("x", "container", children=[make_node("y")])
        assert with_parent(node, None) is node

    def test_reassign_ids_clones_everything(self, sample_forest, id_factory):
        box = sample_forest[0]
        clone = reassign_ids(box, None, id_factory)
        original_ids = collect_ids([box])
        clone_ids = collect_ids([clone])
        assert not original_ids & clone_ids
        assert [n.variant for n in iter_nodes([clone])] == [n.variant for n in iter_nodes([box])]
        assert is_well_formed([clone])
        assert clone.attributes is not box.attributes

    def test_normalize_repairs_ids_and_links(self, id_factory):
        child = Node(id="dup", variant="paragraph", parent_id="wrong")
        forest = [
            Node(id="dup", variant="container", children=[child]),
            Node(id="", variant="heading"),
        ]
        repaired = normalize_forest(forest, id_factory)
        assert is_well_formed(repaired)
        assert repaired[0].id == "dup"
        assert repaired[0].children[0].id == "n1"
        assert repaired[1].id == "n2"


class TestStyleGroups:
    """Test style bucket access."""

    def test_tokens_and_replace(self):
        styles = StyleGroups(spacing=["p-4"])
        updated = styles.with_tokens("spacing", ["m-2"]).with_tokens("md", ["flex"])
        assert updated.tokens("spacing") == ["m-2"]
        assert updated.tokens("md") == ["flex"]
        assert styles.tokens("spacing") == ["p-4"]

    def test_unknown_group_raises(self):
        with pytest.raises(InvalidStyleGroup):
            StyleGroups().tokens("animations")

    def test_is_empty(self):
        assert StyleGroups().is_empty()
        assert not StyleGroups(colors=["text-white"]).is_empty()
