"""
Unit tests for the pure tree-rewrite operations.
"""

import random

import pytest

from uiforge.exceptions import InvalidRelocation, InvalidStyleGroup, TargetNotFound
from uiforge.mutation import (
    duplicate_node,
    insert_node,
    move_node,
    remove_node,
    update_node,
    validate_move,
)
from uiforge.schemas import Node
from uiforge.tree import collect_ids, count_nodes, find_node, find_parent, is_well_formed, iter_nodes


def shape(node):
    """Variant/attribute structure of a subtree, ignoring ids."""
    return (node.variant, node.attributes, node.styles, [shape(c) for c in node.children])


class TestInsert:
    """Test insert_node."""

    def test_insert_at_root_appends(self, sample_forest, id_factory):
        result = insert_node(sample_forest, Node(variant="divider"), id_factory=id_factory)
        assert [n.id for n in result][:2] == ["box", "footer-text"]
        assert result[-1].id == "n1"
        assert result[-1].parent_id is None
        assert len(sample_forest) == 2

    def test_insert_into_parent_at_index(self, sample_forest, id_factory):
        result = insert_node(sample_forest, Node(variant="badge"), "box", 0, id_factory)
        box = find_node(result, "box")
        assert [c.id for c in box.children] == ["n1", "title", "row"]
        assert box.children[0].parent_id == "box"

    def test_index_is_clamped(self, sample_forest, id_factory):
        result = insert_node(sample_forest, Node(variant="badge"), None, 99, id_factory)
        assert result[-1].id == "n1"
        result = insert_node(sample_forest, Node(variant="badge"), None, -5, id_factory)
        assert result[0].id == "n2"

    def test_missing_parent_raises(self, sample_forest):
        with pytest.raises(TargetNotFound) as exc_info:
            insert_node(sample_forest, Node(variant="badge"), "nope")
        assert exc_info.value.node_id == "nope"

    def test_colliding_subtree_is_reidentified(self, sample_forest, id_factory, make_node):
        incoming = make_node("fresh", "container", children=[make_node("cta")])
        result = insert_node(sample_forest, incoming, None, None, id_factory)
        assert is_well_formed(result)
        assert result[-1].id == "n1"
        assert result[-1].children[0].id == "n2"

    def test_unchanged_subtrees_are_shared(self, sample_forest, id_factory):
        result = insert_node(sample_forest, Node(variant="badge"), "row", None, id_factory)
        assert result[1] is sample_forest[1]
        assert result[0].children[0] is sample_forest[0].children[0]


class TestRemove:
    """Test remove_node."""

    def test_remove_subtree(self, sample_forest):
        result = remove_node(sample_forest, "row")
        assert collect_ids(result) == {"box", "title", "footer-text"}

    def test_remove_absent_is_identity(self, sample_forest):
        assert remove_node(sample_forest, "missing") is sample_forest


class TestUpdate:
    """Test update_node."""

    def test_attributes_merge(self, sample_forest):
        result = update_node(sample_forest, "title", {"text": "Changed", "subtitle": "x"})
        title = find_node(result, "title")
        assert title.attributes == {"text": "Changed", "level": "h1", "subtitle": "x"}

    def test_style_group_replaced_wholesale(self, sample_forest):
        result = update_node(sample_forest, "box", styles={"spacing": ["m-2"], "lg": ["grid"]})
        box = find_node(result, "box")
        assert box.styles.spacing == ["m-2"]
        assert box.styles.layout == ["mx-auto"]
        assert box.styles.responsive.lg == ["grid"]

    def test_display_name(self, sample_forest):
        result = update_node(sample_forest, "cta", display_name="Call to action")
        assert find_node(result, "cta").display_name == "Call to action"

    def test_unchanged_update_returns_same_forest(self, sample_forest):
        assert update_node(sample_forest, "cta") is sample_forest
        assert update_node(sample_forest, "cta", {"text": "Go"}) is sample_forest
        assert update_node(sample_forest, "box", styles={"spacing": ["p-4"]}) is sample_forest
        assert update_node(sample_forest, "cta", {"text": "Stop"}) is not sample_forest

    def test_missing_target_raises(self, sample_forest):
        with pytest.raises(TargetNotFound):
            update_node(sample_forest, "missing", {"text": "x"})

    def test_unknown_style_group_raises(self, sample_forest):
        with pytest.raises(InvalidStyleGroup):
            update_node(sample_forest, "box", styles={"shadows": ["shadow"]})


class TestMove:
    """Test move_node preconditions and placement."""

    def test_move_after(self, sample_forest):
        result = move_node(sample_forest, "footer-text", "title", "after")
        box = find_node(result, "box")
        assert [c.id for c in box.children] == ["title", "footer-text", "row"]
        assert find_node(result, "footer-text").parent_id == "box"
        assert [n.id for n in result] == ["box"]

    def test_move_before(self, sample_forest):
        result = move_node(sample_forest, "cta", "box", "before")
        assert [n.id for n in result] == ["cta", "box", "footer-text"]
        assert find_node(result, "cta").parent_id is None

    def test_move_inside_appends(self, sample_forest):
        result = move_node(sample_forest, "title", "row", "inside")
        row = find_node(result, "row")
        assert [c.id for c in row.children] == ["cta", "title"]
        assert find_parent(result, "title").id == "row"

    def test_move_within_same_parent(self, sample_forest):
        result = move_node(sample_forest, "title", "row", "after")
        box = find_node(result, "box")
        assert [c.id for c in box.children] == ["row", "title"]

    def test_self_move_is_noop(self, sample_forest):
        assert move_node(sample_forest, "box", "box", "after") is sample_forest

    def test_move_into_own_descendant_is_noop(self, sample_forest):
        assert move_node(sample_forest, "box", "cta", "inside") is sample_forest
        assert move_node(sample_forest, "box", "row", "after") is sample_forest

    def test_move_to_current_position_is_noop(self, sample_forest):
        assert move_node(sample_forest, "title", "row", "before") is sample_forest

    def test_absent_ids_are_noop(self, sample_forest):
        assert move_node(sample_forest, "missing", "box", "after") is sample_forest
        assert move_node(sample_forest, "box", "missing", "after") is sample_forest

    def test_validate_move_reports_reason(self, sample_forest):
        with pytest.raises(InvalidRelocation) as exc_info:
            validate_move(sample_forest, "box", "cta", "inside")
        assert "inside the moved subtree" in exc_info.value.reason
        with pytest.raises(InvalidRelocation):
            validate_move(sample_forest, "box", "title", "sideways")


class TestDuplicate:
    """Test duplicate_node."""

    def test_clone_is_next_sibling_and_isomorphic(self, sample_forest, id_factory):
        result = duplicate_node(sample_forest, "row", id_factory)
        box = find_node(result, "box")
        assert [c.id for c in box.children][:2] == ["title", "row"]
        clone = box.children[2]
        assert shape(clone) == shape(find_node(sample_forest, "row"))
        assert not collect_ids([clone]) & collect_ids(sample_forest)
        assert clone.parent_id == "box"
        assert is_well_formed(result)

    def test_duplicate_root(self, sample_forest, id_factory):
        result = duplicate_node(sample_forest, "box", id_factory)
        assert [n.id for n in result][0] == "box"
        assert result[1].variant == "container"
        assert result[2].id == "footer-text"
        assert count_nodes(result) == count_nodes(sample_forest) + 4

    def test_duplicate_absent_is_identity(self, sample_forest):
        assert duplicate_node(sample_forest, "missing") is sample_forest


class TestRandomSequences:
    """Seeded random operation sequences keep every invariant."""

    VARIANTS = ("container", "flex-row", "heading", "paragraph", "primary-button")

    @pytest.mark.parametrize("seed", [1, 7, 42, 1234, 9001])
    def test_invariants_hold(self, seed, id_factory):
        rng = random.Random(seed)
        forest = []
        for _ in range(150):
            ids = [n.id for n in iter_nodes(forest)]
            op = rng.choice(("insert", "insert", "remove", "move", "duplicate", "update"))

            if op == "insert" or not ids:
                parent = rng.choice(ids + [None]) if ids else None
                forest = insert_node(forest, Node(variant=rng.choice(self.VARIANTS)), parent,
                                     rng.choice([None, 0, 1]), id_factory)
            elif op == "remove":
                forest = remove_node(forest, rng.choice(ids))
            elif op == "move":
                forest = move_node(forest, rng.choice(ids), rng.choice(ids),
                                   rng.choice(("before", "after", "inside")))
            elif op == "duplicate":
                before = count_nodes(forest)
                target = rng.choice(ids)
                size = count_nodes([find_node(forest, target)])
                forest = duplicate_node(forest, target, id_factory)
                assert count_nodes(forest) == before + size
            else:
                forest = update_node(forest, rng.choice(ids), {"text": str(rng.random())})

            assert is_well_formed(forest), f"seed={seed} op={op}"
