"""
Tests for the placement resolver and drag sessions.
"""

import pytest

from uiforge.mutation import MutationFacade
from uiforge.placement import (
    CONTAINER_VARIANTS,
    ROOT_SENTINEL,
    DragSession,
    drop_indicator,
    normalize_target_id,
    resolve,
)
from uiforge.schemas import ActiveDescriptor, DropIndicator, HoverDescriptor, InsertIntent, MoveIntent


def new_item(variant="paragraph"):
    return ActiveDescriptor(id=f"catalog-{variant}", is_new=True, variant=variant)


def over(target_id):
    return HoverDescriptor(target_id=target_id)


class TestResolveNewItems:
    """Catalog items dragged onto the canvas."""

    def test_root_sentinel_appends_at_root(self, sample_forest):
        assert resolve(new_item(), over(ROOT_SENTINEL), sample_forest) == InsertIntent()

    def test_container_receives_inside(self, sample_forest):
        assert resolve(new_item(), over("row"), sample_forest) == InsertIntent(parent_id="row")

    def test_leaf_receives_next_sibling(self, sample_forest):
        assert resolve(new_item(), over("title"), sample_forest) == InsertIntent(parent_id="box", index=1)
        assert resolve(new_item(), over("footer-text"), sample_forest) == InsertIntent(parent_id=None, index=2)

    def test_drop_prefix_is_stripped(self, sample_forest):
        assert resolve(new_item(), over("drop-row"), sample_forest) == InsertIntent(parent_id="row")

    def test_unknown_target_falls_back_to_root(self, sample_forest):
        assert resolve(new_item(), over("ghost"), sample_forest) == InsertIntent()

    def test_no_hover(self, sample_forest):
        assert resolve(new_item(), None, sample_forest) is None


class TestResolveExistingNodes:
    """Tree nodes dragged to a new spot."""

    def test_self_is_rejected(self, sample_forest):
        assert resolve(ActiveDescriptor(id="row"), over("row"), sample_forest) is None

    def test_descendant_is_rejected(self, sample_forest):
        assert resolve(ActiveDescriptor(id="box"), over("cta"), sample_forest) is None
        assert resolve(ActiveDescriptor(id="box"), over("drop-row"), sample_forest) is None

    def test_container_target(self, sample_forest):
        intent = resolve(ActiveDescriptor(id="footer-text"), over("row"), sample_forest)
        assert intent == MoveIntent(over_id="row", position="inside")

    def test_leaf_target(self, sample_forest):
        intent = resolve(ActiveDescriptor(id="cta"), over("title"), sample_forest)
        assert intent == MoveIntent(over_id="title", position="after")

    def test_root_sentinel(self, sample_forest):
        intent = resolve(ActiveDescriptor(id="cta"), over(ROOT_SENTINEL), sample_forest)
        assert intent == MoveIntent(over_id=None)

    def test_missing_nodes_are_rejected(self, sample_forest):
        assert resolve(ActiveDescriptor(id="ghost"), over("box"), sample_forest) is None
        assert resolve(ActiveDescriptor(id="cta"), over("ghost"), sample_forest) is None

    def test_resolver_is_pure(self, sample_forest):
        before = [n.model_copy(deep=True) for n in sample_forest]
        for _ in range(3):
            resolve(ActiveDescriptor(id="cta"), over("title"), sample_forest)
        assert sample_forest == before


class TestHelpers:
    """Test indicator and id helpers."""

    def test_normalize_target_id(self):
        assert normalize_target_id("drop-el_1") == "el_1"
        assert normalize_target_id(ROOT_SENTINEL) == ROOT_SENTINEL
        assert normalize_target_id(None) is None

    def test_container_list_is_closed(self):
        assert "button-group" in CONTAINER_VARIANTS
        assert "paragraph" not in CONTAINER_VARIANTS

    def test_indicators(self, sample_forest):
        assert drop_indicator(new_item(), over("row"), sample_forest) == DropIndicator(target_id="row", position="inside")
        assert drop_indicator(new_item(), over("title"), sample_forest) == DropIndicator(target_id="title", position="after")
        assert drop_indicator(new_item(), over(ROOT_SENTINEL), sample_forest) == DropIndicator(
            target_id=ROOT_SENTINEL, position="inside")
        assert drop_indicator(ActiveDescriptor(id="box"), over("cta"), sample_forest) is None


class TestDragSession:
    """Test the start/over/end/cancel lifecycle."""

    @pytest.fixture
    def engine(self, sample_forest, id_factory):
        return MutationFacade(forest=sample_forest, id_factory=id_factory)

    def test_over_does_not_commit(self, engine):
        session = DragSession(engine)
        session.start(new_item("badge"))
        for target in ("title", "row", "footer-text"):
            session.over(over(target))
        assert engine.history_length == 1
        assert session.indicator == DropIndicator(target_id="footer-text", position="after")

    def test_end_commits_exactly_once(self, engine):
        session = DragSession(engine)
        session.start(new_item("badge"))
        session.over(over("row"))
        result = session.end()
        assert result.changed
        assert engine.history_length == 2
        assert engine.get_parent(result.node_id).id == "row"
        assert not session.is_dragging

    def test_end_with_final_hover(self, engine):
        session = DragSession(engine)
        session.start(ActiveDescriptor(id="footer-text"))
        session.over(over("title"))
        result = session.end(over(ROOT_SENTINEL))
        assert not result.changed
        assert [n.id for n in engine.forest] == ["box", "footer-text"]

    def test_rejected_drop(self, engine):
        session = DragSession(engine)
        session.start(ActiveDescriptor(id="box"))
        result = session.end(over("cta"))
        assert not result.changed
        assert engine.history_length == 1

    def test_cancel_never_touches_engine(self, engine):
        session = DragSession(engine)
        session.start(new_item())
        session.over(over("row"))
        session.cancel()
        assert not session.is_dragging
        assert engine.history_length == 1
        assert not session.end().changed
