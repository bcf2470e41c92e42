"""
MutationFacade: the single owned document engine.

Every write to the forest goes through this class. It applies the pure
operations, records history after each accepted change, and keeps the
selection and clipboard consistent with the tree.
"""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from uiforge.catalog import materialize
from uiforge.logging_config import logger
from uiforge.schemas import (
    ActiveDescriptor,
    Forest,
    HistoryLog,
    InsertIntent,
    MoveIntent,
    MutationResult,
    Node,
    PlacementIntent,
    Position,
)
from uiforge.tree import (
    find_node,
    find_parent,
    generate_id,
    is_descendant,
    normalize_forest,
    reassign_ids,
    siblings_of,
)

from . import operations
from .config import MUTATION_CONFIG
from .history import HistoryManager


def _copy_forest(forest: Forest) -> Forest:
    return [node.model_copy(deep=True) for node in forest]


def _copy_node(node: Optional[Node]) -> Optional[Node]:
    return node.model_copy(deep=True) if node is not None else None


class MutationFacade:
    """
    Owns the forest, its history, the selection and the clipboard.

    Callers never receive the live forest; `forest` and `snapshot()` hand out
    deep copies. All methods are serialised by one re-entrant lock so a
    background reader (autosave) always sees a committed state.
    """

    def __init__(
        self,
        forest: Optional[Forest] = None,
        capacity: Optional[int] = None,
        history: Optional[HistoryManager] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Initialize the engine.

        Args:
            forest: Initial forest (normalised on the way in), empty by default
            capacity: History capacity (default from config)
            history: Restored history; when given, its current entry wins over forest
            id_factory: Id generator override (tests)
        """
        self._lock = threading.RLock()
        self._id_factory = id_factory or generate_id
        self.selected_id: Optional[str] = None
        self._clipboard: Optional[Node] = None

        if history is not None and history.current() is not None:
            self.history = history
            self._forest: Forest = history.current()
        else:
            self.history = HistoryManager(capacity or MUTATION_CONFIG["history_capacity"])
            self._forest = normalize_forest(forest or [], self._id_factory)
            self.history.record(self._forest)

        logger.debug(f"MutationFacade initialized ({len(self._forest)} root node(s))")

    # ========================================================================
    # READ ACCESS
    # ========================================================================

    @property
    def forest(self) -> Forest:
        """Deep copy of the current forest."""
        with self._lock:
            return _copy_forest(self._forest)

    def snapshot(self) -> Forest:
        """Settled copy of the committed forest for the storage collaborator."""
        return self.forest

    def committed_state(self) -> Tuple[Forest, HistoryLog]:
        """Forest and history log read together, so they always belong to the same commit."""
        with self._lock:
            return _copy_forest(self._forest), self.history.to_log()

    def get(self, node_id: str) -> Optional[Node]:
        with self._lock:
            return _copy_node(find_node(self._forest, node_id))

    def get_parent(self, node_id: str) -> Optional[Node]:
        with self._lock:
            return _copy_node(find_parent(self._forest, node_id))

    @property
    def clipboard(self) -> Optional[Node]:
        return _copy_node(self._clipboard)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def history_length(self) -> int:
        return len(self.history)

    @property
    def history_position(self) -> int:
        return self.history.position

    # ========================================================================
    # COMMIT
    # ========================================================================

    def _commit(self, operation: str, new_forest: Forest, node_id: Optional[str] = None,
                message: str = "") -> MutationResult:
        """Accept new_forest if it differs from the current one and record it."""
        if new_forest is self._forest:
            logger.debug(f"{operation}: no change" + (f" ({node_id})" if node_id else ""))
            return MutationResult(operation=operation, changed=False, node_id=node_id,
                                  message=message or "no change")

        self._forest = new_forest
        self.history.record(new_forest)
        logger.info(f"{operation}: committed" + (f" ({node_id})" if node_id else ""))
        return MutationResult(operation=operation, changed=True, node_id=node_id, message=message)

    # ========================================================================
    # MUTATIONS
    # ========================================================================

    def insert(self, node: Node, parent_id: Optional[str] = None,
               index: Optional[int] = None) -> MutationResult:
        """
        Insert a node under parent_id (root when None) and select it.

        Raises:
            TargetNotFound: parent_id is given but not present
        """
        with self._lock:
            before = {n.id for n in self._forest}
            node = node.model_copy(deep=True)
            new_forest = operations.insert_node(self._forest, node, parent_id, index, self._id_factory)
            inserted = self._inserted_id(new_forest, parent_id, before)
            result = self._commit("insert", new_forest, inserted)
            if MUTATION_CONFIG["select_on_insert"]:
                self.selected_id = inserted
            return result

    def _inserted_id(self, forest: Forest, parent_id: Optional[str], before_roots) -> Optional[str]:
        """Id of the node that an insert just added."""
        if parent_id is None:
            added = [n.id for n in forest if n.id not in before_roots]
            return added[0] if added else None
        old_parent = find_node(self._forest, parent_id)
        new_parent = find_node(forest, parent_id)
        known = {c.id for c in old_parent.children} if old_parent else set()
        added = [c.id for c in new_parent.children if c.id not in known] if new_parent else []
        return added[0] if added else None

    def add_component(self, variant: str, parent_id: Optional[str] = None,
                      index: Optional[int] = None) -> MutationResult:
        """Materialise a catalog variant with its defaults and insert it."""
        return self.insert(materialize(variant), parent_id, index)

    def remove(self, node_id: str) -> MutationResult:
        """Delete a node and its subtree; absent ids are a no-op."""
        with self._lock:
            removed = find_node(self._forest, node_id)
            result = self._commit("remove", operations.remove_node(self._forest, node_id), node_id)
            if result.changed and self.selected_id is not None:
                if self.selected_id == node_id or (removed and is_descendant(removed, self.selected_id)):
                    self.selected_id = None
            return result

    def update(
        self,
        node_id: str,
        attributes: Optional[Dict[str, Any]] = None,
        styles: Optional[Dict[str, List[str]]] = None,
        display_name: Optional[str] = None,
    ) -> MutationResult:
        """
        Merge attributes and replace style groups of one node.

        Raises:
            TargetNotFound: node_id is not present
            InvalidStyleGroup: unknown bucket or breakpoint name
        """
        with self._lock:
            new_forest = operations.update_node(self._forest, node_id, attributes, styles, display_name)
            return self._commit("update", new_forest, node_id)

    def move(self, active_id: str, over_id: str, position: Position = "after") -> MutationResult:
        """Relocate a subtree; illegal or ineffective moves are no-ops."""
        with self._lock:
            new_forest = operations.move_node(self._forest, active_id, over_id, position)
            return self._commit("move", new_forest, active_id)

    def move_to_root_end(self, active_id: str) -> MutationResult:
        """
        Append an existing node after the last root node.

        Kept apart from move(): the canvas root has no node to be "after".
        """
        with self._lock:
            if not self._forest or find_node(self._forest, active_id) is None:
                return self._commit("move", self._forest, active_id)
            last = self._forest[-1]
            if last.id == active_id:
                return self._commit("move", self._forest, active_id)
            new_forest = operations.move_node(self._forest, active_id, last.id, "after")
            return self._commit("move", new_forest, active_id)

    def duplicate(self, node_id: str) -> MutationResult:
        """Clone a subtree with fresh ids as the next sibling and select the clone."""
        with self._lock:
            new_forest = operations.duplicate_node(self._forest, node_id, self._id_factory)
            if new_forest is self._forest:
                return self._commit("duplicate", new_forest, node_id)
            siblings = siblings_of(new_forest, node_id)
            position = [n.id for n in siblings].index(node_id)
            clone_id = siblings[position + 1].id
            result = self._commit("duplicate", new_forest, clone_id)
            self.selected_id = clone_id
            return result

    def copy(self, node_id: str) -> MutationResult:
        """Put a fresh-id clone of a subtree on the clipboard (no history entry)."""
        with self._lock:
            node = find_node(self._forest, node_id)
            if node is None:
                logger.debug(f"copy: '{node_id}' not found")
                return MutationResult(operation="copy", changed=False, node_id=node_id, message="not found")
            self._clipboard = reassign_ids(node.model_copy(deep=True), None, self._id_factory)
            return MutationResult(operation="copy", changed=False, node_id=node_id, message="copied")

    def paste(self, parent_id: Optional[str] = None) -> MutationResult:
        """
        Insert a fresh clone of the clipboard.

        Raises:
            TargetNotFound: parent_id is given but not present
        """
        with self._lock:
            if self._clipboard is None:
                logger.debug("paste: clipboard empty")
                return MutationResult(operation="paste", changed=False, message="clipboard empty")
            clone = reassign_ids(self._clipboard, parent_id, self._id_factory)
            result = self.insert(clone, parent_id)
            return result.model_copy(update={"operation": "paste"})

    def clear(self) -> MutationResult:
        """Remove every node."""
        with self._lock:
            new_forest: Forest = [] if self._forest else self._forest
            result = self._commit("clear", new_forest)
            if result.changed:
                self.selected_id = None
            return result

    def load(self, forest: Forest) -> MutationResult:
        """Replace the forest with an externally loaded one (normalised first)."""
        with self._lock:
            normalized = normalize_forest(forest, self._id_factory)
            if normalized == self._forest:
                return self._commit("load", self._forest)
            self.selected_id = None
            return self._commit("load", normalized)

    def select(self, node_id: Optional[str]) -> bool:
        """Select a node (None clears). Returns False for an absent id."""
        with self._lock:
            if node_id is not None and find_node(self._forest, node_id) is None:
                return False
            self.selected_id = node_id
            return True

    # ========================================================================
    # HISTORY
    # ========================================================================

    def undo(self) -> MutationResult:
        """Step back one history entry; a no-op at the start of the log."""
        with self._lock:
            restored = self.history.undo()
            return self._restore("undo", restored)

    def redo(self) -> MutationResult:
        """Step forward one history entry; a no-op at the end of the log."""
        with self._lock:
            restored = self.history.redo()
            return self._restore("redo", restored)

    def _restore(self, operation: str, restored: Optional[Forest]) -> MutationResult:
        if restored is None:
            logger.debug(f"{operation}: nothing to {operation}")
            return MutationResult(operation=operation, changed=False, message=f"nothing to {operation}")
        self._forest = restored
        if MUTATION_CONFIG["clear_selection_on_undo"]:
            self.selected_id = None
        logger.info(f"{operation}: history position {self.history.position}/{len(self.history)}")
        return MutationResult(operation=operation, changed=True)

    # ========================================================================
    # PLACEMENT
    # ========================================================================

    def apply_intent(self, active: ActiveDescriptor, intent: Optional[PlacementIntent]) -> MutationResult:
        """
        Commit exactly one engine call for a resolved drop.

        Args:
            active: The dragged item
            intent: Resolver output; None means the drop was rejected

        Returns:
            MutationResult of the committed call
        """
        if intent is None:
            logger.debug(f"drop: rejected for '{active.id}'")
            return MutationResult(operation="drop", changed=False, node_id=active.id, message="rejected")

        if isinstance(intent, InsertIntent):
            if active.node is not None:
                node = active.node
            else:
                node = materialize(active.variant)
            return self.insert(node, intent.parent_id, intent.index)

        if isinstance(intent, MoveIntent):
            if intent.over_id is None:
                return self.move_to_root_end(active.id)
            return self.move(active.id, intent.over_id, intent.position)

        raise TypeError(f"Unsupported placement intent: {intent!r}")
