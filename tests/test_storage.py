"""
Tests for snapshot persistence and autosave.
"""

import json
import time

import pytest

from uiforge.exceptions import StorageError
from uiforge.mutation import HistoryManager, MutationFacade
from uiforge.schemas import Node
from uiforge.storage import AutoSaver, SnapshotStore


@pytest.fixture
def store(temp_project):
    return SnapshotStore.for_project(temp_project)


class TestSnapshotStore:
    """Test SnapshotStore load/save."""

    def test_missing_file_is_empty_forest(self, store):
        assert store.load_snapshot() == []
        assert store.load_history() is None

    def test_round_trip(self, store, sample_forest):
        store.save_snapshot(sample_forest)
        assert store.load_snapshot() == sample_forest

        data = json.loads(store.document_path.read_text(encoding="utf-8"))
        assert data["version"] == 1
        assert [e["id"] for e in data["elements"]] == ["box", "footer-text"]

    def test_atomic_write_leaves_no_temp_files(self, store, sample_forest):
        store.save_snapshot(sample_forest)
        store.save_snapshot([])
        leftovers = [p.name for p in store.document_path.parent.iterdir() if p.name.startswith(".tmp_")]
        assert leftovers == []
        assert store.load_snapshot() == []

    def test_corrupt_file_loads_empty(self, store):
        store.document_path.parent.mkdir(parents=True)
        store.document_path.write_text("{not json", encoding="utf-8")
        assert store.load_snapshot() == []

    def test_invalid_elements_load_empty(self, store):
        store.document_path.parent.mkdir(parents=True)
        store.document_path.write_text(json.dumps({"elements": [{"id": "x"}]}), encoding="utf-8")
        assert store.load_snapshot() == []

    def test_bare_list_is_accepted(self, store):
        store.document_path.parent.mkdir(parents=True)
        store.document_path.write_text(json.dumps([{"id": "x", "variant": "divider"}]), encoding="utf-8")
        assert [n.id for n in store.load_snapshot()] == ["x"]

    def test_history_round_trip(self, store, sample_forest):
        history = HistoryManager(5)
        history.record([])
        history.record(sample_forest)
        store.save_history(history.to_log())

        log = store.load_history()
        assert log.index == 1
        assert HistoryManager.from_log(log).current() == sample_forest

    def test_unwritable_destination_raises(self, temp_dir):
        blocker = temp_dir / "file"
        blocker.write_text("x")
        store = SnapshotStore(blocker / "document.json")
        with pytest.raises(StorageError):
            store.save_snapshot([])

    def test_clear(self, store, sample_forest):
        store.save_snapshot(sample_forest)
        store.clear()
        assert not store.document_path.exists()


class TestAutoSaver:
    """Test the background autosave loop."""

    def test_save_now_skips_unchanged(self, store, id_factory):
        engine = MutationFacade(id_factory=id_factory)
        saver = AutoSaver(engine, store, interval=60)
        assert saver.save_now()
        assert not saver.save_now()
        engine.insert(Node(variant="divider"))
        assert saver.save_now()
        assert saver.saves == 2
        assert [n.id for n in store.load_snapshot()] == ["n1"]

    def test_background_thread_saves_and_stop_flushes(self, store, id_factory):
        engine = MutationFacade(id_factory=id_factory)
        saver = AutoSaver(engine, store, interval=0.05, save_history=True)
        saver.start()
        try:
            engine.insert(Node(variant="divider"))
            deadline = time.time() + 5
            while time.time() < deadline and not store.document_path.exists():
                time.sleep(0.02)
            assert store.document_path.exists()
        finally:
            engine.insert(Node(variant="spacer"))
            saver.stop()

        assert not saver.running
        assert [n.id for n in store.load_snapshot()] == ["n1", "n2"]
        assert store.load_history().index == 2

    def test_for_project_reads_configured_interval(self, temp_project):
        config = temp_project / ".uiforge" / "config.json"
        config.parent.mkdir(parents=True, exist_ok=True)
        config.write_text(json.dumps({"storage": {"autosave_interval": 0.25}}))

        saver = AutoSaver.for_project(MutationFacade(), temp_project)
        assert saver.interval == 0.25
        assert saver.save_history
        assert saver.store.document_path == temp_project / ".uiforge" / "document.json"

    def test_saved_history_matches_saved_document(self, store, id_factory):
        engine = MutationFacade(id_factory=id_factory)
        saver = AutoSaver(engine, store, interval=60, save_history=True)
        engine.insert(Node(variant="divider"))
        engine.insert(Node(variant="spacer"))
        saver.save_now()

        log = store.load_history()
        assert log.entries[log.index].elements == store.load_snapshot()

    def test_start_twice_is_harmless(self, store):
        saver = AutoSaver(MutationFacade(), store, interval=60)
        saver.start()
        saver.start()
        assert saver.running
        saver.stop(flush=False)
        assert not saver.running
