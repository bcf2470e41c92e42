"""
CLI tests (typer CliRunner, machine mode JSON output).
"""

import json
import zipfile

import pytest
from typer.testing import CliRunner

from uiforge import __version__
from uiforge.catalog import REGISTRY
from uiforge.main import app
from uiforge.storage import SnapshotStore

runner = CliRunner()


def invoke(project, *args):
    return runner.invoke(app, [*args, "--project", str(project)])


def data(result):
    """Last output line parsed as JSON."""
    return json.loads(result.output.strip().splitlines()[-1])


@pytest.fixture
def canvas(temp_project):
    """Project with a container holding a paragraph. Returns (project, container_id, paragraph_id)."""
    container = data(invoke(temp_project, "add", "container"))["node_id"]
    paragraph = data(invoke(temp_project, "add", "paragraph", "--parent", container))["node_id"]
    return temp_project, container, paragraph


class TestDocumentCommands:
    """Test editing commands against a persisted document."""

    def test_add_and_show(self, canvas):
        project, container, paragraph = canvas
        shown = data(invoke(project, "show", "--json"))
        assert shown["count"] == 2
        assert shown["elements"][0]["id"] == container
        assert shown["elements"][0]["children"][0]["id"] == paragraph
        assert (project / ".uiforge" / "document.json").exists()

    def test_add_unknown_variant(self, temp_project):
        result = invoke(temp_project, "add", "hologram")
        assert result.exit_code == 1
        assert data(result)["code"] == "UNKNOWN_VARIANT"

    def test_add_missing_parent(self, temp_project):
        result = invoke(temp_project, "add", "paragraph", "--parent", "ghost")
        assert result.exit_code == 1
        error = data(result)
        assert error["code"] == "NODE_NOT_FOUND"
        assert error["input"] == "ghost"

    def test_update(self, canvas):
        project, _, paragraph = canvas
        result = invoke(project, "update", paragraph, "--set", "text=Hello", "--set", "count=3",
                        "--style", "spacing=p-4,m-2", "--name", "Intro")
        assert result.exit_code == 0
        assert data(result)["changed"]

        node = data(invoke(project, "show", "--json"))["elements"][0]["children"][0]
        assert node["attributes"]["text"] == "Hello"
        assert node["attributes"]["count"] == 3
        assert node["styles"]["spacing"] == ["p-4", "m-2"]
        assert node["display_name"] == "Intro"

    def test_update_errors(self, canvas):
        project, _, paragraph = canvas
        missing = invoke(project, "update", "ghost", "--set", "text=x")
        assert missing.exit_code == 1
        assert data(missing)["code"] == "NODE_NOT_FOUND"

        bad_group = invoke(project, "update", paragraph, "--style", "shadows=shadow")
        assert bad_group.exit_code == 1
        assert data(bad_group)["code"] == "INVALID_STYLE_GROUP"

        nothing = invoke(project, "update", paragraph)
        assert nothing.exit_code == 1
        assert data(nothing)["code"] == "MISSING_ARGUMENT"

    def test_move_and_self_move(self, canvas):
        project, container, paragraph = canvas
        assert not data(invoke(project, "move", container, paragraph, "--position", "inside"))["changed"]
        assert data(invoke(project, "move", paragraph, container, "--position", "before"))["changed"]
        shown = data(invoke(project, "show", "--json"))
        assert [e["id"] for e in shown["elements"]] == [paragraph, container]

    def test_invalid_position(self, canvas):
        project, container, paragraph = canvas
        result = invoke(project, "move", paragraph, container, "--position", "sideways")
        assert result.exit_code == 1
        assert data(result)["code"] == "INVALID_POSITION"

    def test_remove_is_idempotent(self, canvas):
        project, container, _ = canvas
        assert data(invoke(project, "remove", container))["changed"]
        assert not data(invoke(project, "remove", container))["changed"]
        assert data(invoke(project, "show", "--json"))["count"] == 0

    def test_duplicate(self, canvas):
        project, container, _ = canvas
        result = data(invoke(project, "duplicate", container))
        assert result["changed"]
        assert result["node_id"] != container
        assert data(invoke(project, "show", "--json"))["count"] == 4

    def test_drop_new_into_container(self, canvas):
        project, container, _ = canvas
        result = data(invoke(project, "drop", "--new", "primary-button", f"drop-{container}"))
        assert result["changed"]
        assert result["indicator"] == {"target_id": container, "position": "inside"}
        shown = data(invoke(project, "show", "--json"))
        assert shown["elements"][0]["children"][-1]["variant"] == "primary-button"

    def test_drop_existing_into_itself_is_rejected(self, canvas):
        project, container, paragraph = canvas
        result = data(invoke(project, "drop", container, paragraph))
        assert not result["changed"]
        assert result["indicator"] is None

    def test_drop_to_canvas_root(self, canvas):
        project, container, paragraph = canvas
        assert data(invoke(project, "drop", paragraph, "canvas-root"))["changed"]
        shown = data(invoke(project, "show", "--json"))
        assert [e["id"] for e in shown["elements"]] == [container, paragraph]

    def test_drop_argument_count(self, temp_project):
        result = invoke(temp_project, "drop", "canvas-root")
        assert result.exit_code == 1
        assert data(result)["code"] == "MISSING_ARGUMENT"

    def test_load(self, temp_project):
        source = temp_project / "import.json"
        source.write_text(json.dumps([{"id": "a", "variant": "heading", "attributes": {"text": "T"}}]))
        result = data(invoke(temp_project, "load", str(source)))
        assert result["changed"]
        assert result["elements"] == 1


class TestHistoryCommands:
    """Undo/redo persists across invocations."""

    def test_undo_redo(self, canvas):
        project, _, _ = canvas
        undone = data(invoke(project, "undo"))
        assert undone["changed"]
        assert undone["can_redo"]
        assert data(invoke(project, "show", "--json"))["count"] == 1

        redone = data(invoke(project, "redo"))
        assert redone["changed"]
        assert data(invoke(project, "show", "--json"))["count"] == 2
        assert not data(invoke(project, "redo"))["changed"]

    def test_history_listing(self, canvas):
        project, _, _ = canvas
        listing = data(invoke(project, "history", "--json"))
        assert listing["length"] == 3
        assert listing["position"] == 3
        assert [e["elements"] for e in listing["entries"]] == [0, 1, 2]
        assert listing["entries"][-1]["current"]

    def test_project_history_capacity(self, temp_project):
        config = temp_project / ".uiforge" / "config.json"
        config.parent.mkdir(parents=True, exist_ok=True)
        config.write_text(json.dumps({"history": {"capacity": 2}}))

        for _ in range(5):
            assert invoke(temp_project, "add", "paragraph").exit_code == 0

        listing = data(invoke(temp_project, "history", "--json"))
        assert listing["length"] == 2
        assert SnapshotStore.for_project(temp_project).load_history().capacity == 2
        assert data(invoke(temp_project, "show", "--json"))["count"] == 5

    def test_clear_then_undo(self, canvas):
        project, _, _ = canvas
        assert data(invoke(project, "clear"))["changed"]
        assert data(invoke(project, "show", "--json"))["count"] == 0
        invoke(project, "undo")
        assert data(invoke(project, "show", "--json"))["count"] == 2


class TestCodegenCommands:
    """Test generate and export."""

    def test_generate_json(self, canvas):
        project, _, _ = canvas
        result = data(invoke(project, "generate", "--json", "--name", "Landing Page"))
        assert result["component"] == "LandingPage"
        assert result["flavor"] == "loose"
        assert "export default function LandingPage()" in result["code"]

    def test_generate_plain_typed(self, canvas):
        project, _, _ = canvas
        result = invoke(project, "generate", "--flavor", "typed", "--no-imports")
        assert result.exit_code == 0
        assert result.output.startswith("interface GeneratedComponentProps")

    def test_generate_to_file(self, canvas):
        project, _, _ = canvas
        target = project / "out" / "Page.jsx"
        result = data(invoke(project, "generate", "--output", str(target)))
        assert result["path"] == str(target)
        assert "export default function" in target.read_text(encoding="utf-8")

    def test_generate_invalid_flavor(self, temp_project):
        result = invoke(temp_project, "generate", "--flavor", "fancy")
        assert result.exit_code == 1
        assert data(result)["code"] == "INVALID_FLAVOR"

    def test_export_project(self, canvas):
        project, _, _ = canvas
        result = data(invoke(project, "export", str(project / "dist"), "--format", "project", "--name", "Site"))
        with zipfile.ZipFile(result["path"]) as archive:
            assert "src/components/Site.tsx" in archive.namelist()

    def test_export_invalid_format(self, temp_project):
        result = invoke(temp_project, "export", str(temp_project), "--format", "vue")
        assert result.exit_code == 1
        assert data(result)["code"] == "INVALID_FORMAT"


class TestCatalogAndMisc:
    """Test catalog listing, version and human mode."""

    def test_catalog_json(self):
        result = data(runner.invoke(app, ["catalog", "--json"]))
        assert result["count"] == len(REGISTRY)

    def test_catalog_filters(self):
        result = data(runner.invoke(app, ["catalog", "--json", "--category", "forms", "--search", "form"]))
        assert result["count"] >= 1
        assert all(c["category"] == "forms" for c in result["components"])

    def test_catalog_unknown_category(self):
        result = runner.invoke(app, ["catalog", "--category", "widgets"])
        assert result.exit_code == 1
        assert data(result)["code"] == "UNKNOWN_CATEGORY"

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.output.strip() == f"uiforge v{__version__}"

    def test_human_mode_show(self, canvas):
        project, _, _ = canvas
        result = runner.invoke(app, ["--human", "show", "--project", str(project)])
        assert result.exit_code == 0
        assert "container" in result.output
        assert not result.output.lstrip().startswith("{")
