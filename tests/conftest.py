"""
Pytest configuration for the uiforge test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Temporary project directories
- Deterministic node ids and sample forests
"""

import itertools
import os
import shutil
import tempfile
from pathlib import Path

import pytest

from uiforge.logging_config import setup_logging
from uiforge.schemas import Node, StyleGroups


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for machine-mode operation."""
    os.environ.setdefault("UIFORGE_MACHINE_MODE", "1")
    os.environ.pop("UIFORGE_HUMAN_MODE", None)
    os.environ.pop("UIFORGE_FILE_LOGGING", None)


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture(autouse=True)
def reset_cli_mode():
    """CLIConfig keeps class-level state; start every test in default mode."""
    from uiforge.cli.config import CLIConfig
    CLIConfig.reset()
    yield
    CLIConfig.reset()


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="uiforge_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_project(temp_dir):
    """Empty project root; documents land in <root>/.uiforge/."""
    return temp_dir


# ============================================================================
# TREE FIXTURES
# ============================================================================

@pytest.fixture
def id_factory():
    """Deterministic id generator: n1, n2, n3, ..."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


def build_node(node_id, variant="paragraph", children=None, parent_id=None, **attributes):
    """Node with parent links set on the whole subtree."""
    children = children or []
    fixed = [child.model_copy(update={"parent_id": node_id}) for child in children]
    return Node(
        id=node_id,
        variant=variant,
        attributes=attributes,
        children=fixed,
        parent_id=parent_id,
    )


@pytest.fixture
def make_node():
    return build_node


@pytest.fixture
def sample_forest():
    """
    Two roots:

        box (container)
        ├── title (heading)
        └── row (flex-row)
            └── cta (primary-button)
        footer-text (paragraph)
    """
    cta = build_node("cta", "primary-button", text="Go")
    row = build_node("row", "flex-row", children=[cta])
    title = build_node("title", "heading", text="Hello", level="h1")
    box = build_node("box", "container", children=[title, row])
    box = box.model_copy(update={"styles": StyleGroups(layout=["mx-auto"], spacing=["p-4"])})
    footer = build_node("footer-text", "paragraph", text="Bye")
    return [box, footer]
