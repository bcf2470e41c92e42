"""
Configuration for code generation.
"""

from uiforge.user_config import get_user_config

INDENT_SIZE = 2
INDENT_CHAR = " "

# Root elements sit inside `return (`, `<div className="w-full">`
ROOT_INDENT_LEVEL = 3

# Text content shorter than this (and without markup) stays on the tag's line
INLINE_CONTENT_LIMIT = 60

SELF_CLOSING_TAGS = frozenset({"img", "hr", "input", "br", "meta", "link"})

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")

EMPTY_CANVAS_COMMENT = "{/* Add elements to your canvas */}"
EMPTY_MARKUP_COMMENT = "{/* No elements */}"
EMPTY_CONTAINER_PLACEHOLDER = "{/* Drop elements here */}"

DEFAULT_COMPONENT_NAME = "GeneratedComponent"
FALLBACK_COMPONENT_NAME = "Component"

FILE_EXTENSIONS = {
    "loose": "jsx",
    "typed": "tsx",
}


def get_codegen_config(project_root=None):
    """Codegen settings merged with user config."""
    user_config = get_user_config(project_root)
    return {
        "component_name": user_config.get("codegen.component_name", DEFAULT_COMPONENT_NAME),
        "flavor": user_config.get("codegen.flavor", "loose"),
    }
