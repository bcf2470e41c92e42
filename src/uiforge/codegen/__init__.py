"""
Codegen package: deterministic serialization of a forest to component source.
"""

from .classes import collect_class_tokens, compose_class_string
from .formatter import format_code, make_indent, sanitize_component_name
from .rules import FALLBACK_RULE, RenderRule, escape
from .serializer import (
    generate_code,
    generate_element_code,
    generate_markup_only,
    generate_preview_code,
    generate_snippet,
    render_forest,
    render_node,
    serialize,
    wrap_component,
)
from .variants import RENDER_TABLE, rule_for
from .config import DEFAULT_COMPONENT_NAME, FILE_EXTENSIONS, get_codegen_config

__all__ = [
    # Entry points
    "serialize",
    "generate_code",
    "generate_markup_only",
    "generate_preview_code",
    "generate_snippet",
    "generate_element_code",

    # Building blocks
    "render_node",
    "render_forest",
    "wrap_component",
    "compose_class_string",
    "collect_class_tokens",
    "format_code",
    "make_indent",
    "sanitize_component_name",
    "escape",

    # Dispatch
    "RenderRule",
    "FALLBACK_RULE",
    "RENDER_TABLE",
    "rule_for",

    # Configuration
    "DEFAULT_COMPONENT_NAME",
    "FILE_EXTENSIONS",
    "get_codegen_config",
]
