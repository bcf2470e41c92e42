"""
Serializer: walk the forest and emit component source.

The body is rendered once per call; the loose (JSX) and typed (TSX) flavors
only differ in the component wrapper around it, so both flavors of one
forest always share node order and attribute formatting.
"""

from typing import Callable, List, Optional

from uiforge.logging_config import logger
from uiforge.schemas import Flavor, Forest, GeneratedCode, Node

from .classes import compose_class_string
from .config import (
    DEFAULT_COMPONENT_NAME,
    EMPTY_CANVAS_COMMENT,
    EMPTY_CONTAINER_PLACEHOLDER,
    EMPTY_MARKUP_COMMENT,
    INLINE_CONTENT_LIMIT,
    ROOT_INDENT_LEVEL,
    SELF_CLOSING_TAGS,
)
from .formatter import format_code, make_indent, sanitize_component_name
from .rules import escape
from .variants import rule_for

NodeFilter = Callable[[Node], bool]

IMPORT_LINE = "import React from 'react';"


def _visible(nodes: List[Node], node_filter: Optional[NodeFilter]) -> List[Node]:
    if node_filter is None:
        return list(nodes)
    return [node for node in nodes if node_filter(node)]


def _is_inline(content: str) -> bool:
    return "\n" not in content and "<" not in content and len(content.strip()) < INLINE_CONTENT_LIMIT


def _indent_text(text: str, pad: str) -> str:
    """Bare text inside a multi-line element: every non-blank line gets the inner indent."""
    return "\n".join(f"{pad}{line}" if line.strip() else line for line in text.split("\n"))


def render_node(node: Node, level: int = 0, node_filter: Optional[NodeFilter] = None) -> str:
    """
    Render one node and its subtree.

    Args:
        node: Node to render
        level: Indentation level of the opening tag
        node_filter: Predicate; children for which it is False are skipped with their subtrees

    Returns:
        Markup text (no trailing newline)
    """
    rule = rule_for(node.variant)
    indent = make_indent(level)
    pad = make_indent(level + 1)
    tag = rule.tag_for(node)

    attributes = []
    class_string = compose_class_string(node.styles)
    if class_string:
        attributes.append(f'className="{escape(class_string)}"')
    attributes.extend(rule.attributes_for(node))
    attribute_string = f" {' '.join(attributes)}" if attributes else ""

    if tag in SELF_CLOSING_TAGS:
        return f"{indent}<{tag}{attribute_string} />"

    parts = rule.content_for(node, pad)
    children = _visible(node.children, node_filter)
    parts.extend(render_node(child, level + 1, node_filter) for child in children)
    if rule.container and not parts:
        parts = [f"{pad}{EMPTY_CONTAINER_PLACEHOLDER}"]

    content = "\n".join(parts)
    if not content.strip():
        return f"{indent}<{tag}{attribute_string}></{tag}>"
    if _is_inline(content):
        return f"{indent}<{tag}{attribute_string}>{content.strip()}</{tag}>"

    block = [part if part[:1].isspace() else _indent_text(part, pad) for part in parts]
    return f"{indent}<{tag}{attribute_string}>\n" + "\n".join(block) + f"\n{indent}</{tag}>"


def render_forest(forest: Forest, level: int = 0, node_filter: Optional[NodeFilter] = None) -> str:
    return "\n".join(render_node(node, level, node_filter) for node in _visible(forest, node_filter))


def _render_body(forest: Forest, node_filter: Optional[NodeFilter]) -> str:
    body = render_forest(forest, ROOT_INDENT_LEVEL, node_filter)
    return body or f"{make_indent(ROOT_INDENT_LEVEL)}{EMPTY_CANVAS_COMMENT}"


def wrap_component(body: str, component_name: str, flavor: Flavor, include_imports: bool = True) -> str:
    """
    Wrap a rendered body in a default-exported function component.

    The typed flavor adds a props interface and annotates the props parameter.
    """
    name = sanitize_component_name(component_name)
    header = f"{IMPORT_LINE}\n\n" if include_imports else ""

    if flavor == "typed":
        return (
            f"{header}"
            f"interface {name}Props {{\n"
            f"  className?: string;\n"
            f"}}\n"
            f"\n"
            f"export default function {name}({{ className }}: {name}Props) {{\n"
            f"  return (\n"
            f"    <div className={{`w-full ${{className || ''}}`}}>\n"
            f"{body}\n"
            f"    </div>\n"
            f"  );\n"
            f"}}\n"
        )

    return (
        f"{header}"
        f"export default function {name}() {{\n"
        f"  return (\n"
        f'    <div className="w-full">\n'
        f"{body}\n"
        f"    </div>\n"
        f"  );\n"
        f"}}\n"
    )


def serialize(
    forest: Forest,
    flavor: Flavor = "loose",
    component_name: str = DEFAULT_COMPONENT_NAME,
    node_filter: Optional[NodeFilter] = None,
    include_imports: bool = True,
) -> str:
    """
    Whole-document source text for one flavor.

    An empty forest yields the empty-component skeleton, never an empty string.
    """
    body = _render_body(forest, node_filter)
    return format_code(wrap_component(body, component_name, flavor, include_imports))


def generate_code(
    forest: Forest,
    component_name: str = DEFAULT_COMPONENT_NAME,
    node_filter: Optional[NodeFilter] = None,
    include_imports: bool = True,
) -> GeneratedCode:
    """
    Both flavors from a single walk.

    Args:
        forest: Root nodes
        component_name: Component name (sanitised)
        node_filter: Optional predicate pruning subtrees before the walk
        include_imports: Emit the React import line

    Returns:
        GeneratedCode with loose and typed text
    """
    body = _render_body(forest, node_filter)
    logger.debug(f"Generated body for {len(forest)} root node(s) as '{sanitize_component_name(component_name)}'")
    return GeneratedCode(
        loose=format_code(wrap_component(body, component_name, "loose", include_imports)),
        typed=format_code(wrap_component(body, component_name, "typed", include_imports)),
    )


def generate_markup_only(forest: Forest) -> str:
    """Markup of the root nodes without any component wrapper."""
    if not forest:
        return EMPTY_MARKUP_COMMENT
    return render_forest(forest, 0)


def generate_preview_code(forest: Forest) -> str:
    """Markup inside the canvas wrapper div, for live previews."""
    if not forest:
        return f'<div className="w-full">\n  {EMPTY_CANVAS_COMMENT}\n</div>'
    return f'<div className="w-full">\n{render_forest(forest, 1)}\n</div>'


def generate_snippet(forest: Forest) -> GeneratedCode:
    """Formatted markup without wrapper, in both flavors."""
    snippet = format_code(render_forest(forest, 0))
    return GeneratedCode(loose=snippet, typed=snippet)


def generate_element_code(node: Node) -> GeneratedCode:
    """Formatted markup of a single subtree, in both flavors."""
    markup = format_code(render_node(node, 0))
    return GeneratedCode(loose=markup, typed=markup)
