"""
Rendering rules: how one variant maps to markup.

A rule knows the element's tag, the extra attributes it carries besides
className, and the inner content it emits before any children. Attribute
values are loosely typed, so every accessor here coerces to a safe default
instead of raising.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from uiforge.schemas import Node

from .config import HEADING_LEVELS

ContentFn = Callable[[Node, str], List[str]]
AttributesFn = Callable[[Node], List[str]]


@dataclass(frozen=True)
class RenderRule:
    """
    Rendering rule for one variant.

    Attributes:
        tag: Tag name, or a function choosing it from the node
        attributes: Extra attributes after className
        content: Inner lines; receives the node and the inner indent string
        container: Substitute a placeholder when there is neither content nor children
    """
    tag: Union[str, Callable[[Node], str]] = "div"
    attributes: Optional[AttributesFn] = None
    content: Optional[ContentFn] = None
    container: bool = False

    def tag_for(self, node: Node) -> str:
        return self.tag(node) if callable(self.tag) else self.tag

    def attributes_for(self, node: Node) -> List[str]:
        return self.attributes(node) if self.attributes else []

    def content_for(self, node: Node, pad: str) -> List[str]:
        return self.content(node, pad) if self.content else []


# ============================================================================
# ESCAPING AND COERCION
# ============================================================================

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
    ("{", "&#123;"),
    ("}", "&#125;"),
)


def escape(value: Any) -> str:
    """Escape a value for use as JSX text or a quoted attribute."""
    text = value if isinstance(value, str) else str(value)
    for raw, entity in _ESCAPES:
        text = text.replace(raw, entity)
    return text


def as_text(value: Any, default: str = "") -> str:
    """Coerce an attribute value to text; structures and booleans have none."""
    if value is None or isinstance(value, (bool, dict, list, tuple)):
        return default
    text = str(value)
    return text if text else default


def as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def prop(node: Node, key: str, default: str = "") -> str:
    """Text attribute of a node, escaped."""
    return escape(as_text(node.attributes.get(key), default))


def has(node: Node, key: str) -> bool:
    """True when the attribute holds non-empty text."""
    return bool(as_text(node.attributes.get(key)))


def items(node: Node, key: str) -> List[str]:
    """List attribute as escaped strings; anything that is not a list is empty."""
    value = node.attributes.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [escape(as_text(item)) for item in value if not isinstance(item, (dict, list, tuple))]


def records(node: Node, key: str) -> List[Dict[str, Any]]:
    """List-of-objects attribute; non-dict entries are skipped."""
    value = node.attributes.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


def field(record: Dict[str, Any], key: str, default: str = "") -> str:
    """Escaped text field of one record."""
    return escape(as_text(record.get(key), default))


def quoted(name: str, value: str) -> str:
    return f'{name}="{value}"'


# ============================================================================
# ATTRIBUTE BUILDERS
# ============================================================================

def static(*attributes: str) -> AttributesFn:
    """Attributes that do not depend on the node."""
    fixed = list(attributes)
    return lambda node: list(fixed)


def optional_attrs(*pairs: tuple) -> AttributesFn:
    """
    name="value" for each (attribute name, node key) pair whose value is non-empty.
    """
    def _build(node: Node) -> List[str]:
        return [quoted(name, prop(node, key)) for name, key in pairs if has(node, key)]
    return _build


def combine(*builders: AttributesFn) -> AttributesFn:
    def _build(node: Node) -> List[str]:
        result: List[str] = []
        for builder in builders:
            result.extend(builder(node))
        return result
    return _build


# ============================================================================
# CONTENT BUILDERS
# ============================================================================

def text_content(key: str = "text") -> ContentFn:
    """Bare text from one attribute, eligible for inlining."""
    def _content(node: Node, pad: str) -> List[str]:
        return [prop(node, key)] if has(node, key) else []
    return _content


def comment(text: str) -> str:
    """JSX comment; "*/" in the text is broken apart."""
    return f"{{/* {text.replace('*/', '* /')} */}}"


def icon_comment(name: str) -> str:
    return comment(f"Icon: {name}")


def comment_content(text: str) -> ContentFn:
    return lambda node, pad: [f"{pad}{comment(text)}"]


def heading_tag(node: Node) -> str:
    """h1..h6 from the level attribute (string or number), h2 otherwise."""
    level = node.attributes.get("level")
    if isinstance(level, str) and level in HEADING_LEVELS:
        return level
    if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= 6:
        return f"h{level}"
    return "h2"


def list_tag(node: Node) -> str:
    return "ol" if node.attributes.get("ordered") is True else "ul"


# ============================================================================
# FALLBACK
# ============================================================================

def _fallback_attributes(node: Node) -> List[str]:
    return [quoted("data-variant", escape(node.variant))]


FALLBACK_RULE = RenderRule(tag="div", attributes=_fallback_attributes)
