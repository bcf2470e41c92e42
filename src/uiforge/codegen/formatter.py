"""
Post-formatting of generated source text.
"""

import re

from .config import FALLBACK_COMPONENT_NAME, INDENT_CHAR, INDENT_SIZE

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_NAME_CHARS = re.compile(r"[^a-zA-Z0-9]")


def make_indent(level: int) -> str:
    return INDENT_CHAR * (level * INDENT_SIZE)


def format_code(code: str) -> str:
    """
    Normalise generated code.

    Runs of blank lines collapse to one, leading whitespace is rounded to the
    nearest indent level, and the result is trimmed.
    """
    collapsed = _EXCESS_BLANK_LINES.sub("\n\n", code)

    lines = []
    for line in collapsed.split("\n"):
        content = line.lstrip()
        if not content:
            lines.append("")
            continue
        width = len(line) - len(content)
        level = (width + INDENT_SIZE // 2) // INDENT_SIZE
        lines.append(make_indent(level) + content)

    return "\n".join(lines).strip()


def sanitize_component_name(name: str) -> str:
    """Keep ASCII letters and digits only; an empty result becomes 'Component'."""
    return _NAME_CHARS.sub("", name or "") or FALLBACK_COMPONENT_NAME
