"""
Class-list composition.

Tokens are emitted bucket by bucket in a fixed order, then each breakpoint
overlay with its marker prefix. Empty tokens are dropped and repeats keep
their first position.
"""

from typing import List

from uiforge.schemas import BREAKPOINTS, STYLE_BUCKETS, StyleGroups


def collect_class_tokens(styles: StyleGroups) -> List[str]:
    """Ordered, de-duplicated class tokens for one node."""
    tokens: List[str] = []
    for bucket in STYLE_BUCKETS:
        tokens.extend(getattr(styles, bucket))
    for breakpoint in BREAKPOINTS:
        tokens.extend(f"{breakpoint}:{token}" for token in getattr(styles.responsive, breakpoint) if token)

    seen = set()
    unique: List[str] = []
    for token in tokens:
        token = token.strip() if isinstance(token, str) else ""
        if not token or token in seen:
            continue
        seen.add(token)
        unique.append(token)
    return unique


def compose_class_string(styles: StyleGroups) -> str:
    return " ".join(collect_class_tokens(styles))
