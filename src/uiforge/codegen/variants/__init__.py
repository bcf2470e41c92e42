"""
Per-variant rendering table.

RENDER_TABLE maps every catalog variant to its rule; lookups that miss fall
back to rules.FALLBACK_RULE.
"""

from typing import Dict

from ..rules import FALLBACK_RULE, RenderRule
from . import basics, buttons, cards, forms, navigation, sections

RENDER_TABLE: Dict[str, RenderRule] = {}
for _module in (buttons, cards, navigation, forms, sections, basics):
    RENDER_TABLE.update(_module.RULES)


def rule_for(variant: str) -> RenderRule:
    return RENDER_TABLE.get(variant, FALLBACK_RULE)


__all__ = ["RENDER_TABLE", "rule_for"]
