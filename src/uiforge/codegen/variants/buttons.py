"""Button variants."""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import RenderRule, combine, icon_comment, optional_attrs, prop, static, text_content


def _icon_button(node: Node, pad: str) -> List[str]:
    return [f"{pad}{icon_comment(prop(node, 'icon', 'Plus'))}"]


def _loading_button(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<span className="animate-spin mr-2">...</span>']
    text = prop(node, "text")
    if text:
        lines.append(f"{pad}{text}")
    return lines


_TEXT_BUTTONS = ("primary-button", "secondary-button", "outline-button", "ghost-button", "gradient-button")

RULES: Dict[str, RenderRule] = {
    variant: RenderRule(tag="button", attributes=static('type="button"'), content=text_content("text"))
    for variant in _TEXT_BUTTONS
}

RULES.update({
    "icon-button": RenderRule(
        tag="button",
        attributes=combine(static('type="button"'), optional_attrs(("aria-label", "ariaLabel"))),
        content=_icon_button,
    ),
    "loading-button": RenderRule(
        tag="button",
        attributes=static('type="button"', "disabled"),
        content=_loading_button,
    ),
    "button-group": RenderRule(tag="div", container=True),
})
