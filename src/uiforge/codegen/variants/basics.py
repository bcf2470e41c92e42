"""Layout, media and text variants."""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import (
    RenderRule,
    combine,
    comment_content,
    heading_tag,
    icon_comment,
    items,
    list_tag,
    optional_attrs,
    prop,
    static,
    text_content,
)


def _icon(node: Node, pad: str) -> List[str]:
    return [icon_comment(prop(node, 'name', 'Star'))]


def _list_items(node: Node, pad: str) -> List[str]:
    return [f"{pad}<li>{item}</li>" for item in items(node, "items")]


_LAYOUT_CONTAINERS = ("container", "grid-2-col", "grid-3-col", "grid-4-col", "flex-row", "flex-column")

RULES: Dict[str, RenderRule] = {
    variant: RenderRule(tag="div", container=True) for variant in _LAYOUT_CONTAINERS
}

RULES.update({
    # Layout
    "divider": RenderRule(tag="hr"),
    "spacer": RenderRule(tag="div", content=comment_content("Spacer")),

    # Media
    "image": RenderRule(tag="img", attributes=optional_attrs(("src", "src"), ("alt", "alt"))),
    "avatar": RenderRule(tag="img", attributes=optional_attrs(("src", "src"), ("alt", "alt"))),
    "icon": RenderRule(tag="span", content=_icon),
    "video": RenderRule(
        tag="iframe",
        attributes=combine(optional_attrs(("src", "src")), static("allowFullScreen", 'frameBorder="0"')),
    ),

    # Text
    "heading": RenderRule(tag=heading_tag, content=text_content("text")),
    "paragraph": RenderRule(tag="p", content=text_content("text")),
    "badge": RenderRule(tag="span", content=text_content("text")),
    "link": RenderRule(tag="a", attributes=optional_attrs(("href", "href")), content=text_content("text")),
    "list": RenderRule(tag=list_tag, content=_list_items),
})
