"""
Card variants.

Cards render a fixed inner layout from their attributes; only simple-card
accepts dropped children.
"""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import RenderRule, has, icon_comment, items, prop


def _simple_card(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "title"):
        lines.append(f'{pad}<h3 className="text-lg font-semibold">{prop(node, "title")}</h3>')
    if has(node, "description"):
        lines.append(f'{pad}<p className="text-gray-600 mt-2">{prop(node, "description")}</p>')
    return lines


def _product_card(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "image"):
        lines.append(
            f'{pad}<img src="{prop(node, "image")}" alt="{prop(node, "title", "Product")}" '
            f'className="w-full h-48 object-cover" />'
        )
    lines.append(f'{pad}<div className="p-4">')
    if has(node, "title"):
        lines.append(f'{pad}  <h3 className="font-semibold">{prop(node, "title")}</h3>')
    if has(node, "description"):
        lines.append(f'{pad}  <p className="text-sm text-gray-600 mt-1">{prop(node, "description")}</p>')
    if has(node, "price"):
        lines.append(f'{pad}  <p className="text-lg font-bold text-blue-600 mt-2">{prop(node, "price")}</p>')
    lines.append(f"{pad}</div>")
    return lines


def _pricing_card(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="text-center">']
    if has(node, "tier"):
        lines.append(f'{pad}  <h3 className="text-xl font-semibold">{prop(node, "tier")}</h3>')
    if has(node, "price"):
        lines.append(
            f'{pad}  <p className="text-4xl font-bold mt-4">{prop(node, "price")}'
            f'<span className="text-base font-normal text-gray-600">{prop(node, "period", "/month")}</span></p>'
        )
    lines.append(f"{pad}</div>")
    if isinstance(node.attributes.get("features"), list):
        lines.append(f'{pad}<ul className="mt-6 space-y-3">')
        for feature in items(node, "features"):
            lines.append(
                f'{pad}  <li className="flex items-center gap-2"><span className="text-green-500">&#10003;</span>{feature}</li>'
            )
        lines.append(f"{pad}</ul>")
    if has(node, "ctaText"):
        lines.append(
            f'{pad}<button className="w-full mt-8 px-4 py-3 bg-blue-600 text-white rounded-lg font-medium '
            f'hover:bg-blue-700 transition-colors">{prop(node, "ctaText")}</button>'
        )
    return lines


def _testimonial_card(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "quote"):
        lines.append(f'{pad}<p className="text-gray-600 italic">"{prop(node, "quote")}"</p>')
    lines.append(f'{pad}<div className="flex items-center mt-4 gap-3">')
    if has(node, "avatar"):
        lines.append(
            f'{pad}  <img src="{prop(node, "avatar")}" alt="{prop(node, "author", "Author")}" '
            f'className="w-12 h-12 rounded-full object-cover" />'
        )
    lines.append(f"{pad}  <div>")
    if has(node, "author"):
        lines.append(f'{pad}    <p className="font-semibold">{prop(node, "author")}</p>')
    if has(node, "role"):
        lines.append(f'{pad}    <p className="text-sm text-gray-500">{prop(node, "role")}</p>')
    lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _profile_card(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="text-center">']
    if has(node, "avatar"):
        lines.append(
            f'{pad}  <img src="{prop(node, "avatar")}" alt="{prop(node, "name", "Profile")}" '
            f'className="w-24 h-24 rounded-full mx-auto object-cover" />'
        )
    if has(node, "name"):
        lines.append(f'{pad}  <h3 className="mt-4 font-semibold text-lg">{prop(node, "name")}</h3>')
    if has(node, "role"):
        lines.append(f'{pad}  <p className="text-gray-500">{prop(node, "role")}</p>')
    if has(node, "bio"):
        lines.append(f'{pad}  <p className="mt-3 text-gray-600 text-sm">{prop(node, "bio")}</p>')
    lines.append(f"{pad}</div>")
    return lines


def _blog_card(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "image"):
        lines.append(
            f'{pad}<img src="{prop(node, "image")}" alt="{prop(node, "title", "Blog post")}" '
            f'className="w-full h-48 object-cover" />'
        )
    lines.append(f'{pad}<div className="p-4">')
    if has(node, "date"):
        lines.append(f'{pad}  <span className="text-sm text-gray-500">{prop(node, "date")}</span>')
    if has(node, "title"):
        lines.append(f'{pad}  <h3 className="font-semibold mt-2">{prop(node, "title")}</h3>')
    if has(node, "excerpt"):
        lines.append(f'{pad}  <p className="text-gray-600 text-sm mt-2">{prop(node, "excerpt")}</p>')
    lines.append(f"{pad}</div>")
    return lines


def _stats_card(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="text-center">']
    if has(node, "icon"):
        lines.append(f'{pad}  {icon_comment(prop(node, "icon"))}')
    if has(node, "value"):
        lines.append(f'{pad}  <p className="text-3xl font-bold">{prop(node, "value")}</p>')
    if has(node, "label"):
        lines.append(f'{pad}  <p className="text-gray-600 mt-1">{prop(node, "label")}</p>')
    lines.append(f"{pad}</div>")
    return lines


def _feature_card(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<div className="w-12 h-12 bg-blue-100 rounded-lg flex items-center justify-center mb-4">',
        f'{pad}  {icon_comment(prop(node, "icon", "Zap"))}',
        f"{pad}</div>",
    ]
    if has(node, "title"):
        lines.append(f'{pad}<h3 className="font-semibold mb-2">{prop(node, "title")}</h3>')
    if has(node, "description"):
        lines.append(f'{pad}<p className="text-gray-600">{prop(node, "description")}</p>')
    return lines


def _image_card(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "image"):
        lines.append(
            f'{pad}<img src="{prop(node, "image")}" alt="{prop(node, "title", "Image")}" '
            f'className="w-full h-full object-cover" />'
        )
    lines.append(f'{pad}<div className="absolute inset-0 bg-gradient-to-t from-black/60 to-transparent">')
    lines.append(f'{pad}  <div className="absolute bottom-4 left-4 text-white">')
    if has(node, "title"):
        lines.append(f'{pad}    <h3 className="font-semibold">{prop(node, "title")}</h3>')
    if has(node, "subtitle"):
        lines.append(f'{pad}    <p className="text-sm opacity-90">{prop(node, "subtitle")}</p>')
    lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _horizontal_card(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="md:w-1/3 flex-shrink-0">']
    if has(node, "image"):
        lines.append(
            f'{pad}  <img src="{prop(node, "image")}" alt="{prop(node, "title", "Card")}" '
            f'className="w-full h-full object-cover" />'
        )
    lines.append(f"{pad}</div>")
    lines.append(f'{pad}<div className="p-4 flex-1">')
    if has(node, "title"):
        lines.append(f'{pad}  <h3 className="font-semibold">{prop(node, "title")}</h3>')
    if has(node, "description"):
        lines.append(f'{pad}  <p className="text-gray-600 mt-2">{prop(node, "description")}</p>')
    lines.append(f"{pad}</div>")
    return lines


RULES: Dict[str, RenderRule] = {
    "simple-card": RenderRule(tag="div", content=_simple_card, container=True),
    "product-card": RenderRule(tag="div", content=_product_card),
    "pricing-card": RenderRule(tag="div", content=_pricing_card),
    "testimonial-card": RenderRule(tag="div", content=_testimonial_card),
    "profile-card": RenderRule(tag="div", content=_profile_card),
    "blog-card": RenderRule(tag="article", content=_blog_card),
    "stats-card": RenderRule(tag="div", content=_stats_card),
    "feature-card": RenderRule(tag="div", content=_feature_card),
    "image-card": RenderRule(tag="div", content=_image_card),
    "horizontal-card": RenderRule(tag="div", content=_horizontal_card),
}
