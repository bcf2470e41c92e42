"""
Page section variants.

Sections are containers: dropped children render after the built-in layout.
"""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import RenderRule, as_text, escape, field, has, icon_comment, prop, records

_INPUT = "w-full px-4 py-3 border border-gray-300 rounded-lg"


def _section_title(node: Node, pad: str, key: str = "title") -> List[str]:
    if not has(node, key):
        return []
    return [f'{pad}  <h2 className="text-3xl font-bold text-center mb-12">{prop(node, key)}</h2>']


def _hero_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-4xl mx-auto text-center">']
    if has(node, "headline"):
        lines.append(f'{pad}  <h1 className="text-4xl md:text-6xl font-bold mb-6">{prop(node, "headline")}</h1>')
    if has(node, "subtext"):
        lines.append(f'{pad}  <p className="text-xl text-gray-600 mb-8">{prop(node, "subtext")}</p>')
    if has(node, "ctaText"):
        lines.append(
            f'{pad}  <a href="{prop(node, "ctaLink", "#")}" className="inline-block px-8 py-3 bg-blue-600 '
            f'text-white rounded-lg font-medium hover:bg-blue-700 transition-colors">{prop(node, "ctaText")}</a>'
        )
    lines.append(f"{pad}</div>")
    return lines


def _hero_with_image(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<div className="max-w-7xl mx-auto grid md:grid-cols-2 gap-12 items-center">',
        f"{pad}  <div>",
    ]
    if has(node, "headline"):
        lines.append(f'{pad}    <h1 className="text-4xl md:text-5xl font-bold mb-6">{prop(node, "headline")}</h1>')
    if has(node, "subtext"):
        lines.append(f'{pad}    <p className="text-xl text-gray-600 mb-8">{prop(node, "subtext")}</p>')
    if has(node, "ctaText"):
        lines.append(
            f'{pad}    <button className="px-8 py-3 bg-blue-600 text-white rounded-lg font-medium '
            f'hover:bg-blue-700 transition-colors">{prop(node, "ctaText")}</button>'
        )
    lines.append(f"{pad}  </div>")
    if has(node, "image"):
        lines.append(f'{pad}  <img src="{prop(node, "image")}" alt="Hero" className="w-full rounded-lg shadow-xl" />')
    lines.append(f"{pad}</div>")
    return lines


def _feature_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">', f'{pad}  <div className="text-center mb-12">']
    if has(node, "title"):
        lines.append(f'{pad}    <h2 className="text-3xl font-bold mb-4">{prop(node, "title")}</h2>')
    if has(node, "subtitle"):
        lines.append(f'{pad}    <p className="text-gray-600">{prop(node, "subtitle")}</p>')
    lines.append(f"{pad}  </div>")
    if isinstance(node.attributes.get("features"), list):
        lines.append(f'{pad}  <div className="grid md:grid-cols-3 gap-8">')
        for feature in records(node, "features"):
            lines.extend([
                f'{pad}    <div className="text-center p-6">',
                f'{pad}      <div className="w-12 h-12 bg-blue-100 rounded-lg flex items-center justify-center mx-auto mb-4">',
                f'{pad}        {icon_comment(field(feature, "icon", "Star"))}',
                f"{pad}      </div>",
                f'{pad}      <h3 className="font-semibold mb-2">{field(feature, "title")}</h3>',
                f'{pad}      <p className="text-gray-600">{field(feature, "description")}</p>',
                f"{pad}    </div>",
            ])
        lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _cta_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-4xl mx-auto text-center">']
    if has(node, "headline"):
        lines.append(f'{pad}  <h2 className="text-3xl font-bold mb-4">{prop(node, "headline")}</h2>')
    if has(node, "description"):
        lines.append(f'{pad}  <p className="text-xl mb-8 opacity-90">{prop(node, "description")}</p>')
    if has(node, "ctaText"):
        lines.append(
            f'{pad}  <button className="px-8 py-3 bg-white text-blue-600 rounded-lg font-semibold '
            f'hover:bg-gray-100 transition-colors">{prop(node, "ctaText")}</button>'
        )
    lines.append(f"{pad}</div>")
    return lines


def _stats_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">']
    if isinstance(node.attributes.get("stats"), list):
        lines.append(f'{pad}  <div className="grid grid-cols-2 md:grid-cols-4 gap-8 text-center">')
        for stat in records(node, "stats"):
            lines.extend([
                f"{pad}    <div>",
                f'{pad}      <p className="text-4xl font-bold text-blue-600">{field(stat, "value")}</p>',
                f'{pad}      <p className="text-gray-600 mt-2">{field(stat, "label")}</p>',
                f"{pad}    </div>",
            ])
        lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _testimonials_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">']
    lines.extend(_section_title(node, pad))
    if isinstance(node.attributes.get("testimonials"), list):
        lines.append(f'{pad}  <div className="grid md:grid-cols-2 gap-8">')
        for testimonial in records(node, "testimonials"):
            lines.extend([
                f'{pad}    <div className="bg-white p-6 rounded-lg shadow-sm">',
                f'{pad}      <p className="text-gray-600 italic">"{field(testimonial, "quote")}"</p>',
                f'{pad}      <div className="mt-4">',
                f'{pad}        <p className="font-semibold">{field(testimonial, "author")}</p>',
                f'{pad}        <p className="text-sm text-gray-500">{field(testimonial, "role")}</p>',
                f"{pad}      </div>",
                f"{pad}    </div>",
            ])
        lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _team_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">']
    lines.extend(_section_title(node, pad))
    if isinstance(node.attributes.get("members"), list):
        lines.append(f'{pad}  <div className="grid md:grid-cols-3 gap-8">')
        for member in records(node, "members"):
            lines.extend([
                f'{pad}    <div className="text-center">',
                f'{pad}      <img src="{field(member, "avatar")}" alt="{field(member, "name")}" '
                f'className="w-32 h-32 rounded-full mx-auto object-cover" />',
                f'{pad}      <h3 className="mt-4 font-semibold">{field(member, "name")}</h3>',
                f'{pad}      <p className="text-gray-500">{field(member, "role")}</p>',
                f"{pad}    </div>",
            ])
        lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _faq_section(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "title"):
        lines.append(f'{pad}<h2 className="text-3xl font-bold text-center mb-12">{prop(node, "title")}</h2>')
    if isinstance(node.attributes.get("faqs"), list):
        lines.append(f'{pad}<div className="space-y-4">')
        for faq in records(node, "faqs"):
            lines.extend([
                f'{pad}  <div className="border border-gray-200 rounded-lg">',
                f'{pad}    <button className="w-full px-6 py-4 text-left font-medium flex justify-between items-center">',
                f'{pad}      {field(faq, "question")}',
                f"{pad}      <span>+</span>",
                f"{pad}    </button>",
                f'{pad}    <div className="px-6 pb-4 text-gray-600">',
                f'{pad}      {field(faq, "answer")}',
                f"{pad}    </div>",
                f"{pad}  </div>",
            ])
        lines.append(f"{pad}</div>")
    return lines


def _pricing_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">']
    lines.extend(_section_title(node, pad))
    if isinstance(node.attributes.get("plans"), list):
        lines.append(f'{pad}  <div className="grid md:grid-cols-3 gap-8">')
        for plan in records(node, "plans"):
            highlighted = plan.get("highlighted") is True
            if highlighted:
                card_class = "bg-blue-600 text-white rounded-xl p-8 shadow-xl scale-105"
                btn_class = "w-full mt-8 px-4 py-3 bg-white text-blue-600 rounded-lg font-medium hover:bg-gray-100"
            else:
                card_class = "bg-white rounded-xl p-8 border border-gray-200 shadow-sm"
                btn_class = "w-full mt-8 px-4 py-3 bg-blue-600 text-white rounded-lg font-medium hover:bg-blue-700"
            lines.extend([
                f'{pad}    <div className="{card_class}">',
                f'{pad}      <h3 className="text-xl font-semibold">{field(plan, "tier")}</h3>',
                f'{pad}      <p className="text-4xl font-bold mt-4">{field(plan, "price")}'
                f'<span className="text-base font-normal opacity-75">/mo</span></p>',
                f'{pad}      <ul className="mt-6 space-y-3">',
            ])
            features = plan.get("features") if isinstance(plan.get("features"), list) else []
            for feature in features:
                lines.append(
                    f'{pad}        <li className="flex items-center gap-2"><span>&#10003;</span>'
                    f"{escape(as_text(feature))}</li>"
                )
            lines.extend([
                f"{pad}      </ul>",
                f'{pad}      <button className="{btn_class}">Get Started</button>',
                f"{pad}    </div>",
            ])
        lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _contact_section(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto grid md:grid-cols-2 gap-12">', f"{pad}  <div>"]
    if has(node, "title"):
        lines.append(f'{pad}    <h2 className="text-3xl font-bold mb-6">{prop(node, "title")}</h2>')
    lines.append(f'{pad}    <div className="space-y-4">')
    for key, label in (("email", "Email"), ("phone", "Phone"), ("address", "Address")):
        if has(node, key):
            lines.append(
                f'{pad}      <p className="flex items-center gap-3"><span>{label}:</span>{prop(node, key)}</p>'
            )
    lines.extend([
        f"{pad}    </div>",
        f"{pad}  </div>",
        f'{pad}  <form className="space-y-4" onSubmit={{(e) => e.preventDefault()}}>',
        f'{pad}    <input type="text" placeholder="Your Name" className="{_INPUT}" />',
        f'{pad}    <input type="email" placeholder="Your Email" className="{_INPUT}" />',
        f'{pad}    <textarea rows={{4}} placeholder="Your Message" className="{_INPUT}"></textarea>',
        f'{pad}    <button type="submit" className="w-full px-6 py-3 bg-blue-600 text-white rounded-lg '
        f'font-medium hover:bg-blue-700">Send Message</button>',
        f"{pad}  </form>",
        f"{pad}</div>",
    ])
    return lines


RULES: Dict[str, RenderRule] = {
    "hero-section": RenderRule(tag="section", content=_hero_section, container=True),
    "hero-with-image": RenderRule(tag="section", content=_hero_with_image, container=True),
    "feature-section": RenderRule(tag="section", content=_feature_section, container=True),
    "cta-section": RenderRule(tag="section", content=_cta_section, container=True),
    "stats-section": RenderRule(tag="section", content=_stats_section, container=True),
    "testimonials-section": RenderRule(tag="section", content=_testimonials_section, container=True),
    "team-section": RenderRule(tag="section", content=_team_section, container=True),
    "faq-section": RenderRule(tag="section", content=_faq_section, container=True),
    "pricing-section": RenderRule(tag="section", content=_pricing_section, container=True),
    "contact-section": RenderRule(tag="section", content=_contact_section, container=True),
}
