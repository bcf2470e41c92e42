"""Navigation variants."""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import RenderRule, as_int, as_text, escape, field, has, items, prop, records, static

_PAGER_IDLE = "px-3 py-1 border border-gray-300 rounded hover:bg-gray-100 transition-colors"
_PAGER_ACTIVE = "px-3 py-1 bg-blue-600 text-white rounded"
_MOBILE_LINKS = ("Home", "About", "Services", "Contact")


def _navbar(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<div className="font-bold text-xl">',
        f'{pad}  {prop(node, "logo", "Logo")}',
        f"{pad}</div>",
    ]
    if isinstance(node.attributes.get("links"), list):
        lines.append(f'{pad}<div className="hidden md:flex items-center gap-6">')
        for link in records(node, "links"):
            lines.append(
                f'{pad}  <a href="{field(link, "href")}" className="text-gray-700 hover:text-blue-600 '
                f'transition-colors">{field(link, "text")}</a>'
            )
        lines.append(f"{pad}</div>")
    if has(node, "ctaText"):
        lines.append(
            f'{pad}<button className="px-4 py-2 bg-blue-600 text-white rounded-lg font-medium '
            f'hover:bg-blue-700 transition-colors">{prop(node, "ctaText")}</button>'
        )
    return lines


def _mobile_menu(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<div className="p-6">',
        f'{pad}  <div className="flex justify-between items-center mb-8">',
        f'{pad}    <span className="font-bold text-xl">Logo</span>',
        f'{pad}    <button className="p-2">{{/* Close Icon */}}</button>',
        f"{pad}  </div>",
        f'{pad}  <nav className="space-y-4">',
    ]
    lines.extend(f'{pad}    <a href="#" className="block text-lg py-2">{label}</a>' for label in _MOBILE_LINKS)
    lines.append(f"{pad}  </nav>")
    lines.append(f"{pad}</div>")
    return lines


def _footer(node: Node, pad: str) -> List[str]:
    lines = [f'{pad}<div className="max-w-7xl mx-auto">']
    if isinstance(node.attributes.get("columns"), list):
        lines.append(f'{pad}  <div className="grid grid-cols-2 md:grid-cols-4 gap-8 mb-8">')
        for column in records(node, "columns"):
            lines.append(f"{pad}    <div>")
            lines.append(f'{pad}      <h4 className="font-semibold mb-4">{field(column, "title")}</h4>')
            lines.append(f'{pad}      <ul className="space-y-2">')
            links = column.get("links") if isinstance(column.get("links"), list) else []
            for link in links:
                label = escape(as_text(link))
                lines.append(
                    f'{pad}        <li><a href="#" className="text-gray-400 hover:text-white '
                    f'transition-colors">{label}</a></li>'
                )
            lines.append(f"{pad}      </ul>")
            lines.append(f"{pad}    </div>")
        lines.append(f"{pad}  </div>")
    lines.append(f'{pad}  <div className="border-t border-gray-800 pt-8 text-center text-gray-400">')
    if has(node, "copyright"):
        lines.append(f'{pad}    <p>{prop(node, "copyright")}</p>')
    lines.append(f"{pad}  </div>")
    lines.append(f"{pad}</div>")
    return lines


def _breadcrumb(node: Node, pad: str) -> List[str]:
    if not isinstance(node.attributes.get("items"), list):
        return []
    lines = [f'{pad}<ol className="flex items-center">']
    for index, item in enumerate(records(node, "items")):
        if index > 0:
            lines.append(f'{pad}  <li className="mx-2 text-gray-400">/</li>')
        lines.append(f"{pad}  <li>")
        if field(item, "href"):
            lines.append(
                f'{pad}    <a href="{field(item, "href")}" className="hover:text-blue-600 '
                f'transition-colors">{field(item, "text")}</a>'
            )
        else:
            lines.append(f'{pad}    <span className="text-gray-900 font-medium">{field(item, "text")}</span>')
        lines.append(f"{pad}  </li>")
    lines.append(f"{pad}</ol>")
    return lines


def _tabs(node: Node, pad: str) -> List[str]:
    if not isinstance(node.attributes.get("tabs"), list):
        return []
    active = as_int(node.attributes.get("activeTab"), 0)
    lines = [f'{pad}<div className="flex">']
    for index, tab in enumerate(items(node, "tabs")):
        if index == active:
            tab_class = "px-4 py-2 border-b-2 border-blue-600 text-blue-600 font-medium"
        else:
            tab_class = "px-4 py-2 border-b-2 border-transparent text-gray-600 hover:text-gray-900"
        lines.append(f'{pad}  <button className="{tab_class}">{tab}</button>')
    lines.append(f"{pad}</div>")
    return lines


def _pagination(node: Node, pad: str) -> List[str]:
    total = as_int(node.attributes.get("totalPages"), 5) or 5
    current = as_int(node.attributes.get("currentPage"), 1) or 1
    lines = [f'{pad}<button className="{_PAGER_IDLE}">&laquo; Prev</button>']
    for page in range(1, min(total, 5) + 1):
        btn_class = _PAGER_ACTIVE if page == current else _PAGER_IDLE
        lines.append(f'{pad}<button className="{btn_class}">{page}</button>')
    lines.append(f'{pad}<button className="{_PAGER_IDLE}">Next &raquo;</button>')
    return lines


RULES: Dict[str, RenderRule] = {
    "navbar": RenderRule(tag="nav", content=_navbar, container=True),
    "mobile-menu": RenderRule(tag="div", content=_mobile_menu, container=True),
    "footer": RenderRule(tag="footer", content=_footer, container=True),
    "breadcrumb": RenderRule(tag="nav", attributes=static('aria-label="Breadcrumb"'), content=_breadcrumb),
    "tabs": RenderRule(tag="div", content=_tabs, container=True),
    "pagination": RenderRule(tag="nav", attributes=static('aria-label="Pagination"'), content=_pagination),
}
