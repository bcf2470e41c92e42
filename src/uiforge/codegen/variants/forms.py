"""Form variants."""

from typing import Dict, List

from uiforge.schemas import Node

from ..rules import RenderRule, as_int, has, items, prop, static

_FIELD_LABEL = "block text-sm font-medium text-gray-700 mb-1"
_FIELD_INPUT = "w-full px-4 py-2 border border-gray-300 rounded-lg focus:ring-2 focus:ring-blue-500 focus:border-blue-500"
_SUBMIT = "w-full px-4 py-2 bg-blue-600 text-white rounded-lg font-medium hover:bg-blue-700 transition-colors"

_PREVENT_SUBMIT = static("onSubmit={(e) => e.preventDefault()}")


def _label(node: Node, pad: str) -> List[str]:
    if not has(node, "label"):
        return []
    return [f'{pad}<label className="{_FIELD_LABEL}">{prop(node, "label")}</label>']


def _input_field(node: Node, pad: str) -> List[str]:
    lines = _label(node, pad)
    lines.append(
        f'{pad}<input type="text" placeholder="{prop(node, "placeholder")}" '
        f'className="w-full px-4 py-2 border border-gray-300 rounded-lg focus:ring-2 focus:ring-blue-500 '
        f'focus:border-blue-500 outline-none transition-shadow" />'
    )
    if has(node, "helperText"):
        lines.append(f'{pad}<p className="mt-1 text-sm text-gray-500">{prop(node, "helperText")}</p>')
    return lines


def _textarea(node: Node, pad: str) -> List[str]:
    lines = _label(node, pad)
    rows = as_int(node.attributes.get("rows"), 4) or 4
    lines.append(
        f'{pad}<textarea rows={{{rows}}} placeholder="{prop(node, "placeholder")}" '
        f'className="w-full px-4 py-2 border border-gray-300 rounded-lg focus:ring-2 focus:ring-blue-500 '
        f'focus:border-blue-500 outline-none transition-shadow resize-none"></textarea>'
    )
    return lines


def _select_dropdown(node: Node, pad: str) -> List[str]:
    lines = _label(node, pad)
    lines.append(
        f'{pad}<select className="w-full px-4 py-2 border border-gray-300 rounded-lg focus:ring-2 '
        f'focus:ring-blue-500 focus:border-blue-500 outline-none bg-white">'
    )
    lines.append(f'{pad}  <option value="">Select an option</option>')
    for option in items(node, "options"):
        lines.append(f'{pad}  <option value="{option}">{option}</option>')
    lines.append(f"{pad}</select>")
    return lines


def _checkbox(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<input type="checkbox" className="w-4 h-4 text-blue-600 border-gray-300 rounded focus:ring-blue-500" />'
    ]
    if has(node, "label"):
        lines.append(f'{pad}<span className="ml-2 text-gray-700">{prop(node, "label")}</span>')
    return lines


def _radio_group(node: Node, pad: str) -> List[str]:
    lines = []
    if has(node, "label"):
        lines.append(f'{pad}<legend className="text-sm font-medium text-gray-700 mb-2">{prop(node, "label")}</legend>')
    if isinstance(node.attributes.get("options"), list):
        lines.append(f'{pad}<div className="space-y-2">')
        for index, option in enumerate(items(node, "options")):
            checked = "defaultChecked " if index == 0 else ""
            lines.append(f'{pad}  <label className="flex items-center gap-2">')
            lines.append(
                f'{pad}    <input type="radio" name="radio-group" {checked}'
                f'className="w-4 h-4 text-blue-600 border-gray-300 focus:ring-blue-500" />'
            )
            lines.append(f'{pad}    <span className="text-gray-700">{option}</span>')
            lines.append(f"{pad}  </label>")
        lines.append(f"{pad}</div>")
    return lines


def _toggle_switch(node: Node, pad: str) -> List[str]:
    return [
        f'{pad}<span className="text-gray-700">{prop(node, "label")}</span>',
        f'{pad}<button type="button" className="relative inline-flex h-6 w-11 items-center rounded-full '
        f'bg-gray-200 transition-colors focus:ring-2 focus:ring-blue-500 focus:ring-offset-2">',
        f'{pad}  <span className="inline-block h-4 w-4 transform rounded-full bg-white shadow-lg '
        f'transition-transform translate-x-1"></span>',
        f"{pad}</button>",
    ]


def _form_title(node: Node, pad: str, centered: bool = True) -> List[str]:
    if not has(node, "title"):
        return []
    align = " text-center" if centered else ""
    return [f'{pad}<h2 className="text-2xl font-bold{align} mb-6">{prop(node, "title")}</h2>']


def _labelled_input(pad: str, label: str, kind: str, placeholder: str) -> List[str]:
    return [
        f"{pad}  <div>",
        f'{pad}    <label className="{_FIELD_LABEL}">{label}</label>',
        f'{pad}    <input type="{kind}" placeholder="{placeholder}" className="{_FIELD_INPUT}" />',
        f"{pad}  </div>",
    ]


def _login_form(node: Node, pad: str) -> List[str]:
    lines = _form_title(node, pad)
    lines.append(f'{pad}<div className="space-y-4">')
    lines.extend(_labelled_input(pad, "Email", "email", "Enter your email"))
    lines.extend(_labelled_input(pad, "Password", "password", "Enter your password"))
    lines.append(f'{pad}  <div className="flex items-center justify-between">')
    lines.append(
        f'{pad}    <label className="flex items-center gap-2"><input type="checkbox" className="rounded" />'
        f'<span className="text-sm text-gray-600">Remember me</span></label>'
    )
    if has(node, "forgotPasswordLink"):
        lines.append(
            f'{pad}    <a href="{prop(node, "forgotPasswordLink")}" '
            f'className="text-sm text-blue-600 hover:underline">Forgot password?</a>'
        )
    lines.append(f"{pad}  </div>")
    lines.append(f'{pad}  <button type="submit" className="{_SUBMIT}">Sign In</button>')
    if has(node, "signupLink"):
        lines.append(
            f"{pad}  <p className=\"text-center text-sm text-gray-600\">Don't have an account? "
            f'<a href="{prop(node, "signupLink")}" className="text-blue-600 hover:underline">Sign up</a></p>'
        )
    lines.append(f"{pad}</div>")
    return lines


def _signup_form(node: Node, pad: str) -> List[str]:
    lines = _form_title(node, pad)
    lines.append(f'{pad}<div className="space-y-4">')
    lines.extend(_labelled_input(pad, "Name", "text", "Enter your name"))
    lines.extend(_labelled_input(pad, "Email", "email", "Enter your email"))
    lines.extend(_labelled_input(pad, "Password", "password", "Create a password"))
    lines.append(f'{pad}  <button type="submit" className="{_SUBMIT}">Create Account</button>')
    if has(node, "loginLink"):
        lines.append(
            f'{pad}  <p className="text-center text-sm text-gray-600">Already have an account? '
            f'<a href="{prop(node, "loginLink")}" className="text-blue-600 hover:underline">Sign in</a></p>'
        )
    lines.append(f"{pad}</div>")
    return lines


def _contact_form(node: Node, pad: str) -> List[str]:
    lines = _form_title(node, pad, centered=False)
    lines.extend([
        f'{pad}<div className="space-y-4">',
        f'{pad}  <div className="grid md:grid-cols-2 gap-4">',
        f'{pad}    <input type="text" placeholder="Your Name" className="{_FIELD_INPUT}" />',
        f'{pad}    <input type="email" placeholder="Your Email" className="{_FIELD_INPUT}" />',
        f"{pad}  </div>",
        f'{pad}  <input type="text" placeholder="Subject" className="{_FIELD_INPUT}" />',
        f'{pad}  <textarea rows={{5}} placeholder="Your Message" className="{_FIELD_INPUT} resize-none"></textarea>',
        f'{pad}  <button type="submit" className="px-6 py-2 bg-blue-600 text-white rounded-lg font-medium '
        f'hover:bg-blue-700 transition-colors">{prop(node, "submitText", "Send Message")}</button>',
        f"{pad}</div>",
    ])
    return lines


def _search_bar(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<input type="text" placeholder="{prop(node, "placeholder", "Search...")}" '
        f'className="flex-1 px-4 py-2 focus:outline-none" />'
    ]
    if has(node, "buttonText"):
        lines.append(
            f'{pad}<button type="submit" className="px-6 py-2 bg-blue-600 text-white hover:bg-blue-700 '
            f'transition-colors">{prop(node, "buttonText")}</button>'
        )
    return lines


def _newsletter_form(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<input type="email" placeholder="{prop(node, "placeholder", "Enter your email")}" '
        f'className="flex-1 px-4 py-2 border border-gray-300 rounded-l-lg focus:ring-2 focus:ring-blue-500 '
        f'focus:border-blue-500 outline-none" />'
    ]
    if has(node, "buttonText"):
        lines.append(
            f'{pad}<button type="submit" className="px-6 py-2 bg-blue-600 text-white rounded-r-lg font-medium '
            f'hover:bg-blue-700 transition-colors">{prop(node, "buttonText")}</button>'
        )
    return lines


def _file_upload(node: Node, pad: str) -> List[str]:
    lines = [
        f'{pad}<div className="text-center">',
        f'{pad}  <div className="text-4xl text-gray-400 mb-2">{{/* Upload Icon */}}</div>',
    ]
    if has(node, "label"):
        lines.append(f'{pad}  <p className="text-gray-600">{prop(node, "label")}</p>')
    lines.append(f'{pad}  <p className="text-sm text-gray-500 mt-1">or drag and drop</p>')
    lines.append(f'{pad}  <input type="file" className="hidden" accept="{prop(node, "accept", "*")}" />')
    lines.append(f"{pad}</div>")
    return lines


RULES: Dict[str, RenderRule] = {
    "input-field": RenderRule(tag="div", content=_input_field),
    "textarea": RenderRule(tag="div", content=_textarea),
    "select-dropdown": RenderRule(tag="div", content=_select_dropdown),
    "checkbox": RenderRule(tag="label", content=_checkbox),
    "radio-group": RenderRule(tag="fieldset", content=_radio_group),
    "toggle-switch": RenderRule(tag="label", content=_toggle_switch),
    "login-form": RenderRule(tag="form", attributes=_PREVENT_SUBMIT, content=_login_form, container=True),
    "signup-form": RenderRule(tag="form", attributes=_PREVENT_SUBMIT, content=_signup_form, container=True),
    "contact-form": RenderRule(tag="form", attributes=_PREVENT_SUBMIT, content=_contact_form, container=True),
    "search-bar": RenderRule(tag="form", attributes=_PREVENT_SUBMIT, content=_search_bar),
    "newsletter-form": RenderRule(tag="form", attributes=_PREVENT_SUBMIT, content=_newsletter_form),
    "file-upload": RenderRule(tag="div", content=_file_upload),
}
