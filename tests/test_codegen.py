"""
Tests for the serializer: class composition, rendering rules, wrappers and formatting.
"""

import re

import pytest

from uiforge.catalog import list_components, materialize
from uiforge.codegen import (
    RENDER_TABLE,
    compose_class_string,
    format_code,
    generate_code,
    generate_element_code,
    generate_markup_only,
    generate_preview_code,
    render_node,
    sanitize_component_name,
    serialize,
)
from uiforge.mutation import MutationFacade
from uiforge.schemas import Node, ResponsiveStyles, StyleGroups

TAG = re.compile(r"<(/?)([A-Za-z][\w.-]*)((?:[^>{}]|\{(?:[^{}]|\{[^{}]*\})*\})*)>")


def assert_balanced(code):
    """Every opened element is closed in order; braces pair up."""
    stack = []
    for match in TAG.finditer(code):
        closing, name, rest = match.groups()
        if rest.rstrip().endswith("/"):
            continue
        if closing:
            assert stack and stack[-1] == name, f"unexpected </{name}>"
            stack.pop()
        else:
            stack.append(name)
    assert stack == [], f"unclosed: {stack}"
    assert code.count("{") == code.count("}")


def catalog_forest():
    """Every catalog variant once, containers nested with a child."""
    engine = MutationFacade()
    for definition in list_components():
        result = engine.add_component(definition.variant)
        if definition.is_container:
            engine.add_component("paragraph", result.node_id)
    return engine.forest


class TestClassString:
    """Test class token composition."""

    def test_bucket_then_breakpoint_order(self):
        styles = StyleGroups(
            effects=["shadow"],
            layout=["flex"],
            colors=["text-white"],
            responsive=ResponsiveStyles(lg=["grid"], sm=["block"]),
        )
        assert compose_class_string(styles) == "flex text-white shadow sm:block lg:grid"

    def test_empty_and_duplicate_tokens_dropped(self):
        styles = StyleGroups(layout=["flex", "", "  "], spacing=["p-4", "flex"], responsive=ResponsiveStyles(md=[""]))
        assert compose_class_string(styles) == "flex p-4"

    def test_no_tokens(self):
        assert compose_class_string(StyleGroups()) == ""


class TestRenderNode:
    """Test single-node rendering rules."""

    def test_inline_text(self):
        node = Node(id="a", variant="paragraph", attributes={"text": "Hi"},
                    styles=StyleGroups(typography=["text-base"]))
        assert render_node(node) == '<p className="text-base">Hi</p>'

    def test_long_text_goes_on_own_line(self):
        text = "x" * 80
        assert render_node(Node(id="a", variant="paragraph", attributes={"text": text})) == f"<p>\n  {text}\n</p>"

    def test_self_closing(self):
        node = Node(id="a", variant="image", attributes={"src": "/a.png", "alt": "A"})
        assert render_node(node) == '<img src="/a.png" alt="A" />'

    def test_empty_content(self):
        assert render_node(Node(id="a", variant="paragraph")) == "<p></p>"

    def test_empty_container_placeholder(self):
        assert render_node(Node(id="a", variant="container")) == "<div>{/* Drop elements here */}</div>"

    def test_children_are_indented(self):
        child = Node(id="b", variant="badge", attributes={"text": "New"}, parent_id="a")
        node = Node(id="a", variant="flex-row", children=[child])
        assert render_node(node) == "<div>\n  <span>New</span>\n</div>"

    def test_unknown_variant_fallback(self):
        child = Node(id="b", variant="paragraph", attributes={"text": "x"}, parent_id="a")
        node = Node(id="a", variant="hologram", children=[child])
        assert render_node(node) == '<div data-variant="hologram">\n  <p>x</p>\n</div>'

    def test_values_are_escaped(self):
        node = Node(id="a", variant="paragraph", attributes={"text": '<b>"A" & B</b>'})
        assert render_node(node) == "<p>&lt;b&gt;&quot;A&quot; &amp; B&lt;/b&gt;</p>"

    def test_braces_are_escaped(self):
        node = Node(id="a", variant="paragraph", attributes={"text": "Price {USD"})
        assert render_node(node) == "<p>Price &#123;USD</p>"
        assert_balanced(serialize([node]))

    def test_comment_terminator_in_values(self):
        node = Node(id="a", variant="icon", attributes={"name": "Star */ oops"})
        assert render_node(node) == "<span>{/* Icon: Star * / oops */}</span>"
        feature = Node(id="b", variant="feature-section",
                       attributes={"features": [{"icon": "*/}", "title": "T"}]})
        for code in (serialize([node]), serialize([feature])):
            assert_balanced(code)
            assert code.count("/*") == code.count("*/")

    def test_multiline_text_lines_are_indented(self):
        node = Node(id="a", variant="paragraph", attributes={"text": "first line\nsecond line"})
        assert render_node(node) == "<p>\n  first line\n  second line\n</p>"

    def test_heading_level(self):
        assert render_node(Node(id="a", variant="heading", attributes={"text": "T", "level": "h1"})) == "<h1>T</h1>"
        assert render_node(Node(id="a", variant="heading", attributes={"text": "T", "level": 3})) == "<h3>T</h3>"
        assert render_node(Node(id="a", variant="heading", attributes={"text": "T", "level": "big"})) == "<h2>T</h2>"

    def test_malformed_attributes_are_coerced(self):
        node = Node(id="a", variant="list", attributes={"items": "not a list", "ordered": "yes"})
        assert render_node(node) == "<ul></ul>"
        node = Node(id="a", variant="paragraph", attributes={"text": {"nested": True}})
        assert render_node(node) == "<p></p>"

    def test_node_filter_prunes_subtrees(self):
        hidden = Node(id="b", variant="paragraph", attributes={"text": "secret"}, parent_id="a")
        node = Node(id="a", variant="container", children=[hidden])
        rendered = render_node(node, node_filter=lambda n: n.id != "b")
        assert "secret" not in rendered
        assert "Drop elements here" in rendered


class TestSerialize:
    """Test whole-document output."""

    def test_loose_document(self):
        forest = [Node(id="a", variant="paragraph", attributes={"text": "Hi"},
                       styles=StyleGroups(typography=["text-base"]))]
        assert serialize(forest, "loose", "Demo") == (
            "import React from 'react';\n"
            "\n"
            "export default function Demo() {\n"
            "  return (\n"
            '    <div className="w-full">\n'
            '      <p className="text-base">Hi</p>\n'
            "    </div>\n"
            "  );\n"
            "}"
        )

    def test_typed_document_adds_interface(self):
        code = serialize([Node(id="a", variant="divider")], "typed", "Demo")
        assert "interface DemoProps {\n  className?: string;\n}" in code
        assert "export default function Demo({ className }: DemoProps) {" in code
        assert "<div className={`w-full ${className || ''}`}>" in code
        assert "      <hr />" in code

    @pytest.mark.parametrize("flavor", ["loose", "typed"])
    def test_empty_forest_skeleton(self, flavor):
        code = serialize([], flavor)
        assert code
        assert "{/* Add elements to your canvas */}" in code
        assert "export default function GeneratedComponent(" in code
        assert_balanced(code)

    def test_without_imports(self):
        assert not serialize([], "loose", include_imports=False).startswith("import")

    def test_determinism(self, sample_forest):
        for flavor in ("loose", "typed"):
            assert serialize(sample_forest, flavor) == serialize(sample_forest, flavor)

    def test_flavors_share_body(self, sample_forest):
        code = generate_code(sample_forest, "Demo")
        loose_body = code.loose[code.loose.index("<div"):]
        typed_body = code.typed[code.typed.index("<div"):]
        assert loose_body.split("\n")[1:] == typed_body.split("\n")[1:]
        assert code.for_flavor("typed") == code.typed

    @pytest.mark.parametrize("flavor", ["loose", "typed"])
    def test_totality_over_catalog(self, flavor):
        forest = catalog_forest()
        forest.append(Node(id="x", variant="not-in-catalog"))
        code = serialize(forest, flavor)
        assert code
        assert_balanced(code)

    def test_every_catalog_variant_has_a_rule(self):
        for definition in list_components():
            assert definition.variant in RENDER_TABLE

    def test_every_variant_renders_defaults(self):
        for definition in list_components():
            node = materialize(definition.variant).model_copy(update={"id": "x"})
            assert_balanced(render_node(node))


class TestEntryPoints:
    """Test auxiliary generators and formatting helpers."""

    def test_markup_only(self, sample_forest):
        markup = generate_markup_only(sample_forest)
        assert markup.startswith('<div className="mx-auto p-4">')
        assert "export default" not in markup
        assert generate_markup_only([]) == "{/* No elements */}"

    def test_preview(self, sample_forest):
        preview = generate_preview_code(sample_forest)
        assert preview.startswith('<div className="w-full">\n  <div')
        assert_balanced(preview)

    def test_element_code(self, sample_forest):
        code = generate_element_code(sample_forest[0].children[1])
        assert code.loose == code.typed
        assert code.loose.startswith("<div>")

    def test_format_code(self):
        assert format_code("a\n\n\n\n   b  \n") == "a\n\n    b"
        assert format_code("x\n \ny") == "x\n\ny"

    def test_sanitize_component_name(self):
        assert sanitize_component_name("my-hero card!") == "myherocard"
        assert sanitize_component_name("---") == "Component"
        assert sanitize_component_name("") == "Component"
