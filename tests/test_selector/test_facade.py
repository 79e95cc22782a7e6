"""Tests for the BuilderFacade entry points."""

import pytest

from selectorkit import BuilderFacade, SelectorBuilder, css_selector_builder
from selectorkit.selector import OrderError, PartKind, UniquenessError

builder = css_selector_builder


class TestEntryPoints:
    @pytest.mark.parametrize(
        ("method", "expected", "kind"),
        [
            ("element", "x", PartKind.ELEMENT),
            ("id", "#x", PartKind.ID),
            ("class_", ".x", PartKind.CLASS),
            ("attr", "[x]", PartKind.ATTR),
            ("pseudo_class", ":x", PartKind.PSEUDO_CLASS),
            ("pseudo_element", "::x", PartKind.PSEUDO_ELEMENT),
        ],
    )
    def test_each_entry_point_starts_a_chain(self, method, expected, kind):
        sel = getattr(builder, method)("x")
        assert isinstance(sel, SelectorBuilder)
        assert sel.stringify() == expected
        assert sel.parts == (kind,)

    def test_bare_stringify_is_empty(self):
        assert builder.stringify() == ""

    def test_each_call_returns_fresh_builder(self):
        a = builder.element("a")
        b = builder.element("b")
        assert a is not b
        assert a.stringify() == "a"
        assert b.stringify() == "b"

    def test_module_instance_is_a_facade(self):
        assert isinstance(css_selector_builder, BuilderFacade)

    def test_facade_holds_no_state(self):
        builder.id("main")
        # a previous id on another chain must not leak into this one
        assert builder.id("other").stringify() == "#other"


class TestFacadeErrors:
    def test_uniqueness(self):
        with pytest.raises(UniquenessError):
            builder.element("a").id("b").element("c")

    def test_order(self):
        with pytest.raises(OrderError):
            builder.id("x").element("y")

    def test_pseudo_element_twice(self):
        with pytest.raises(UniquenessError):
            builder.pseudo_element("before").pseudo_element("after")


class TestCombine:
    def test_two_operands(self):
        sel = builder.combine(builder.element("div"), "+", builder.id("main"))
        assert sel.stringify() == "div + #main"

    def test_nested_combinations(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_with_pseudo_element(self):
        sel = builder.combine(
            builder.element("p").pseudo_class("focus"),
            ">",
            builder.element("a").attr("href").pseudo_element("first-letter"),
        )
        assert sel.stringify() == "p:focus > a[href]::first-letter"
