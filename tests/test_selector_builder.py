import pytest

from kata_toolkit.core.css.selector_builder import css_selector_builder as builder
from kata_toolkit.core.errors import SelectorError


def test_compound_selectors():
    assert builder.id("main").class_("container").class_("editable").stringify() == (
        "#main.container.editable"
    )
    assert builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify() == (
        'a[href$=".png"]:focus'
    )
    assert builder.element("p").pseudo_element("first-line").stringify() == "p::first-line"


def test_combined_selectors():
    got = builder.combine(
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
    ).stringify()
    assert got == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_selectors_do_not_share_state():
    base = builder.element("li")
    first = base.class_("a")
    second = base.class_("b")
    assert first.stringify() == "li.a"
    assert second.stringify() == "li.b"
    assert base.stringify() == "li"


def test_duplicate_parts_rejected():
    for build in (
        lambda: builder.element("div").element("p"),
        lambda: builder.id("a").id("b"),
        lambda: builder.pseudo_element("after").pseudo_element("before"),
    ):
        with pytest.raises(SelectorError) as exc:
            build()
        assert exc.value.code == "E_SELECTOR_DUPLICATE"


def test_wrong_order_rejected():
    for build in (
        lambda: builder.id("main").element("div"),
        lambda: builder.class_("c").id("main"),
        lambda: builder.pseudo_class("hover").attr("href"),
        lambda: builder.pseudo_element("after").class_("c"),
    ):
        with pytest.raises(SelectorError) as exc:
            build()
        assert exc.value.code == "E_SELECTOR_ORDER"
        assert "element, id, class, attribute" in exc.value.message
