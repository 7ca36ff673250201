#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# tests/test_listing.py
import pytest
from rich.cells import cell_len

from replference.core.listing import format_columns, format_listing, iter_blocks, layout

MACROS = {"Macros": ["@show", "@fastmath", "@isdefined", "@evalpoly"]}


def test_empty_input_gives_empty_string():
    assert format_listing({}) == ""
    assert format_listing(None) == ""
    assert format_listing({"Macros": [], "Methods": {"Bitwise": []}}) == ""


def test_macros_fit_on_one_row():
    assert format_listing(MACROS, width=80) == (
        "Macros\n"
        "≡≡≡≡≡≡≡≡\n"
        "@evalpoly    @fastmath    @isdefined    @show"
    )


def test_names_fill_columns_top_to_bottom():
    assert format_columns(["e", "d", "c", "b", "a"], width=5, padding=1) == [
        "a c e",
        "b d",
    ]


def test_columns_are_as_wide_as_their_longest_name():
    lines = format_columns(["a", "bbbb", "cc", "d"], width=10, padding=2)
    assert lines == [
        "a     cc",
        "bbbb  d",
    ]


@pytest.mark.parametrize("width", [10, 20, 35, 60, 80, 120])
def test_rows_never_exceed_width(width):
    names = [f"name{i}" * (i % 4 + 1) for i in range(40)]
    for line in format_columns(names, width=width):
        # 超宽名称只能单独占一行
        assert cell_len(line) <= width or line in names
        assert line == line.rstrip()


def test_over_wide_name_sits_alone():
    long_name = "x" * 30
    lines = format_columns([long_name, "a", "b"], width=10)
    assert lines == ["a", "b", long_name]


def test_wide_characters_count_as_two_cells():
    columns = layout(["界界", "ab"], width=8, padding=2)
    assert columns == [["ab"], ["界界"]]
    assert layout(["界界", "ab"], width=7, padding=2) == [["ab", "界界"]]


def test_order_of_input_does_not_matter():
    names = ["zeta", "alpha", "mu", "beta", "omega", "pi"]
    expected = format_columns(names, width=20)
    assert format_columns(list(reversed(names)), width=20) == expected
    assert format_columns(sorted(names), width=20) == expected


def test_duplicates_are_removed():
    assert format_columns(["b", "a", "b"], width=80) == ["a    b"]


def test_categories_keep_supplied_order():
    text = format_listing({"Types": ["Int"], "Macros": ["@show"]}, width=80)
    assert text.index("Types") < text.index("Macros")


def test_nested_categories():
    categories = {
        "Methods": {"Bitwise": ["xor", "and"], "Empty": []},
        "Types": ["Int"],
    }
    assert format_listing(categories, width=80) == (
        "Methods\n"
        "≡≡≡≡≡≡≡≡≡\n"
        "\n"
        "Bitwise\n"
        "---------\n"
        "and    xor\n"
        "\n"
        "Types\n"
        "≡≡≡≡≡≡≡\n"
        "Int"
    )


def test_parent_without_names_is_skipped():
    blocks = list(iter_blocks({"Methods": {"Empty": []}, "Types": ["Int"]}))
    assert [(block.label, block.depth) for block in blocks] == [("Types", 0)]


def test_header_rule_is_clamped_to_width():
    text = format_listing({"A very long category": ["a"]}, width=10)
    assert text.splitlines()[1] == "≡" * 10


@pytest.mark.parametrize("width, padding", [(0, 4), (10, -1)])
def test_invalid_arguments(width, padding):
    with pytest.raises(ValueError):
        layout(["a"], width=width, padding=padding)
