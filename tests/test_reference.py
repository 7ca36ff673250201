#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# tests/test_reference.py
import pytest

from replference import man, fun, subtree, topics, topics_table
from replference.core.errors import TypeLookupError, UnclassifiableError, UnknownTopicError
from replference.core.reference import subclass_tree
from replference.core.resolver import TOPICS


def test_man_renders_document(console):
    record = man("integers", output=console)
    assert record.topic == "integers"
    assert record.title == "INTEGERS"
    assert "INTEGERS" in console.text
    assert "Overflow" in console.text


def test_man_accepts_values(console):
    assert man(3.14, output=console).topic == "floats"
    assert man((1, 2), output=console).topic == "tuples"


def test_man_warns_about_substitution(console):
    assert man("integr", output=console).topic == "integers"
    assert "Unknown topic 'integr', showing 'integers' instead" in console.text


def test_exact_match_prints_no_warning(console):
    man("io", output=console)
    assert "instead" not in console.text


def test_man_unknown_topic(console):
    with pytest.raises(UnknownTopicError):
        man("xyz-not-a-topic", output=console)
    with pytest.raises(UnclassifiableError):
        man(None, output=console)


def test_fun_lists_macros_first(console):
    fun("rationals", width=80, output=console)
    text = console.text
    assert "@assert    @doc    @evalpoly    @fastmath    @show    @showtime" in text
    assert text.index("Macros") < text.index("Constants") < text.index("Methods")
    assert "Stdlib" not in text


def test_fun_respects_width(console):
    fun("rationals", width=40, output=console)
    assert "@assert    @evalpoly    @show" in console.text


def test_fun_explains_unexported_marker(console):
    fun("rationals", width=80, output=console)
    assert "not exported" in console.text


def test_fun_extended_scope(console):
    fun("rationals", extended_scope=True, width=80, output=console)
    assert "Including Stdlib names for 'rationals'" in console.text
    assert "Stdlib" in console.text
    assert "Printf.@printf" in console.text


def test_fun_without_catalogue_warns(console):
    assert fun("reserved", output=console) is None
    assert "No operations are catalogued for 'keywords'" in console.text


def test_fun_accepts_values(console):
    fun({1, 2}, width=80, output=console)
    assert "union" in console.text


def test_subclass_tree():
    tree = subclass_tree(ArithmeticError)
    assert "ZeroDivisionError" in tree
    assert tree["ZeroDivisionError"] == {}

    deeper = subclass_tree(OSError, max_depth=2)
    assert "BrokenPipeError" in deeper["ConnectionError"]


def test_subtree_prints_tree(console):
    subtree(ArithmeticError, output=console)
    assert "ArithmeticError" in console.text
    assert "OverflowError" in console.text


def test_subtree_accepts_names(console):
    subtree("LookupError", output=console)
    assert "IndexError" in console.text
    assert "KeyError" in console.text

    subtree("numbers.Number", max_depth=4, output=console)
    assert "numbers.Integral" in console.text


def test_subtree_of_leaf_class(console):
    class Leaf:
        pass

    subtree(Leaf, output=console)
    assert "has no subclasses" in console.text


@pytest.mark.parametrize("name", ["no.such.Thing", "NoSuchBuiltin", "len", "os.path.nope", ""])
def test_subtree_rejects_non_classes(console, name):
    with pytest.raises(TypeLookupError):
        subtree(name, output=console)


def test_subtree_depth_must_be_positive(console):
    with pytest.raises(ValueError):
        subtree(int, max_depth=0, output=console)


def test_topics():
    assert topics() == list(TOPICS)


def test_fun_without_extended_scope_has_no_status(console):
    fun("rationals", width=80, output=console)
    assert "Including" not in console.text


def test_topics_table(console):
    topics_table(output=console)
    assert "Topics" in console.text
    assert "keywords" in console.text
    assert "reserved" in console.text
    assert "✓" in console.text
