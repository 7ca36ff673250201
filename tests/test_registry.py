#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# tests/test_registry.py
import json

import pytest

from replference.core.errors import DocumentNotFoundError
from replference.core.registry import Registry, get_registry, prioritize
from replference.core.resolver import TOPICS

CATALOGUED = [topic for topic in TOPICS if topic != "keywords"]


@pytest.fixture(scope="module")
def registry():
    return get_registry()


@pytest.mark.parametrize("topic", TOPICS)
def test_every_topic_has_a_document(registry, topic):
    record = registry.document(topic)
    assert record.topic == topic
    assert record.title
    assert record.text.startswith("# ")


@pytest.mark.parametrize("topic", CATALOGUED)
def test_catalogues_load(registry, topic):
    catalog = registry.catalog(topic)
    assert catalog is not None
    assert catalog.topic == topic
    assert catalog.sections
    with open(registry.catalog_path(topic), "r", encoding="utf-8") as f:
        assert json.load(f)["topic"] == topic


def test_keywords_have_no_catalogue(registry):
    assert registry.catalog("keywords") is None
    assert not registry.has_catalog("keywords")
    assert registry.has_document("keywords")


def test_macros_come_first(registry):
    categories = registry.catalog("rationals").categories()
    assert list(categories)[0] == "Macros"
    assert "Stdlib" not in categories


def test_extended_scope_appends_peripheral_modules(registry):
    categories = registry.catalog("rationals").categories(extended_scope=True)
    assert list(categories)[-1] == "Stdlib"
    assert "Printf.@printf" in registry.catalog("rationals").names(extended_scope=True)
    assert "Printf.@printf" not in registry.catalog("rationals").names()


def test_methods_are_split_into_subcategories(registry):
    methods = registry.catalog("integers").categories()["Methods"]
    assert isinstance(methods, dict)
    assert "Bitwise" in methods


def test_prioritize_keeps_relative_order():
    sections = {"Types": ["Int"], "Macros": ["@show"], "Constants": ["pi"]}
    assert list(prioritize(sections)) == ["Macros", "Types", "Constants"]
    assert list(prioritize({"Types": ["Int"]})) == ["Types"]


def test_document_title_comes_from_first_heading(registry):
    assert registry.document("floats").title == "FLOATING-POINT NUMBERS"


def test_missing_document(tmp_path):
    empty = Registry(tmp_path)
    with pytest.raises(DocumentNotFoundError):
        empty.document("integers")
    assert empty.catalog("integers") is None


def test_title_falls_back_to_topic(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "sets.md").write_text("No heading here\n", encoding="utf-8")
    assert Registry(tmp_path).document("sets").title == "Sets"
