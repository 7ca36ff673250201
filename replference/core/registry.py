#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/registry.py
"""
随包发布的主题资料：每个主题一份Markdown文档和一份函数清单。

    resources/docs/<topic>.md
    resources/operations/<topic>.json
"""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set

from replference.core.errors import DocumentNotFoundError

RESOURCES_DIR = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))) / "resources"

# 这些类别总是排在最前面，其余类别保持文件中的顺序
PRIORITY_CATEGORIES = ("Macros",)


@dataclass(frozen=True)
class DocumentRecord:
    """一个主题的说明文档"""
    topic: str
    title: str
    text: str


@dataclass(frozen=True)
class OperationCatalog:
    """一个主题下可用的函数，按类别分组"""
    topic: str
    sections: Dict = field(default_factory=dict)
    extended: Dict = field(default_factory=dict)  # 外围标准库模块中的名称

    def categories(self, extended_scope: bool = False) -> Dict:
        """
        按显示顺序返回类别

        参数:
            extended_scope: 是否附加外围模块中的名称

        返回:
            类别名 -> 名称列表或子类别映射
        """
        ordered = prioritize(self.sections)
        if extended_scope:
            for label, entries in self.extended.items():
                ordered.setdefault(label, entries)
        return ordered

    def names(self, extended_scope: bool = False) -> Set[str]:
        """所有名称的集合"""
        return set(_flatten(self.categories(extended_scope)))


def _flatten(categories: Mapping) -> List[str]:
    names = []
    for entries in categories.values():
        if isinstance(entries, Mapping):
            names.extend(_flatten(entries))
        else:
            names.extend(entries)
    return names


def prioritize(sections: Mapping) -> Dict:
    """把优先类别提到最前面，其他类别的相对顺序不变"""
    ordered = {label: sections[label] for label in PRIORITY_CATEGORIES if label in sections}
    for label, entries in sections.items():
        ordered.setdefault(label, entries)
    return ordered


def _document_title(topic: str, text: str) -> str:
    for line in text.splitlines():
        if line.startswith("# "):
            return line[2:].strip()
    return topic.capitalize()


class Registry:
    """按主题读取资料文件，读过的文件会被缓存"""

    def __init__(self, root: Path = RESOURCES_DIR):
        """
        初始化资料目录

        参数:
            root: 资料根目录
        """
        self.root = Path(root)
        self._catalogs: Dict[str, Optional[OperationCatalog]] = {}
        self._documents: Dict[str, DocumentRecord] = {}

    def catalog_path(self, topic: str) -> Path:
        return self.root / "operations" / f"{topic}.json"

    def document_path(self, topic: str) -> Path:
        return self.root / "docs" / f"{topic}.md"

    def catalog(self, topic: str) -> Optional[OperationCatalog]:
        """
        获取主题的函数清单

        参数:
            topic: 规范主题

        返回:
            函数清单，主题没有清单时返回None
        """
        if topic not in self._catalogs:
            path = self.catalog_path(topic)
            if path.is_file():
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                self._catalogs[topic] = OperationCatalog(
                    topic=topic,
                    sections=data.get("sections", {}),
                    extended=data.get("extended", {})
                )
            else:
                self._catalogs[topic] = None

        return self._catalogs[topic]

    def document(self, topic: str) -> DocumentRecord:
        """
        获取主题的说明文档

        参数:
            topic: 规范主题

        返回:
            文档记录

        异常:
            DocumentNotFoundError: 没有该主题的文档
        """
        if topic not in self._documents:
            path = self.document_path(topic)
            if not path.is_file():
                raise DocumentNotFoundError(topic)
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
            self._documents[topic] = DocumentRecord(topic, _document_title(topic, text), text)

        return self._documents[topic]

    def has_catalog(self, topic: str) -> bool:
        return self.catalog_path(topic).is_file()

    def has_document(self, topic: str) -> bool:
        return self.document_path(topic).is_file()


_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """获取全局资料注册表"""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry
