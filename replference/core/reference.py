#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/reference.py
"""
对外提供的查询函数：man、fun、subtree、topics。
"""

from typing import Dict, List, Optional, Union

from replference.core.listing import COLUMN_PADDING, iter_blocks
from replference.core.registry import DocumentRecord, get_registry
from replference.core.resolver import TOPIC_SYNONYMS, TOPICS, Resolution, resolve
from replference.core.ui import ReplConsole
from replference.core.utils import lookup_class

# 未导出名称的标记
UNEXPORTED_MARK = "ˣ"

# 控制台实例
console = ReplConsole()


def _resolve(topic_or_value: object, out: ReplConsole) -> Resolution:
    # 命令行参数已经解析过了
    if isinstance(topic_or_value, Resolution):
        resolution = topic_or_value
    else:
        resolution = resolve(topic_or_value)
    if resolution.substituted:
        out.warning(f"Unknown topic '{resolution.query}', showing '{resolution.topic}' instead")
    return resolution


def man(topic_or_value: object, output: Optional[ReplConsole] = None) -> DocumentRecord:
    """
    显示主题的说明文档

    参数:
        topic_or_value: 主题关键字、任意值或者已有的解析结果
        output: 输出控制台，默认为模块级控制台

    返回:
        文档记录

    异常:
        ResolutionError: 无法确定主题
        DocumentNotFoundError: 主题没有文档
    """
    out = output or console
    resolution = _resolve(topic_or_value, out)
    record = get_registry().document(resolution.topic)
    out.markdown(record.text)
    return record


def fun(topic_or_value: object, extended_scope: bool = False,
        width: Optional[int] = None, output: Optional[ReplConsole] = None) -> None:
    """
    列出主题下可用的函数

    参数:
        topic_or_value: 主题关键字、任意值或者已有的解析结果
        extended_scope: 是否包括外围标准库模块中的名称
        width: 最大行宽，默认使用终端宽度
        output: 输出控制台，默认为模块级控制台

    异常:
        ResolutionError: 无法确定主题
    """
    out = output or console
    resolution = _resolve(topic_or_value, out)

    catalog = get_registry().catalog(resolution.topic)
    if catalog is None:
        out.warning(f"No operations are catalogued for '{resolution.topic}'")
        out.info(f"Use 'man {resolution.topic}' to read about it")
        return None

    if extended_scope and catalog.extended:
        out.status(f"Including {', '.join(catalog.extended)} names for '{resolution.topic}'")

    width = width or out.width
    categories = catalog.categories(extended_scope)
    out.listing(iter_blocks(categories, width, COLUMN_PADDING), width)

    if any(UNEXPORTED_MARK in name for name in catalog.names(extended_scope)):
        out.newline()
        out.info(f"Names marked with {UNEXPORTED_MARK} are not exported; "
                 f"call them qualified, e.g. Base.name")
    return None


def _class_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _subclasses(cls: type) -> List[type]:
    # type.__subclasses__ 对 type 自身也能用
    return sorted(type.__subclasses__(cls), key=_class_name)


def subclass_tree(cls: type, max_depth: int = 1, depth: int = 0) -> Dict[str, dict]:
    """
    构建子类树

    参数:
        cls: 根类
        max_depth: 最大深度
        depth: 当前深度

    返回:
        类名 -> 子树
    """
    if depth >= max_depth:
        return {}
    return {
        _class_name(sub): subclass_tree(sub, max_depth, depth + 1)
        for sub in _subclasses(cls)
    }


def subtree(cls: Union[type, str], max_depth: int = 1,
            output: Optional[ReplConsole] = None) -> None:
    """
    以树形显示一个类的子类

    参数:
        cls: 类或者类名
        max_depth: 显示的层数
        output: 输出控制台，默认为模块级控制台

    异常:
        TypeLookupError: 类名无法解析为类
    """
    out = output or console
    if isinstance(cls, str):
        cls = lookup_class(cls)
    if max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")

    tree = subclass_tree(cls, max_depth)
    if not tree:
        out.info(f"'{_class_name(cls)}' has no subclasses")
        return None
    out.print_tree(tree, title=_class_name(cls))
    return None


def topics() -> List[str]:
    """所有规范主题"""
    return list(TOPICS)


def topics_table(output: Optional[ReplConsole] = None) -> None:
    """
    以表格显示所有主题、同义词以及可用的资料

    参数:
        output: 输出控制台，默认为模块级控制台
    """
    out = output or console
    registry = get_registry()
    table = out.table("Topics")

    table.add_column("Topic", style="command")
    table.add_column("Synonyms", style="info")
    table.add_column("man", justify="center")
    table.add_column("fun", justify="center")

    for topic, synonyms in TOPIC_SYNONYMS.items():
        table.add_row(
            topic,
            ", ".join(synonyms),
            "✓" if registry.has_document(topic) else "",
            "✓" if registry.has_catalog(topic) else ""
        )

    out.print_table(table)
