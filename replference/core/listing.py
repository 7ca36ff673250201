#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/listing.py
"""
把按类别分组的函数名排成按列填充的多列文本。

名称先沿一列向下填满，再开始下一列；列宽等于该列最长名称的显示宽度，
列与列之间用固定数量的空格隔开。
"""

from collections.abc import Mapping
from typing import Iterable, Iterator, List, NamedTuple, Optional

from rich.cells import cell_len

DEFAULT_WIDTH = 80
COLUMN_PADDING = 4
HEADER_RULE = "≡"
SUBHEADER_RULE = "-"


class ListingBlock(NamedTuple):
    """一个类别的输出块"""
    label: str
    depth: int  # 0为顶层类别，1为子类别
    lines: List[str]  # 为空表示只有标题（子类别随后输出）


def _column_width(column: List[str]) -> int:
    return max(cell_len(name) for name in column)


def _split_columns(names: List[str], rows: int) -> List[List[str]]:
    return [names[start:start + rows] for start in range(0, len(names), rows)]


def layout(names: Iterable[str], width: int = DEFAULT_WIDTH,
           padding: int = COLUMN_PADDING) -> List[List[str]]:
    """
    计算列布局

    从1行开始逐步增加行数，找到第一个总宽度不超过width的布局，
    也就是能放下的最多列数。每次尝试都重新计算各列宽度。

    参数:
        names: 名称集合，会去重并排序
        width: 最大行宽
        padding: 列间距

    返回:
        列的列表，每列是一组名称
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    if padding < 0:
        raise ValueError(f"padding must not be negative, got {padding}")

    items = sorted(set(names))
    if not items:
        return []

    for rows in range(1, len(items) + 1):
        columns = _split_columns(items, rows)
        total = sum(_column_width(column) for column in columns) + padding * (len(columns) - 1)
        if total <= width:
            return columns

    # 有名称本身超过了最大宽度，只能单列显示
    return [items]


def format_columns(names: Iterable[str], width: int = DEFAULT_WIDTH,
                   padding: int = COLUMN_PADDING) -> List[str]:
    """
    把名称排成多列

    参数:
        names: 名称集合
        width: 最大行宽
        padding: 列间距

    返回:
        文本行列表，行尾没有空白
    """
    columns = layout(names, width, padding)
    if not columns:
        return []

    widths = [_column_width(column) for column in columns]
    last = len(columns) - 1
    lines = []
    for row in range(len(columns[0])):
        cells = []
        for index, column in enumerate(columns):
            # 只有最后一列可能不满
            if row >= len(column):
                break
            name = column[row]
            if index < last:
                name += " " * (widths[index] - cell_len(name) + padding)
            cells.append(name)
        lines.append("".join(cells).rstrip())

    return lines


def iter_blocks(categories: Optional[Mapping], width: int = DEFAULT_WIDTH,
                padding: int = COLUMN_PADDING, depth: int = 0) -> Iterator[ListingBlock]:
    """
    按给定顺序逐个输出类别块，空类别直接跳过

    类别的值可以是名称列表，也可以是子类别映射。
    """
    if not categories:
        return

    for label, entries in categories.items():
        if not entries:
            continue

        if isinstance(entries, Mapping):
            children = list(iter_blocks(entries, width, padding, depth + 1))
            if children:
                yield ListingBlock(label, depth, [])
                yield from children
            continue

        lines = format_columns(entries, width, padding)
        if lines:
            yield ListingBlock(label, depth, lines)


def header_lines(block: ListingBlock, width: int = DEFAULT_WIDTH) -> List[str]:
    """类别标题及其下划线"""
    rule = HEADER_RULE if block.depth == 0 else SUBHEADER_RULE
    return [block.label, rule * min(cell_len(block.label) + 2, width)]


def format_listing(categories: Optional[Mapping], width: int = DEFAULT_WIDTH,
                   padding: int = COLUMN_PADDING) -> str:
    """
    格式化整个分组列表

    参数:
        categories: 类别名 -> 名称列表（或子类别映射）
        width: 最大行宽
        padding: 列间距

    返回:
        格式化后的文本，没有任何名称时返回空字符串
    """
    chunks = []
    for block in iter_blocks(categories, width, padding):
        chunks.append("\n".join(header_lines(block, width) + block.lines))
    return "\n\n".join(chunks)
