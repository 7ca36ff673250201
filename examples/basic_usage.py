#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# examples/basic_usage.py
"""
Python API 使用示例
"""

import sys
import os
from fractions import Fraction

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from replference import UnknownTopicError, format_listing, fun, man, resolve, subtree


def print_separator():
    """打印分隔线"""
    print("\n" + "=" * 50 + "\n")


def main():
    # 关键字、同义词和拼写错误
    for keyword in ["integers", "io", "flaots"]:
        resolution = resolve(keyword)
        print(f"{keyword!r} -> {resolution.topic} ({resolution.method})")

    try:
        resolve("xyz-not-a-topic")
    except UnknownTopicError as e:
        print(f"{e} (suggestions: {e.suggestions})")

    print_separator()

    # 值按类型归类
    man(Fraction(1, 3))

    print_separator()

    fun("tuples", width=60)
    fun("rationals", extended_scope=True, width=60)

    print_separator()

    # 不经过控制台，直接得到文本
    print(format_listing({"Macros": ["@show", "@fastmath", "@isdefined", "@evalpoly"]}))

    print_separator()

    subtree(ArithmeticError)
    subtree("OSError", max_depth=2)


if __name__ == "__main__":
    main()
