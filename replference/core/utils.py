#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/utils.py

import ast
import builtins
import importlib
from typing import Iterable, Set, Tuple

from replference.core.errors import TypeLookupError
from replference.core.resolver import Resolution, resolve_keyword, resolve_value


def get_version() -> str:
    """获取当前版本"""
    return "0.1.0"


def parse_topic_argument(text: str) -> Resolution:
    """
    解析命令参数

    能按Python字面量解析的参数（42、[1, 2]、'x'）当作值，其他的当作关键字。
    带引号的字符串也是值，所以 man 'x' 显示字符的文档。

    参数:
        text: 命令参数

    返回:
        解析结果

    异常:
        ResolutionError: 无法确定主题
    """
    text = text.strip()
    try:
        value = ast.literal_eval(text)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        return resolve_keyword(text)
    return resolve_value(value)


def split_options(args: str, known: Iterable[str]) -> Tuple[Set[str], str]:
    """
    从参数中分离出选项

    参数:
        args: 命令参数
        known: 可识别的选项，例如 {"-x", "--extended"}

    返回:
        (出现的选项, 剩余参数)
    """
    known = set(known)
    options = set()
    rest = []
    for part in args.strip().split():
        if part.lower() in known:
            options.add(part.lower())
        else:
            rest.append(part)
    return options, " ".join(rest)


def lookup_class(name: str) -> type:
    """
    根据名称查找类

    参数:
        name: 内置类名（Exception）或带模块的完整名称（collections.abc.Sequence）

    返回:
        类对象

    异常:
        TypeLookupError: 找不到或者不是类
    """
    name = name.strip()
    if not name:
        raise TypeLookupError(name, "empty name")

    parts = name.split(".")
    if len(parts) == 1:
        obj = getattr(builtins, name, None)
        if obj is None:
            raise TypeLookupError(name, "no such builtin")
    else:
        obj = None
        # 从最长的模块路径开始尝试导入，剩余部分作为属性访问
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                obj = importlib.import_module(module_name)
            except (ImportError, ValueError):
                continue
            try:
                for attr in parts[split:]:
                    obj = getattr(obj, attr)
            except AttributeError:
                raise TypeLookupError(name, f"module '{module_name}' has no attribute '{attr}'")
            break
        if obj is None:
            raise TypeLookupError(name, "module not found")

    if not isinstance(obj, type):
        raise TypeLookupError(name, "not a class")
    return obj
