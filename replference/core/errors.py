#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/errors.py
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    """主题解析失败的类型"""
    UNCLASSIFIABLE = "unclassifiable"  # 值的类型没有对应主题
    UNKNOWN = "unknown"  # 关键字既不能精确匹配也不能模糊匹配


class ReplferenceError(Exception):
    """REPLference所有可恢复错误的基类"""


class ResolutionError(ReplferenceError):
    """无法确定主题"""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, query: object = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.query = query
        self.suggestions = suggestions or []


class UnclassifiableError(ResolutionError):
    """值的类型无法归类到任何主题"""

    kind = ErrorKind.UNCLASSIFIABLE

    def __init__(self, value: object):
        type_name = type(value).__name__
        super().__init__(f"No topic is known for values of type '{type_name}'", query=value)


class UnknownTopicError(ResolutionError):
    """未知关键字"""

    kind = ErrorKind.UNKNOWN

    def __init__(self, keyword: str, suggestions: Optional[List[str]] = None):
        super().__init__(f"Unknown topic: '{keyword}'", query=keyword, suggestions=suggestions)


class DocumentNotFoundError(ReplferenceError):
    """主题没有对应的文档"""

    def __init__(self, topic: str):
        super().__init__(f"No documentation is available for '{topic}'")
        self.topic = topic


class TypeLookupError(ReplferenceError):
    """名称不是一个类"""

    def __init__(self, name: str, reason: str = "not a class"):
        super().__init__(f"Cannot resolve '{name}': {reason}")
        self.name = name
