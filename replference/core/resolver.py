#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/resolver.py
"""
主题解析：把用户输入的关键字或者一个值映射到唯一的规范主题。

解析顺序：
1. 同义词表精确匹配
2. 前缀匹配（关键字以某个已知关键字开头）
3. 基于编辑距离的模糊匹配
"""

import array
import ast
import datetime
import io
import numbers
import random
import re
import types
from collections.abc import Mapping, Set
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from replference.core.errors import UnclassifiableError, UnknownTopicError

# 模糊匹配的相似度必须大于该阈值
FUZZY_THRESHOLD = 0.7
# 参与前缀匹配的关键字最短长度
PREFIX_MIN_LENGTH = 4
# 解析失败时给出的候选数量
MAX_SUGGESTIONS = 3
SUGGESTION_CUTOFF = 0.5

# 规范主题 -> 同义词，顺序即主题列表的显示顺序
TOPIC_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "keywords": ("keyword", "reserved", "reserved word", "reserved words"),
    "variables": ("variable", "var", "vars"),
    "operators": ("operator", "operation", "operations"),
    "integers": ("integer", "int", "ints"),
    "floats": ("float", "floating point", "floating points", "double"),
    "complexes": ("complex", "complex number", "complex numbers"),
    "rationals": ("rational", "rational number", "rational numbers", "fraction", "fractions"),
    "irrationals": ("irrational", "irrational number", "irrational numbers"),
    "characters": ("character", "char", "chars"),
    "strings": ("string", "str", "text"),
    "ranges": ("range",),
    "arrays": ("array", "list", "lists", "vector", "vectors", "matrix", "matrices"),
    "tuples": ("tuple", "named tuple", "named tuples", "namedtuple", "namedtuples"),
    "dicts": ("dict", "dictionary", "dictionaries", "mapping", "mappings"),
    "sets": ("set",),
    "types": ("type", "datatype", "datatypes", "class", "classes"),
    "functions": ("function", "method", "methods", "procedure", "procedures", "func"),
    "files": ("file", "io", "stream", "streams"),
    "modules": ("module", "package", "packages"),
    "regexes": ("regex", "regexp", "regexps", "regular expression", "regular expressions",
                "pattern", "patterns"),
    "datetimes": ("datetime", "date", "dates", "time", "times"),
    "randoms": ("random", "rand", "random number", "random numbers"),
    "metaprogramming": ("macro", "macros", "meta", "expression", "expressions", "expr"),
    "errors": ("error", "exception", "exceptions"),
    "pointers": ("pointer", "ptr"),
    "systems": ("system", "os", "environment", "env"),
}

TOPICS: Tuple[str, ...] = tuple(TOPIC_SYNONYMS)

_SEPARATORS = re.compile(r"[\s_\-]+")


def normalize(keyword: str) -> str:
    """统一大小写和分隔符：'Named_Tuple' 与 'named tuple' 等价"""
    return _SEPARATORS.sub(" ", keyword.strip().lower()).strip()


def build_synonym_table(synonyms: Dict[str, Iterable[str]]) -> Dict[str, str]:
    """
    构建同义词表

    参数:
        synonyms: 规范主题到同义词的映射

    返回:
        规范化关键字到规范主题的映射，主题本身也是关键字

    异常:
        ValueError: 同一个关键字对应了两个主题
    """
    table: Dict[str, str] = {}
    for topic, words in synonyms.items():
        for word in (topic, *words):
            key = normalize(word)
            owner = table.setdefault(key, topic)
            if owner != topic:
                raise ValueError(f"Keyword '{key}' maps to both '{owner}' and '{topic}'")
    return table


SYNONYM_TABLE = types.MappingProxyType(build_synonym_table(TOPIC_SYNONYMS))


@dataclass(frozen=True)
class Resolution:
    """一次成功的解析结果"""
    topic: str  # 规范主题
    query: object  # 用户原始输入
    keyword: str  # 命中的关键字
    method: str  # exact / prefix / fuzzy / value
    score: float = 1.0

    @property
    def substituted(self) -> bool:
        """是否用近似关键字替换了用户输入，调用方需要提示用户"""
        return self.method in ("prefix", "fuzzy")


def edit_distance(a: str, b: str) -> int:
    """
    计算编辑距离（插入、删除、替换以及相邻字符交换各计1）

    参数:
        a: 字符串
        b: 字符串

    返回:
        最少编辑次数
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    before_previous: List[int] = []
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i] + [0] * len(b)
        for j, char_b in enumerate(b, 1):
            cost = 0 if char_a == char_b else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost
            )
            # 相邻字符交换
            if i > 1 and j > 1 and char_a == b[j - 2] and a[i - 2] == char_b:
                current[j] = min(current[j], before_previous[j - 2] + 1)
        before_previous, previous = previous, current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """相似度，范围0到1，1表示完全相同"""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - edit_distance(a, b) / longest


def _ranked_matches(keyword: str, table: Mapping) -> List[Tuple[float, str, str]]:
    """按 (相似度降序, 主题, 关键字) 排序的全部候选"""
    scored = [(similarity(keyword, key), topic, key) for key, topic in table.items()]
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return scored


def suggest(keyword: str, table: Mapping = SYNONYM_TABLE) -> List[str]:
    """返回与关键字最接近的几个主题"""
    suggestions: List[str] = []
    for score, topic, _ in _ranked_matches(normalize(keyword), table):
        if score < SUGGESTION_CUTOFF or len(suggestions) >= MAX_SUGGESTIONS:
            break
        if topic not in suggestions:
            suggestions.append(topic)
    return suggestions


def resolve_keyword(keyword: str, table: Mapping = SYNONYM_TABLE,
                    threshold: float = FUZZY_THRESHOLD) -> Resolution:
    """
    解析关键字

    参数:
        keyword: 用户输入的关键字
        table: 同义词表
        threshold: 模糊匹配阈值

    返回:
        解析结果

    异常:
        UnknownTopicError: 没有匹配的主题
    """
    key = normalize(keyword)

    if key in table:
        return Resolution(table[key], keyword, key, "exact")

    # 前缀匹配，最长的关键字优先
    prefixes = [
        candidate for candidate in table
        if len(candidate) >= PREFIX_MIN_LENGTH and key.startswith(candidate)
    ]
    if prefixes:
        best = min(prefixes, key=lambda candidate: (-len(candidate), table[candidate]))
        return Resolution(table[best], keyword, best, "prefix")

    ranked = _ranked_matches(key, table)
    if ranked and ranked[0][0] > threshold:
        score, topic, matched = ranked[0]
        return Resolution(topic, keyword, matched, "fuzzy", score)

    raise UnknownTopicError(keyword, suggest(keyword, table))


def classify(value: object) -> str:
    """
    把一个值归类为主题

    参数:
        value: 任意Python对象

    返回:
        规范主题

    异常:
        UnclassifiableError: 类型没有对应的主题
    """
    if isinstance(value, str):
        return "characters" if len(value) == 1 else "strings"

    for kinds, topic in _VALUE_TOPICS:
        if isinstance(value, kinds):
            return topic

    # 类也是可调用对象，所以放在最后
    if callable(value):
        return "functions"

    raise UnclassifiableError(value)


# 按顺序匹配：bool属于Integral，int属于Rational，需要先判断
_VALUE_TOPICS = (
    (numbers.Integral, "integers"),
    (numbers.Rational, "rationals"),
    ((numbers.Real, Decimal), "floats"),
    (numbers.Complex, "complexes"),
    ((bytes,), "strings"),
    (range, "ranges"),
    ((list, bytearray, array.array, memoryview), "arrays"),
    (tuple, "tuples"),
    (Mapping, "dicts"),
    (Set, "sets"),
    (type, "types"),
    ((re.Pattern, re.Match), "regexes"),
    ((datetime.date, datetime.time, datetime.timedelta, datetime.tzinfo), "datetimes"),
    (random.Random, "randoms"),
    (BaseException, "errors"),
    (types.ModuleType, "modules"),
    (io.IOBase, "files"),
    ((ast.AST, types.CodeType), "metaprogramming"),
)


def resolve_value(value: object) -> Resolution:
    """解析一个值，值的解析不做模糊匹配"""
    topic = classify(value)
    return Resolution(topic, value, topic, "value")


def resolve(obj: object) -> Resolution:
    """
    解析关键字或值

    字符串按关键字处理，其他对象按值处理。

    参数:
        obj: 关键字或值

    返回:
        解析结果

    异常:
        ResolutionError: 无法确定主题
    """
    if isinstance(obj, str):
        return resolve_keyword(obj)
    return resolve_value(obj)
