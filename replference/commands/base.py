#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/base.py
from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from prompt_toolkit.completion import Completion

from replference.core.resolver import TOPICS


class CommandBase(ABC):
    """交互命令基类"""

    name = ""
    help_short = ""
    help_text = ""
    usage = ""
    examples: List[str] = []

    @abstractmethod
    def execute(self, context: Any, args: str):
        """
        执行命令

        参数:
            context: ReplShell实例
            args: 命令参数
        """
        pass

    def get_completions(self, document, args: List[str]):
        """获取命令补全"""
        yield from []

    @staticmethod
    def complete_words(document, args: List[str], words: Iterable[str], meta: str = ""):
        """补全最后一个参数"""
        word = args[-1] if args and not document.text.endswith(" ") else ""
        for candidate in words:
            if candidate.lower().startswith(word.lower()):
                yield Completion(candidate, start_position=-len(word),
                                 display=candidate, display_meta=meta)

    def complete_topics(self, document, args: List[str]):
        """补全主题名称"""
        yield from self.complete_words(document, args, TOPICS, "topic")
