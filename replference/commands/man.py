#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/man.py
from typing import Any, List

from replference.commands.base import CommandBase
from replference.core.reference import man
from replference.core.utils import parse_topic_argument


class ManCommand(CommandBase):
    """主题文档命令"""

    name = "man"
    help_short = "Show documentation for a topic or a value"
    help_text = ("Explain what a topic is in general and how Julia implements it. "
                 "The argument is a topic keyword, or a Python literal whose type picks the topic")
    usage = "man <topic | literal>"
    examples = [
        "man integers",
        "man regex",
        "man 3.14",
        "man [1, 2, 3]"
    ]

    def execute(self, context: Any, args: str):
        """
        执行命令

        参数:
            context: ReplShell实例
            args: 命令参数
        """
        if not args.strip():
            context.console.error(f"Usage: {self.usage}")
            return

        man(parse_topic_argument(args), output=context.console)

    def get_completions(self, document, args: List[str]):
        """获取命令补全"""
        if len(args) <= 1:
            yield from self.complete_topics(document, args)
