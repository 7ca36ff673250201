#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/fun.py
from typing import Any, List

from replference.commands.base import CommandBase
from replference.core.reference import fun
from replference.core.utils import parse_topic_argument, split_options

EXTENDED_OPTIONS = ("-x", "--extended")


class FunCommand(CommandBase):
    """函数列表命令"""

    name = "fun"
    help_short = "List the functions available for a topic or a value"
    help_text = ("List the functions, macros, types and operators that apply to a topic, "
                 "grouped by category. With --extended, names from peripheral standard "
                 "library modules are listed too")
    usage = "fun [-x | --extended] <topic | literal>"
    examples = [
        "fun strings",
        "fun --extended integers",
        "fun 42",
        "fun {'a': 1}"
    ]

    def execute(self, context: Any, args: str):
        """
        执行命令

        参数:
            context: ReplShell实例
            args: 命令参数
        """
        options, rest = split_options(args, EXTENDED_OPTIONS)
        if not rest:
            context.console.error(f"Usage: {self.usage}")
            return

        fun(
            parse_topic_argument(rest),
            extended_scope=bool(options),
            width=context.width,
            output=context.console
        )

    def get_completions(self, document, args: List[str]):
        """获取命令补全"""
        word = args[-1] if args and not document.text.endswith(" ") else ""
        if word.startswith("-"):
            yield from self.complete_words(document, args, EXTENDED_OPTIONS, "include peripheral modules")
        else:
            yield from self.complete_topics(document, args)
