#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/subtree.py
from typing import Any, List

from replference.commands.base import CommandBase
from replference.core.reference import subtree

COMMON_CLASSES = [
    "BaseException", "Exception", "OSError", "ArithmeticError", "LookupError",
    "int", "object", "numbers.Number", "collections.abc.Iterable", "io.IOBase"
]


class SubtreeCommand(CommandBase):
    """子类树命令"""

    name = "subtree"
    help_short = "Show the subclasses of a class as a tree"
    help_text = "Print the currently loaded subclasses of a Python class, a given number of levels deep"
    usage = "subtree <class name> [depth]"
    examples = [
        "subtree Exception",
        "subtree ArithmeticError 2",
        "subtree numbers.Number 3"
    ]

    def execute(self, context: Any, args: str):
        """
        执行命令

        参数:
            context: ReplShell实例
            args: 命令参数
        """
        parts = args.strip().split()
        if not parts or len(parts) > 2:
            context.console.error(f"Usage: {self.usage}")
            return

        depth = 1
        if len(parts) == 2:
            try:
                depth = int(parts[1])
            except ValueError:
                context.console.error(f"Invalid depth: {parts[1]}")
                return
            if depth < 1:
                context.console.error("Depth must be at least 1")
                return

        subtree(parts[0], max_depth=depth, output=context.console)

    def get_completions(self, document, args: List[str]):
        """获取命令补全"""
        if len(args) == 0 or (len(args) == 1 and not document.text.endswith(" ")):
            yield from self.complete_words(document, args, COMMON_CLASSES, "class")
