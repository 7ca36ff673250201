#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/topics.py
from typing import Any

from replference.commands.base import CommandBase
from replference.core.reference import topics_table


class TopicsCommand(CommandBase):
    """主题列表命令"""

    name = "topics"
    help_short = "List every topic and its synonyms"
    help_text = "List the topics understood by man and fun, the keywords that select them, and what is available for each"
    usage = "topics"
    examples = ["topics"]

    def execute(self, context: Any, args: str):
        """
        执行命令

        参数:
            context: ReplShell实例
            args: 命令参数
        """
        topics_table(output=context.console)
