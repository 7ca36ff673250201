#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/commands/__init__.py
from typing import Dict
from replference.commands.base import CommandBase
from replference.commands.man import ManCommand
from replference.commands.fun import FunCommand
from replference.commands.subtree import SubtreeCommand
from replference.commands.topics import TopicsCommand


def get_all_commands() -> Dict[str, CommandBase]:
    """
    获取所有可用命令

    返回:
        命令字典
    """
    commands = {}

    # 注册命令
    for command_class in [
        ManCommand,
        FunCommand,
        SubtreeCommand,
        TopicsCommand,
    ]:
        cmd = command_class()
        commands[cmd.name] = cmd

    return commands


# 定义对外提供的函数作为模块API
__all__ = ['get_all_commands', 'CommandBase']
