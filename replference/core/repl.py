#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/repl.py
import os
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory
from prompt_toolkit.styles import Style

from replference.commands import get_all_commands
from replference.core.errors import ReplferenceError
from replference.core.ui import ReplConsole

HISTORY_FILE = "~/.replference_history"
EXIT_COMMANDS = ["q", "quit", "exit"]


class ReplCompleter(Completer):
    """交互控制台的命令补全器"""

    def __init__(self, shell):
        self.shell = shell

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()

        # 分割文本为命令和参数
        parts = text.split()
        cmd = parts[0].lower() if parts else ""
        args = parts[1:] if len(parts) > 1 else []

        # 补全命令名
        if not parts or (len(parts) == 1 and not text.endswith(" ")):
            for name, cmd_obj in self.shell.commands.items():
                if name.startswith(cmd):
                    yield Completion(name, start_position=-len(cmd),
                                     display=name, display_meta=cmd_obj.help_short)
            for name in ["help"] + EXIT_COMMANDS:
                if name.startswith(cmd):
                    yield Completion(name, start_position=-len(cmd),
                                     display=name, display_meta=self._builtin_help(name))
            return

        if cmd == "help":
            word = args[0] if args and not text.endswith(" ") else ""
            if len(args) <= 1:
                for name in self.shell.commands:
                    if name.startswith(word):
                        yield Completion(name, start_position=-len(word),
                                         display=name, display_meta=f"Show {name} help")
            return

        # 委托给命令自己的补全器
        if cmd in self.shell.commands:
            yield from self.shell.commands[cmd].get_completions(document, args)

    @staticmethod
    def _builtin_help(cmd_name: str) -> str:
        """内置命令的帮助描述"""
        if cmd_name == "help":
            return "Show help"
        if cmd_name in EXIT_COMMANDS:
            return "Leave the shell"
        return ""


class ReplShell:
    """交互式查询控制台"""

    def __init__(self, console: Optional[ReplConsole] = None, width: Optional[int] = None,
                 history_file: str = HISTORY_FILE):
        """
        初始化控制台

        参数:
            console: 输出控制台
            width: 函数列表的最大行宽，默认使用终端宽度
            history_file: 命令历史文件
        """
        self.console = console or ReplConsole()
        self.width = width
        self.history_file = os.path.expanduser(history_file)
        self.commands = get_all_commands()
        self.running = False

    def start_console(self):
        """启动交互式控制台"""
        style = Style.from_dict({
            'prompt': 'green bold',
        })

        session = PromptSession(
            history=FileHistory(self.history_file),
            auto_suggest=AutoSuggestFromHistory(),
            completer=ReplCompleter(self),
            style=style
        )

        self.running = True
        self.console.status("Type 'help' for the list of commands, 'topics' for the list of topics")

        while self.running:
            try:
                command = session.prompt([('class:prompt', 'replference> ')])

                # 跳过空命令
                if not command.strip():
                    continue

                self.process_command(command)

            except KeyboardInterrupt:
                # 捕获Ctrl+C
                self.console.print("\nUse 'exit', 'quit' or 'q' to leave")
            except EOFError:
                # 捕获Ctrl+D
                self.running = False
                self.console.newline()
                self.console.success("Bye!")

    def process_command(self, command: str) -> bool:
        """
        处理命令

        参数:
            command: 命令字符串

        返回:
            命令是否被识别
        """
        parts = command.strip().split(maxsplit=1)
        if not parts:
            return False
        cmd = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        if cmd in EXIT_COMMANDS:
            self.running = False
            self.console.success("Bye!")
            return True

        if cmd == "help":
            self.show_help(args)
            return True

        if cmd not in self.commands:
            self.console.error(f"Unknown command: {cmd}")
            self.console.info("Type 'help' to see the available commands")
            return False

        try:
            self.commands[cmd].execute(self, args)
        except ReplferenceError as e:
            self.console.report_error(e)
        except Exception as e:
            self.console.error(f"Error while running '{cmd}': {str(e)}")
        return True

    def show_help(self, args: str):
        """
        显示命令帮助

        参数:
            args: 要显示帮助的命令
        """
        name = args.strip().lower()
        if not name:
            self.console.show_help(self.commands)
            self.console.info("Type 'help <command>' for details about one command")
            return

        if name not in self.commands:
            self.console.error(f"Unknown command: {name}")
            self.console.info(f"Available commands: {', '.join(sorted(self.commands))}, help, q/quit/exit")
            return

        cmd = self.commands[name]
        self.console.show_command_help(cmd.name, cmd.help_text, cmd.usage, cmd.examples)
