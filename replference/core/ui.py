#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/ui.py
from typing import IO, Any, Dict, Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.tree import Tree

from replference.core.listing import ListingBlock, header_lines

# 定义主题
replference_theme = Theme({
    "banner": "magenta bold",
    "info": "cyan",
    "success": "green bold",
    "warning": "yellow",
    "error": "red bold",
    "status": "blue",
    "prompt": "cyan bold",
    "highlight": "magenta",
    "command": "yellow bold",
    "category": "yellow bold",
    "subcategory": "bold underline",
    "name": "default"
})


class ReplConsole:
    """自定义控制台输出"""

    def __init__(self, file: Optional[IO[str]] = None, width: Optional[int] = None):
        """
        初始化控制台

        参数:
            file: 输出目标，默认为标准输出
            width: 固定宽度，默认使用终端宽度
        """
        self.console = Console(theme=replference_theme, file=file, width=width)

    @property
    def width(self) -> int:
        """当前输出宽度"""
        return self.console.width

    def banner(self, text: str):
        """显示横幅文本"""
        self.console.print(text, style="banner", markup=False)

    def info(self, text: str):
        """显示信息文本"""
        self.console.print(f"[info][[*]] {escape(text)}[/info]")

    def success(self, text: str):
        """显示成功文本"""
        self.console.print(f"[success][[+]] {escape(text)}[/success]")

    def warning(self, text: str):
        """显示警告文本"""
        self.console.print(f"[warning][[!]] {escape(text)}[/warning]")

    def error(self, text: str):
        """显示错误文本"""
        self.console.print(f"[error][[x]] {escape(text)}[/error]")

    def status(self, text: str):
        """显示状态文本"""
        self.console.print(f"[status][[>]] {escape(text)}[/status]")

    def newline(self):
        """显示空行"""
        self.console.print()

    def print(self, text: str, style: Optional[str] = None):
        """显示自定义样式文本"""
        self.console.print(text, style=style)

    def print_table(self, table: Table):
        """打印表格"""
        self.console.print(table)

    def markdown(self, text: str):
        """显示Markdown文本"""
        self.console.print(Markdown(text))

    def table(self, title: Optional[str] = None) -> Table:
        """创建表格"""
        return Table(title=title, box=box.SIMPLE)

    def report_error(self, error: Exception):
        """显示可恢复的错误，有候选主题时一并提示"""
        self.error(str(error))
        suggestions = getattr(error, "suggestions", None)
        if suggestions:
            self.info(f"Did you mean: {', '.join(suggestions)}?")

    def listing(self, blocks: Iterable[ListingBlock], width: Optional[int] = None):
        """
        显示分组的函数列表

        参数:
            blocks: listing.iter_blocks 生成的输出块
            width: 标题下划线的最大宽度
        """
        width = width or self.width
        for index, block in enumerate(blocks):
            if index:
                self.console.print()
            label, rule = header_lines(block, width)
            style = "category" if block.depth == 0 else "subcategory"
            self.console.print(Text(label, style=style))
            self.console.print(Text(rule, style=style))
            for line in block.lines:
                # 名称里可能有方括号之类的字符，不能按markup解析
                self.console.print(Text(line, style="name"), no_wrap=True, overflow="ignore",
                                   crop=False)

    def show_help(self, commands: Dict[str, Any]):
        """显示帮助信息"""
        table = self.table("Available Commands")

        table.add_column("Command", style="command")
        table.add_column("Description", style="info")

        for name, cmd in sorted(commands.items()):
            table.add_row(name, cmd.help_short)
        table.add_row("help", "Show this list, or help for one command")
        table.add_row("q/quit/exit", "Leave the shell")

        self.console.print(table)

    def show_command_help(self, command: str, description: str,
                          usage: str, examples: Optional[List[str]] = None):
        """显示命令帮助信息"""
        self.console.print(f"[command]{command}[/command]", style="bold")
        self.console.print(f"{escape(description)}\n")

        self.console.print("[bold]Usage:[/bold]")
        self.console.print(f"  {escape(usage)}")

        if examples:
            self.console.print("\n[bold]Examples:[/bold]")
            for example in examples:
                self.console.print(f"  {escape(example)}")

    def print_tree(self, data, title: Optional[str] = None):
        """显示树形数据结构或直接打印已经构建好的Rich Tree

        Args:
            data: 嵌套字典（键为节点名，值为子节点字典）或者Tree对象
            title: 可选的树形图标题
        """
        # 如果data已经是一个Tree对象，直接打印
        if isinstance(data, Tree):
            self.console.print(data)
            return

        tree = Tree(Text(title or "", style="bold"))

        # 递归构建树
        def _build_tree(node, children):
            for key, value in children.items():
                branch = node.add(Text(str(key), style="highlight"))
                if isinstance(value, dict) and value:
                    _build_tree(branch, value)

        _build_tree(tree, data)

        self.console.print(tree)
