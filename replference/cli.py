#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/cli.py
import os
import sys
from pathlib import Path
from typing import Optional

import click

from replference.core import ReplConsole
from replference.core.errors import ReplferenceError
from replference.core.reference import fun, man, subtree, topics_table
from replference.core.repl import ReplShell
from replference.core.utils import get_version, parse_topic_argument

WIDTH_ENVVAR = "REPLFERENCE_WIDTH"


class ReplferenceCLI:
    """REPLference命令行界面类，处理CLI相关逻辑"""

    def __init__(self, width: Optional[int] = None):
        self.banner_path = Path(
            os.path.dirname(os.path.abspath(__file__))) / 'resources' / 'banner.txt'
        self.console = ReplConsole()
        self.width = width

    def display_banner(self) -> None:
        """显示banner"""
        # 读取banner文件
        try:
            with open(self.banner_path, 'r', encoding='utf-8') as f:
                banner = f.read()
        except OSError:
            # 读取失败时使用默认banner
            banner = "\nREPLference\n"

        self.console.banner(banner)
        self.console.print(f"A Julia reference for the REPL, version {get_version()}\n")

    def run_shell(self) -> None:
        """运行交互式会话"""
        shell = ReplShell(console=self.console, width=self.width)
        shell.start_console()


def _run(ctx: click.Context, action, argument: str, parse: bool = True, **kwargs) -> None:
    """执行一次查询，可恢复错误以退出码1结束"""
    try:
        if parse:
            argument = parse_topic_argument(argument)
        action(argument, **kwargs)
    except ReplferenceError as e:
        ctx.obj["console"].report_error(e)
        ctx.exit(1)


@click.group(invoke_without_command=True)
@click.option("--width", type=click.IntRange(min=1), envvar=WIDTH_ENVVAR,
              help="Maximum line width of function listings (default: terminal width)")
@click.pass_context
def cli(ctx, width):
    """REPLference - topic documentation and function listings for Julia"""
    ctx.ensure_object(dict)
    ctx.obj["width"] = width
    ctx.obj["console"] = ReplConsole()

    # 如果没有子命令，进入交互式会话
    if ctx.invoked_subcommand is None:
        replference_cli = ReplferenceCLI(width)
        replference_cli.display_banner()
        replference_cli.run_shell()


@cli.command("man")
@click.argument("topic")
@click.pass_context
def man_command(ctx, topic):
    """Show documentation for TOPIC (a keyword or a Python literal)"""
    _run(ctx, man, topic, output=ctx.obj["console"])


@cli.command("fun")
@click.argument("topic")
@click.option("-x", "--extended", is_flag=True,
              help="Also list names from peripheral standard library modules")
@click.option("--width", type=click.IntRange(min=1), default=None,
              help="Maximum line width of the listing")
@click.pass_context
def fun_command(ctx, topic, extended, width):
    """List the functions available for TOPIC (a keyword or a Python literal)"""
    _run(ctx, fun, topic, extended_scope=extended,
         width=width or ctx.obj["width"], output=ctx.obj["console"])


@cli.command("subtree")
@click.argument("name")
@click.option("--depth", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of levels to show")
@click.pass_context
def subtree_command(ctx, name, depth):
    """Show the subclasses of the Python class NAME as a tree"""
    _run(ctx, subtree, name, parse=False, max_depth=depth, output=ctx.obj["console"])


@cli.command("topics")
@click.pass_context
def topics_command(ctx):
    """List every topic and its synonyms"""
    topics_table(output=ctx.obj["console"])


@cli.command("version")
def version_command():
    """Show the version"""
    click.echo(f"replference {get_version()}")


def main():
    """命令行主入口点"""
    try:
        cli(prog_name="replference")
    except KeyboardInterrupt:
        click.echo("\nCancelled")
        sys.exit(130)


if __name__ == "__main__":
    main()
