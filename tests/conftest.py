#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# tests/conftest.py
import io

import pytest

from replference.core.repl import ReplShell
from replference.core.ui import ReplConsole


class CapturedConsole(ReplConsole):
    """把输出写进内存的控制台"""

    def __init__(self, width: int = 100):
        self.buffer = io.StringIO()
        super().__init__(file=self.buffer, width=width)

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def console():
    return CapturedConsole()


@pytest.fixture
def shell(console, tmp_path):
    return ReplShell(console=console, width=80, history_file=str(tmp_path / "history"))
