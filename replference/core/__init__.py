#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/core/__init__.py
# Import and expose components for easier imports
from replference.core.ui import ReplConsole

__all__ = ['ReplConsole']
