#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# replference/__init__.py
from replference.core.errors import (
    DocumentNotFoundError,
    ErrorKind,
    ReplferenceError,
    ResolutionError,
    TypeLookupError,
    UnclassifiableError,
    UnknownTopicError,
)
from replference.core.listing import format_columns, format_listing
from replference.core.reference import fun, man, subtree, topics, topics_table
from replference.core.registry import DocumentRecord
from replference.core.resolver import Resolution, resolve
from replference.core.utils import get_version

__version__ = get_version()

__all__ = [
    'man', 'fun', 'subtree', 'topics', 'topics_table', 'resolve', 'Resolution',
    'format_columns', 'format_listing', 'DocumentRecord',
    'ReplferenceError', 'ResolutionError', 'UnclassifiableError', 'UnknownTopicError',
    'DocumentNotFoundError', 'TypeLookupError', 'ErrorKind',
]
