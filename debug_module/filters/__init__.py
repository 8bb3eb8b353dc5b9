"""
Name filters module

Compiles specification strings into include/exclude tables.
"""

from debug_module.filters.name_matcher import NameMatcher
from debug_module.filters.filter_table import FilterTable
from debug_module.filters.pattern_compiler import compile_spec

__all__ = [
    "NameMatcher",
    "FilterTable",
    "compile_spec",
]
