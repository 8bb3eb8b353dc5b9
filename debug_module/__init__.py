"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Debug Logger - namespaced debug output enabled by a DEBUG pattern list
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from debug_module.core.debugger import (
    Debugger,
    debug,
    get_debugger,
    initialize,
    reparse,
    reset_default,
    set_sink,
)
from debug_module.core.debug_logger import DebugLogger
from debug_module.core.debug_config import DebugConfig
from debug_module.exceptions import SpecificationError

# Import submodules (not all classes by default)
from debug_module import filters
from debug_module import formatters
from debug_module import writers

__all__ = [
    "Debugger",
    "DebugLogger",
    "DebugConfig",
    "SpecificationError",
    "debug",
    "get_debugger",
    "initialize",
    "reparse",
    "reset_default",
    "set_sink",
    "filters",
    "formatters",
    "writers",
]
