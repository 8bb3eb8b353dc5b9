"""
Core module for the debug logger

This module contains the fundamental classes:
- Debugger: Owns the filter table and shared writer
- DebugLogger: Per-name logger handle
- DebugConfig: Configuration management
"""

from debug_module.core.debug_config import DebugConfig
from debug_module.core.debug_logger import DebugLogger
from debug_module.core.debugger import Debugger

__all__ = ["Debugger", "DebugLogger", "DebugConfig"]
