"""
Formatters module

Body rendering for the print/printf/println call shapes and the line layout.
"""

from debug_module.formatters.body_formatter import (
    PLACEHOLDER_PATTERN,
    has_placeholder,
    render_print,
    render_printf,
    render_println,
)
from debug_module.formatters.line_formatter import LineFormatter, format_elapsed

__all__ = [
    "PLACEHOLDER_PATTERN",
    "has_placeholder",
    "render_print",
    "render_printf",
    "render_println",
    "LineFormatter",
    "format_elapsed",
]
