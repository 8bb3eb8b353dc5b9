"""
Message body rendering

Turns the arguments of a logger call into the text that follows the
line prefix. Every rendered body ends in exactly one newline.
"""

import re
from typing import Any, Sequence

NEWLINE = "\n"

# printf-style conversion: %[(key)][flags][width][.precision][length]type
PLACEHOLDER_PATTERN = re.compile(
    r"%(\([^)]*\))?[#0\-+]*(\*|\d+)?(\.(\*|\d+))?[hlL]?[diouxXeEfFgGcrsa%]"
)


def has_placeholder(text: str) -> bool:
    """
    Check whether text looks like a printf-style format string.

    Used by ``DebugLogger.__call__`` to pick between print and printf
    rendering when the first argument is a string.
    """
    return PLACEHOLDER_PATTERN.search(text) is not None


def _ensure_newline(text: str) -> str:
    if text.endswith(NEWLINE):
        return text
    return text + NEWLINE


def render_print(values: Sequence[Any]) -> str:
    """Join values with single spaces; the result ends in one newline."""
    return _ensure_newline(" ".join(_safe_str(value) for value in values))


def render_println(values: Sequence[Any]) -> str:
    """Same output as render_print; kept as its own entry point."""
    return render_print(values)


def render_printf(fmt: str, values: Sequence[Any]) -> str:
    """
    Substitute values into a printf-style format string.

    A single mapping argument is used for ``%(key)s`` placeholders.
    Mismatched arguments, or arguments that fail to convert, never
    raise; the format text is kept and an inline ``%!(ERROR: ...)``
    marker is appended with the arguments.

    Args:
        fmt: Format string
        values: Positional arguments

    Returns:
        Rendered text ending in exactly one newline
    """
    fmt = _safe_str(fmt)
    if len(values) == 1 and isinstance(values[0], dict):
        args: Any = values[0]
    else:
        args = tuple(values)

    try:
        rendered = fmt % args
    except Exception as e:
        rendered = _error_marker(fmt, values, e)

    return _ensure_newline(rendered)


def _error_marker(fmt: str, values: Sequence[Any], error: Exception) -> str:
    """Render a format failure inline instead of raising it."""
    text = fmt.rstrip(NEWLINE) + f"%!(ERROR: {error})"
    if values:
        text += "(" + ", ".join(_safe_repr(value) for value in values) + ")"
    return text


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        return f"%!(PANIC: {type(value).__name__}: {e})"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<{type(value).__name__}>"
