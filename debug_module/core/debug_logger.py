"""
Per-name debug logger handle

A DebugLogger captures its name and enabled verdict when it is acquired.
Disabled loggers return after a single boolean check: arguments are never
converted to text and the writer lock is never taken.
"""

from __future__ import annotations
from typing import Any, TYPE_CHECKING

from debug_module.formatters.body_formatter import (
    has_placeholder,
    render_print,
    render_printf,
    render_println,
)

if TYPE_CHECKING:
    from debug_module.core.debugger import Debugger
    from debug_module.writers.line_writer import LineWriter

NAME_SEPARATOR = ":"


class DebugLogger:
    """
    Callable debug logger bound to one name.

    Three explicit entry points are provided: ``print``, ``printf`` and
    ``println``. Calling the logger directly picks one of them from the
    first argument: a string containing a printf placeholder such as
    ``%s`` or ``%d`` is treated as a format string, anything else is
    printed. Strings from untrusted input may contain ``%`` sequences;
    pass those through ``print()`` rather than the call shortcut.

    Example:
        log = debug("server:http")
        log("listening on %s:%d", host, port)
        log.print("request", method, path)
        log.child("auth").printf("user %s rejected", user)
    """

    __slots__ = ("_name", "_enabled", "_writer", "_debugger")

    def __init__(
        self,
        name: str,
        enabled: bool,
        writer: "LineWriter",
        debugger: "Debugger",
    ):
        self._name = name
        self._enabled = bool(enabled)
        self._writer = writer
        self._debugger = debugger

    @property
    def name(self) -> str:
        """Full logger name."""
        return self._name

    @property
    def enabled(self) -> bool:
        """Whether this logger emits output."""
        return self._enabled

    def print(self, *values: Any) -> None:
        """Log values joined by spaces."""
        if not self._enabled:
            return
        self._writer.emit(self._name, render_print(values))

    def printf(self, fmt: str, *values: Any) -> None:
        """Log a printf-style formatted message."""
        if not self._enabled:
            return
        self._writer.emit(self._name, render_printf(fmt, values))

    def println(self, *values: Any) -> None:
        """Log values joined by spaces, one line."""
        if not self._enabled:
            return
        self._writer.emit(self._name, render_println(values))

    f = printf
    ln = println

    def __call__(self, *args: Any) -> None:
        if not self._enabled:
            return
        if args and isinstance(args[0], str) and has_placeholder(args[0]):
            self._writer.emit(self._name, render_printf(args[0], args[1:]))
        else:
            self._writer.emit(self._name, render_print(args))

    def child(self, segment: str) -> DebugLogger:
        """
        Create a logger named ``<name>:<segment>``.

        The child is resolved against the current filter table on its own;
        it does not inherit this logger's enabled state.
        """
        return self._debugger.debug(f"{self._name}{NAME_SEPARATOR}{segment}")

    def __bool__(self) -> bool:
        return self._enabled

    def __setattr__(self, key, value):
        if hasattr(self, "_debugger"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, key, value)

    def __repr__(self) -> str:
        state = "enabled" if self._enabled else "disabled"
        return f"DebugLogger(name={self._name!r}, {state})"
