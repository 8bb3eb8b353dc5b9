"""
Debugger - owns the filter table and the shared line writer

Loggers are acquired from a Debugger. A process-wide default instance is
created lazily for the module-level ``debug()`` function.
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import threading

from debug_module.core.debug_config import DebugConfig
from debug_module.core.debug_logger import DebugLogger, NAME_SEPARATOR
from debug_module.filters.filter_table import FilterTable
from debug_module.filters.pattern_compiler import compile_spec
from debug_module.writers.line_writer import LineWriter


class Debugger:
    """Factory for DebugLogger handles sharing one filter table and writer."""

    def __init__(
        self,
        spec: Optional[str] = None,
        stream=None,
        config: Optional[DebugConfig] = None,
        clock: Optional[Callable[[], int]] = None,
        error_handler: Optional[Callable[[Exception], Any]] = None,
    ):
        """
        Initialize debugger.

        Args:
            spec: Specification string. If None, the table is built from
                  config on first use.
            stream: Output stream (default: config.stream, else sys.stderr)
            config: Configuration (default: DebugConfig.default())
            clock: Nanosecond clock for elapsed time
            error_handler: Called with the exception when a write fails
        """
        self._config = config or DebugConfig.default()
        self._table: Optional[FilterTable] = None
        self._table_lock = threading.Lock()
        self._writer = LineWriter(
            stream=stream if stream is not None else self._config.stream,
            clock=clock,
            error_handler=error_handler,
        )

        if spec is not None:
            self.initialize(spec)

    @property
    def table(self) -> FilterTable:
        """Current filter table, built from config if not yet initialized."""
        table = self._table
        if table is None:
            with self._table_lock:
                if self._table is None:
                    self._table = compile_spec(self._config.resolve_spec())
                table = self._table
        return table

    @property
    def writer(self) -> LineWriter:
        return self._writer

    def initialize(self, spec: str) -> FilterTable:
        """
        Compile a specification and install it.

        The new table replaces the previous one entirely. Loggers acquired
        earlier keep the verdict they captured.

        Raises:
            SpecificationError: If the specification is invalid
        """
        table = compile_spec(spec)
        with self._table_lock:
            self._table = table
        return table

    reparse = initialize

    def debug(self, name: str) -> DebugLogger:
        """
        Acquire a logger for a name.

        Resolution runs once here; acquire loggers at setup time and
        reuse them.
        """
        return DebugLogger(name, self.table.resolve(name), self._writer, self)

    def child(self, parent_name: str, segment: str) -> DebugLogger:
        """Acquire the logger named ``<parent_name>:<segment>``."""
        return self.debug(f"{parent_name}{NAME_SEPARATOR}{segment}")

    def enabled(self, name: str) -> bool:
        """Check a name against the current table without creating a logger."""
        return self.table.resolve(name)

    def set_stream(self, stream) -> None:
        """Replace the output stream for all loggers of this debugger."""
        self._writer.set_stream(stream)

    set_sink = set_stream

    def get_metrics(self) -> dict:
        """Get write metrics."""
        return self._writer.get_metrics()

    def __repr__(self) -> str:
        return f"Debugger(table={self._table!r})"


_default: Optional[Debugger] = None
_default_lock = threading.Lock()


def get_debugger() -> Debugger:
    """Get the process-wide Debugger, reading DEBUG from the environment."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Debugger(config=DebugConfig.from_env())
    return _default


def reset_default() -> None:
    """Drop the process-wide Debugger so the next call rebuilds it."""
    global _default
    with _default_lock:
        _default = None


def debug(name: str) -> DebugLogger:
    """Acquire a logger from the process-wide Debugger."""
    return get_debugger().debug(name)


def initialize(spec: str) -> FilterTable:
    """Install a specification on the process-wide Debugger."""
    return get_debugger().initialize(spec)


def reparse(spec: str) -> FilterTable:
    """Replace the specification of the process-wide Debugger."""
    return get_debugger().reparse(spec)


def set_sink(stream) -> None:
    """Replace the output stream of the process-wide Debugger."""
    get_debugger().set_stream(stream)
