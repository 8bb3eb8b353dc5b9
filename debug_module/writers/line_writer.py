"""
Line writer - serialized output for all debug loggers

One lock guards the elapsed-time baseline and the sink, so lines from
concurrent loggers never interleave.
"""

import io
import sys
import threading
import time
from typing import Any, Callable, Optional

from debug_module.formatters.line_formatter import LineFormatter

NS_PER_MS = 1_000_000


class LineWriter:
    """Write formatted debug lines to a shared sink."""

    def __init__(
        self,
        stream=None,
        formatter: Optional[LineFormatter] = None,
        clock: Optional[Callable[[], int]] = None,
        error_handler: Optional[Callable[[Exception], Any]] = None,
    ):
        """
        Initialize line writer.

        Args:
            stream: Output stream (default: sys.stderr, looked up per write)
            formatter: Line formatter (default: LineFormatter())
            clock: Nanosecond source for elapsed time
                   (default: time.monotonic_ns)
            error_handler: Called with the exception when a write fails
        """
        self.stream = stream
        self.formatter = formatter or LineFormatter()
        self.error_handler = error_handler
        self._clock = clock or time.monotonic_ns
        self._lock = threading.Lock()
        self._last = self._clock()
        self._metrics = {"written": 0, "failed": 0}

    def emit(self, name: str, body: str) -> None:
        """
        Format and write one line.

        The timestamp read, write and baseline update happen under the
        shared lock. Write failures are counted and reported to
        error_handler; neither they nor handler errors reach the caller.

        Args:
            name: Logger name
            body: Rendered message, newline-terminated
        """
        error = None
        with self._lock:
            now = self._clock()
            elapsed_ms = max(0, (now - self._last) // NS_PER_MS)
            self._last = now

            line = self.formatter.format(name, elapsed_ms, body)
            try:
                self._write(line)
            except Exception as e:
                self._metrics["failed"] += 1
                error = e
            else:
                self._metrics["written"] += 1

        if error is not None and self.error_handler:
            try:
                self.error_handler(error)
            except Exception as e:
                print(f"Debug error handler failed: {e}", file=sys.__stderr__)

    def _write(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        if isinstance(stream, io.RawIOBase):
            _write_all(stream, line.encode("utf-8"))
        elif isinstance(stream, io.BufferedIOBase):
            stream.write(line.encode("utf-8"))
        else:
            stream.write(line)
        if hasattr(stream, "flush"):
            stream.flush()

    def set_stream(self, stream) -> None:
        """Replace the sink. None restores the default (sys.stderr)."""
        with self._lock:
            self.stream = stream

    def flush(self) -> None:
        """Flush the sink."""
        with self._lock:
            stream = self.stream if self.stream is not None else sys.stderr
            if hasattr(stream, "flush"):
                stream.flush()

    def get_metrics(self) -> dict:
        """Get write metrics."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        return f"LineWriter(stream={self.stream!r})"


def _write_all(stream: io.RawIOBase, data: bytes) -> None:
    """Write every byte to a raw stream, which may accept partial writes."""
    view = memoryview(data)
    while view:
        written = stream.write(view)
        if not written:
            raise OSError(f"Short write to debug sink: {len(view)} bytes not written")
        view = view[written:]
