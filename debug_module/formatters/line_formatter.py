"""
Line layout for emitted debug output

Produces ``"  name +12ms: body"``.
"""

MS_PER_SECOND = 1000


def format_elapsed(elapsed_ms: int) -> str:
    """
    Format elapsed milliseconds as ``"<n>ms"`` or ``"<n>s"``.

    Durations of 1000ms and above are shown in whole seconds,
    truncated: 1099ms -> ``"1s"``.
    """
    if elapsed_ms < MS_PER_SECOND:
        return f"{elapsed_ms}ms"
    return f"{elapsed_ms // MS_PER_SECOND}s"


class LineFormatter:
    """Format one debug line from a name, elapsed time and body."""

    def __init__(self, indent: str = "  "):
        """
        Initialize line formatter.

        Args:
            indent: Leading whitespace before the logger name
        """
        self.indent = indent

    def format(self, name: str, elapsed_ms: int, body: str) -> str:
        """
        Build the full line.

        Args:
            name: Logger name
            elapsed_ms: Milliseconds since the previous emitted line
            body: Rendered message, already newline-terminated

        Returns:
            Formatted line
        """
        return f"{self.indent}{name} +{format_elapsed(elapsed_ms)}: {body}"

    def __call__(self, name: str, elapsed_ms: int, body: str) -> str:
        return self.format(name, elapsed_ms, body)

    def __repr__(self) -> str:
        return f"LineFormatter(indent={self.indent!r})"
