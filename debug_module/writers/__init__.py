"""Writers module - Debug line output"""

from debug_module.writers.line_writer import LineWriter

__all__ = ["LineWriter"]
