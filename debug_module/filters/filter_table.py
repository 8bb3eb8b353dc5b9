"""
Compiled include/exclude table

Built once from a specification string and consulted whenever a
logger is acquired.
"""

from dataclasses import dataclass
from typing import Tuple

from debug_module.filters.name_matcher import NameMatcher


@dataclass(frozen=True)
class FilterTable:
    """
    Immutable set of include and exclude matchers.

    A name is enabled when any include matches it and no exclude does.
    Excludes win regardless of specificity or order, and never enable a
    name on their own.
    """

    includes: Tuple[NameMatcher, ...] = ()
    excludes: Tuple[NameMatcher, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "includes", tuple(self.includes))
        object.__setattr__(self, "excludes", tuple(self.excludes))

    def resolve(self, name: str) -> bool:
        """
        Decide whether logging is enabled for a name.

        Args:
            name: Full logger name, e.g. ``"server:http"``

        Returns:
            True if enabled, False otherwise
        """
        if not any(matcher.matches(name) for matcher in self.includes):
            return False

        for matcher in self.excludes:
            if matcher.matches(name):
                return False

        return True

    def __call__(self, name: str) -> bool:
        return self.resolve(name)

    @classmethod
    def disabled(cls) -> "FilterTable":
        """Table for an empty specification: only the empty name matches."""
        return cls(includes=(NameMatcher.from_glob(""),))

    def __repr__(self) -> str:
        includes = ",".join(m.glob for m in self.includes)
        excludes = ",".join(m.glob for m in self.excludes)
        return f"FilterTable(includes=[{includes}], excludes=[{excludes}])"
