"""
Glob matcher for logger names

Only ``*`` is a wildcard; every other character is literal.
"""

import re
from typing import Pattern

from debug_module.exceptions import SpecificationError

WILDCARD = "*"


class NameMatcher:
    """
    Match logger names against a single glob pattern.

    The pattern is anchored at both ends, so ``server:*`` matches
    ``server:http`` but not ``my-server:http``.
    """

    __slots__ = ("glob", "exclude", "pattern")

    def __init__(self, glob: str, pattern: Pattern, exclude: bool = False):
        self.glob = glob
        self.exclude = exclude
        self.pattern = pattern

    @classmethod
    def from_glob(cls, glob: str, exclude: bool = False) -> "NameMatcher":
        """
        Compile a glob into a matcher.

        Args:
            glob: Pattern text, ``*`` matches any sequence (including empty)
            exclude: Whether the matcher belongs to the exclude list

        Returns:
            New NameMatcher

        Raises:
            SpecificationError: If the glob cannot be compiled

        Example:
            matcher = NameMatcher.from_glob("db.*")
            matcher.matches("db.pool")   # True
            matcher.matches("dbXpool")   # False, "." is literal
        """
        if not isinstance(glob, str):
            raise SpecificationError(f"Pattern must be a string, got {type(glob).__name__}")

        regex = ".*".join(re.escape(part) for part in glob.split(WILDCARD))
        try:
            compiled = re.compile(regex, re.DOTALL)
        except re.error as e:
            raise SpecificationError(f"Invalid pattern {glob!r}: {e}", token=glob) from e

        return cls(glob, compiled, exclude=exclude)

    def matches(self, name: str) -> bool:
        """Check whether the whole name matches the pattern."""
        return self.pattern.fullmatch(name) is not None

    def __call__(self, name: str) -> bool:
        return self.matches(name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NameMatcher):
            return NotImplemented
        return self.glob == other.glob and self.exclude == other.exclude

    def __hash__(self) -> int:
        return hash((self.glob, self.exclude))

    def __repr__(self) -> str:
        mode = "exclude" if self.exclude else "include"
        return f"NameMatcher(glob='{self.glob}', mode={mode})"
