"""Compile a DEBUG specification string into a FilterTable"""

from typing import List

from debug_module.exceptions import SpecificationError
from debug_module.filters.filter_table import FilterTable
from debug_module.filters.name_matcher import NameMatcher

SEPARATOR = ","
EXCLUDE_PREFIX = "-"


def compile_spec(spec: str) -> FilterTable:
    """
    Compile a specification string.

    Tokens are separated by commas and stripped of surrounding whitespace.
    A token starting with ``-`` goes to the exclude list. An empty token
    matches only the empty name, so ``""`` disables every logger.

    Args:
        spec: Specification text, e.g. ``"app:*,-app:noisy"``

    Returns:
        Compiled FilterTable

    Raises:
        SpecificationError: If spec is not a string or a token is invalid

    Example:
        table = compile_spec("test:other,test:child*,-test:child2")
        table.resolve("test:child1")  # True
        table.resolve("test:child2")  # False
    """
    if not isinstance(spec, str):
        raise SpecificationError(
            f"Specification must be a string, got {type(spec).__name__}"
        )

    includes: List[NameMatcher] = []
    excludes: List[NameMatcher] = []

    for token in spec.split(SEPARATOR):
        token = token.strip()
        if token.startswith(EXCLUDE_PREFIX):
            excludes.append(NameMatcher.from_glob(token[len(EXCLUDE_PREFIX):], exclude=True))
        else:
            includes.append(NameMatcher.from_glob(token))

    return FilterTable(includes=includes, excludes=excludes)
