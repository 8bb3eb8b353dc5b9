"""Tests for specification compiling and name resolution"""

import dataclasses

import pytest

from debug_module import SpecificationError
from debug_module.filters import FilterTable, NameMatcher, compile_spec


class TestNameMatcher:
    """Test single glob matching."""

    def test_wildcard_suffix(self):
        matcher = NameMatcher.from_glob("test:child*")
        assert matcher.matches("test:child1")
        assert matcher.matches("test:child2")
        assert matcher.matches("test:child")
        assert not matcher.matches("test:other")

    def test_anchored(self):
        matcher = NameMatcher.from_glob("server")
        assert matcher.matches("server")
        assert not matcher.matches("my-server")
        assert not matcher.matches("server:http")

    def test_wildcard_in_middle(self):
        matcher = NameMatcher.from_glob("app:*:db")
        assert matcher.matches("app:users:db")
        assert matcher.matches("app::db")
        assert not matcher.matches("app:users:cache")

    def test_regex_metacharacters_are_literal(self):
        matcher = NameMatcher.from_glob("a.b+(c)?[d]")
        assert matcher.matches("a.b+(c)?[d]")
        assert not matcher.matches("aXb+(c)?[d]")
        assert not matcher.matches("a.bb(c)d")

    def test_backslash_is_literal(self):
        matcher = NameMatcher.from_glob("dir\\*")
        assert matcher.matches("dir\\sub")
        assert not matcher.matches("dirsub")

    def test_empty_glob_matches_only_empty_name(self):
        matcher = NameMatcher.from_glob("")
        assert matcher.matches("")
        assert not matcher.matches("a")

    def test_non_string_glob(self):
        with pytest.raises(SpecificationError):
            NameMatcher.from_glob(42)

    def test_repr(self):
        matcher = NameMatcher.from_glob("x*", exclude=True)
        assert repr(matcher) == "NameMatcher(glob='x*', mode=exclude)"


class TestCompileSpec:
    """Test specification string compiling."""

    def test_split_includes_and_excludes(self):
        table = compile_spec("test:other,test:child*,-test:child2")
        assert [m.glob for m in table.includes] == ["test:other", "test:child*"]
        assert [m.glob for m in table.excludes] == ["test:child2"]
        assert all(m.exclude for m in table.excludes)

    def test_empty_spec_disables_everything(self):
        table = compile_spec("")
        assert len(table.includes) == 1
        assert table.excludes == ()
        assert table.resolve("") is True
        assert table.resolve("app") is False
        assert table.resolve("*") is False
        assert table == FilterTable.disabled()

    def test_whitespace_around_tokens(self):
        table = compile_spec(" app:* , -app:db ")
        assert table.resolve("app:http") is True
        assert table.resolve("app:db") is False

    def test_star_enables_everything(self):
        table = compile_spec("*")
        assert table.resolve("anything")
        assert table.resolve("")

    def test_non_string_spec(self):
        with pytest.raises(SpecificationError):
            compile_spec(None)

    def test_specification_error_is_value_error(self):
        with pytest.raises(ValueError):
            compile_spec(b"app")


class TestFilterTable:
    """Test resolution rules."""

    SPEC = "test:other,test:child*,-test:child2"

    def test_resolution_example(self):
        table = compile_spec(self.SPEC)
        assert table.resolve("test:other") is True
        assert table.resolve("test:child1") is True
        assert table.resolve("test:child2") is False
        assert table.resolve("test") is False

    @pytest.mark.parametrize("name", ["lib", "lib:x", "other"])
    def test_excludes_never_enable(self, name):
        table = compile_spec("app:*,-lib*,-other")
        assert table.resolve(name) is False

    def test_exclude_wins_over_exact_include(self):
        table = compile_spec("app:db,-app:*")
        assert table.resolve("app:db") is False

    def test_exclude_wins_regardless_of_order(self):
        first = compile_spec("-app:db,app:*")
        last = compile_spec("app:*,-app:db")
        for table in (first, last):
            assert table.resolve("app:db") is False
            assert table.resolve("app:http") is True

    def test_callable(self):
        table = compile_spec("a")
        assert table("a") is True
        assert table("b") is False

    def test_frozen(self):
        table = compile_spec("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.includes = ()

    def test_lists_stored_as_tuples(self):
        table = FilterTable(includes=[NameMatcher.from_glob("a")])
        assert isinstance(table.includes, tuple)
        assert isinstance(table.excludes, tuple)
