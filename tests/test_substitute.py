import pytest

from lined.core.errors import MalformedSubstitution
from lined.core.substitute import Substitution, parse_between, parse_substitution, replace_in_line


class TestParseBetween:
    def test_field_and_rest(self):
        assert parse_between("/x/rest") == ("x", "rest")

    def test_empty_field(self):
        assert parse_between("//") == ("", "")

    def test_missing_delimiters(self):
        assert parse_between("x/") is None
        assert parse_between("/x") is None


class TestParseSubstitution:
    def test_plain(self):
        assert parse_substitution("/old/new/") == Substitution("old", "new", False)

    def test_global_flag(self):
        assert parse_substitution("/a/b/g").global_
        assert parse_substitution("/a/b/ G").global_

    def test_other_flag_is_ignored(self):
        assert not parse_substitution("/a/b/x").global_

    def test_leading_space(self):
        assert parse_substitution("  /a/b/") == Substitution("a", "b", False)

    def test_empty_replacement(self):
        assert parse_substitution("/a//") == Substitution("a", "", False)

    @pytest.mark.parametrize("text", ["/a/b", "/a", "a/b/", ""])
    def test_malformed(self, text):
        with pytest.raises(MalformedSubstitution):
            parse_substitution(text)


class TestReplaceInLine:
    def test_global(self):
        assert replace_in_line("aaa", "a", "b", True, 256) == ("bbb", 3)

    def test_first_only(self):
        assert replace_in_line("aaa", "a", "b", False, 256) == ("baa", 1)

    def test_not_found(self):
        assert replace_in_line("abc", "z", "y", True, 256) == ("abc", 0)

    def test_empty_old_does_nothing(self):
        assert replace_in_line("abc", "", "y", True, 256) == ("abc", 0)

    def test_case_sensitive(self):
        assert replace_in_line("Aaa", "a", "b", True, 256) == ("Abb", 2)

    def test_replacement_containing_pattern(self):
        assert replace_in_line("aa", "a", "aa", True, 256) == ("aaaa", 2)

    def test_non_overlapping(self):
        assert replace_in_line("aaaa", "aa", "b", True, 256) == ("bb", 2)

    def test_limit(self):
        assert replace_in_line("aaaa", "a", "b", True, 256, limit=2) == ("bbaa", 2)

    def test_stops_when_line_would_be_too_long(self):
        # line_len 6 holds at most 5 characters
        assert replace_in_line("abab", "a", "xx", True, 6) == ("xxbab", 1)

    def test_exact_fit_is_allowed(self):
        assert replace_in_line("abc", "a", "xx", False, 5) == ("xxbc", 1)
