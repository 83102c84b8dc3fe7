"""Tests for domainaddr.label module."""

from __future__ import annotations

import re

import pytest

from domainaddr.errors import ParseError
from domainaddr.label import (
    DEFAULT_POLICY,
    SUBDOMAIN_POLICY,
    TLD_POLICY,
    Label,
    LabelPolicy,
    is_valid_label,
)


class TestDefaultPolicy:
    def test_single_char(self):
        assert is_valid_label("a")
        assert is_valid_label("7")

    def test_max_length(self):
        assert is_valid_label("a" * 63)

    def test_too_long(self):
        assert not is_valid_label("a" * 64)

    def test_internal_hyphens(self):
        assert is_valid_label("ex-am--ple")
        assert is_valid_label("xn--exmple-jua")

    def test_leading_hyphen(self):
        assert not is_valid_label("-abc")

    def test_trailing_hyphen(self):
        assert not is_valid_label("abc-")

    def test_lone_hyphen(self):
        assert not is_valid_label("-")

    def test_empty(self):
        assert not is_valid_label("")

    @pytest.mark.parametrize("text", ["a_b", "a b", "a.b", "é", "ab\n", "*"])
    def test_illegal_characters(self, text):
        assert not is_valid_label(text)

    def test_non_string(self):
        assert not is_valid_label(None)
        assert not is_valid_label(42)


class TestOtherPolicies:
    def test_subdomain_policy_accepts_wildcard(self):
        assert is_valid_label("*", SUBDOMAIN_POLICY)
        assert not is_valid_label("*", DEFAULT_POLICY)

    def test_wildcard_is_only_accepted_alone(self):
        assert not is_valid_label("*a", SUBDOMAIN_POLICY)
        assert not is_valid_label("**", SUBDOMAIN_POLICY)

    def test_tld_policy_letters_only(self):
        assert is_valid_label("com", TLD_POLICY)
        assert is_valid_label("MUSEUM", TLD_POLICY)
        assert not is_valid_label("c0m", TLD_POLICY)
        assert not is_valid_label("co-uk", TLD_POLICY)

    def test_tld_policy_min_length(self):
        assert not is_valid_label("c", TLD_POLICY)
        assert is_valid_label("io", TLD_POLICY)

    def test_custom_policy(self):
        policy = LabelPolicy(min_length=3, max_length=5, pattern=re.compile(r"[0-9]+"))
        assert is_valid_label("123", policy)
        assert not is_valid_label("12", policy)
        assert not is_valid_label("123456", policy)
        assert not is_valid_label("abc", policy)


class _Word(Label):
    kind = "word"


class TestLabel:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError, match="abstract"):
            Label("example")

    def test_create_returns_subclass(self):
        assert type(_Word.create("abc")) is _Word

    def test_sequence_behaviour(self):
        label = _Word("example")
        assert len(label) == 7
        assert label[0] == "e"
        assert label[-1] == "e"
        assert label[1:4] == "xam"
        assert list(label) == list("example")
        assert str(label) == "example"

    def test_invalid_raises_with_value(self):
        with pytest.raises(ParseError, match="bad_label") as info:
            _Word("bad_label")
        assert info.value.value == "bad_label"

    def test_frozen(self):
        label = _Word("abc")
        with pytest.raises(AttributeError):
            label.value = "def"  # type: ignore[misc]

    def test_case_sensitive_equality(self):
        assert _Word("abc") == _Word("abc")
        assert _Word("abc") != _Word("ABC")
        assert hash(_Word("abc")) == hash(_Word("abc"))

    def test_not_equal_to_plain_string(self):
        assert _Word("abc") != "abc"

    def test_equals_ignore_case(self):
        assert _Word("Example").equals_ignore_case("eXAMPLE")
        assert _Word("Example").equals_ignore_case(_Word("EXAMPLE"))
        assert not _Word("Example").equals_ignore_case("other")
        assert not _Word("Example").equals_ignore_case(None)
