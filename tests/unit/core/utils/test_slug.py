"""Unit tests for core/utils/slug.py"""

import pytest

from mdrename.core.utils.slug import slugify, strip_prefix


@pytest.mark.parametrize("name,expected", [
    ("0007-my proposal", "my proposal"),
    ("0001-", ""),
    ("my proposal", "my proposal"),
    ("007-short", "007-short"),
    ("12345-long", "12345-long"),
    ("0001-0002-twice", "0002-twice"),
    ("١٢٣٤-foo", "١٢٣٤-foo"),
    ("１２３４-bar", "１２３４-bar"),
])
def test_strip_prefix(name, expected):
    """strip_prefix removes exactly one leading ASCII four-digit-and-hyphen prefix."""
    assert strip_prefix(name) == expected


@pytest.mark.parametrize("text,expected", [
    ("my proposal", "my-proposal"),
    ("bar baz", "bar-baz"),
    ("a  &  b", "a-b"),
    ("already-slugified", "already-slugified"),
    ("--edges--", "--edges--"),
    ("café", "caf-"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify collapses each run of non-slug characters to one hyphen."""
    assert slugify(text) == expected


def test_slugify_legacy_alphabet_keeps_only_0_and_1():
    """Default alphabet keeps 0 and 1 but hyphenates digits 2-9."""
    assert slugify("plan 2024") == "plan-0-"
    assert slugify("v10") == "v10"


def test_slugify_keep_all_digits():
    """keep_all_digits widens the alphabet to every ASCII digit."""
    assert slugify("plan 2024", keep_all_digits=True) == "plan-2024"


def test_slugify_is_stable():
    """A slug is a fixed point of slugify."""
    once = slugify("Some Title (draft) #3".lower())
    assert slugify(once) == once
