"""Tests for list normalization"""

import pytest

from dotnet_sdk_commands.core.lists import fix_empty_and_trim, normalize_list


class TestNormalizeListString:
    """Test cases for the single-string form"""

    def test_splits_on_any_whitespace(self):
        """Test that spaces, tabs and newlines all separate entries"""
        assert normalize_list("Build\tTest\n  Pack\r\nPublish") == ["Build", "Test", "Pack", "Publish"]

    def test_preserves_order_and_duplicates(self):
        """Test that order is kept and duplicates are not removed"""
        assert normalize_list("b a b") == ["b", "a", "b"]

    @pytest.mark.parametrize("raw", [None, "", "   ", "\n\t \n"])
    def test_blank_input_is_absent(self, raw):
        """Test that blank input gives None rather than an empty list"""
        assert normalize_list(raw) is None

    @pytest.mark.parametrize("raw", ["a b", "  a\n\nb  c ", "single", "x\ty\n z"])
    def test_renormalization_is_idempotent(self, raw):
        """Test that normalizing the joined result gives the same entries"""
        first = normalize_list(raw)
        assert normalize_list(" ".join(first)) == first
        assert all(entry.strip() and entry == entry.strip() for entry in first)


class TestNormalizeListSequence:
    """Test cases for the sequence form"""

    def test_elements_are_not_split(self):
        """Test that an element with embedded spaces stays one entry"""
        assert normalize_list(["--random", "Including Whatever"]) == ["--random", "Including Whatever"]

    def test_elements_are_trimmed(self):
        """Test that surrounding whitespace is removed from each element"""
        assert normalize_list(["  a  ", "b\n"]) == ["a", "b"]

    def test_none_and_blank_elements_are_dropped(self):
        """Test that None and whitespace-only elements are removed"""
        assert normalize_list([None, "x", "", "  ", "y"]) == ["x", "y"]

    def test_all_blank_elements_is_absent(self):
        """Test that a sequence of only blank elements gives None"""
        assert normalize_list([None, "", "  "]) is None
        assert normalize_list([]) is None


class TestFixEmptyAndTrim:
    """Test cases for scalar trimming"""

    def test_trims_value(self):
        assert fix_empty_and_trim("  Release ") == "Release"

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_blank_is_none(self, raw):
        assert fix_empty_and_trim(raw) is None
