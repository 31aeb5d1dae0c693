"""
Tests for version parsing and update classification.

Run: python3 -m pytest tests/test_version_compare.py -v
"""

import pytest

from appstore_lookup.models import UpdateType
from appstore_lookup.version_compare import (
    classify,
    is_newer_version,
    pad_versions,
    parse_version,
)


class TestParseVersion:
    """Tests for parse_version function."""

    def test_simple(self):
        """Test standard three-part version."""
        assert parse_version("1.2.3") == (1, 2, 3)

    def test_multi_digit(self):
        """Test components are compared numerically, not as text."""
        assert parse_version("1.2.10") == (1, 2, 10)

    def test_empty_segment(self):
        """Test empty segment becomes zero."""
        assert parse_version("1..3") == (1, 0, 3)

    def test_empty_string(self):
        """Test empty string is a single zero component."""
        assert parse_version("") == (0,)

    def test_none(self):
        """Test None behaves like empty string."""
        assert parse_version(None) == (0,)

    def test_non_numeric(self):
        """Test non-numeric segments become zero."""
        assert parse_version("2.beta.1") == (2, 0, 1)
        assert parse_version("1.0.0-rc1") == (1, 0, 0)

    def test_negative_is_zero(self):
        """Test negative numbers are not valid components."""
        assert parse_version("1.-1") == (1, 0)

    def test_whitespace(self):
        """Test whitespace around segments is ignored."""
        assert parse_version(" 4 . 5 ") == (4, 5)

    def test_trailing_dot(self):
        """Test trailing dot adds a zero component."""
        assert parse_version("3.") == (3, 0)

    def test_non_ascii_digits_are_zero(self):
        """Test digits outside ASCII 0-9 are not numeric components."""
        assert parse_version("١.٢") == (0, 0)
        assert parse_version("1.２") == (1, 0)
        assert parse_version("2.²") == (2, 0)


class TestPadVersions:
    """Tests for pad_versions function."""

    def test_pads_remote(self):
        """Test shorter remote gets trailing zeros."""
        assert pad_versions("1.2.0", "1.2") == ((1, 2, 0), (1, 2, 0))

    def test_pads_current(self):
        """Test shorter current gets trailing zeros."""
        assert pad_versions("1", "1.0.5") == ((1, 0, 0), (1, 0, 5))

    def test_accepts_sequences(self):
        """Test already parsed sequences are accepted."""
        assert pad_versions([1, 0], (1, 0, 0)) == ((1, 0, 0), (1, 0, 0))


class TestClassify:
    """Tests for classify function."""

    def test_patch_increase_is_required(self):
        """Test any increase is REQUIRED under the default policy."""
        assert classify([1, 0, 0], [1, 0, 1]) == UpdateType.REQUIRED

    def test_major_increase(self):
        """Test major version increase."""
        assert classify("1.9.9", "2.0.0") == UpdateType.REQUIRED

    def test_minor_increase(self):
        """Test minor version increase."""
        assert classify("1.2.9", "1.3") == UpdateType.REQUIRED

    def test_equal_after_padding_remote_shorter(self):
        """Test remote padded with zeros equals current."""
        assert classify([1, 2, 0], [1, 2]) == UpdateType.UNAVAILABLE

    def test_equal_after_padding_current_shorter(self):
        """Test current padded with zeros equals remote."""
        assert classify([1, 0], [1, 0, 0]) == UpdateType.UNAVAILABLE

    def test_remote_behind(self):
        """Test first differing component decides when remote is behind."""
        assert classify([2, 0, 0], [1, 9, 9]) == UpdateType.UNAVAILABLE

    def test_remote_behind_minor(self):
        """Test remote behind in the minor component."""
        assert classify("1.5.0", "1.4.9") == UpdateType.UNAVAILABLE

    def test_identical(self):
        """Test identical versions."""
        assert classify("3.1.4", "3.1.4") == UpdateType.UNAVAILABLE

    def test_empty_current_any_remote(self):
        """Test missing current version behaves as all zeros."""
        assert classify("", "0.0.1") == UpdateType.REQUIRED
        assert classify("", "1") == UpdateType.REQUIRED

    def test_empty_current_zero_remote(self):
        """Test empty current against an all-zero remote."""
        assert classify("", "0.0") == UpdateType.UNAVAILABLE

    def test_longer_remote_with_extra_component(self):
        """Test segment count is padded, not compared by length."""
        assert classify("1.2", "1.2.0.1") == UpdateType.REQUIRED

    def test_numeric_not_lexical(self):
        """Test 10 orders after 9."""
        assert classify("1.2.9", "1.2.10") == UpdateType.REQUIRED

    def test_default_never_optional(self):
        """Test OPTIONAL is not produced without patch_optional."""
        pairs = [("1.0.0", "1.0.1"), ("1.0", "1.1"), ("1", "2"), ("2.0", "1.0")]
        for current, remote in pairs:
            assert classify(current, remote) != UpdateType.OPTIONAL


class TestClassifyPatchOptional:
    """Tests for the opt-in last-component policy."""

    def test_last_component_optional(self):
        """Test last component increase is OPTIONAL."""
        assert classify("1.0.0", "1.0.1", patch_optional=True) == UpdateType.OPTIONAL

    def test_earlier_component_required(self):
        """Test earlier component increase stays REQUIRED."""
        assert classify("1.0.0", "1.1.0", patch_optional=True) == UpdateType.REQUIRED

    def test_padded_last_component(self):
        """Test the last index is taken after padding."""
        assert classify("1.0", "1.0.1", patch_optional=True) == UpdateType.OPTIONAL

    def test_behind_unavailable(self):
        """Test remote behind stays UNAVAILABLE."""
        assert classify("1.0.2", "1.0.1", patch_optional=True) == UpdateType.UNAVAILABLE


class TestIsNewerVersion:
    """Tests for is_newer_version function."""

    @pytest.mark.parametrize("current,remote,expected", [
        ("1.0.0", "1.0.1", True),
        ("1.0", "1.0.0", False),
        ("2.0.0", "1.9.9", False),
        ("1.2.9", "1.2.10", True),
        ("", "0.1", True),
    ])
    def test_ordering(self, current, remote, expected):
        """Test strict numeric ordering."""
        assert is_newer_version(current, remote) is expected
