"""Tests for binary digit formatting."""

import pytest

from parachute.bits import append_chars, find_min_digits, num_to_bin, pad_binary
from parachute.errors import ConfigError


class TestNumToBin:
    def test_zero(self):
        assert num_to_bin(0) == "0"

    def test_one(self):
        assert num_to_bin(1) == "1"

    def test_three(self):
        assert num_to_bin(3) == "11"

    def test_no_leading_zeros(self):
        assert num_to_bin(5) == "101"

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="negative"):
            num_to_bin(-1)


class TestPadBinary:
    def test_exact_width_unchanged(self):
        assert pad_binary("11", 2) == "11"

    def test_pads_with_zeros(self):
        assert pad_binary("11", 3) == "011"

    def test_too_wide_raises(self):
        with pytest.raises(ConfigError, match="needs 5 digits"):
            pad_binary("11001", 4)


class TestAppendChars:
    def test_append_zeros(self):
        assert append_chars("011", "0", 3) == "011000"

    def test_append_nothing(self):
        assert append_chars("011", "1", 0) == "011"


class TestFindMinDigits:
    def test_alphabet_message(self):
        # m, i, g, h, t, y -> highest is y = 25 = 11001
        assert find_min_digits("mighty", False) == 5

    def test_unicode_vietnamese(self):
        assert find_min_digits("thếgiới", True) == 13

    def test_unicode_korean(self):
        assert find_min_digits("세계", True) == 16

    def test_empty_message(self):
        assert find_min_digits("", False) == 0

    def test_blank_needs_one_digit(self):
        assert find_min_digits(" ", False) == 1
