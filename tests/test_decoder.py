"""Tests for the ring decoder."""

import pytest

from parachute.decoder import decode_ring_bits
from parachute.encoder import encode_ring
from parachute.errors import ConfigError, DegenerateRingError
from parachute.presets import PERSEVERANCE_RINGS
from parachute.ring import RingSpec


def _decode(bits, spec):
    return decode_ring_bits(
        bits,
        char_count=spec.char_count,
        digit_width=spec.digit_width,
        padding_length=spec.padding_length,
        char_offset=spec.char_offset,
        digit_offset=spec.digit_offset,
        is_unicode=spec.is_unicode,
    )


class TestDecodeRingBits:
    def test_single_character(self):
        spec = RingSpec("c", False, 1, 7, 3, 0, 0)
        assert _decode("0000011000", spec) == "c"

    def test_perseverance_rings(self):
        for spec in PERSEVERANCE_RINGS:
            assert _decode(encode_ring(spec), spec) == spec.message

    def test_with_digit_offset(self):
        spec = RingSpec("dare", False, 8, 7, 3, 3, -13)
        assert _decode(encode_ring(spec), spec) == "dare"

    def test_unicode(self):
        spec = RingSpec("세계", True, 2, 16, 4, 0, 0)
        assert _decode("1100000100111000000010101100110001000000", spec) == "세계"

    def test_uppercase_comes_back_lowercase(self):
        spec = RingSpec("Mars", False, 6, 6, 2, 1, 0)
        assert _decode(encode_ring(spec), spec) == "mars"

    def test_inner_blank_kept(self):
        spec = RingSpec("a b", False, 5, 5, 2, 0, 0)
        assert _decode(encode_ring(spec), spec) == "a b"

    def test_all_ones_letter_in_inner_slot(self):
        spec = RingSpec("ogo", False, 3, 4, 1, 0, 0)
        bits = encode_ring(spec)
        assert bits == "111100111011110"
        assert _decode(bits, spec) == "ogo"

    def test_all_ones_letter_in_last_slot(self):
        spec = RingSpec("go", False, 2, 4, 1, 0, 0)
        assert _decode(encode_ring(spec), spec) == "go"

    def test_all_ones_letters_with_offsets(self):
        spec = RingSpec("ogo", False, 3, 4, 1, 1, -2)
        assert _decode(encode_ring(spec), spec) == "ogo"

    def test_single_digit_letter(self):
        spec = RingSpec("aa", False, 2, 1, 1, 0, 0)
        assert _decode(encode_ring(spec), spec) == "aa"

    def test_unicode_trailing_blanks(self):
        spec = RingSpec("hi", True, 4, 7, 2, 0, 0)
        assert _decode(encode_ring(spec), spec) == "hi"

    def test_all_blank_ring(self):
        spec = RingSpec.empty()
        assert _decode(encode_ring(spec), spec) == ""

    def test_length_mismatch_raises(self):
        spec = RingSpec("c", False, 1, 7, 3, 0, 0)
        with pytest.raises(ConfigError, match="Expected 10 digits"):
            _decode("000001100", spec)

    def test_non_binary_raises(self):
        spec = RingSpec("c", False, 1, 7, 3, 0, 0)
        with pytest.raises(ConfigError, match="'0' or '1'"):
            _decode("000001200x", spec)

    def test_code_outside_alphabet_raises(self):
        spec = RingSpec("", False, 1, 7, 3, 0, 0)
        with pytest.raises(ConfigError, match="outside the Latin alphabet"):
            _decode("0011011000", spec)  # 27

    def test_negative_padding_raises(self):
        with pytest.raises(ConfigError, match="padding_length must be >= 0"):
            decode_ring_bits("00000", char_count=1, digit_width=3, padding_length=-1)

    def test_negative_char_count_raises(self):
        with pytest.raises(ConfigError, match="char_count must be >= 0"):
            decode_ring_bits("", char_count=-1, digit_width=7, padding_length=3)

    def test_zero_padding_raises(self):
        with pytest.raises(ConfigError, match="padding_length must be at least 1"):
            decode_ring_bits("0000011", char_count=1, digit_width=7, padding_length=0)

    def test_degenerate_ring_raises(self):
        spec = RingSpec("", False, 0, 7, 3, 0, 0)
        with pytest.raises(DegenerateRingError):
            _decode("", spec)
