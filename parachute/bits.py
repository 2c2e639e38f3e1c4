"""Binary digit formatting for ring messages.

Handles conversion from character codes to binary digit strings,
left-padding to a fixed digit width and appending filler digits.
"""

from __future__ import annotations

from .codec import letter_to_num
from .errors import ConfigError


def num_to_bin(num: int) -> str:
    """Convert a non-negative integer to its shortest binary string.

    Args:
        num: Non-negative integer.

    Returns:
        Binary digits, MSB first ("0" for zero).

    Raises:
        ValueError: If num is negative.
    """
    if num < 0:
        raise ValueError(f"Cannot convert negative number {num} to binary")
    return format(num, "b")


def pad_binary(bin_str: str, width: int) -> str:
    """Left-pad a binary string with zeros to the given width.

    Args:
        bin_str: Binary digit string.
        width: Desired number of digits.

    Returns:
        Binary string of exactly `width` digits.

    Raises:
        ConfigError: If bin_str already has more than `width` digits.
            High-order bits are never dropped.
    """
    if len(bin_str) > width:
        raise ConfigError(
            f"Binary value {bin_str} needs {len(bin_str)} digits, only {width} available"
        )
    return bin_str.rjust(width, "0")


def append_chars(text: str, char: str, count: int) -> str:
    """Append `count` copies of `char` to the end of `text`."""
    return text + char * count


def find_min_digits(message: str, parse_as_unicode: bool) -> int:
    """Minimum number of binary digits needed for every character of a message.

    Args:
        message: Message to examine.
        parse_as_unicode: Codec mode (see codec.letter_to_num).

    Returns:
        Length of the longest binary code in the message, 0 if empty.
    """
    return max(
        (len(num_to_bin(letter_to_num(letter, parse_as_unicode))) for letter in message),
        default=0,
    )
