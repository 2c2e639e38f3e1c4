"""Character codec for ring messages.

Maps a single character to the integer that gets written in binary.
Two modes are supported:

- alphabet mode: Latin letters map to their 1-based position in the
  alphabet (a=1 ... z=26), case-insensitive
- unicode mode: characters map to their code point

In both modes the space character maps to 0, the blank sentinel.
"""

from __future__ import annotations

from .errors import ConfigError

# Code reserved for blanks (space, or a non-letter in alphabet mode)
BLANK_CODE = 0

ALPHABET_SIZE = 26


def letter_to_num(letter: str, parse_as_unicode: bool) -> int:
    """Convert a character into its ring code.

    Args:
        letter: A single-character string.
        parse_as_unicode: True to use the Unicode code point, False to use
            the position in the Latin alphabet.

    Returns:
        The character's code, or BLANK_CODE for blanks.

    Raises:
        ValueError: If letter is not exactly one character.
    """
    if len(letter) != 1:
        raise ValueError(f"Expected a single character, got {letter!r}")

    if letter == " ":
        return BLANK_CODE

    if parse_as_unicode:
        return ord(letter)

    lower = letter.lower()
    if "a" <= lower <= "z" and letter.isascii():
        return ord(lower) - ord("a") + 1
    return BLANK_CODE


def num_to_letter(code: int, parse_as_unicode: bool) -> str:
    """Inverse of letter_to_num. Blanks come back as a space."""
    if code == BLANK_CODE:
        return " "
    if parse_as_unicode:
        return chr(code)
    if not 1 <= code <= ALPHABET_SIZE:
        raise ConfigError(f"Code {code} is outside the Latin alphabet (1-{ALPHABET_SIZE})")
    return chr(ord("a") + code - 1)
