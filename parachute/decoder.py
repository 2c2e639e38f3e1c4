"""Ring decoder: recovers a message from a ring's digit string.

Reverses the encoder given the same ring parameters:
1. Undo the digit offset (rotate right by digit_offset)
2. Split into char_count slots of digit_width + padding_length digits
3. Undo the character offset (rotate slots right by char_offset)
4. Read the first digit_width digits of every slot as a binary code
5. A slot is blank when its digits are all ones and its padding is
   '1'. The last slot is always padded with '0', so there an all-ones
   slot counts as blank only after another blank, or in alphabet mode
   when its code is past 'z'. That last slot stays ambiguous: in
   Unicode mode, or with 4 digits or fewer, a final blank after a
   character reads back as an all-ones character, and a final all-ones
   character after a blank reads back as a blank
6. Everything else goes through the codec in reverse

Trailing blanks are stripped, since the encoder pads short messages
with spaces. Alphabet-mode messages come back lower-case.
"""

from __future__ import annotations

import structlog

from .codec import ALPHABET_SIZE, num_to_letter
from .encoder import apply_offset
from .errors import ConfigError, DegenerateRingError

logger = structlog.get_logger(__name__)


def decode_ring_bits(
    bits: str,
    *,
    char_count: int,
    digit_width: int,
    padding_length: int,
    char_offset: int = 0,
    digit_offset: int = 0,
    is_unicode: bool = False,
) -> str:
    """Decode a ring digit string back to its message.

    Args:
        bits: Ring digits as produced by encoder.encode_ring.
        char_count: Number of character slots in the ring.
        digit_width: Binary digits per character.
        padding_length: Filler digits per character.
        char_offset: Character offset used when encoding.
        digit_offset: Digit offset used when encoding.
        is_unicode: Codec mode used when encoding.

    Returns:
        Decoded message with trailing blanks removed.

    Raises:
        DegenerateRingError: If the ring has no digit positions.
        ConfigError: If a count is negative, digit_width or padding_length
            is zero, bits does not match the ring layout, contains
            non-binary digits, or holds a code the codec cannot map back.
    """
    for name, value in (
        ("char_count", char_count),
        ("digit_width", digit_width),
        ("padding_length", padding_length),
    ):
        if value < 0:
            raise ConfigError(f"{name} must be >= 0, got {value}")

    slot_length = digit_width + padding_length
    total_slots = char_count * slot_length
    if total_slots == 0:
        raise DegenerateRingError("Cannot decode a ring with no digit positions")
    if digit_width == 0:
        raise ConfigError("digit_width must be at least 1")
    if padding_length == 0:
        raise ConfigError("padding_length must be at least 1")
    if len(bits) != total_slots:
        raise ConfigError(f"Expected {total_slots} digits for this ring layout, got {len(bits)}")
    if set(bits) - {"0", "1"}:
        raise ConfigError("Ring digits must be '0' or '1'")

    unrotated = apply_offset(bits, -digit_offset)
    slots = [unrotated[i : i + slot_length] for i in range(0, total_slots, slot_length)]
    slots = apply_offset(slots, -char_offset)

    all_ones = "1" * digit_width
    last_index = char_count - 1
    letters: list[str] = []
    previous_blank = False
    for i, slot in enumerate(slots):
        digits = slot[:digit_width]
        code = int(digits, 2)
        if i < last_index:
            is_blank = digits == all_ones and slot[digit_width] == "1"
        else:
            # The last slot always has '0' padding, so a blank and an
            # all-ones character look the same there
            is_blank = digits == all_ones and (
                previous_blank or (not is_unicode and code > ALPHABET_SIZE)
            )

        letters.append(" " if is_blank else num_to_letter(code, is_unicode))
        previous_blank = is_blank

    message = "".join(letters).rstrip(" ")
    logger.debug("ring_decoded", char_count=char_count, message_length=len(message))
    return message
