"""
Lat/lng pair encoding for the first ten significant digits.

Digits alternate latitude and longitude, each pair twenty times finer than
the previous one (see PAIR_RESOLUTIONS).
"""

import math

from .pluscode_area import CodeArea
from .pluscode_constants import (
    CODE_ALPHABET,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)


def encode_pairs(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode a location into a sequence of lat/lng pairs.

    Args:
        latitude: Latitude in degrees, already clipped
        longitude: Longitude in degrees, already normalized
        code_length: Number of significant digits, at most 10

    Returns:
        Code padded to the separator position, including the separator
    """
    code = ""
    # Move both values into positive ranges.
    adjusted_latitude = latitude + LATITUDE_MAX
    adjusted_longitude = longitude + LONGITUDE_MAX

    # Count digits separately; the code itself may already hold a separator.
    digit_count = 0
    while digit_count < code_length:
        place_value = PAIR_RESOLUTIONS[digit_count // 2]

        digit_value = math.floor(adjusted_latitude / place_value)
        adjusted_latitude -= digit_value * place_value
        code += CODE_ALPHABET[digit_value]
        digit_count += 1

        digit_value = math.floor(adjusted_longitude / place_value)
        adjusted_longitude -= digit_value * place_value
        code += CODE_ALPHABET[digit_value]
        digit_count += 1

        if digit_count == SEPARATOR_POSITION and digit_count < code_length:
            code += SEPARATOR

    if len(code) < SEPARATOR_POSITION:
        code += PADDING_CHARACTER * (SEPARATOR_POSITION - len(code))
    if len(code) == SEPARATOR_POSITION:
        code += SEPARATOR
    return code


def _decode_sequence(code: str, offset: int):
    """Sum every second digit starting at offset; return the (lo, hi) range."""
    i = 0
    value = 0.0
    while i * 2 + offset < len(code):
        value += CODE_ALPHABET.index(code[i * 2 + offset]) * PAIR_RESOLUTIONS[i]
        i += 1
    return value, value + PAIR_RESOLUTIONS[i - 1]


def decode_pairs(code: str) -> CodeArea:
    """
    Decode up to ten pair digits into an area.

    Args:
        code: Upper-case digits with separator and padding removed

    Returns:
        CodeArea in real latitude/longitude
    """
    latitude = _decode_sequence(code, 0)
    longitude = _decode_sequence(code, 1)
    return CodeArea(
        latitude[0] - LATITUDE_MAX,
        longitude[0] - LONGITUDE_MAX,
        latitude[1] - LATITUDE_MAX,
        longitude[1] - LONGITUDE_MAX,
        len(code),
    )
