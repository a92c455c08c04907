"""
Coordinate normalization helpers used by every public entry point.
"""

import math

from .pluscode_constants import (
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
)


def clip_latitude(latitude: float) -> float:
    """Clip a latitude into the range -90 to 90."""
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Normalize a longitude into the range -180 (inclusive) to 180 (exclusive)."""
    while longitude < -LONGITUDE_MAX:
        longitude = longitude + LONGITUDE_MAX * 2
    while longitude >= LONGITUDE_MAX:
        longitude = longitude - LONGITUDE_MAX * 2
    return longitude


def compute_latitude_precision(code_length: int) -> float:
    """
    Compute the latitude height in degrees of a code of the given length.

    Pair digits divide the cell by 20 every second digit; grid digits
    divide it by the number of grid rows every digit.
    """
    if code_length <= PAIR_CODE_LENGTH:
        return ENCODING_BASE ** math.floor(code_length / -2 + 2)
    return ENCODING_BASE ** -3 / GRID_ROWS ** (code_length - PAIR_CODE_LENGTH)
