"""
Grid refinement for digits past the tenth.

Each grid digit splits the current cell into 4 columns by 5 rows; the digit
is the alphabet character at row * 4 + column.
"""

import math

from .pluscode_area import CodeArea
from .pluscode_constants import (
    CODE_ALPHABET,
    GRID_COLUMNS,
    GRID_ROWS,
    GRID_SIZE_DEGREES,
    LATITUDE_MAX,
    LONGITUDE_MAX,
)


def encode_grid(latitude: float, longitude: float, code_length: int) -> str:
    """
    Encode a location using the grid refinement method.

    Args:
        latitude: Latitude in degrees, already clipped
        longitude: Longitude in degrees, already normalized
        code_length: Number of grid digits to produce

    Returns:
        Grid digits only, no separator
    """
    code = ""
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES
    # Offset within the final pair cell.
    adjusted_latitude = (latitude + LATITUDE_MAX) % lat_place_value
    adjusted_longitude = (longitude + LONGITUDE_MAX) % lng_place_value
    for _ in range(code_length):
        row = math.floor(adjusted_latitude / (lat_place_value / GRID_ROWS))
        col = math.floor(adjusted_longitude / (lng_place_value / GRID_COLUMNS))
        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS
        adjusted_latitude -= row * lat_place_value
        adjusted_longitude -= col * lng_place_value
        code += CODE_ALPHABET[row * GRID_COLUMNS + col]
    return code


def decode_grid(code: str) -> CodeArea:
    """
    Decode grid digits into an area relative to the pair cell's lower corner.

    Args:
        code: Upper-case grid digits

    Returns:
        CodeArea holding offsets, not absolute coordinates
    """
    latitude_lo = 0.0
    longitude_lo = 0.0
    lat_place_value = GRID_SIZE_DEGREES
    lng_place_value = GRID_SIZE_DEGREES
    for character in code:
        code_index = CODE_ALPHABET.index(character)
        row = code_index // GRID_COLUMNS
        col = code_index % GRID_COLUMNS

        lat_place_value /= GRID_ROWS
        lng_place_value /= GRID_COLUMNS

        latitude_lo += row * lat_place_value
        longitude_lo += col * lng_place_value
    return CodeArea(
        latitude_lo,
        longitude_lo,
        latitude_lo + lat_place_value,
        longitude_lo + lng_place_value,
        len(code),
    )
