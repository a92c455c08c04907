"""
Plus code locator: full encode/decode plus shortening and recovery.

Encoding runs the pair encoder for the first ten digits and the grid
encoder for anything past that. Shortening drops leading digits that a
nearby reference location can supply again; recovery puts them back.
"""

import math

from ..config.logger_module import log_debug, log_error
from .pluscode_area import CodeArea
from .pluscode_constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    LATITUDE_MAX,
    MIN_TRIMMABLE_CODE_LEN,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    PAIR_RESOLUTIONS,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from .pluscode_coordinates import (
    clip_latitude,
    compute_latitude_precision,
    normalize_longitude,
)
from .pluscode_errors import InvalidCodeError, InvalidCodeLengthError
from .pluscode_grid import decode_grid, encode_grid
from .pluscode_pairs import decode_pairs, encode_pairs
from .pluscode_validator import is_full, is_short


def get_alphabet() -> str:
    """Return the plus code alphabet."""
    return CODE_ALPHABET


def encode(latitude: float, longitude: float, code_length: int = PAIR_CODE_LENGTH) -> str:
    """
    Encode a location into a plus code.
    
    Args:
        latitude: Latitude in degrees; clipped to -90..90
        longitude: Longitude in degrees; normalized to -180..180
        code_length: Number of significant digits. Must be at least 2, and
            even unless greater than 8
            
    Returns:
        Plus code, padded and with separator
        
    Raises:
        InvalidCodeLengthError: If code_length is illegal
    """
    if code_length < 2 or (code_length < SEPARATOR_POSITION and code_length % 2 == 1):
        log_error(f"Refusing to encode with code length {code_length}")
        raise InvalidCodeLengthError(code_length)

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    # A code must describe an area below the pole, so nudge 90 down by one cell.
    if latitude == LATITUDE_MAX:
        latitude = latitude - compute_latitude_precision(code_length)

    code = encode_pairs(latitude, longitude, min(code_length, PAIR_CODE_LENGTH))
    if code_length > PAIR_CODE_LENGTH:
        code += encode_grid(latitude, longitude, code_length - PAIR_CODE_LENGTH)
    return code


def decode(code: str) -> CodeArea:
    """
    Decode a full plus code into the area it covers.
    
    Args:
        code: Full plus code, any case
        
    Returns:
        CodeArea with bounds, center and code length
        
    Raises:
        InvalidCodeError: If the code is not a valid full code
    """
    if not is_full(code):
        log_error(f"Cannot decode {code!r}: not a valid full code")
        raise InvalidCodeError(code, "not a valid full code")

    digits = code.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "").upper()
    code_area = decode_pairs(digits[:PAIR_CODE_LENGTH])
    if len(digits) <= PAIR_CODE_LENGTH:
        return code_area

    grid_area = decode_grid(digits[PAIR_CODE_LENGTH:])
    return CodeArea(
        code_area.latitude_lo + grid_area.latitude_lo,
        code_area.longitude_lo + grid_area.longitude_lo,
        code_area.latitude_lo + grid_area.latitude_hi,
        code_area.longitude_lo + grid_area.longitude_hi,
        code_area.code_length + grid_area.code_length,
    )


def shorten(code: str, latitude: float, longitude: float) -> str:
    """
    Remove leading digits that can be recovered from a nearby location.
    
    A pair position is dropped only when the reference lies within 0.3 of
    that position's cell size from the code's center.
    
    Args:
        code: Full, unpadded plus code of at least 6 digits
        latitude: Reference latitude in degrees
        longitude: Reference longitude in degrees
        
    Returns:
        Shortened code, or the upper-cased code if nothing can be trimmed
        
    Raises:
        InvalidCodeError: If the code is not full, is padded or is too short
    """
    if not is_full(code):
        log_error(f"Cannot shorten {code!r}: not a valid full code")
        raise InvalidCodeError(code, "not a valid full code")
    if PADDING_CHARACTER in code:
        log_error(f"Cannot shorten padded code {code!r}")
        raise InvalidCodeError(code, "padded and cannot be shortened")

    code = code.upper()
    code_area = decode(code)
    if code_area.code_length < MIN_TRIMMABLE_CODE_LEN:
        log_error(f"Cannot shorten {code!r}: fewer than {MIN_TRIMMABLE_CODE_LEN} digits")
        raise InvalidCodeError(code, f"shorter than {MIN_TRIMMABLE_CODE_LEN} digits")

    latitude = clip_latitude(latitude)
    longitude = normalize_longitude(longitude)
    coordinate_range = max(
        abs(code_area.latitude_center - latitude),
        abs(code_area.longitude_center - longitude),
    )
    # Finest pair position first, so the largest safe trim wins.
    for i in range(len(PAIR_RESOLUTIONS) - 2, 0, -1):
        if coordinate_range < PAIR_RESOLUTIONS[i] * 0.3:
            log_debug(f"Shortened {code} by {(i + 1) * 2} digits (range {coordinate_range})")
            return code[(i + 1) * 2:]
    return code


def recover_nearest(short_code: str, reference_latitude: float,
                    reference_longitude: float) -> str:
    """
    Recover the full code nearest to a reference location.
    
    Args:
        short_code: Short (or full) plus code
        reference_latitude: Reference latitude in degrees
        reference_longitude: Reference longitude in degrees
        
    Returns:
        Full plus code; full input is returned unchanged
        
    Raises:
        InvalidCodeError: If the code is neither short nor full
    """
    if not is_short(short_code):
        if is_full(short_code):
            return short_code
        log_error(f"Cannot recover {short_code!r}: not a valid short code")
        raise InvalidCodeError(short_code, "not a valid short code")

    reference_latitude = clip_latitude(reference_latitude)
    reference_longitude = normalize_longitude(reference_longitude)

    short_code = short_code.upper()
    # Number of leading digits to recover.
    padding_length = SEPARATOR_POSITION - short_code.find(SEPARATOR)
    # Height and width of the recovered area in degrees.
    resolution = ENCODING_BASE ** (2 - padding_length / 2)
    area_to_edge = resolution / 2.0

    # Float rounding here can move the prefix one cell over; the recovered
    # code is then at most one cell from the true one.
    rounded_latitude = math.floor(reference_latitude / resolution) * resolution
    rounded_longitude = math.floor(reference_longitude / resolution) * resolution

    prefix = encode(rounded_latitude, rounded_longitude)[:padding_length]
    code_area = decode(prefix + short_code)
    latitude_center = code_area.latitude_center
    longitude_center = code_area.longitude_center

    # More than half a cell away from the reference means the nearest match is
    # one cell over in the other direction.
    difference = latitude_center - reference_latitude
    if difference > area_to_edge:
        latitude_center -= resolution
    elif difference < -area_to_edge:
        latitude_center += resolution

    difference = longitude_center - reference_longitude
    if difference > area_to_edge:
        longitude_center -= resolution
    elif difference < -area_to_edge:
        longitude_center += resolution

    log_debug(f"Recovered {short_code} near ({reference_latitude}, {reference_longitude})")
    return encode(latitude_center, longitude_center, code_area.code_length)
