"""
Plus code codec.

Converts latitude/longitude pairs to and from plus codes:

- encode / decode between locations and codes
- shorten / recover_nearest relative to a reference location
- is_valid / is_short / is_full grammar checks

Main types:
- CodeArea: Decoded bounding box and center

Errors:
- PlusCodeError: Base class, a ValueError
- InvalidCodeLengthError: Illegal length passed to encode
- InvalidCodeError: Code fails the grammar an operation requires
"""

from .pluscode_area import CodeArea
from .pluscode_coordinates import clip_latitude, normalize_longitude
from .pluscode_errors import InvalidCodeError, InvalidCodeLengthError, PlusCodeError
from .pluscode_locator import decode, encode, get_alphabet, recover_nearest, shorten
from .pluscode_validator import is_full, is_short, is_valid

__all__ = [
    # Operations
    "get_alphabet",
    "is_valid",
    "is_short",
    "is_full",
    "encode",
    "decode",
    "shorten",
    "recover_nearest",
    "clip_latitude",
    "normalize_longitude",
    
    # Types
    "CodeArea",
    
    # Errors
    "PlusCodeError",
    "InvalidCodeLengthError",
    "InvalidCodeError",
]

__version__ = "1.0.0"
