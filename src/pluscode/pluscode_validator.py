"""
Grammar checks for plus codes.

A code is valid when it has exactly one separator in an even position no
later than the eighth character, at most one even-length run of padding
that runs up to a trailing separator, never a single character after the
separator, and otherwise only characters from the code alphabet (any case).

Valid codes are either short (separator before the eighth character, so
leading digits must be recovered from a reference location) or full.
None of these checks raise: malformed input of any kind is simply invalid.
"""

import re

from .pluscode_constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)

_PADDING_RUN = re.compile(re.escape(PADDING_CHARACTER) + "+")


def is_valid(code) -> bool:
    """
    Determine if a code is a syntactically valid plus code.

    Args:
        code: Candidate code

    Returns:
        True if the code follows the plus code grammar
    """
    if not isinstance(code, str) or not code:
        return False

    separator_index = code.find(SEPARATOR)
    # The separator is required, exactly once.
    if separator_index == -1 or separator_index != code.rfind(SEPARATOR):
        return False
    if separator_index > SEPARATOR_POSITION or separator_index % 2 == 1:
        return False

    # An even run of padding is allowed before the separator, but then the
    # separator must be the final character.
    padding_index = code.find(PADDING_CHARACTER)
    if padding_index != -1:
        if padding_index == 0:
            return False
        pad_runs = _PADDING_RUN.findall(code)
        if (len(pad_runs) > 1 or len(pad_runs[0]) % 2 == 1
                or len(pad_runs[0]) > SEPARATOR_POSITION - 2):
            return False
        # The run must lead straight into the separator.
        if padding_index + len(pad_runs[0]) != separator_index:
            return False
        if not code.endswith(SEPARATOR):
            return False

    # A single character after the separator is not legal.
    if len(code) - separator_index - 1 == 1:
        return False

    stripped = _PADDING_RUN.sub("", code.replace(SEPARATOR, ""))
    return all(character in CODE_ALPHABET for character in stripped.upper())


def is_short(code) -> bool:
    """
    Determine if a code is a valid short code.

    Short codes omit leading digits and need a reference location to be
    recovered into a full code.
    """
    if not is_valid(code):
        return False
    return code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code) -> bool:
    """
    Determine if a code is a valid full code.

    Besides being valid and not short, the first latitude and longitude
    digits must not point past 90 and 180 degrees.
    """
    if not is_valid(code):
        return False
    if is_short(code):
        return False

    first_latitude_value = CODE_ALPHABET.find(code[0].upper()) * ENCODING_BASE
    if first_latitude_value >= LATITUDE_MAX * 2:
        return False
    if len(code) > 1:
        first_longitude_value = CODE_ALPHABET.find(code[1].upper()) * ENCODING_BASE
        if first_longitude_value >= LONGITUDE_MAX * 2:
            return False
    return True
