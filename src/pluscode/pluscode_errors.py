"""
Custom exceptions for the plus code codec.

All codec errors derive from ValueError: they describe bad caller input,
never a transient condition.
"""


class PlusCodeError(ValueError):
    """Base exception for plus code encoding and decoding."""
    pass


class InvalidCodeLengthError(PlusCodeError):
    """Raised when encode is asked for an illegal number of digits."""

    def __init__(self, code_length):
        self.code_length = code_length
        super().__init__(f"Invalid plus code length: {code_length}")


class InvalidCodeError(PlusCodeError):
    """Raised when a code fails the grammar required by an operation."""

    def __init__(self, code, reason: str = "not a valid plus code"):
        self.code = code
        self.reason = reason
        super().__init__(f"Passed code is {reason}: {code!r}")
