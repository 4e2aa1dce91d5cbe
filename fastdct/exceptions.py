"""Exceptions raised by fastdct."""


class DCTError(Exception):
    """Base class for all fastdct errors."""


class PreconditionError(DCTError, ValueError):
    """
    A transform was built or called in a way that can never work.

    Wrong buffer lengths, wrong parity, an FFT of the wrong size or a
    non power-of-two length handed to a split-radix kernel all end up here.
    These are programming errors in the caller or planner.
    """


class LengthMismatchError(PreconditionError):
    """An input or output buffer does not match the transform length."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{name} buffer has length {actual}, expected {expected}"
        )


class RepresentabilityError(DCTError, ArithmeticError):
    """A precomputed constant does not fit the requested float type."""
