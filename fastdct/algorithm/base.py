"""Abstract transform interfaces shared by every algorithm."""

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from ..exceptions import LengthMismatchError, PreconditionError
from ..numeric import resolve_dtype


class TransformType(Enum):
    """Logical transform computed by an instance, used as a planner cache key."""

    DCT1 = 'dct1'
    DCT2 = 'dct2'
    DCT3 = 'dct3'
    DCT4 = 'dct4'
    DCT8 = 'dct8'
    DST8 = 'dst8'
    MDCT = 'mdct'
    IMDCT = 'imdct'


def verify_length(input: np.ndarray, output: np.ndarray,
                  expected_in: int, expected_out: int) -> None:
    """
    Check buffer lengths before a transform touches them.

    Raises:
        LengthMismatchError: If either buffer has the wrong length
        PreconditionError: If either buffer is not one-dimensional
    """
    for name, buf, expected in (('input', input, expected_in),
                                ('output', output, expected_out)):
        if np.ndim(buf) != 1:
            raise PreconditionError(f"{name} buffer must be 1-D, got shape {np.shape(buf)}")
        if len(buf) != expected:
            raise LengthMismatchError(name, expected, len(buf))


class Transform(ABC):
    """
    Base class of every transform instance.

    An instance has a fixed length and dtype and never changes after
    __init__, so one instance may be shared by many parents and used from
    several threads at once as long as each call gets its own buffers.

    process(input, output) writes the transform of input into output. The
    input buffer may be used as scratch space by some kernels.
    """

    transform_type: TransformType = None

    def __init__(self, length: int, dtype):
        if length < 1:
            raise PreconditionError(f"Transform length must be positive, got {length}")
        self._len = length
        self.dtype = resolve_dtype(dtype)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={self._len}, dtype={self.dtype})"

    @property
    def input_length(self) -> int:
        return self._len

    @property
    def output_length(self) -> int:
        return self._len

    def process(self, input: np.ndarray, output: np.ndarray) -> None:
        """
        Compute the transform of input into output.

        Args:
            input: 1-D array of length input_length (may be overwritten)
            output: 1-D array of length output_length

        Non-float input is converted to this transform's dtype first, so
        kernels that scale the input in place never truncate it.

        Raises:
            LengthMismatchError: If a buffer has the wrong length
            PreconditionError: If output is not a floating point array
        """
        input = np.asarray(input)
        if not np.issubdtype(input.dtype, np.floating):
            input = input.astype(self.dtype)
        verify_length(input, output, self.input_length, self.output_length)
        if not np.issubdtype(np.asarray(output).dtype, np.floating):
            raise PreconditionError(
                f"output buffer must be floating point, got {np.asarray(output).dtype}")
        self._process(input, output)

    @abstractmethod
    def _process(self, input: np.ndarray, output: np.ndarray) -> None:
        """Kernel body, called with buffers of verified length."""

    def transform(self, signal) -> np.ndarray:
        """
        Transform a signal into a newly allocated array.

        The signal is copied first, so it is never modified.

        Args:
            signal: Sequence of input_length samples

        Returns:
            Array of output_length coefficients with this transform's dtype
        """
        input = np.array(signal, dtype=self.dtype)
        output = np.zeros(self.output_length, dtype=self.dtype)
        self.process(input, output)
        return output


class DCT1(Transform):
    transform_type = TransformType.DCT1


class DCT2(Transform):
    transform_type = TransformType.DCT2


class DCT3(Transform):
    transform_type = TransformType.DCT3


class DCT4(Transform):
    transform_type = TransformType.DCT4


class DCT8(Transform):
    transform_type = TransformType.DCT8


class DST8(Transform):
    transform_type = TransformType.DST8


class MDCT(Transform):
    """Maps a windowed signal of length 2n to n coefficients."""

    transform_type = TransformType.MDCT

    @property
    def input_length(self) -> int:
        return 2 * self._len


class IMDCT(Transform):
    """Maps n coefficients to a windowed signal of length 2n."""

    transform_type = TransformType.IMDCT

    @property
    def output_length(self) -> int:
        return 2 * self._len
