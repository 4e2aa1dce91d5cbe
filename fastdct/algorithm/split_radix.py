"""
Split-radix DCT2 and DCT3 for power-of-two lengths.

One step of Lee's decomposition turns a length-n transform into two
transforms of length n/2 plus an O(n) pass of cosine-weighted sums. The
half-length transforms are shared instances, normally the same cached one,
and recurse until they reach a butterfly.
"""

import numpy as np

from ..exceptions import PreconditionError
from ..numeric import table_from_f64
from .base import DCT2, DCT3, Transform


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def lee_factors(length: int, dtype) -> np.ndarray:
    """1 / (2 cos(pi (i + 1/2) / length)) for i < length / 2."""
    half_len = length // 2
    return table_from_f64(0.5 / np.cos(np.pi * (np.arange(half_len) + 0.5) / length), dtype)


def dct3_lee_step(input: np.ndarray, output: np.ndarray, even_dct: DCT3, odd_dct: DCT3,
                  factors: np.ndarray) -> None:
    """
    Compute a DCT3 of even length n from two DCT3s of length n/2.

    The even samples feed one half transform directly. The odd samples are
    summed pairwise (the first one doubled to undo the half weight the inner
    DCT3 applies) and feed the other. The results are combined as

        X[i] = A[i] + c[i] B[i],    X[n-1-i] = A[i] - c[i] B[i]
    """
    n = len(input)
    half_len = n // 2
    dtype = output.dtype

    even_input = np.array(input[0::2], dtype=dtype)
    odd_input = np.empty(half_len, dtype=dtype)
    odd_input[0] = 2 * input[1]
    odd_input[1:] = input[1:n - 2:2] + input[3::2]

    even_output = np.empty(half_len, dtype=dtype)
    odd_output = np.empty(half_len, dtype=dtype)
    even_dct.process(even_input, even_output)
    odd_dct.process(odd_input, odd_output)

    odd_output *= factors
    output[:half_len] = even_output + odd_output
    output[half_len:] = (even_output - odd_output)[::-1]


def _check_halves(even_dct: Transform, odd_dct: Transform, expected: type) -> int:
    for sub in (even_dct, odd_dct):
        if not isinstance(sub, expected):
            raise PreconditionError(
                f"Split-radix halves must be {expected.__name__} instances, got {sub!r}")
    half_len = len(even_dct)
    if len(odd_dct) != half_len:
        raise PreconditionError(
            f"Split-radix halves must have equal length, got {half_len} and {len(odd_dct)}")
    if even_dct.dtype != odd_dct.dtype:
        raise PreconditionError(
            f"Split-radix halves must share a dtype, got {even_dct.dtype} and {odd_dct.dtype}")
    if not is_power_of_two(half_len):
        raise PreconditionError(f"Split-radix requires a power-of-two length, got {2 * half_len}")
    return half_len


class DCT2SplitRadix(DCT2):
    """
    DCT Type 2 of length n built from two DCT2 instances of length n/2.

    The folded sums x[i] + x[n-1-i] give the even outputs directly. The
    folded differences, scaled by c[i], give the odd outputs after adjacent
    results are added together.
    """

    def __init__(self, even_dct: DCT2, odd_dct: DCT2):
        half_len = _check_halves(even_dct, odd_dct, DCT2)
        super().__init__(2 * half_len, even_dct.dtype)
        self.even_dct = even_dct
        self.odd_dct = odd_dct
        self.twiddles = lee_factors(len(self), self.dtype)

    def _process(self, input, output):
        n = len(self)
        half_len = n // 2
        lower = input[:half_len]
        upper = input[::-1][:half_len]

        even_input = (lower + upper).astype(self.dtype, copy=False)
        odd_input = ((lower - upper) * self.twiddles).astype(self.dtype, copy=False)

        even_output = np.empty(half_len, dtype=self.dtype)
        odd_output = np.empty(half_len, dtype=self.dtype)
        self.even_dct.process(even_input, even_output)
        self.odd_dct.process(odd_input, odd_output)

        output[0::2] = even_output
        output[1:n - 1:2] = odd_output[:-1] + odd_output[1:]
        output[n - 1] = odd_output[-1]


class DCT3SplitRadix(DCT3):
    """DCT Type 3 of length n built from two DCT3 instances of length n/2."""

    def __init__(self, even_dct: DCT3, odd_dct: DCT3):
        half_len = _check_halves(even_dct, odd_dct, DCT3)
        super().__init__(2 * half_len, even_dct.dtype)
        self.even_dct = even_dct
        self.odd_dct = odd_dct
        self.twiddles = lee_factors(len(self), self.dtype)

    def _process(self, input, output):
        dct3_lee_step(input, output, self.even_dct, self.odd_dct, self.twiddles)
