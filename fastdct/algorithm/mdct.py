"""
MDCT and IMDCT built on a DCT Type 4.

The MDCT folds a windowed block of 2n samples down to n samples (time
domain aliasing) and runs a DCT4 on the result. The IMDCT runs the DCT4 and
unfolds the n samples back to a windowed block of 2n. Overlap-adding
consecutive IMDCT blocks cancels the aliasing when the window satisfies the
Princen-Bradley condition w[i]^2 + w[i + n]^2 = 1; the reconstruction is
then scaled by n/2.
"""

from typing import Callable

import numpy as np

from ..exceptions import PreconditionError
from .base import DCT4, IMDCT, MDCT

WindowFn = Callable[[int, int], float]


def _check_inner(inner_dct4: DCT4) -> int:
    if not isinstance(inner_dct4, DCT4):
        raise PreconditionError(f"MDCT requires an inner DCT4, got {inner_dct4!r}")
    length = len(inner_dct4)
    if length % 2 != 0:
        raise PreconditionError(f"MDCT requires an even length, got {length}")
    return length


def _evaluate_window(window_fn: WindowFn, block_length: int, dtype) -> np.ndarray:
    return np.fromiter((window_fn(i, block_length) for i in range(block_length)),
                       dtype=dtype, count=block_length)


class MDCTViaDCT4(MDCT):
    """
    MDCT with n outputs from 2n windowed input samples.

        X[k] = sum_{i<2n} w(i, 2n) x[i] cos(pi/n (i + 1/2 + n/2)(k + 1/2))
    """

    def __init__(self, inner_dct4: DCT4, window_fn: WindowFn):
        super().__init__(_check_inner(inner_dct4), inner_dct4.dtype)
        self.dct = inner_dct4
        self.window_fn = window_fn

    def _process(self, input, output):
        n = len(self)
        quarter = n // 2
        signal = input * _evaluate_window(self.window_fn, 2 * n, self.dtype)

        folded = np.empty(n, dtype=self.dtype)
        folded[:quarter] = -signal[2 * quarter:3 * quarter][::-1] - signal[3 * quarter:]
        folded[quarter:] = signal[:quarter] - signal[quarter:2 * quarter][::-1]

        self.dct.process(folded, output)


class IMDCTViaDCT4(IMDCT):
    """
    IMDCT with 2n windowed outputs from n coefficients.

        y[i] = w(i, 2n) sum_{k<n} X[k] cos(pi/n (i + 1/2 + n/2)(k + 1/2))
    """

    def __init__(self, inner_dct4: DCT4, window_fn: WindowFn):
        super().__init__(_check_inner(inner_dct4), inner_dct4.dtype)
        self.dct = inner_dct4
        self.window_fn = window_fn

    def _process(self, input, output):
        n = len(self)
        quarter = n // 2

        spectrum = np.array(input, dtype=self.dtype)
        unfolded = np.empty(n, dtype=self.dtype)
        self.dct.process(spectrum, unfolded)

        output[:quarter] = unfolded[quarter:]
        output[quarter:3 * quarter] = -unfolded[::-1]
        output[3 * quarter:] = -unfolded[:quarter]
        output *= _evaluate_window(self.window_fn, 2 * n, self.dtype)
