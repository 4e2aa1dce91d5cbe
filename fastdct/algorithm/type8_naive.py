"""Naive O(n^2) DCT and DST Type 8."""

import numpy as np

from ..constants import DEFAULT_DTYPE
from ..numeric import half, table_from_f64
from .base import DCT8, DST8


def _type8_sum(twiddles: np.ndarray, input: np.ndarray, output: np.ndarray) -> None:
    # Twiddle index starts at k and advances by 2k + 1, wrapping at the period
    period = len(twiddles)
    steps = np.arange(len(input))
    for k in range(len(output)):
        output[k] = np.dot(input, twiddles[(k + steps * (2 * k + 1)) % period])


class DCT8Naive(DCT8):
    """
    Naive DCT Type 8.

        X[k] = sum_i x[i] cos(pi (2i + 1)(2k + 1) / (2(2n + 1)))

    For n = 1 this reduces to x[0] * cos(pi / 6).
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        super().__init__(length, dtype)

        constant_factor = np.pi / (2 * length + 1)
        angles = constant_factor * (np.arange(4 * length + 2) + 0.5)
        self.twiddles = table_from_f64(np.cos(angles), dtype)

    def _process(self, input, output):
        _type8_sum(self.twiddles, input, output)


class DST8Naive(DST8):
    """
    Naive DST Type 8.

    The last input sample carries half weight. It is halved in place in the
    input buffer before summing:

        X[k] = sum_i x[i] sin(pi (2i + 1)(2k + 1) / (2(2n - 1)))

    For n = 1 this reduces to x[0] / 2.
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        super().__init__(length, dtype)

        constant_factor = np.pi / (2 * length - 1)
        angles = constant_factor * (np.arange(4 * length - 2) + 0.5)
        self.twiddles = table_from_f64(np.sin(angles), dtype)
        self._half = half(dtype)

    def _process(self, input, output):
        input[-1] = input[-1] * self._half
        _type8_sum(self.twiddles, input, output)
