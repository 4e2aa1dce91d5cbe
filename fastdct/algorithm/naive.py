"""
Naive O(n^2) DCT kernels.

Each kernel sums its input directly against a precomputed twiddle table.
They are slow but exact, and every faster algorithm is checked against them.
"""

import numpy as np

from ..constants import DEFAULT_DTYPE
from ..exceptions import PreconditionError
from ..numeric import half, one, table_from_f64
from .base import DCT1, DCT2, DCT3, DCT4


class DCT1Naive(DCT1):
    """
    Naive DCT Type 1.

        X[k] = 1/2 (x[0] + (-1)^k x[n-1]) + sum_{i=1}^{n-2} x[i] cos(pi i k / (n-1))

    Requires n >= 2.
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        if length < 2:
            raise PreconditionError(f"DCT1 requires length >= 2, got {length}")
        super().__init__(length, dtype)

        period = 2 * (length - 1)
        self.twiddles = table_from_f64(np.cos(np.pi * np.arange(period) / (length - 1)), dtype)
        self._inner = np.arange(1, length - 1)
        self._half = half(dtype)
        self._one = one(dtype)

    def _process(self, input, output):
        n = len(self)
        period = len(self.twiddles)
        inner_input = input[1:n - 1]

        for k in range(n):
            endpoint_sign = self._one if k % 2 == 0 else -self._one
            boundary = self._half * (input[0] + endpoint_sign * input[n - 1])
            output[k] = boundary + np.dot(inner_input, self.twiddles[(self._inner * k) % period])


class DCT2Naive(DCT2):
    """
    Naive DCT Type 2.

        X[k] = sum_i x[i] cos(pi k (2i + 1) / (2n))
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        super().__init__(length, dtype)

        period = 4 * length
        self.twiddles = table_from_f64(np.cos(np.pi * np.arange(period) / (2 * length)), dtype)
        self._odd = 2 * np.arange(length) + 1

    def _process(self, input, output):
        period = len(self.twiddles)
        for k in range(len(self)):
            output[k] = np.dot(input, self.twiddles[(self._odd * k) % period])


class DCT3Naive(DCT3):
    """
    Naive DCT Type 3, the transpose of DCT2 with a half-weight first sample.

        X[k] = 1/2 x[0] + sum_{i>=1} x[i] cos(pi i (2k + 1) / (2n))
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        super().__init__(length, dtype)

        period = 4 * length
        self.twiddles = table_from_f64(np.cos(np.pi * np.arange(period) / (2 * length)), dtype)
        self._tail = np.arange(1, length)
        self._half = half(dtype)

    def _process(self, input, output):
        period = len(self.twiddles)
        half_first = self._half * input[0]
        tail_input = input[1:]

        for k in range(len(self)):
            stride = 2 * k + 1
            output[k] = half_first + np.dot(tail_input, self.twiddles[(self._tail * stride) % period])


class DCT4Naive(DCT4):
    """
    Naive DCT Type 4.

        X[k] = sum_i x[i] cos(pi (2i + 1)(2k + 1) / (4n))
    """

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        super().__init__(length, dtype)

        period = 8 * length
        self.twiddles = table_from_f64(np.cos(np.pi * np.arange(period) / (4 * length)), dtype)
        self._odd = 2 * np.arange(length) + 1

    def _process(self, input, output):
        period = len(self.twiddles)
        for k in range(len(self)):
            output[k] = np.dot(input, self.twiddles[(self._odd * (2 * k + 1)) % period])
