"""
Hand-unrolled DCT2 and DCT3 kernels for lengths 1, 2, 4, 8 and 16.

These are the leaves of the split-radix recursion. Each size is written out
as straight-line code: one step of Lee's decomposition followed by the two
half-size formulas, with the cosine factors held as named attributes.

    c{n}_{i} = 1 / (2 cos(pi (i + 1/2) / n))
"""

import math

from ..constants import DEFAULT_DTYPE
from ..numeric import from_f64, half
from .base import DCT2, DCT3


class _LeeConstants:
    """Cosine factors for every butterfly size up to `size`."""

    def _init_constants(self, size: int) -> None:
        self.half = half(self.dtype)
        n = 2
        while n <= size:
            for i in range(n // 2):
                factor = 0.5 / math.cos(math.pi * (i + 0.5) / n)
                setattr(self, f"c{n}_{i}", from_f64(factor, self.dtype))
            n *= 2


class _DCT2Formulas(_LeeConstants):

    def _dct2_2(self, x0, x1):
        return x0 + x1, (x0 - x1) * self.c2_0

    def _dct2_4(self, x0, x1, x2, x3):
        a0, a1 = self._dct2_2(x0 + x3, x1 + x2)
        b0, b1 = self._dct2_2((x0 - x3) * self.c4_0, (x1 - x2) * self.c4_1)
        return a0, b0 + b1, a1, b1

    def _dct2_8(self, x0, x1, x2, x3, x4, x5, x6, x7):
        a0, a1, a2, a3 = self._dct2_4(x0 + x7, x1 + x6, x2 + x5, x3 + x4)
        b0, b1, b2, b3 = self._dct2_4(
            (x0 - x7) * self.c8_0,
            (x1 - x6) * self.c8_1,
            (x2 - x5) * self.c8_2,
            (x3 - x4) * self.c8_3,
        )
        return a0, b0 + b1, a1, b1 + b2, a2, b2 + b3, a3, b3

    def _dct2_16(self, x0, x1, x2, x3, x4, x5, x6, x7,
                 x8, x9, x10, x11, x12, x13, x14, x15):
        a0, a1, a2, a3, a4, a5, a6, a7 = self._dct2_8(
            x0 + x15, x1 + x14, x2 + x13, x3 + x12,
            x4 + x11, x5 + x10, x6 + x9, x7 + x8,
        )
        b0, b1, b2, b3, b4, b5, b6, b7 = self._dct2_8(
            (x0 - x15) * self.c16_0,
            (x1 - x14) * self.c16_1,
            (x2 - x13) * self.c16_2,
            (x3 - x12) * self.c16_3,
            (x4 - x11) * self.c16_4,
            (x5 - x10) * self.c16_5,
            (x6 - x9) * self.c16_6,
            (x7 - x8) * self.c16_7,
        )
        return (a0, b0 + b1, a1, b1 + b2, a2, b2 + b3, a3, b3 + b4,
                a4, b4 + b5, a5, b5 + b6, a6, b6 + b7, a7, b7)


class _DCT3Formulas(_LeeConstants):
    # The odd half is fed 2 * x[1] because the inner DCT3 halves its first sample

    def _dct3_2(self, x0, x1):
        a0 = x0 * self.half
        b0 = x1 * self.c2_0
        return a0 + b0, a0 - b0

    def _dct3_4(self, x0, x1, x2, x3):
        a0, a1 = self._dct3_2(x0, x2)
        b0, b1 = self._dct3_2(2 * x1, x1 + x3)
        b0 = b0 * self.c4_0
        b1 = b1 * self.c4_1
        return a0 + b0, a1 + b1, a1 - b1, a0 - b0

    def _dct3_8(self, x0, x1, x2, x3, x4, x5, x6, x7):
        a0, a1, a2, a3 = self._dct3_4(x0, x2, x4, x6)
        b0, b1, b2, b3 = self._dct3_4(2 * x1, x1 + x3, x3 + x5, x5 + x7)
        b0 = b0 * self.c8_0
        b1 = b1 * self.c8_1
        b2 = b2 * self.c8_2
        b3 = b3 * self.c8_3
        return (a0 + b0, a1 + b1, a2 + b2, a3 + b3,
                a3 - b3, a2 - b2, a1 - b1, a0 - b0)

    def _dct3_16(self, x0, x1, x2, x3, x4, x5, x6, x7,
                 x8, x9, x10, x11, x12, x13, x14, x15):
        a0, a1, a2, a3, a4, a5, a6, a7 = self._dct3_8(
            x0, x2, x4, x6, x8, x10, x12, x14,
        )
        b0, b1, b2, b3, b4, b5, b6, b7 = self._dct3_8(
            2 * x1, x1 + x3, x3 + x5, x5 + x7,
            x7 + x9, x9 + x11, x11 + x13, x13 + x15,
        )
        b0 = b0 * self.c16_0
        b1 = b1 * self.c16_1
        b2 = b2 * self.c16_2
        b3 = b3 * self.c16_3
        b4 = b4 * self.c16_4
        b5 = b5 * self.c16_5
        b6 = b6 * self.c16_6
        b7 = b7 * self.c16_7
        return (a0 + b0, a1 + b1, a2 + b2, a3 + b3,
                a4 + b4, a5 + b5, a6 + b6, a7 + b7,
                a7 - b7, a6 - b6, a5 - b5, a4 - b4,
                a3 - b3, a2 - b2, a1 - b1, a0 - b0)


class DCT2Butterfly1(DCT2):
    """DCT2 of length 1 is the identity."""

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(1, dtype)

    def _process(self, input, output):
        output[0] = input[0]


class DCT2Butterfly2(DCT2, _DCT2Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(2, dtype)
        self._init_constants(2)

    def _process(self, input, output):
        output[:] = self._dct2_2(*input)


class DCT2Butterfly4(DCT2, _DCT2Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(4, dtype)
        self._init_constants(4)

    def _process(self, input, output):
        output[:] = self._dct2_4(*input)


class DCT2Butterfly8(DCT2, _DCT2Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(8, dtype)
        self._init_constants(8)

    def _process(self, input, output):
        output[:] = self._dct2_8(*input)


class DCT2Butterfly16(DCT2, _DCT2Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(16, dtype)
        self._init_constants(16)

    def _process(self, input, output):
        output[:] = self._dct2_16(*input)


class DCT3Butterfly1(DCT3, _DCT3Formulas):
    """DCT3 of length 1 halves its only sample."""

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(1, dtype)
        self._init_constants(1)

    def _process(self, input, output):
        output[0] = input[0] * self.half


class DCT3Butterfly2(DCT3, _DCT3Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(2, dtype)
        self._init_constants(2)

    def _process(self, input, output):
        output[:] = self._dct3_2(*input)


class DCT3Butterfly4(DCT3, _DCT3Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(4, dtype)
        self._init_constants(4)

    def _process(self, input, output):
        output[:] = self._dct3_4(*input)


class DCT3Butterfly8(DCT3, _DCT3Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(8, dtype)
        self._init_constants(8)

    def _process(self, input, output):
        output[:] = self._dct3_8(*input)


class DCT3Butterfly16(DCT3, _DCT3Formulas):

    def __init__(self, dtype=DEFAULT_DTYPE):
        super().__init__(16, dtype)
        self._init_constants(16)

    def _process(self, input, output):
        output[:] = self._dct3_16(*input)


DCT2_BUTTERFLIES = {
    1: DCT2Butterfly1,
    2: DCT2Butterfly2,
    4: DCT2Butterfly4,
    8: DCT2Butterfly8,
    16: DCT2Butterfly16,
}

DCT3_BUTTERFLIES = {
    1: DCT3Butterfly1,
    2: DCT3Butterfly2,
    4: DCT3Butterfly4,
    8: DCT3Butterfly8,
    16: DCT3Butterfly16,
}
