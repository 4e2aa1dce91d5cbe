"""
DCT Type 4 derived from other transforms.

Even lengths go through a half-length DCT3, odd lengths through a complex
FFT of the same length. Neither needs a dedicated O(n^2) loop.
"""

import numpy as np

from ..exceptions import PreconditionError
from ..fft import Fft
from ..numeric import table_from_f64
from .base import DCT3, DCT4
from .split_radix import dct3_lee_step, lee_factors


class DCT4ViaDCT3(DCT4):
    """
    DCT Type 4 of even length n using a DCT3 of length n/2.

    Multiplying the DCT4 kernel by 2 cos((2k+1) pi / 4n) turns it into a DCT3
    of length n over the pairwise sums x[i-1] + x[i]. That DCT3 is computed
    with one Lee step on top of the inner half-length DCT3, and the outputs
    are divided by the cosine again.
    """

    def __init__(self, inner_dct3: DCT3):
        if not isinstance(inner_dct3, DCT3):
            raise PreconditionError(f"DCT4ViaDCT3 requires an inner DCT3, got {inner_dct3!r}")
        super().__init__(2 * len(inner_dct3), inner_dct3.dtype)
        self.inner_dct = inner_dct3

        n = len(self)
        self.lee_twiddles = lee_factors(n, self.dtype)
        self.twiddles = table_from_f64(0.5 / np.cos(np.pi * (2 * np.arange(n) + 1) / (4 * n)),
                                       self.dtype)

    def _process(self, input, output):
        sums = np.empty(len(self), dtype=self.dtype)
        sums[0] = 2 * input[0]
        sums[1:] = input[:-1] + input[1:]

        dct3_lee_step(sums, output, self.inner_dct, self.inner_dct, self.lee_twiddles)
        output *= self.twiddles


class DCT4ViaFFTOdd(DCT4):
    """
    DCT Type 4 of odd length n using an FFT of length n.

    With z[i] = x[i] exp(-i pi i / 2n) and Z = FFT(z), the rotated bins
    F[m] = exp(-i pi (4m + 1) / 4n) Z[m] hold every even output in their
    real part, and every odd output k as -Re(F[(2n - 1 - k) / 2]).
    """

    def __init__(self, inner_fft: Fft):
        length = len(inner_fft)
        if length % 2 == 0:
            raise PreconditionError(f"DCT4ViaFFTOdd requires an odd FFT length, got {length}")
        super().__init__(length, inner_fft.dtype)
        self.fft = inner_fft

        indices = np.arange(length)
        self.pre_twiddles = table_from_f64(np.exp(-0.5j * np.pi * indices / length), self.dtype)
        self.post_twiddles = table_from_f64(
            np.exp(-0.25j * np.pi * (4 * indices + 1) / length), self.dtype)

    def _process(self, input, output):
        even_len = (len(self) + 1) // 2

        buffer = (input * self.pre_twiddles).astype(self.fft.complex_dtype, copy=False)
        spectrum = np.empty_like(buffer)
        self.fft.process(buffer, spectrum)

        rotated = (spectrum * self.post_twiddles).real
        output[0::2] = rotated[:even_len]
        output[1::2] = -rotated[even_len:][::-1]
