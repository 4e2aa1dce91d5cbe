"""
DCT kernels derived from a single complex FFT.

Each kernel repacks its real input into a complex buffer using the symmetry
of the transform, runs one FFT, then applies a phase correction and keeps
the real part. All of them run in O(n log n) for any length.
"""

import numpy as np

from ..exceptions import PreconditionError
from ..fft import Fft
from ..numeric import half, table_from_f64, zero
from .base import DCT1, DCT2, DCT3


class DCT1ViaFFT(DCT1):
    """
    DCT Type 1 computed from an FFT of length 2(n - 1).

    The input is mirrored into an even-symmetric sequence, whose FFT is real
    and equal to twice the DCT1.
    """

    def __init__(self, inner_fft: Fft):
        fft_len = len(inner_fft)
        if fft_len % 2 != 0:
            raise PreconditionError(
                f"DCT1ViaFFT requires an even FFT length 2(n-1), got {fft_len}")
        super().__init__(fft_len // 2 + 1, inner_fft.dtype)
        self.fft = inner_fft
        self._half = half(self.dtype)

    def _process(self, input, output):
        n = len(self)
        buffer = np.empty(len(self.fft), dtype=self.fft.complex_dtype)
        buffer[:n] = input
        buffer[n:] = input[n - 2:0:-1]

        spectrum = np.empty_like(buffer)
        self.fft.process(buffer, spectrum)

        output[:] = spectrum[:n].real * self._half


class DCT2ViaFFT(DCT2):
    """
    DCT Type 2 computed from an FFT of the same length.

    Even samples are placed in order at the front of the buffer and odd
    samples in reverse order at the back, then each FFT bin k is rotated by
    exp(-i pi k / 2n).
    """

    def __init__(self, inner_fft: Fft):
        super().__init__(len(inner_fft), inner_fft.dtype)
        self.fft = inner_fft

        n = len(self)
        self.twiddles = table_from_f64(np.exp(-0.5j * np.pi * np.arange(n) / n), self.dtype)

    def _process(self, input, output):
        even_len = (len(self) + 1) // 2
        buffer = np.empty(len(self), dtype=self.fft.complex_dtype)
        buffer[:even_len] = input[0::2]
        buffer[even_len:] = input[1::2][::-1]

        spectrum = np.empty_like(buffer)
        self.fft.process(buffer, spectrum)

        output[:] = (spectrum * self.twiddles).real


class DCT3ViaFFT(DCT3):
    """
    DCT Type 3 computed from an FFT of the same length.

    This runs the DCT2ViaFFT steps backwards. The input is combined with its
    reversal into a Hermitian spectrum, the inverse FFT is taken through a
    forward FFT of the conjugate, and the real result is interleaved back
    into even and odd output positions.
    """

    def __init__(self, inner_fft: Fft):
        super().__init__(len(inner_fft), inner_fft.dtype)
        self.fft = inner_fft

        # Conjugated pre-twiddles, including the 1/2 weight of DCT3
        n = len(self)
        self.twiddles = table_from_f64(0.5 * np.exp(-0.5j * np.pi * np.arange(n) / n), self.dtype)
        self._zero = zero(self.dtype)

    def _process(self, input, output):
        n = len(self)
        even_len = (n + 1) // 2

        reversed_input = np.empty(n, dtype=self.dtype)
        reversed_input[0] = self._zero
        reversed_input[1:] = input[:0:-1]

        buffer = (input + 1j * reversed_input) * self.twiddles
        buffer = buffer.astype(self.fft.complex_dtype, copy=False)

        spectrum = np.empty_like(buffer)
        self.fft.process(buffer, spectrum)

        output[0::2] = spectrum[:even_len].real
        output[1::2] = spectrum[even_len:].real[::-1]
