"""
Complex FFT collaborator.

The DCT kernels only need a forward complex FFT of a fixed length. NumpyFft
provides one on top of numpy.fft, and FFTPlanner hands out one shared
instance per length.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict

import numpy as np

from .constants import DEFAULT_DTYPE
from .exceptions import LengthMismatchError, PreconditionError
from .numeric import complex_dtype, resolve_dtype

logger = logging.getLogger(__name__)


class Fft(ABC):
    """Forward complex FFT of a fixed length."""

    def __init__(self, length: int, dtype=DEFAULT_DTYPE):
        if length < 1:
            raise PreconditionError(f"FFT length must be positive, got {length}")
        self._len = length
        self.dtype = resolve_dtype(dtype)
        self.complex_dtype = complex_dtype(dtype)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={self._len}, dtype={self.dtype})"

    def process(self, input: np.ndarray, output: np.ndarray) -> None:
        """
        Compute output[k] = sum_j input[j] exp(-2 pi i j k / n).

        Raises:
            LengthMismatchError: If a buffer has the wrong length
        """
        if len(input) != self._len:
            raise LengthMismatchError('input', self._len, len(input))
        if len(output) != self._len:
            raise LengthMismatchError('output', self._len, len(output))
        self._process(input, output)

    @abstractmethod
    def _process(self, input: np.ndarray, output: np.ndarray) -> None:
        pass


class NumpyFft(Fft):
    """Forward FFT backed by numpy.fft.fft."""

    def _process(self, input, output):
        output[:] = np.fft.fft(input)


class FFTPlanner:
    """
    Plans forward FFTs, reusing one instance per length.

    Safe to share between threads.
    """

    def __init__(self, dtype=DEFAULT_DTYPE):
        self.dtype = resolve_dtype(dtype)
        self._cache: Dict[int, Fft] = {}
        self._lock = threading.Lock()

    def plan_fft(self, length: int) -> Fft:
        with self._lock:
            fft = self._cache.get(length)
            if fft is None:
                fft = NumpyFft(length, self.dtype)
                self._cache[length] = fft
                logger.debug("planned %r", fft)
            return fft
