"""
DCT planner.

The planner picks an algorithm for a (transform type, length) request and
memoizes every instance it builds. Composite algorithms resolve their
sub-transforms through the same cache, so planning a large split-radix DCT2
fills in every smaller power of two on the way down and later requests for
any of them return the shared instance.
"""

import logging
import operator
import threading
from typing import Dict, Tuple

from .algorithm.base import (
    DCT1, DCT2, DCT3, DCT4, DCT8, DST8, IMDCT, MDCT, Transform, TransformType,
)
from .algorithm.butterflies import DCT2_BUTTERFLIES, DCT3_BUTTERFLIES
from .algorithm.dct4 import DCT4ViaDCT3, DCT4ViaFFTOdd
from .algorithm.mdct import IMDCTViaDCT4, MDCTViaDCT4, WindowFn
from .algorithm.naive import DCT1Naive, DCT2Naive, DCT3Naive, DCT4Naive
from .algorithm.split_radix import DCT2SplitRadix, DCT3SplitRadix, is_power_of_two
from .algorithm.type8_naive import DCT8Naive, DST8Naive
from .algorithm.via_fft import DCT1ViaFFT, DCT2ViaFFT, DCT3ViaFFT
from .constants import BUTTERFLY_SIZES, DEFAULT_DTYPE, NAIVE_THRESHOLD
from .exceptions import PreconditionError
from .fft import FFTPlanner
from .numeric import resolve_dtype

logger = logging.getLogger(__name__)


class DCTPlanner:
    """
    Builds and caches transform instances for one dtype.

    Instances are shared: asking twice for the same type and length returns
    the same object. The cache is never evicted and lives as long as the
    planner. A re-entrant lock guards it, so one planner may be shared by
    several threads.

    Strategy per transform type:
        DCT1       naive below NAIVE_THRESHOLD, else via an FFT of 2(n-1)
        DCT2/DCT3  butterfly for BUTTERFLY_SIZES, split-radix for larger
                   powers of two, naive below NAIVE_THRESHOLD, else via FFT
        DCT4       even n via DCT3 of n/2; odd n naive below
                   NAIVE_THRESHOLD, else via an FFT of n
        DCT8/DST8  naive
    """

    def __init__(self, dtype=DEFAULT_DTYPE, fft_planner: FFTPlanner = None):
        self.dtype = resolve_dtype(dtype)
        if fft_planner is None:
            fft_planner = FFTPlanner(self.dtype)
        elif fft_planner.dtype != self.dtype:
            raise PreconditionError(
                f"FFT planner dtype {fft_planner.dtype} does not match {self.dtype}")
        self.fft_planner = fft_planner

        self._cache: Dict[Tuple[TransformType, int], Transform] = {}
        self._lock = threading.RLock()
        self._builders = {
            TransformType.DCT1: self._build_dct1,
            TransformType.DCT2: self._build_dct2,
            TransformType.DCT3: self._build_dct3,
            TransformType.DCT4: self._build_dct4,
            TransformType.DCT8: self._build_dct8,
            TransformType.DST8: self._build_dst8,
        }

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, key: Tuple[TransformType, int]) -> bool:
        return key in self._cache

    def plan(self, transform_type: TransformType, length: int) -> Transform:
        """
        Return the shared instance for (transform_type, length), building it
        and any sub-transforms it needs on first request.

        Raises:
            PreconditionError: If the length is not valid for the type
            RepresentabilityError: If a twiddle does not fit the dtype
        """
        transform_type = TransformType(transform_type)
        if transform_type in (TransformType.MDCT, TransformType.IMDCT):
            raise PreconditionError(
                "MDCT and IMDCT need a window function, use plan_mdct / plan_imdct")
        try:
            length = operator.index(length)
        except TypeError:
            raise PreconditionError(f"Transform length must be an integer, got {length!r}") from None
        if length < 1:
            raise PreconditionError(f"Transform length must be positive, got {length}")

        key = (transform_type, length)
        with self._lock:
            instance = self._cache.get(key)
            if instance is None:
                # Builders recurse into plan() for their sub-transforms
                instance = self._builders[transform_type](length)
                self._cache[key] = instance
                logger.debug("planned %s length %d: %r", transform_type.name, length, instance)
            return instance

    def plan_dct1(self, length: int) -> DCT1:
        return self.plan(TransformType.DCT1, length)

    def plan_dct2(self, length: int) -> DCT2:
        return self.plan(TransformType.DCT2, length)

    def plan_dct3(self, length: int) -> DCT3:
        return self.plan(TransformType.DCT3, length)

    def plan_dct4(self, length: int) -> DCT4:
        return self.plan(TransformType.DCT4, length)

    def plan_dct8(self, length: int) -> DCT8:
        return self.plan(TransformType.DCT8, length)

    def plan_dst8(self, length: int) -> DST8:
        return self.plan(TransformType.DST8, length)

    def plan_mdct(self, length: int, window_fn: WindowFn) -> MDCT:
        """
        MDCT with `length` outputs over the cached DCT4 of the same length.

        Not cached itself since the window belongs to the caller.
        """
        return MDCTViaDCT4(self.plan_dct4(length), window_fn)

    def plan_imdct(self, length: int, window_fn: WindowFn) -> IMDCT:
        """IMDCT with `length` inputs over the cached DCT4 of the same length."""
        return IMDCTViaDCT4(self.plan_dct4(length), window_fn)

    def _build_dct1(self, length: int) -> DCT1:
        if length < 2:
            raise PreconditionError(f"DCT1 requires length >= 2, got {length}")
        if length < NAIVE_THRESHOLD:
            return DCT1Naive(length, self.dtype)
        return DCT1ViaFFT(self.fft_planner.plan_fft(2 * (length - 1)))

    def _build_dct2(self, length: int) -> DCT2:
        if length in BUTTERFLY_SIZES:
            return DCT2_BUTTERFLIES[length](self.dtype)
        if is_power_of_two(length):
            half = self.plan_dct2(length // 2)
            return DCT2SplitRadix(half, half)
        if length < NAIVE_THRESHOLD:
            return DCT2Naive(length, self.dtype)
        return DCT2ViaFFT(self.fft_planner.plan_fft(length))

    def _build_dct3(self, length: int) -> DCT3:
        if length in BUTTERFLY_SIZES:
            return DCT3_BUTTERFLIES[length](self.dtype)
        if is_power_of_two(length):
            half = self.plan_dct3(length // 2)
            return DCT3SplitRadix(half, half)
        if length < NAIVE_THRESHOLD:
            return DCT3Naive(length, self.dtype)
        return DCT3ViaFFT(self.fft_planner.plan_fft(length))

    def _build_dct4(self, length: int) -> DCT4:
        if length % 2 == 0:
            return DCT4ViaDCT3(self.plan_dct3(length // 2))
        if length < NAIVE_THRESHOLD:
            return DCT4Naive(length, self.dtype)
        return DCT4ViaFFTOdd(self.fft_planner.plan_fft(length))

    def _build_dct8(self, length: int) -> DCT8:
        return DCT8Naive(length, self.dtype)

    def _build_dst8(self, length: int) -> DST8:
        return DST8Naive(length, self.dtype)
