"""Transform algorithms for fastdct."""

from .base import (
    Transform, TransformType, verify_length,
    DCT1, DCT2, DCT3, DCT4, DCT8, DST8, MDCT, IMDCT,
)
from .naive import DCT1Naive, DCT2Naive, DCT3Naive, DCT4Naive
from .type8_naive import DCT8Naive, DST8Naive
from .via_fft import DCT1ViaFFT, DCT2ViaFFT, DCT3ViaFFT
from .split_radix import DCT2SplitRadix, DCT3SplitRadix
from .butterflies import (
    DCT2Butterfly1, DCT2Butterfly2, DCT2Butterfly4, DCT2Butterfly8, DCT2Butterfly16,
    DCT3Butterfly1, DCT3Butterfly2, DCT3Butterfly4, DCT3Butterfly8, DCT3Butterfly16,
)
from .dct4 import DCT4ViaDCT3, DCT4ViaFFTOdd
from .mdct import MDCTViaDCT4, IMDCTViaDCT4

__all__ = [
    'Transform',
    'TransformType',
    'verify_length',
    'DCT1',
    'DCT2',
    'DCT3',
    'DCT4',
    'DCT8',
    'DST8',
    'MDCT',
    'IMDCT',
    'DCT1Naive',
    'DCT2Naive',
    'DCT3Naive',
    'DCT4Naive',
    'DCT8Naive',
    'DST8Naive',
    'DCT1ViaFFT',
    'DCT2ViaFFT',
    'DCT3ViaFFT',
    'DCT2SplitRadix',
    'DCT3SplitRadix',
    'DCT2Butterfly1',
    'DCT2Butterfly2',
    'DCT2Butterfly4',
    'DCT2Butterfly8',
    'DCT2Butterfly16',
    'DCT3Butterfly1',
    'DCT3Butterfly2',
    'DCT3Butterfly4',
    'DCT3Butterfly8',
    'DCT3Butterfly16',
    'DCT4ViaDCT3',
    'DCT4ViaFFTOdd',
    'MDCTViaDCT4',
    'IMDCTViaDCT4',
]
