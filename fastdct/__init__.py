"""fastdct - DCT/DST types 1-4, type 8 and MDCT for arbitrary lengths."""

from .algorithm import TransformType
from .exceptions import (
    DCTError, PreconditionError, LengthMismatchError, RepresentabilityError,
)
from .fft import FFTPlanner
from .planner import DCTPlanner
from .window import sine_window, vorbis_window, rectangular_window

__version__ = '0.1.0'

__all__ = [
    'DCTPlanner',
    'FFTPlanner',
    'TransformType',
    'DCTError',
    'PreconditionError',
    'LengthMismatchError',
    'RepresentabilityError',
    'sine_window',
    'vorbis_window',
    'rectangular_window',
]
