"""Constants for the DCT planner."""

import numpy as np

# Lengths serviced by hand-unrolled DCT2/DCT3 butterflies
BUTTERFLY_SIZES = (1, 2, 4, 8, 16)

# Non power-of-two lengths below this use the O(n^2) naive kernels
NAIVE_THRESHOLD = 8

DEFAULT_DTYPE = np.float64

SUPPORTED_DTYPES = (np.float16, np.float32, np.float64, np.longdouble)

# Complex buffer type used for the FFT of each supported float type
# (numpy has no half-precision complex type)
COMPLEX_DTYPES = {
    np.dtype(np.float16): np.dtype(np.complex64),
    np.dtype(np.float32): np.dtype(np.complex64),
    np.dtype(np.float64): np.dtype(np.complex128),
    np.dtype(np.longdouble): np.dtype(np.clongdouble),
}
