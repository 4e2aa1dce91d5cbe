"""
Numeric helpers shared by every kernel.

Transforms are generic over a numpy float dtype. All trigonometry happens at
construction time in double precision and is narrowed to the target dtype
through from_f64 / table_from_f64, which refuse values the dtype cannot hold.
"""

import numpy as np

from .constants import COMPLEX_DTYPES, SUPPORTED_DTYPES
from .exceptions import PreconditionError, RepresentabilityError


def resolve_dtype(dtype) -> np.dtype:
    """
    Normalize a dtype argument and check that it is a supported float type.

    Raises:
        PreconditionError: If dtype is not one of SUPPORTED_DTYPES
    """
    resolved = np.dtype(dtype)
    if resolved not in [np.dtype(d) for d in SUPPORTED_DTYPES]:
        raise PreconditionError(f"Unsupported dtype for DCT: {resolved}")
    return resolved


def complex_dtype(dtype) -> np.dtype:
    """Complex dtype used for FFT buffers of the given float dtype."""
    return COMPLEX_DTYPES[resolve_dtype(dtype)]


def zero(dtype):
    return resolve_dtype(dtype).type(0)


def one(dtype):
    return resolve_dtype(dtype).type(1)


def half(dtype):
    return resolve_dtype(dtype).type(0.5)


def from_f64(value: float, dtype):
    """
    Convert a double-precision value to dtype.

    Raises:
        RepresentabilityError: If the converted value is NaN or infinite
    """
    dtype = resolve_dtype(dtype)
    with np.errstate(over='ignore', invalid='ignore'):
        converted = dtype.type(value)
    if not np.isfinite(converted):
        raise RepresentabilityError(f"{value!r} is not representable as {dtype}")
    return converted


def table_from_f64(values, dtype) -> np.ndarray:
    """
    Convert a table of double-precision values to a read-only dtype array.

    Complex tables are converted to the matching complex dtype.

    Raises:
        RepresentabilityError: If any entry is not representable
    """
    values = np.asarray(values)
    if np.iscomplexobj(values):
        target = complex_dtype(dtype)
    else:
        target = resolve_dtype(dtype)

    with np.errstate(over='ignore', invalid='ignore'):
        table = values.astype(target)
    if not np.all(np.isfinite(table)):
        bad = values[~np.isfinite(table)][0]
        raise RepresentabilityError(f"{bad!r} is not representable as {target}")

    table.setflags(write=False)
    return table
