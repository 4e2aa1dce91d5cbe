"""
Window functions for MDCT and IMDCT.

A window is a plain function (index, block_length) -> weight. The transforms
call it once per sample on every call, so it must not keep state.
"""

import math


def sine_window(index: int, block_length: int) -> float:
    """
    Sine window used by MP3 and AAC.

        w[i] = sin(pi (i + 1/2) / N)
    """
    return math.sin(math.pi * (index + 0.5) / block_length)


def vorbis_window(index: int, block_length: int) -> float:
    """
    Power-complementary window from the Vorbis codec.

        w[i] = sin(pi/2 sin^2(pi (i + 1/2) / N))
    """
    inner = math.sin(math.pi * (index + 0.5) / block_length)
    return math.sin(0.5 * math.pi * inner * inner)


def rectangular_window(index: int, block_length: int) -> float:
    """Unit weight everywhere. Does not cancel aliasing on its own."""
    return 1.0


WINDOWS = {
    'sine': sine_window,
    'vorbis': vorbis_window,
    'rectangular': rectangular_window,
}
