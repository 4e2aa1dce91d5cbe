"""Planner verification: strategy selection, sharing and round trips."""

import sys
import os
import threading

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from fastdct import DCTPlanner, TransformType, sine_window
from fastdct.algorithm import (
    DCT1Naive, DCT1ViaFFT, DCT2Butterfly16, DCT2Naive, DCT2SplitRadix, DCT2ViaFFT,
    DCT3Butterfly4, DCT3SplitRadix, DCT3ViaFFT, DCT4Naive, DCT4ViaDCT3, DCT4ViaFFTOdd,
    DCT8Naive, DST8Naive,
)
from fastdct.exceptions import PreconditionError, RepresentabilityError

ROUND_TRIP_LENGTHS = [1, 2, 3, 4, 5, 8, 16, 17, 256, 65536]


def test_same_request_returns_same_instance():
    """Planning the same type and length twice returns one shared object."""
    planner = DCTPlanner()
    for plan in (planner.plan_dct1, planner.plan_dct2, planner.plan_dct3,
                 planner.plan_dct4, planner.plan_dct8, planner.plan_dst8):
        for n in (3, 8, 33, 64):
            assert plan(n) is plan(n)

    assert planner.plan(TransformType.DCT2, 40) is planner.plan_dct2(40)
    assert planner.plan('dct3', 40) is planner.plan_dct3(40)


def test_split_radix_reuses_sub_lengths():
    """A large split-radix plan fills the cache with every smaller level."""
    planner = DCTPlanner()
    dct = planner.plan_dct2(1024)
    assert isinstance(dct, DCT2SplitRadix)

    for n in (512, 256, 128, 64, 32, 16):
        assert (TransformType.DCT2, n) in planner

    half = planner.plan_dct2(512)
    assert dct.even_dct is half
    assert dct.odd_dct is half

    # The chain ends at the 16-point butterfly
    level = dct
    while isinstance(level, DCT2SplitRadix):
        level = level.even_dct
    assert isinstance(level, DCT2Butterfly16)
    assert level is planner.plan_dct2(16)


def test_dct4_shares_dct3():
    """An even DCT4 wraps the cached half-length DCT3."""
    planner = DCTPlanner()
    dct4 = planner.plan_dct4(64)
    assert isinstance(dct4, DCT4ViaDCT3)
    assert dct4.inner_dct is planner.plan_dct3(32)


def test_mdct_shares_dct4():
    """MDCT and IMDCT instances share the planner's DCT4."""
    planner = DCTPlanner()
    mdct = planner.plan_mdct(8, sine_window)
    imdct = planner.plan_imdct(8, lambda i, n: 1.0)
    assert mdct.dct is imdct.dct is planner.plan_dct4(8)
    assert len(mdct) == 8 and mdct.input_length == 16
    assert len(imdct) == 8 and imdct.output_length == 16


@pytest.mark.parametrize("transform_type, n, expected", [
    (TransformType.DCT1, 2, DCT1Naive),
    (TransformType.DCT1, 7, DCT1Naive),
    (TransformType.DCT1, 8, DCT1ViaFFT),
    (TransformType.DCT2, 3, DCT2Naive),
    (TransformType.DCT2, 16, DCT2Butterfly16),
    (TransformType.DCT2, 32, DCT2SplitRadix),
    (TransformType.DCT2, 24, DCT2ViaFFT),
    (TransformType.DCT3, 4, DCT3Butterfly4),
    (TransformType.DCT3, 64, DCT3SplitRadix),
    (TransformType.DCT3, 17, DCT3ViaFFT),
    (TransformType.DCT4, 6, DCT4ViaDCT3),
    (TransformType.DCT4, 5, DCT4Naive),
    (TransformType.DCT4, 9, DCT4ViaFFTOdd),
    (TransformType.DCT8, 9, DCT8Naive),
    (TransformType.DST8, 9, DST8Naive),
])
def test_strategy_selection(transform_type, n, expected):
    planner = DCTPlanner()
    dct = planner.plan(transform_type, n)
    assert type(dct) is expected
    assert len(dct) == n
    assert dct.transform_type is transform_type


def test_invalid_requests():
    planner = DCTPlanner()
    with pytest.raises(PreconditionError):
        planner.plan_dct2(0)
    with pytest.raises(PreconditionError):
        planner.plan_dct1(1)
    with pytest.raises(PreconditionError):
        planner.plan_dct2(8.5)
    with pytest.raises(PreconditionError):
        planner.plan(TransformType.DCT4, "16")
    with pytest.raises(PreconditionError):
        planner.plan(TransformType.MDCT, 8)
    with pytest.raises(PreconditionError):
        planner.plan_mdct(5, sine_window)
    with pytest.raises(PreconditionError):
        DCTPlanner(dtype=np.int32)

    # Integer-like lengths share the cache entry of the plain int
    assert planner.plan_dct2(np.int64(8)) is planner.plan_dct2(8)


@pytest.mark.parametrize("n", ROUND_TRIP_LENGTHS)
def test_dct2_dct3_round_trip(n):
    """DCT3(DCT2(x)) and DCT2(DCT3(x)) both equal n/2 * x."""
    planner = DCTPlanner()
    rng = np.random.default_rng(n)
    x = rng.standard_normal(n)

    dct2 = planner.plan_dct2(n)
    dct3 = planner.plan_dct3(n)

    forward_back = dct3.transform(dct2.transform(x)) * (2.0 / n)
    back_forward = dct2.transform(dct3.transform(x)) * (2.0 / n)

    assert np.allclose(forward_back, x, atol=1e-8), \
        f"DCT2 -> DCT3 round trip failed for n={n}"
    assert np.allclose(back_forward, x, atol=1e-8), \
        f"DCT3 -> DCT2 round trip failed for n={n}"


@pytest.mark.parametrize("n", [1, 2, 3, 8, 9, 100, 101, 1024])
def test_dct4_is_its_own_inverse(n):
    planner = DCTPlanner()
    x = np.random.default_rng(n).standard_normal(n)
    dct4 = planner.plan_dct4(n)
    assert np.allclose(dct4.transform(dct4.transform(x)) * (2.0 / n), x, atol=1e-8)


@pytest.mark.parametrize("n", [2, 3, 9, 100])
def test_dct1_is_its_own_inverse(n):
    planner = DCTPlanner()
    x = np.random.default_rng(n).standard_normal(n)
    dct1 = planner.plan_dct1(n)
    assert np.allclose(dct1.transform(dct1.transform(x)) * (2.0 / (n - 1)), x, atol=1e-8)


def test_large_lengths_match_scipy():
    """Unnormalized scipy DCTs are exactly twice ours."""
    scipy_fft = pytest.importorskip("scipy.fft")
    planner = DCTPlanner()
    rng = np.random.default_rng(99)

    for n in (1000, 4096):
        x = rng.standard_normal(n)
        for dct_type in (1, 2, 3, 4):
            ours = planner.plan(TransformType(f"dct{dct_type}"), n).transform(x)
            theirs = scipy_fft.dct(x, type=dct_type) / 2
            scale = np.abs(theirs).max()
            assert np.allclose(ours, theirs, atol=1e-10 * n * scale), \
                f"DCT{dct_type} n={n} differs from scipy"


def test_reduced_precision_representability():
    """A Lee factor that overflows float16 is a recoverable planning error."""
    planner = DCTPlanner(dtype=np.float16)
    with pytest.raises(RepresentabilityError):
        planner.plan_dct2(2 ** 18)

    # Sub-lengths that did fit stay usable
    assert (TransformType.DCT2, 2 ** 17) in planner
    assert (TransformType.DCT2, 2 ** 18) not in planner

    wide = DCTPlanner(dtype=np.float32)
    assert len(wide.plan_dct2(2 ** 18)) == 2 ** 18


def test_planner_shared_between_threads():
    """Concurrent requests to one planner all get the same instance."""
    planner = DCTPlanner()
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(planner.plan_dct2(2048))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(dct is results[0] for dct in results)


def test_concurrent_process_on_shared_instance():
    """One instance processes independent buffers from several threads."""
    planner = DCTPlanner()
    dct = planner.plan_dct2(256)
    rng = np.random.default_rng(3)
    signals = [rng.standard_normal(256) for _ in range(8)]
    expected = [DCT2Naive(256).transform(s) for s in signals]
    outputs = [None] * 8

    def worker(idx):
        outputs[idx] = dct.transform(signals[idx])

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for out, exp in zip(outputs, expected):
        assert np.allclose(out, exp, atol=1e-9)


def test_single_precision_planner():
    planner = DCTPlanner(dtype=np.float32)
    dct = planner.plan_dct3(4)
    assert isinstance(dct, DCT3Butterfly4)
    assert dct.dtype == np.float32
    x = np.random.default_rng(0).standard_normal(4)
    assert dct.transform(x).dtype == np.float32


def main():
    """Run the non-parametrized planner checks."""
    print("\n" + "=" * 60)
    print("PLANNER VERIFICATION")
    print("=" * 60 + "\n")

    tests = [
        ("Instance identity", test_same_request_returns_same_instance),
        ("Split radix reuse", test_split_radix_reuses_sub_lengths),
        ("DCT4 shares DCT3", test_dct4_shares_dct3),
        ("MDCT shares DCT4", test_mdct_shares_dct4),
        ("Invalid requests", test_invalid_requests),
        ("Round trip", lambda: [test_dct2_dct3_round_trip(n) for n in ROUND_TRIP_LENGTHS]),
        ("Representability", test_reduced_precision_representability),
        ("Shared planner", test_planner_shared_between_threads),
        ("Shared instance", test_concurrent_process_on_shared_instance),
    ]

    failed = 0
    for name, test in tests:
        try:
            test()
            print(f"   {name}: ✅ PASS")
        except AssertionError as e:
            failed += 1
            print(f"   {name}: ❌ FAIL ({e})")

    print("\n" + "=" * 60)
    print("All tests passed!" if failed == 0 else f"{failed} test(s) failed")
    print("=" * 60 + "\n")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
