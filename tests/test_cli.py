"""Command line front end verification."""

import sys
import os
import subprocess

# Add parent directory to path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import numpy as np
import pytest

from fastdct import DCTPlanner, TransformType
from fastdct.algorithm import DCT2Naive, DCT4Naive
from transform import run_transform


def test_run_transform_single_signal():
    x = np.random.default_rng(0).standard_normal(12)
    result = run_transform(x, TransformType.DCT2, DCTPlanner())
    assert result.shape == (12,)
    assert np.allclose(result, DCT2Naive(12).transform(x), atol=1e-10)


def test_run_transform_rows():
    rows = np.random.default_rng(1).standard_normal((3, 10))
    result = run_transform(rows, TransformType.DCT4, DCTPlanner())
    assert result.shape == (3, 10)
    for row, out in zip(rows, result):
        assert np.allclose(out, DCT4Naive(10).transform(row), atol=1e-10)


def test_run_transform_mdct_shapes():
    planner = DCTPlanner()
    block = np.random.default_rng(2).standard_normal(16)
    coeffs = run_transform(block, TransformType.MDCT, planner, 'vorbis')
    assert coeffs.shape == (8,)
    restored = run_transform(coeffs, TransformType.IMDCT, planner, 'vorbis')
    assert restored.shape == (16,)

    with pytest.raises(ValueError):
        run_transform(np.zeros(7), TransformType.MDCT, planner)


def test_cli_end_to_end(tmp_path):
    x = np.arange(8, dtype=np.float64)
    input_path = tmp_path / "signal.npy"
    output_path = tmp_path / "spectrum.npy"
    np.save(input_path, x)

    completed = subprocess.run(
        [sys.executable, os.path.join(ROOT, "transform.py"),
         "--input", str(input_path), "--output", str(output_path),
         "--type", "dct2", "--dtype", "float32"],
        capture_output=True, text=True,
    )
    assert completed.returncode == 0, completed.stderr

    result = np.load(output_path)
    assert result.dtype == np.float32
    assert np.allclose(result, DCT2Naive(8).transform(x), atol=1e-4)


def test_cli_missing_input(tmp_path):
    completed = subprocess.run(
        [sys.executable, os.path.join(ROOT, "transform.py"),
         "--input", str(tmp_path / "missing.npy"), "--output", str(tmp_path / "out.npy"),
         "--type", "dct2"],
        capture_output=True, text=True,
    )
    assert completed.returncode == 1
    assert "not found" in completed.stderr


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
