#!/usr/bin/env python3
"""
DCT Transform CLI

Usage:
    python transform.py --input <path> --output <path> --type <type>

Example:
    python transform.py --input signal.npy --output spectrum.npy --type dct2
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np
from fastdct import DCTPlanner, TransformType
from fastdct.window import WINDOWS


def run_transform(signal: np.ndarray, transform_type: TransformType,
                  planner: DCTPlanner, window_name: str = 'sine') -> np.ndarray:
    """
    Apply one transform to a 1-D signal or to every row of a 2-D array.

    Args:
        signal: 1-D signal or 2-D array of signals (one per row)
        transform_type: Transform to apply
        planner: Planner used to build the transform
        window_name: Window for MDCT/IMDCT

    Returns:
        Transformed array with the same number of rows
    """
    rows = np.atleast_2d(signal)
    length = rows.shape[1]

    if transform_type == TransformType.MDCT:
        if length % 2 != 0:
            raise ValueError(f"MDCT input length must be even, got {length}")
        dct = planner.plan_mdct(length // 2, WINDOWS[window_name])
    elif transform_type == TransformType.IMDCT:
        dct = planner.plan_imdct(length, WINDOWS[window_name])
    else:
        dct = planner.plan(transform_type, length)

    result = np.stack([dct.transform(row) for row in rows])
    return result[0] if signal.ndim == 1 else result


def main():
    parser = argparse.ArgumentParser(
        description='DCT Transform - Apply a discrete cosine/sine transform to .npy signals',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # DCT2 of a single signal
  python transform.py --input signal.npy --output spectrum.npy --type dct2

  # Single precision DCT4 of every row, with planner details
  python transform.py -i rows.npy -o out.npy -t dct4 --dtype float32 --verbose

  # MDCT of a 2n-sample block with the Vorbis window
  python transform.py -i block.npy -o coeffs.npy -t mdct --window vorbis
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input signal path (.npy, 1-D or 2-D)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output path (.npy)')
    parser.add_argument('--type', '-t', required=True,
                        choices=[t.value for t in TransformType],
                        help='Transform type')

    # Optional arguments
    parser.add_argument('--dtype', '-d', default='float64',
                        choices=['float16', 'float32', 'float64', 'longdouble'],
                        help='Floating point precision (default: float64)')
    parser.add_argument('--window', '-w', default='sine',
                        choices=sorted(WINDOWS),
                        help='Window function for mdct/imdct (default: sine)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args()

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s')

    try:
        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        signal = np.load(args.input)
        if signal.ndim not in (1, 2):
            print(f"Error: Expected a 1-D or 2-D array, got shape {signal.shape}",
                  file=sys.stderr)
            sys.exit(1)

        if args.verbose:
            print(f"  Shape: {signal.shape}")
            print(f"  Dtype: {signal.dtype}")

        planner = DCTPlanner(dtype=args.dtype)
        result = run_transform(signal, TransformType(args.type), planner, args.window)

        np.save(args.output, result)

        elapsed = time.time() - start_time

        if args.verbose:
            print(f"\nResults:")
            print(f"  Transform: {args.type} ({args.dtype})")
            print(f"  Output shape: {result.shape}")
            print(f"  Planned instances: {len(planner)}")
            print(f"  Time: {elapsed:.3f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Transformed: {args.input} -> {args.output} ({args.type}, {result.shape})")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
