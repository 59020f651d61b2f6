#!/usr/bin/env python3
"""
Sweep runner: rasterize animated frames of each pattern and verify them.

For every frame:
- build the frame twice and compare sample digests (determinism)
- check coverage range, split-pair sums, sample counts
- check packed vertex array shapes
- write a JSON receipt

Usage:
    python -m integration_tests.run_sweep --pattern both --frames 10
"""

import argparse
import logging
import math
import random
from pathlib import Path
from typing import Any, Dict, List

from raster_core.order_hash import samples_digest
from raster_patterns.frame import (
    ANGLE_STEP,
    PATTERNS,
    RADIAL_RADIUS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Frame,
    build_frame,
)

from integration_tests.utils import (
    build_receipt,
    compute_summary_stats,
    save_receipt,
    setup_logger,
)

PAIR_TOLERANCE = 1e-6


def check_frame(frame: Frame) -> Dict[str, Any]:
    """
    Measure one frame against the rasterizer invariants.

    Shaded samples come in split pairs (lower, upper). Interior pairs sum to
    1; endpoint pairs sum to their gap, which never exceeds 1.

    Returns:
        Metrics dictionary; "valid" is the overall verdict
    """
    num_samples = len(frame.samples)
    num_shaded = len(frame.shaded)

    coverages = [s.coverage for s in frame.shaded]
    coverage_in_range = all(
        -PAIR_TOLERANCE <= c <= 1.0 + PAIR_TOLERANCE for c in coverages
    )

    pair_sums = [coverages[i] + coverages[i + 1] for i in range(0, num_shaded - 1, 2)]
    max_pair_sum = max(pair_sums) if pair_sums else 0.0
    full_pairs = sum(1 for s in pair_sums if abs(s - 1.0) <= PAIR_TOLERANCE)

    vertices, shaded_vertices = frame.vertex_arrays()
    shapes_ok = (
        vertices.shape == (num_samples, 2) and shaded_vertices.shape == (num_shaded, 6)
    )

    valid = (
        num_samples >= 1
        and num_shaded >= 2
        and num_shaded % 2 == 0
        and coverage_in_range
        and max_pair_sum <= 1.0 + PAIR_TOLERANCE
        and shapes_ok
    )

    return {
        "num_samples": num_samples,
        "num_shaded": num_shaded,
        "num_pairs": len(pair_sums),
        "full_pairs": full_pairs,
        "max_pair_sum": max_pair_sum,
        "coverage_in_range": coverage_in_range,
        "shapes_ok": shapes_ok,
        "valid": valid,
    }


def run_frame(pattern: str, frame_index: int, phase: float, width: int, height: int,
              radius: float, angle_step: float, logger: logging.Logger) -> Dict[str, Any]:
    """Build, re-build and check one frame; return its receipt."""
    frame_id = f"{pattern}_{frame_index:04d}"

    try:
        first = build_frame(pattern, width, height, phase=phase,
                            radius=radius, angle_step=angle_step)
        second = build_frame(pattern, width, height, phase=phase,
                             radius=radius, angle_step=angle_step)
    except ValueError as e:
        logger.error(f"Frame {frame_id}: build failed - {e}")
        return build_receipt(frame_id, pattern, status="FAIL", error=str(e))

    digests = {
        "samples": samples_digest(first.samples),
        "shaded": samples_digest(first.shaded),
    }
    deterministic = (
        digests["samples"] == samples_digest(second.samples)
        and digests["shaded"] == samples_digest(second.shaded)
    )
    if not deterministic:
        logger.error(f"Frame {frame_id}: NOT DETERMINISTIC! Digests differ between runs")

    metrics = check_frame(first)
    metrics["deterministic"] = deterministic
    metrics["phase"] = phase

    if not metrics["coverage_in_range"]:
        logger.warning(f"Frame {frame_id}: coverage outside [0, 1]")
    if metrics["max_pair_sum"] > 1.0 + PAIR_TOLERANCE:
        logger.warning(f"Frame {frame_id}: max_pair_sum = {metrics['max_pair_sum']} (expected <= 1)")

    status = "PASS" if metrics["valid"] and deterministic else "FAIL"
    logger.info(
        f"Frame {frame_id}: samples = {metrics['num_samples']}, "
        f"shaded = {metrics['num_shaded']}, status = {status}"
    )

    return build_receipt(frame_id, pattern, metrics=metrics, digests=digests, status=status)


def main(argv: List[str] = None) -> Dict[str, Any]:
    parser = argparse.ArgumentParser(description="Line rasterizer sweep")
    parser.add_argument("--pattern", type=str, default="both", choices=[*PATTERNS, "both"],
                        help="Pattern to rasterize")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--frames", type=int, default=10, help="Frames per pattern")
    parser.add_argument("--fps", type=float, default=60.0, help="Frame rate driving the sine phase")
    parser.add_argument("--radius", type=float, default=RADIAL_RADIUS, help="Radial fan radius")
    parser.add_argument("--angle-step", type=float, default=ANGLE_STEP,
                        help="Radial fan angle step in degrees")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for the phase offset")
    parser.add_argument("--log-dir", type=Path, default=Path(__file__).parent / "logs",
                        help="Directory for the run log")
    parser.add_argument("--receipts-dir", type=Path,
                        default=Path(__file__).parent / "receipts" / "sweep",
                        help="Directory for per-frame receipts")
    args = parser.parse_args(argv)

    logger = setup_logger("sweep", args.log_dir / "sweep.log")

    patterns = list(PATTERNS) if args.pattern == "both" else [args.pattern]
    phase_offset = random.Random(args.seed).uniform(0.0, 2.0 * math.pi)

    logger.info("=" * 80)
    logger.info("Line Rasterizer Sweep")
    logger.info(f"Patterns: {', '.join(patterns)}")
    logger.info(f"Canvas: {args.width}x{args.height}")
    logger.info(f"Frames per pattern: {args.frames}")
    logger.info(f"Random seed: {args.seed}")
    logger.info("=" * 80)

    receipts = []
    for pattern in patterns:
        logger.info(f"\n--- Pattern {pattern} ---")
        for frame_index in range(args.frames):
            phase = phase_offset + frame_index / args.fps
            receipt = run_frame(pattern, frame_index, phase, args.width, args.height,
                                args.radius, args.angle_step, logger)
            save_receipt(receipt, args.receipts_dir)
            receipts.append(receipt)

    stats = compute_summary_stats(receipts)

    logger.info("\n" + "=" * 80)
    logger.info("SUMMARY STATISTICS")
    logger.info("=" * 80)
    logger.info(f"Total frames: {stats['total_frames']}")
    logger.info(f"Passed: {stats['passed']}")
    logger.info(f"Failed: {stats['failed']}")
    logger.info(f"Pass rate: {stats['pass_rate'] * 100:.1f}%")
    if "samples" in stats:
        logger.info(f"Max samples per frame: {stats['samples']['max_samples']}")
        logger.info(f"Max shaded samples per frame: {stats['samples']['max_shaded']}")
        logger.info(f"Deterministic rate: {stats['samples']['deterministic_rate'] * 100:.1f}%")
    logger.info("=" * 80)
    logger.info(f"Sweep complete. Receipts saved to: {args.receipts_dir}")
    logger.info("=" * 80)

    return stats


if __name__ == "__main__":
    main()
