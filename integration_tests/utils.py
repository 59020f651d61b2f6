"""
Utility functions for rasterizer sweep runs.

Provides:
- Logging setup
- Receipt generation and persistence
- Summary statistics over receipts
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Setup logger for sweep runs.

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    # Create logs directory if it doesn't exist
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear any existing handlers
    logger.handlers = []

    file_handler = logging.FileHandler(log_file, mode="w")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def build_receipt(
    frame_id: str,
    pattern: str,
    metrics: Optional[Dict[str, Any]] = None,
    digests: Optional[Dict[str, int]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one frame.

    Args:
        frame_id: Frame identifier (e.g. "radial_0003")
        pattern: Pattern name
        metrics: Output of check_frame
        digests: samples_digest values for the frame
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "frame_id": frame_id,
        "pattern": pattern,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if metrics is not None:
        receipt["metrics"] = metrics

    if digests is not None:
        receipt["digests"] = digests

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file named after its frame_id.

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    receipt_file = output_dir / f"{receipt['frame_id']}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file


def compute_summary_stats(receipts: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Compute summary statistics from a list of receipts.

    Args:
        receipts: List of receipt dictionaries

    Returns:
        Summary statistics dictionary
    """
    total = len(receipts)
    passed = sum(1 for r in receipts if r["status"] == "PASS")

    stats = {
        "total_frames": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": passed / total if total > 0 else 0.0,
    }

    measured = [r for r in receipts if "metrics" in r]
    if measured:
        sample_counts = [r["metrics"]["num_samples"] for r in measured]
        shaded_counts = [r["metrics"]["num_shaded"] for r in measured]
        stats["samples"] = {
            "avg_samples": sum(sample_counts) / len(sample_counts),
            "max_samples": max(sample_counts),
            "avg_shaded": sum(shaded_counts) / len(shaded_counts),
            "max_shaded": max(shaded_counts),
            "deterministic_rate": sum(
                1 for r in measured if r["metrics"].get("deterministic", False)
            ) / len(measured),
        }

    return stats
