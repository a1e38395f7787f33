#!/usr/bin/env python3
"""
Golden vector capture script.

Dumps the initial state hash and the first raw samples for a set of seeds,
in the same shape as the "cases" section of tests/fixtures/golden_vectors.json.
Any port of the generator must reproduce these values exactly.

Usage:
    python -m scripts.golden_vectors --seed 42 --seed 0 --count 20 --out ../out/golden_vectors.json
"""
import argparse
import json
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from subrand.logic.rng import SeededRNG
from subrand.state_hash import get_state_hash


DEFAULT_SEEDS = [42, 0, 1, 12345, -42, -(2**31), 2**31 - 1]
DEFAULT_COUNT = 20


def get_git_commit() -> str:
    """Get current git commit hash (short)."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent,
            timeout=5,
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError):
        pass
    return "unknown"


def get_timestamp_iso() -> str:
    """Get ISO 8601 UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def capture_case(seed: int, count: int) -> dict[str, Any]:
    """
    Seed a fresh generator and record its output.

    Returns dict with:
      - initial_state_hash: str (state right after seeding)
      - raw: list[int] (first `count` raw samples)
    """
    rng = SeededRNG(seed)
    initial_state_hash = get_state_hash(rng.capture())
    return {
        "initial_state_hash": initial_state_hash,
        "raw": [rng.next_raw() for _ in range(count)],
    }


def build_vectors(seeds: list[int], count: int) -> dict[str, Any]:
    """Capture golden vectors for every seed, keyed by str(seed)."""
    return {
        "count": count,
        "cases": {str(seed): capture_case(seed, count) for seed in seeds},
    }


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Capture golden raw-sample vectors for fixed seeds"
    )
    parser.add_argument(
        "--seed",
        type=int,
        action="append",
        dest="seeds",
        help="Seed to capture (repeatable; default: built-in seed set)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help=f"Raw samples per seed (default: {DEFAULT_COUNT})",
    )
    parser.add_argument(
        "--out",
        type=str,
        default="../out/golden_vectors.json",
        help="Output JSON path (default: ../out/golden_vectors.json)",
    )

    args = parser.parse_args()
    seeds = args.seeds or DEFAULT_SEEDS

    if args.count < 0:
        parser.error("--count must be non-negative")

    print(f"Golden vectors: seeds={seeds}, count={args.count}")

    output = {
        # Metadata first
        "timestamp": get_timestamp_iso(),
        "git_commit": get_git_commit(),
        **build_vectors(seeds, args.count),
    }

    # Ensure output directory exists
    output_path = Path(args.out)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(output, f, indent=2)

    print(f"JSON written to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
