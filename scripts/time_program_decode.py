#!/usr/bin/env python3
"""Quick perf benchmark for decoding engine program JSON dumps."""

from __future__ import annotations

import argparse
from pathlib import Path
import re
import statistics
import time

from tqdm import tqdm

from estreepy.ast import decode_program, iter_literals


def _collect_program_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.json") if path.is_file())


def _run_once(
    payloads: list[bytes],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_literals = 0
    total_bigints = 0
    total_regexes = 0
    iterator = tqdm(payloads, desc=label, unit="file") if show_progress else payloads
    for payload in iterator:
        for literal in iter_literals(decode_program(payload)):
            total_literals += 1
            if "bigint" in literal and isinstance(literal.get("value"), int):
                total_bigints += 1
            elif isinstance(literal.get("value"), re.Pattern):
                total_regexes += 1
    duration = time.perf_counter() - start
    return duration, total_literals, total_bigints, total_regexes


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark program JSON decoding with literal repair")
    parser.add_argument("root", type=Path, help="Directory containing program JSON dumps (*.json)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_program_files(root)
    if not files:
        raise SystemExit(f"No .json files found under {root}")
    payloads = [path.read_bytes() for path in files]
    show_progress = not args.no_progress

    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(payloads, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

    timings: list[float] = []
    literals = bigints = regexes = 0
    for run_idx in range(max(args.runs, 1)):
        duration, literals, bigints, regexes = _run_once(
            payloads,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Files: {len(files)}")
    print(f"Literals: {literals} (bigint={bigints}, regex={regexes})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Files/s (mean): {len(files) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
