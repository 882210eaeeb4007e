#!/usr/bin/env python3
"""Quick perf benchmark for translation resource parsing and flattening."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from i18nlens.resources import RESOURCE_EXTENSIONS, ResourceParseError, load_translations


def _collect_resource_files(root: Path) -> list[Path]:
    files = sorted(path for path in root.rglob("*") if path.suffix.lower() in RESOURCE_EXTENSIONS)
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_keys = 0
    total_failures = 0
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        try:
            total_keys += len(load_translations(path))
        except ResourceParseError:
            total_failures += 1
    duration = time.perf_counter() - start
    return duration, len(files), total_keys, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark translation resource parsing throughput")
    parser.add_argument("root", type=Path, help="Directory containing translation resource files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_resource_files(root)
    if not files:
        raise SystemExit(f"No resource files found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        files_count = 0
        keys_count = 0
        failures_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, keys_count, failures_count = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, keys_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, keys_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, keys_count, failures_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset:  {root}")
    print(f"Files:    {files_count}")
    print(f"Keys:     {keys_count}")
    print(f"Failures: {failures_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean): {files_count / mean:.1f}")
    print(f"Keys/s (mean):  {keys_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
