#!/usr/bin/env python3
"""Benchmark version comparison: latency (p50, p95, p99) and QPS.

Usage:
  Against a running API (versions must already exist):
    export API_URL=http://localhost:8000
    uv run python scripts/bench_compare.py --parent-id tpl-1 --versions v1 v2 [--num-requests 100]

  Diff engine only, on synthetic text (no server needed):
    uv run python scripts/bench_compare.py --local --lines 20000 --change-every 50
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def _percentiles(latencies: list[float]) -> tuple[float, float, float]:
    n = len(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return p50, p95, p99


def _synthetic_pair(lines: int, change_every: int) -> tuple[str, str]:
    old = [f"Clause {i}: the parties agree to term {i}.\n" for i in range(lines)]
    new = [
        f"Clause {i}: the parties agree to amended term {i}.\n" if i % change_every == 0 else line
        for i, line in enumerate(old)
    ]
    return "".join(old), "".join(new)


def run_local(args: argparse.Namespace) -> str:
    from doccompare.application.dto.diff_config import DiffConfig
    from doccompare.infrastructure.diffing import diff_text_detailed

    old, new = _synthetic_pair(args.lines, args.change_every)
    config = DiffConfig(max_edit_distance=args.max_edit_distance, timeout_seconds=args.timeout)
    latencies: list[float] = []
    truncated = 0
    start_total = time.perf_counter()
    for _ in range(args.num_requests):
        t0 = time.perf_counter()
        result = diff_text_detailed(old, new, config)
        latencies.append(time.perf_counter() - t0)
        truncated += result.truncated
    total_elapsed = time.perf_counter() - start_total

    p50, p95, p99 = _percentiles(latencies)
    return (
        f"Diff benchmark (lines={args.lines}, change every {args.change_every}, "
        f"runs={len(latencies)}, truncated={truncated})\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )


def run_http(args: argparse.Namespace) -> str | None:
    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    version_a, version_b = args.versions
    url = f"{api_url}/v1/documents/{args.parent_id}/versions/compare/{version_a}/{version_b}"

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_requests} compare requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=60.0) as client:
        for _ in range(args.num_requests):
            t0 = time.perf_counter()
            r = client.get(url)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful comparisons.")
        return None

    p50, p95, p99 = _percentiles(latencies)
    return (
        f"Compare benchmark (versions={version_a}..{version_b}, requests={n}, errors={errors})\n"
        f"  QPS: {n / total_elapsed:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark version comparison")
    parser.add_argument("--local", action="store_true", help="Benchmark the diff engine in-process")
    parser.add_argument("--parent-id", type=str, default="", help="Parent document id (HTTP mode)")
    parser.add_argument("--versions", nargs=2, metavar=("A", "B"), help="Version ids to compare (HTTP mode)")
    parser.add_argument("--num-requests", type=int, default=50, help="Number of comparisons")
    parser.add_argument("--lines", type=int, default=10000, help="Synthetic document length (local mode)")
    parser.add_argument("--change-every", type=int, default=100, help="Change one line in N (local mode)")
    parser.add_argument("--max-edit-distance", type=int, default=4000, help="Diff edit distance bound")
    parser.add_argument("--timeout", type=float, default=5.0, help="Diff time bound in seconds")
    parser.add_argument("--output", type=str, default="/results/bench_compare.txt", help="Output file path")
    args = parser.parse_args()

    if args.local:
        summary = run_local(args)
    else:
        if not args.parent_id or not args.versions:
            parser.error("--parent-id and --versions are required unless --local is given")
        summary = run_http(args)
        if summary is None:
            return 1
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
