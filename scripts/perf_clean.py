#!/usr/bin/env python3
"""Simple performance baseline for textscrub cleaning."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Dict, List

from textscrub.pipeline import clean_text


_PLAIN_SENTENCES = [
    "This document provides a brief overview of the project.",
    "Installation steps are listed below for your convenience.",
    "Please see the documentation for more details.",
    "The system stores results in the data directory.",
    "Users should review the logs regularly.",
]

_NOISY_SNIPPETS = [
    "\u201CIt\u2019s done\u201D \u2014 they said\u2026",
    "Zero\u200Bwidth\u00A0and\u202Fnarrow spaces.",
    "\uFF26\uFF55\uFF4C\uFF4C\uFF57\uFF49\uFF44\uFF54\uFF48 \uFF12\uFF10\uFF12\uFF14 text.",
    "See https://example.com/page?utm_source=chatgpt.com&id=42 for more.",
    "Soft\u00ADhyphen and en\u2013dash.",
]


def _build_text(target_chars: int, noise_every: int) -> str:
    chunks: List[str] = []
    total = 0
    i = 0
    while total < target_chars:
        if noise_every and i % noise_every == 0:
            chunk = random.choice(_NOISY_SNIPPETS)
        else:
            chunk = random.choice(_PLAIN_SENTENCES)
        chunks.append(chunk)
        total += len(chunk) + 1
        i += 1
    return " ".join(chunks)


def _run_case(text: str, runs: int) -> Dict[str, float]:
    durations: List[float] = []
    changes = 0
    for _ in range(runs):
        start = time.perf_counter()
        result = clean_text(text)
        durations.append(time.perf_counter() - start)
        changes = len(result.changes)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
        "changes": float(changes),
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="textscrub cleaning perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[100_000, 500_000, 1_000_000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--noise-every", type=int, default=10)
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("textscrub perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, noise_every={args.noise_every}")

    results: Dict[str, Dict[str, float]] = {}
    for size in args.sizes:
        text = _build_text(size, args.noise_every)
        stats = _run_case(text, args.runs)
        results[str(size)] = stats
        print(
            f"size={size} changes={int(stats['changes'])} min={stats['min_ms']:.2f}ms "
            f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
        )
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "noise_every": args.noise_every,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
