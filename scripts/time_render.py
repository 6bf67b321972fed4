#!/usr/bin/env python3
"""Quick perf benchmark for the pretty and compact renderers."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from wlpprint.combinators import fill_sep, list_doc, sep
from wlpprint.doc import Document, nest, text
from wlpprint.values import pretty
from wlpprint.render import display_string, render_compact, render_pretty


def _build_documents(count: int) -> list[Document]:
    words = [text(f"w{index % 97}") for index in range(count)]
    nested = pretty([[index, [index * 2, (index, str(index))]] for index in range(count // 10 or 1)])
    return [
        fill_sep(words),
        sep(words),
        nest(2, list_doc(words)),
        nested,
    ]


def _run_once(
    docs: list[Document],
    *,
    label: str,
    page_width: int,
    ribbon_fraction: float,
    compact: bool,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_chars = 0
    iterator = tqdm(docs, desc=label, unit="doc") if show_progress else docs
    for doc in iterator:
        sdoc = render_compact(doc) if compact else render_pretty(ribbon_fraction, page_width, doc)
        total_tokens += len(sdoc)
        total_chars += len(display_string(sdoc))
    duration = time.perf_counter() - start
    return duration, total_tokens, total_chars


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document rendering throughput")
    parser.add_argument("--size", type=int, default=20_000, help="Words per generated document")
    parser.add_argument("--width", type=int, default=80, help="Page width (default: 80)")
    parser.add_argument("--ribbon", type=float, default=0.4, help="Ribbon fraction (default: 0.4)")
    parser.add_argument("--compact", action="store_true", help="Benchmark the compact renderer instead")
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

    if args.size <= 0:
        raise SystemExit(f"Invalid --size: {args.size}")

    docs = _build_documents(args.size)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                docs,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                page_width=args.width,
                ribbon_fraction=args.ribbon,
                compact=args.compact,
                show_progress=show_progress,
            )

        timings: list[float] = []
        tokens_count = 0
        chars_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, tokens_count, chars_count = _run_once(
                docs,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                page_width=args.width,
                ribbon_fraction=args.ribbon,
                compact=args.compact,
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tokens_count, chars_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tokens_count, chars_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tokens_count, chars_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Renderer: {'compact' if args.compact else 'pretty'} (width={args.width}, ribbon={args.ribbon})")
    print(f"Documents: {len(docs)}")
    print(f"Tokens: {tokens_count}")
    print(f"Chars: {chars_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
