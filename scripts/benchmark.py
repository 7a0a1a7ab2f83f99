#!/usr/bin/env python3
"""
Benchmark compiling ring graphs (i -> i + 1 mod n) of doubling sizes.

Example:
    csrgraph-benchmark --min 8 --max 32768 --repeat 20
"""

import argparse
import time

from csrgraph import DirectedGraph
from scripts import configure_logging


def ring_graph(size: int) -> DirectedGraph:
    graph = DirectedGraph()
    for node in range(size):
        graph.add_edge(node, (node + 1) % size)
    return graph


def time_compile(graph: DirectedGraph, repeat: int) -> float:
    """Best wall time of ``repeat`` compilations, in seconds."""
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        graph.compile()
        best = min(best, time.perf_counter() - t0)
    return best


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark graph compilation")
    parser.add_argument("--min", type=int, default=8, help="Smallest ring size")
    parser.add_argument("--max", type=int, default=1 << 15, help="Largest ring size")
    parser.add_argument("--repeat", type=int, default=10, help="Runs per size")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    print(f"{'nodes':>8}  {'compile (ms)':>12}  {'ns/edge':>8}")
    print("-" * 32)
    size = args.min
    while size <= args.max:
        graph = ring_graph(size)
        elapsed = time_compile(graph, args.repeat)
        print(f"{size:>8,}  {elapsed * 1000:>12.3f}  {elapsed * 1e9 / size:>8.1f}")
        size *= 2


if __name__ == "__main__":
    main()
