#!/usr/bin/env python3
"""
CLI tool to print a traversal order of a graph.

Example:
    csrgraph-traverse --edges edges.txt --order bfs --start 0
"""

import argparse
import sys
from pathlib import Path

from csrgraph import CSRGraphError, bfs_view, dfs_view, read_edge_list, topological_view
from scripts import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print a DFS, BFS or topological order of a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Depth-first from node 0 over the compiled graph
  csrgraph-traverse --edges edges.txt --order dfs --start 0

  # Topological order; exits with status 1 if the graph has a cycle
  csrgraph-traverse --edges edges.txt --order topo
        """,
    )

    parser.add_argument(
        "--edges", required=True, type=Path, help="Path to edge list (.txt or .jsonl)"
    )

    parser.add_argument(
        "--order",
        choices=["dfs", "bfs", "topo"],
        default="dfs",
        help="Traversal order (default: dfs)",
    )

    parser.add_argument(
        "--start", "-s", type=int, default=0, help="Start node for dfs/bfs (default: 0)"
    )

    parser.add_argument(
        "--mutable",
        action="store_true",
        help="Traverse the mutable graph instead of the compiled graph",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.edges.exists():
        print(f"Error: Edge file not found: {args.edges}", file=sys.stderr)
        sys.exit(1)

    try:
        graph = read_edge_list(args.edges)
    except (CSRGraphError, OSError) as e:
        print(f"Error loading graph: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.mutable:
        graph = graph.compile()

    if args.order == "topo":
        view = graph | topological_view
        for node in view:
            print(node)
        if view.has_cycle():
            remaining = " ".join(str(node) for node in view.remaining())
            print(f"Error: graph has a cycle; unordered nodes: {remaining}", file=sys.stderr)
            sys.exit(1)
        return

    adapter = dfs_view if args.order == "dfs" else bfs_view
    for node in graph | adapter(args.start):
        print(node)


if __name__ == "__main__":
    main()
