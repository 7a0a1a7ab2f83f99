#!/usr/bin/env python3
"""
CLI tool to export an edge list as a Graphviz DOT digraph.

Example:
    csrgraph-dot --edges data/edges.txt --output graph.dot
"""

import argparse
import sys
from pathlib import Path

from csrgraph import CSRGraphError, read_edge_list, to_dot, write_dot
from scripts import configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Export an edge list as a DOT digraph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compile and print to stdout (ascending node and edge order)
  csrgraph-dot --edges edges.txt

  # Name the digraph and write to a file
  csrgraph-dot --edges edges.jsonl --name deps --output deps.dot

  # Export the mutable graph as-is (insertion/set order, no compilation)
  csrgraph-dot --edges edges.txt --mutable
        """,
    )

    parser.add_argument(
        "--edges", required=True, type=Path, help="Path to edge list (.txt or .jsonl)"
    )

    parser.add_argument("--name", default="G", help="Digraph name (default: G)")

    parser.add_argument(
        "--output", "-o", type=Path, help="Output DOT file (default: stdout)"
    )

    parser.add_argument(
        "--mutable",
        action="store_true",
        help="Export the mutable graph instead of the compiled graph",
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
        if not args.mutable:
            graph = graph.compile()

        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            write_dot(graph, args.output, name=args.name)
            print(
                f"Wrote {graph.node_count():,} nodes and {graph.edge_count():,} "
                f"edges to {args.output}",
                file=sys.stderr,
            )
        else:
            sys.stdout.write(to_dot(graph, name=args.name))

    except (CSRGraphError, OSError) as e:
        print(f"Error exporting graph: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
