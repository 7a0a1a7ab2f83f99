"""Load edge lists from disk into a ``DirectedGraph``.

Two formats are read, chosen by file suffix:

- ``.jsonl``: one JSON object per line with integer ``source`` and
  ``target`` keys.
- anything else: whitespace-separated ``source target`` pairs, one per
  line. Blank lines and lines starting with ``#`` are skipped.

Files are streamed line by line; only the adjacency sets are kept.
"""

import json
import logging
from pathlib import Path
from typing import Union

from csrgraph.graph import CSRGraphError, DirectedGraph


logger = logging.getLogger(__name__)


class EdgeListError(CSRGraphError, ValueError):
    """A malformed line in an edge list file."""

    def __init__(self, path, line_number: int, reason: str):
        self.path = str(path)
        self.line_number = line_number
        super().__init__(f"{self.path}:{line_number}: {reason}")


def _parse_text_line(line: str):
    fields = line.split()
    if len(fields) != 2:
        raise ValueError(f"expected 2 fields, got {len(fields)}")
    return int(fields[0]), int(fields[1])


def _parse_jsonl_line(line: str):
    data = json.loads(line)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    try:
        source = data["source"]
        target = data["target"]
    except KeyError as e:
        raise ValueError(f"missing key {e.args[0]!r}") from e
    if not isinstance(source, int) or not isinstance(target, int):
        raise ValueError("source and target must be integers")
    return source, target


def read_edge_list(path: Union[str, Path]) -> DirectedGraph:
    """Build a ``DirectedGraph`` from an edge list file.

    Raises:
        EdgeListError: On the first malformed line or out-of-range node ID.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    parse = _parse_jsonl_line if path.suffix == ".jsonl" else _parse_text_line

    logger.info("Reading edges from %s", path)
    graph = DirectedGraph()
    edge_lines = 0

    # Decode per line so a bad byte is reported with its line number
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8").strip()
                if not line or line.startswith("#"):
                    continue
                source, target = parse(line)
                graph.add_edge(source, target)
            except ValueError as e:
                # Includes UnicodeDecodeError, InvalidNodeError and
                # json.JSONDecodeError
                raise EdgeListError(path, line_number, str(e)) from e
            edge_lines += 1

            if edge_lines % 1_000_000 == 0:
                logger.info("  %s edges read...", f"{edge_lines:,}")

    logger.info(
        "Loaded %d edge lines: %d nodes, %d edges",
        edge_lines,
        graph.node_count(),
        graph.edge_count(),
    )
    return graph
