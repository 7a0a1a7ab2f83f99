"""Validation utilities for checking graph structure and traversal results.

These are development and testing aids: they never raise on a bad graph,
they collect every problem found into a ``ValidationResult``.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from csrgraph.graph import CompiledGraph, DirectedGraph, DirectedGraphLike


@dataclass
class ValidationError:
    """Represents a single problem found while validating."""
    error_type: str
    message: str
    node_id: Optional[int] = None
    edge: Optional[tuple[int, int]] = None


@dataclass
class ValidationResult:
    """Outcome of a validation run."""
    valid: bool
    checked: int
    errors: list[ValidationError] = field(default_factory=list)

    def summary(self) -> str:
        """Return a human-readable summary."""
        lines = [
            f"Validation {'PASSED' if self.valid else 'FAILED'}",
            f"  Items checked: {self.checked}",
        ]
        if self.errors:
            lines.append(f"  Errors ({len(self.errors)}):")
            for err in self.errors[:10]:  # Show first 10 errors
                lines.append(f"    - [{err.error_type}] {err.message}")
            if len(self.errors) > 10:
                lines.append(f"    ... and {len(self.errors) - 10} more errors")
        return "\n".join(lines)


def _result(errors: list[ValidationError], checked: int) -> ValidationResult:
    return ValidationResult(valid=not errors, checked=checked, errors=errors)


def validate_compiled_graph(graph: CompiledGraph) -> ValidationResult:
    """Check the CSR invariants of a compiled graph.

    - offsets has max_node_id + 2 entries, starts at 0 and never decreases
    - the last offset equals the number of destinations
    - each node's destination slice is strictly ascending (sorted, no
      duplicates)
    - every destination is within 0..max_node_id
    """
    errors = []
    offsets = graph.offsets
    destinations = graph.destinations
    max_node_id = graph.max_node_id

    expected_len = max_node_id + 2
    if len(offsets) != expected_len:
        errors.append(ValidationError(
            error_type="OFFSETS_LENGTH",
            message=f"offsets has {len(offsets)} entries, expected {expected_len}",
        ))
        # Slice checks below rely on a well-sized offset table
        return _result(errors, 0)

    if offsets[0] != 0:
        errors.append(ValidationError(
            error_type="OFFSETS_START",
            message=f"offsets[0] is {int(offsets[0])}, expected 0",
        ))

    decreasing = np.flatnonzero(np.diff(offsets) < 0)
    for node in decreasing:
        errors.append(ValidationError(
            error_type="OFFSETS_DECREASING",
            message=(
                f"offsets[{node + 1}]={int(offsets[node + 1])} < "
                f"offsets[{node}]={int(offsets[node])}"
            ),
            node_id=int(node),
        ))

    if offsets[-1] != len(destinations):
        errors.append(ValidationError(
            error_type="OFFSETS_END",
            message=(
                f"last offset is {int(offsets[-1])} but there are "
                f"{len(destinations)} destinations"
            ),
        ))

    if errors:
        return _result(errors, 0)

    for node in range(max_node_id + 1):
        succ = destinations[offsets[node]:offsets[node + 1]]
        if len(succ) > 1 and not np.all(succ[1:] > succ[:-1]):
            errors.append(ValidationError(
                error_type="SUCCESSORS_UNSORTED",
                message=f"Successors of node {node} are not strictly ascending",
                node_id=node,
            ))

    out_of_range = np.flatnonzero(destinations > max_node_id)
    for pos in out_of_range:
        errors.append(ValidationError(
            error_type="DESTINATION_OUT_OF_RANGE",
            message=(
                f"destinations[{pos}]={int(destinations[pos])} exceeds "
                f"max_node_id {max_node_id}"
            ),
        ))

    return _result(errors, max_node_id + 1)


def validate_topological_order(
    graph: DirectedGraphLike, order: Iterable[int]
) -> ValidationResult:
    """
    Check that ``order`` is consistent with every edge of ``graph`` whose
    endpoints both appear in it.

    Reports repeated nodes, self-loops on ordered nodes, and edges (u, v)
    where v is placed before u.
    """
    errors = []
    position = {}
    for idx, node in enumerate(order):
        if node in position:
            errors.append(ValidationError(
                error_type="DUPLICATE_NODE",
                message=f"Node {node} appears more than once",
                node_id=node,
            ))
            continue
        position[node] = idx

    checked = 0
    for source in position:
        for target in graph.successors(source):
            if target not in position:
                continue
            checked += 1
            if source == target:
                errors.append(ValidationError(
                    error_type="SELF_LOOP",
                    message=f"Node {source} has a self-loop",
                    node_id=source,
                    edge=(source, int(target)),
                ))
            elif position[source] > position[target]:
                errors.append(ValidationError(
                    error_type="ORDER_VIOLATION",
                    message=f"Edge {source} -> {target} points backwards",
                    edge=(source, int(target)),
                ))

    return _result(errors, checked)


def validate_equivalent(
    mutable: DirectedGraph, compiled: CompiledGraph
) -> ValidationResult:
    """Check that a mutable graph and a compiled graph hold the same edges.

    Nodes of the mutable graph that have neither edges in nor out are
    expected to be missing from the compiled node enumeration.
    """
    errors = []

    mutable_edges = {
        (source, target)
        for source in mutable.nodes()
        for target in mutable.successors(source)
    }
    compiled_edges = {tuple(edge) for edge in compiled.edges()}

    for edge in sorted(mutable_edges - compiled_edges):
        errors.append(ValidationError(
            error_type="EDGE_MISSING_FROM_COMPILED",
            message=f"Edge {edge[0]} -> {edge[1]} missing from compiled graph",
            edge=edge,
        ))
    for edge in sorted(compiled_edges - mutable_edges):
        errors.append(ValidationError(
            error_type="EDGE_MISSING_FROM_MUTABLE",
            message=f"Edge {edge[0]} -> {edge[1]} missing from mutable graph",
            edge=edge,
        ))

    connected = {node for edge in mutable_edges for node in edge}
    compiled_nodes = set(compiled.nodes())
    for node in sorted(connected ^ compiled_nodes):
        errors.append(ValidationError(
            error_type="NODE_MISMATCH",
            message=f"Node {node} is enumerated by only one representation",
            node_id=node,
        ))

    return _result(errors, len(mutable_edges | compiled_edges))
