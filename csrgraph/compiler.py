"""Compile a mutable ``DirectedGraph`` into an immutable ``CompiledGraph``.

Two passes over the adjacency sets:

Pass 1: Find max_node_id and the total edge count so the flat arrays can be
        pre-allocated.
Pass 2: Fill parallel source/target arrays, sort them by (source, target)
        with np.lexsort, and derive the offset table with searchsorted over
        every node ID in 0..max_node_id + 1.

Identifiers that were never referenced fall between two equal offsets and
so get a zero-width slot. An empty graph compiles to max_node_id = 0 with
offsets [0, 0] and no destinations.
"""

import logging

import numpy as np

from csrgraph.graph import NODE_DTYPE, OFFSET_DTYPE, CompiledGraph, DirectedGraph


logger = logging.getLogger(__name__)


def compile_graph(graph: DirectedGraph) -> CompiledGraph:
    """Build the CSR snapshot of ``graph``. Never mutates ``graph``."""
    adjacency = graph._adjacency_items()

    # =================================================================
    # Pass 1: bounds
    # =================================================================
    max_node_id = 0
    edge_count = 0
    for node, successors in adjacency:
        max_node_id = max(max_node_id, node)
        edge_count += len(successors)

    # =================================================================
    # Pass 2: flatten, sort, build offsets
    # =================================================================
    src_indices = np.empty(edge_count, dtype=NODE_DTYPE)
    dst_indices = np.empty(edge_count, dtype=NODE_DTYPE)

    pos = 0
    for node, successors in adjacency:
        count = len(successors)
        if count == 0:
            continue
        src_indices[pos:pos + count] = node
        dst_indices[pos:pos + count] = np.fromiter(
            successors, dtype=NODE_DTYPE, count=count
        )
        pos += count

    # Sort by (source, target); lexsort takes the primary key last
    sort_order = np.lexsort((dst_indices, src_indices))
    src_sorted = src_indices[sort_order]
    dst_sorted = dst_indices[sort_order]
    del src_indices, dst_indices, sort_order

    # Python int arithmetic: max_node_id + 2 must not wrap at the top of
    # the uint16 range.
    node_range = np.arange(max_node_id + 2, dtype=OFFSET_DTYPE)
    offsets = np.searchsorted(src_sorted, node_range, side="left").astype(
        OFFSET_DTYPE
    )
    offsets[-1] = edge_count

    compiled = CompiledGraph(offsets, dst_sorted, max_node_id)

    logger.debug(
        "Compiled graph: %d nodes, %d edges, max_node_id=%d, CSR memory %d bytes",
        compiled.node_count(),
        compiled.edge_count(),
        max_node_id,
        compiled.memory_usage(),
    )
    return compiled
