"""Directed graph representations: mutable adjacency sets and compiled CSR."""

from collections.abc import Set
from typing import Iterable, Iterator, NamedTuple, Protocol, runtime_checkable

import numpy as np


NODE_DTYPE = np.uint16
OFFSET_DTYPE = np.int64
MAX_NODE_ID = int(np.iinfo(NODE_DTYPE).max)

_EMPTY_SUCCESSORS = np.empty(0, dtype=NODE_DTYPE)
_EMPTY_SUCCESSORS.flags.writeable = False


class CSRGraphError(Exception):
    """Base class for errors raised by csrgraph."""


class InvalidNodeError(CSRGraphError, ValueError):
    """A node identifier outside ``0 .. MAX_NODE_ID``."""


class Edge(NamedTuple):
    source: int
    target: int


@runtime_checkable
class DirectedGraphLike(Protocol):
    """Anything traversal views and the DOT writer can read.

    Implementations only need to enumerate nodes, enumerate the successors
    of a node (finite, any order) and answer edge membership. No base class
    is involved: ``DirectedGraph`` and ``CompiledGraph`` satisfy this
    structurally.
    """

    def successors(self, node: int) -> Iterable[int]: ...

    def nodes(self) -> Iterable[int]: ...

    def has_edge(self, source: int, target: int) -> bool: ...


def _is_node_id(node) -> bool:
    """True for integers (Python or numpy) inside the node ID range."""
    if isinstance(node, bool) or not isinstance(node, (int, np.integer)):
        return False
    return 0 <= node <= MAX_NODE_ID


def _check_node_id(node):
    if not _is_node_id(node):
        raise InvalidNodeError(
            f"Node ID must be an integer in 0..{MAX_NODE_ID}, got {node!r}"
        )
    return int(node)


class SuccessorView(Set):
    """Read-only live view over one node's successor set.

    Reflects later edits to the graph without copying the set.
    """

    __slots__ = ("_successors",)

    def __init__(self, successors):
        self._successors = successors

    @classmethod
    def _from_iterable(cls, iterable):
        # Set operators (&, |, -) return plain frozensets
        return frozenset(iterable)

    def __contains__(self, node) -> bool:
        return node in self._successors

    def __iter__(self) -> Iterator[int]:
        return iter(self._successors)

    def __len__(self) -> int:
        return len(self._successors)

    def __repr__(self) -> str:
        return f"SuccessorView({sorted(self._successors)})"


_NO_SUCCESSORS = SuccessorView(frozenset())


class DirectedGraph:
    """Mutable adjacency-set graph for incremental construction.

    Every node that appears as an edge target is also a key of the
    adjacency mapping (possibly with an empty successor set), so node
    enumeration is complete and degree queries never fail for known nodes.
    Removing edges never removes nodes.
    """

    __slots__ = ("_adjacency",)

    def __init__(self):
        self._adjacency: dict[int, set[int]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]]) -> "DirectedGraph":
        """Build a graph from ``(source, target)`` pairs."""
        graph = cls()
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    def add_edge(self, source: int, target: int) -> None:
        source = _check_node_id(source)
        target = _check_node_id(target)
        self._adjacency.setdefault(source, set()).add(target)
        # Target must exist as a node even without outgoing edges
        self._adjacency.setdefault(target, set())

    def remove_edge(self, source: int, target: int) -> None:
        successors = self._adjacency.get(source)
        if successors is not None:
            successors.discard(target)

    def has_edge(self, source: int, target: int) -> bool:
        successors = self._adjacency.get(source)
        return successors is not None and target in successors

    def successors(self, node: int) -> SuccessorView:
        """Read-only view of ``node``'s successors in set order.

        Empty for unknown nodes.
        """
        successors = self._adjacency.get(node)
        if successors is None:
            return _NO_SUCCESSORS
        return SuccessorView(successors)

    def nodes(self):
        """Live read-only view of all known node IDs, unspecified order."""
        return self._adjacency.keys()

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(successors) for successors in self._adjacency.values())

    def compile(self) -> "CompiledGraph":
        """Snapshot this graph into an immutable ``CompiledGraph``."""
        from csrgraph.compiler import compile_graph

        return compile_graph(self)

    def copy(self) -> "DirectedGraph":
        graph = DirectedGraph()
        graph._adjacency = {
            node: set(successors) for node, successors in self._adjacency.items()
        }
        return graph

    def _adjacency_items(self):
        """(node, successor set) pairs for the compiler. Do not mutate."""
        return self._adjacency.items()

    def __contains__(self, node) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"DirectedGraph(nodes={self.node_count()}, edges={self.edge_count()})"
        )


class CompiledGraph:
    """
    Immutable Compressed Sparse Row graph for fast successor lookups.

    Layout:
    - offsets: int64 array of length max_node_id + 2. Node n's successors
      live at destinations[offsets[n]:offsets[n + 1]].
    - destinations: uint16 array, sorted ascending and duplicate-free
      within each node's slice.

    Identifiers below max_node_id that were never referenced get a
    zero-width slot. Build instances with ``DirectedGraph.compile()`` or
    ``csrgraph.compiler.compile_graph``.
    """

    __slots__ = ("_offsets", "_destinations", "_max_node_id", "_present")

    def __init__(self, offsets, destinations, max_node_id: int):
        """
        Args:
            offsets: Offset table, length max_node_id + 2
            destinations: Flat successor array, length offsets[-1]
            max_node_id: Largest node ID covered by the offset table
        """
        self._max_node_id = int(max_node_id)
        self._offsets = np.array(offsets, dtype=OFFSET_DTYPE)
        self._destinations = np.array(destinations, dtype=NODE_DTYPE)
        self._offsets.flags.writeable = False
        self._destinations.flags.writeable = False

        # Present = has outgoing edges or is somebody's destination.
        # Tolerates malformed arrays so validation can report on them.
        present = np.zeros(self._max_node_id + 1, dtype=bool)
        has_edges = np.diff(self._offsets[: self._max_node_id + 2]) > 0
        present[: len(has_edges)] = has_edges
        present[self._destinations[self._destinations <= self._max_node_id]] = True
        present.flags.writeable = False
        self._present = present

    @property
    def offsets(self) -> np.ndarray:
        return self._offsets

    @property
    def destinations(self) -> np.ndarray:
        return self._destinations

    @property
    def max_node_id(self) -> int:
        return self._max_node_id

    # ------------------------------------------------------------------
    # Successor queries
    # ------------------------------------------------------------------

    def successors(self, node: int) -> np.ndarray:
        """Sorted successors of ``node`` as a read-only slice.

        Returns an empty array for any node outside ``0 .. max_node_id``.
        """
        if not _is_node_id(node) or node > self._max_node_id:
            return _EMPTY_SUCCESSORS
        # uint16 scalars would wrap on node + 1 at the top of the range
        node = int(node)
        start = self._offsets[node]
        end = self._offsets[node + 1]
        return self._destinations[start:end]

    def has_edge(self, source: int, target: int) -> bool:
        """Binary search within the source node's slice."""
        if not _is_node_id(target):
            return False
        succ = self.successors(source)
        idx = int(np.searchsorted(succ, target, side="left"))
        return idx < len(succ) and int(succ[idx]) == int(target)

    def out_degree(self, node: int) -> int:
        return len(self.successors(node))

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def nodes(self) -> Iterator[int]:
        """Lazily yield node IDs in ascending order.

        A node is enumerated when it has outgoing edges or appears as the
        destination of some edge.
        """
        for node in np.flatnonzero(self._present):
            yield int(node)

    def edges(self) -> Iterator[Edge]:
        """Lazily yield every edge, ascending by source then target."""
        offsets = self._offsets
        destinations = self._destinations
        for source in range(self._max_node_id + 1):
            for pos in range(int(offsets[source]), int(offsets[source + 1])):
                yield Edge(source, int(destinations[pos]))

    def node_count(self) -> int:
        return int(np.count_nonzero(self._present))

    def edge_count(self) -> int:
        return len(self._destinations)

    def memory_usage(self) -> int:
        """Bytes held by the CSR arrays."""
        return self._offsets.nbytes + self._destinations.nbytes

    def __contains__(self, node) -> bool:
        return (
            _is_node_id(node)
            and node <= self._max_node_id
            and bool(self._present[node])
        )

    def __len__(self) -> int:
        return self.node_count()

    def __eq__(self, other):
        if not isinstance(other, CompiledGraph):
            return NotImplemented
        return (
            self._max_node_id == other._max_node_id
            and np.array_equal(self._offsets, other._offsets)
            and np.array_equal(self._destinations, other._destinations)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"CompiledGraph(nodes={self.node_count()}, edges={self.edge_count()}, "
            f"max_node_id={self._max_node_id})"
        )
