"""Lazy traversal views over any ``DirectedGraphLike``.

DFS and BFS views are single-pass iterators: each instance owns its own
frontier and visited set and is exhausted after one pass. The topological
view is computed eagerly at construction with Kahn's algorithm.

Views can be built directly or through pipe adapters::

    for node in graph | dfs_view(0):
        ...

    order = graph | topological_view
"""

from collections import deque
from typing import Iterator

from csrgraph.graph import CSRGraphError, DirectedGraphLike


def _successor_ids(graph: DirectedGraphLike, node: int) -> Iterator[int]:
    """Successors as Python ints (a CompiledGraph yields numpy uint16)."""
    return map(int, graph.successors(node))


class CycleError(CSRGraphError, ValueError):
    """Raised when a topological order is requested for a cyclic graph."""

    def __init__(self, nodes):
        self.nodes = list(nodes)
        preview = ", ".join(str(node) for node in self.nodes[:10])
        if len(self.nodes) > 10:
            preview += ", ..."
        super().__init__(
            f"Cycle detected in graph: {len(self.nodes)} node(s) cannot be "
            f"ordered ({preview})"
        )


class DFSView:
    """Depth-first traversal from ``start``.

    Uses an explicit LIFO stack. The first node produced is always
    ``start``; sibling order follows the graph's successor enumeration
    (ascending for a ``CompiledGraph``, set order for a ``DirectedGraph``).
    """

    __slots__ = ("_graph", "_start", "_stack", "_visited")

    def __init__(self, graph: DirectedGraphLike, start: int):
        self._graph = graph
        self._start = int(start)
        self._stack = [self._start]
        self._visited = set()

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        stack = self._stack
        visited = self._visited
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            for successor in _successor_ids(self._graph, node):
                if successor not in visited:
                    stack.append(successor)
            return node
        self._release()
        raise StopIteration

    def _release(self):
        self._stack = []
        self._visited = set()

    def __repr__(self) -> str:
        return f"DFSView(start={self._start})"


class BFSView:
    """Breadth-first traversal from ``start``.

    Nodes are marked visited when enqueued, so each reachable node is
    produced once, in non-decreasing distance from ``start``.
    """

    __slots__ = ("_graph", "_start", "_queue", "_visited")

    def __init__(self, graph: DirectedGraphLike, start: int):
        self._graph = graph
        self._start = int(start)
        self._queue = deque([self._start])
        self._visited = {self._start}

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        queue = self._queue
        if not queue:
            self._visited = set()
            raise StopIteration

        node = queue.popleft()
        visited = self._visited
        for successor in _successor_ids(self._graph, node):
            if successor not in visited:
                visited.add(successor)
                queue.append(successor)
        return node

    def __repr__(self) -> str:
        return f"BFSView(start={self._start})"


class TopologicalView:
    """Topological order of a whole graph, computed once with Kahn's algorithm.

    ``is_valid()`` is True only when every node was ordered, so any cycle
    (self-loops included) makes the view invalid. Nodes on or downstream of
    a cycle are left out of the order and reported by ``remaining()``.
    """

    __slots__ = ("_order", "_remaining")

    def __init__(self, graph: DirectedGraphLike):
        # Calculate in-degree for each node
        indegree: dict[int, int] = {int(node): 0 for node in graph.nodes()}
        for node in indegree:
            for successor in _successor_ids(graph, node):
                indegree[successor] = indegree.get(successor, 0) + 1

        # Start with nodes that have no predecessors (in-degree 0)
        queue = deque(node for node, degree in indegree.items() if degree == 0)
        order: list[int] = []

        while queue:
            node = queue.popleft()
            order.append(node)
            for successor in _successor_ids(graph, node):
                indegree[successor] -= 1
                if indegree[successor] == 0:
                    queue.append(successor)

        self._order = tuple(order)
        self._remaining = tuple(
            sorted(node for node, degree in indegree.items() if degree > 0)
        )

    def is_valid(self) -> bool:
        """True when the order covers every node, i.e. the graph is acyclic."""
        return not self._remaining

    def has_cycle(self) -> bool:
        return bool(self._remaining)

    def remaining(self) -> tuple[int, ...]:
        """Nodes that could not be ordered, ascending."""
        return self._remaining

    def empty(self) -> bool:
        return not self._order

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __getitem__(self, index):
        return self._order[index]

    def __bool__(self) -> bool:
        return bool(self._order)

    def __repr__(self) -> str:
        return f"TopologicalView(nodes={len(self._order)}, valid={self.is_valid()})"


def topological_sort(graph: DirectedGraphLike) -> list[int]:
    """Return a topological order of ``graph`` as a list.

    Raises:
        CycleError: If the graph contains a cycle (including a self-loop).
    """
    view = TopologicalView(graph)
    if view.has_cycle():
        raise CycleError(view.remaining())
    return list(view)


# ----------------------------------------------------------------------
# Pipe adapters: ``graph | dfs_view(0)``
# ----------------------------------------------------------------------


class _StartNodeAdapter:
    """Binds a start node; applied to a graph by call or by ``|``."""

    __slots__ = ("start",)

    view_class = None

    def __init__(self, start: int):
        self.start = start

    def __call__(self, graph: DirectedGraphLike):
        return self.view_class(graph, self.start)

    def __ror__(self, graph: DirectedGraphLike):
        return self(graph)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.start})"


class dfs_view(_StartNodeAdapter):
    """``graph | dfs_view(start)`` -> ``DFSView``."""

    __slots__ = ()
    view_class = DFSView


class bfs_view(_StartNodeAdapter):
    """``graph | bfs_view(start)`` -> ``BFSView``."""

    __slots__ = ()
    view_class = BFSView


class _TopologicalAdapter:
    __slots__ = ()

    def __call__(self, graph: DirectedGraphLike) -> TopologicalView:
        return TopologicalView(graph)

    def __ror__(self, graph: DirectedGraphLike) -> TopologicalView:
        return TopologicalView(graph)

    def __repr__(self) -> str:
        return "topological_view"


topological_view = _TopologicalAdapter()
