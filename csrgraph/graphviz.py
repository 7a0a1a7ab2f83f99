"""Graphviz DOT export for any ``DirectedGraphLike``."""

from pathlib import Path
from typing import Union

from csrgraph.graph import DirectedGraphLike


def to_dot(graph: DirectedGraphLike, name: str = "G") -> str:
    """Render ``graph`` as a DOT digraph.

    Node lines follow ``graph.nodes()`` order and edge lines follow
    ``nodes()`` x ``successors()`` order. Nothing is sorted here, so a
    ``DirectedGraph`` exports in set order while a ``CompiledGraph``
    exports ascending.
    """
    lines = [f"digraph {name} {{"]

    for node in graph.nodes():
        lines.append(f"    {node};")

    for source in graph.nodes():
        for target in graph.successors(source):
            lines.append(f"    {source} -> {target};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(graph: DirectedGraphLike, path: Union[str, Path], name: str = "G") -> Path:
    """Write ``to_dot(graph, name)`` to ``path`` and return the path."""
    path = Path(path)
    path.write_text(to_dot(graph, name), encoding="utf-8")
    return path
