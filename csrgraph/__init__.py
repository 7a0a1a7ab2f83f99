"""
csrgraph - Mutable and compiled (CSR) directed graphs with lazy traversals
"""

__version__ = "0.1.0"

from csrgraph.compiler import compile_graph
from csrgraph.graph import (
    MAX_NODE_ID,
    CompiledGraph,
    CSRGraphError,
    DirectedGraph,
    DirectedGraphLike,
    Edge,
    InvalidNodeError,
    SuccessorView,
)
from csrgraph.graphviz import to_dot, write_dot
from csrgraph.loader import EdgeListError, read_edge_list
from csrgraph.validation import (
    ValidationError,
    ValidationResult,
    validate_compiled_graph,
    validate_equivalent,
    validate_topological_order,
)
from csrgraph.views import (
    BFSView,
    CycleError,
    DFSView,
    TopologicalView,
    bfs_view,
    dfs_view,
    topological_sort,
    topological_view,
)

__all__ = [
    # Core classes
    "DirectedGraph",
    "CompiledGraph",
    "DirectedGraphLike",
    "Edge",
    "SuccessorView",
    "MAX_NODE_ID",
    # Compilation
    "compile_graph",
    # Traversal
    "DFSView",
    "BFSView",
    "TopologicalView",
    "dfs_view",
    "bfs_view",
    "topological_view",
    "topological_sort",
    # Export
    "to_dot",
    "write_dot",
    # Loading
    "read_edge_list",
    # Validation
    "ValidationError",
    "ValidationResult",
    "validate_compiled_graph",
    "validate_topological_order",
    "validate_equivalent",
    # Errors
    "CSRGraphError",
    "InvalidNodeError",
    "CycleError",
    "EdgeListError",
]
