"""Unit tests for csrgraph.graphviz DOT export."""

from csrgraph import DirectedGraph, to_dot, write_dot


SCENARIO_DOT = """\
digraph G {
    0;
    1;
    2;
    3;
    0 -> 1;
    0 -> 2;
    1 -> 2;
    3 -> 3;
}
"""


class UnsortedGraph:
    """Graph whose enumeration order is deliberately not ascending."""

    def nodes(self):
        return [2, 0]

    def successors(self, node):
        return {2: [0], 0: [2, 1]}.get(node, [])

    def has_edge(self, source, target):
        return target in self.successors(source)


class TestToDot:
    """Format contract of the DOT writer."""

    def test_scenario_compiled(self, compiled):
        assert to_dot(compiled) == SCENARIO_DOT

    def test_graph_name(self, compiled):
        dot = to_dot(compiled, "deps")
        assert dot.startswith("digraph deps {\n")
        assert dot.endswith("}\n")

    def test_mutable_graph_same_lines(self, graph, compiled):
        """Same lines as the compiled export, possibly in another order."""
        mutable_lines = to_dot(graph).splitlines()
        compiled_lines = to_dot(compiled).splitlines()
        assert mutable_lines[0] == compiled_lines[0]
        assert mutable_lines[-1] == "}"
        assert sorted(mutable_lines) == sorted(compiled_lines)

    def test_node_lines_precede_edge_lines(self, graph):
        lines = to_dot(graph).splitlines()[1:-1]
        assert all("->" not in line for line in lines[:4])
        assert all("->" in line for line in lines[4:])

    def test_empty_graph(self):
        assert to_dot(DirectedGraph()) == "digraph G {\n}\n"
        assert to_dot(DirectedGraph().compile()) == "digraph G {\n}\n"

    def test_writer_does_not_sort(self):
        assert to_dot(UnsortedGraph()) == (
            "digraph G {\n"
            "    2;\n"
            "    0;\n"
            "    2 -> 0;\n"
            "    0 -> 2;\n"
            "    0 -> 1;\n"
            "}\n"
        )

    def test_after_remove_edge(self, graph):
        graph.remove_edge(0, 2)
        dot = to_dot(graph.compile())
        assert "    0 -> 2;\n" not in dot
        assert "    2;\n" in dot


class TestWriteDot:
    """Writing DOT text to a file."""

    def test_writes_file(self, compiled, tmp_path):
        path = write_dot(compiled, tmp_path / "graph.dot")
        assert path == tmp_path / "graph.dot"
        assert path.read_text(encoding="utf-8") == SCENARIO_DOT

    def test_accepts_str_path(self, compiled, tmp_path):
        target = str(tmp_path / "named.dot")
        write_dot(compiled, target, name="named")
        with open(target, encoding="utf-8") as f:
            assert f.readline() == "digraph named {\n"
