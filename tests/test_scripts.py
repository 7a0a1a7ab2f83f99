"""Tests for the command-line entry points in scripts/."""

import logging
import os

import pytest

import scripts
from scripts import benchmark, export_dot, traverse


FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
EDGES_TXT = os.path.join(FIXTURES_DIR, "edges.txt")


@pytest.fixture
def cyclic_edges(tmp_path):
    path = tmp_path / "cyclic.txt"
    path.write_text("0 1\n1 2\n0 2\n3 3\n", encoding="utf-8")
    return path


@pytest.fixture
def invalid_utf8_edges(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"0 1\n\xff\xfe 2\n")
    return path


class TestConfigureLogging:
    """CSRGRAPH_LOG_LEVEL handling."""

    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            scripts.logging, "basicConfig", lambda **kwargs: calls.append(kwargs)
        )
        return calls

    def test_named_level(self, monkeypatch, basic_config):
        monkeypatch.setattr(scripts, "LOG_LEVEL", "info")
        scripts.configure_logging()
        assert basic_config[0]["level"] == logging.INFO

    def test_unknown_level_falls_back_to_warning(self, monkeypatch, basic_config):
        monkeypatch.setattr(scripts, "LOG_LEVEL", "verbose")
        scripts.configure_logging()
        assert basic_config[0]["level"] == logging.WARNING

    def test_verbose_flag_wins(self, monkeypatch, basic_config):
        monkeypatch.setattr(scripts, "LOG_LEVEL", "verbose")
        scripts.configure_logging(verbose=True)
        assert basic_config[0]["level"] == logging.DEBUG


class TestExportDot:
    """csrgraph-dot."""

    def test_prints_compiled_dot(self, capsys):
        export_dot.main(["--edges", EDGES_TXT, "--name", "diamond"])
        out = capsys.readouterr().out
        assert out == (
            "digraph diamond {\n"
            "    0;\n"
            "    1;\n"
            "    2;\n"
            "    3;\n"
            "    4;\n"
            "    0 -> 1;\n"
            "    0 -> 2;\n"
            "    1 -> 3;\n"
            "    2 -> 3;\n"
            "    3 -> 4;\n"
            "}\n"
        )

    def test_writes_output_file(self, tmp_path, capsys):
        output = tmp_path / "out" / "graph.dot"
        export_dot.main(["--edges", EDGES_TXT, "--output", str(output)])
        assert output.read_text(encoding="utf-8").startswith("digraph G {\n")
        assert "5 nodes and 5 edges" in capsys.readouterr().err

    def test_mutable_export(self, capsys):
        export_dot.main(["--edges", EDGES_TXT, "--mutable"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 12
        assert "    3 -> 4;" in lines

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            export_dot.main(["--edges", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1
        assert "Edge file not found" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("0\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            export_dot.main(["--edges", str(path)])
        assert exc_info.value.code == 1
        assert "Error exporting graph" in capsys.readouterr().err

    def test_invalid_utf8_file(self, invalid_utf8_edges, capsys):
        with pytest.raises(SystemExit) as exc_info:
            export_dot.main(["--edges", str(invalid_utf8_edges)])
        assert exc_info.value.code == 1
        assert ":2:" in capsys.readouterr().err


class TestTraverse:
    """csrgraph-traverse."""

    def test_bfs(self, capsys):
        traverse.main(["--edges", EDGES_TXT, "--order", "bfs", "--start", "0"])
        assert capsys.readouterr().out.split() == ["0", "1", "2", "3", "4"]

    def test_dfs(self, capsys):
        traverse.main(["--edges", EDGES_TXT, "--order", "dfs", "--start", "0"])
        assert capsys.readouterr().out.split() == ["0", "2", "3", "4", "1"]

    def test_topological(self, capsys):
        traverse.main(["--edges", EDGES_TXT, "--order", "topo"])
        assert capsys.readouterr().out.split() == ["0", "1", "2", "3", "4"]

    def test_topological_cycle_exits(self, cyclic_edges, capsys):
        with pytest.raises(SystemExit) as exc_info:
            traverse.main(["--edges", str(cyclic_edges), "--order", "topo"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out.split() == ["0", "1", "2"]
        assert "unordered nodes: 3" in captured.err

    def test_mutable_bfs(self, capsys):
        traverse.main(["--edges", EDGES_TXT, "--order", "bfs", "--mutable"])
        out = capsys.readouterr().out.split()
        assert out[0] == "0"
        assert sorted(out) == ["0", "1", "2", "3", "4"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            traverse.main(["--edges", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1

    def test_invalid_utf8_file(self, invalid_utf8_edges, capsys):
        with pytest.raises(SystemExit) as exc_info:
            traverse.main(["--edges", str(invalid_utf8_edges), "--order", "bfs"])
        assert exc_info.value.code == 1
        assert "Error loading graph" in capsys.readouterr().err


class TestBenchmark:
    """csrgraph-benchmark."""

    def test_ring_graph(self):
        graph = benchmark.ring_graph(8)
        assert graph.node_count() == 8
        assert graph.edge_count() == 8
        assert graph.has_edge(7, 0)

    def test_prints_one_row_per_size(self, capsys):
        benchmark.main(["--min", "8", "--max", "32", "--repeat", "1"])
        lines = capsys.readouterr().out.splitlines()
        # Header, rule, then sizes 8, 16, 32
        assert len(lines) == 5
        assert [line.split()[0] for line in lines[2:]] == ["8", "16", "32"]
