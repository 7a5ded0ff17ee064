"""
Tests for graceful labelings of arbitrary graphs
"""

import sys

import graceful_labeling
from graceful_labeling import GracefulLabeler, is_graceful
from labeling.graph_loader import Graph


TRIANGLE_LABELINGS = [
    (0, 1, 3), (0, 2, 3), (0, 3, 1), (0, 3, 2),
    (1, 0, 3), (1, 3, 0), (2, 0, 3), (2, 3, 0),
    (3, 0, 1), (3, 0, 2), (3, 1, 0), (3, 2, 0),
]


class TestIsGraceful:

    def test_valid(self, triangle):
        assert is_graceful(triangle, (0, 1, 3))

    def test_repeated_edge_label(self, triangle):
        assert not is_graceful(triangle, (0, 1, 2))

    def test_repeated_vertex_label(self, path3):
        assert not is_graceful(path3, (0, 2, 0))

    def test_label_out_of_range(self, path3):
        assert not is_graceful(path3, (0, 3, 1))

    def test_wrong_length(self, triangle):
        assert not is_graceful(triangle, (0, 1))


class TestGracefulLabeler:

    def test_triangle_all_in_order(self, triangle):
        assert GracefulLabeler(triangle).enumerate() == TRIANGLE_LABELINGS

    def test_every_result_is_graceful(self, loader):
        for name in ['path4', 'star3', 'cycle4', 'k4']:
            graph = loader.load_sample(name)
            labelings = GracefulLabeler(graph).enumerate()
            assert labelings, name
            assert all(is_graceful(graph, l) for l in labelings)

    def test_single_edge(self):
        graph = Graph.build_from_edges([(0, 1)])
        assert GracefulLabeler(graph).enumerate() == [(0, 1), (1, 0)]

    def test_cycle5_has_none(self, loader):
        labeler = GracefulLabeler(loader.load_sample('cycle5'))
        assert labeler.enumerate() == []
        assert labeler.find_first() is None

    def test_find_first(self, triangle):
        labeler = GracefulLabeler(triangle)
        assert labeler.find_first() == (0, 1, 3)
        assert labeler.stats['solutions_found'] == 1

    def test_print_all(self, triangle, capsys):
        assert GracefulLabeler(triangle).print_all() == 12
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "[0,1,3]"
        assert lines[-1] == "[3,2,0]"


class TestMain:

    def test_main_prints_graph_and_labelings(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n1 2\n2 0\n")
        monkeypatch.setattr(sys, "argv", ["graceful_labeling.py", str(path)])

        graceful_labeling.main()
        out = capsys.readouterr().out
        assert "order of G: 3" in out
        assert "1: 0 2" in out
        assert "[0,1,3]" in out
        assert "[3,2,0]" in out
        assert "Connected:" not in out

    def test_main_verbose_prints_statistics(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n")
        monkeypatch.setattr(sys, "argv", ["graceful_labeling.py", str(path), "--verbose"])

        graceful_labeling.main()
        out = capsys.readouterr().out
        assert "Connected: True" in out
        assert "Labelings found: 2" in out

    def test_main_first_without_labeling(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "edges.txt"
        path.write_text("0 1 1 2 2 3 3 4 4 0")
        monkeypatch.setattr(sys, "argv", ["graceful_labeling.py", str(path), "--first"])

        graceful_labeling.main()
        assert "G has no graceful labeling" in capsys.readouterr().out
