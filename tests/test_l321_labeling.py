"""
Tests for L(3,2,1)-labelings and the minimum-span search
"""

import sys
import pytest

import l321_labeling
from l321_labeling import L321Labeler, MinimumSpanL321, is_l321_labeling
from labeling.graph_loader import Graph


@pytest.fixture
def path2():
    return Graph.build_from_edges([(0, 1)])


class TestIsL321Labeling:

    def test_valid(self, path3):
        assert is_l321_labeling(path3, (0, 5, 2))

    def test_distance_two_too_close(self, path3):
        assert not is_l321_labeling(path3, (0, 5, 1))

    def test_adjacent_too_close(self, path3):
        assert not is_l321_labeling(path3, (0, 2, 5))

    def test_negative_label(self, path2):
        assert not is_l321_labeling(path2, (-3, 0))


class TestL321Labeler:

    def test_path2_exhaustive(self, path2):
        assert L321Labeler(path2, 3).enumerate() == [(0, 3), (3, 0)]

    def test_bound_too_small(self, path2):
        labeler = L321Labeler(path2, 2)
        assert labeler.enumerate() == []
        assert labeler.find_first() is None

    def test_results_valid(self, loader):
        graph = loader.load_sample('cycle4')
        labelings = L321Labeler(graph, 9).enumerate()
        assert labelings
        assert all(is_l321_labeling(graph, l) for l in labelings)

    def test_negative_max_label_rejected(self, path2):
        with pytest.raises(ValueError):
            L321Labeler(path2, -1)

    def test_print_all(self, path2, capsys):
        assert L321Labeler(path2, 3).print_all() == 2
        assert capsys.readouterr().out.splitlines() == ["[0,3]", "[3,0]"]


class TestMinimumSpan:

    @pytest.mark.parametrize("edges, span, labeling, bounds", [
        ([(0, 1), (1, 2)], 5, (0, 5, 2), [5]),
        ([(0, 1), (1, 2), (2, 0)], 6, (0, 3, 6), [5, 6]),
        ([(0, 1), (0, 2), (0, 3)], 7, (0, 3, 5, 7), [7]),
    ])
    def test_small_graphs(self, edges, span, labeling, bounds):
        solver = MinimumSpanL321(Graph.build_from_edges(edges))
        assert solver.find() == labeling
        assert solver.span == span
        assert [a['max_label'] for a in solver.attempts] == bounds
        assert [a['found'] for a in solver.attempts] == [False] * (len(bounds) - 1) + [True]
        assert solver.stats['bounds_tried'] == len(bounds)

    def test_initial_bound(self, star3):
        assert MinimumSpanL321(star3).initial_bound() == 7

    def test_span_is_minimal(self, loader):
        graph = loader.load_sample('k4')
        solver = MinimumSpanL321(graph)
        labeling = solver.find()

        assert max(labeling) == solver.span
        assert is_l321_labeling(graph, labeling)
        assert L321Labeler(graph, solver.span - 1).find_first() is None

    def test_limit_reached(self, triangle):
        solver = MinimumSpanL321(triangle, max_label_limit=5)
        assert solver.find() is None
        assert solver.span is None
        assert solver.attempts == [{'max_label': 5, 'found': False,
                                    'nodes_visited': solver.stats['nodes_visited']}]

    def test_nodes_accumulate(self, triangle):
        solver = MinimumSpanL321(triangle)
        solver.find()
        assert solver.stats['nodes_visited'] == sum(a['nodes_visited'] for a in solver.attempts)

    def test_repeated_find_resets_stats(self, triangle):
        solver = MinimumSpanL321(triangle)
        solver.find()
        first = dict(solver.stats)
        solver.find()

        assert solver.stats['nodes_visited'] == first['nodes_visited']
        assert solver.stats['nodes_visited'] == sum(a['nodes_visited'] for a in solver.attempts)
        assert solver.stats['bounds_tried'] == 2

    def test_verbose(self, triangle, capsys):
        MinimumSpanL321(triangle, verbose=True).find()
        out = capsys.readouterr().out
        assert "Initial bound: 5" in out
        assert "✗ max label 5" in out
        assert "✓ max label 6: [0,3,6]" in out


class TestMain:

    def test_minimum_span(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n1 2\n")
        monkeypatch.setattr(sys, "argv", ["l321_labeling.py", str(path)])

        l321_labeling.main()
        assert capsys.readouterr().out.splitlines() == ["[0,5,2]", "span = 5"]

    def test_exhaustive(self, tmp_path, capsys, monkeypatch):
        path = tmp_path / "edges.txt"
        path.write_text("0 1\n")
        monkeypatch.setattr(sys, "argv", ["l321_labeling.py", str(path), "--max-label", "3"])

        l321_labeling.main()
        assert capsys.readouterr().out.splitlines() == ["[0,3]", "[3,0]", "total = 2 labelings"]
