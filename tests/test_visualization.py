"""
Tests for the plotting helpers (Agg backend)
"""

import os
import numpy as np
import matplotlib.pyplot as plt
import pytest

from labeling.visualization import LabelingVisualizer
from labeling.constraints import LabelingConstraints
from labeling.backtracking import BacktrackingSearch, RangeCandidates
from l321_labeling import MinimumSpanL321


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


class TestLayout:

    def test_ring_on_unit_circle(self, triangle):
        positions = LabelingVisualizer.circular_layout(triangle)
        assert positions.shape == (3, 2)
        assert np.allclose(np.linalg.norm(positions, axis=1), 1.0)

    def test_hub_at_origin(self, wheel4):
        positions = LabelingVisualizer.circular_layout(wheel4, hub=0)
        assert np.allclose(positions[0], [0.0, 0.0])
        assert np.allclose(np.linalg.norm(positions[1:], axis=1), 1.0)


class TestPlots:

    def test_labeled_graph(self, wheel4):
        fig = LabelingVisualizer().plot_labeled_graph(
            wheel4, (0, 8, 1, 5, 2), title="W_4", hub=0)
        assert fig.axes[0].get_title() == "W_4"

    def test_predicate_pruning(self, triangle):
        result = BacktrackingSearch(
            3, LabelingConstraints.graceful(triangle), RangeCandidates(4)).run()
        stats = {'triangle': result.predicate_stats,
                 'subsets': [{'name': 'SubsetMembership', 'checks': 6,
                              'prunes': 0, 'prune_rate': 0.0}]}
        fig = LabelingVisualizer().plot_predicate_pruning(stats)
        ax = fig.axes[0]
        # three predicates, one bar each per run
        assert len(ax.patches) == 6
        assert [t.get_text() for t in ax.get_legend().get_texts()] == [
            'DistinctVertexLabels', 'DistinctEdgeLabels', 'SubsetMembership']

    def test_search_performance(self):
        stats = [{'runtime': 0.1, 'solutions_found': 12, 'nodes_visited': 40, 'pruning_rate': 55.0},
                 {'runtime': 0.2, 'solutions_found': 2, 'nodes_visited': 90}]
        fig = LabelingVisualizer().plot_search_performance(stats, ['a', 'b'])
        assert len(fig.axes) == 4

    def test_span_attempts(self, triangle):
        solver = MinimumSpanL321(triangle)
        solver.find()
        fig = LabelingVisualizer().plot_span_attempts(solver.attempts)
        assert len(fig.axes[0].patches) == 2

    def test_save_all_plots(self, tmp_path, path3):
        visualizer = LabelingVisualizer()
        visualizer.plot_labeled_graph(path3, (0, 5, 2))
        visualizer.save_all_plots(str(tmp_path))
        assert os.path.exists(tmp_path / "figure_1.png")
