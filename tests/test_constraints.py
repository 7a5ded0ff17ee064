"""
Tests for the safety predicates and their manager
"""

from labeling.state import LabelingState
from labeling.constraints import (
    SubsetMembershipConstraint, DistinctVertexLabelConstraint,
    DistinctEdgeLabelConstraint, DistanceSeparationConstraint,
    ConstraintManager, LabelingConstraints
)


def _state(labels):
    state = LabelingState(len(labels))
    for i, label in enumerate(labels):
        if label is not None:
            state.commit(i, label)
    return state


class TestSimplePredicates:

    def test_subset_membership_never_prunes(self):
        constraint = SubsetMembershipConstraint()
        state = _state([1, None])
        assert constraint.is_safe(1, 1, state)
        assert constraint.is_safe(0, 1, state)
        assert constraint.get_stats()['prunes'] == 0
        assert constraint.get_stats()['checks'] == 2

    def test_distinct_vertex_labels(self):
        constraint = DistinctVertexLabelConstraint()
        state = _state([0, 3, None])
        assert not constraint.is_safe(3, 2, state)
        assert constraint.is_safe(1, 2, state)

        stats = constraint.get_stats()
        assert stats['checks'] == 2
        assert stats['prunes'] == 1
        assert stats['prune_rate'] == 0.5


class TestDistinctEdgeLabels:

    def test_used_difference_rejected(self, triangle):
        constraint = DistinctEdgeLabelConstraint(triangle)
        state = LabelingState(3)
        state.commit(0, 0)
        state.commit(1, 3, induced=[3])

        # 2 - 3 = 1 and 2 - 0 = 2: both new
        assert constraint.is_safe(2, 2, state)
        # 3 - 0 = 3 already used by edge 0-1
        assert not constraint.is_safe(3, 2, state)

    def test_repeated_difference_within_step_rejected(self, path3):
        constraint = DistinctEdgeLabelConstraint(path3)
        state = _state([0, None, 4])
        # vertex 1 between 0 and 4: label 2 makes both differences 2
        assert not constraint.is_safe(2, 1, state)
        assert constraint.is_safe(1, 1, state)

    def test_induced_values_only_for_labeled_neighbors(self, star3):
        constraint = DistinctEdgeLabelConstraint(star3)
        state = _state([None, 1, None, 3])
        assert sorted(constraint.induced_values(0, 0, state)) == [1, 3]
        assert constraint.induced_values(2, 2, state) == []


class TestDistanceSeparation:

    def test_name(self, path3):
        assert DistanceSeparationConstraint(path3).name == "L(3,2,1)"
        assert DistanceSeparationConstraint(path3, (2, 1)).name == "L(2,1)"

    def test_adjacent_needs_three(self, path3):
        constraint = DistanceSeparationConstraint(path3)
        state = _state([0, None, None])
        assert not constraint.is_safe(2, 1, state)
        assert constraint.is_safe(3, 1, state)

    def test_distance_two_needs_two(self, path3):
        constraint = DistanceSeparationConstraint(path3)
        state = _state([0, 5, None])
        assert not constraint.is_safe(1, 2, state)
        assert constraint.is_safe(2, 2, state)

    def test_distance_three_needs_one(self):
        from labeling.graph_loader import Graph
        path4 = Graph.build_from_edges([(0, 1), (1, 2), (2, 3)])
        constraint = DistanceSeparationConstraint(path4)
        state = _state([0, None, None, None])
        assert not constraint.is_safe(0, 3, state)
        assert constraint.is_safe(1, 3, state)

    def test_beyond_distance_three_unconstrained(self):
        from labeling.graph_loader import Graph
        path5 = Graph.build_from_edges([(0, 1), (1, 2), (2, 3), (3, 4)])
        constraint = DistanceSeparationConstraint(path5)
        state = _state([0, None, None, None, None])
        assert constraint.is_safe(0, 4, state)


class TestConstraintManager:

    def test_sorted_by_cost(self, triangle):
        manager = ConstraintManager([
            DistanceSeparationConstraint(triangle),
            DistinctEdgeLabelConstraint(triangle),
            DistinctVertexLabelConstraint(),
        ])
        names = [c.name for c in manager.constraints]
        assert names == ["DistinctVertexLabels", "DistinctEdgeLabels", "L(3,2,1)"]

    def test_short_circuits_on_first_failure(self, triangle):
        vertex, edge = LabelingConstraints.graceful(triangle)
        manager = ConstraintManager([edge, vertex])
        state = _state([1, None, None])

        assert not manager.is_safe(1, 1, state)
        assert vertex.check_count == 1
        assert edge.check_count == 0

    def test_induced_values_collected(self, triangle):
        manager = ConstraintManager(LabelingConstraints.graceful(triangle))
        state = _state([0, 3, None])
        assert sorted(manager.induced_values(1, 2, state)) == [1, 2]

    def test_all_stats(self, triangle):
        manager = ConstraintManager(LabelingConstraints.graceful(triangle))
        stats = manager.get_all_stats()
        assert [s['name'] for s in stats] == ["DistinctVertexLabels", "DistinctEdgeLabels"]
        assert all(s['checks'] == 0 for s in stats)


class TestPresets:

    def test_subsets(self):
        assert [c.name for c in LabelingConstraints.subsets()] == ["SubsetMembership"]

    def test_l321(self, path3):
        (constraint,) = LabelingConstraints.l321(path3)
        assert constraint.separations == (3, 2, 1)
