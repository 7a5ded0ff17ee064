"""
Safety predicates for labeling searches
Each predicate decides whether a candidate label may be placed on a slot
"""

from typing import List, Sequence
from abc import ABC, abstractmethod

try:
    from .graph_loader import Graph
    from .state import LabelingState
except ImportError:
    from graph_loader import Graph
    from state import LabelingState


class LabelConstraint(ABC):
    """Base class for all safety predicates"""

    def __init__(self, name: str):
        self.name = name
        self.check_count = 0
        self.prune_count = 0

    @abstractmethod
    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        """Check if label may be committed at slot index"""
        pass

    def induced_values(self, label: int, index: int, state: LabelingState) -> List[int]:
        """Values realized by committing label at index (kept in state.used_values)"""
        return []

    def reset_stats(self):
        self.check_count = 0
        self.prune_count = 0

    def _record(self, result: bool) -> bool:
        self.check_count += 1
        if not result:
            self.prune_count += 1
        return result

    def get_stats(self):
        return {
            'name': self.name,
            'checks': self.check_count,
            'prunes': self.prune_count,
            'prune_rate': self.prune_count / max(self.check_count, 1)
        }


class SubsetMembershipConstraint(LabelConstraint):
    """Included/excluded choice per element: nothing to prune"""

    def __init__(self):
        super().__init__("SubsetMembership")

    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        return self._record(True)


class DistinctVertexLabelConstraint(LabelConstraint):
    """A label may appear on at most one slot"""

    def __init__(self):
        super().__init__("DistinctVertexLabels")

    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        return self._record(label not in state.labels)


class DistinctEdgeLabelConstraint(LabelConstraint):
    """
    Graceful edge condition: every edge joining the new vertex to an
    already-labeled neighbor must induce a difference that is neither
    in use nor repeated among those new edges
    """

    def __init__(self, graph: Graph):
        super().__init__("DistinctEdgeLabels")
        self.graph = graph

    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        new_values = set()
        for neighbor in self.graph.neighbors(index):
            if not state.is_set(neighbor):
                continue
            value = abs(label - state[neighbor])
            if value in state.used_values or value in new_values:
                return self._record(False)
            new_values.add(value)
        return self._record(True)

    def induced_values(self, label: int, index: int, state: LabelingState) -> List[int]:
        return [abs(label - state[neighbor])
                for neighbor in self.graph.neighbors(index)
                if state.is_set(neighbor)]


class DistanceSeparationConstraint(LabelConstraint):
    """
    L(h1,...,hk) condition: a labeled vertex reached by a walk of length d
    from the new vertex must differ from the candidate by at least h_d

    Walks are followed, not shortest paths, so a vertex reached at several
    lengths is checked against each of them; the strictest one decides.
    """

    def __init__(self, graph: Graph, separations: Sequence[int] = (3, 2, 1)):
        name = "L(" + ",".join(str(s) for s in separations) + ")"
        super().__init__(name)
        self.graph = graph
        self.separations = tuple(separations)

    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        return self._record(self._respects(label, index, state, 0))

    def _respects(self, label: int, vertex: int, state: LabelingState, hop: int) -> bool:
        if hop == len(self.separations):
            return True

        gap = self.separations[hop]
        for w in self.graph.neighbors(vertex):
            if state.is_set(w) and abs(label - state[w]) < gap:
                return False
            if not self._respects(label, w, state, hop + 1):
                return False
        return True


class ConstraintManager:
    """Runs a list of predicates in order of estimated cost"""

    def __init__(self, constraints: List[LabelConstraint]):
        self.constraints = sorted(constraints, key=self._estimate_cost)

    def _estimate_cost(self, constraint: LabelConstraint) -> int:
        """Estimate computational cost"""
        cost_map = {
            'SubsetMembership': 0,
            'DistinctVertexLabels': 1,
            'DistinctEdgeLabels': 2,
            'L(': 10
        }

        for key in cost_map:
            if constraint.name.startswith(key):
                return cost_map[key]
        return 100

    def is_safe(self, label: int, index: int, state: LabelingState) -> bool:
        for constraint in self.constraints:
            if not constraint.is_safe(label, index, state):
                return False
        return True

    def induced_values(self, label: int, index: int, state: LabelingState) -> List[int]:
        values = []
        for constraint in self.constraints:
            values.extend(constraint.induced_values(label, index, state))
        return values

    def reset_stats(self):
        for constraint in self.constraints:
            constraint.reset_stats()

    def get_all_stats(self):
        return [c.get_stats() for c in self.constraints]


class LabelingConstraints:
    """Predefined predicate sets for each labeling problem"""

    @staticmethod
    def subsets() -> List[LabelConstraint]:
        return [SubsetMembershipConstraint()]

    @staticmethod
    def graceful(graph: Graph) -> List[LabelConstraint]:
        return [
            DistinctVertexLabelConstraint(),
            DistinctEdgeLabelConstraint(graph)
        ]

    @staticmethod
    def l321(graph: Graph) -> List[LabelConstraint]:
        return [DistanceSeparationConstraint(graph, (3, 2, 1))]
